"""Live configuration options read by durations.

Options are shared by reference. Whoever owns the configuration may change
an option at any time; durations call ``get_value()`` on every use and pick
up the new value immediately.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, Generic, TypeVar

from tick_animation.description import AnimationDescription, parse_description

logger = logging.getLogger(__name__)

T = TypeVar("T")

_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_int(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


class Option(Generic[T]):
    """A named configuration value with a string parser."""

    def __init__(
        self, name: str, default: T, parser: Callable[[str], T | None]
    ) -> None:
        self._name = name
        self._default = default
        self._value = default
        self._parser = parser

    @property
    def name(self) -> str:
        return self._name

    @property
    def default_value(self) -> T:
        return self._default

    def get_value(self) -> T:
        return self._value

    def set_value(self, value: T) -> None:
        self._value = value

    def set_value_str(self, text: str) -> bool:
        """Parse and store text. Keeps the current value if parsing fails."""
        value = self._parser(text)
        if value is None:
            logger.warning("Invalid value %r for option %s", text, self._name)
            return False
        self._value = value
        return True

    def reset_to_default(self) -> None:
        self._value = self._default

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, {self._value!r})"


class IntOption(Option[int]):
    def __init__(self, name: str, default: int) -> None:
        super().__init__(name, default, parse_int)


class DescriptionOption(Option[AnimationDescription]):
    def __init__(self, name: str, default: AnimationDescription | str) -> None:
        if isinstance(default, str):
            parsed = parse_description(default)
            if parsed is None:
                raise ValueError(
                    f"Invalid default {default!r} for option {name}"
                )
            default = parsed
        super().__init__(name, default, parse_description)
