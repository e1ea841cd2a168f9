"""Animation description strings: ``"<length> <ms|s> [easing [x1 y1 x2 y2]]"``.

Accepted forms::

    300                          legacy, 300 ms with circle easing
    300ms                        circle easing
    0.5 s sigmoid
    250ms cubic-bezier 0.25 0.1 0.25 1

Descriptions always serialize back in milliseconds, so ``"1s linear"``
becomes ``"1000ms linear"``.
"""
from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass

from tick_animation.bezier import get_cubic_bezier
from tick_animation.easing import EASINGS, NamedEasing, SmoothFunction

DEFAULT_EASING = "circle"
CUBIC_BEZIER = "cubic-bezier"

_NUMBER = r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
_NUMBER_RE = re.compile(_NUMBER)
_LEGACY_RE = re.compile(r"\s*[0-9]+\s*")
_HEAD_RE = re.compile(rf"\s*({_NUMBER})\s*(\S+)")
_BEZIER_DEFAULTS = (0.0, 0.0, 1.0, 1.0)


@dataclass(frozen=True, eq=False)
class AnimationDescription:
    """Length and easing of an animation, as configured by the user.

    Equality is structural but tolerant: identical easing names compare by
    length alone, and two cubic-bezier easings compare their control points
    within floating-point epsilon.
    """

    length_ms: int
    easing_name: str
    easing: SmoothFunction

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnimationDescription):
            return NotImplemented
        if self.easing_name == other.easing_name:
            return self.length_ms == other.length_ms

        tokens_a = self.easing_name.split()
        tokens_b = other.easing_name.split()
        if tokens_a[:1] != [CUBIC_BEZIER] or tokens_b[:1] != [CUBIC_BEZIER]:
            return False
        if self.length_ms != other.length_ms:
            return False

        x1_a, y1_a, x2_a, y2_a = _read_control_points(tokens_a[1:])
        x1_b, y1_b, x2_b, y2_b = _read_control_points(tokens_b[1:])
        # y2 is checked against itself, so it never decides equality.
        return (
            _epsilon_equal(x1_a, x1_b)
            and _epsilon_equal(y1_a, y1_b)
            and _epsilon_equal(x2_a, x2_b)
            and _epsilon_equal(y2_a, y2_a)
        )

    def __hash__(self) -> int:
        return hash(self.length_ms)

    def __str__(self) -> str:
        return description_to_string(self)


def _epsilon_equal(a: float, b: float) -> bool:
    return abs(a - b) <= sys.float_info.epsilon * abs(a + b)


def _read_control_points(tokens: list[str]) -> tuple[float, float, float, float]:
    """Consume up to four leading numeric tokens, filling the rest with defaults.

    Consumed tokens are removed from ``tokens``.
    """
    points = list(_BEZIER_DEFAULTS)
    for i in range(len(points)):
        if not tokens or not _NUMBER_RE.fullmatch(tokens[0]):
            break
        points[i] = float(tokens.pop(0))
    x1, y1, x2, y2 = points
    return x1, y1, x2, y2


def parse_description(text: str) -> AnimationDescription | None:
    """Parse a description string. Returns None if it is malformed."""
    if _LEGACY_RE.fullmatch(text):
        return AnimationDescription(
            length_ms=int(text),
            easing_name=DEFAULT_EASING,
            easing=NamedEasing(DEFAULT_EASING),
        )

    head = _HEAD_RE.match(text)
    if head is None:
        return None
    number, unit = head.groups()
    if unit not in ("ms", "s"):
        return None

    tokens = text[head.end():].split()
    easing_name = tokens.pop(0) if tokens else DEFAULT_EASING
    easing: SmoothFunction
    if easing_name in EASINGS:
        easing = NamedEasing(easing_name)
    elif easing_name == CUBIC_BEZIER:
        bezier = get_cubic_bezier(*_read_control_points(tokens))
        easing = bezier
        easing_name = bezier.name
    else:
        return None

    if tokens:
        # Trailing data
        return None

    length = float(number)
    if unit == "s":
        length *= 1000
    if not math.isfinite(length) or length < 0:
        return None

    return AnimationDescription(
        length_ms=int(length), easing_name=easing_name, easing=easing
    )


def description_to_string(description: AnimationDescription) -> str:
    return f"{description.length_ms}ms {description.easing_name}"
