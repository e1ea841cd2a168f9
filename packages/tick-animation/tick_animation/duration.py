"""Duration - time tracking and eased progress for a single animation."""
from __future__ import annotations

import copy
import enum
import logging
from typing import TYPE_CHECKING

from tick_animation.clock import Clock, monotonic_ms
from tick_animation.easing import NamedEasing, SmoothFunction, smooth

if TYPE_CHECKING:
    from tick_animation.description import AnimationDescription
    from tick_animation.options import Option

logger = logging.getLogger(__name__)


class DurationState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


class Duration:
    """Tracks elapsed time against a configured length.

    The length comes from exactly one live option: either a plain millisecond
    option used together with ``smoothing``, or a description option that
    carries both the length and the easing. Options are re-read on every call,
    so reconfiguring mid-animation takes effect on the next query.

    ``running()`` reports True once more on the first call after the length
    has elapsed, which lets a polling loop detect the tick an animation
    finished on.
    """

    def __init__(
        self,
        length: Option[int] | None = None,
        smoothing: SmoothFunction = NamedEasing("circle"),
        *,
        description: Option[AnimationDescription] | None = None,
        clock: Clock | None = None,
    ) -> None:
        if length is not None and description is not None:
            raise ValueError("length and description are mutually exclusive")
        self._length = length
        self._description = description
        self._smoothing = smoothing
        self._clock: Clock = clock if clock is not None else monotonic_ms
        self._start_ms: int | None = None
        self._is_running = False
        self._reverse = False

    @classmethod
    def from_description(
        cls, description: Option[AnimationDescription], *, clock: Clock | None = None
    ) -> Duration:
        return cls(description=description, clock=clock)

    @property
    def length_ms(self) -> int:
        if self._description is not None:
            return max(1, self._description.get_value().length_ms)
        if self._length is not None:
            return max(1, self._length.get_value())
        logger.debug("Querying a Duration that has no length configured")
        return 1

    @property
    def elapsed_ms(self) -> int | None:
        if self._start_ms is None:
            return None
        return self._clock() - self._start_ms

    @property
    def easing(self) -> SmoothFunction:
        if self._description is not None:
            return self._description.get_value().easing
        return self._smoothing

    def _finished(self) -> bool:
        elapsed = self.elapsed_ms
        return elapsed is None or elapsed >= self.length_ms

    @property
    def state(self) -> DurationState:
        if not self._finished():
            return DurationState.RUNNING
        if self._is_running:
            return DurationState.COMPLETED
        return DurationState.IDLE

    def start(self) -> None:
        self._is_running = True
        self._start_ms = self._clock()

    def progress_percentage(self) -> float:
        """Elapsed fraction of the length, before easing."""
        if self._length is None and self._description is None:
            return 1.0
        elapsed = self.elapsed_ms
        length = self.length_ms
        if elapsed is None or elapsed >= length:
            return 0.0 if self._reverse else 1.0
        pct = elapsed / length
        if self._reverse:
            pct = 1.0 - pct
        return max(0.0, min(1.0, pct))

    def progress(self) -> float:
        if self._finished():
            return smooth(self.easing, 0.0 if self._reverse else 1.0)
        return smooth(self.easing, self.progress_percentage())

    def consume_completion(self) -> bool:
        """Move COMPLETED to IDLE. Returns True if the transition happened."""
        if self.state is not DurationState.COMPLETED:
            return False
        self._is_running = False
        return True

    def running(self) -> bool:
        if not self._finished():
            return True
        return self.consume_completion()

    def reverse(self) -> None:
        total = self.length_ms
        elapsed = self.elapsed_ms
        elapsed = total if elapsed is None else min(elapsed, total)
        self._start_ms = self._clock() - (total - elapsed)
        self._reverse = not self._reverse

    def get_direction(self) -> int:
        """1 when running forward, 0 when reversed."""
        return 0 if self._reverse else 1

    def clone(self) -> Duration:
        """Copy the timing state. The clone shares this duration's options."""
        return copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"Duration(state={self.state.value}, length_ms={self.length_ms}, "
            f"direction={self.get_direction()})"
        )
