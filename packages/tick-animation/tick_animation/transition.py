"""Timed transitions between two values, and the single-property animation."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_animation.clock import Clock
from tick_animation.duration import Duration, DurationState
from tick_animation.easing import NamedEasing, SmoothFunction

if TYPE_CHECKING:
    from tick_animation.description import AnimationDescription
    from tick_animation.options import Option


class TimedTransition:
    """Interpolates from ``start`` to ``end`` by a shared duration's progress.

    Several transitions may reference the same Duration to animate multiple
    properties in lock-step. The value is recomputed from
    ``duration.progress()`` on every access.
    """

    def __init__(self, duration: Duration, start: float = 0.0, end: float = 0.0) -> None:
        self.duration = duration
        self.start = start
        self.end = end

    @property
    def value(self) -> float:
        return self.start + self.duration.progress() * (self.end - self.start)

    def __float__(self) -> float:
        return self.value

    def set(self, start: float, end: float) -> None:
        self.start = start
        self.end = end

    def restart_with_end(self, new_end: float) -> None:
        """Continue from the current value toward a new target."""
        self.start = self.value
        self.end = new_end

    def restart_same_end(self) -> None:
        """Continue from the current value toward the same target."""
        self.start = self.value

    def flip(self) -> None:
        self.start, self.end = self.end, self.start

    def __repr__(self) -> str:
        return f"TimedTransition(start={self.start}, end={self.end})"


class SimpleAnimation:
    """A Duration and one TimedTransition bound to it, owned together."""

    def __init__(
        self,
        length: Option[int] | None = None,
        smoothing: SmoothFunction = NamedEasing("circle"),
        *,
        description: Option[AnimationDescription] | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.duration = Duration(
            length, smoothing, description=description, clock=clock
        )
        self.transition = TimedTransition(self.duration)

    @classmethod
    def from_description(
        cls, description: Option[AnimationDescription], *, clock: Clock | None = None
    ) -> SimpleAnimation:
        return cls(description=description, clock=clock)

    def animate(self, *values: float) -> None:
        """``animate()``, ``animate(end)`` or ``animate(start, end)``; then start."""
        if len(values) == 2:
            self.transition.set(values[0], values[1])
        elif len(values) == 1:
            self.transition.restart_with_end(values[0])
        elif not values:
            self.transition.restart_same_end()
        else:
            raise TypeError(
                f"animate() takes at most 2 values ({len(values)} given)"
            )
        self.duration.start()

    # -- Duration --

    def start(self) -> None:
        self.duration.start()

    def progress(self) -> float:
        return self.duration.progress()

    def running(self) -> bool:
        return self.duration.running()

    def reverse(self) -> None:
        self.duration.reverse()

    def get_direction(self) -> int:
        return self.duration.get_direction()

    @property
    def state(self) -> DurationState:
        return self.duration.state

    # -- Transition --

    @property
    def value(self) -> float:
        return self.transition.value

    def __float__(self) -> float:
        return self.transition.value

    @property
    def start_value(self) -> float:
        return self.transition.start

    @property
    def end_value(self) -> float:
        return self.transition.end

    def set(self, start: float, end: float) -> None:
        self.transition.set(start, end)

    def restart_with_end(self, new_end: float) -> None:
        self.transition.restart_with_end(new_end)

    def restart_same_end(self) -> None:
        self.transition.restart_same_end()

    def flip(self) -> None:
        self.transition.flip()
