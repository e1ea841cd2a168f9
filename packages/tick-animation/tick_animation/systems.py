"""System factory that drives animated properties from an update loop."""
from __future__ import annotations

from typing import Callable

from tick_animation.components import AnimatedProperty
from tick_animation.duration import DurationState


def make_animation_system(
    bindings: list[AnimatedProperty],
    on_complete: Callable[[AnimatedProperty], None] | None = None,
) -> Callable[[], None]:
    """Return a system to be called once per tick.

    Each call writes every binding's current value onto its target. Bindings
    are grouped by their Duration; once a duration stops running its bindings
    are removed from ``bindings`` after the final write. ``on_complete`` is
    invoked for each of them if the duration was the one to report the
    completion, but not for bindings whose duration was never started.
    """

    def animation_system() -> None:
        groups: dict[int, list[AnimatedProperty]] = {}
        for binding in list(bindings):
            groups.setdefault(id(binding.transition.duration), []).append(binding)

        for group in groups.values():
            duration = group[0].transition.duration
            for binding in group:
                setattr(binding.target, binding.field, binding.transition.value)

            if duration.state is DurationState.RUNNING:
                continue

            completed = duration.consume_completion()
            for binding in group:
                bindings.remove(binding)
                if completed and on_complete is not None:
                    on_complete(binding)

    return animation_system
