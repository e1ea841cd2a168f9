"""AnimatedProperty binding."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tick_animation.transition import TimedTransition


@dataclass(eq=False)
class AnimatedProperty:
    """Writes a transition's value onto ``target.<field>`` each tick."""

    target: Any
    field: str
    transition: TimedTransition
