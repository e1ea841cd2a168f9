"""Gallery state: one animated orb per lane, driven by the animation system."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from tick_animation import (
    AnimatedProperty,
    DescriptionOption,
    DurationState,
    SimpleAnimation,
    make_animation_system,
)
from tick_animation.clock import Clock

from ui.constants import (
    CURVE_W,
    DEFAULT_LENGTH_MS,
    LABEL_W,
    LANES,
    MAX_LENGTH_MS,
    MIN_LENGTH_MS,
    TRACK_PAD,
    TRACK_W,
)

logger = logging.getLogger("easing-gallery")


def track_bounds() -> tuple[float, float]:
    """Left and right x of the orb rail."""
    track_x = LABEL_W + CURVE_W
    return track_x + TRACK_PAD, track_x + TRACK_W - TRACK_PAD


@dataclass
class Orb:
    x: float


@dataclass(eq=False)
class Lane:
    title: str
    option: DescriptionOption
    animation: SimpleAnimation
    orb: Orb
    completed: int = 0

    @property
    def destination(self) -> float:
        """Where the orb is heading, or resting, given the current direction."""
        if self.animation.get_direction() == 0:
            return self.animation.start_value
        return self.animation.end_value


class GalleryState:
    """Holds the lanes and the system that moves their orbs."""

    def __init__(self, clock: Clock | None = None) -> None:
        self.length_ms = DEFAULT_LENGTH_MS
        left, _ = track_bounds()

        self.lanes: list[Lane] = []
        for title, easing in LANES:
            option = DescriptionOption(title, f"{self.length_ms}ms {easing}")
            animation = SimpleAnimation.from_description(option, clock=clock)
            animation.set(left, left)
            self.lanes.append(Lane(title, option, animation, Orb(left)))

        self.bindings: list[AnimatedProperty] = []
        self.system = make_animation_system(self.bindings, on_complete=self._on_complete)

    def _lane_for(self, binding: AnimatedProperty) -> Lane:
        for lane in self.lanes:
            if lane.animation.transition is binding.transition:
                return lane
        raise KeyError(binding.field)

    def _on_complete(self, binding: AnimatedProperty) -> None:
        lane = self._lane_for(binding)
        lane.completed += 1
        logger.debug("%s finished at x=%.1f", lane.title, lane.orb.x)

    def _bind(self, lane: Lane) -> None:
        transition = lane.animation.transition
        if not any(b.transition is transition for b in self.bindings):
            self.bindings.append(AnimatedProperty(lane.orb, "x", transition))

    def launch(self) -> None:
        """Send every orb from where it is now to the end it is not heading to."""
        left, right = track_bounds()
        for lane in self.lanes:
            animation = lane.animation
            current = animation.value
            target = left if lane.destination == right else right
            if animation.get_direction() == 0:
                animation.reverse()
            animation.animate(current, target)
            self._bind(lane)

    def reverse(self) -> None:
        for lane in self.lanes:
            if lane.animation.state is DurationState.RUNNING:
                lane.animation.reverse()

    def set_length(self, length_ms: int) -> None:
        self.length_ms = max(MIN_LENGTH_MS, min(MAX_LENGTH_MS, length_ms))
        for lane in self.lanes:
            easing_name = lane.option.get_value().easing_name
            lane.option.set_value_str(f"{self.length_ms}ms {easing_name}")
        logger.info("Animation length set to %d ms", self.length_ms)
