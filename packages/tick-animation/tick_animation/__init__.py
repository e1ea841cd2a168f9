"""tick-animation - Eased, time-based animation progress."""
from __future__ import annotations

from tick_animation.bezier import CubicBezier, get_cubic_bezier
from tick_animation.clock import ManualClock, monotonic_ms
from tick_animation.components import AnimatedProperty
from tick_animation.description import (
    AnimationDescription,
    description_to_string,
    parse_description,
)
from tick_animation.duration import Duration, DurationState
from tick_animation.easing import (
    EASINGS,
    NamedEasing,
    SmoothFunction,
    get_available_smooth_functions,
)
from tick_animation.options import DescriptionOption, IntOption, Option
from tick_animation.systems import make_animation_system
from tick_animation.transition import SimpleAnimation, TimedTransition

__all__ = [
    "AnimatedProperty",
    "AnimationDescription",
    "CubicBezier",
    "DescriptionOption",
    "Duration",
    "DurationState",
    "EASINGS",
    "IntOption",
    "ManualClock",
    "NamedEasing",
    "Option",
    "SimpleAnimation",
    "SmoothFunction",
    "TimedTransition",
    "description_to_string",
    "get_available_smooth_functions",
    "get_cubic_bezier",
    "make_animation_system",
    "monotonic_ms",
    "parse_description",
]
