"""Lane rendering: label, curve plot and orb track per easing."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from tick_animation import DurationState

from game.gallery import track_bounds
from ui.constants import (
    CURVE_W,
    LABEL_COLOR,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_COLORS,
    LANE_H,
    ORB_RADIUS,
    TEXT_DIM,
    TRACK_BG,
    TRACK_RAIL,
    TRACK_W,
)
from ui.curves import draw_curve_plot

if TYPE_CHECKING:
    from game.gallery import Lane


def draw_lanes(surface: pygame.Surface, lanes: list[Lane], font: pygame.font.Font) -> None:
    rail_left, rail_right = track_bounds()
    width = LABEL_W + CURVE_W + TRACK_W

    for i, lane in enumerate(lanes):
        lane_y = i * LANE_H
        color = LANE_COLORS[i % len(LANE_COLORS)]
        description = lane.option.get_value()

        pygame.draw.rect(surface, LANE_BG, (0, lane_y, width, LANE_H))
        pygame.draw.line(
            surface, LANE_BORDER, (0, lane_y + LANE_H - 1), (width, lane_y + LANE_H - 1)
        )

        label = font.render(lane.title, True, LABEL_COLOR)
        surface.blit(label, (10, lane_y + LANE_H // 2 - label.get_height()))
        detail = font.render(f"{description.length_ms}ms  done {lane.completed}", True, TEXT_DIM)
        surface.blit(detail, (10, lane_y + LANE_H // 2 + 2))

        pct = lane.animation.duration.progress_percentage()
        current_t = pct if lane.animation.state is DurationState.RUNNING else None
        draw_curve_plot(
            surface, description.easing, color, LABEL_W, lane_y + 6, CURVE_W, LANE_H - 12, current_t
        )

        pygame.draw.rect(surface, TRACK_BG, (LABEL_W + CURVE_W, lane_y, TRACK_W, LANE_H))
        rail_y = lane_y + LANE_H // 2
        pygame.draw.line(surface, TRACK_RAIL, (rail_left, rail_y), (rail_right, rail_y), 2)
        dim_color = tuple(c // 3 for c in color)
        pygame.draw.circle(surface, dim_color, (int(rail_left), rail_y), 4)
        pygame.draw.circle(surface, dim_color, (int(rail_right), rail_y), 4)

        pygame.draw.circle(surface, color, (int(lane.orb.x), rail_y), ORB_RADIUS)
