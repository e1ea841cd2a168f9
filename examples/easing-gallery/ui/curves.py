"""Easing curve plot renderer."""
from __future__ import annotations

import pygame

from tick_animation import SmoothFunction

from ui.constants import CURVE_BG, TEXT_DIM

# Elastic easing overshoots; leave headroom above and below the unit box.
_HEADROOM = 0.25


def draw_curve_plot(
    surface: pygame.Surface,
    easing: SmoothFunction,
    color: tuple[int, int, int],
    x: int,
    y: int,
    w: int,
    h: int,
    current_t: float | None,
) -> None:
    """Draw an easing curve with a dot at the current progress."""
    pad = 8
    plot_x = x + pad
    plot_w = w - 2 * pad
    plot_h = (h - 2 * pad) / (1 + 2 * _HEADROOM)
    plot_y = y + pad + plot_h * _HEADROOM

    def to_screen(t: float, v: float) -> tuple[float, float]:
        return plot_x + t * plot_w, plot_y + plot_h - v * plot_h

    pygame.draw.rect(surface, CURVE_BG, (x, y, w, h))
    pygame.draw.line(surface, TEXT_DIM, to_screen(0, 0), to_screen(1, 0))
    pygame.draw.line(surface, TEXT_DIM, to_screen(0, 0), to_screen(0, 1))

    samples = 60
    points = [to_screen(i / samples, easing(i / samples)) for i in range(samples + 1)]
    pygame.draw.lines(surface, color, False, points, 2)

    if current_t is not None:
        dot_x, dot_y = to_screen(current_t, easing(current_t))
        pygame.draw.circle(surface, (255, 255, 255), (int(dot_x), int(dot_y)), 4)
        pygame.draw.circle(surface, color, (int(dot_x), int(dot_y)), 3)
