"""Easing Gallery - side-by-side comparison of animation descriptions.

Exercises tick-animation: description options, SimpleAnimation retargeting,
reversal, live length changes and the animation system.

Controls:
  Space   Send every orb to the opposite end of its track
  R       Reverse orbs that are in flight
  +/-     Adjust the animation length (applies mid-flight)
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from game.gallery import GalleryState
from ui.constants import (
    BG_COLOR,
    FPS,
    LANE_H,
    LANES,
    LENGTH_STEP_MS,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_DIM,
)
from ui.lanes import draw_lanes


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, length_ms: int) -> None:
    y = LANE_H * len(LANES)
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))
    text = f"[Space] Go  [R] Reverse  [+/-] Length ({length_ms}ms)  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Easing Gallery - tick-animation demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState()
    running = True

    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.launch()
                elif event.key == pygame.K_r:
                    state.reverse()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.set_length(state.length_ms + LENGTH_STEP_MS)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.set_length(state.length_ms - LENGTH_STEP_MS)

        state.system()

        screen.fill(BG_COLOR)
        draw_lanes(screen, state.lanes, font)
        draw_status_bar(screen, font, state.length_ms)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
