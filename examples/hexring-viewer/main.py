"""Hexring Viewer - interactive ring-indexed hex grid with pygame.

Hover a hexagon to see its ID, layer, section and neighbors. White dots
mark corner hexagons.

Controls:
    Mouse wheel / +/-   Zoom (rebuilds the grid at the new scale)
    R                   Pick a random hex near the hovered one
    Esc                 Quit

Run:
    python examples/hexring-viewer/main.py [--layers N] [--scale S] [--skew K]
"""
from __future__ import annotations

import argparse
import logging
import random

import pygame

from tick_hexring import GridConfig, GridConfigError, HexGrid

from ui.constants import (
    COLOR_BG,
    DEFAULT_LAYERS,
    DEFAULT_SCALE,
    DEFAULT_SKEW,
    FPS,
    MAX_SCALE,
    MIN_SCALE,
    RANDOM_RADIUS,
    SCALE_STEP,
    SCREEN_H,
    SCREEN_W,
    VIEW_H,
)
from ui.renderer import draw_grid, draw_highlight, draw_labels, to_grid, view_offset
from ui.status import StatusBar, describe


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Hexring Viewer - tick-hexring visual demo")
    p.add_argument("--layers", type=int, default=DEFAULT_LAYERS,
                   help=f"Rings around the center (default: {DEFAULT_LAYERS})")
    p.add_argument("--scale", type=float, default=DEFAULT_SCALE,
                   help=f"Hexagon size in pixels (default: {DEFAULT_SCALE})")
    p.add_argument("--skew", type=float, default=DEFAULT_SKEW,
                   help=f"Vertical stretch (default: {DEFAULT_SKEW})")
    p.add_argument("--seed", type=int, default=None, help="Random seed for R picks")
    p.add_argument("--verbose", action="store_true", help="Log grid rebuilds")
    return p.parse_args()


class ViewerState:
    """Holds the grid and interaction state."""

    def __init__(self, config: GridConfig, seed: int | None) -> None:
        self.grid = HexGrid.from_config(config)
        self.rng = random.Random(seed)
        self.hovered: int | None = None
        self.random_pick: int | None = None
        self.status = StatusBar()

    def zoom(self, factor: float) -> None:
        scale = max(MIN_SCALE, min(MAX_SCALE, self.grid.scale * factor))
        if scale != self.grid.scale:
            self.grid = self.grid.with_scale(scale)

    def hover(self, pos: tuple[int, int]) -> None:
        if pos[1] >= VIEW_H:
            self.hovered = None
            return
        point = to_grid(pos, view_offset(self.grid))
        hex_id = self.grid.hex_id_at_position(point)
        # ignore the empty margin beyond the rim
        center = self.grid.center_of(hex_id)
        if (center.x - point.x) ** 2 + (center.y - point.y) ** 2 > self.grid.scale ** 2:
            self.hovered = None
        else:
            self.hovered = hex_id

    def pick_random(self) -> None:
        origin = self.hovered if self.hovered is not None else 0
        self.random_pick = self.grid.random_hex_id(origin, RANDOM_RADIUS, self.rng)


def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = GridConfig(layers=args.layers, scale=args.scale, skew=args.skew)
    except GridConfigError as exc:
        raise SystemExit(f"invalid grid: {exc}") from exc

    state = ViewerState(config, args.seed)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Hexring Viewer - tick-hexring demo")
    clock = pygame.time.Clock()
    label_font = pygame.font.SysFont("monospace", 11)

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.zoom(SCALE_STEP)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.zoom(1 / SCALE_STEP)
                elif event.key == pygame.K_r:
                    state.pick_random()
            elif event.type == pygame.MOUSEWHEEL:
                state.zoom(SCALE_STEP if event.y > 0 else 1 / SCALE_STEP)
            elif event.type == pygame.MOUSEMOTION:
                state.hover(event.pos)

        state.status.set(describe(state.grid, state.hovered))

        offset = view_offset(state.grid)
        screen.fill(COLOR_BG)
        draw_grid(screen, state.grid, offset)
        draw_highlight(screen, state.grid, offset, state.hovered, state.random_pick)
        draw_labels(screen, state.grid, offset, label_font)
        state.status.draw(screen)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
