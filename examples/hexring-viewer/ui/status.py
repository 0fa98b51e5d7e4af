"""Bottom status bar describing the hovered hexagon."""
from __future__ import annotations

import pygame

from tick_hexring import HexGrid

from ui.constants import COLOR_STATUS_BG, COLOR_TEXT, SCREEN_W, STATUS_H, VIEW_H


def describe(grid: HexGrid, hex_id: int | None) -> str:
    if hex_id is None:
        return f"layers={grid.layers}  hexes={grid.hex_count}  scale={grid.scale:.1f}"
    return (
        f"hex {hex_id}  layer {grid.layer_of(hex_id)}  "
        f"pos {grid.position_in_layer(hex_id)}  section {grid.section_of(hex_id)}  "
        f"axial {grid.axial_of(hex_id)}  neighbors {grid.neighbors_of(hex_id)}"
    )


class StatusBar:
    """Displays one line of text at the bottom of the screen."""

    def __init__(self) -> None:
        self._message = ""
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def set(self, message: str) -> None:
        self._message = message

    def draw(self, surface: pygame.Surface) -> None:
        bar_rect = pygame.Rect(0, VIEW_H, SCREEN_W, STATUS_H)
        pygame.draw.rect(surface, COLOR_STATUS_BG, bar_rect)
        if self._message:
            text = self._get_font().render(self._message, True, COLOR_TEXT)
            surface.blit(text, (8, VIEW_H + 12))
