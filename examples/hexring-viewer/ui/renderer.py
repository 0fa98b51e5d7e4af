"""Hexagon rendering."""
from __future__ import annotations

import pygame

from tick_hexring import HexGrid, Point

from ui.constants import (
    COLOR_CORNER_MARK,
    COLOR_HOVER,
    COLOR_NEIGHBOR,
    COLOR_OUTLINE,
    COLOR_RANDOM,
    LAYER_COLORS,
    SCREEN_W,
    VIEW_H,
)


def view_offset(grid: HexGrid) -> Point:
    """Screen offset that centers the grid's bounding box in the view."""
    return Point(
        SCREEN_W / 2 - (grid.min_x + grid.width / 2),
        VIEW_H / 2 - (grid.min_y + grid.height / 2),
    )


def to_grid(pos: tuple[int, int], offset: Point) -> Point:
    return Point(pos[0] - offset.x, pos[1] - offset.y)


def _polygon(grid: HexGrid, hex_id: int, offset: Point) -> list[tuple[float, float]]:
    return [(p.x + offset.x, p.y + offset.y) for p in grid.hexagon_polygon(hex_id)]


def draw_grid(surface: pygame.Surface, grid: HexGrid, offset: Point) -> None:
    """Fill every hexagon by layer and outline it."""
    for hex_id in range(grid.max_hex_id + 1):
        color = LAYER_COLORS[grid.layer_of(hex_id) % len(LAYER_COLORS)]
        points = _polygon(grid, hex_id, offset)
        pygame.draw.polygon(surface, color, points)
        pygame.draw.polygon(surface, COLOR_OUTLINE, points, 1)
        if grid.is_corner_hex(hex_id):
            cx, cy = grid.center_of(hex_id)
            pygame.draw.circle(
                surface, COLOR_CORNER_MARK, (cx + offset.x, cy + offset.y), max(2, grid.scale / 10)
            )


def draw_highlight(
    surface: pygame.Surface,
    grid: HexGrid,
    offset: Point,
    hovered: int | None,
    random_pick: int | None,
) -> None:
    """Outline the hovered hexagon, its neighbors, and the last random pick."""
    if hovered is not None:
        for nid in grid.neighbors_of(hovered):
            pygame.draw.polygon(surface, COLOR_NEIGHBOR, _polygon(grid, nid, offset), 3)
        pygame.draw.polygon(surface, COLOR_HOVER, _polygon(grid, hovered, offset), 3)
    if random_pick is not None:
        pygame.draw.polygon(surface, COLOR_RANDOM, _polygon(grid, random_pick, offset), 4)


def draw_labels(
    surface: pygame.Surface,
    grid: HexGrid,
    offset: Point,
    font: pygame.font.Font,
) -> None:
    """Hex IDs at each center; skipped when hexagons are too small to read."""
    if grid.scale < 24:
        return
    for hex_id, (cx, cy) in enumerate(grid.hex_centers):
        text = font.render(str(hex_id), True, (15, 15, 20))
        rect = text.get_rect(center=(cx + offset.x, cy + offset.y))
        surface.blit(text, rect)
