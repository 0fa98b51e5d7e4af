"""tick-hexring - Ring-indexed hexagonal grid for the tick engine."""
from __future__ import annotations

from tick_hexring import rings, vec
from tick_hexring.grid import HexGrid, hexagon_outline, ring_walk, scaled_directions
from tick_hexring.neighbors import NEIGHBOR_OFFSETS, SectionRule, all_neighbors, neighbor
from tick_hexring.sampling import hex_id_at_position, random_hex_id
from tick_hexring.types import (
    NEIGHBOR_ORDER,
    Bounds,
    Direction,
    GridConfig,
    GridConfigError,
    HexIDOutOfRangeError,
    Point,
)

__all__ = [
    "Bounds",
    "Direction",
    "GridConfig",
    "GridConfigError",
    "HexGrid",
    "HexIDOutOfRangeError",
    "NEIGHBOR_OFFSETS",
    "NEIGHBOR_ORDER",
    "Point",
    "SectionRule",
    "all_neighbors",
    "hex_id_at_position",
    "hexagon_outline",
    "neighbor",
    "random_hex_id",
    "ring_walk",
    "rings",
    "scaled_directions",
    "vec",
]
