"""Point location and random sampling over a hexagon center table."""
from __future__ import annotations

import math
import random
from typing import Sequence

from tick_hexring import vec
from tick_hexring.types import Point


def hex_id_at_position(centers: Sequence[Point], position: Point) -> int:
    """ID of the center closest to ``position``.

    Linear scan; on a tie the lowest ID wins.
    """
    best_id = 0
    best_dist = math.inf
    for hex_id, center in enumerate(centers):
        d = vec.distance_sq(center, position)
        if d < best_dist:
            best_dist = d
            best_id = hex_id
    return best_id


def random_hex_id(
    centers: Sequence[Point],
    center_id: int,
    radius: float,
    scale: float,
    rng: random.Random,
) -> int:
    """Hex under a random point within ``scale * radius`` of ``center_id``.

    The distance is drawn uniformly, so picks cluster toward the center.
    """
    if radius < 0:
        raise ValueError(f"radius must be >= 0, got {radius}")
    dist = scale * radius * rng.random()
    angle = 2 * math.pi * rng.random()
    return hex_id_at_position(centers, vec.polar(centers[center_id], dist, angle))
