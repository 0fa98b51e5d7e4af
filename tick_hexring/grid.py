"""HexGrid - ring-indexed hexagonal grid with precomputed centers."""
from __future__ import annotations

import dataclasses
import logging
import math
import random
from typing import Iterator, Sequence

from tick_hexring import neighbors as _nb
from tick_hexring import rings, sampling, vec
from tick_hexring.types import (
    NEIGHBOR_ORDER,
    Bounds,
    Direction,
    GridConfig,
    HexIDOutOfRangeError,
    Point,
)

logger = logging.getLogger(__name__)

_SQRT3X2 = math.sqrt(3) * 2


def scaled_directions(scale: float, skew: float) -> tuple[Point, ...]:
    """The six step vectors indexed by Direction, scaled and skewed."""
    return tuple(vec.scale(d.base_vector(skew), scale) for d in Direction)


def ring_walk(layers: int, directions: Sequence[Point]) -> Iterator[tuple[int, Point]]:
    """Yield ``(hex_id, center)`` for every hexagon, in ID order.

    Each layer starts one UP_LEFT step off the previous layer's last
    hexagon, climbs UP_RIGHT to the top-left corner, then walks the
    remaining five sides clockwise.
    """
    cursor = Point(0.0, 0.0)
    hex_id = 0
    for layer in range(layers + 1):
        yield hex_id, cursor
        for _ in range(layer - 1):
            cursor = vec.add(cursor, directions[Direction.UP_RIGHT])
            hex_id += 1
            yield hex_id, cursor
        for side in range(5):
            for _ in range(layer):
                cursor = vec.add(cursor, directions[side])
                hex_id += 1
                yield hex_id, cursor
        if layer < layers:
            cursor = vec.add(cursor, directions[Direction.UP_LEFT])
            hex_id += 1


def hexagon_outline(scale: float, skew: float) -> tuple[float, ...]:
    """Vertex offsets of one pointy-top hexagon as ``x0, y0, ... x5, y5``."""
    c = skew * scale / _SQRT3X2
    h = 0.5 * scale
    return (0.0, -2 * c, h, -c, h, c, 0.0, 2 * c, -h, c, -h, -c)


class HexGrid:
    """Hexagonal grid of ``layers`` rings around a center hexagon.

    Hex IDs run from 0 (center) to ``max_hex_id`` ring by ring. Centers,
    bounds and the hexagon outline are computed once; the grid is never
    mutated. Use :meth:`with_scale` to get a resized copy.
    """

    def __init__(self, layers: int, scale: float = 1.0, skew: float = 1.0) -> None:
        self._config = GridConfig(layers=layers, scale=scale, skew=skew)
        self._directions = scaled_directions(scale, skew)
        self._centers = tuple(center for _, center in ring_walk(layers, self._directions))
        self._bounds = Bounds.from_points(self._centers)
        self._hexagon_points = hexagon_outline(scale, skew)
        logger.debug(
            f"HexGrid built: {layers} layers, {len(self._centers)} hexagons, "
            f"scale={scale}, skew={skew}, bounds={self._bounds}"
        )

    @classmethod
    def from_config(cls, config: GridConfig) -> HexGrid:
        return cls(config.layers, config.scale, config.skew)

    def with_scale(self, scale: float) -> HexGrid:
        """A copy of this grid with every center recomputed for ``scale``."""
        config = dataclasses.replace(self._config, scale=scale)
        logger.debug(f"Rescaling HexGrid from {self._config.scale} to {scale}")
        return HexGrid.from_config(config)

    # --- Properties ---

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def layers(self) -> int:
        return self._config.layers

    @property
    def scale(self) -> float:
        return self._config.scale

    @property
    def skew(self) -> float:
        return self._config.skew

    @property
    def max_hex_id(self) -> int:
        return self._config.max_hex_id

    @property
    def hex_count(self) -> int:
        return self._config.hex_count

    @property
    def hex_centers(self) -> tuple[Point, ...]:
        return self._centers

    @property
    def directions(self) -> tuple[Point, ...]:
        return self._directions

    @property
    def hexagon_points(self) -> tuple[float, ...]:
        return self._hexagon_points

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def min_x(self) -> float:
        return self._bounds.min_x

    @property
    def max_x(self) -> float:
        return self._bounds.max_x

    @property
    def min_y(self) -> float:
        return self._bounds.min_y

    @property
    def max_y(self) -> float:
        return self._bounds.max_y

    @property
    def width(self) -> float:
        return self._bounds.width

    @property
    def height(self) -> float:
        return self._bounds.height

    def __len__(self) -> int:
        return len(self._centers)

    def __contains__(self, hex_id: object) -> bool:
        return isinstance(hex_id, int) and 0 <= hex_id <= self.max_hex_id

    def __repr__(self) -> str:
        return f"HexGrid(layers={self.layers}, scale={self.scale}, skew={self.skew})"

    def _check_id(self, hex_id: int) -> None:
        if not 0 <= hex_id <= self.max_hex_id:
            raise HexIDOutOfRangeError(hex_id, self.max_hex_id)

    # --- Geometry ---

    def center_of(self, hex_id: int) -> Point:
        self._check_id(hex_id)
        return self._centers[hex_id]

    def hexagon_polygon(self, hex_id: int) -> list[Point]:
        """Absolute vertices of one hexagon, for polygon drawing."""
        cx, cy = self.center_of(hex_id)
        pts = self._hexagon_points
        return [Point(cx + pts[i], cy + pts[i + 1]) for i in range(0, 12, 2)]

    # --- Structural queries ---

    def layer_of(self, hex_id: int) -> int:
        self._check_id(hex_id)
        return rings.layer_of(hex_id)

    def layer_start_hex_id(self, hex_id: int) -> int:
        self._check_id(hex_id)
        return rings.layer_start_hex_id(hex_id)

    def next_layer_start_hex_id(self, hex_id: int) -> int:
        self._check_id(hex_id)
        return rings.next_layer_start_hex_id(hex_id)

    def previous_layer_start_hex_id(self, hex_id: int) -> int:
        self._check_id(hex_id)
        return rings.previous_layer_start_hex_id(hex_id)

    def position_in_layer(self, hex_id: int) -> int:
        self._check_id(hex_id)
        return rings.position_in_layer(hex_id)

    def hexagons_in_layer(self, hex_id: int) -> int:
        self._check_id(hex_id)
        return rings.hexagons_in_layer(hex_id)

    def section_of(self, hex_id: int) -> int:
        self._check_id(hex_id)
        return rings.section_of(hex_id)

    def corner_hex(self, layer: int, corner: int) -> int:
        if not 0 <= layer <= self.layers:
            raise ValueError(f"layer {layer} out of range [0, {self.layers}]")
        return rings.corner_hex(layer, corner)

    def is_corner_hex(self, hex_id: int) -> bool:
        self._check_id(hex_id)
        return rings.is_corner_hex(hex_id)

    def layer_hex_ids(self, layer: int) -> range:
        if not 0 <= layer <= self.layers:
            raise ValueError(f"layer {layer} out of range [0, {self.layers}]")
        return rings.layer_hex_ids(layer)

    def axial_of(self, hex_id: int) -> tuple[int, int]:
        self._check_id(hex_id)
        return rings.axial_of(hex_id)

    def hex_id_of(self, q: int, r: int) -> int:
        hex_id = rings.hex_id_of(q, r)
        self._check_id(hex_id)
        return hex_id

    # --- Adjacency ---

    def neighbor(self, hex_id: int, direction: Direction) -> int:
        """Neighbor ID toward ``direction``; may exceed ``max_hex_id`` on the rim."""
        self._check_id(hex_id)
        return _nb.neighbor(hex_id, direction)

    def neighbors_of(self, hex_id: int) -> list[int]:
        """In-grid neighbors, ordered up-left, up-right, right, down-right, down-left, left."""
        self._check_id(hex_id)
        result: list[int] = []
        for direction in NEIGHBOR_ORDER:
            nid = _nb.neighbor(hex_id, direction)
            if nid <= self.max_hex_id:
                result.append(nid)
        return result

    def distance(self, a: int, b: int) -> int:
        self._check_id(a)
        self._check_id(b)
        return rings.hex_distance(a, b)

    def in_radius(self, hex_id: int, radius: int) -> list[int]:
        """IDs within ``radius`` steps of ``hex_id`` that exist in the grid."""
        self._check_id(hex_id)
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        q, r = rings.axial_of(hex_id)
        result: list[int] = []
        for dq in range(-radius, radius + 1):
            for dr in range(max(-radius, -dq - radius), min(radius, -dq + radius) + 1):
                nq, nr = q + dq, r + dr
                if rings.axial_length(nq, nr) <= self.layers:
                    result.append(rings.hex_id_of(nq, nr))
        result.sort()
        return result

    # --- Point location ---

    def hex_id_at_position(self, position: Point | tuple[float, float]) -> int:
        return sampling.hex_id_at_position(self._centers, Point(*position))

    def random_hex_id(
        self,
        center_id: int,
        radius: float,
        rng: random.Random | None = None,
    ) -> int:
        """Hex under a random point up to ``radius`` hexagons from ``center_id``."""
        self._check_id(center_id)
        if rng is None:
            rng = random.Random()
        return sampling.random_hex_id(self._centers, center_id, radius, self.scale, rng)
