"""Shared value types, configuration and errors for tick-hexring."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, NamedTuple

HexId = int
Axial = tuple[int, int]

# Vertical component of the diagonal unit steps for a regular hexagon.
ROW_HEIGHT = 3 / (2 * math.sqrt(3))


class Point(NamedTuple):
    x: float
    y: float


class Direction(IntEnum):
    """The six neighbor directions, valued by their ring-walk index.

    Screen convention: x grows to the right, y grows downward.
    """

    RIGHT = 0
    DOWN_RIGHT = 1
    DOWN_LEFT = 2
    LEFT = 3
    UP_LEFT = 4
    UP_RIGHT = 5

    @property
    def opposite(self) -> Direction:
        return Direction((self.value + 3) % 6)

    @property
    def axial(self) -> Axial:
        return _AXIAL_DELTAS[self.value]

    def base_vector(self, skew: float = 1.0) -> Point:
        """Unit step toward this direction before scaling."""
        dx, dy = _BASE_STEPS[self.value]
        return Point(dx, dy * ROW_HEIGHT * skew)


_AXIAL_DELTAS: tuple[Axial, ...] = (
    (1, 0),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (0, -1),
    (1, -1),
)

# (dx, rows) per direction; rows is multiplied by ROW_HEIGHT * skew.
_BASE_STEPS: tuple[tuple[float, int], ...] = (
    (1.0, 0),
    (0.5, 1),
    (-0.5, 1),
    (-1.0, 0),
    (-0.5, -1),
    (0.5, -1),
)

NEIGHBOR_ORDER: tuple[Direction, ...] = (
    Direction.UP_LEFT,
    Direction.UP_RIGHT,
    Direction.RIGHT,
    Direction.DOWN_RIGHT,
    Direction.DOWN_LEFT,
    Direction.LEFT,
)


class GridConfigError(ValueError):
    """Raised when a grid is configured with invalid layers, scale or skew."""


class HexIDOutOfRangeError(IndexError):
    """Raised when a hex ID falls outside ``[0, max_hex_id]``."""

    def __init__(self, hex_id: int, max_hex_id: int) -> None:
        self.hex_id = hex_id
        self.max_hex_id = max_hex_id
        super().__init__(f"hex ID {hex_id} out of range [0, {max_hex_id}]")


def _check_positive(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GridConfigError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise GridConfigError(f"{name} must be positive and finite, got {value}")


@dataclass(frozen=True)
class GridConfig:
    """Immutable hex grid configuration.

    Attributes:
        layers: Number of rings around the center cell (0 = center only).
        scale: Linear size multiplier for hexagon geometry.
        skew: Vertical stretch factor for non-regular hexagons.
    """

    layers: int
    scale: float = 1.0
    skew: float = 1.0

    def __post_init__(self) -> None:
        if isinstance(self.layers, bool) or not isinstance(self.layers, int):
            raise GridConfigError(f"layers must be an integer, got {self.layers!r}")
        if self.layers < 0:
            raise GridConfigError(f"layers must be >= 0, got {self.layers}")
        _check_positive("scale", self.scale)
        _check_positive("skew", self.skew)

    @property
    def max_hex_id(self) -> int:
        return 3 * (self.layers + 1) * self.layers

    @property
    def hex_count(self) -> int:
        return self.max_hex_id + 1


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box over hexagon centers."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Bounds:
        min_x = min_y = math.inf
        max_x = max_y = -math.inf
        for x, y in points:
            min_x = min(min_x, x)
            max_x = max(max_x, x)
            min_y = min(min_y, y)
            max_y = max(max_y, y)
        if min_x == math.inf:
            raise ValueError("Bounds.from_points requires at least one point")
        return cls(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)
