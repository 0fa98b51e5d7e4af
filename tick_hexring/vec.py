"""2D point math for hexagon centers."""
from __future__ import annotations

import math

from tick_hexring.types import Point


def add(a: Point, b: Point) -> Point:
    return Point(a.x + b.x, a.y + b.y)


def scale(p: Point, s: float) -> Point:
    return Point(p.x * s, p.y * s)


def distance_sq(a: Point, b: Point) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def distance(a: Point, b: Point) -> float:
    return math.sqrt(distance_sq(a, b))


def polar(origin: Point, radius: float, angle: float) -> Point:
    """Point at ``radius`` from ``origin`` along ``angle`` (radians)."""
    return Point(origin.x + radius * math.cos(angle), origin.y + radius * math.sin(angle))
