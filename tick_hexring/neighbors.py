"""Directional neighbor resolution from a hex ID alone.

Each neighbor is ``hex_id + outward * 6 * layer + step``, where the
``(outward, step)`` pair depends on the direction and on the section the
ID sits in. ``outward`` is +1 for a hop to the next ring, -1 for a hop to
the previous ring and 0 for a neighbor in the same ring; ``step`` absorbs
the offset between the two rings' section starts.

Two cells per section can break the section's pattern: the section's
corner, where the adjacent ring folds around, and the first cell of the
layer, which sits just after the previous ring's last corner.
"""
from __future__ import annotations

from dataclasses import dataclass

from tick_hexring import rings
from tick_hexring.types import NEIGHBOR_ORDER, Direction

Offset = tuple[int, int]


@dataclass(frozen=True, slots=True)
class SectionRule:
    edge: Offset
    corner: Offset | None = None
    start: Offset | None = None

    def offset_for(self, is_corner: bool, is_start: bool) -> Offset:
        if is_start and self.start is not None:
            return self.start
        if is_corner and self.corner is not None:
            return self.corner
        return self.edge


# Indexed by section 0..5. Fixed by the ring walk.
NEIGHBOR_OFFSETS: dict[Direction, tuple[SectionRule, ...]] = {
    Direction.UP_LEFT: (
        SectionRule(edge=(1, 1)),
        SectionRule(edge=(1, 1)),
        SectionRule(edge=(0, -1)),
        SectionRule(edge=(-1, 2)),
        SectionRule(edge=(-1, 2), corner=(0, 1)),
        SectionRule(edge=(0, 1)),
    ),
    Direction.UP_RIGHT: (
        SectionRule(edge=(0, 1), corner=(1, 2)),
        SectionRule(edge=(1, 2)),
        SectionRule(edge=(1, 2)),
        SectionRule(edge=(0, -1)),
        SectionRule(edge=(-1, 1)),
        SectionRule(edge=(-1, 1)),
    ),
    Direction.RIGHT: (
        SectionRule(edge=(-1, 6), corner=(0, 1)),
        SectionRule(edge=(0, 1), corner=(1, 3)),
        SectionRule(edge=(1, 3)),
        SectionRule(edge=(1, 3)),
        SectionRule(edge=(0, -1)),
        SectionRule(edge=(-1, 0)),
    ),
    Direction.DOWN_RIGHT: (
        SectionRule(edge=(-1, 5), start=(0, -1)),
        SectionRule(edge=(-1, 5), corner=(0, 1)),
        SectionRule(edge=(0, 1), corner=(1, 4)),
        SectionRule(edge=(1, 4)),
        SectionRule(edge=(1, 4)),
        SectionRule(edge=(0, -1)),
    ),
    Direction.DOWN_LEFT: (
        SectionRule(edge=(0, -1), start=(1, -1)),
        SectionRule(edge=(-1, 4)),
        SectionRule(edge=(-1, 4), corner=(0, 1)),
        SectionRule(edge=(0, 1), corner=(1, 5)),
        SectionRule(edge=(1, 5)),
        SectionRule(edge=(1, 5)),
    ),
    Direction.LEFT: (
        SectionRule(edge=(1, 0)),
        SectionRule(edge=(0, -1)),
        SectionRule(edge=(-1, 3)),
        SectionRule(edge=(-1, 3), corner=(0, 1)),
        SectionRule(edge=(0, 1), corner=(1, 6)),
        SectionRule(edge=(1, 6)),
    ),
}


def neighbor(hex_id: int, direction: Direction) -> int:
    """Hex ID adjacent to ``hex_id`` toward ``direction``.

    The result is not bounded by any grid size; an outermost-ring ID
    yields IDs from the ring beyond it.
    """
    direction = Direction(direction)
    if hex_id == 0:
        return NEIGHBOR_ORDER.index(direction) + 1
    layer = rings.layer_of(hex_id)
    pos = hex_id - rings.layer_start(layer)
    section = pos // layer
    rule = NEIGHBOR_OFFSETS[direction][section]
    is_corner = hex_id == rings.corner_hex(layer, section)
    outward, step = rule.offset_for(is_corner, pos == 0)
    return hex_id + outward * 6 * layer + step


def all_neighbors(hex_id: int) -> list[int]:
    """All six neighbors in NEIGHBOR_ORDER, unfiltered."""
    return [neighbor(hex_id, d) for d in NEIGHBOR_ORDER]


def up_left_neighbor(hex_id: int) -> int:
    return neighbor(hex_id, Direction.UP_LEFT)


def up_right_neighbor(hex_id: int) -> int:
    return neighbor(hex_id, Direction.UP_RIGHT)


def right_neighbor(hex_id: int) -> int:
    return neighbor(hex_id, Direction.RIGHT)


def down_right_neighbor(hex_id: int) -> int:
    return neighbor(hex_id, Direction.DOWN_RIGHT)


def down_left_neighbor(hex_id: int) -> int:
    return neighbor(hex_id, Direction.DOWN_LEFT)


def left_neighbor(hex_id: int) -> int:
    return neighbor(hex_id, Direction.LEFT)
