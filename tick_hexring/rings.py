"""Closed-form ring arithmetic for ring-walk hex IDs.

Hex IDs are assigned ring by ring: ID 0 is the center, and layer ``L >= 1``
holds the ``6 * L`` contiguous IDs ``3L(L-1)+1 .. 3L(L+1)``. Every function
here works on the ID alone; nothing depends on a grid instance, so the
results are valid for any grid large enough to hold the ID.

Corners are numbered 0..5 starting at the top-left and going clockwise
(top-left, top-right, right, bottom-right, bottom-left, left). A layer's
``6 * L`` cells split into six sections of ``L`` cells; corner ``c`` is
always the last cell of section ``c``.
"""
from __future__ import annotations

import math

from tick_hexring.types import NEIGHBOR_ORDER, Axial, Direction


def _check_hex_id(hex_id: int) -> None:
    if hex_id < 0:
        raise ValueError(f"hex ID must be >= 0, got {hex_id}")


def layer_of(hex_id: int) -> int:
    _check_hex_id(hex_id)
    return round(math.sqrt(hex_id / 3))


def layer_start(layer: int) -> int:
    """First hex ID of ``layer``."""
    if layer < 0:
        raise ValueError(f"layer must be >= 0, got {layer}")
    if layer == 0:
        return 0
    return 3 * layer * (layer - 1) + 1


def layer_hex_ids(layer: int) -> range:
    if layer == 0:
        return range(0, 1)
    start = layer_start(layer)
    return range(start, start + 6 * layer)


def layer_start_hex_id(hex_id: int) -> int:
    return layer_start(layer_of(hex_id))


def next_layer_start_hex_id(hex_id: int) -> int:
    return layer_start(layer_of(hex_id) + 1)


def previous_layer_start_hex_id(hex_id: int) -> int:
    layer = layer_of(hex_id)
    if layer == 0:
        raise ValueError("the center layer has no previous layer")
    return layer_start(layer - 1)


def position_in_layer(hex_id: int) -> int:
    return hex_id - layer_start_hex_id(hex_id)


def hexagons_in_layer(hex_id: int) -> int:
    layer = layer_of(hex_id)
    return 6 * layer if layer else 1


def corner_hex(layer: int, corner: int) -> int:
    """Hex ID of corner ``corner`` (0..5) of ``layer``."""
    if not 0 <= corner <= 5:
        raise ValueError(f"corner must be in 0..5, got {corner}")
    if layer < 0:
        raise ValueError(f"layer must be >= 0, got {layer}")
    return (3 * layer - (2 - corner)) * layer


def section_of(hex_id: int) -> int:
    layer = layer_of(hex_id)
    if layer == 0:
        return 0
    return position_in_layer(hex_id) // layer


def is_corner_hex(hex_id: int) -> bool:
    layer = layer_of(hex_id)
    if layer == 0:
        return False
    return hex_id == corner_hex(layer, section_of(hex_id))


# --- Axial lattice coordinates ---
#
# Corner c of layer L sits at L * NEIGHBOR_ORDER[c].axial, and the walk
# leaves corner c (c < 5) along Direction(c). The cells before corner 0
# lie on the UP_RIGHT run that starts one UP_LEFT step off the previous
# layer's left corner.


def axial_of(hex_id: int) -> Axial:
    """Axial ``(q, r)`` lattice coordinate of ``hex_id``; the center is (0, 0)."""
    layer = layer_of(hex_id)
    if layer == 0:
        return (0, 0)
    pos = hex_id - layer_start(layer)
    if pos < layer - 1:
        return (pos - (layer - 1), -1 - pos)
    section, step = divmod(pos - (layer - 1), layer)
    cq, cr = NEIGHBOR_ORDER[section].axial
    if step == 0:
        return (layer * cq, layer * cr)
    dq, dr = Direction(section).axial
    return (layer * cq + step * dq, layer * cr + step * dr)


def axial_length(q: int, r: int) -> int:
    return (abs(q) + abs(q + r) + abs(r)) // 2


def hex_id_of(q: int, r: int) -> int:
    """Inverse of :func:`axial_of`."""
    layer = axial_length(q, r)
    if layer == 0:
        return 0
    start = layer_start(layer)
    run = -1 - r
    if 0 <= run < layer - 1 and q == run - (layer - 1):
        return start + run
    for section in range(6):
        cq, cr = NEIGHBOR_ORDER[section].axial
        oq, or_ = q - layer * cq, r - layer * cr
        if oq == 0 and or_ == 0:
            return start + (section + 1) * layer - 1
        if section == 5:
            break
        dq, dr = Direction(section).axial
        step = oq * dq if dq else or_ * dr
        if 0 < step < layer and (step * dq, step * dr) == (oq, or_):
            return start + (section + 1) * layer - 1 + step
    raise AssertionError(f"axial ({q}, {r}) not on layer {layer}")


def hex_distance(a: int, b: int) -> int:
    """Number of unit steps between two hexagons."""
    aq, ar = axial_of(a)
    bq, br = axial_of(b)
    return axial_length(aq - bq, ar - br)
