"""
Test suite for HexGrid construction and queries.

Tests cover:
- Constructor, configuration validation and derived counts
- Ring-walk centers and bounding box
- Hexagon outline
- Rescaling
- Bounds-checked structural queries
- Radius and distance queries
"""

import dataclasses
import logging
import math

import pytest

from tick_hexring import (
    Direction,
    GridConfig,
    GridConfigError,
    HexGrid,
    HexIDOutOfRangeError,
    Point,
    ring_walk,
    scaled_directions,
)

K = 3 / (2 * math.sqrt(3))


class TestHexGridConstruction:
    """Test HexGrid initialization and properties."""

    def test_constructor_defaults(self):
        grid = HexGrid(layers=3)
        assert grid.layers == 3
        assert grid.scale == 1.0
        assert grid.skew == 1.0

    @pytest.mark.parametrize("layers", [0, 1, 2, 5, 10])
    def test_center_count(self, layers):
        grid = HexGrid(layers)
        assert grid.max_hex_id == 3 * (layers + 1) * layers
        assert len(grid.hex_centers) == grid.max_hex_id + 1
        assert len(grid) == grid.hex_count

    def test_layers_one(self):
        grid = HexGrid(1)
        assert grid.max_hex_id == 6
        assert grid.hex_centers[0] == Point(0.0, 0.0)

    def test_layers_two(self):
        grid = HexGrid(2, scale=1, skew=1)
        assert grid.max_hex_id == 18
        assert list(grid.layer_hex_ids(2)) == list(range(7, 19))

    def test_from_config(self):
        config = GridConfig(layers=2, scale=3.0, skew=1.5)
        grid = HexGrid.from_config(config)
        assert grid.config == config
        assert grid.max_hex_id == config.max_hex_id

    def test_contains(self):
        grid = HexGrid(1)
        assert 0 in grid
        assert 6 in grid
        assert 7 not in grid
        assert -1 not in grid
        assert "3" not in grid

    def test_repr(self):
        assert repr(HexGrid(2, 1.5)) == "HexGrid(layers=2, scale=1.5, skew=1.0)"

    def test_construction_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tick_hexring.grid"):
            HexGrid(2)
        assert "19 hexagons" in caplog.text


class TestConfigValidation:
    """Invalid configuration is rejected up front."""

    @pytest.mark.parametrize("layers", [-1, 1.5, "2", None, True])
    def test_bad_layers(self, layers):
        with pytest.raises(GridConfigError):
            HexGrid(layers)

    @pytest.mark.parametrize("scale", [0, -1.0, math.nan, math.inf, "1"])
    def test_bad_scale(self, scale):
        with pytest.raises(GridConfigError):
            HexGrid(2, scale=scale)

    @pytest.mark.parametrize("skew", [0, -0.5, math.nan])
    def test_bad_skew(self, skew):
        with pytest.raises(GridConfigError):
            HexGrid(2, skew=skew)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            GridConfig(layers=-3)

    def test_config_is_frozen(self):
        config = GridConfig(layers=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.layers = 3


class TestCenters:
    """Ring-walk center generation."""

    def test_first_layer_positions(self):
        grid = HexGrid(1)
        expected = [
            (0.0, 0.0),
            (-0.5, -K),
            (0.5, -K),
            (1.0, 0.0),
            (0.5, K),
            (-0.5, K),
            (-1.0, 0.0),
        ]
        for center, (x, y) in zip(grid.hex_centers, expected):
            assert center.x == pytest.approx(x, abs=1e-12)
            assert center.y == pytest.approx(y, abs=1e-12)

    def test_second_layer_start_and_corners(self):
        c = HexGrid(2).hex_centers
        assert c[7] == pytest.approx((-1.5, -K))
        assert c[8] == pytest.approx((-1.0, -2 * K))
        assert c[12] == pytest.approx((2.0, 0.0))
        assert c[18] == pytest.approx((-2.0, 0.0))

    def test_centers_are_distinct(self):
        centers = HexGrid(6).hex_centers
        rounded = {(round(p.x, 6), round(p.y, 6)) for p in centers}
        assert len(rounded) == len(centers)

    def test_ring_walk_ids_are_sequential(self):
        ids = [hex_id for hex_id, _ in ring_walk(4, scaled_directions(1.0, 1.0))]
        assert ids == list(range(3 * 5 * 4 + 1))

    def test_center_distance_matches_layer_on_corners(self):
        grid = HexGrid(5)
        for layer in range(1, 6):
            for corner in range(6):
                p = grid.center_of(grid.corner_hex(layer, corner))
                assert math.hypot(p.x, p.y) == pytest.approx(layer)

    def test_skew_stretches_vertically(self):
        plain = HexGrid(3)
        tall = HexGrid(3, skew=2.0)
        for a, b in zip(plain.hex_centers, tall.hex_centers):
            assert b.x == pytest.approx(a.x)
            assert b.y == pytest.approx(2 * a.y)

    def test_directions_scaled(self):
        grid = HexGrid(1, scale=4.0)
        assert grid.directions[Direction.RIGHT] == pytest.approx((4.0, 0.0))
        assert grid.directions[Direction.UP_LEFT] == pytest.approx((-2.0, -4 * K))


class TestBounds:
    """Grid bounding box over centers."""

    def test_single_hex(self):
        grid = HexGrid(0)
        assert (grid.min_x, grid.max_x, grid.min_y, grid.max_y) == (0.0, 0.0, 0.0, 0.0)
        assert grid.width == 0.0
        assert grid.height == 0.0

    def test_layers_one(self):
        grid = HexGrid(1)
        assert grid.min_x == pytest.approx(-1.0)
        assert grid.max_x == pytest.approx(1.0)
        assert grid.min_y == pytest.approx(-K)
        assert grid.max_y == pytest.approx(K)
        assert grid.width == pytest.approx(2.0)
        assert grid.height == pytest.approx(2 * K)

    def test_layers_three_scaled(self):
        grid = HexGrid(3, scale=10.0)
        assert grid.width == pytest.approx(60.0)
        assert grid.height == pytest.approx(60 * K)
        assert grid.bounds.width == grid.width


class TestHexagonOutline:
    def test_unit_hexagon_points(self):
        pts = HexGrid(1).hexagon_points
        r = 1 / math.sqrt(3)
        expected = (0, -r, 0.5, -r / 2, 0.5, r / 2, 0, r, -0.5, r / 2, -0.5, -r / 2)
        assert len(pts) == 12
        assert pts == pytest.approx(expected)

    def test_outline_scales_and_skews(self):
        base = HexGrid(1).hexagon_points
        pts = HexGrid(1, scale=3.0, skew=2.0).hexagon_points
        for i in range(0, 12, 2):
            assert pts[i] == pytest.approx(3.0 * base[i])
            assert pts[i + 1] == pytest.approx(6.0 * base[i + 1])

    def test_polygon_around_center(self):
        grid = HexGrid(2, scale=2.0)
        poly = grid.hexagon_polygon(12)
        assert len(poly) == 6
        cx = sum(p.x for p in poly) / 6
        cy = sum(p.y for p in poly) / 6
        assert (cx, cy) == pytest.approx(tuple(grid.center_of(12)))

    def test_adjacent_hexagons_share_an_edge(self):
        grid = HexGrid(1)
        a = {(round(p.x, 9), round(p.y, 9)) for p in grid.hexagon_polygon(0)}
        b = {(round(p.x, 9), round(p.y, 9)) for p in grid.hexagon_polygon(3)}
        assert len(a & b) == 2


class TestWithScale:
    """Rescaling returns a new grid and leaves structure untouched."""

    def test_returns_new_grid(self):
        grid = HexGrid(3)
        bigger = grid.with_scale(2.5)
        assert bigger is not grid
        assert grid.scale == 1.0
        assert bigger.scale == 2.5
        assert bigger.skew == grid.skew

    def test_centers_scale_proportionally(self):
        grid = HexGrid(3)
        bigger = grid.with_scale(2.5)
        for a, b in zip(grid.hex_centers, bigger.hex_centers):
            assert b.x == pytest.approx(2.5 * a.x)
            assert b.y == pytest.approx(2.5 * a.y)
        assert bigger.width == pytest.approx(2.5 * grid.width)
        assert bigger.hexagon_points == pytest.approx(
            tuple(2.5 * v for v in grid.hexagon_points)
        )

    def test_structure_unchanged(self):
        grid = HexGrid(4)
        other = grid.with_scale(0.25)
        assert other.max_hex_id == grid.max_hex_id
        for hex_id in range(grid.max_hex_id + 1):
            assert other.layer_of(hex_id) == grid.layer_of(hex_id)
            assert other.section_of(hex_id) == grid.section_of(hex_id)
            assert other.neighbors_of(hex_id) == grid.neighbors_of(hex_id)

    def test_invalid_scale_raises(self):
        with pytest.raises(GridConfigError):
            HexGrid(2).with_scale(0)


class TestBoundsChecking:
    """Structural queries reject IDs outside the grid."""

    @pytest.mark.parametrize("method", [
        "layer_of",
        "layer_start_hex_id",
        "next_layer_start_hex_id",
        "position_in_layer",
        "hexagons_in_layer",
        "section_of",
        "is_corner_hex",
        "axial_of",
        "center_of",
        "neighbors_of",
    ])
    @pytest.mark.parametrize("hex_id", [-1, 19, 1000])
    def test_out_of_range(self, method, hex_id):
        grid = HexGrid(2)
        with pytest.raises(HexIDOutOfRangeError):
            getattr(grid, method)(hex_id)

    def test_error_carries_ids(self):
        grid = HexGrid(1)
        with pytest.raises(HexIDOutOfRangeError) as exc_info:
            grid.layer_of(7)
        assert exc_info.value.hex_id == 7
        assert exc_info.value.max_hex_id == 6

    def test_corner_hex_checks_layer(self):
        grid = HexGrid(2)
        assert grid.corner_hex(2, 5) == 18
        with pytest.raises(ValueError):
            grid.corner_hex(3, 0)

    def test_previous_layer_of_center_raises(self):
        with pytest.raises(ValueError):
            HexGrid(2).previous_layer_start_hex_id(0)

    def test_next_layer_start_of_rim(self):
        grid = HexGrid(2)
        assert grid.next_layer_start_hex_id(18) == grid.max_hex_id + 1

    def test_hex_id_of_beyond_rim(self):
        grid = HexGrid(2)
        assert grid.hex_id_of(2, 0) == 12
        with pytest.raises(HexIDOutOfRangeError):
            grid.hex_id_of(3, 0)


class TestRadiusAndDistance:
    def test_radius_zero(self):
        assert HexGrid(3).in_radius(5, 0) == [5]

    def test_radius_one_around_center(self):
        assert HexGrid(3).in_radius(0, 1) == [0, 1, 2, 3, 4, 5, 6]

    def test_radius_covers_whole_grid(self):
        grid = HexGrid(3)
        assert grid.in_radius(0, 3) == list(range(grid.max_hex_id + 1))

    def test_radius_clipped_at_rim(self):
        assert HexGrid(2).in_radius(8, 1) == [1, 7, 8, 9]

    def test_radius_one_matches_neighbors(self):
        grid = HexGrid(4)
        for hex_id in range(grid.max_hex_id + 1):
            expected = sorted(grid.neighbors_of(hex_id) + [hex_id])
            assert grid.in_radius(hex_id, 1) == expected

    def test_negative_radius_raises(self):
        with pytest.raises(ValueError):
            HexGrid(2).in_radius(0, -1)

    def test_distance(self):
        grid = HexGrid(3)
        assert grid.distance(0, 27) == 3
        assert grid.distance(21, 30) == 6
        with pytest.raises(HexIDOutOfRangeError):
            grid.distance(0, 37)
