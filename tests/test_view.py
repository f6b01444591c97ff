"""
Unit tests for the view transform.

Tests:
- World/device round trips
- Zoom anchored at the pointer, clamping
- Panning and centring
- Grid snapping and grid spacing
"""

import pytest

from mirrorpath.core import ViewState, grid_spacing, snap, snap_point
from mirrorpath.core.math import dist
from mirrorpath.core.view import MAX_ZOOM, MIN_ZOOM

VIEWS = [
    ViewState(),
    ViewState(zoom=1.0, pan=(0.0, 0.0)),
    ViewState(zoom=3.7, pan=(-120.5, 44.0)),
    ViewState(zoom=0.1, pan=(500.0, -300.0)),
]


class TestTransform:
    """Tests for to_world / to_device."""

    @pytest.mark.parametrize("view", VIEWS)
    @pytest.mark.parametrize("p", [(0, 0), (123.4, -56.7), (4000, 4000)])
    def test_round_trip(self, view, p):
        assert dist(view.to_world(view.to_device(p)), p) < 1e-9

    def test_device_formula(self):
        view = ViewState(zoom=2.0, pan=(10.0, -5.0))
        assert view.to_device((3, 4)) == (16.0, 3.0)
        assert view.to_world((16, 3)) == (3.0, 4.0)


class TestZoom:
    """Tests for ViewState.zoomed_at."""

    @pytest.mark.parametrize("zoom_in", [True, False])
    def test_world_point_stays_under_pointer(self, zoom_in):
        view = ViewState(zoom=0.8, pan=(37.0, -12.0))
        pointer = (412.0, 250.0)
        zoomed = view.zoomed_at(pointer, zoom_in)
        assert zoomed.zoom != view.zoom
        assert dist(zoomed.to_world(pointer), view.to_world(pointer)) < 1e-9

    def test_step(self):
        view = ViewState(zoom=1.0)
        assert view.zoomed_at((0, 0), True).zoom == pytest.approx(1.1)
        assert view.zoomed_at((0, 0), False).zoom == pytest.approx(1 / 1.1)

    def test_clamped_at_max(self):
        view = ViewState(zoom=MAX_ZOOM, pan=(1.0, 2.0))
        assert view.zoomed_at((50, 50), True) is view

    def test_clamped_at_min(self):
        view = ViewState(zoom=0.105)
        zoomed = view.zoomed_at((50, 50), False)
        assert zoomed.zoom == MIN_ZOOM


class TestPan:
    """Tests for panning and centring."""

    def test_pan_not_scaled_by_zoom(self):
        view = ViewState(zoom=4.0, pan=(10.0, 10.0)).panned(5, -3)
        assert view.pan == (15.0, 7.0)
        assert view.zoom == 4.0

    def test_centered(self):
        view = ViewState(zoom=0.25).centered(1000, 800, 4000, 4000)
        assert view.pan == (0.0, -100.0)
        assert view.to_device((2000, 2000)) == (500.0, 400.0)


class TestSnap:
    """Tests for grid snapping."""

    def test_snap(self):
        assert snap(13) == 10
        assert snap(16) == 20
        assert snap(-14) == -10
        assert snap(7.4, 5) == 5

    def test_snap_point(self):
        assert snap_point((13, 17)) == (10, 20)

    @pytest.mark.parametrize("zoom,expected", [(0.25, (500, 100)), (1.0, (100, 20)), (10.0, (20, 4))])
    def test_grid_spacing(self, zoom, expected):
        assert grid_spacing(zoom) == pytest.approx(expected)
