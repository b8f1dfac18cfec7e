import numpy as np
from numpy.testing import assert_allclose
from adcpnav.frames import GeoPosition
from adcpnav.geodesy import EllipsoidGeodesy, Geodesy
from adcpnav.gps import GpsState, GpsTracker


class FixedGeodesy(Geodesy):
    def __init__(self, distance, bearing):
        self._distance = distance
        self._bearing = bearing

    def distance(self, a, b):
        return self._distance

    def bearing(self, a, b):
        return self._bearing


def test_first_fix():
    state = GpsState(1.0, 2.0)
    tracker = GpsTracker(state)
    assert state.points == [(1.0, 2.0)]

    assert not tracker.observe(None)
    assert not tracker.observe(GeoPosition(32, -117, invalid=True))
    assert not tracker.observe(GeoPosition(32, np.nan))
    assert not tracker.observe(GeoPosition(np.nan, -117))
    assert state.first_fix is None

    fix = GeoPosition(32, -117)
    assert tracker.observe(fix)
    assert state.first_fix is fix
    assert state.magnitude == 0
    assert state.points == [(1.0, 2.0)]


def test_relative_track():
    state = GpsState()
    tracker = GpsTracker(state, EllipsoidGeodesy())
    tracker.observe(GeoPosition(32.0, -117.0))
    tracker.observe(GeoPosition(32.001, -117.0))
    assert len(state.points) == 2
    assert_allclose(state.magnitude, 110.9, rtol=2e-3)
    assert_allclose(state.direction, 0, atol=1e-9)
    assert_allclose(state.points[1], [0, state.magnitude], atol=1e-9)

    assert not tracker.observe(GeoPosition(33.0, -117.0, invalid=True))
    assert len(state.points) == 2

    tracker.observe(GeoPosition(32.0, -117.0))
    assert_allclose(state.magnitude, 0, atol=1e-9)
    assert len(state.points) == 3


def test_offsets_are_swapped():
    state = GpsState(x_offset=10.0, y_offset=-5.0)
    tracker = GpsTracker(state, FixedGeodesy(2.0, 90.0))
    tracker.observe(GeoPosition(0, 0))
    tracker.observe(GeoPosition(0, 1))
    assert state.points[0] == (10.0, -5.0)
    assert_allclose(state.points[1], [-5.0 + 2.0, 10.0], atol=1e-14)
    assert state.magnitude == 2.0
    assert state.direction == 90.0
