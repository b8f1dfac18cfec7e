import numpy as np
import pandas as pd
import pytest
from numpy.testing import assert_allclose
from adcpnav import track
from adcpnav.track import (BT_EARTH, BT_INSTRUMENT, WP_EARTH, WP_INSTRUMENT,
                           TrackConvention, TrackState, integrate)


def test_new_state():
    state = TrackState(BT_EARTH, 3.0, -2.0)
    assert not state.is_initialized
    assert state.magnitude == 0
    assert state.direction == 0
    assert_allclose(state.cumulative, 0)
    assert state.points == [(3.0, -2.0)]
    assert isinstance(state.path, pd.DataFrame)
    assert list(state.path.columns) == ['x', 'y']
    assert list(state.displacement.index) == ['east', 'north', 'up']


@pytest.mark.parametrize("convention", track.CONVENTIONS)
def test_first_sample_seeds(convention):
    state = TrackState(convention, 1.5, 2.5)
    assert integrate(state, [1.0, -2.0, 0.5], 10.0)
    assert state.is_initialized
    assert state.previous_time == 10.0
    assert_allclose(state.previous_velocity, [1.0, -2.0, 0.5])
    assert_allclose(state.cumulative, 0)
    assert state.magnitude == 0
    assert state.points == [(1.5, 2.5)]


@pytest.mark.parametrize("v0, v1", [
    ([1.0, 2.0, 3.0], [0.5, -1.0, 0.0]),
    ([-1.0, -0.5, 0.1], [-2.0, 3.0, -0.3]),
])
def test_trapezoid(v0, v1):
    state = TrackState(BT_EARTH)
    integrate(state, v0, 0.0)
    integrate(state, v1, 2.0)
    expected = np.add(v0, v1)
    assert_allclose(state.cumulative, expected)
    assert_allclose(state.magnitude, np.linalg.norm(expected))
    assert len(state.points) == 2


def test_bad_quality_is_skipped():
    state = TrackState(WP_EARTH)
    integrate(state, [1, 0, 0], 0.0)
    integrate(state, [1, 0, 0], 1.0)
    cumulative = state.cumulative.copy()
    points = list(state.points)

    assert not integrate(state, [100, 100, 100], 2.0, quality=False)
    assert_allclose(state.cumulative, cumulative)
    assert state.magnitude == 1
    assert_allclose(state.direction, 90)
    assert state.points == points
    assert state.previous_time == 1.0

    state = TrackState(WP_EARTH)
    assert not integrate(state, [1, 0, 0], 0.0, quality=False)
    assert not state.is_initialized


def test_gap_is_integrated_from_last_good_sample():
    state = TrackState(BT_EARTH)
    integrate(state, [1, 0, 0], 0.0)
    integrate(state, [5, 5, 5], 1.0, quality=False)
    integrate(state, [5, 5, 5], 2.0, quality=False)
    integrate(state, [3, 0, 0], 4.0)
    assert_allclose(state.cumulative, [8, 0, 0])
    assert len(state.points) == 2


def test_negative_time_step():
    state = TrackState(BT_EARTH)
    integrate(state, [1, 0, 0], 5.0)
    integrate(state, [1, 0, 0], 4.0)
    assert_allclose(state.cumulative, [-1, 0, 0])
    assert_allclose(state.direction, 270)


def test_direction_and_points():
    state = TrackState(BT_EARTH)
    integrate(state, [0, 1, 0], 0.0)
    integrate(state, [0, 1, 0], 1.0)
    assert_allclose(state.direction, 0)
    assert_allclose(state.points[-1], [0, 1], atol=1e-15)

    state = TrackState(BT_EARTH, 10.0, 20.0)
    integrate(state, [1, 0, 0], 0.0)
    integrate(state, [1, 0, 0], 1.0)
    assert_allclose(state.direction, 90)
    assert_allclose(state.points[-1], [11, 20], atol=1e-14)

    state = TrackState(WP_EARTH, 10.0, 20.0)
    integrate(state, [1, 0, 0], 0.0)
    integrate(state, [1, 0, 0], 1.0)
    assert_allclose(state.direction, 90)
    assert_allclose(state.points[-1], [10, 21], atol=1e-14)


def test_declination():
    state = TrackState(BT_EARTH)
    integrate(state, [0, 1, 0], 0.0, declination=-10.0)
    integrate(state, [0, 1, 0], 1.0, declination=-10.0)
    assert_allclose(state.direction, 350)

    state = TrackState(BT_INSTRUMENT)
    integrate(state, [-1, 0, 0], 0.0, declination=100.0)
    integrate(state, [-1, 0, 0], 1.0, declination=100.0)
    assert_allclose(state.direction, 10)


def test_direction_range():
    rng = np.random.RandomState(0)
    for convention in track.CONVENTIONS:
        state = TrackState(convention)
        for time in range(200):
            integrate(state, rng.randn(3), float(time),
                      declination=rng.uniform(-720, 720))
            assert 0 <= state.direction < 360


@pytest.mark.parametrize("earth, instrument", [(BT_EARTH, BT_INSTRUMENT),
                                               (WP_EARTH, WP_INSTRUMENT)])
def test_instrument_points_are_negated(earth, instrument):
    rng = np.random.RandomState(1)
    earth_state = TrackState(earth, 3.0, -2.0)
    instrument_state = TrackState(instrument, 3.0, -2.0)
    for time in range(10):
        sample = rng.randn(3)
        integrate(earth_state, sample, float(time))
        integrate(instrument_state, sample, float(time))

    assert earth_state.points[0] == instrument_state.points[0] == (3.0, -2.0)
    assert_allclose(np.asarray(instrument_state.points[1:]),
                    -np.asarray(earth_state.points[1:]))
    assert_allclose(instrument_state.direction, earth_state.direction)


def test_wrong_input():
    state = TrackState(BT_EARTH)
    with pytest.raises(ValueError):
        integrate(state, [1, 2], 0.0)
    with pytest.raises(ValueError):
        TrackConvention('name', 'title', 'red', ['x', 'y', 'z'], (0, 1), 'tan')
