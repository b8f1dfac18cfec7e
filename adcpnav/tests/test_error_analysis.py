from numpy.testing import assert_allclose
from adcpnav import error_analysis, track
from adcpnav.error_analysis import ErrorState
from adcpnav.gps import GpsState
from adcpnav.util import TRACK_NAMES


def make_tracks():
    return {convention.name: track.TrackState(convention)
            for convention in track.CONVENTIONS}


def test_zero_gps_magnitude_keeps_errors():
    errors = ErrorState()
    for i, name in enumerate(TRACK_NAMES):
        errors.percent_error[name] = 10.0 * i
        errors.direction_error[name] = -5.0 * i
    tracks = make_tracks()
    tracks['bt_earth'].magnitude = 3.0

    assert not error_analysis.recompute(errors, GpsState(), tracks)
    for i, name in enumerate(TRACK_NAMES):
        assert errors.percent_error[name] == 10.0 * i
        assert errors.direction_error[name] == -5.0 * i


def test_recompute():
    errors = ErrorState()
    assert set(errors.percent_error) == set(TRACK_NAMES)
    gps = GpsState()
    gps.magnitude = 100.0
    gps.direction = 350.0

    tracks = make_tracks()
    tracks['bt_earth'].magnitude = 90.0
    tracks['bt_earth'].direction = 10.0
    tracks['bt_instrument'].magnitude = 120.0
    tracks['bt_instrument'].direction = 300.0
    tracks['wp_earth'].magnitude = 100.0
    tracks['wp_earth'].direction = 170.0

    assert error_analysis.recompute(errors, gps, tracks)
    assert_allclose(errors.percent_error['bt_earth'], 10)
    assert_allclose(errors.percent_error['bt_instrument'], 20)
    assert_allclose(errors.percent_error['wp_earth'], 0)
    assert_allclose(errors.percent_error['wp_instrument'], 100)
    assert_allclose(errors.direction_error['bt_earth'], 20)
    assert_allclose(errors.direction_error['bt_instrument'], -50)
    assert_allclose(errors.direction_error['wp_earth'], 180)
    assert_allclose(errors.direction_error['wp_instrument'], 10)
