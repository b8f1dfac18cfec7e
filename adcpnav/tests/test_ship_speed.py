from numpy.testing import assert_allclose
from adcpnav.frames import BAD_VELOCITY, BottomTrack
from adcpnav.ship_speed import ShipSpeedCompensator


def test_current_bottom_track():
    compensator = ShipSpeedCompensator()
    bottom_track = BottomTrack(0, [0.5, 0.0, 0.1], [0, 0, 0])
    assert_allclose(compensator.compensate([-1.0, 0.5, 0.1], bottom_track),
                    [1.5, -0.5, 0.0])


def test_last_good_bottom_track():
    compensator = ShipSpeedCompensator()
    assert compensator.update(BottomTrack(0, [1.0, 2.0, 0.0], [0, 0, 0]))
    assert_allclose(compensator.last_good, [1.0, 2.0, 0.0])

    bad = BottomTrack(1, [BAD_VELOCITY, 2.0, 0.0], [0, 0, 0])
    assert not compensator.update(bad)
    assert_allclose(compensator.compensate([0.5, 0.5, 0.0], bad), [0.5, 1.5, 0.0])
    assert_allclose(compensator.compensate([0.5, 0.5, 0.0], None), [0.5, 1.5, 0.0])

    good = BottomTrack(2, [3.0, 0.0, 0.0], [0, 0, 0])
    assert_allclose(compensator.compensate([0.5, 0.5, 0.0], good),
                    [2.5, -0.5, 0.0])


def test_no_bottom_track():
    compensator = ShipSpeedCompensator()
    assert_allclose(compensator.compensate([0.5, -0.5, 0.1], None),
                    [-0.5, 0.5, -0.1])
    compensator.update(BottomTrack(0, [1.0, 1.0, 1.0], [0, 0, 0]))
    compensator.reset()
    assert compensator.last_good is None
    assert_allclose(compensator.platform_velocity(None), [0, 0, 0])
