"""Comparison of velocity tracks against the GPS track."""
import logging
from . import util
from .util import TRACK_NAMES


_LOG = logging.getLogger(__name__)


class ErrorState:
    """Errors of each velocity track relative to GPS.

    Attributes
    ----------
    percent_error : dict
        Magnitude error in percent of GPS magnitude, keyed by track name.
    direction_error : dict
        Signed direction error in degrees within (-180, 180], keyed by track
        name.
    """
    def __init__(self, names=TRACK_NAMES):
        self.percent_error = {name: 0.0 for name in names}
        self.direction_error = {name: 0.0 for name in names}

    def __repr__(self):
        return "ErrorState(percent_error={}, direction_error={})".format(
            self.percent_error, self.direction_error)


def recompute(errors, gps, tracks):
    """Recompute track errors against GPS.

    Nothing is done while GPS magnitude is zero, the previous error values are
    kept.

    Parameters
    ----------
    errors : ErrorState
        State to update in place.
    gps : `adcpnav.gps.GpsState`
        GPS track.
    tracks : dict
        Velocity tracks (`adcpnav.track.TrackState`) keyed by name.

    Returns
    -------
    bool
        Whether the errors were recomputed.
    """
    if gps.magnitude == 0:
        _LOG.debug("GPS magnitude is zero, errors are not updated")
        return False

    for name, track in tracks.items():
        errors.percent_error[name] = util.percent_error(gps.magnitude,
                                                        track.magnitude)
        errors.direction_error[name] = util.angle_difference(gps.direction,
                                                             track.direction)
    return True
