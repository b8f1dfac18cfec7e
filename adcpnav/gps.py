"""GPS track relative to the first valid fix.

The GPS track serves as the ground truth for the velocity tracks. The first
usable fix becomes the reference, every subsequent usable fix is converted to
distance made good (magnitude) and course made good (direction) from it.

Note that the plotted point uses ``x = y_offset + magnitude * sin(direction)``
and ``y = x_offset + magnitude * cos(direction)``, i.e. the offsets are swapped
compared to the velocity tracks.
"""
import logging
import pandas as pd
from . import transform
from .geodesy import EllipsoidGeodesy
from .util import POINT_COLS


_LOG = logging.getLogger(__name__)

GPS_TITLE = 'GPS'
GPS_COLOR = 'chartreuse'


class GpsState:
    """Accumulated state of the GPS track.

    Attributes
    ----------
    first_fix : `adcpnav.frames.GeoPosition` or None
        Reference fix, None until the first usable fix is observed.
    magnitude : float
        Distance in meters from `first_fix` to the latest fix.
    direction : float
        Bearing in degrees from `first_fix` to the latest fix.
    points : list of tuple
        Plotted points, the first one is always the origin.
    """
    name = 'gps'
    title = GPS_TITLE
    color = GPS_COLOR

    def __init__(self, x_offset=0.0, y_offset=0.0):
        self.x_offset = x_offset
        self.y_offset = y_offset
        self.first_fix = None
        self.magnitude = 0.0
        self.direction = 0.0
        self.points = [self.origin]

    @property
    def origin(self):
        return float(self.x_offset), float(self.y_offset)

    @property
    def path(self):
        return pd.DataFrame(self.points, columns=POINT_COLS)

    def __repr__(self):
        return "GpsState(magnitude={:.3f}, direction={:.3f})".format(
            self.magnitude, self.direction)


class GpsTracker:
    """Convert GPS fixes into a path relative to the first fix.

    Parameters
    ----------
    state : GpsState
        State to update.
    geodesy : object or None, optional
        Provider with ``distance(a, b)`` and ``bearing(a, b)`` methods. If None
        (default), `adcpnav.geodesy.EllipsoidGeodesy` is used.
    """
    def __init__(self, state, geodesy=None):
        self.state = state
        self.geodesy = EllipsoidGeodesy() if geodesy is None else geodesy

    def observe(self, fix):
        """Process a GPS fix.

        Parameters
        ----------
        fix : `adcpnav.frames.GeoPosition` or None
            GPS fix. Missing, invalid and NaN fixes are ignored.

        Returns
        -------
        bool
            Whether the state was updated.
        """
        state = self.state
        if fix is None or not fix.is_usable:
            _LOG.debug("Ignoring unusable GPS fix %s", fix)
            return False

        if state.first_fix is None:
            state.first_fix = fix
            state.points[:] = [state.origin]
            _LOG.debug("GPS reference set to %s", fix)
            return True

        if not state.first_fix.is_usable:
            return False

        state.magnitude = float(self.geodesy.distance(state.first_fix, fix))
        state.direction = float(self.geodesy.bearing(state.first_fix, fix))

        # Offsets are swapped on purpose, see module docstring.
        dx, dy = transform.project_polar(state.magnitude, state.direction,
                                         'sin_cos')
        state.points.append((float(state.y_offset + dx),
                             float(state.x_offset + dy)))
        return True
