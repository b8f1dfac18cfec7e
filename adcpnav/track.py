"""Trapezoidal integration of velocity into traveled distance.

A track accumulates displacement from a stream of velocity samples. The same
algorithm serves all four velocity streams (bottom track and water profile,
each in Earth and instrument frames), they differ only by a `TrackConvention`
which defines how the accumulated displacement is turned into a direction and a
plotted point.

The integration of a single sample follows these steps:

    1. A sample with bad quality is ignored.
    2. The first good sample only initializes the track, the path contains just
       the origin ``(x_offset, y_offset)``.
    3. The displacement is updated by the trapezoid rule::

           cumulative += 0.5 * (time - previous_time) * (sample + previous_sample)

    4. Magnitude is the Euclidean norm of the displacement and direction is
       ``atan2(a, b) + declination`` reduced to [0, 360), where ``a`` and ``b``
       are components selected by the convention.
    5. A point ``(x_offset, y_offset) + projection(magnitude, direction)`` is
       appended to the path, with both coordinates negated if the convention
       says so.

Time is assumed to increase monotonically. Samples received out of order are
integrated with a negative time step.

Classes
-------
.. autosummary::
    :toctree: generated/

    TrackConvention
    TrackState

Functions
---------
.. autosummary::
    :toctree: generated/

    integrate
"""
import logging
import numpy as np
import pandas as pd
from . import transform
from .util import ENU_COLS, XYZ_COLS, POINT_COLS


_LOG = logging.getLogger(__name__)


class TrackConvention:
    """Orientation convention of a track.

    Parameters
    ----------
    name : str
        Short name used as a key, for example 'bt_earth'.
    title : str
        Human readable title of the plotted path.
    color : str
        Display color of the plotted path.
    axes : list of str
        Names of the velocity components, `ENU_COLS` or `XYZ_COLS`.
    direction_axes : tuple of 2 int
        Indices ``(a, b)`` of displacement components used as ``atan2(a, b)``.
    projection : 'sin_cos' or 'cos_sin'
        Projection of magnitude and direction to a point, see
        `adcpnav.transform.project_polar`.
    negate : bool, optional
        Whether to negate both coordinates of plotted points. Default is False.
    """
    def __init__(self, name, title, color, axes, direction_axes, projection,
                 negate=False):
        if projection not in transform.PROJECTIONS:
            raise ValueError("`projection` must be either 'sin_cos' or 'cos_sin'")
        self.name = name
        self.title = title
        self.color = color
        self.axes = list(axes)
        self.direction_axes = tuple(direction_axes)
        self.projection = projection
        self.negate = negate

    def __repr__(self):
        return "TrackConvention({!r})".format(self.name)


#: Bottom track in East-North-Up frame.
BT_EARTH = TrackConvention('bt_earth', 'BT ENU', 'deeppink', ENU_COLS, (0, 1),
                           'sin_cos')
#: Bottom track in instrument frame.
BT_INSTRUMENT = TrackConvention('bt_instrument', 'BT XYZ', 'darkslategray',
                                XYZ_COLS, (0, 1), 'sin_cos', negate=True)
#: Water profile in East-North-Up frame.
WP_EARTH = TrackConvention('wp_earth', 'WP ENU', 'darkturquoise', ENU_COLS,
                           (0, 1), 'cos_sin')
#: Water profile in instrument frame.
WP_INSTRUMENT = TrackConvention('wp_instrument', 'WP XYZ', 'deeppink', XYZ_COLS,
                                (0, 1), 'cos_sin', negate=True)

CONVENTIONS = [BT_EARTH, BT_INSTRUMENT, WP_EARTH, WP_INSTRUMENT]


class TrackState:
    """Accumulated state of a single track.

    Parameters
    ----------
    convention : TrackConvention
        Orientation convention of the track.
    x_offset, y_offset : float, optional
        Origin of the plotted path. Default is 0.

    Attributes
    ----------
    cumulative : ndarray, shape (3,)
        Accumulated displacement along the convention axes.
    magnitude : float
        Norm of `cumulative`.
    direction : float
        Direction of `cumulative` in degrees within [0, 360).
    points : list of tuple
        Plotted points, the first one is always the origin.
    previous_time : float or None
        Time of the last integrated sample, None until the first good sample.
    previous_velocity : ndarray, shape (3,)
        Last integrated sample.
    """
    def __init__(self, convention, x_offset=0.0, y_offset=0.0):
        self.convention = convention
        self.x_offset = x_offset
        self.y_offset = y_offset
        self.cumulative = np.zeros(3)
        self.magnitude = 0.0
        self.direction = 0.0
        self.points = [self.origin]
        self.previous_time = None
        self.previous_velocity = np.zeros(3)

    @property
    def name(self):
        return self.convention.name

    @property
    def origin(self):
        return float(self.x_offset), float(self.y_offset)

    @property
    def is_initialized(self):
        return self.previous_time is not None

    @property
    def path(self):
        """Plotted points as DataFrame with columns 'x' and 'y'."""
        return pd.DataFrame(self.points, columns=POINT_COLS)

    @property
    def displacement(self):
        """Accumulated displacement as Series indexed by the axis names."""
        return pd.Series(self.cumulative, index=self.convention.axes)

    def __repr__(self):
        return "TrackState({!r}, magnitude={:.3f}, direction={:.3f})".format(
            self.name, self.magnitude, self.direction)


def integrate(state, sample, time, quality=True, declination=0.0):
    """Integrate a velocity sample into a track.

    Parameters
    ----------
    state : TrackState
        Track to update in place.
    sample : array_like, shape (3,)
        Velocity sample along the convention axes.
    time : float
        Time of the sample in seconds.
    quality : bool, optional
        Whether the sample is good. Bad samples leave `state` unchanged.
        Default is True.
    declination : float, optional
        Angle in degrees added to the computed direction. Default is 0.

    Returns
    -------
    bool
        Whether `state` was updated, either initialized or integrated.
    """
    if not quality:
        return False

    sample = np.asarray(sample, dtype=float)
    if sample.shape != (3,):
        raise ValueError("`sample` is expected to have shape (3,)")

    if state.previous_time is None:
        state.previous_time = float(time)
        state.previous_velocity = sample.copy()
        state.points[:] = [state.origin]
        _LOG.debug("Track %s initialized at time %s", state.name, time)
        return True

    dt = time - state.previous_time
    state.cumulative += 0.5 * dt * (sample + state.previous_velocity)
    state.magnitude = float(np.linalg.norm(state.cumulative))

    convention = state.convention
    a, b = convention.direction_axes
    state.direction = transform.compute_direction(
        state.cumulative[a], state.cumulative[b], declination)

    dx, dy = transform.project_polar(state.magnitude, state.direction,
                                     convention.projection)
    x = state.x_offset + dx
    y = state.y_offset + dy
    if convention.negate:
        x = -x
        y = -y
    state.points.append((float(x), float(y)))

    state.previous_time = float(time)
    state.previous_velocity = sample.copy()
    return True
