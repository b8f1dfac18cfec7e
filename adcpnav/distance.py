"""Distance traveled computed from ensembles.

`DistanceTraveled` receives frames one by one and maintains five tracks:

    - GPS track relative to the first fix (ground truth)
    - Bottom track in Earth frame ('bt_earth')
    - Bottom track in instrument frame ('bt_instrument')
    - Water profile in Earth frame with ship speed added back ('wp_earth')
    - Water profile in instrument frame ('wp_instrument')

After each frame the magnitude and direction errors of the velocity tracks
relative to GPS are recomputed.

Frames with missing or bad data are never rejected as a whole: each track
skips the frame independently and the status returned from
`DistanceTraveled.accept` tells which parts were updated.

Classes
-------
.. autosummary::
    :toctree: generated/

    DistanceTraveled
"""
import logging
import numpy as np
import pandas as pd
from . import error_analysis, track
from .error_analysis import ErrorState
from .gps import GpsState, GpsTracker
from .ship_speed import ShipSpeedCompensator
from .util import Bunch, TRACK_NAMES


_LOG = logging.getLogger(__name__)

#: Default water profile bin used for navigation.
DEFAULT_NAV_BIN = 1
#: Default declination in degrees.
DEFAULT_DECLINATION = 0.0
#: Minimum number of beams to use bottom track.
MIN_BEAMS = 3

SUMMARY_COLS = ['magnitude', 'direction', 'percent_error', 'direction_error']


class DistanceTraveled:
    """Accumulate distance traveled from GPS, bottom track and water profile.

    Parameters
    ----------
    nav_bin : int, optional
        Water profile bin used for the water profile tracks. It is clamped to
        the bins available in each frame. Default is `DEFAULT_NAV_BIN`.
    x_offset, y_offset : float, optional
        Origin of all plotted paths. Default is 0.
    declination : float, optional
        Angle in degrees added to directions of the velocity tracks.
        Default is `DEFAULT_DECLINATION`.
    geodesy : object or None, optional
        Geodesy provider for the GPS track. If None (default),
        `adcpnav.geodesy.EllipsoidGeodesy` is used.

    Attributes
    ----------
    gps : `adcpnav.gps.GpsState`
        GPS track.
    tracks : dict
        Velocity tracks (`adcpnav.track.TrackState`) keyed by name.
    errors : `adcpnav.error_analysis.ErrorState`
        Errors of the velocity tracks relative to GPS.
    """
    def __init__(self, nav_bin=DEFAULT_NAV_BIN, x_offset=0.0, y_offset=0.0,
                 declination=DEFAULT_DECLINATION, geodesy=None):
        self.nav_bin = nav_bin
        self.declination = declination
        self._x_offset = x_offset
        self._y_offset = y_offset
        self.geodesy = geodesy
        self.reset()

    @property
    def x_offset(self):
        return self._x_offset

    @x_offset.setter
    def x_offset(self, value):
        self._x_offset = value
        for state in self._states():
            state.x_offset = value

    @property
    def y_offset(self):
        return self._y_offset

    @y_offset.setter
    def y_offset(self, value):
        self._y_offset = value
        for state in self._states():
            state.y_offset = value

    def _states(self):
        return [self.gps] + list(self.tracks.values())

    def reset(self):
        """Discard all accumulated data."""
        self.gps = GpsState(self._x_offset, self._y_offset)
        self._gps_tracker = GpsTracker(self.gps, self.geodesy)
        self.tracks = {
            convention.name: track.TrackState(convention, self._x_offset,
                                              self._y_offset)
            for convention in track.CONVENTIONS
        }
        self.errors = ErrorState(TRACK_NAMES)
        self._compensator = ShipSpeedCompensator()
        _LOG.info("Distance traveled reset")

    clear = reset

    def verify_nav_bin(self, frame):
        """Clamp navigation bin to the bins available in `frame`."""
        nav_bin = self.nav_bin
        if frame.num_bins is not None:
            if nav_bin >= frame.num_bins:
                return frame.num_bins - 1
            if nav_bin < 0:
                return 0
        return nav_bin

    def _integrate(self, name, sample, time, quality):
        return track.integrate(self.tracks[name], sample, time, quality,
                               self.declination)

    def _accept_bottom_track(self, frame, status):
        bottom_track = frame.bottom_track
        if not frame.is_bottom_track_avail:
            _LOG.debug("No bottom track in frame")
            return
        if bottom_track.num_beams < MIN_BEAMS:
            _LOG.debug("Bottom track has %d beams, at least %d required",
                       bottom_track.num_beams, MIN_BEAMS)
            return

        status.bt_earth = self._integrate(
            'bt_earth', bottom_track.earth_velocity,
            bottom_track.first_ping_time,
            bottom_track.is_earth_velocity_good())
        status.bt_instrument = self._integrate(
            'bt_instrument', bottom_track.instrument_velocity,
            bottom_track.first_ping_time,
            bottom_track.is_instrument_velocity_good())

    def _accept_water_profile(self, frame, status):
        if not frame.is_ancillary_avail:
            _LOG.debug("No ancillary data in frame, water profile skipped")
            return

        nav_bin = self.verify_nav_bin(frame)
        time = frame.ancillary.first_ping_time

        profile = frame.earth_profile
        if frame.is_earth_profile_avail and profile.is_bin_good(nav_bin):
            sample = self._compensator.compensate(profile[nav_bin],
                                                  frame.bottom_track)
            status.wp_earth = self._integrate('wp_earth', sample, time, True)

        profile = frame.instrument_profile
        if frame.is_instrument_profile_avail and profile.is_bin_good(nav_bin):
            status.wp_instrument = self._integrate(
                'wp_instrument', profile[nav_bin], time, True)

    def accept(self, frame):
        """Process a single frame.

        Parameters
        ----------
        frame : `adcpnav.frames.Frame`
            Measurement frame. None is accepted and ignored.

        Returns
        -------
        Bunch
            Boolean flags 'gps', 'bt_earth', 'bt_instrument', 'wp_earth',
            'wp_instrument' telling which tracks were updated and 'errors'
            telling whether the errors were recomputed.
        """
        status = Bunch(gps=False, bt_earth=False, bt_instrument=False,
                       wp_earth=False, wp_instrument=False, errors=False)
        if frame is None:
            return status

        if frame.is_gps_avail:
            status.gps = self._gps_tracker.observe(frame.gps)

        self._accept_bottom_track(frame, status)
        self._accept_water_profile(frame, status)
        self._compensator.update(frame.bottom_track)

        status.errors = error_analysis.recompute(self.errors, self.gps,
                                                 self.tracks)
        return status

    add_incoming_data = accept

    def replay(self, frames, subsystem=None, subsystem_config=None):
        """Accept frames from a history buffer.

        Parameters
        ----------
        frames : sequence of `adcpnav.frames.Frame`
            Frames in arrival order, for example `adcpnav.frames.FrameBuffer`.
            None entries are skipped.
        subsystem, subsystem_config : object, optional
            If not None, only frames with equal identifiers are accepted.

        Returns
        -------
        int
            Number of accepted frames.
        """
        n_accepted = 0
        n_total = 0
        for frame in frames:
            n_total += 1
            if frame is None:
                continue
            if subsystem is not None and frame.subsystem != subsystem:
                continue
            if (subsystem_config is not None and
                    frame.subsystem_config != subsystem_config):
                continue
            self.accept(frame)
            n_accepted += 1
        _LOG.info("Replayed %d of %d frames", n_accepted, n_total)
        return n_accepted

    def paths(self):
        """Get plotted paths of all tracks.

        Returns
        -------
        dict
            DataFrames with columns 'x' and 'y' keyed by track name, GPS path is
            under 'gps'.
        """
        result = {'gps': self.gps.path}
        for name, state in self.tracks.items():
            result[name] = state.path
        return result

    def series(self):
        """Get paths with display attributes for plotting.

        Returns
        -------
        list of Bunch
            Each element has 'name', 'title', 'color' and 'points' (DataFrame).
        """
        result = [Bunch(name='gps', title=self.gps.title, color=self.gps.color,
                        points=self.gps.path)]
        for name, state in self.tracks.items():
            result.append(Bunch(name=name, title=state.convention.title,
                                color=state.convention.color,
                                points=state.path))
        return result

    def summary(self):
        """Get magnitudes, directions and errors of all tracks.

        Returns
        -------
        DataFrame
            Indexed by track name with columns 'magnitude', 'direction',
            'percent_error' and 'direction_error'. Errors of GPS are NaN.
        """
        rows = [[self.gps.magnitude, self.gps.direction, np.nan, np.nan]]
        for name, state in self.tracks.items():
            rows.append([state.magnitude, state.direction,
                         self.errors.percent_error[name],
                         self.errors.direction_error[name]])
        return pd.DataFrame(rows, index=['gps'] + list(self.tracks),
                            columns=SUMMARY_COLS)

    def __str__(self):
        lines = ["GPS Mag={:.3f} Dir={:.3f}".format(self.gps.magnitude,
                                                    self.gps.direction)]
        for name, state in self.tracks.items():
            components = " ".join(
                "{}={:.3f}".format(axis[0].upper(), value)
                for axis, value in zip(state.convention.axes, state.cumulative))
            lines.append("{} {} Mag={:.3f} Dir={:.3f} PE={:.3f} DE={:.3f}".format(
                state.convention.title, components, state.magnitude,
                state.direction, self.errors.percent_error[name],
                self.errors.direction_error[name]))
        return "\n".join(lines)
