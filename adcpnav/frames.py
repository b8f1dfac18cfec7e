"""Measurement frames (ensembles) produced by the instrument.

A frame bundles the data types an instrument outputs for one ping cycle. Every
payload is optional: a frame without bottom track simply has ``bottom_track``
set to None. The accumulation engine consumes frames only through the
availability and quality predicates defined here.

Classes
-------
.. autosummary::
    :toctree: generated/

    GeoPosition
    BottomTrack
    VelocityProfile
    Ancillary
    Frame
    FrameBuffer

Functions
---------
.. autosummary::
    :toctree: generated/

    is_velocity_good
    frames_from_dataframe
"""
import numpy as np
import pandas as pd
from .util import ENU_COLS, XYZ_COLS


#: Value the instrument writes in place of a velocity it could not measure.
BAD_VELOCITY = 88.888


def is_velocity_good(velocity):
    """Check that all velocity components are finite and not marked as bad."""
    velocity = np.asarray(velocity, dtype=float)
    return bool(np.all(np.isfinite(velocity)) and
                not np.any(np.isclose(velocity, BAD_VELOCITY)))


def _as_vector(velocity, name):
    velocity = np.asarray(velocity, dtype=float)
    if velocity.shape != (3,):
        raise ValueError(f"`{name}` is expected to have shape (3,)")
    return velocity


class GeoPosition:
    """Geographic position from a GPS fix.

    Parameters
    ----------
    lat, lon : float
        Latitude and longitude in degrees.
    invalid : bool, optional
        Whether the receiver flagged the fix as invalid. Default is False.
    """
    def __init__(self, lat, lon, invalid=False):
        self.lat = float(lat)
        self.lon = float(lon)
        self.invalid = bool(invalid)

    @property
    def is_usable(self):
        """Whether the fix is valid and both coordinates are numbers."""
        return not (self.invalid or np.isnan(self.lat) or np.isnan(self.lon))

    def __repr__(self):
        return "GeoPosition(lat={}, lon={}, invalid={})".format(
            self.lat, self.lon, self.invalid)


class BottomTrack:
    """Bottom track payload: platform velocity relative to the seafloor.

    Parameters
    ----------
    first_ping_time : float
        Time of the first ping in seconds.
    earth_velocity : array_like, shape (3,)
        East, North and Up velocity.
    instrument_velocity : array_like, shape (3,)
        X, Y and Z velocity.
    num_beams : int, optional
        Number of beams of the system. Default is 4.
    earth_good, instrument_good : bool or None, optional
        Quality flags computed by the instrument. If None (default), a velocity
        is considered good when `is_velocity_good` holds for it.
    """
    def __init__(self, first_ping_time, earth_velocity, instrument_velocity,
                 num_beams=4, earth_good=None, instrument_good=None):
        self.first_ping_time = float(first_ping_time)
        self.earth_velocity = _as_vector(earth_velocity, 'earth_velocity')
        self.instrument_velocity = _as_vector(instrument_velocity,
                                              'instrument_velocity')
        self.num_beams = int(num_beams)
        self.earth_good = earth_good
        self.instrument_good = instrument_good

    def is_earth_velocity_good(self):
        if self.earth_good is None:
            return is_velocity_good(self.earth_velocity)
        return bool(self.earth_good)

    def is_instrument_velocity_good(self):
        if self.instrument_good is None:
            return is_velocity_good(self.instrument_velocity)
        return bool(self.instrument_good)


class VelocityProfile:
    """Water profile velocities for all depth bins.

    Parameters
    ----------
    velocity : array_like, shape (n_bins, 3) or (n_bins, 4)
        Velocity for each bin. Only the first 3 columns are used, the optional
        fourth one (error velocity) is ignored.
    good : array_like of bool with shape (n_bins,) or None, optional
        Quality flags per bin. If None (default), computed with
        `is_velocity_good` for each bin.
    """
    def __init__(self, velocity, good=None):
        velocity = np.atleast_2d(np.asarray(velocity, dtype=float))
        if velocity.ndim != 2 or velocity.shape[1] < 3:
            raise ValueError("`velocity` is expected to have shape (n_bins, 3)")
        self.velocity = velocity[:, :3]
        if good is None:
            good = [is_velocity_good(row) for row in self.velocity]
        good = np.asarray(good, dtype=bool)
        if good.shape != (len(self.velocity),):
            raise ValueError("`good` must have one element per bin")
        self.good = good

    @property
    def num_bins(self):
        return len(self.velocity)

    def is_bin_good(self, index):
        """Check quality of a bin, bins outside the profile are never good."""
        return 0 <= index < self.num_bins and bool(self.good[index])

    def __getitem__(self, index):
        return self.velocity[index]


class Ancillary:
    """Ancillary payload carrying the water profile timing."""
    def __init__(self, first_ping_time):
        self.first_ping_time = float(first_ping_time)


class Frame:
    """Single measurement frame (ensemble).

    Parameters
    ----------
    subsystem : object, optional
        Identifier of the instrument subsystem which produced the frame.
    subsystem_config : object, optional
        Identifier of the subsystem configuration.
    num_bins : int or None, optional
        Number of depth bins. If None, taken from the profiles when present.
    gps : GeoPosition or None, optional
        GPS fix.
    bottom_track : BottomTrack or None, optional
        Bottom track payload.
    earth_profile, instrument_profile : VelocityProfile or None, optional
        Water profile velocities in Earth and instrument frames.
    ancillary : Ancillary or None, optional
        Ancillary payload, required to use the water profiles.
    """
    def __init__(self, subsystem=None, subsystem_config=None, num_bins=None,
                 gps=None, bottom_track=None, earth_profile=None,
                 instrument_profile=None, ancillary=None):
        self.subsystem = subsystem
        self.subsystem_config = subsystem_config
        if num_bins is None:
            for profile in (earth_profile, instrument_profile):
                if profile is not None:
                    num_bins = profile.num_bins
                    break
        self.num_bins = num_bins
        self.gps = gps
        self.bottom_track = bottom_track
        self.earth_profile = earth_profile
        self.instrument_profile = instrument_profile
        self.ancillary = ancillary

    @property
    def is_gps_avail(self):
        return self.gps is not None

    @property
    def is_bottom_track_avail(self):
        return self.bottom_track is not None

    @property
    def is_earth_profile_avail(self):
        return self.earth_profile is not None

    @property
    def is_instrument_profile_avail(self):
        return self.instrument_profile is not None

    @property
    def is_ancillary_avail(self):
        return self.ancillary is not None


class FrameBuffer:
    """Bounded history of frames in arrival order.

    When the number of frames exceeds `limit`, the oldest ones are dropped.

    Parameters
    ----------
    limit : int, optional
        Maximum number of stored frames. Default is 100.
    """
    def __init__(self, limit=100):
        self._frames = []
        self.limit = limit

    @property
    def limit(self):
        return self._limit

    @limit.setter
    def limit(self, value):
        if value < 1:
            raise ValueError("`limit` must be positive")
        self._limit = int(value)
        self._trim()

    def _trim(self):
        excess = len(self._frames) - self._limit
        if excess > 0:
            del self._frames[:excess]

    def append(self, frame):
        self._frames.append(frame)
        self._trim()

    def clear(self):
        self._frames.clear()

    def __len__(self):
        return len(self._frames)

    def __getitem__(self, index):
        return self._frames[index]

    def __iter__(self):
        return iter(self._frames)


BT_EARTH_COLS = ['bt_' + col for col in ENU_COLS]
BT_INSTRUMENT_COLS = ['bt_' + col for col in XYZ_COLS]
WP_EARTH_COLS = ['wp_' + col for col in ENU_COLS]
WP_INSTRUMENT_COLS = ['wp_' + col for col in XYZ_COLS]


def _has(row, cols):
    return all(col in row.index and pd.notna(row[col]) for col in cols)


def frames_from_dataframe(data):
    """Create frames from a table with one row per frame.

    Recognized columns are:

        - 'subsystem', 'subsystem_config' - frame identity
        - 'lat', 'lon', 'gps_invalid' - GPS fix
        - 'bt_time', 'bt_beams', 'bt_east', 'bt_north', 'bt_up', 'bt_x', 'bt_y',
          'bt_z' - bottom track
        - 'wp_time', 'wp_east', 'wp_north', 'wp_up', 'wp_x', 'wp_y', 'wp_z' -
          water profile of a single (navigation) bin with its ping time

    Missing columns or NaN values mean the corresponding payload is absent. For
    bottom track a NaN velocity component with a valid 'bt_time' gives a
    payload with a bad velocity of that type.

    Parameters
    ----------
    data : DataFrame
        Frame table. Rows are converted in order.

    Returns
    -------
    list of Frame
        Created frames.
    """
    frames = []
    for _, row in data.iterrows():
        gps = None
        if _has(row, ['lat', 'lon']):
            invalid = row.get('gps_invalid', False)
            gps = GeoPosition(row['lat'], row['lon'],
                              False if pd.isna(invalid) else bool(invalid))

        bottom_track = None
        if _has(row, ['bt_time']):
            earth = [row.get(col, np.nan) for col in BT_EARTH_COLS]
            instrument = [row.get(col, np.nan) for col in BT_INSTRUMENT_COLS]
            num_beams = row.get('bt_beams', 4)
            bottom_track = BottomTrack(row['bt_time'], earth, instrument,
                                       4 if pd.isna(num_beams) else num_beams)

        ancillary = None
        earth_profile = None
        instrument_profile = None
        if _has(row, ['wp_time']):
            ancillary = Ancillary(row['wp_time'])
            if _has(row, WP_EARTH_COLS):
                earth_profile = VelocityProfile([row[WP_EARTH_COLS].values])
            if _has(row, WP_INSTRUMENT_COLS):
                instrument_profile = VelocityProfile(
                    [row[WP_INSTRUMENT_COLS].values])

        frames.append(Frame(row.get('subsystem'), row.get('subsystem_config'),
                            gps=gps, bottom_track=bottom_track,
                            earth_profile=earth_profile,
                            instrument_profile=instrument_profile,
                            ancillary=ancillary))
    return frames
