"""Ship speed compensation of water profile velocities.

Water profile velocities are measured relative to the moving platform, the
instrument removes the platform motion known from bottom track. Adding it back
gives the motion of water over ground::

    water_earth = bottom_track_earth - water_profile_earth

If the current bottom track is not available or bad, the last good bottom track
sample is used. Without any good bottom track sample the water profile is used
unchanged (with a flipped sign), i.e. the motion stays relative to the platform.
"""
import logging
import numpy as np


_LOG = logging.getLogger(__name__)


class ShipSpeedCompensator:
    """Reconstruct absolute water velocity from water profile.

    Attributes
    ----------
    last_good : ndarray with shape (3,) or None
        Last good bottom track Earth velocity, None if not observed yet.
    """
    def __init__(self):
        self.last_good = None

    def reset(self):
        self.last_good = None

    @staticmethod
    def _current(bottom_track):
        if bottom_track is not None and bottom_track.is_earth_velocity_good():
            return bottom_track.earth_velocity
        return None

    def update(self, bottom_track):
        """Remember bottom track Earth velocity if it is good.

        Parameters
        ----------
        bottom_track : `adcpnav.frames.BottomTrack` or None
            Bottom track payload of the current frame.

        Returns
        -------
        bool
            Whether the stored velocity was replaced.
        """
        current = self._current(bottom_track)
        if current is None:
            return False
        self.last_good = current.copy()
        return True

    def platform_velocity(self, bottom_track):
        """Select bottom track Earth velocity to use for the current frame."""
        current = self._current(bottom_track)
        if current is not None:
            return current
        if self.last_good is not None:
            _LOG.debug("Using the last good bottom track for ship speed")
            return self.last_good
        return np.zeros(3)

    def compensate(self, water_velocity, bottom_track):
        """Compute absolute water velocity.

        Parameters
        ----------
        water_velocity : array_like, shape (3,)
            Water profile East, North, Up velocity relative to the platform.
        bottom_track : `adcpnav.frames.BottomTrack` or None
            Bottom track payload of the same frame.

        Returns
        -------
        ndarray, shape (3,)
            Water velocity with the ship speed added back.
        """
        water_velocity = np.asarray(water_velocity, dtype=float)
        return self.platform_velocity(bottom_track) - water_velocity
