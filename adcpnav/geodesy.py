"""Geodesy providers.

A geodesy provider computes distance and bearing between two geographic
positions. The GPS tracker only relies on two methods, so any object with
``distance(a, b)`` and ``bearing(a, b)`` can be used instead of the classes
defined here.

Positions are either `adcpnav.frames.GeoPosition` instances or sequences
``(lat, lon)`` in degrees.

Classes
-------
.. autosummary::
    :toctree: generated/

    Geodesy
    EllipsoidGeodesy
    SphereGeodesy
"""
import numpy as np
from . import earth, transform, util


def _to_ll(position):
    if hasattr(position, 'lat') and hasattr(position, 'lon'):
        return np.array([position.lat, position.lon], dtype=float)
    return np.asarray(position, dtype=float)


class Geodesy:
    """Base class for geodesy providers.

    See Also
    --------
    EllipsoidGeodesy
    SphereGeodesy
    """
    def distance(self, a, b):
        """Compute distance from `a` to `b` in meters."""
        raise NotImplementedError

    def bearing(self, a, b):
        """Compute bearing from `a` to `b` in degrees within [0, 360)."""
        raise NotImplementedError


class EllipsoidGeodesy(Geodesy):
    """Local tangent plane geodesy on WGS84 ellipsoid.

    The displacement is computed with `adcpnav.transform.compute_ll_difference`,
    which is accurate for separations of a few tens of kilometers, the usual
    extent of a survey run.
    """
    def distance(self, a, b):
        north, east = transform.compute_ll_difference(_to_ll(b), _to_ll(a))
        return float(np.hypot(north, east))

    def bearing(self, a, b):
        north, east = transform.compute_ll_difference(_to_ll(b), _to_ll(a))
        return transform.compute_direction(east, north)


class SphereGeodesy(Geodesy):
    """Great circle geodesy on a sphere.

    Parameters
    ----------
    radius : float, optional
        Sphere radius in meters. Default is `adcpnav.earth.MEAN_RADIUS`.
    """
    def __init__(self, radius=earth.MEAN_RADIUS):
        self.radius = radius

    def distance(self, a, b):
        lat1, lon1 = np.deg2rad(_to_ll(a))
        lat2, lon2 = np.deg2rad(_to_ll(b))
        h = (np.sin(0.5 * (lat2 - lat1)) ** 2 +
             np.cos(lat1) * np.cos(lat2) * np.sin(0.5 * (lon2 - lon1)) ** 2)
        return float(2 * self.radius * np.arcsin(np.sqrt(min(h, 1.0))))

    def bearing(self, a, b):
        lat1, lon1 = np.deg2rad(_to_ll(a))
        lat2, lon2 = np.deg2rad(_to_ll(b))
        dlon = lon2 - lon1
        y = np.sin(dlon) * np.cos(lat2)
        x = (np.cos(lat1) * np.sin(lat2) -
             np.sin(lat1) * np.cos(lat2) * np.cos(dlon))
        return util.to_360_range(np.rad2deg(np.arctan2(y, x)))
