"""Coordinate transformations.

Constants
----------
.. autosummary::
    :toctree: generated

    DEG_TO_RAD
    RAD_TO_DEG

Functions
---------
.. autosummary::
    :toctree: generated

    compute_ll_difference
    compute_direction
    project_polar
"""
import numpy as np
from . import earth, util

#: Degrees to radians.
DEG_TO_RAD = np.pi / 180
#: Radians to degrees.
RAD_TO_DEG = 1 / DEG_TO_RAD

PROJECTIONS = ['sin_cos', 'cos_sin']


def compute_ll_difference(ll1, ll2):
    """Compute difference between latitude-longitude points in meters.

    Radii of curvature are evaluated at the mean latitude, so the result is
    accurate as long as the points are much closer than Earth radius.

    Parameters
    ----------
    ll1, ll2 : array_like, shape (2,) or (n, 2)
        Points with latitude and longitude.

    Returns
    -------
    dr : ndarray, shape (2,) or (n, 2)
        North and east components of ``ll1 - ll2`` in meters.
    """
    ll1 = np.asarray(ll1, dtype=float)
    ll2 = np.asarray(ll2, dtype=float)
    single = ll1.ndim == 1 and ll2.ndim == 1
    ll1 = np.atleast_2d(ll1)
    ll2 = np.atleast_2d(ll2)
    rn, _, rp = earth.principal_radii(0.5 * (ll1[:, 0] + ll2[:, 0]))
    diff = ll1 - ll2
    diff[:, 1] = util.to_180_range(diff[:, 1])
    result = np.empty_like(diff)
    result[:, 0] = np.deg2rad(diff[:, 0]) * rn
    result[:, 1] = np.deg2rad(diff[:, 1]) * rp
    return result[0] if single else result


def compute_direction(a, b, declination=0.0):
    """Compute direction of a planar vector in degrees.

    The direction is ``atan2(a, b)`` shifted by `declination` and reduced to
    [0, 360). With ``a`` as east and ``b`` as north it is a compass bearing.
    """
    return util.to_360_range(np.arctan2(a, b) * RAD_TO_DEG + declination)


def project_polar(magnitude, direction, projection):
    """Project magnitude and direction into planar coordinates.

    Parameters
    ----------
    magnitude : float
        Distance.
    direction : float
        Direction in degrees.
    projection : 'sin_cos' or 'cos_sin'
        For 'sin_cos' the first coordinate is ``magnitude * sin(direction)`` and
        the second is ``magnitude * cos(direction)``. 'cos_sin' swaps them.

    Returns
    -------
    x, y : float
        Projected coordinates.
    """
    angle = direction * DEG_TO_RAD
    if projection == 'sin_cos':
        return magnitude * np.sin(angle), magnitude * np.cos(angle)
    elif projection == 'cos_sin':
        return magnitude * np.cos(angle), magnitude * np.sin(angle)
    raise ValueError("`projection` must be either 'sin_cos' or 'cos_sin'")
