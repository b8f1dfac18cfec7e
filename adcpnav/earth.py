"""Earth geometry.

This module defines constants of the WGS84 ellipsoid and the radii of curvature
used to convert small latitude and longitude differences into meters. All
definitions can be found in [1]_.

Constants
---------
.. autosummary::
    :toctree: generated

    A
    E2
    MEAN_RADIUS

Functions
---------
.. autosummary::
    :toctree: generated/

    principal_radii

References
----------
.. [1] P. D. Groves, "Principles of GNSS, Inertial, and Multisensor Integrated
       Navigation Systems", 2nd edition
"""
import numpy as np


#: Semi major axis of Earth ellipsoid.
A = 6378137.0
#: Squared eccentricity of Earth ellipsoid
E2 = 6.6943799901413e-3
#: Mean radius of Earth used for spherical approximations.
MEAN_RADIUS = 6371008.8


def principal_radii(lat, alt=0):
    """Compute the principal radii of curvature of Earth ellipsoid.

    Parameters
    ----------
    lat : array_like
        Latitude.
    alt : array_like, optional
        Altitude. Default is 0, which is appropriate for sea surface positions.

    Returns
    -------
    rn : float or ndarray
        Principle radius in North direction.
    re : float or ndarray
        Principle radius in East direction.
    rp : float or ndarray
        Radius of cross-section along the parallel.
    """
    sin_lat = np.sin(np.deg2rad(lat))
    cos_lat = np.sqrt(1 - sin_lat**2)

    x = 1 - E2 * sin_lat ** 2
    re = A / np.sqrt(x)
    rn = re * (1 - E2) / x

    return rn + alt, re + alt, (re + alt) * cos_lat
