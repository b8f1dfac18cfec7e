"""adcpnav: distance traveled and dead reckoning from ADCP data in Python.

An acoustic Doppler current profiler (ADCP) outputs a stream of frames
(ensembles). A frame may carry a GPS fix, bottom track velocity (platform
velocity over the seafloor) and water profile velocities (water velocity in
depth bins relative to the platform). The package integrates the velocities
into traveled paths and compares them against the GPS path.

Type naming conventions
-----------------------
    - `Vector3` - ndarray with shape (3,) holding either East-North-Up components
      (named by `ENU_COLS` - 'east', 'north', 'up') or instrument X-Y-Z
      components (named by `XYZ_COLS` - 'x', 'y', 'z')
    - `Path` - DataFrame with columns 'x' and 'y' containing plotted points of a
      track, one row per accepted sample. The first row is always the origin
      given by the configured offsets
    - `Frame` - `adcpnav.frames.Frame` instance with optional payloads

Units of measurement
--------------------
Velocities are in m/s, time in seconds, distances in meters. Angles (latitude,
longitude, directions, declination) are in degrees. Directions are measured
within [0, 360) and direction errors within (-180, 180].

Usage
-----
Frames are processed strictly one after another::

    distance = DistanceTraveled(nav_bin=1, declination=12.0)
    for frame in frames:
        distance.accept(frame)
    print(distance.summary())

Modules
-------
.. autosummary::
   :toctree: generated/

   distance
   error_analysis
   earth
   frames
   geodesy
   gps
   ship_speed
   track
   transform
   util
"""
from . import (distance, earth, error_analysis, frames, geodesy, gps, ship_speed,
               track, transform, util)
from .distance import DistanceTraveled
from .frames import (Ancillary, BottomTrack, Frame, FrameBuffer, GeoPosition,
                     VelocityProfile)

__version__ = "0.1"
