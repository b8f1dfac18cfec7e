"""Utility functions.

Functions
---------
.. autosummary::
    :toctree: generated

    to_360_range
    to_180_range
    percent_error
    angle_difference
"""
import numpy as np
import pandas as pd


ENU_COLS = ['east', 'north', 'up']
XYZ_COLS = ['x', 'y', 'z']
LL_COLS = ['lat', 'lon']
POINT_COLS = ['x', 'y']
TRACK_NAMES = ['bt_earth', 'bt_instrument', 'wp_earth', 'wp_instrument']


def _is_pandas(angle):
    return isinstance(angle, (pd.Series, pd.DataFrame))


def to_360_range(angle):
    """Reduce angle in degrees to the range of [0, 360)."""
    is_pandas = _is_pandas(angle)
    if not is_pandas:
        angle = np.asarray(angle, dtype=float)
    result = angle % 360
    # Tiny negative values wrap to exactly 360 in floating point.
    if is_pandas or result.ndim > 0:
        result[result >= 360] -= 360
    elif result >= 360:
        result -= 360
    return result if is_pandas or result.ndim > 0 else float(result)


def to_180_range(angle):
    """Reduce angle in degrees to the range of (-180, 180]."""
    is_pandas = _is_pandas(angle)
    if not is_pandas:
        angle = np.asarray(angle, dtype=float)
    result = angle % 360
    if is_pandas or result.ndim > 0:
        result[result > 180] -= 360
    elif result > 180:
        result -= 360
    return result if is_pandas or result.ndim > 0 else float(result)


def percent_error(reference, value):
    """Compute percent error of a value relative to a reference.

    Parameters
    ----------
    reference : array_like
        Reference (true) value, must be non-zero.
    value : array_like
        Measured or estimated value.

    Returns
    -------
    float or ndarray
        ``|value - reference| / |reference| * 100``.
    """
    reference = np.asarray(reference, dtype=float)
    value = np.asarray(value, dtype=float)
    result = np.abs(value - reference) / np.abs(reference) * 100
    return float(result) if result.ndim == 0 else result


def angle_difference(reference, value):
    """Compute signed smallest angle from `reference` to `value` in degrees.

    The result lies in (-180, 180]. Positive values mean `value` is clockwise
    from `reference` when angles are measured as compass bearings.
    """
    return to_180_range(np.subtract(value, reference))


class Bunch(dict):
    """Dictionary with attribute access to its items."""
    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

    def __repr__(self):
        if self.keys():
            m = max(map(len, list(self.keys()))) + 1
            return '\n'.join(['{}: {!r}'.format(k.rjust(m), v)
                              for k, v in self.items()])
        else:
            return self.__class__.__name__ + "()"

    def __dir__(self):
        return list(self.keys())
