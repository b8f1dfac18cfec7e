"""Helper Functions"""
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from adcpnav import earth


def plot_paths(distance, ax=None):
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    for series in distance.series():
        points = series.points
        ax.plot(points.x, points.y, color=series.color, linewidth=1,
                label=series.title)

    ax.set_xlabel('m')
    ax.set_ylabel('m')
    ax.set_aspect('equal')
    ax.legend(loc='best')
    ax.set_title('distance traveled')
    return ax


def plot_errors(history, step=1):
    history = history.iloc[::step]

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(15, 5))

    ax1.plot(history.index, history.filter(like='percent_error'))
    ax1.legend([col.replace('_percent_error', '') for col in
                history.filter(like='percent_error').columns], loc='best')
    ax1.set_xlabel('frame')
    ax1.set_ylabel('%')
    ax1.set_title('magnitude error')

    ax2.plot(history.index, history.filter(like='direction_error'))
    ax2.legend([col.replace('_direction_error', '') for col in
                history.filter(like='direction_error').columns], loc='best')
    ax2.set_xlabel('frame')
    ax2.set_ylabel('deg')
    ax2.set_title('direction error')

    plt.tight_layout()


def run_with_history(distance, frames):
    """Accept frames and collect errors after each of them."""
    rows = []
    for frame in frames:
        distance.accept(frame)
        row = {}
        for name in distance.tracks:
            row[name + '_percent_error'] = distance.errors.percent_error[name]
            row[name + '_direction_error'] = distance.errors.direction_error[name]
        rows.append(row)
    return pd.DataFrame(rows)


def generate_survey(n_frames, dt, speed, heading, current=(0.1, 0.0),
                    lat=32.0, lon=-117.0, turn_spread=5, bad_fraction=0.05,
                    random_state=0):
    """Generate a frame table for a boat moving over a uniform current.

    The table can be converted with `adcpnav.frames.frames_from_dataframe`.
    """
    rng = np.random.RandomState(random_state)
    heading = heading + np.cumsum(rng.uniform(-turn_spread, turn_spread,
                                              n_frames))
    angle = np.deg2rad(heading)
    ve = speed * np.sin(angle)
    vn = speed * np.cos(angle)
    time = dt * np.arange(n_frames)

    north = np.hstack((0, np.cumsum(0.5 * dt * (vn[1:] + vn[:-1]))))
    east = np.hstack((0, np.cumsum(0.5 * dt * (ve[1:] + ve[:-1]))))
    rn, _, rp = earth.principal_radii(lat)

    data = pd.DataFrame({
        'lat': lat + np.rad2deg(north / rn),
        'lon': lon + np.rad2deg(east / rp),
        'bt_time': time,
        'bt_east': ve,
        'bt_north': vn,
        'bt_up': 0.0,
        'bt_x': 0.0,
        'bt_y': speed * np.ones(n_frames),
        'bt_z': 0.0,
        'wp_time': time,
        'wp_east': ve - current[0],
        'wp_north': vn - current[1],
        'wp_up': 0.0,
        'wp_x': 0.0,
        'wp_y': speed * np.ones(n_frames),
        'wp_z': 0.0,
    })

    bad = rng.uniform(size=n_frames) < bad_fraction
    data.loc[bad, ['bt_east', 'bt_north', 'bt_up']] = np.nan
    return data
