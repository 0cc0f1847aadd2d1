"""XYZ lookup-table generation and point-cloud computation from depth."""

from __future__ import annotations

import numpy as np

from tofsdk.intrinsics import CameraIntrinsics, XYZTable
from tofsdk.undistort import undistort_points

__all__ = ["generate_xyz_tables", "compute_xyz"]


def _bin_factor(value: int, name: str) -> int:
    factor = int(value)
    if not 1 <= factor <= 0xFF:
        raise ValueError(f"{name} must be between 1 and 255, got {value!r}")
    return factor


def _non_negative(value: int, name: str) -> int:
    number = int(value)
    if number < 0:
        raise ValueError(f"{name} must not be negative, got {value!r}")
    return number


def generate_xyz_tables(
    intrinsics: CameraIntrinsics,
    n_sensor_rows: int,
    n_sensor_cols: int,
    n_out_rows: int,
    n_out_cols: int,
    n_offset_rows: int = 0,
    n_offset_cols: int = 0,
    row_bin_factor: int = 1,
    col_bin_factor: int = 1,
    iterations: int = 20,
) -> XYZTable:
    """Build the X, Y and Z correction tables for a cropped, binned sensor.

    Each pixel is undistorted, pixels at or beyond the smallest radius that
    yields an invalid value (less a two pixel margin) are zeroed, and the
    cropped window is normalised so that multiplying by a radial depth gives
    Cartesian coordinates. Tables are float32 arrays of shape
    ``(n_out_rows, n_out_cols)``.
    """
    row_bin = _bin_factor(row_bin_factor, "row_bin_factor")
    col_bin = _bin_factor(col_bin_factor, "col_bin_factor")
    n_rows = _non_negative(n_sensor_rows, "n_sensor_rows") // row_bin
    n_cols = _non_negative(n_sensor_cols, "n_sensor_cols") // col_bin
    if n_rows == 0 or n_cols == 0:
        raise ValueError("binned sensor has no pixels")

    out_rows = _non_negative(n_out_rows, "n_out_rows")
    out_cols = _non_negative(n_out_cols, "n_out_cols")
    off_rows = _non_negative(n_offset_rows, "n_offset_rows")
    off_cols = _non_negative(n_offset_cols, "n_offset_cols")
    if off_rows + out_rows > n_rows or off_cols + out_cols > n_cols:
        raise ValueError("output window does not fit inside the binned sensor")

    binned = intrinsics.binned(row_bin, col_bin)
    cx = np.float32(binned.cx)
    cy = np.float32(binned.cy)

    r_min = np.float32(np.sqrt(np.float32(n_rows * n_rows + n_cols * n_cols)))

    col_index = np.arange(n_cols, dtype=np.float32)
    row_index = np.arange(n_rows, dtype=np.float32)
    grid_x = np.tile(col_index, (n_rows, 1))
    grid_y = np.repeat(row_index[:, None], n_cols, axis=1)

    xp, yp = undistort_points(grid_x, grid_y, intrinsics, iterations, row_bin, col_bin)
    xp = xp.copy()
    yp = yp.copy()

    with np.errstate(invalid="ignore", over="ignore", divide="ignore"):
        z = np.sqrt(xp * xp + yp * yp + np.float32(1.0)).astype(np.float32)

        ix = col_index - cx
        iy = row_index - cy
        radius = np.sqrt(ix[None, :] * ix[None, :] + iy[:, None] * iy[:, None]).astype(
            np.float32
        )

        invalid = np.isnan(xp) | np.isnan(yp) | np.isnan(z) | (z == 0)
        if invalid.any():
            r_min = min(r_min, np.float32(radius[invalid].min()))
        r_min = np.float32(r_min - np.float32(2.0))

        outside = radius >= r_min
        xp[outside] = 0
        yp[outside] = 0
        z[outside] = 0

        window = (
            slice(off_rows, off_rows + out_rows),
            slice(off_cols, off_cols + out_cols),
        )
        xc, yc, zc = xp[window], yp[window], z[window]

        x_table = np.zeros((out_rows, out_cols), dtype=np.float32)
        y_table = np.zeros((out_rows, out_cols), dtype=np.float32)
        z_table = np.zeros((out_rows, out_cols), dtype=np.float32)
        valid = zc != 0
        x_table[valid] = xc[valid] / zc[valid]
        y_table[valid] = yc[valid] / zc[valid]
        z_table[valid] = np.float32(1.0) / zc[valid]

    return XYZTable(x_table=x_table, y_table=y_table, z_table=z_table)


def _to_int16(values: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore"):
        wide = values.astype(np.int64)
    return (((wide + 0x8000) % 0x10000) - 0x8000).astype(np.int16)


def compute_xyz(depth, table: XYZTable) -> np.ndarray:
    """Turn a depth image into int16 XYZ points of shape ``table_shape + (3,)``.

    X and Y are rounded to the nearest integer; Z is rounded half up by
    truncation.
    """
    if table.x_table is None or table.y_table is None or table.z_table is None:
        raise ValueError("XYZ table is incomplete")
    x_table = np.asarray(table.x_table, dtype=np.float32)
    y_table = np.asarray(table.y_table, dtype=np.float32).reshape(x_table.shape)
    z_table = np.asarray(table.z_table, dtype=np.float32).reshape(x_table.shape)

    depth_values = np.asarray(depth)
    if depth_values.size != x_table.size:
        raise ValueError(
            f"depth has {depth_values.size} pixels, table has {x_table.size}"
        )
    d = depth_values.reshape(x_table.shape).astype(np.float32)
    half = np.float32(0.5)

    with np.errstate(invalid="ignore", over="ignore"):
        x = np.floor(x_table * d + half)
        y = np.floor(y_table * d + half)
        z = z_table * d + half

    return np.stack([_to_int16(x), _to_int16(y), _to_int16(z)], axis=-1)