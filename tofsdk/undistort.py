"""Iterative removal of lens distortion from pixel coordinates."""

from __future__ import annotations

import numpy as np

from tofsdk.intrinsics import CameraIntrinsics

__all__ = ["undistort_points"]


def _f64(value: float) -> np.float64:
    return np.float64(np.float32(value))


def undistort_points(
    xs,
    ys,
    intrinsics: CameraIntrinsics,
    max_count: int,
    row_bin_factor: int = 1,
    col_bin_factor: int = 1,
) -> tuple[np.ndarray, np.ndarray]:
    """Map pixel coordinates to undistorted normalised coordinates.

    Uses the rational radial model (k1..k6) with tangential terms (p1, p2),
    refined over ``max_count`` iterations. A point whose correction factor
    turns negative keeps its plain normalised position. Returns float32
    arrays shaped like the inputs.
    """
    src_x = np.asarray(xs, dtype=np.float32)
    src_y = np.asarray(ys, dtype=np.float32)
    if src_x.shape != src_y.shape:
        raise ValueError("xs and ys must have the same shape")
    shape = src_x.shape

    b = intrinsics.binned(row_bin_factor, col_bin_factor)
    k1, k2, k3 = _f64(b.k1), _f64(b.k2), _f64(b.k3)
    k4, k5, k6 = _f64(b.k4), _f64(b.k5), _f64(b.k6)
    p1, p2 = _f64(b.p1), _f64(b.p2)
    cx, cy = _f64(b.cx), _f64(b.cy)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        ifx = np.float64(1.0) / _f64(b.fx)
        ify = np.float64(1.0) / _f64(b.fy)

        u = src_x.astype(np.float64).ravel()
        v = src_y.astype(np.float64).ravel()
        x0 = (u - cx) * ifx
        y0 = (v - cy) * ify
        x = x0.copy()
        y = y0.copy()
        active = np.ones(x.shape, dtype=bool)

        for _ in range(max(0, int(max_count))):
            idx = np.flatnonzero(active)
            if idx.size == 0:
                break
            xa = x[idx]
            ya = y[idx]
            r2 = xa * xa + ya * ya
            icdist = (1 + ((k6 * r2 + k5) * r2 + k4) * r2) / (
                1 + ((k3 * r2 + k2) * r2 + k1) * r2
            )
            stop = icdist < 0
            delta_x = 2 * p1 * xa * ya + p2 * (r2 + 2 * xa * xa)
            delta_y = p1 * (r2 + 2 * ya * ya) + 2 * p2 * xa * ya
            x[idx] = np.where(stop, x0[idx], (x0[idx] - delta_x) * icdist)
            y[idx] = np.where(stop, y0[idx], (y0[idx] - delta_y) * icdist)
            active[idx[stop]] = False

    return x.astype(np.float32).reshape(shape), y.astype(np.float32).reshape(shape)