"""Camera intrinsics, calibration (CCB) data and depth-compute INI parameter sets."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace

import numpy as np

__all__ = [
    "MAX_PATH_SIZE",
    "MAX_CHAR_SIZE",
    "MAX_N_FREQS",
    "MAX_N_MODES",
    "CameraIntrinsics",
    "XYZDealiasData",
    "XYZTable",
    "DepthComputeISPParams",
    "InputRawDataParams",
    "JBLFConfigParams",
    "ABThresholdsParams",
    "DepthRangeParams",
    "MiscellaneousParams",
    "INIParamsGroup",
]

MAX_PATH_SIZE = 512
MAX_CHAR_SIZE = 24
MAX_N_FREQS = 3
MAX_N_MODES = 10


def _bin_factor(value: int) -> int:
    factor = int(value)
    if not 1 <= factor <= 0xFF:
        raise ValueError(f"bin factor must be between 1 and 255, got {value!r}")
    return factor


def _scaled(value: float, factor: int) -> float:
    return float(np.float32(value) / np.float32(factor))


def _check_text(value: str, limit: int, name: str) -> None:
    if len(value.encode("utf-8")) >= limit:
        raise ValueError(f"{name} must be shorter than {limit} bytes")


@dataclass
class CameraIntrinsics:
    """Intrinsic camera data: focal lengths, optical centre and distortion."""

    fx: float = 0.0
    fy: float = 0.0
    cx: float = 0.0
    cy: float = 0.0
    codx: float = 0.0
    cody: float = 0.0
    k1: float = 0.0
    k2: float = 0.0
    k3: float = 0.0
    k4: float = 0.0
    k5: float = 0.0
    k6: float = 0.0
    p2: float = 0.0
    p1: float = 0.0

    def binned(self, row_bin_factor: int, col_bin_factor: int) -> CameraIntrinsics:
        """A copy with fx, cx scaled by the row factor and fy, cy by the column factor."""
        row = _bin_factor(row_bin_factor)
        col = _bin_factor(col_bin_factor)
        return replace(
            self,
            fx=_scaled(self.fx, row),
            fy=_scaled(self.fy, col),
            cx=_scaled(self.cx, row),
            cy=_scaled(self.cy, col),
        )


@dataclass
class XYZDealiasData:
    """Per-mode calibration data used to build XYZ tables and de-alias depth."""

    n_rows: int = 0
    n_cols: int = 0
    n_freqs: int = 0
    row_bin_factor: int = 1
    col_bin_factor: int = 1
    n_offset_rows: int = 0
    n_offset_cols: int = 0
    n_sensor_rows: int = 0
    n_sensor_cols: int = 0
    freq_index: list[int] = field(default_factory=lambda: [0] * MAX_N_FREQS)
    freq: list[int] = field(default_factory=lambda: [0] * MAX_N_FREQS)
    camera_intrinsics: CameraIntrinsics = field(default_factory=CameraIntrinsics)

    def __post_init__(self) -> None:
        self.freq_index = [int(v) for v in self.freq_index]
        self.freq = [int(v) for v in self.freq]
        for name, values in (("freq_index", self.freq_index), ("freq", self.freq)):
            if len(values) != MAX_N_FREQS:
                raise ValueError(f"{name} must hold exactly {MAX_N_FREQS} values")


@dataclass
class XYZTable:
    """Radial correction tables for the X, Y and Z coordinates."""

    x_table: np.ndarray | None = None
    y_table: np.ndarray | None = None
    z_table: np.ndarray | None = None


@dataclass
class DepthComputeISPParams:
    """INI parameters describing the on-chip depth compute output."""

    depth_compute_isp_enable: int = 0
    partial_depth_enable: int = 0
    interleaving_enable: int = 0
    bits_in_phase_or_depth: int = 0
    bits_in_ab: int = 0
    bits_in_conf: int = 0
    phase_invalid: int = 0
    with_ab_frame: int = 0
    little_endian: int = 0
    input_format: str = ""

    def __post_init__(self) -> None:
        _check_text(self.input_format, MAX_CHAR_SIZE, "input_format")


@dataclass
class InputRawDataParams:
    """INI parameters describing the raw input data."""

    input_format: str = ""
    delta_comp_enable: int = 0
    header_size: int = 0
    temp_comp_enabled: int = 0

    def __post_init__(self) -> None:
        _check_text(self.input_format, MAX_CHAR_SIZE, "input_format")


@dataclass
class JBLFConfigParams:
    """INI parameters of the joint bilateral filter."""

    jblf_apply_flag: int = 0
    jblf_window_size: int = 0
    jblf_gaussian_sigma: float = 0.0
    jblf_exponential_term: float = 0.0
    jblf_max_edge: float = 0.0
    jblf_ab_threshold: float = 0.0
    ab_filter_enable: int = 0


@dataclass
class ABThresholdsParams:
    """INI parameters of the AB thresholds."""

    ab_thresh_min: float = 0.0
    ab_sum_thresh: float = 0.0


@dataclass
class DepthRangeParams:
    """INI parameters limiting the valid depth range."""

    conf_thresh: float = 0.0
    radial_thresh_min: float = 0.0
    radial_thresh_max: float = 0.0


@dataclass
class MiscellaneousParams:
    """Remaining INI parameters."""

    xyz_enable: int = 0
    depth16_enable: int = 0
    ab_only_enable: int = 0
    cl_processor_path: str = ""

    def __post_init__(self) -> None:
        _check_text(self.cl_processor_path, MAX_PATH_SIZE, "cl_processor_path")


class INIParamsGroup(enum.IntEnum):
    """Groups of INI parameters that can be read or written together."""

    DEPTH_COMPUTE_ISP = 0
    INPUT_RAW_DATA = 1
    JBLF_CONFIG = 2
    AB_THRESHOLDS = 3
    DEPTH_RANGE_THRESHOLDS = 4
    MISCELLANEOUS = 5