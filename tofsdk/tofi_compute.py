"""Depth compute: de-interleave depth, confidence and AB data and build XYZ."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from tofsdk.algorithms import compute_xyz, generate_xyz_tables
from tofsdk.intrinsics import XYZDealiasData, XYZTable
from tofsdk.tofi_config import TofiConfig
from tofsdk.tofi_util import TofiError, TofiStatus

__all__ = [
    "NO_OF_PHASES",
    "GEN_XYZ_ITERATIONS",
    "TemperatureInfo",
    "ComputeResult",
    "TofiComputeContext",
    "unpack_bit_counts",
    "deinterleave_depth",
    "init_tofi_compute",
]

NO_OF_PHASES = 3
GEN_XYZ_ITERATIONS = 20


@dataclass
class TemperatureInfo:
    """Sensor and laser temperatures for each phase."""

    sensor_temp: list[float] = field(default_factory=lambda: [0.0] * NO_OF_PHASES)
    laser_temp: list[float] = field(default_factory=lambda: [0.0] * NO_OF_PHASES)

    def __post_init__(self) -> None:
        self.sensor_temp = [float(v) for v in self.sensor_temp]
        self.laser_temp = [float(v) for v in self.laser_temp]
        for name, values in (("sensor_temp", self.sensor_temp), ("laser_temp", self.laser_temp)):
            if len(values) != NO_OF_PHASES:
                raise ValueError(f"{name} must hold exactly {NO_OF_PHASES} values")


@dataclass
class ComputeResult:
    """Output images of one depth compute run."""

    depth: np.ndarray
    ab: np.ndarray
    conf: np.ndarray
    xyz: np.ndarray | None = None


def unpack_bit_counts(packed: int) -> tuple[int, int, int]:
    """Split a packed word into (depth bits, AB bits, confidence bits)."""
    word = int(packed) & 0xFFFF
    return word & 0x001F, (word & 0x03E0) >> 5, (word & 0x3C00) >> 10


def _frame_bytes(frame) -> np.ndarray:
    if isinstance(frame, np.ndarray):
        return np.ascontiguousarray(frame).ravel().view(np.uint8)
    if isinstance(frame, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(frame), dtype=np.uint8)
    raise TypeError("frame must be a numpy array or a bytes-like object")


def _mask(bits: int) -> int:
    return (1 << bits) - 1


def deinterleave_depth(
    frame, depth_bits: int, conf_bits: int, ab_bits: int, width: int, height: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split interleaved per-pixel data into depth, confidence and AB images.

    Each pixel occupies ``(depth_bits + conf_bits + ab_bits) // 8`` bytes.
    Returns three uint16 arrays of shape ``(height, width)``.
    """
    counts = {"depth_bits": depth_bits, "conf_bits": conf_bits, "ab_bits": ab_bits}
    for name, bits in counts.items():
        if not 0 <= int(bits) <= 16:
            raise ValueError(f"{name} must be between 0 and 16, got {bits!r}")
    n_depth, n_conf, n_ab = int(depth_bits), int(conf_bits), int(ab_bits)
    n_bytes = (n_depth + n_conf + n_ab) // 8
    if n_bytes == 0:
        raise ValueError("pixels must occupy at least one byte")

    width, height = int(width), int(height)
    if width < 0 or height < 0:
        raise ValueError("width and height must not be negative")
    n_pixels = width * height

    data = _frame_bytes(frame)
    if data.size < n_pixels * n_bytes:
        raise ValueError(
            f"frame holds {data.size} bytes, {n_pixels * n_bytes} are needed"
        )

    n_pos_conf = 16 - n_depth if n_depth != 16 else 8
    n_depth_conf = n_depth + n_conf
    n_count_conf = n_depth_conf // 8 if n_ab else 0
    n_pos_ab = 4 if n_depth_conf % 8 else 0
    is_conf = 0 if n_depth_conf == 16 else 2
    n_ab_count = 0 if n_ab == 8 else n_count_conf + 1

    span = 0
    if n_pixels:
        span = (n_pixels - 1) * n_bytes + max(1, is_conf, n_count_conf, n_ab_count) + 1
    buffer = np.zeros(span, dtype=np.uint8)
    available = min(span, data.size)
    buffer[:available] = data[:available]

    base = np.arange(n_pixels, dtype=np.int64) * n_bytes

    def byte(offset: int) -> np.ndarray:
        return buffer[base + offset].astype(np.uint32)

    depth = (byte(0) | (byte(1) << 8)) & _mask(n_depth)
    conf = ((byte(1) | (byte(is_conf) << 8)) >> n_pos_conf) & _mask(n_conf)
    ab = ((byte(n_count_conf) | (byte(n_ab_count) << 8)) >> n_pos_ab) & _mask(n_ab)

    shape = (height, width)
    return (
        depth.astype(np.uint16).reshape(shape),
        conf.astype(np.uint16).reshape(shape),
        ab.astype(np.uint16).reshape(shape),
    )


@dataclass
class TofiComputeContext:
    """State for depth compute in one camera mode."""

    n_rows: int
    n_cols: int
    depth_bits: int
    ab_bits: int
    conf_bits: int
    cal_config: XYZDealiasData
    xyz_table: XYZTable
    xyz_enabled: bool = False

    def compute(self, input_frame, temperature: TemperatureInfo | None = None) -> ComputeResult:
        """De-interleave a frame and, when enabled, compute its point cloud.

        ``temperature`` is accepted for interface compatibility; no temperature
        correction is applied.
        """
        if temperature is not None and not isinstance(temperature, TemperatureInfo):
            raise TypeError("temperature must be a TemperatureInfo or None")
        depth, conf, ab = deinterleave_depth(
            input_frame,
            self.depth_bits,
            self.conf_bits,
            self.ab_bits,
            self.n_cols,
            self.n_rows,
        )
        xyz = compute_xyz(depth, self.xyz_table) if self.xyz_enabled else None
        return ComputeResult(depth=depth, ab=ab, conf=conf, xyz=xyz)


def init_tofi_compute(dealias_data: XYZDealiasData | TofiConfig) -> TofiComputeContext:
    """Create a compute context from a mode's calibration data.

    The bit counts are taken from the packed ``freq[0]`` word and the XYZ
    tables are generated from the calibration geometry and intrinsics.
    """
    if isinstance(dealias_data, TofiConfig):
        cal = dealias_data.cal_config
        if cal is None:
            raise TofiError(TofiStatus.NULL_ARGUMENT, "configuration has no calibration data")
    elif isinstance(dealias_data, XYZDealiasData):
        cal = dealias_data
    else:
        raise TypeError("dealias_data must be XYZDealiasData or TofiConfig")

    depth_bits, ab_bits, conf_bits = unpack_bit_counts(cal.freq[0])

    try:
        table = generate_xyz_tables(
            cal.camera_intrinsics,
            cal.n_sensor_rows,
            cal.n_sensor_cols,
            cal.n_rows,
            cal.n_cols,
            cal.n_offset_rows,
            cal.n_offset_cols,
            cal.row_bin_factor,
            cal.col_bin_factor,
            GEN_XYZ_ITERATIONS,
        )
    except ValueError as exc:
        raise TofiError(TofiStatus.CAL_BLOCK_COMPUTE, str(exc)) from exc

    return TofiComputeContext(
        n_rows=int(cal.n_rows),
        n_cols=int(cal.n_cols),
        depth_bits=depth_bits,
        ab_bits=ab_bits,
        conf_bits=conf_bits,
        cal_config=cal,
        xyz_table=table,
    )