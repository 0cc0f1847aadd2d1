"""Depth-compute configuration built from INI data and per-mode calibration."""

from __future__ import annotations

import copy
import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from tofsdk.intrinsics import CameraIntrinsics, XYZDealiasData, XYZTable
from tofsdk.tofi_util import TofiError, TofiStatus

__all__ = [
    "TofiConfig",
    "find_ini_value",
    "pack_bit_counts",
    "init_tofi_config",
    "init_tofi_config_isp",
]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class TofiConfig:
    """Configuration handed to the depth compute stage."""

    n_rows: int = 0
    n_cols: int = 0
    camera_intrinsics: CameraIntrinsics | None = None
    xyz_table: XYZTable = field(default_factory=XYZTable)
    cal_config: XYZDealiasData | None = None
    ini_data: bytes | None = None
    raw_format: str = ""
    hdr_size: int = 0
    phases: int = 0
    freqs: int = 0
    open_source: bool = True


def _as_text(content: str | bytes) -> str:
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content).decode("latin-1")
    return str(content)


def find_ini_value(content: str | bytes, key: str) -> str:
    """Value after '=' on the first line starting with ``key`` that has one, else ''."""
    for line in _as_text(content).split("\n"):
        if line.startswith(key) and "=" in line:
            return line.split("=", 1)[1]
    return ""


def _ini_int(content: str, key: str) -> int:
    match = _LEADING_INT.match(find_ini_value(content, key))
    if match is None:
        raise TofiError(TofiStatus.CONFIG_PARSE, f"missing or invalid INI value {key}")
    return int(match.group(1)) & 0xFFFF


def pack_bit_counts(depth_bits: int, ab_bits: int, conf_bits: int) -> int:
    """Pack depth, AB and confidence bit counts into one 16-bit word."""
    depth = int(depth_bits) & 0xFFFF
    ab = int(ab_bits) & 0xFFFF
    conf = int(conf_bits) & 0xFFFF
    return ((depth << 0) | (ab << 5) | (conf << 10)) & 0xFFFF


def init_tofi_config(cal_data, config_data, ini_data, mode: int) -> TofiConfig:
    """An empty configuration; calibration, config and INI data are not used."""
    return TofiConfig()


def init_tofi_config_isp(
    ini_data: str | bytes,
    mode: int,
    dealias_data: Sequence[XYZDealiasData],
) -> TofiConfig:
    """Configuration for on-chip depth compute in ``mode``.

    The bit counts for depth, AB and confidence are read from the INI data and
    packed into ``freq[0]`` of a copy of the mode's calibration data.
    """
    if isinstance(ini_data, (bytes, bytearray, memoryview)):
        raw = bytes(ini_data)
    else:
        raw = str(ini_data).encode("latin-1")
    text = _as_text(raw)

    depth_bits = _ini_int(text, "bitsInPhaseOrDepth")
    ab_bits = _ini_int(text, "bitsInAB")
    conf_bits = _ini_int(text, "bitsInConf")

    mode = int(mode)
    if not 0 <= mode < len(dealias_data):
        raise TofiError(TofiStatus.CAL_MODE_MISSING, f"no calibration data for mode {mode}")

    cal = copy.deepcopy(dealias_data[mode])
    cal.freq[0] = pack_bit_counts(depth_bits, ab_bits, conf_bits)

    return TofiConfig(cal_config=cal, ini_data=raw)