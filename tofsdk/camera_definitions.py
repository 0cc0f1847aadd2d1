"""Imager types, camera intrinsic parameters and camera details."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from tofsdk.definitions import ConnectionType, FrameDetails

__all__ = [
    "ImagerType",
    "IntrinsicParameters",
    "CameraDetails",
    "imager_control_value",
    "imager_name",
]


class ImagerType(enum.Enum):
    """Kinds of imager a camera can carry."""

    UNSET = 0
    ADSD3100 = 1
    ADSD3030 = 2
    ADTF3080 = 3


_CONTROL_VALUES: dict[ImagerType, str] = {
    ImagerType.ADSD3100: "1",
    ImagerType.ADSD3030: "2",
    ImagerType.ADTF3080: "3",
}

_IMAGER_NAMES: dict[ImagerType, str] = {
    ImagerType.ADSD3100: "adsd3100",
    ImagerType.ADSD3030: "adsd3030",
    ImagerType.ADTF3080: "adtf3080",
}


@dataclass
class IntrinsicParameters:
    """Intrinsic parameters of a camera: focal lengths, centres, distortion."""

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


@dataclass
class CameraDetails:
    """Properties of a camera and the system it is attached to."""

    camera_id: str = ""
    mode: int = 0
    frame_type: FrameDetails = field(default_factory=FrameDetails)
    connection: ConnectionType = ConnectionType.ON_TARGET
    intrinsics: IntrinsicParameters = field(default_factory=IntrinsicParameters)
    max_depth: int = 0
    min_depth: int = 0
    bit_count: int = 0
    u_boot_version: str = ""
    kernel_version: str = ""
    sd_card_image_version: str = ""
    serial_number: str = ""


def _lookup(table: dict[ImagerType, str], imager: ImagerType) -> str:
    try:
        return table[ImagerType(imager)]
    except (KeyError, ValueError):
        raise ValueError(f"no value defined for imager {imager!r}") from None


def imager_control_value(imager: ImagerType) -> str:
    """The control value string that selects ``imager``."""
    return _lookup(_CONTROL_VALUES, imager)


def imager_name(imager: ImagerType) -> str:
    """The lower-case name of ``imager``."""
    return _lookup(_IMAGER_NAMES, imager)