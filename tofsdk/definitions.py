"""Connection, frame, metadata and sensor-mode descriptions."""

from __future__ import annotations

import enum
import struct
from dataclasses import astuple, dataclass, field, fields
from typing import ClassVar

__all__ = [
    "ConnectionType",
    "FrameDataDetails",
    "FrameDetails",
    "Point3I",
    "Metadata",
    "SensorDetails",
    "DriverConfiguration",
    "DepthSensorModeDetails",
]


class ConnectionType(enum.Enum):
    """How the host reaches the sensor."""

    ON_TARGET = 0
    USB = 1
    NETWORK = 2
    OFFLINE = 3


@dataclass
class FrameDataDetails:
    """Properties of one kind of data (depth, ab, ...) held in a frame."""

    type: str = ""
    width: int = 0
    height: int = 0
    subelement_size: int = 0
    subelements_per_element: int = 0
    bytes_count: int = 0


@dataclass
class FrameDetails:
    """Properties of a whole frame."""

    type: str = ""
    data_details: list[FrameDataDetails] = field(default_factory=list)
    camera_mode: str = ""
    width: int = 0
    height: int = 0
    total_captures: int = 0
    passive_ir_captured: bool = False


@dataclass(frozen=True)
class Point3I:
    """One XYZ point with 16-bit signed coordinates."""

    a: int = 0
    b: int = 0
    c: int = 0


@dataclass
class Metadata:
    """Frame metadata as laid out (packed, little endian) by the ADSD3500."""

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<HHBBBBHBBIBBBBIIii")
    SIZE: ClassVar[int] = _FORMAT.size

    width: int = 0
    height: int = 0
    output_configuration: int = 0
    bits_in_depth: int = 0
    bits_in_ab: int = 0
    bits_in_confidence: int = 0
    invalid_phase_value: int = 0
    frequency_index: int = 0
    ab_frequency_index: int = 0
    frame_number: int = 0
    imager_mode: int = 0
    number_of_phases: int = 0
    number_of_frequencies: int = 0
    xyz_enabled: int = 0
    elapsed_time_fractional_value: int = 0
    elapsed_time_seconds_value: int = 0
    sensor_temperature: int = 0
    laser_temperature: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> Metadata:
        """Parse metadata from the start of ``data``; trailing bytes are ignored."""
        raw = bytes(data)
        if len(raw) < cls.SIZE:
            raise ValueError(
                f"metadata needs at least {cls.SIZE} bytes, got {len(raw)}"
            )
        return cls(*cls._FORMAT.unpack_from(raw))

    def to_bytes(self) -> bytes:
        """Pack the metadata into its binary layout."""
        try:
            return self._FORMAT.pack(*astuple(self))
        except struct.error as exc:
            raise ValueError(f"metadata field out of range: {exc}") from exc

    def __str__(self) -> str:
        return (
            f"\tWidth: {self.width}"
            f"\tHeight: {self.height}"
            f"\tOutputConfiguration: {self.output_configuration}"
            f"\tBitsInDepth: {self.bits_in_depth}"
            f"\tBitsInAb: {self.bits_in_ab}"
            f"\tBitsInConfidenc: {self.bits_in_confidence}"
            f"\tInvalidPhaseValue: {self.invalid_phase_value}"
            f"\tFrequencyIndex: {self.frequency_index}"
            f"\tFrameNumber: {self.frame_number}"
            f"\tImagerMode: {self.imager_mode}"
            f"\tNumberOfPhases: {self.number_of_phases}"
            f"\tNumberOfFrequencies: {self.number_of_frequencies}"
            f"\tXYZEnabled: {self.xyz_enabled}"
            f"\tElapsedTimeFractionalValue: {self.elapsed_time_fractional_value}"
            f"\tElapsedTimeSecondsValue: {self.elapsed_time_seconds_value}"
            f"\tSensorTemperature: {self.sensor_temperature}"
            f"\tLaserTemperature: {self.laser_temperature}\n"
        )


assert len(fields(Metadata)) == len(Metadata._FORMAT.format) - 1


@dataclass
class SensorDetails:
    """Identity of a sensor: driver path on target, IP address over network."""

    id: str = ""
    connection_type: ConnectionType = ConnectionType.ON_TARGET


@dataclass
class DriverConfiguration:
    """Configuration of the video driver used for a mode."""

    base_width: str = ""
    base_height: str = ""
    no_of_phases: str = ""
    depth_bits: str = ""
    ab_bits: str = ""
    conf_bits: str = ""
    pixel_format: str = ""
    driver_width: int = 0
    driver_height: int = 0
    pixel_format_index: int = 0


@dataclass
class DepthSensorModeDetails:
    """The kind of frame a depth sensor captures in one mode."""

    mode_number: int = 0
    frame_content: list[str] = field(default_factory=list)
    number_of_phases: int = 0
    pixel_format_index: int = 0
    frame_width_in_bytes: int = 0
    frame_height_in_bytes: int = 0
    base_resolution_width: int = 0
    base_resolution_height: int = 0
    metadata_size: int = 0
    is_pcm: int = 0
    driver_configuration: DriverConfiguration = field(
        default_factory=DriverConfiguration
    )

    def __str__(self) -> str:
        head = (
            f"DepthSensorModeDetails: \tN: {self.mode_number}"
            f"\tW: {self.base_resolution_width}"
            f"\tH: {self.base_resolution_height} contains:\n"
        )
        return head + "".join(f"\t{content}" for content in self.frame_content)