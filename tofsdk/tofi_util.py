"""Status codes and small file and arithmetic helpers for depth processing."""

from __future__ import annotations

import enum
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Union

import numpy as np

__all__ = [
    "TofiStatus",
    "TofiError",
    "xyz_to_z",
    "data_file_size",
    "load_file_contents",
    "write_data_to_file",
    "process_directory",
    "gcd",
]

PathLike = Union[str, "os.PathLike[str]"]


class TofiStatus(enum.IntEnum):
    """Status of depth image processing."""

    SUCCESS = 0
    WARNING = 1
    ERROR = 2

    MEM = 3
    MEM_ACCESS = 4
    MEM_ALLOC = 5
    MEM_FREE = 6
    MEM_COPY = 7
    NULL_POINTER = 8
    NULL_ARGUMENT = 9

    FILE_IO = 10
    FILE_NOT_FOUND = 11
    PATH_NOT_FOUND = 12
    OPEN_FILE = 13
    FILE_READ = 14
    FILE_WRITE = 15
    FILE_APPEND = 16
    FILE_PARSE = 17
    FILE_CLOSE = 18

    DEVICE_NOT_FOUND = 19
    DEVICE_OPEN = 20
    DEVICE_CLOSE = 21
    DEVICE_INITIALIZE = 22
    DEVICE_MEMORY = 23
    DEV_MEM_COPY = 24
    DEVICE_ALLOC = 25
    DEVICE_DEALLOC = 26
    DEVICE_QUERY = 27
    DEVICE_READ = 28
    DEVICE_WRITE = 29
    DEVICE_COMPUTE = 30

    FORMAT_INVALID = 31
    IMAGE_FORMAT_INVALID = 32
    IMAGE_FORMAT_MISMATCH = 33
    IMAGE_PIXEL_VAL = 34
    IMAGE_PIXEL_INDEX = 35
    IMAGE_METADATA_INVALID = 36

    CONFIG = 37
    CONFIG_INITIALIZE = 38
    CONFIG_PARSE = 39
    CONFIG_BLOCK_MISSING = 40
    CONFIG_COMPUTE = 41
    CONFIG_DUPLICATE = 42
    CONFIG_MISMATCH = 43
    CONFIG_VERSION = 44

    CAL_PARSE = 45
    CAL_FORMAT = 46
    CAL_MISMATCH = 47
    CAL_VERSION = 48
    CAL_DUPLICATE = 49
    CAL_BLOCK_MISSING = 50
    CAL_MODE_MISSING = 51
    CAL_BLOCK_COMPUTE = 52

    COMPUTE = 53
    DEPTH_COMPUTE = 54
    AB_COMPUTE = 55
    XYZ_COMPUTE = 56

    FILTER_COMPUTE = 57
    FILTER_SIZE = 58
    FILTER_THRESHOLD = 59


class TofiError(Exception):
    """A depth-processing failure carrying its ``TofiStatus``."""

    def __init__(self, status: TofiStatus, message: str = "") -> None:
        self.status = TofiStatus(status)
        self.message = message
        text = f"{message} ({self.status.name})" if message else self.status.name
        super().__init__(text)


def _z_values(points: object) -> list[int]:
    if isinstance(points, np.ndarray):
        if points.ndim == 0 or points.shape[-1] != 3:
            raise ValueError("XYZ array must have a last dimension of 3")
        return [int(v) for v in points[..., 2].ravel()]
    if not isinstance(points, Iterable):
        raise TypeError("points must be an iterable of XYZ points")
    return [int(p.c) if hasattr(p, "c") else int(p[2]) for p in points]


def xyz_to_z(points: object) -> np.ndarray:
    """Extract the Z coordinate of each XYZ point as unsigned 16-bit depth."""
    if points is None:
        raise TofiError(TofiStatus.NULL_ARGUMENT, "no XYZ data given")
    values = _z_values(points)
    if not values:
        raise TofiError(TofiStatus.NULL_ARGUMENT, "XYZ data is empty")
    return (np.array(values, dtype=np.int64) & 0xFFFF).astype(np.uint16)


def data_file_size(path: PathLike) -> int:
    """Size of the file in bytes, or 0 when it cannot be opened."""
    try:
        with open(path, "rb") as handle:
            return handle.seek(0, os.SEEK_END)
    except OSError:
        return 0


def load_file_contents(path: PathLike) -> bytes:
    """Read a whole file; an unreadable or empty file raises ``TofiError``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise TofiError(
            TofiStatus.OPEN_FILE, f"Failed to open data file {path}."
        ) from exc
    if not data:
        raise TofiError(TofiStatus.FILE_READ, f"Failed to read data file {path}.")
    return data


def write_data_to_file(path: PathLike, data: bytes) -> None:
    """Write ``data`` to ``path``, replacing any existing content."""
    payload = bytes(data)
    try:
        handle = open(path, "wb")
    except OSError as exc:
        raise TofiError(TofiStatus.OPEN_FILE, f"Failed to open {path}.") from exc
    with handle:
        try:
            written = handle.write(payload)
        except OSError as exc:
            raise TofiError(
                TofiStatus.FILE_WRITE, f"Failed to write {path}."
            ) from exc
    if written != len(payload):
        raise TofiError(TofiStatus.FILE_WRITE, f"Short write to {path}.")


def process_directory() -> str:
    """Directory of the running executable, ending with a path separator."""
    executable = sys.executable
    if not executable:
        raise TofiError(TofiStatus.ERROR, "executable path is unknown")
    directory = Path(os.path.realpath(executable)).parent
    return str(directory) + os.sep


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    a, b = int(a), int(b)
    if a < 0 or b < 0:
        raise ValueError("gcd is defined here for non-negative integers only")
    while a:
        a, b = b % a, a
    return b