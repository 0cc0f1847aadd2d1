"""Conversion of 11-bit floating-point values to signed linear values."""

from __future__ import annotations

from functools import lru_cache

__all__ = ["range_for_index", "generate_table", "convert_11bit_float"]

_COUNT = 2048
_HALF = _COUNT // 2

# (upper bound, segment start, shift, base value)
_SEGMENTS = (
    (384, 256, 1, 256),
    (512, 384, 2, 512),
    (640, 512, 3, 1024),
    (768, 640, 4, 2048),
    (896, 768, 5, 4096),
    (1024, 896, 6, 8192),
)


def _check_uint16(value: int) -> int:
    value = int(value)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"value {value} is not a 16-bit unsigned integer")
    return value


def range_for_index(idx: int) -> int:
    """Linear value for an 11-bit float code; codes above 1024 are negative."""
    idx = _check_uint16(idx)
    negative = idx > _HALF
    if negative:
        idx -= _HALF

    if idx < 256:
        value = idx
    elif idx == _HALF:
        value = 32767
    else:
        value = next(
            ((idx - start) << shift) + base
            for upper, start, shift, base in _SEGMENTS
            if idx < upper
        ) if idx < _HALF else 0

    return -value if negative else value


@lru_cache(maxsize=1)
def generate_table() -> tuple[int, ...]:
    """The full lookup table of 2048 linear values."""
    return tuple(range_for_index(idx) for idx in range(_COUNT))


def convert_11bit_float(value: int) -> int:
    """Convert an 11-bit float code to its linear value; codes >= 2048 give 0."""
    value = _check_uint16(value)
    return generate_table()[value] if value < _COUNT else 0