"""Time-of-flight camera definitions, status codes and open depth-compute algorithms."""

__version__ = "6.1.0"

__all__ = [
    "algorithms",
    "camera_definitions",
    "definitions",
    "errors",
    "float_to_lin",
    "intrinsics",
    "tofi_compute",
    "tofi_config",
    "tofi_util",
    "undistort",
]