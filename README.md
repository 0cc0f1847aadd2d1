# tofsdk

Building blocks for working with time-of-flight depth cameras built around the
ADSD3500 depth processor and the ADSD3100 / ADSD3030 / ADTF3080 imagers.

The package covers the parts of the camera stack that are plain data and
computation:

- **Status and error codes.** `tofsdk.errors` has the `Status` and
  `Adsd3500Status` enums, the raw `Adsd3500StatusCode` / `Adsd3100ErrorCode`
  values, and `adsd3500_status_message`, `adsd3100_error_message` and
  `adsd3030_error_message`, which turn raw codes into readable text. Unknown
  codes give an empty string; no ADSD3030 codes are defined.
- **Frame and sensor definitions.** `tofsdk.definitions` has
  `ConnectionType`, `FrameDataDetails`, `FrameDetails`, `Point3I`,
  `SensorDetails`, `DriverConfiguration`, `DepthSensorModeDetails` and the
  packed, little-endian 36-byte frame `Metadata`, with `Metadata.from_bytes`,
  `Metadata.to_bytes` and a readable `str()`.
- **Camera definitions.** `tofsdk.camera_definitions` has `ImagerType`,
  `IntrinsicParameters`, `CameraDetails`, `imager_control_value` and
  `imager_name`.
- **11-bit float decoding.** `tofsdk.float_to_lin` has `range_for_index`,
  `generate_table` and `convert_11bit_float`, which turns an 11-bit float code
  into a signed linear value (codes of 2048 and above give 0).
- **Utilities.** `tofsdk.tofi_util` has the `TofiStatus` codes, the
  `TofiError` exception, `xyz_to_z`, `data_file_size`, `load_file_contents`,
  `write_data_to_file`, `process_directory` and `gcd`.
- **Calibration and INI parameter types.** `tofsdk.intrinsics` has
  `CameraIntrinsics` (with `binned`), `XYZDealiasData`, `XYZTable`, the INI
  parameter groups and `INIParamsGroup`.
- **Depth compute.** Lens undistortion (`tofsdk.undistort.undistort_points`),
  XYZ table generation and point-cloud computation
  (`tofsdk.algorithms.generate_xyz_tables`, `tofsdk.algorithms.compute_xyz`),
  INI-driven configuration (`tofsdk.tofi_config`) and de-interleaving of depth,
  confidence and AB data (`tofsdk.tofi_compute`).

## Installation

```
pip install tofsdk
```

## Example: decode metadata

```python
from tofsdk.definitions import Metadata

meta = Metadata.from_bytes(raw_header)  # at least Metadata.SIZE (36) bytes
print(meta.width, meta.height, meta.frame_number)
print(meta)
```

## Example: point cloud from an interleaved frame

```python
from tofsdk.tofi_config import init_tofi_config_isp
from tofsdk.tofi_compute import init_tofi_compute

config = init_tofi_config_isp(ini_bytes, mode, dealias_data)
context = init_tofi_compute(config)   # or init_tofi_compute(config.cal_config)
context.xyz_enabled = True            # point cloud is off by default
result = context.compute(frame_bytes)

depth, ab, conf, xyz = result.depth, result.ab, result.conf, result.xyz
```

`ini_bytes` must contain `bitsInPhaseOrDepth`, `bitsInAB` and `bitsInConf`
lines. `dealias_data` is a sequence of `tofsdk.intrinsics.XYZDealiasData`
indexed by mode, holding the sensor geometry, the binning factors and the
`CameraIntrinsics` for each mode. The frame may be bytes or a numpy array.
`depth`, `ab` and `conf` are uint16 arrays of shape `(n_rows, n_cols)`; `xyz`
is an int16 array with a trailing axis of 3, or `None` when XYZ is disabled.
A `TemperatureInfo` may be passed to `compute`, but no temperature correction
is applied.

## Error handling

Operations raise exceptions where a status code would otherwise be returned.
Configuration, compute and file helpers raise `tofsdk.tofi_util.TofiError`,
which carries a `TofiStatus`; invalid arguments raise `ValueError` or
`TypeError`.

## What this package does not do

It has no hardware access: it does not find, open or stream from cameras,
send ADSD3500 commands, update firmware, or save and read frame files. It
provides the definitions and the depth-compute steps that such code would use.

## Running the tests

```
pip install tofsdk[test]
pytest
```