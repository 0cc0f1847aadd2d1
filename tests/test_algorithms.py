import numpy as np
import pytest

from tofsdk.algorithms import compute_xyz, generate_xyz_tables
from tofsdk.intrinsics import CameraIntrinsics, XYZTable


def _pinhole(fx=100.0, cx=4.0, cy=4.0):
    return CameraIntrinsics(fx=fx, fy=fx, cx=cx, cy=cy)


def test_tables_are_unit_vectors():
    table = generate_xyz_tables(_pinhole(), 8, 8, 8, 8, 0, 0, 1, 1, 20)
    norm = table.x_table**2 + table.y_table**2 + table.z_table**2
    assert table.x_table.shape == (8, 8)
    np.testing.assert_allclose(norm, 1.0, rtol=1e-5)


def test_centre_pixel_points_straight_ahead():
    table = generate_xyz_tables(_pinhole(), 8, 8, 8, 8, 0, 0, 1, 1, 20)
    assert table.x_table[4, 4] == 0.0
    assert table.y_table[4, 4] == 0.0
    assert table.z_table[4, 4] == 1.0


def test_tables_are_symmetric_about_centre():
    table = generate_xyz_tables(_pinhole(), 8, 8, 8, 8, 0, 0, 1, 1, 20)
    for k in (1, 2, 3):
        np.testing.assert_allclose(table.x_table[:, 4 + k], -table.x_table[:, 4 - k])
        np.testing.assert_allclose(table.y_table[4 + k, :], -table.y_table[4 - k, :])
    assert (table.x_table[:, :4] < 0).all()


def test_crop_matches_slice_of_full_table():
    full = generate_xyz_tables(_pinhole(), 8, 8, 8, 8, 0, 0, 1, 1, 20)
    crop = generate_xyz_tables(_pinhole(), 8, 8, 4, 4, 2, 2, 1, 1, 20)
    np.testing.assert_array_equal(crop.x_table, full.x_table[2:6, 2:6])
    np.testing.assert_array_equal(crop.z_table, full.z_table[2:6, 2:6])


def test_binning_matches_scaled_intrinsics():
    binned = generate_xyz_tables(_pinhole(200.0, 8.0, 8.0), 16, 16, 8, 8, 0, 0, 2, 2, 20)
    plain = generate_xyz_tables(_pinhole(100.0, 4.0, 4.0), 8, 8, 8, 8, 0, 0, 1, 1, 20)
    np.testing.assert_allclose(binned.x_table, plain.x_table, rtol=1e-6)
    np.testing.assert_allclose(binned.y_table, plain.y_table, rtol=1e-6)


def test_pixels_outside_valid_radius_are_zeroed():
    table = generate_xyz_tables(_pinhole(100.0, 0.0, 0.0), 2, 2, 2, 2, 0, 0, 1, 1, 20)
    assert table.z_table[0, 0] == 1.0
    assert table.z_table[0, 1] == 0.0
    assert table.z_table[1, 0] == 0.0
    assert table.x_table[1, 1] == 0.0


def test_window_outside_sensor_raises():
    with pytest.raises(ValueError):
        generate_xyz_tables(_pinhole(), 8, 8, 8, 8, 1, 0, 1, 1, 20)


def test_zero_bin_factor_raises():
    with pytest.raises(ValueError):
        generate_xyz_tables(_pinhole(), 8, 8, 8, 8, 0, 0, 0, 1, 20)


def test_compute_xyz_centre_gives_depth_on_z():
    table = generate_xyz_tables(_pinhole(), 8, 8, 8, 8, 0, 0, 1, 1, 20)
    depth = np.full((8, 8), 1000, dtype=np.uint16)
    xyz = compute_xyz(depth, table)
    assert xyz.shape == (8, 8, 3)
    assert xyz.dtype == np.int16
    assert tuple(xyz[4, 4]) == (0, 0, 1000)
    assert (xyz[..., 2] <= 1000).all()


def test_compute_xyz_rounding():
    table = XYZTable(
        x_table=np.array([[0.25, -0.75]], dtype=np.float32),
        y_table=np.array([[-0.25, 0.0]], dtype=np.float32),
        z_table=np.array([[0.75, 0.25]], dtype=np.float32),
    )
    xyz = compute_xyz(np.array([[2, 2]], dtype=np.uint16), table)
    assert xyz[0, 0].tolist() == [1, 0, 2]
    assert xyz[0, 1].tolist() == [-1, 0, 1]


def test_compute_xyz_size_mismatch_raises():
    table = generate_xyz_tables(_pinhole(), 8, 8, 8, 8, 0, 0, 1, 1, 20)
    with pytest.raises(ValueError):
        compute_xyz(np.zeros(10, dtype=np.uint16), table)


def test_compute_xyz_incomplete_table_raises():
    with pytest.raises(ValueError):
        compute_xyz(np.zeros(4, dtype=np.uint16), XYZTable())