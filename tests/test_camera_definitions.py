from dataclasses import astuple, fields

import pytest

from tofsdk.camera_definitions import (
    CameraDetails,
    ImagerType,
    IntrinsicParameters,
    imager_control_value,
    imager_name,
)
from tofsdk.definitions import ConnectionType, FrameDetails


@pytest.mark.parametrize(
    "imager, value",
    [
        (ImagerType.ADSD3100, "1"),
        (ImagerType.ADSD3030, "2"),
        (ImagerType.ADTF3080, "3"),
    ],
)
def test_control_values(imager, value):
    assert imager_control_value(imager) == value


@pytest.mark.parametrize(
    "imager, name",
    [
        (ImagerType.ADSD3100, "adsd3100"),
        (ImagerType.ADSD3030, "adsd3030"),
        (ImagerType.ADTF3080, "adtf3080"),
    ],
)
def test_imager_names(imager, name):
    assert imager_name(imager) == name


def test_unset_imager_has_no_values():
    with pytest.raises(ValueError):
        imager_control_value(ImagerType.UNSET)
    with pytest.raises(ValueError):
        imager_name(ImagerType.UNSET)


def test_control_value_matches_enum_value():
    for imager in ImagerType:
        if imager is ImagerType.UNSET:
            continue
        assert int(imager_control_value(imager)) == imager.value


def test_names_are_unique():
    names = [imager_name(i) for i in ImagerType if i is not ImagerType.UNSET]
    assert len(set(names)) == len(names)


def test_intrinsic_field_order():
    names = [f.name for f in fields(IntrinsicParameters)]
    assert names == [
        "fx", "fy", "cx", "cy", "codx", "cody",
        "k1", "k2", "k3", "k4", "k5", "k6", "p2", "p1",
    ]
    params = IntrinsicParameters(*range(14))
    assert astuple(params) == tuple(range(14))


def test_camera_details_defaults_are_independent():
    first = CameraDetails()
    second = CameraDetails()
    first.frame_type.width = 640
    first.intrinsics.fx = 1.5
    assert second.frame_type == FrameDetails()
    assert second.intrinsics == IntrinsicParameters()
    assert first.connection is ConnectionType.ON_TARGET