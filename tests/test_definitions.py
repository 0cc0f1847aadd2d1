import pytest

from tofsdk.definitions import (
    ConnectionType,
    DepthSensorModeDetails,
    DriverConfiguration,
    FrameDataDetails,
    FrameDetails,
    Metadata,
    Point3I,
    SensorDetails,
)


def _sample_metadata() -> Metadata:
    return Metadata(
        width=512,
        height=512,
        output_configuration=7,
        bits_in_depth=16,
        bits_in_ab=16,
        bits_in_confidence=8,
        invalid_phase_value=1,
        frequency_index=2,
        ab_frequency_index=3,
        frame_number=123456,
        imager_mode=5,
        number_of_phases=3,
        number_of_frequencies=3,
        xyz_enabled=1,
        elapsed_time_fractional_value=4000000000,
        elapsed_time_seconds_value=42,
        sensor_temperature=-5,
        laser_temperature=38,
    )


@pytest.mark.parametrize(
    "value, expected",
    [(0, "ON_TARGET"), (1, "USB"), (2, "NETWORK"), (3, "OFFLINE")],
)
def test_connection_type_lookup_by_value(value, expected):
    assert ConnectionType(value).name == expected


def test_connection_type_out_of_range_raises():
    with pytest.raises(ValueError):
        ConnectionType(4)


def test_frame_data_details_equality():
    a = FrameDataDetails("depth", 512, 512, 2, 1, 512 * 512 * 2)
    b = FrameDataDetails("depth", 512, 512, 2, 1, 512 * 512 * 2)
    c = FrameDataDetails("ab", 512, 512, 2, 1, 512 * 512 * 2)
    assert a == b
    assert a != c


def test_frame_details_equality_depends_on_data_details():
    d = FrameDataDetails("depth", 4, 4, 2, 1, 32)
    f1 = FrameDetails("raw", [d], "1", 4, 4, 3, False)
    f2 = FrameDetails("raw", [FrameDataDetails("depth", 4, 4, 2, 1, 32)], "1", 4, 4, 3, False)
    f3 = FrameDetails("raw", [], "1", 4, 4, 3, False)
    assert f1 == f2
    assert f1 != f3


def test_frame_details_default_lists_not_shared():
    f1 = FrameDetails()
    f2 = FrameDetails()
    f1.data_details.append(FrameDataDetails("ab"))
    assert f2.data_details == []


def test_point3i_fields():
    p = Point3I(1, -2, 3)
    assert (p.a, p.b, p.c) == (1, -2, 3)


def test_metadata_round_trip():
    meta = _sample_metadata()
    raw = meta.to_bytes()
    assert len(raw) == Metadata.SIZE
    assert Metadata.from_bytes(raw) == meta


def test_metadata_packed_size():
    assert len(Metadata().to_bytes()) == 36


def test_metadata_width_is_little_endian_first_field():
    raw = Metadata(width=0x0280).to_bytes()
    assert raw[:2] == b"\x80\x02"


def test_metadata_from_larger_buffer_ignores_tail():
    meta = _sample_metadata()
    buffer = meta.to_bytes() + b"\xff" * (128 - Metadata.SIZE)
    assert len(buffer) == 128
    assert Metadata.from_bytes(buffer) == meta


def test_metadata_from_short_buffer_raises():
    with pytest.raises(ValueError):
        Metadata.from_bytes(b"\x00" * (Metadata.SIZE - 1))


def test_metadata_negative_temperature_survives():
    meta = Metadata(sensor_temperature=-40, laser_temperature=-1)
    back = Metadata.from_bytes(meta.to_bytes())
    assert back.sensor_temperature == -40
    assert back.laser_temperature == -1


def test_metadata_out_of_range_field_raises():
    with pytest.raises(ValueError):
        Metadata(width=70000).to_bytes()
    with pytest.raises(ValueError):
        Metadata(bits_in_depth=-1).to_bytes()


def test_metadata_str_format():
    text = str(_sample_metadata())
    assert text.startswith("\tWidth: 512\tHeight: 512\tOutputConfiguration: 7")
    assert "\tBitsInConfidenc: 8" in text
    assert "\tFrameNumber: 123456" in text
    assert "\tSensorTemperature: -5" in text
    assert text.endswith("\tLaserTemperature: 38\n")
    assert "AbFrequencyIndex" not in text


def test_sensor_details_defaults_and_values():
    s = SensorDetails("ip:10.0.0.1", ConnectionType.NETWORK)
    assert s.connection_type is ConnectionType.NETWORK
    assert SensorDetails().connection_type is ConnectionType.ON_TARGET


def test_depth_sensor_mode_details_str():
    mode = DepthSensorModeDetails(
        mode_number=3,
        frame_content=["depth", "ab", "conf"],
        base_resolution_width=1024,
        base_resolution_height=1024,
    )
    assert str(mode) == (
        "DepthSensorModeDetails: \tN: 3\tW: 1024\tH: 1024 contains:\n"
        "\tdepth\tab\tconf"
    )


def test_depth_sensor_mode_details_default_driver_configuration():
    a = DepthSensorModeDetails()
    b = DepthSensorModeDetails()
    a.driver_configuration.driver_width = 99
    assert b.driver_configuration == DriverConfiguration()
    assert a.driver_configuration.driver_width == 99