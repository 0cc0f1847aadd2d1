import pytest

from tofsdk.errors import (
    Adsd3100ErrorCode,
    Adsd3500Status,
    Adsd3500StatusCode,
    Status,
    adsd3030_error_message,
    adsd3100_error_message,
    adsd3500_status_message,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "OK"),
        (1, "BUSY"),
        (2, "UNREACHABLE"),
        (3, "INVALID_ARGUMENT"),
        (4, "UNAVAILABLE"),
        (5, "GENERIC_ERROR"),
    ],
)
def test_status_lookup_by_value(value, expected):
    assert Status(value).name == expected


def test_status_lookup_out_of_range_raises():
    with pytest.raises(ValueError):
        Status(6)


def test_adsd3500_status_lookup_by_value():
    assert Adsd3500Status(0) is Adsd3500Status.OK
    last = len(Adsd3500Status) - 1
    assert Adsd3500Status(last) is Adsd3500Status.UNKNOWN_ERROR_ID
    with pytest.raises(ValueError):
        Adsd3500Status(last + 1)


@pytest.mark.parametrize(
    "raw, message",
    [
        (0x0010, "The imager reported an error."),
        (0x000E, "Firmware update is complete."),
        (0x0015, "An incorrect phase invalid value specified."),
    ],
)
def test_documented_adsd3500_codes_by_raw_value(raw, message):
    assert adsd3500_status_message(raw) == message


@pytest.mark.parametrize(
    "raw, message",
    [
        (0x0340, "Laser driver supply too high."),
        (0x000C, "PLLLOCK error location 3."),
    ],
)
def test_documented_adsd3100_codes_by_raw_value(raw, message):
    assert adsd3100_error_message(raw) == message


@pytest.mark.parametrize(
    "code, message",
    [
        (Adsd3500StatusCode.INVALID_MODE, "Mode selected is invalid."),
        (Adsd3500StatusCode.IMAGER_ERROR, "The imager reported an error."),
        (Adsd3500StatusCode.NVM_WRITE_COMPLETE, "NVM update is complete."),
        (Adsd3500StatusCode.INVALID_CHIPID, "The image chip ID is invalid."),
    ],
)
def test_adsd3500_messages(code, message):
    assert adsd3500_status_message(code) == message
    assert adsd3500_status_message(int(code)) == message


def test_flash_errors_share_message():
    header = adsd3500_status_message(Adsd3500StatusCode.FLASH_HEADER_PARSE_ERROR)
    body = adsd3500_status_message(Adsd3500StatusCode.FLASH_FILE_PARSE_ERROR)
    assert header == body == "Flash update error."


def test_every_adsd3500_code_has_message():
    for code in Adsd3500StatusCode:
        assert adsd3500_status_message(code).endswith(".")


def test_every_adsd3100_code_has_message():
    for code in Adsd3100ErrorCode:
        assert adsd3100_error_message(code).endswith(".")


@pytest.mark.parametrize(
    "code, message",
    [
        (Adsd3100ErrorCode.MODE_USECASE, "Invalid mode selection."),
        (Adsd3100ErrorCode.LASER_SHORT, "Laser driver shorted to GND."),
        (Adsd3100ErrorCode.LASER_VLD_LOW, "Laser driver supply too low."),
    ],
)
def test_adsd3100_messages(code, message):
    assert adsd3100_error_message(code) == message


def test_unknown_codes_give_empty_string():
    assert adsd3500_status_message(0x0012) == ""
    assert adsd3500_status_message(0) == ""
    assert adsd3100_error_message(0x0003) == ""


def test_value_is_taken_as_sixteen_bit():
    wrapped = 0x10000 + int(Adsd3500StatusCode.IMAGER_ERROR)
    assert adsd3500_status_message(wrapped) == adsd3500_status_message(
        Adsd3500StatusCode.IMAGER_ERROR
    )


def test_adsd3030_has_no_messages():
    assert adsd3030_error_message(Adsd3100ErrorCode.MODE_USECASE) == ""
    assert adsd3030_error_message(0x0340) == ""