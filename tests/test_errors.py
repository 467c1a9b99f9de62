import pytest

from minirt.errors import ErrorCode, MiniRTError, error_message


def test_known_messages():
    assert error_message(ErrorCode.NO_INPUT) == "no file input"
    assert error_message(ErrorCode.CANNOT_OPEN_FILE) == "cannot open file"
    assert error_message(ErrorCode.PARSE) == "parsing error"


def test_plain_int_codes_match_enum():
    assert error_message(3) == error_message(ErrorCode.PARSE)


@pytest.mark.parametrize("code", [2, 4, 5, 10])
def test_unspecified_codes(code):
    assert error_message(code) == f"error not specified yet : {code}"


def test_error_carries_code_and_message():
    err = MiniRTError(ErrorCode.PARSE)
    assert err.code == ErrorCode.PARSE
    assert str(err) == "parsing error"
    assert err.message == "parsing error"
    assert err.exit_status == 1


def test_error_with_detail():
    err = MiniRTError(ErrorCode.CANNOT_OPEN_FILE, "scene.rt")
    assert str(err) == "cannot open file: scene.rt"
    assert err.detail == "scene.rt"


def test_error_with_unspecified_int_code():
    err = MiniRTError(10)
    assert err.code == 10
    assert str(err) == "error not specified yet : 10"
    assert err.exit_status == 1