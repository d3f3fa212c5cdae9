import pytest

from nexpanel.protocol import (
    TERMINATOR,
    NextionError,
    ReturnCode,
    TouchEvent,
    encode_command,
    extract_string,
    is_command_finished,
    parse_number,
    parse_touch_event,
)


def number_frame(value):
    return bytes([ReturnCode.NUMBER]) + value.to_bytes(4, "little") + TERMINATOR


def test_encode_command_appends_three_ff():
    assert encode_command("bkcmd=1") == b"bkcmd=1\xff\xff\xff"


def test_encode_empty_command():
    assert encode_command("") == TERMINATOR


def test_parse_number_worked_example():
    assert parse_number(b"\x71\x01\x02\x03\x04\xff\xff\xff") == 0x04030201


@pytest.mark.parametrize("value", [0, 1, 255, 65536, 0xFFFFFFFF])
def test_parse_number_round_trip(value):
    assert parse_number(number_frame(value)) == value


@pytest.mark.parametrize(
    "frame",
    [
        b"",
        b"\x71\x01\x02",
        b"\x70\x01\x02\x03\x04\xff\xff\xff",
        b"\x71\x01\x02\x03\x04\xff\xff\x00",
    ],
)
def test_parse_number_rejects_bad_frames(frame):
    with pytest.raises(NextionError):
        parse_number(frame)


def test_command_finished_detected():
    assert is_command_finished(b"\x01\xff\xff\xff") is True


@pytest.mark.parametrize(
    "frame", [b"", b"\x01\xff\xff", b"\x00\xff\xff\xff", b"\x01\xff\x00\xff"]
)
def test_command_finished_rejected(frame):
    assert is_command_finished(frame) is False


def test_parse_touch_event():
    event = parse_touch_event(b"\x65\x00\x05\x01\xff\xff\xff")
    assert event == TouchEvent(page_id=0, component_id=5, event=1)


@pytest.mark.parametrize(
    "frame", [b"", b"\x66\x00\x05\x01\xff\xff\xff", b"\x65\x00\x05\x01\xff\xff"]
)
def test_parse_touch_event_rejects_other_frames(frame):
    assert parse_touch_event(frame) is None


def test_extract_string_reads_between_header_and_terminator():
    assert extract_string(b"\x70hello\xff\xff\xff", 20) == "hello"


def test_extract_string_skips_bytes_before_header():
    assert extract_string(b"xy\x70ok\xff\xff\xffzz", 20) == "ok"


def test_extract_string_truncates():
    assert extract_string(b"\x70hello\xff\xff\xff", 3) == "hel"


def test_extract_string_without_header_is_empty():
    assert extract_string(b"hello\xff\xff\xff", 10) == ""


def test_extract_string_without_terminator_keeps_text():
    assert extract_string(b"\x70partial", 10) == "partial"


def test_extract_string_negative_length():
    with pytest.raises(ValueError):
        extract_string(b"\x70a\xff\xff\xff", -1)


def test_return_codes_match_protocol():
    assert ReturnCode.STRING == 0x70
    assert ReturnCode(0x01) is ReturnCode.COMMAND_FINISHED