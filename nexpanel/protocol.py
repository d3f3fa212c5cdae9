"""Wire format of the Nextion serial protocol: commands, replies and events."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

TERMINATOR = b"\xff\xff\xff"
ENCODING = "latin-1"

NUMBER_FRAME_LENGTH = 8
FINISHED_FRAME_LENGTH = 4
TOUCH_FRAME_LENGTH = 9


class ReturnCode(enum.IntEnum):
    """First byte of a frame sent by the display."""

    INVALID_COMMAND = 0x00
    COMMAND_FINISHED = 0x01
    INVALID_COMPONENT_ID = 0x02
    INVALID_PAGE_ID = 0x03
    INVALID_PICTURE_ID = 0x04
    INVALID_FONT_ID = 0x05
    INVALID_BAUD = 0x11
    INVALID_VARIABLE = 0x1A
    INVALID_OPERATION = 0x1B
    TOUCH_EVENT = 0x65
    CURRENT_PAGE_ID = 0x66
    POSITION_EVENT = 0x67
    SLEEP_POSITION_EVENT = 0x68
    STRING = 0x70
    NUMBER = 0x71
    LAUNCHED = 0x88
    UPGRADED = 0x89


class NextionError(Exception):
    """The display gave no reply or a reply that could not be understood."""


@dataclass(frozen=True)
class TouchEvent:
    """A touch reported by the display for one component."""

    page_id: int
    component_id: int
    event: int


def encode_command(command: str) -> bytes:
    """Return the bytes that send *command* to the display."""
    return command.encode(ENCODING) + TERMINATOR


def parse_number(frame: bytes) -> int:
    """Return the unsigned 32-bit value held in a number reply."""
    frame = bytes(frame)
    if (
        len(frame) < NUMBER_FRAME_LENGTH
        or frame[0] != ReturnCode.NUMBER
        or frame[5:8] != TERMINATOR
    ):
        raise NextionError(f"not a number reply: {frame.hex(' ') or 'empty'}")
    return int.from_bytes(frame[1:5], "little")


def is_command_finished(frame: bytes) -> bool:
    """Tell whether *frame* acknowledges a finished command."""
    frame = bytes(frame)
    return (
        len(frame) >= FINISHED_FRAME_LENGTH
        and frame[0] == ReturnCode.COMMAND_FINISHED
        and frame[1:4] == TERMINATOR
    )


def parse_touch_event(frame: bytes) -> TouchEvent | None:
    """Return the touch event in *frame*, or None if it holds none."""
    frame = bytes(frame)
    if (
        len(frame) >= 7
        and frame[0] == ReturnCode.TOUCH_EVENT
        and frame[4:7] == TERMINATOR
    ):
        return TouchEvent(page_id=frame[1], component_id=frame[2], event=frame[3])
    return None


def extract_string(data: Iterable[int], max_length: int) -> str:
    """Return the text of a string reply, cut to at most *max_length* characters.

    Bytes before the string header are skipped; the text ends at the third
    0xFF byte or at the end of *data*.
    """
    if max_length < 0:
        raise ValueError("max_length must not be negative")
    text = bytearray()
    started = False
    terminators = 0
    for byte in data:
        if not started:
            started = byte == ReturnCode.STRING
            continue
        if byte == 0xFF:
            terminators += 1
            if terminators >= 3:
                break
        elif byte:
            text.append(byte)
    return text[:max_length].decode(ENCODING)