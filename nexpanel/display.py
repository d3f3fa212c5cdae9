"""A Nextion display reached over a serial transport, and its components."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from .protocol import (
    FINISHED_FRAME_LENGTH,
    NUMBER_FRAME_LENGTH,
    TOUCH_FRAME_LENGTH,
    NextionError,
    ReturnCode,
    encode_command,
    extract_string,
    is_command_finished,
    parse_number,
    parse_touch_event,
)

_UINT32_MAX = 0xFFFFFFFF


class Transport(Protocol):
    """What the display needs from a serial port, e.g. a pyserial ``Serial``."""

    baudrate: int

    @property
    def in_waiting(self) -> int: ...

    def write(self, data: bytes) -> int | None: ...

    def read(self, size: int = 1) -> bytes: ...


def _unsigned(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"value {value} does not fit in 32 unsigned bits")
    return value


class Display:
    """Sends commands to a Nextion display and reads its replies."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def send_command(self, command: str) -> None:
        """Send one command, followed by the three 0xFF terminator bytes."""
        self.transport.write(encode_command(command))

    def receive_number(self) -> int:
        """Read a number reply and return its value."""
        frame = self.transport.read(NUMBER_FRAME_LENGTH)
        if not frame:
            raise NextionError("no reply from display")
        return parse_number(frame)

    def receive_string(self, max_length: int) -> str:
        """Read a string reply, returning at most *max_length* characters."""
        if max_length < 0:
            raise ValueError("max_length must not be negative")
        if max_length == 0:
            return ""
        data = bytearray()
        while True:
            byte = self.transport.read(1)
            if not byte:
                break
            data += byte
            start = data.find(ReturnCode.STRING)
            if start >= 0 and data.count(0xFF, start + 1) >= 3:
                break
        return extract_string(data, max_length)

    def receive_command_finished(self) -> bool:
        """Read one reply and tell whether it acknowledges a finished command."""
        frame = self.transport.read(NUMBER_FRAME_LENGTH)
        return len(frame) >= FINISHED_FRAME_LENGTH and is_command_finished(frame)

    def initialize(self, baudrate: int) -> None:
        """Set the line speed and ask the display to acknowledge commands."""
        self.transport.baudrate = baudrate
        self.send_command("")
        self.send_command("bkcmd=1")
        if not self.receive_command_finished():
            raise NextionError("display did not acknowledge initialisation")

    def poll_touch_events(self) -> Iterator[TouchEvent]:
        """Yield the touch events waiting on the line; other frames are dropped."""
        while self.transport.in_waiting:
            frame = self.transport.read(TOUCH_FRAME_LENGTH)
            if not frame:
                break
            event = parse_touch_event(frame)
            if event is not None:
                yield event

    def _execute(self, command: str) -> None:
        self.send_command(command)
        if not self.receive_command_finished():
            raise NextionError(f"command not acknowledged: {command!r}")


# Imported for the annotation above without a runtime cycle.
from .protocol import TouchEvent  # noqa: E402


class Component:
    """An object placed on a page of the display, addressed by name."""

    def __init__(
        self, display: Display, page_id: int, component_id: int, name: str
    ) -> None:
        self.display = display
        self.page_id = page_id
        self.component_id = component_id
        self.name = name

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(page_id={self.page_id}, "
            f"component_id={self.component_id}, name={self.name!r})"
        )

    def get_attribute(self, attribute: str) -> int:
        """Return the numeric value of one attribute."""
        self.display.send_command(f"get {self.name}.{attribute}")
        return self.display.receive_number()

    def set_attribute(self, attribute: str, value: int, refresh: bool = False) -> None:
        """Set a numeric attribute, redrawing the component if *refresh* is true."""
        value = _unsigned(value)
        self.display.send_command(f"{self.name}.{attribute}={value}")
        if refresh:
            self.display.send_command(f"ref {self.name}")
        if not self.display.receive_command_finished():
            raise NextionError(f"{self.name}.{attribute} was not set")

    def get_text(self, max_length: int) -> str:
        """Return the component's text, cut to at most *max_length* characters."""
        self.display.send_command(f"get {self.name}.txt")
        return self.display.receive_string(max_length)

    def set_text_attribute(self, attribute: str, text: str) -> None:
        """Set a text attribute to *text*."""
        self.display._execute(f'{self.name}.{attribute}="{text}"')