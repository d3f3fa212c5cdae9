from collections import deque

import pytest

from nexpanel.button import Button
from nexpanel.display import Display
from nexpanel.protocol import NextionError

END = b"\xff\xff\xff"
ACK = b"\x01" + END

ATTRIBUTES = {
    "value": ("val", False),
    "background_color": ("bco", True),
    "pressed_background_color": ("bco2", True),
    "font_color": ("pco", True),
    "pressed_font_color": ("pco2", True),
    "x_center": ("xcen", True),
    "y_center": ("ycen", True),
    "font": ("font", True),
    "background_crop": ("picc", True),
    "pressed_background_crop": ("picc2", True),
    "background_image": ("pic", True),
    "pressed_background_image": ("pic2", True),
}
GETTERS = [(f"get_{key}", attr) for key, (attr, _) in ATTRIBUTES.items()]
SETTERS = [(f"set_{key}", attr, ref) for key, (attr, ref) in ATTRIBUTES.items()]
SETTERS.append(("set_alpha", "aph", False))


class ChunkedTransport:
    """Serial stand-in that hands out one queued reply at a time."""

    baudrate = 9600

    def __init__(self, *replies):
        self.replies = deque(replies)
        self.written = bytearray()

    @property
    def in_waiting(self):
        return sum(map(len, self.replies))

    def write(self, data):
        self.written += data
        return len(data)

    def read(self, size=1):
        if not self.replies:
            return b""
        head = self.replies.popleft()
        if len(head) > size:
            self.replies.appendleft(head[size:])
        return head[:size]


def make_button(*replies):
    transport = ChunkedTransport(*replies)
    return Button(Display(transport), 0, 1, "b0"), transport


@pytest.mark.parametrize("method, attribute", GETTERS)
@pytest.mark.parametrize("reply", [b"\x71\x34\x12\x00\x00" + END, b""])
def test_getters(method, attribute, reply):
    button, transport = make_button(reply)
    if reply:
        assert getattr(button, method)() == 4660
    else:
        with pytest.raises(NextionError):
            getattr(button, method)()
    assert bytes(transport.written) == f"get b0.{attribute}".encode() + END


@pytest.mark.parametrize("method, attribute, refresh", SETTERS)
def test_setters_send_assignment(method, attribute, refresh):
    button, transport = make_button(ACK)
    getattr(button, method)(31)
    expected = f"b0.{attribute}=31".encode() + END
    if refresh:
        expected += b"ref b0" + END
    assert bytes(transport.written) == expected


@pytest.mark.parametrize("method, attribute, refresh", SETTERS)
def test_setters_raise_without_ack(method, attribute, refresh):
    button, transport = make_button(b"\x00" + END)
    with pytest.raises(NextionError):
        getattr(button, method)(1)
    assert bytes(transport.written).startswith(f"b0.{attribute}=1".encode() + END)


@pytest.mark.parametrize("value", [-1, 1 << 32])
def test_set_value_rejects_out_of_range(value):
    button, transport = make_button(ACK)
    with pytest.raises(ValueError):
        button.set_value(value)
    assert transport.written == bytearray()


def test_number_round_trip_max_value():
    button, _ = make_button(b"\x71\xff\xff\xff\xff" + END)
    assert button.get_value() == 0xFFFFFFFF


@pytest.mark.parametrize(
    "method, text, command",
    [("set_text", "Next", b'b0.txt="Next"'), ("set_cb_path", "sd0/a.jpg", b'b0.path="sd0/a.jpg"')],
)
def test_text_setters_send_quoted_text(method, text, command):
    button, transport = make_button(ACK)
    getattr(button, method)(text)
    assert bytes(transport.written) == command + END


def test_set_text_raises_without_ack():
    button, transport = make_button()
    with pytest.raises(NextionError):
        button.set_text("x")
    assert bytes(transport.written) == b'b0.txt="x"' + END


@pytest.mark.parametrize("max_length, text", [(20, "Hello"), (3, "Hel")])
def test_get_text_reads_string_reply(max_length, text):
    button, transport = make_button(b"\x70Hello" + END)
    assert button.get_text(max_length) == text
    assert bytes(transport.written) == b"get b0.txt" + END