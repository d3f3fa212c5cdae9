# nexpanel

Control a Nextion HMI touch display from Python over a serial line.

nexpanel sends the display's text commands, each ended by three `0xFF`
bytes. It reads back number replies, string replies and "command finished"
acknowledgements, and decodes touch events. Component classes wrap the
attributes that each widget exposes.

## Installation

```
pip install nexpanel
```

## Usage

`Display` takes a transport. This is any object with `write`, `read`,
`in_waiting` and a settable `baudrate`, such as a `serial.Serial` port. Give
the port a read timeout: string replies are read byte by byte until the
terminator arrives or a read comes back empty.

```python
import serial

from nexpanel.display import Display
from nexpanel.button import Button
from nexpanel.gauge import Gauge
from nexpanel.gpio import Gpio

port = serial.Serial("/dev/ttyUSB0", 9600, timeout=0.01)
display = Display(port)
display.initialize(9600)           # sends "bkcmd=1" and expects an acknowledgement

start = Button(display, 0, 1, "b0")
start.set_text("Start")
start.set_background_color(2016)   # sends "ref b0" afterwards to redraw it

gauge = Gauge(display, 0, 2, "z0")
gauge.set_value(90)
print(gauge.get_value())

gpio = Gpio(display)
gpio.set_backlight(50)

for event in display.poll_touch_events():
    print(event.page_id, event.component_id, event.event)
```

Getters return the value the display sends back. Setters return nothing and
raise `NextionError` (from `nexpanel.protocol`) when the display does not
acknowledge the command; a getter raises it when no valid number reply
arrives. Values passed to setters must fit in 32 unsigned bits, and GPIO
port numbers must be single digits; anything else raises `ValueError`.

## Modules

- `nexpanel.protocol`: frame encoding and decoding: `encode_command`,
  `parse_number`, `is_command_finished`, `parse_touch_event`,
  `extract_string`, the `ReturnCode` enum, the `TouchEvent` dataclass and
  `NextionError`.
- `nexpanel.display`: `Display` (`send_command`, `receive_number`,
  `receive_string`, `receive_command_finished`, `initialize`,
  `poll_touch_events`) and the base class `Component` (`get_attribute`,
  `set_attribute`, `get_text`, `set_text_attribute`), which any widget can
  be driven through by attribute name.
- `nexpanel.gpio`: `Gpio`, for the display's own I/O pins, PWM output and
  backlight.
- `nexpanel.simple`: `Crop`, `Checkbox` and `Hotspot`.
- `nexpanel.button`: `Button`, with the opacity constants `ALPHA_MEDIUM`
  and `ALPHA_LOW`.
- `nexpanel.gauge`: `Gauge`.
- `nexpanel.dual_state_button`: `DualStateButton`.
- `nexpanel.table`: `Record`, `format_record` and `TablePager`, which pages
  rows of records into a data-record widget.

## Table demo

```
nexpanel-table /dev/ttyUSB0
```

This opens the serial port, initialises the display (printing a warning if
it does not acknowledge), and sends the first row of records to the `data0`
widget. It then polls the dual-state buttons `bt1` (next row) and `bt0`
(previous row), resetting both after a press, until interrupted.

Options:

- `--baudrate` (default 9600)
- `--timeout`: read timeout in seconds (default 0.05)
- `--interval`: seconds between button polls (default 0.5)
- `--cycles`: stop after this many polls

## What it does not do

`Display.poll_touch_events` only yields the events it decodes; there is no
mechanism for attaching callbacks to components. Widgets other than those
listed above (text, number, slider, progress bar, picture, waveform, timer,
page and so on) have no classes of their own; use `Component` with their
attribute names instead.