"""Page through a table of records on the display with two dual-state buttons."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass

import serial

from .display import Display
from .dual_state_button import DualStateButton
from .protocol import NextionError


@dataclass(frozen=True)
class Record:
    """One line of the table."""

    serial_number: int
    date: str
    name: str
    value: int


def _row(*records: tuple[int, str, str, int]) -> tuple[Record, ...]:
    return tuple(Record(*fields) for fields in records)


DEFAULT_ROWS: tuple[tuple[Record, ...], ...] = (
    _row(
        (1, "01/01/2021", "John Smith", 100),
        (2, "01/02/2021", "Jane Doe", 200),
        (3, "01/03/2021", "Bob Johnson", 300),
        (4, "01/04/2021", "Emily Davis", 400),
        (5, "01/05/2021", "Michael Brown", 500),
    ),
    _row(
        (6, "02/01/2021", "Emily Wilson", 600),
        (7, "02/02/2021", "Joshua Moore", 700),
        (8, "02/03/2021", "Daniel Thompson", 800),
        (9, "02/04/2021", "Matthew White", 900),
        (10, "02/05/2021", "Jacob Harris", 1000),
    ),
    _row(
        (11, "03/01/2021", "Nicholas Martin", 1100),
        (12, "03/02/2021", "William Thompson", 1200),
        (13, "03/03/2021", "Amanda Gomez", 1300),
        (14, "03/04/2021", "Ashley Martin", 1400),
        (15, "03/05/2021", "Brian Anderson", 1500),
    ),
    _row(
        (16, "04/01/2021", "Brandon Lee", 1600),
        (17, "04/02/2021", "Adam Lewis", 1700),
        (18, "04/03/2021", "Gabriel Hall", 1800),
        (19, "04/04/2021", "Benjamin Allen", 1900),
        (20, "04/05/2021", "Nicholas Young", 2000),
    ),
    _row(
        (21, "05/01/2021", "Jacob Scott", 2100),
        (22, "05/02/2021", "Ryan Green", 2200),
        (23, "05/03/2021", "Jacob Martinez", 2300),
        (24, "05/04/2021", "Michael Perez", 2400),
        (25, "05/05/2021", "David Thompson", 2500),
    ),
)


def format_record(record: Record) -> str:
    """Return the command that loads *record* into the ``va0`` text variable."""
    return (
        f'va0.txt="{record.serial_number}^{record.date}^'
        f'{record.name}^{record.value}^"'
    )


class TablePager:
    """Shows one row of records at a time in the ``data0`` table."""

    def __init__(
        self, display: Display, rows: Sequence[Sequence[Record]] | None = None
    ) -> None:
        self.display = display
        self.rows = tuple(tuple(row) for row in (DEFAULT_ROWS if rows is None else rows))
        if not self.rows:
            raise ValueError("at least one row is needed")
        self.row = 0
        self._shown = False

    def _move(self, step: int) -> None:
        if self._shown:
            self.row = min(max(self.row + step, 0), len(self.rows) - 1)
        else:
            self._shown = True
        self._send_row()

    def _send_row(self) -> None:
        self.display.send_command("data0.clear()")
        for record in reversed(self.rows[self.row]):
            self.display.send_command(format_record(record))
            self.display.send_command("t0.txt=va0.txt")
            self.display.send_command("data0.insert(va0.txt)")

    def show_next(self) -> None:
        """Show the next row; the first call shows the first row."""
        self._move(1)

    def show_previous(self) -> None:
        """Show the previous row; the first call shows the first row."""
        self._move(-1)

    def poll_buttons(
        self, next_button: DualStateButton, back_button: DualStateButton
    ) -> tuple[bool, bool]:
        """Act on pressed buttons and release them.

        Returns whether the next and the back button were found pressed.
        """
        next_pressed = bool(_state(next_button))
        if next_pressed:
            self.show_next()
            self.display.send_command(f"{next_button.name}.val=0")
            self.display.send_command(f"{back_button.name}.val=0")
        back_pressed = bool(_state(back_button))
        if back_pressed:
            self.show_previous()
            self.display.send_command(f"{back_button.name}.val=0")
            self.display.send_command(f"{next_button.name}.val=0")
        return next_pressed, back_pressed


def _state(button: DualStateButton) -> int:
    try:
        return button.get_value()
    except NextionError:
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the table pager on a display attached to a serial port."""
    parser = argparse.ArgumentParser(
        prog="nexpanel-table", description="Page through a table on a display."
    )
    parser.add_argument("port", help="serial port the display is attached to")
    parser.add_argument("--baudrate", type=int, default=9600)
    parser.add_argument(
        "--timeout", type=float, default=0.05, help="read timeout in seconds"
    )
    parser.add_argument(
        "--interval", type=float, default=0.5, help="seconds between button polls"
    )
    parser.add_argument(
        "--cycles", type=int, default=None, help="stop after this many polls"
    )
    args = parser.parse_args(argv)

    transport = serial.Serial(args.port, args.baudrate, timeout=args.timeout)
    try:
        display = Display(transport)
        try:
            display.initialize(args.baudrate)
        except NextionError as error:
            print(f"warning: {error}", file=sys.stderr)
        back_button = DualStateButton(display, 0, 1, "bt0")
        next_button = DualStateButton(display, 0, 1, "bt1")
        pager = TablePager(display)
        pager.show_next()
        polls = 0
        while args.cycles is None or polls < args.cycles:
            pager.poll_buttons(next_button, back_button)
            polls += 1
            time.sleep(args.interval)
    except KeyboardInterrupt:
        pass
    finally:
        transport.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())