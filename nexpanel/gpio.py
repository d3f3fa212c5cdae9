"""The extension GPIO, PWM and backlight controls of the display."""

from __future__ import annotations

from .display import Display, _unsigned


def _digit(value: int, what: str) -> str:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 9:
        raise ValueError(f"{what} must be a single digit, got {value!r}")
    return str(value)


class Gpio:
    """Drives the display's GPIO pins, PWM output and backlight."""

    def __init__(self, display: Display) -> None:
        self.display = display

    def pin_mode(self, port: int, mode: int, control_id: int) -> None:
        """Configure a pin.

        Modes: 0 input with pull-up, 1 input bound to a control, 2 push-pull
        output, 3 PWM output, 4 open-drain output. *control_id* only matters
        for mode 1.
        """
        command = (
            f"cfgpio {_digit(port, 'port')},{_digit(mode, 'mode')},"
            f"{_unsigned(control_id)}"
        )
        self.display._execute(command)

    def digital_write(self, port: int, value: int) -> None:
        """Drive a pin high (1) or low (0)."""
        self.display._execute(f"pio{_digit(port, 'port')}={_digit(value, 'value')}")

    def digital_read(self, port: int) -> int:
        """Return the level of a pin."""
        self.display.send_command(f"get pio{_digit(port, 'port')}")
        return self.display.receive_number()

    def analog_write(self, port: int, value: int) -> None:
        """Set the PWM duty cycle of a pin, 0 (off) to 100 (on)."""
        self.display._execute(f"pwm{_digit(port, 'port')}={_unsigned(value)}")

    def set_pwm_frequency(self, value: int) -> None:
        """Set the PWM output frequency, 1 to 65535 Hz."""
        self.display._execute(f"pwmf={_unsigned(value)}")

    def get_pwm_frequency(self) -> int:
        """Return the PWM output frequency."""
        self.display.send_command("get pwmf")
        return self.display.receive_number()

    def set_backlight(self, percent: int) -> None:
        """Set the backlight brightness in percent."""
        self.display._execute(f"dim={_unsigned(percent)}")