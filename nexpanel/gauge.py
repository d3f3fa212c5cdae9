"""The gauge component."""

from __future__ import annotations

from .display import Component


class Gauge(Component):
    """A pointer gauge whose value is an angle."""

    def get_value(self) -> int:
        """Return the gauge's value (``val``)."""
        return self.get_attribute("val")

    def set_value(self, number: int) -> None:
        """Set the gauge's value (``val``)."""
        self.set_attribute("val", number, refresh=False)

    def get_background_color(self) -> int:
        """Return the background colour (``bco``)."""
        return self.get_attribute("bco")

    def set_background_color(self, number: int) -> None:
        """Set the background colour (``bco``) and redraw."""
        self.set_attribute("bco", number, refresh=True)

    def get_font_color(self) -> int:
        """Return the pointer colour (``pco``)."""
        return self.get_attribute("pco")

    def set_font_color(self, number: int) -> None:
        """Set the pointer colour (``pco``) and redraw."""
        self.set_attribute("pco", number, refresh=True)

    def get_pointer_thickness(self) -> int:
        """Return the pointer thickness (``wid``)."""
        return self.get_attribute("wid")

    def set_pointer_thickness(self, number: int) -> None:
        """Set the pointer thickness (``wid``) and redraw."""
        self.set_attribute("wid", number, refresh=True)

    def get_background_crop(self) -> int:
        """Return the background crop picture (``picc``)."""
        return self.get_attribute("picc")

    def set_background_crop(self, number: int) -> None:
        """Set the background crop picture (``picc``) and redraw."""
        self.set_attribute("picc", number, refresh=True)