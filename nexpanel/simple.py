"""Crop, checkbox and hotspot components."""

from __future__ import annotations

from .display import Component


class Crop(Component):
    """A crop: a region of a picture shown in place."""

    def get_background_crop(self) -> int:
        """Return the cropped picture id (``picc``)."""
        return self.get_attribute("picc")

    def set_background_crop(self, number: int) -> None:
        """Set the cropped picture id (``picc``)."""
        self.set_attribute("picc", number, refresh=False)

    def get_picture(self) -> int:
        """Return the cropped picture id (``picc``)."""
        return self.get_attribute("picc")

    def set_picture(self, number: int) -> None:
        """Set the cropped picture id (``picc``)."""
        self.set_attribute("picc", number, refresh=False)


class Checkbox(Component):
    """A checkbox with a checked value of 0 or 1."""

    def get_value(self) -> int:
        """Return the checked state (``val``)."""
        return self.get_attribute("val")

    def set_value(self, number: int) -> None:
        """Set the checked state (``val``)."""
        self.set_attribute("val", number, refresh=False)

    def get_background_color(self) -> int:
        """Return the background colour (``bco``)."""
        return self.get_attribute("bco")

    def set_background_color(self, number: int) -> None:
        """Set the background colour (``bco``) and redraw."""
        self.set_attribute("bco", number, refresh=True)

    def get_font_color(self) -> int:
        """Return the foreground colour (``pco``)."""
        return self.get_attribute("pco")

    def set_font_color(self, number: int) -> None:
        """Set the foreground colour (``pco``) and redraw."""
        self.set_attribute("pco", number, refresh=True)


class Hotspot(Component):
    """An invisible touch area; it has no attributes of its own."""