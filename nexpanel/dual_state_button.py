"""The dual-state button component."""

from __future__ import annotations

from .display import Component


class DualStateButton(Component):
    """A button that toggles between state 0 and state 1 on each press."""

    def get_value(self) -> int:
        """Return the current state (``val``)."""
        return self.get_attribute("val")

    def set_value(self, number: int) -> None:
        """Set the current state (``val``)."""
        self.set_attribute("val", number)

    def get_text(self, max_length: int) -> str:
        """Return the button's text (``txt``), cut to *max_length* characters."""
        return super().get_text(max_length)

    def set_text(self, text: str) -> None:
        """Set the button's text (``txt``)."""
        self.set_text_attribute("txt", text)

    def get_state0_color(self) -> int:
        """Return the background colour in state 0 (``bco0``)."""
        return self.get_attribute("bco0")

    def set_state0_color(self, number: int) -> None:
        """Set the background colour in state 0 (``bco0``) and redraw."""
        self.set_attribute("bco0", number, refresh=True)

    def get_state1_color(self) -> int:
        """Return the background colour in state 1 (``bco1``)."""
        return self.get_attribute("bco1")

    def set_state1_color(self, number: int) -> None:
        """Set the background colour in state 1 (``bco1``) and redraw."""
        self.set_attribute("bco1", number, refresh=True)

    def get_font_color(self) -> int:
        """Return the text colour (``pco``)."""
        return self.get_attribute("pco")

    def set_font_color(self, number: int) -> None:
        """Set the text colour (``pco``) and redraw."""
        self.set_attribute("pco", number, refresh=True)

    def get_x_center(self) -> int:
        """Return the horizontal alignment (``xcen``)."""
        return self.get_attribute("xcen")

    def set_x_center(self, number: int) -> None:
        """Set the horizontal alignment (``xcen``) and redraw."""
        self.set_attribute("xcen", number, refresh=True)

    def get_y_center(self) -> int:
        """Return the vertical alignment (``ycen``)."""
        return self.get_attribute("ycen")

    def set_y_center(self, number: int) -> None:
        """Set the vertical alignment (``ycen``) and redraw."""
        self.set_attribute("ycen", number, refresh=True)

    def get_font(self) -> int:
        """Return the font id (``font``)."""
        return self.get_attribute("font")

    def set_font(self, number: int) -> None:
        """Set the font id (``font``) and redraw."""
        self.set_attribute("font", number, refresh=True)

    def get_state0_crop(self) -> int:
        """Return the crop picture in state 0 (``picc0``)."""
        return self.get_attribute("picc0")

    def set_state0_crop(self, number: int) -> None:
        """Set the crop picture in state 0 (``picc0``) and redraw."""
        self.set_attribute("picc0", number, refresh=True)

    def get_state1_crop(self) -> int:
        """Return the crop picture in state 1 (``picc1``)."""
        return self.get_attribute("picc1")

    def set_state1_crop(self, number: int) -> None:
        """Set the crop picture in state 1 (``picc1``) and redraw."""
        self.set_attribute("picc1", number, refresh=True)

    def get_state0_image(self) -> int:
        """Return the picture in state 0 (``pic0``)."""
        return self.get_attribute("pic0")

    def set_state0_image(self, number: int) -> None:
        """Set the picture in state 0 (``pic0``) and redraw."""
        self.set_attribute("pic0", number, refresh=True)

    def get_state1_image(self) -> int:
        """Return the picture in state 1 (``pic1``)."""
        return self.get_attribute("pic1")

    def set_state1_image(self, number: int) -> None:
        """Set the picture in state 1 (``pic1``) and redraw."""
        self.set_attribute("pic1", number, refresh=True)