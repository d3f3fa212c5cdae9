"""The push button component."""

from __future__ import annotations

from .display import Component

ALPHA_MEDIUM = 80
ALPHA_LOW = 0


class Button(Component):
    """A push button with text, colours, pictures and a value."""

    def get_text(self, max_length: int) -> str:
        """Return the button's text (``txt``), cut to *max_length* characters."""
        return super().get_text(max_length)

    def set_text(self, text: str) -> None:
        """Set the button's text (``txt``)."""
        self.set_text_attribute("txt", text)

    def set_cb_path(self, path: str) -> None:
        """Set the path attribute (``path``)."""
        self.set_text_attribute("path", path)

    def get_value(self) -> int:
        """Return the button's value (``val``)."""
        return self.get_attribute("val")

    def set_value(self, number: int) -> None:
        """Set the button's value (``val``)."""
        self.set_attribute("val", number, refresh=False)

    def set_alpha(self, number: int) -> None:
        """Set the opacity (``aph``)."""
        self.set_attribute("aph", number, refresh=False)

    def get_background_color(self) -> int:
        """Return the background colour (``bco``)."""
        return self.get_attribute("bco")

    def set_background_color(self, number: int) -> None:
        """Set the background colour (``bco``) and redraw."""
        self.set_attribute("bco", number, refresh=True)

    def get_pressed_background_color(self) -> int:
        """Return the background colour while pressed (``bco2``)."""
        return self.get_attribute("bco2")

    def set_pressed_background_color(self, number: int) -> None:
        """Set the background colour while pressed (``bco2``) and redraw."""
        self.set_attribute("bco2", number, refresh=True)

    def get_font_color(self) -> int:
        """Return the text colour (``pco``)."""
        return self.get_attribute("pco")

    def set_font_color(self, number: int) -> None:
        """Set the text colour (``pco``) and redraw."""
        self.set_attribute("pco", number, refresh=True)

    def get_pressed_font_color(self) -> int:
        """Return the text colour while pressed (``pco2``)."""
        return self.get_attribute("pco2")

    def set_pressed_font_color(self, number: int) -> None:
        """Set the text colour while pressed (``pco2``) and redraw."""
        self.set_attribute("pco2", number, refresh=True)

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

    def get_background_crop(self) -> int:
        """Return the background crop picture (``picc``)."""
        return self.get_attribute("picc")

    def set_background_crop(self, number: int) -> None:
        """Set the background crop picture (``picc``) and redraw."""
        self.set_attribute("picc", number, refresh=True)

    def get_pressed_background_crop(self) -> int:
        """Return the background crop picture while pressed (``picc2``)."""
        return self.get_attribute("picc2")

    def set_pressed_background_crop(self, number: int) -> None:
        """Set the background crop picture while pressed (``picc2``) and redraw."""
        self.set_attribute("picc2", number, refresh=True)

    def get_background_image(self) -> int:
        """Return the background picture (``pic``)."""
        return self.get_attribute("pic")

    def set_background_image(self, number: int) -> None:
        """Set the background picture (``pic``) and redraw."""
        self.set_attribute("pic", number, refresh=True)

    def get_pressed_background_image(self) -> int:
        """Return the background picture while pressed (``pic2``)."""
        return self.get_attribute("pic2")

    def set_pressed_background_image(self, number: int) -> None:
        """Set the background picture while pressed (``pic2``) and redraw."""
        self.set_attribute("pic2", number, refresh=True)