"""A bitmap that can be drawn rotated about its center."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from .anim_channel import Point
from .drawable import Graphics


class RotatedBitmap:
    """An image drawn at a position and angle, rotated about its center."""

    def __init__(self) -> None:
        self._image: Image.Image | None = None
        self.center = Point(0, 0)

    @property
    def loaded(self) -> bool:
        """True once an image has been loaded."""
        return self._image is not None

    def load_image(self, filename: str | Path) -> None:
        """Load the image from a file."""
        with Image.open(filename) as img:
            self._image = img.convert("RGBA")

    def draw_image(self, graphics: Graphics, position: Point, angle: float) -> None:
        """Draw the image with its center at position, rotated by angle."""
        if self._image is None:
            raise RuntimeError("no image has been loaded")
        with graphics.saved_state():
            graphics.translate(position.x, position.y)
            graphics.rotate(-angle)
            graphics.draw_image(
                self._image,
                -self.center.x,
                -self.center.y,
                self._image.width,
                self._image.height,
            )