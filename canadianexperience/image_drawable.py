"""A drawable that displays an image."""

from __future__ import annotations

import logging
import math
from pathlib import Path

from PIL import Image

from .anim_channel import Point
from .drawable import Drawable, Graphics

logger = logging.getLogger(__name__)

ALPHA_THRESHOLD = 128


def _load_image(filename: str | Path) -> Image.Image | None:
    try:
        with Image.open(filename) as img:
            return img.convert("RGBA")
    except OSError as exc:
        logger.warning("cannot load image %s: %s", filename, exc)
        return None


class ImageDrawable(Drawable):
    """A drawable that shows an image rotated about its center.

    An image that cannot be loaded leaves the drawable empty: it draws
    nothing and is never hit.
    """

    def __init__(self, name: str, filename: str | Path) -> None:
        super().__init__(name)
        self.filename = filename
        self.center = Point(0, 0)
        self._image = _load_image(filename)

    @property
    def image(self) -> Image.Image | None:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width if self._image is not None else 0

    @property
    def height(self) -> int:
        return self._image.height if self._image is not None else 0

    def draw(self, graphics: Graphics) -> None:
        if self._image is None:
            return
        with graphics.saved_state():
            graphics.translate(self.placed_position.x, self.placed_position.y)
            graphics.rotate(-self.placed_rotation)
            graphics.draw_image(
                self._image, -self.center.x, -self.center.y, self.width, self.height
            )

    def hit_test(self, pos: Point) -> bool:
        """True if pos lies on an opaque pixel of the placed image."""
        if self._image is None:
            return False
        x = float(pos.x - self.placed_position.x)
        y = float(pos.y - self.placed_position.y)

        sn = math.sin(self.placed_rotation)
        cs = math.cos(self.placed_rotation)
        x1 = cs * x - sn * y
        y1 = sn * x + cs * y

        x = x1 + self.center.x
        y = y1 + self.center.y

        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return False
        alpha = self._image.getpixel((int(x), int(y)))[3]
        return alpha >= ALPHA_THRESHOLD