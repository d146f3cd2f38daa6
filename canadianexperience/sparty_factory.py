"""Factory that builds the Sparty character."""

from __future__ import annotations

import logging
from pathlib import Path

from .actor import Actor
from .anim_channel import Point
from .head_top import HeadTop
from .image_drawable import ImageDrawable
from .rotated_bitmap import RotatedBitmap

logger = logging.getLogger(__name__)


def _load_eye(eye: RotatedBitmap, filename: Path, center: Point) -> None:
    try:
        eye.load_image(filename)
    except OSError as exc:
        logger.warning("cannot load eye image %s: %s", filename, exc)
    eye.center = center


class SpartyFactory:
    """Builds the Sparty actor."""

    def create(self, images_dir: str | Path) -> Actor:
        """Create Sparty using the images found in images_dir.

        Eye images that cannot be loaded leave the head with drawn eyes.
        """
        images = Path(images_dir)
        actor = Actor("Sparty")

        torso = ImageDrawable("Torso", images / "sparty_torso.png")
        torso.center = Point(69, 144)
        torso.position = Point(0, -200)
        actor.set_root(torso)

        lleg = ImageDrawable("Left Leg", images / "sparty_lleg.png")
        lleg.center = Point(40, 27)
        lleg.position = Point(102 - 69, 180 - 144)
        torso.add_child(lleg)

        rleg = ImageDrawable("Right Leg", images / "sparty_rleg.png")
        rleg.center = Point(34, 27)
        rleg.position = Point(36 - 69, 180 - 144)
        torso.add_child(rleg)

        larm = ImageDrawable("Left Arm", images / "sparty_larm.png")
        larm.center = Point(25, 26)
        larm.position = Point(120 - 69, 22 - 144)
        torso.add_child(larm)

        rarm = ImageDrawable("Right Arm", images / "sparty_rarm.png")
        rarm.center = Point(89, 26)
        rarm.position = Point(20 - 69, 22 - 144)
        torso.add_child(rarm)

        headb = ImageDrawable("Head Bottom", images / "sparty_lhead.png")
        headb.center = Point(53, 30)
        headb.position = Point(0, 37 - 144)
        torso.add_child(headb)

        headt = HeadTop("Head Top", images / "sparty_head.png")
        headt.center = Point(59, 143)
        headt.position = Point(0, -28)
        headb.add_child(headt)
        headt.eyes_center = Point(54, 110)
        _load_eye(headt.left_eye, images / "sparty_leye.png", Point(14, 14))
        _load_eye(headt.right_eye, images / "sparty_reye.png", Point(17, 16))
        headt.interocular_distance = 30

        for drawable in (lleg, rleg, torso, larm, rarm, headb, headt):
            actor.add_drawable(drawable)

        return actor