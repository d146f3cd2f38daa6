"""Factory that builds the Sarah character."""

from __future__ import annotations

from pathlib import Path

from .actor import Actor
from .anim_channel import Point
from .head_top import HeadTop
from .image_drawable import ImageDrawable
from .poly_drawable import Colour, PolyDrawable

HAND_COLOUR = Colour(208, 159, 116)

_HAND_OUTLINE = (Point(-12, -2), Point(-12, 17), Point(11, 17), Point(11, -2))


def _hand(name: str) -> PolyDrawable:
    hand = PolyDrawable(name, HAND_COLOUR)
    hand.position = Point(0, 90)
    for point in _HAND_OUTLINE:
        hand.add_point(point)
    return hand


class SarahFactory:
    """Builds the Sarah actor."""

    def create(self, images_dir: str | Path) -> Actor:
        """Create Sarah using the images found in images_dir."""
        images = Path(images_dir)
        actor = Actor("Sarah")

        dress = ImageDrawable("Dress", images / "sarah_dress.png")
        dress.center = Point(44, 138)
        dress.position = Point(0, -114)
        actor.set_root(dress)

        lleg = ImageDrawable("Left Leg", images / "jeans_lleg.png")
        lleg.center = Point(11, 9)
        lleg.position = Point(17, 0)
        dress.add_child(lleg)

        rleg = ImageDrawable("Right Leg", images / "jeans_rleg.png")
        rleg.center = Point(39, 9)
        rleg.position = Point(-17, 0)
        dress.add_child(rleg)

        headb = ImageDrawable("Head Bottom", images / "sarah_headb.png")
        headb.center = Point(44, 31)
        headb.position = Point(5, -130)
        dress.add_child(headb)

        headt = HeadTop("Head Top", images / "sarah_headt.png")
        headt.center = Point(55, 109)
        headt.eyes_center = Point(70, 80)
        headt.position = Point(-20, -31)
        headb.add_child(headt)

        larm = ImageDrawable("Left Arm", images / "dress_arm.png")
        larm.center = Point(8, 9)
        larm.position = Point(-45, -130)
        dress.add_child(larm)

        rarm = ImageDrawable("Right Arm", images / "dress_arm.png")
        rarm.center = Point(8, 9)
        rarm.position = Point(50, -130)
        dress.add_child(rarm)

        lhand = _hand("Left Hand")
        larm.add_child(lhand)

        rhand = _hand("Right Hand")
        rarm.add_child(rhand)

        mug = ImageDrawable("Mug", images / "mug-bw.png")
        mug.center = Point(0, 30)
        mug.position = Point(0, 10)
        rhand.add_child(mug)

        for drawable in (larm, rarm, rhand, lhand, rleg, lleg, dress, headb, headt, mug):
            actor.add_drawable(drawable)

        return actor