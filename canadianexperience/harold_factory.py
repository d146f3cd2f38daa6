"""Factory that builds the Harold character."""

from __future__ import annotations

from pathlib import Path

from .actor import Actor
from .anim_channel import Point
from .head_top import HeadTop
from .image_drawable import ImageDrawable
from .poly_drawable import Colour, PolyDrawable

ARM_COLOUR = Colour(60, 174, 184)
HAND_COLOUR = Colour(253, 218, 180)

_ARM_OUTLINE = (Point(-7, -7), Point(-7, 96), Point(8, 96), Point(8, -7))
_HAND_OUTLINE = (Point(-12, -2), Point(-12, 17), Point(11, 17), Point(11, -2))


def _polygon(name: str, colour: Colour, position: Point, outline: tuple[Point, ...]) -> PolyDrawable:
    poly = PolyDrawable(name, colour)
    poly.position = position
    for point in outline:
        poly.add_point(point)
    return poly


class HaroldFactory:
    """Builds the Harold actor."""

    def create(self, images_dir: str | Path) -> Actor:
        """Create Harold using the images found in images_dir."""
        images = Path(images_dir)
        actor = Actor("Harold")

        shirt = ImageDrawable("Shirt", images / "harold_shirt.png")
        shirt.center = Point(44, 138)
        shirt.position = Point(0, -114)
        actor.set_root(shirt)

        vest = ImageDrawable("Vest", images / "harold_vest.png")
        vest.center = Point(44, 138)
        shirt.add_child(vest)

        lleg = ImageDrawable("Left Leg", images / "harold_lleg.png")
        lleg.center = Point(11, 9)
        lleg.position = Point(27, 0)
        shirt.add_child(lleg)

        rleg = ImageDrawable("Right Leg", images / "harold_rleg.png")
        rleg.center = Point(39, 9)
        rleg.position = Point(-27, 0)
        shirt.add_child(rleg)

        headb = ImageDrawable("Head Bottom", images / "harold_headb.png")
        headb.center = Point(44, 31)
        headb.position = Point(0, -130)
        shirt.add_child(headb)

        headt = HeadTop("Head Top", images / "harold_headt_blank.png")
        headt.center = Point(55, 109)
        headt.position = Point(0, -31)
        headb.add_child(headt)

        larm = _polygon("Left Arm", ARM_COLOUR, Point(50, -130), _ARM_OUTLINE)
        shirt.add_child(larm)

        rarm = _polygon("Right Arm", ARM_COLOUR, Point(-45, -130), _ARM_OUTLINE)
        shirt.add_child(rarm)

        lhand = _polygon("Left Hand", HAND_COLOUR, Point(0, 96), _HAND_OUTLINE)
        larm.add_child(lhand)

        rhand = _polygon("Right Hand", HAND_COLOUR, Point(0, 96), _HAND_OUTLINE)
        rarm.add_child(rhand)

        for drawable in (larm, rarm, rhand, lhand, rleg, lleg, shirt, vest, headb, headt):
            actor.add_drawable(drawable)

        return actor