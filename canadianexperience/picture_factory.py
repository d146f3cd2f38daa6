"""Factory that builds the animation picture with its actors."""

from __future__ import annotations

from pathlib import Path

from .actor import Actor
from .anim_channel import Point
from .harold_factory import HaroldFactory
from .image_drawable import ImageDrawable
from .picture import Picture
from .sarah_factory import SarahFactory
from .sparty_factory import SpartyFactory

IMAGES_DIRECTORY = "images"


class PictureFactory:
    """Builds the picture: background, Harold, Sparty and Sarah."""

    def create(self, resources_dir: str | Path) -> Picture:
        """Create the picture from the resources in resources_dir."""
        images = Path(resources_dir) / IMAGES_DIRECTORY
        picture = Picture()

        background = Actor("Background")
        background.clickable = False
        background.position = Point(0, 0)
        background_image = ImageDrawable("Background", images / "Background2.png")
        background.add_drawable(background_image)
        background.set_root(background_image)
        picture.add_actor(background)

        harold = HaroldFactory().create(images)
        harold.position = Point(150, 600)
        picture.add_actor(harold)

        sparty = SpartyFactory().create(images)
        sparty.position = Point(650, 620)
        picture.add_actor(sparty)

        sarah = SarahFactory().create(images)
        sarah.position = Point(600, 600)
        picture.add_actor(sarah)

        return picture