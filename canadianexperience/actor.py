"""Actors: named, animatable groups of drawables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .anim_channel import AnimChannelPoint, Point
from .drawable import Drawable, Graphics

if TYPE_CHECKING:
    from .picture import Picture


class Actor:
    """A graphical object made of one or more drawables that can be animated."""

    def __init__(self, name: str) -> None:
        self._name = name
        self.enabled = True
        self.clickable = True
        self.position = Point(0, 0)
        self._root: Drawable | None = None
        self._drawables: list[Drawable] = []
        self._picture: Picture | None = None
        self._channel = AnimChannelPoint(f"{name}:position")

    @property
    def name(self) -> str:
        return self._name

    @property
    def root(self) -> Drawable | None:
        """The drawable at the top of the actor's hierarchy."""
        return self._root

    @property
    def drawables(self) -> tuple[Drawable, ...]:
        """The drawables in drawing order."""
        return tuple(self._drawables)

    @property
    def picture(self) -> Picture | None:
        """The picture this actor belongs to, if any."""
        return self._picture

    @property
    def position_channel(self) -> AnimChannelPoint:
        """The channel animating the actor position."""
        return self._channel

    def set_root(self, root: Drawable) -> None:
        self._root = root

    def draw(self, graphics: Graphics) -> None:
        """Place the drawable hierarchy and draw every drawable in order."""
        if not self.enabled:
            return
        if self._root is not None:
            self._root.place(self.position, 0.0)
        for drawable in self._drawables:
            drawable.draw(graphics)

    def hit_test(self, pos: Point) -> Drawable | None:
        """Return the topmost drawable under pos, or None."""
        if not self.clickable or not self.enabled:
            return None
        for drawable in reversed(self._drawables):
            if drawable.hit_test(pos):
                return drawable
        return None

    def add_drawable(self, drawable: Drawable) -> None:
        """Append a drawable to the drawing order and attach it to this actor."""
        self._drawables.append(drawable)
        drawable.set_actor(self)

    def set_picture(self, picture: Picture) -> None:
        """Attach to a picture and register all channels on its timeline."""
        self._picture = picture
        timeline = picture.timeline
        timeline.add_channel(self._channel)
        for drawable in self._drawables:
            drawable.set_timeline(timeline)

    def set_keyframe(self) -> None:
        """Record the current position and every drawable's state as keyframes."""
        self._channel.set_keyframe(self.position)
        for drawable in self._drawables:
            drawable.set_keyframe()

    def get_keyframe(self) -> None:
        """Take the current animated state from the channels."""
        if self._channel.is_valid():
            self.position = self._channel.point
        for drawable in self._drawables:
            drawable.get_keyframe()