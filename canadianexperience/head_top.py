"""The top of a character's head, with eyes, eyebrows and a movable position."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from .anim_channel import AnimChannelPoint, Point
from .drawable import Graphics, rotate_point
from .image_drawable import ImageDrawable
from .poly_drawable import BLACK
from .rotated_bitmap import RotatedBitmap

if TYPE_CHECKING:
    from .timeline import Timeline

EYEBROW_WIDTH = 2
EYE_WIDTH = 15.0
EYE_HEIGHT = 20.0


class HeadTop(ImageDrawable):
    """A head image with drawn or bitmap eyes and an animated position."""

    def __init__(self, name: str, filename: str | Path) -> None:
        super().__init__(name, filename)
        self.eyes_center = Point(55, 79)
        self.interocular_distance = 27
        self._left_eye = RotatedBitmap()
        self._right_eye = RotatedBitmap()
        self._position_channel = AnimChannelPoint()

    @property
    def movable(self) -> bool:
        return True

    @property
    def left_eye(self) -> RotatedBitmap:
        return self._left_eye

    @property
    def right_eye(self) -> RotatedBitmap:
        return self._right_eye

    @property
    def position_channel(self) -> AnimChannelPoint:
        """The channel animating the head position."""
        return self._position_channel

    def set_actor(self, actor: Any) -> None:
        super().set_actor(actor)
        self._position_channel.name = f"{actor.name}:{self.name}:position"

    def set_timeline(self, timeline: Timeline) -> None:
        super().set_timeline(timeline)
        timeline.add_channel(self._position_channel)

    def set_keyframe(self) -> None:
        super().set_keyframe()
        self._position_channel.set_keyframe(self.position)

    def get_keyframe(self) -> None:
        super().get_keyframe()
        if self._position_channel.is_valid():
            self.position = self._position_channel.point

    def transform_point(self, p: Point) -> Point:
        """Map a point on the head image to a point on the drawing."""
        return rotate_point(p - self.center, self.placed_rotation) + self.placed_position

    def draw(self, graphics: Graphics) -> None:
        super().draw(graphics)

        d2 = int(self.interocular_distance / 2)
        right_x = self.eyes_center.x - d2
        left_x = self.eyes_center.x + d2
        eye_y = self.eyes_center.y

        if self._left_eye.loaded and self._right_eye.loaded:
            self._left_eye.draw_image(
                graphics, self.transform_point(Point(left_x, eye_y)), self.placed_rotation
            )
            self._right_eye.draw_image(
                graphics, self.transform_point(Point(right_x, eye_y)), self.placed_rotation
            )
        else:
            self.draw_eyebrow(
                graphics, Point(right_x - 10, eye_y - 16), Point(right_x + 4, eye_y - 18)
            )
            self.draw_eyebrow(
                graphics, Point(left_x - 4, eye_y - 20), Point(left_x + 9, eye_y - 18)
            )
            self.draw_eye(graphics, Point(left_x, eye_y))
            self.draw_eye(graphics, Point(right_x, eye_y))

    def draw_eyebrow(self, graphics: Graphics, p1: Point, p2: Point) -> None:
        """Draw a line between two head-image points."""
        start = self.transform_point(p1)
        end = self.transform_point(p2)
        graphics.stroke_line(start.x, start.y, end.x, end.y, BLACK, EYEBROW_WIDTH)

    def draw_eye(self, graphics: Graphics, p1: Point) -> None:
        """Draw an ellipse eye centred on a head-image point."""
        centre = self.transform_point(p1)
        with graphics.saved_state():
            graphics.translate(centre.x, centre.y)
            graphics.rotate(-self.placed_rotation)
            graphics.fill_ellipse(-EYE_WIDTH / 2, -EYE_HEIGHT / 2, EYE_WIDTH, EYE_HEIGHT, BLACK)