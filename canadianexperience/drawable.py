"""Drawable parts of actors and the raster surface they are drawn on."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from PIL import Image, ImageDraw

from .anim_channel import AnimChannelAngle, Point

if TYPE_CHECKING:
    from .timeline import Timeline

_Matrix = tuple[float, float, float, float, float, float]
_IDENTITY: _Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

ELLIPSE_SEGMENTS = 48


def _compose(m: _Matrix, n: _Matrix) -> _Matrix:
    """Return the matrix that applies n first and then m."""
    ma, mb, mc, md, me, mf = m
    na, nb, nc, nd, ne, nf = n
    return (
        ma * na + mc * nb,
        mb * na + md * nb,
        ma * nc + mc * nd,
        mb * nc + md * nd,
        ma * ne + mc * nf + me,
        mb * ne + md * nf + mf,
    )


def _invert(m: _Matrix) -> _Matrix:
    a, b, c, d, e, f = m
    det = a * d - b * c
    if det == 0:
        raise ValueError("transformation is not invertible")
    ia = d / det
    ib = -b / det
    ic = -c / det
    id_ = a / det
    return (ia, ib, ic, id_, -(ia * e + ic * f), -(ib * e + id_ * f))


class Graphics:
    """An RGBA raster surface with a stack of affine transformations."""

    def __init__(
        self,
        width: int,
        height: int,
        background: Sequence[int] = (255, 255, 255, 255),
    ) -> None:
        self.image = Image.new("RGBA", (width, height), tuple(background))
        self._matrix: _Matrix = _IDENTITY
        self._saved: list[_Matrix] = []

    @property
    def size(self) -> tuple[int, int]:
        """Width and height of the surface in pixels."""
        return self.image.size

    def push_state(self) -> None:
        """Save the current transformation."""
        self._saved.append(self._matrix)

    def pop_state(self) -> None:
        """Restore the most recently saved transformation."""
        if not self._saved:
            raise RuntimeError("pop_state without a matching push_state")
        self._matrix = self._saved.pop()

    @contextmanager
    def saved_state(self) -> Iterator[Graphics]:
        """Save the transformation for the duration of a with block."""
        self.push_state()
        try:
            yield self
        finally:
            self.pop_state()

    def translate(self, dx: float, dy: float) -> None:
        self._matrix = _compose(self._matrix, (1.0, 0.0, 0.0, 1.0, dx, dy))

    def rotate(self, angle: float) -> None:
        """Rotate the coordinate system by angle radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        self._matrix = _compose(self._matrix, (c, s, -s, c, 0.0, 0.0))

    def scale(self, sx: float, sy: float) -> None:
        self._matrix = _compose(self._matrix, (sx, 0.0, 0.0, sy, 0.0, 0.0))

    def transform_point(self, x: float, y: float) -> tuple[float, float]:
        """Map a point in current coordinates to surface pixels."""
        a, b, c, d, e, f = self._matrix
        return (a * x + c * y + e, b * x + d * y + f)

    def fill_polygon(self, points: Iterable[tuple[float, float]], colour: Sequence[int]) -> None:
        device = [self.transform_point(x, y) for x, y in points]
        if len(device) < 2:
            return
        ImageDraw.Draw(self.image).polygon(device, fill=tuple(colour))

    def stroke_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        colour: Sequence[int],
        width: int = 1,
    ) -> None:
        start = self.transform_point(x1, y1)
        end = self.transform_point(x2, y2)
        ImageDraw.Draw(self.image).line([start, end], fill=tuple(colour), width=width)

    def fill_ellipse(
        self, x: float, y: float, width: float, height: float, colour: Sequence[int]
    ) -> None:
        """Fill the ellipse inscribed in the given rectangle."""
        cx = x + width / 2
        cy = y + height / 2
        rx = width / 2
        ry = height / 2
        outline = [
            (
                cx + rx * math.cos(2 * math.pi * k / ELLIPSE_SEGMENTS),
                cy + ry * math.sin(2 * math.pi * k / ELLIPSE_SEGMENTS),
            )
            for k in range(ELLIPSE_SEGMENTS)
        ]
        self.fill_polygon(outline, colour)

    def draw_image(
        self, image: Image.Image, x: float, y: float, width: float, height: float
    ) -> None:
        """Draw image stretched over the rectangle at (x, y) in current coordinates."""
        image_width, image_height = image.size
        if width <= 0 or height <= 0 or image_width == 0 or image_height == 0:
            return
        placement = (width / image_width, 0.0, 0.0, height / image_height, x, y)
        a, b, c, d, e, f = _invert(_compose(self._matrix, placement))
        layer = image.convert("RGBA").transform(
            self.image.size,
            Image.Transform.AFFINE,
            (a, c, e, b, d, f),
            resample=Image.Resampling.BILINEAR,
        )
        self.image.alpha_composite(layer)


def rotate_point(point: Point, angle: float) -> Point:
    """Rotate a point by angle radians, truncating to integer coordinates."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(
        int(cos_a * point.x + sin_a * point.y),
        int(-sin_a * point.x + cos_a * point.y),
    )


class Drawable(ABC):
    """One independently movable part of an actor."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._position = Point(0, 0)
        self.rotation = 0.0
        self.actor: Any = None
        self.parent: Drawable | None = None
        self._children: list[Drawable] = []
        self._channel = AnimChannelAngle()
        self.placed_position = Point(0, 0)
        self.placed_rotation = 0.0

    @property
    def name(self) -> str:
        return self._name

    @property
    def position(self) -> Point:
        """Position relative to the parent drawable."""
        return self._position

    @position.setter
    def position(self, pos: Point) -> None:
        self._position = pos

    @property
    def children(self) -> tuple[Drawable, ...]:
        return tuple(self._children)

    @property
    def angle_channel(self) -> AnimChannelAngle:
        """The channel animating this drawable's rotation."""
        return self._channel

    @property
    def movable(self) -> bool:
        """True if the drawable itself moves when dragged, not its actor."""
        return False

    def set_actor(self, actor: Any) -> None:
        """Attach to an actor and name the rotation channel after it."""
        self.actor = actor
        self._channel.name = f"{actor.name}:{self._name}"

    @abstractmethod
    def draw(self, graphics: Graphics) -> None:
        """Draw this drawable on graphics."""

    @abstractmethod
    def hit_test(self, pos: Point) -> bool:
        """True if pos lies on this drawable."""

    def place(self, offset: Point, rotate: float) -> None:
        """Compute absolute placement from the parent's, then place the children."""
        self.placed_position = offset + rotate_point(self._position, rotate)
        self.placed_rotation = self.rotation + rotate
        for child in self._children:
            child.place(self.placed_position, self.placed_rotation)

    def add_child(self, child: Drawable) -> None:
        self._children.append(child)
        child.parent = self

    def move(self, delta: Point) -> None:
        """Move by delta given in drawing coordinates."""
        if self.parent is not None:
            self._position = self._position + rotate_point(delta, -self.parent.placed_rotation)
        else:
            self._position = self._position + delta

    def set_timeline(self, timeline: Timeline) -> None:
        timeline.add_channel(self._channel)

    def set_keyframe(self) -> None:
        """Record the current rotation as a keyframe."""
        self._channel.set_keyframe(self.rotation)

    def get_keyframe(self) -> None:
        """Take the rotation from the animation, if it has keyframes."""
        if self._channel.is_valid():
            self.rotation = self._channel.angle