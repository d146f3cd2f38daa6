"""A drawable made from a filled polygon."""

from __future__ import annotations

from typing import NamedTuple

from .anim_channel import Point
from .drawable import Drawable, Graphics, rotate_point


class Colour(NamedTuple):
    """An RGBA colour with 8-bit components."""

    red: int
    green: int
    blue: int
    alpha: int = 255


BLACK = Colour(0, 0, 0)


def _contains(path: list[Point], x: float, y: float) -> bool:
    """Even-odd point-in-polygon test."""
    inside = False
    for a, b in zip(path, path[1:] + path[:1]):
        if (a.y > y) != (b.y > y):
            x_cross = a.x + (y - a.y) * (b.x - a.x) / (b.y - a.y)
            if x < x_cross:
                inside = not inside
    return inside


class PolyDrawable(Drawable):
    """A drawable that fills a polygon given by its points."""

    def __init__(self, name: str, color: Colour = BLACK) -> None:
        super().__init__(name)
        self.color = color
        self._points: list[Point] = []
        self._path: list[Point] = []

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def add_point(self, point: Point) -> None:
        self._points.append(point)

    def draw(self, graphics: Graphics) -> None:
        """Fill the polygon at its placed position and remember its outline."""
        if not self._points:
            return
        self._path = [
            rotate_point(point, self.placed_rotation) + self.placed_position
            for point in self._points
        ]
        graphics.fill_polygon([(p.x, p.y) for p in self._path], self.color)

    def hit_test(self, pos: Point) -> bool:
        """True if pos lies inside the polygon as it was last drawn."""
        return _contains(self._path, pos.x, pos.y)