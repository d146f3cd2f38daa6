"""Animation channels: keyframed values that are tweened over a timeline."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .timeline import Timeline

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str | None) -> int:
    """Parse the leading integer of a string, yielding 0 when there is none."""
    if text is None:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str | None) -> float:
    """Parse a floating point number, yielding 0.0 when it is malformed."""
    try:
        return float(text) if text is not None else 0.0
    except ValueError:
        return 0.0


@dataclass(frozen=True)
class Point:
    """An integer point in drawing coordinates."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)


class Keyframe(ABC):
    """A single keyframe belonging to an animation channel."""

    def __init__(self, channel: AnimChannel) -> None:
        self.channel = channel
        self.frame = 0

    @abstractmethod
    def use_as_1(self) -> None:
        """Make this keyframe the first of a tweening pair."""

    @abstractmethod
    def use_as_2(self) -> None:
        """Make this keyframe the second of a tweening pair."""

    @abstractmethod
    def use_only(self) -> None:
        """Make this keyframe the sole source of the channel value."""

    def xml_save(self, node: ET.Element) -> ET.Element:
        """Append a keyframe element to node and return it."""
        item = ET.SubElement(node, "keyframe")
        item.set("frame", str(self.frame))
        return item


class _Action(Enum):
    APPEND = auto()
    REPLACE = auto()
    INSERT = auto()


class AnimChannel(ABC):
    """Base class for an animation channel."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.timeline: Timeline | None = None
        self._keyframes: list[Keyframe] = []
        self._index1 = -1
        self._index2 = -1

    def _require_timeline(self) -> Timeline:
        if self.timeline is None:
            raise RuntimeError(f"channel {self.name!r} is not attached to a timeline")
        return self.timeline

    @property
    def keyframes(self) -> tuple[Keyframe, ...]:
        """The keyframes of this channel in frame order."""
        return tuple(self._keyframes)

    def is_valid(self) -> bool:
        """True if the channel has keyframes around the current frame."""
        return self._index1 >= 0 or self._index2 >= 0

    def _insert_keyframe(self, keyframe: Keyframe) -> None:
        curr_frame = self._require_timeline().current_frame
        keyframe.frame = curr_frame

        if self._index1 < 0:
            action = _Action.INSERT if self._index2 >= 0 else _Action.APPEND
        else:
            frame1 = self._keyframes[self._index1].frame
            if self._index2 < 0:
                action = _Action.APPEND if frame1 < curr_frame else _Action.REPLACE
            else:
                action = _Action.INSERT if frame1 < curr_frame else _Action.REPLACE

        if action is _Action.APPEND:
            self._keyframes.append(keyframe)
            self._index1 = len(self._keyframes) - 1
        elif action is _Action.REPLACE:
            self._keyframes[self._index1] = keyframe
        else:
            self._keyframes.insert(self._index1 + 1, keyframe)
            self._index1 += 1

    def set_frame(self, curr_frame: int) -> None:
        """Bring the keyframe bracket up to date for curr_frame and compute the value."""
        while self._index2 >= 0 and self._keyframes[self._index2].frame <= curr_frame:
            self._index1 = self._index2
            self._index2 += 1
            if self._index2 >= len(self._keyframes):
                self._index2 = -1

        while self._index1 >= 0 and self._keyframes[self._index1].frame > curr_frame:
            self._index2 = self._index1
            self._index1 -= 1

        if self._index1 >= 0 and self._index2 >= 0:
            first = self._keyframes[self._index1]
            second = self._keyframes[self._index2]
            first.use_as_1()
            second.use_as_2()

            timeline = self._require_timeline()
            frame_rate = float(timeline.frame_rate)
            time1 = first.frame / frame_rate
            time2 = second.frame / frame_rate
            t = (timeline.current_time - time1) / (time2 - time1)
            self.tween(t)
        elif self._index1 >= 0:
            self._keyframes[self._index1].use_only()
        elif self._index2 >= 0:
            self._keyframes[self._index2].use_only()

    def clear_keyframe(self) -> None:
        """Remove the keyframe at the current frame, if there is one."""
        if self._index1 < 0:
            return
        frame1 = self._keyframes[self._index1].frame
        if frame1 != self._require_timeline().current_frame:
            return

        del self._keyframes[self._index1]
        self._index1 -= 1
        if self._index2 >= 0:
            self._index2 -= 1

    def clear(self) -> None:
        """Remove every keyframe."""
        self._keyframes.clear()
        self._index1 = -1
        self._index2 = -1

    def xml_save(self, node: ET.Element) -> ET.Element:
        """Append a channel element with its keyframes to node and return it."""
        item = ET.SubElement(node, "channel")
        item.set("name", self.name)
        for keyframe in self._keyframes:
            keyframe.xml_save(item)
        return item

    def xml_load(self, node: ET.Element) -> None:
        """Load keyframes from a channel element."""
        timeline = self._require_timeline()
        for child in node:
            if child.tag != "keyframe":
                continue
            frame = _atoi(child.get("frame", "0"))
            timeline.current_time = float(frame) / float(timeline.frame_rate)
            self._xml_load_keyframe(child)

    @abstractmethod
    def _xml_load_keyframe(self, node: ET.Element) -> None:
        """Create a keyframe of the channel's type from a keyframe element."""

    @abstractmethod
    def tween(self, t: float) -> None:
        """Interpolate between the current keyframe pair; t runs from 0 to 1."""


class _KeyframeAngle(Keyframe):
    def __init__(self, channel: AnimChannelAngle, angle: float) -> None:
        super().__init__(channel)
        self.angle_channel = channel
        self.angle = angle

    def use_as_1(self) -> None:
        self.angle_channel._first = self

    def use_as_2(self) -> None:
        self.angle_channel._second = self

    def use_only(self) -> None:
        self.angle_channel._angle = self.angle

    def xml_save(self, node: ET.Element) -> ET.Element:
        item = super().xml_save(node)
        item.set("angle", f"{self.angle:f}")
        return item


class AnimChannelAngle(AnimChannel):
    """Animation channel for angles in radians."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._angle = 0.0
        self._first: _KeyframeAngle | None = None
        self._second: _KeyframeAngle | None = None

    @property
    def angle(self) -> float:
        """The angle computed for the current time."""
        return self._angle

    def set_keyframe(self, angle: float) -> None:
        """Set a keyframe with this angle at the current frame."""
        self._insert_keyframe(_KeyframeAngle(self, angle))

    def tween(self, t: float) -> None:
        assert self._first is not None and self._second is not None
        self._angle = self._first.angle * (1 - t) + self._second.angle * t

    def _xml_load_keyframe(self, node: ET.Element) -> None:
        self.set_keyframe(_atof(node.get("angle", "0")))


class _KeyframePoint(Keyframe):
    def __init__(self, channel: AnimChannelPoint, point: Point) -> None:
        super().__init__(channel)
        self.point_channel = channel
        self.point = point

    def use_as_1(self) -> None:
        self.point_channel._first = self

    def use_as_2(self) -> None:
        self.point_channel._second = self

    def use_only(self) -> None:
        self.point_channel._point = self.point

    def xml_save(self, node: ET.Element) -> ET.Element:
        item = super().xml_save(node)
        item.set("x", str(self.point.x))
        item.set("y", str(self.point.y))
        return item


class AnimChannelPoint(AnimChannel):
    """Animation channel for points (translational movement)."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._point = Point(0, 0)
        self._first: _KeyframePoint | None = None
        self._second: _KeyframePoint | None = None

    @property
    def point(self) -> Point:
        """The point computed for the current time."""
        return self._point

    def set_keyframe(self, point: Point) -> None:
        """Set a keyframe with this point at the current frame."""
        self._insert_keyframe(_KeyframePoint(self, point))

    def tween(self, t: float) -> None:
        assert self._first is not None and self._second is not None
        a = self._first.point
        b = self._second.point
        self._point = Point(int(a.x + t * (b.x - a.x)), int(a.y + t * (b.y - a.y)))

    def _xml_load_keyframe(self, node: ET.Element) -> None:
        x = _atoi(node.get("x", "0"))
        y = _atoi(node.get("y", "0"))
        self.set_keyframe(Point(x, y))