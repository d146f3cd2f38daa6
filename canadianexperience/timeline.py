"""The timeline that owns animation channels and the current animation time."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .anim_channel import AnimChannel, _atoi

DEFAULT_NUM_FRAMES = 300
DEFAULT_FRAME_RATE = 30


class Timeline:
    """Manages animation channels, frame count, frame rate and current time."""

    def __init__(self) -> None:
        self.num_frames = DEFAULT_NUM_FRAMES
        self.frame_rate = DEFAULT_FRAME_RATE
        self._current_time = 0.0
        self._channels: list[AnimChannel] = []

    @property
    def channels(self) -> tuple[AnimChannel, ...]:
        """The channels registered on this timeline."""
        return tuple(self._channels)

    @property
    def current_time(self) -> float:
        """The current animation time in seconds."""
        return self._current_time

    @current_time.setter
    def current_time(self, t: float) -> None:
        self._current_time = t
        for channel in self._channels:
            channel.set_frame(self.current_frame)

    @property
    def current_frame(self) -> int:
        """The frame associated with the current time."""
        return int(self._current_time * self.frame_rate)

    @property
    def duration(self) -> float:
        """The animation duration in seconds."""
        return float(self.num_frames) / self.frame_rate

    def add_channel(self, channel: AnimChannel) -> None:
        """Register a channel and attach it to this timeline."""
        self._channels.append(channel)
        channel.timeline = self

    def clear(self) -> None:
        """Reset to the defaults and remove every keyframe."""
        self._current_time = 0.0
        self.num_frames = DEFAULT_NUM_FRAMES
        self.frame_rate = DEFAULT_FRAME_RATE
        for channel in self._channels:
            channel.clear()

    def clear_keyframe(self) -> None:
        """Remove any keyframe at the current time on every channel."""
        for channel in self._channels:
            channel.clear_keyframe()

    def save(self, root: ET.Element) -> None:
        """Write the timeline attributes and channels into root."""
        root.set("numframes", str(self.num_frames))
        root.set("framerate", str(self.frame_rate))
        for channel in self._channels:
            channel.xml_save(root)

    def load(self, root: ET.Element) -> None:
        """Replace the animation with what root describes."""
        self.clear()
        self.num_frames = _atoi(root.get("numframes", "300"))
        self.frame_rate = _atoi(root.get("framerate", "30"))
        for child in root:
            if child.tag == "channel":
                self._load_channel(child)

    def _load_channel(self, node: ET.Element) -> None:
        name = node.get("name", "")
        for channel in self._channels:
            if channel.name == name:
                channel.xml_load(node)
                break