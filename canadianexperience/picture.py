"""The animation picture: actors, observers and the timeline."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from .drawable import Graphics
from .timeline import Timeline

if TYPE_CHECKING:
    from .actor import Actor
    from .picture_observer import PictureObserver

DEFAULT_SIZE = (1500, 800)


class Picture:
    """A picture made of actors, animated by a timeline and watched by observers."""

    def __init__(self) -> None:
        self.size: tuple[int, int] = DEFAULT_SIZE
        self._observers: list[PictureObserver] = []
        self._actors: list[Actor] = []
        self._timeline = Timeline()

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def actors(self) -> tuple[Actor, ...]:
        return tuple(self._actors)

    @property
    def animation_time(self) -> float:
        """The current animation time in seconds."""
        return self._timeline.current_time

    @animation_time.setter
    def animation_time(self, time: float) -> None:
        self._timeline.current_time = time
        self.update_observers()
        for actor in self._actors:
            actor.get_keyframe()

    def __iter__(self) -> Iterator[Actor]:
        return iter(self._actors)

    def __len__(self) -> int:
        return len(self._actors)

    def add_observer(self, observer: PictureObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: PictureObserver) -> None:
        """Remove an observer; an observer that is not registered is ignored."""
        try:
            self._observers.remove(observer)
        except ValueError:
            pass

    def update_observers(self) -> None:
        """Tell every observer the picture has changed."""
        for observer in list(self._observers):
            observer.update_observer()

    def draw(self, graphics: Graphics) -> None:
        for actor in self._actors:
            actor.draw(graphics)

    def add_actor(self, actor: Actor) -> None:
        self._actors.append(actor)
        actor.set_picture(self)

    def save(self, filename: str | Path) -> None:
        """Save the animation to an XML file."""
        root = ET.Element("anim")
        self._timeline.save(root)
        ET.SubElement(root, "machines")
        ET.ElementTree(root).write(filename, encoding="utf-8", xml_declaration=True)

    def load(self, filename: str | Path) -> None:
        """Load the animation from an XML file and rewind to the start."""
        root = ET.parse(filename).getroot()
        self._timeline.load(root)
        self.animation_time = 0.0
        self.update_observers()