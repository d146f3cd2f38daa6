"""Observer base class for pictures."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .picture import Picture


class PictureObserver(ABC):
    """Something that is told whenever the picture it observes changes."""

    def __init__(self) -> None:
        self._picture: Picture | None = None

    @property
    def picture(self) -> Picture | None:
        """The picture being observed."""
        return self._picture

    @abstractmethod
    def update_observer(self) -> None:
        """Called when the observed picture changes."""

    def set_picture(self, picture: Picture) -> None:
        """Start observing picture."""
        self._picture = picture
        picture.add_observer(self)

    def detach(self) -> None:
        """Stop observing the current picture."""
        if self._picture is not None:
            self._picture.remove_observer(self)
            self._picture = None

    def __enter__(self) -> PictureObserver:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.detach()