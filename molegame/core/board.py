from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from .random_source import RandomSource

HitListener = Callable[["Location"], object]


@dataclass(eq=False)
class Location:
    """One hole on the board. Identity matters, so equality is by object."""
    index: int
    visible: bool = False
    _listeners: List[HitListener] = field(default_factory=list, repr=False)

    def add_hit_listener(self, listener: HitListener) -> None:
        # registering the same callable twice is ignored
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_hit_listener(self, listener: HitListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listeners(self) -> List[HitListener]:
        return list(self._listeners)

    def hit(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def hide(self) -> None:
        self.visible = False


def make_locations(count: int) -> List[Location]:
    return [Location(index=i) for i in range(count)]


def toggle_visibility(location: Location) -> Location:
    location.visible = not location.visible
    return location


class TargetSelector:
    """
    Picks where the next mole shows up.

    Only the previous pick is excluded, so the same hole never comes up twice
    in a row. With a single location there is nothing else to pick and
    choose() never returns.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng or RandomSource()

    def choose(self, locations: Sequence[Location], session) -> Location:
        if not locations:
            raise ValueError("No locations to choose from")
        while True:
            index = self.rng.random_integer(0, len(locations) - 1)
            location = locations[index]
            if location is not session.last_location:
                break
        session.last_location = location
        return location
