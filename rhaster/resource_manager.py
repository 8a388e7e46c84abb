"""Caches loaded textures and fonts and relays resource lifetime events."""

from __future__ import annotations

import enum
import os
from pathlib import Path
from typing import Any, Callable, Union

from rhaster.data import SafeResource
from rhaster.hashing import NULL_UID, UID

PathLike = Union[str, "os.PathLike[str]"]
Observer = Callable[[UID, UID], None]

MAX_FONT_SIZE = 0xFF


class LifetimeEvent(enum.Enum):
    UNLOAD_ALL = 0
    UNLOAD_AUDIO = 1
    UNLOAD_TEXTURES = 2
    UNLOAD_FONTS = 3


class ResourceManager:
    """Loads resources relative to a data directory and caches them.

    ``texture_loader(full_path)`` and ``font_loader(full_path, size)`` build
    the resources; each path (and size, for fonts) is loaded once. Lifetime
    observers are called as ``observer(event_uid, value)``.
    """

    def __init__(
        self,
        data_path: PathLike,
        texture_loader: Callable[[str], Any],
        font_loader: Callable[[str, int], Any],
    ) -> None:
        self._data_path = Path(data_path)
        self._texture_loader = texture_loader
        self._font_loader = font_loader
        self._textures: dict[UID, Any] = {}
        self._fonts: dict[tuple[UID, int], Any] = {}
        self._observers: list[Observer] = []
        self._queued_events: SafeResource[set[tuple[LifetimeEvent, UID]]] = SafeResource(set())

    @property
    def data_path(self) -> Path:
        return self._data_path

    def load_texture(self, path: PathLike) -> Any:
        uid = UID(os.fspath(path))
        if uid not in self._textures:
            self._textures[uid] = self._texture_loader(str(self._data_path / path))
        return self._textures[uid]

    def load_font(self, path: PathLike, size: int) -> Any:
        if not 0 <= size <= MAX_FONT_SIZE:
            raise ValueError(f"font size {size} is out of range 0..{MAX_FONT_SIZE}")
        key = (UID(os.fspath(path)), size)
        if key not in self._fonts:
            self._fonts[key] = self._font_loader(str(self._data_path / path), size)
        return self._fonts[key]

    def add_lifetime_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_lifetime_observer(self, observer: Observer) -> None:
        for index, registered in enumerate(self._observers):
            if registered is observer or registered == observer:
                del self._observers[index]
                return

    def signal_lifetime_event(self, event: LifetimeEvent, value: UID = NULL_UID) -> None:
        """Queue an event; duplicates are merged until the next unload."""
        with self._queued_events.lock() as events:
            events.add((event, value))

    def unload_unused_resources(self) -> None:
        """Broadcast the queued events in order, then drop them."""
        pending = sorted(self._queued_events.peek(), key=lambda item: (item[0].value, item[1].uid))
        for event, value in pending:
            event_uid = UID(event.value)
            for observer in list(self._observers):
                observer(event_uid, value)
        with self._queued_events.lock() as events:
            events.clear()