from pathlib import Path

import pytest

from rhaster.hashing import NULL_UID, UID
from rhaster.resource_manager import LifetimeEvent, ResourceManager


def make_manager():
    loaded = []

    def texture_loader(full_path):
        loaded.append(("texture", full_path))
        return object()

    def font_loader(full_path, size):
        loaded.append(("font", full_path, size))
        return object()

    return ResourceManager("data", texture_loader, font_loader), loaded


def test_data_path():
    manager, _ = make_manager()
    assert manager.data_path == Path("data")


def test_texture_is_loaded_once_from_full_path():
    manager, loaded = make_manager()
    first = manager.load_texture("img.png")
    second = manager.load_texture("img.png")
    assert first is second
    assert loaded == [("texture", str(Path("data") / "img.png"))]


def test_fonts_are_cached_per_size():
    manager, loaded = make_manager()
    small = manager.load_font("font.ttf", 12)
    again = manager.load_font("font.ttf", 12)
    large = manager.load_font("font.ttf", 24)
    assert small is again
    assert large is not small
    assert [entry[2] for entry in loaded] == [12, 24]


def test_font_size_out_of_range():
    manager, _ = make_manager()
    with pytest.raises(ValueError):
        manager.load_font("font.ttf", 256)


def test_events_broadcast_in_order_and_deduplicated():
    manager, _ = make_manager()
    received = []
    manager.add_lifetime_observer(lambda event, value: received.append((event, value)))
    manager.signal_lifetime_event(LifetimeEvent.UNLOAD_FONTS)
    manager.signal_lifetime_event(LifetimeEvent.UNLOAD_ALL)
    manager.signal_lifetime_event(LifetimeEvent.UNLOAD_ALL)
    manager.unload_unused_resources()
    assert received == [
        (UID(LifetimeEvent.UNLOAD_ALL.value), NULL_UID),
        (UID(LifetimeEvent.UNLOAD_FONTS.value), NULL_UID),
    ]


def test_events_are_cleared_after_unload():
    manager, _ = make_manager()
    received = []
    manager.add_lifetime_observer(lambda event, value: received.append(value))
    manager.signal_lifetime_event(LifetimeEvent.UNLOAD_AUDIO, UID("music"))
    manager.unload_unused_resources()
    manager.unload_unused_resources()
    assert received == [UID("music")]


def test_removed_observer_is_not_called():
    manager, _ = make_manager()
    removed_calls = []
    kept_calls = []

    def removed(event, value):
        removed_calls.append((event, value))

    def kept(event, value):
        kept_calls.append((event, value))

    manager.add_lifetime_observer(removed)
    manager.add_lifetime_observer(kept)
    manager.remove_lifetime_observer(removed)
    manager.signal_lifetime_event(LifetimeEvent.UNLOAD_TEXTURES)
    manager.unload_unused_resources()
    assert kept_calls == [(UID(LifetimeEvent.UNLOAD_TEXTURES.value), NULL_UID)]
    assert removed_calls == []