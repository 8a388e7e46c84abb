import itertools

import pytest

from rhaster.scene_pool import ScenePool

_ids = itertools.count()


class FakeScene:
    def __init__(self, name):
        self.name = name
        self.id = next(_ids)
        self.calls = []

    def fixed_tick(self):
        self.calls.append("fixed_tick")

    def tick(self):
        self.calls.append("tick")

    def render(self):
        self.calls.append("render")

    def cleanup(self):
        self.calls.append("cleanup")


def test_create_scene_returns_factory_result():
    pool = ScenePool(FakeScene)
    scene = pool.create_scene("level")
    assert scene.name == "level"
    assert pool.does_scene_exist("level")
    assert not pool.does_scene_exist("menu")


def test_active_scene_missing_raises():
    pool = ScenePool(FakeScene)
    level = pool.create_scene("level")
    with pytest.raises(LookupError):
        pool.active_scene
    assert pool.get_scene("level") is level


def test_ticks_without_active_scene_do_nothing():
    log = []
    pool = ScenePool(FakeScene, after_tick=lambda: log.append("late"))
    scene = pool.create_scene("level")
    pool.tick()
    pool.fixed_tick()
    pool.render()
    pool.cleanup()
    assert scene.calls == []
    assert log == []


def test_select_scene_forwards_calls():
    log = []
    pool = ScenePool(FakeScene, after_tick=lambda: log.append("late"))
    pool.create_scene("menu")
    level = pool.create_scene("level")
    pool.select_scene("level")
    assert pool.active_scene is level
    pool.fixed_tick()
    pool.tick()
    pool.render()
    pool.cleanup()
    assert level.calls == ["fixed_tick", "tick", "render", "cleanup"]
    assert log == ["late"]


def test_select_unknown_scene_raises():
    pool = ScenePool(FakeScene)
    with pytest.raises(KeyError):
        pool.select_scene("nowhere")


def test_select_first_scene():
    pool = ScenePool(FakeScene)
    pool.select_first_scene()
    with pytest.raises(LookupError):
        pool.active_scene
    first = pool.create_scene("a")
    pool.create_scene("b")
    pool.select_first_scene()
    assert pool.active_scene is first


def test_get_scene_by_name_and_id():
    pool = ScenePool(FakeScene)
    a = pool.create_scene("a")
    b = pool.create_scene("b")
    assert pool.get_scene("b") is b
    assert pool.get_scene_by_id(a.id) is a
    with pytest.raises(KeyError):
        pool.get_scene_by_id(-1)


def test_unload_scene_clears_active():
    pool = ScenePool(FakeScene)
    pool.create_scene("a")
    pool.create_scene("b")
    pool.select_scene("a")
    pool.unload_scene("a")
    assert not pool.does_scene_exist("a")
    assert pool.does_scene_exist("b")
    with pytest.raises(LookupError):
        pool.active_scene


def test_unload_all_scenes():
    pool = ScenePool(FakeScene)
    pool.create_scene("a")
    pool.create_scene("b")
    pool.unload_all_scenes()
    assert not pool.does_scene_exist("a")
    with pytest.raises(KeyError):
        pool.get_scene("b")