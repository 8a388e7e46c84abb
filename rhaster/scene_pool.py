"""Owns the game's scenes and forwards the loop's ticks to the active one."""

from __future__ import annotations

from typing import Any, Callable, Optional


class ScenePool:
    """Creates, selects and unloads scenes.

    Scenes are built by ``scene_factory(name)``. A scene must expose ``name``
    and ``id`` attributes and ``fixed_tick``, ``tick``, ``render`` and
    ``cleanup`` methods. ``after_tick``, if given, runs after every tick of
    the active scene.
    """

    def __init__(
        self,
        scene_factory: Callable[[str], Any],
        after_tick: Optional[Callable[[], None]] = None,
    ) -> None:
        self._scene_factory = scene_factory
        self._after_tick = after_tick
        self._scenes: list[Any] = []
        self._active: Optional[Any] = None

    def create_scene(self, name: str) -> Any:
        """Build a scene with ``name``, keep it and return it."""
        scene = self._scene_factory(name)
        self._scenes.append(scene)
        return scene

    def select_scene(self, name: str) -> None:
        """Make the scene called ``name`` active; KeyError if there is none."""
        self._active = self.get_scene(name)

    def select_first_scene(self) -> None:
        """Make the first created scene active, if any scene exists."""
        if self._scenes:
            self._active = self._scenes[0]

    def unload_scene(self, name: str) -> None:
        """Drop every scene called ``name``."""
        removed = [scene for scene in self._scenes if scene.name == name]
        self._scenes = [scene for scene in self._scenes if scene.name != name]
        if any(scene is self._active for scene in removed):
            self._active = None

    def unload_all_scenes(self) -> None:
        self._scenes.clear()
        self._active = None

    def fixed_tick(self) -> None:
        if self._active is None:
            return
        self._active.fixed_tick()

    def tick(self) -> None:
        if self._active is None:
            return
        self._active.tick()
        if self._after_tick is not None:
            self._after_tick()

    def render(self) -> None:
        if self._active is None:
            return
        self._active.render()

    def cleanup(self) -> None:
        if self._active is None:
            return
        self._active.cleanup()

    def does_scene_exist(self, name: str) -> bool:
        return any(scene.name == name for scene in self._scenes)

    @property
    def active_scene(self) -> Any:
        """The active scene; LookupError before one has been selected."""
        if self._active is None:
            raise LookupError("no active scene is set yet")
        return self._active

    def get_scene(self, name: str) -> Any:
        """Return the first scene called ``name``; KeyError if there is none."""
        for scene in self._scenes:
            if scene.name == name:
                return scene
        raise KeyError(f"scene not found: {name!r}")

    def get_scene_by_id(self, scene_id: int) -> Any:
        """Return the first scene with ``scene_id``; KeyError if there is none."""
        for scene in self._scenes:
            if scene.id == scene_id:
                return scene
        raise KeyError(f"scene not found: id {scene_id}")