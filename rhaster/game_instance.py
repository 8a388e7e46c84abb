"""Game-wide state: player controllers, gravity and screen size."""

from __future__ import annotations

from typing import Any, Callable, TypeVar, Union

from rhaster.binding import Vec2

C = TypeVar("C")


class GameInstance:
    """Owns the player controllers and global game settings."""

    def __init__(self) -> None:
        self._controllers: list[Any] = []
        self._gravity_coefficient = 10.0
        self._screen_dimensions = Vec2(0.0, 0.0)

    def add_controller(self, factory: Callable[..., C], *args: Any, **kwargs: Any) -> C:
        """Build a controller with ``factory(*args, **kwargs)``, keep it and return it."""
        controller = factory(*args, **kwargs)
        self._controllers.append(controller)
        return controller

    def remove_controller(self, controller: Any) -> None:
        """Drop ``controller``, matched by identity."""
        self._controllers = [c for c in self._controllers if c is not controller]

    def clear_controllers(self) -> None:
        self._controllers.clear()

    def destroy(self) -> None:
        self._controllers.clear()

    def controllers(self) -> tuple:
        return tuple(self._controllers)

    @property
    def gravity_coefficient(self) -> float:
        return self._gravity_coefficient

    @gravity_coefficient.setter
    def gravity_coefficient(self, coefficient: float) -> None:
        self._gravity_coefficient = float(coefficient)

    @property
    def screen_dimensions(self) -> Vec2:
        return self._screen_dimensions

    @screen_dimensions.setter
    def screen_dimensions(self, dimensions: Union[Vec2, tuple]) -> None:
        if not isinstance(dimensions, Vec2):
            width, height = dimensions
            dimensions = Vec2(float(width), float(height))
        self._screen_dimensions = dimensions


GAME_INSTANCE = GameInstance()