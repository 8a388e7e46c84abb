from rhaster.binding import Vec2
from rhaster.game_instance import GameInstance


class Controller:
    def __init__(self, name, *, player=0):
        self.name = name
        self.player = player

    def __eq__(self, other):
        return isinstance(other, Controller) and self.name == other.name


def test_add_controller_builds_with_arguments():
    instance = GameInstance()
    controller = instance.add_controller(Controller, "p1", player=2)
    assert controller.name == "p1"
    assert controller.player == 2
    assert instance.controllers() == (controller,)


def test_remove_controller_matches_identity():
    instance = GameInstance()
    first = instance.add_controller(Controller, "same")
    second = instance.add_controller(Controller, "same")
    instance.remove_controller(second)
    remaining = instance.controllers()
    assert len(remaining) == 1
    assert remaining[0] is first


def test_clear_and_destroy_drop_controllers():
    instance = GameInstance()
    instance.add_controller(Controller, "a")
    instance.clear_controllers()
    assert instance.controllers() == ()
    instance.add_controller(Controller, "b")
    instance.destroy()
    assert instance.controllers() == ()


def test_gravity_coefficient_default_and_set():
    instance = GameInstance()
    assert instance.gravity_coefficient == 10.0
    instance.gravity_coefficient = 4.5
    assert instance.gravity_coefficient == 4.5


def test_screen_dimensions_default_and_set():
    instance = GameInstance()
    assert instance.screen_dimensions == Vec2(0.0, 0.0)
    instance.screen_dimensions = (640, 480)
    assert instance.screen_dimensions == Vec2(640.0, 480.0)
    instance.screen_dimensions = Vec2(1.0, 2.0)
    assert instance.screen_dimensions == Vec2(1.0, 2.0)