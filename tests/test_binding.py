import pytest

from rhaster.binding import (
    DeviceInfo,
    DeviceType,
    InputAction,
    InputBuffer,
    InputSnapshot,
    Modifier,
    TriggerEvent,
    Vec2,
    bitset_cast,
    convert_input_value,
    mask_to_seq,
    trigger_to_value,
)
from rhaster.hashing import UID


def test_bitset_cast_values_fixed_by_source():
    assert bitset_cast(TriggerEvent.TRIGGERED) == 0b001
    assert bitset_cast(TriggerEvent.PRESSED) == 0b010
    assert bitset_cast(TriggerEvent.RELEASED) == 0b100
    assert bitset_cast(Modifier.NEGATE) == 0b01
    assert bitset_cast(Modifier.SWIZZLE) == 0b10


@pytest.mark.parametrize("position", [0, 1, 2, 5, 7, 31])
def test_mask_to_seq_single_bit(position):
    assert mask_to_seq(1 << position) == position


def test_mask_to_seq_picks_lowest_bit():
    assert mask_to_seq((1 << 6) | (1 << 3)) == 3


def test_mask_to_seq_zero_raises():
    with pytest.raises(ValueError):
        mask_to_seq(0)


@pytest.mark.parametrize("member", list(TriggerEvent) + list(Modifier))
def test_bitset_cast_round_trip(member):
    assert mask_to_seq(bitset_cast(member)) == member.value


def test_bitset_cast_combines_bits():
    mask = bitset_cast(TriggerEvent.PRESSED, TriggerEvent.RELEASED)
    assert mask == bitset_cast(TriggerEvent.PRESSED) | bitset_cast(TriggerEvent.RELEASED)
    assert mask & bitset_cast(TriggerEvent.TRIGGERED) == 0


def test_bitset_cast_duplicates_are_idempotent():
    assert bitset_cast(Modifier.NEGATE, Modifier.NEGATE) == bitset_cast(Modifier.NEGATE)


def test_bitset_cast_mixed_kinds_raise():
    with pytest.raises(TypeError):
        bitset_cast(Modifier.NEGATE, TriggerEvent.PRESSED)


def test_trigger_to_value():
    assert trigger_to_value(TriggerEvent.TRIGGERED) is True
    assert trigger_to_value(TriggerEvent.PRESSED) is True
    assert trigger_to_value(TriggerEvent.RELEASED) is False


def test_trigger_to_value_invalid():
    with pytest.raises(ValueError):
        trigger_to_value("pressed")


def test_convert_scalar_to_vec2():
    assert convert_input_value(True, Vec2) == Vec2(1.0, 0.0)
    assert convert_input_value(0.5, Vec2) == Vec2(0.5, 0.0)


def test_convert_vec2_to_scalars():
    vec = Vec2(0.25, 3.0)
    assert convert_input_value(vec, float) == 0.25
    assert convert_input_value(vec, bool) is True
    assert convert_input_value(Vec2(0.0, 3.0), bool) is False
    assert convert_input_value(vec, Vec2) is vec


def test_convert_between_scalars():
    assert convert_input_value(True, float) == 1.0
    assert convert_input_value(0.0, bool) is False


def test_convert_unsupported_target():
    with pytest.raises(TypeError):
        convert_input_value(True, str)


def test_device_info_defaults_and_range():
    info = DeviceInfo()
    assert info.type is DeviceType.KEYBOARD
    assert info.id == 255
    with pytest.raises(ValueError):
        DeviceInfo(DeviceType.GAMEPAD, 256)


def test_input_action_modifiers_from_members():
    uid = UID("jump")
    action = InputAction(uid, Modifier.NEGATE, Modifier.SWIZZLE)
    assert action.uid == uid
    assert action.modifiers == bitset_cast(Modifier.NEGATE, Modifier.SWIZZLE)
    assert action.has_modifier(Modifier.SWIZZLE)


def test_input_action_without_modifiers():
    action = InputAction(UID("move"))
    assert action.modifiers == 0
    assert not action.has_modifier(Modifier.NEGATE)


def test_input_action_from_bitset_equals_members():
    uid = UID("move")
    mask = bitset_cast(Modifier.SWIZZLE)
    assert InputAction(uid, mask) == InputAction(uid, Modifier.SWIZZLE)


def test_input_action_rejects_bad_arguments():
    with pytest.raises(TypeError):
        InputAction(UID("x"), TriggerEvent.PRESSED)
    with pytest.raises(ValueError):
        InputAction(UID("x"), 1 << 8)


def test_snapshot_equality_ignores_value():
    uid = UID("fire")
    a = InputSnapshot(uid, True, TriggerEvent.PRESSED)
    b = InputSnapshot(uid, Vec2(1.0, 2.0), TriggerEvent.PRESSED)
    c = InputSnapshot(uid, True, TriggerEvent.RELEASED)
    assert a == b
    assert hash(a) == hash(b)
    assert not a == c


def test_input_buffer_trigger_and_release():
    buffer = InputBuffer()
    buffer.trigger(32, 0)
    assert buffer.is_pressed(32, 0)
    assert not buffer.is_pressed(32, 1)
    buffer.release(32, 0)
    assert not buffer.is_pressed(32, 0)
    assert buffer.pressed_this_frame() == ()


def test_input_buffer_pressed_is_sorted_and_unique():
    buffer = InputBuffer()
    buffer.trigger(97, 1)
    buffer.trigger(32, 0)
    buffer.trigger(97, 0)
    buffer.trigger(32, 0)
    assert buffer.pressed_this_frame() == ((32, 0), (97, 0), (97, 1))


def test_input_buffer_release_unknown_is_harmless():
    buffer = InputBuffer()
    buffer.trigger(5, 2)
    buffer.release(6, 2)
    assert buffer.pressed_this_frame() == ((5, 2),)