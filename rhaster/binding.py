"""Input binding types: triggers, modifiers, devices, input values and the pressed-key buffer."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from rhaster.hashing import UID

MODIFIER_BITS = 8
TRIGGER_BITS = 8
MAX_DEVICE_ID = 0xFF


class TriggerEvent(enum.Enum):
    """When a bound command fires: on press, while held, or on release."""

    TRIGGERED = 0x0
    PRESSED = 0x1
    RELEASED = 0x2


class Modifier(enum.Enum):
    """Alterations applied to an input value before it is signalled."""

    NEGATE = 0x0
    SWIZZLE = 0x1


class DeviceType(enum.Enum):
    KEYBOARD = 0
    GAMEPAD = 1


@dataclass(frozen=True)
class Vec2:
    """A two-component float vector."""

    x: float = 0.0
    y: float = 0.0


InputValue = Union[bool, float, Vec2]


@dataclass(frozen=True)
class DeviceInfo:
    """The kind of a device and its index among devices of that kind."""

    type: DeviceType = DeviceType.KEYBOARD
    id: int = MAX_DEVICE_ID

    def __post_init__(self) -> None:
        if not 0 <= self.id <= MAX_DEVICE_ID:
            raise ValueError(f"device id {self.id} is out of range 0..{MAX_DEVICE_ID}")


def mask_to_seq(mask: int) -> int:
    """Return the position of the lowest set bit of a non-zero mask."""
    if mask == 0:
        raise ValueError("mask cannot be 0")
    if mask < 0:
        raise ValueError("mask must be non-negative")
    return (mask & -mask).bit_length() - 1


def bitset_cast(*args: "TriggerEvent | Modifier") -> int:
    """Combine triggers or modifiers, all of one kind, into a bitmask."""
    if not args:
        return 0
    kind = type(args[0])
    if kind not in (TriggerEvent, Modifier):
        raise TypeError(f"cannot build a bitset from {kind.__name__}")
    mask = 0
    for arg in args:
        if type(arg) is not kind:
            raise TypeError("bitset arguments must all be of the same kind")
        mask |= 1 << arg.value
    return mask


def trigger_to_value(trigger: TriggerEvent) -> bool:
    """Return the digital value a trigger stands for."""
    if trigger in (TriggerEvent.TRIGGERED, TriggerEvent.PRESSED):
        return True
    if trigger is TriggerEvent.RELEASED:
        return False
    raise ValueError(f"invalid trigger event: {trigger!r}")


def convert_input_value(value: InputValue, target: type) -> InputValue:
    """Convert an input value to ``bool``, ``float`` or ``Vec2``.

    Scalars become a vector along x; a vector becomes its x component.
    """
    if target not in (bool, float, Vec2):
        raise TypeError(f"no conversion to {getattr(target, '__name__', target)!r}")
    if isinstance(value, Vec2):
        if target is Vec2:
            return value
        return target(value.x)
    if not isinstance(value, (bool, int, float)):
        raise TypeError(f"unsupported input value {type(value).__name__}")
    if target is Vec2:
        return Vec2(float(value), 0.0)
    return target(value)


class InputAction:
    """An input action identified by a UID, with an optional set of modifiers."""

    __slots__ = ("uid", "modifiers")

    def __init__(self, uid: UID, *args: "Modifier | int") -> None:
        self.uid = uid
        if len(args) == 1 and isinstance(args[0], int) and not isinstance(args[0], bool):
            mask = args[0]
            if not 0 <= mask < (1 << MODIFIER_BITS):
                raise ValueError(f"modifier bitset {mask} does not fit {MODIFIER_BITS} bits")
            self.modifiers = mask
        else:
            for arg in args:
                if not isinstance(arg, Modifier):
                    raise TypeError("modifiers must be Modifier members or a single bitset")
            self.modifiers = bitset_cast(*args)

    def has_modifier(self, modifier: Modifier) -> bool:
        return bool(self.modifiers & (1 << modifier.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputAction):
            return NotImplemented
        return self.uid == other.uid and self.modifiers == other.modifiers

    def __hash__(self) -> int:
        return hash((self.uid, self.modifiers))

    def __repr__(self) -> str:
        return f"InputAction({self.uid!r}, modifiers={self.modifiers:#04x})"


@dataclass(eq=False)
class InputSnapshot:
    """The accumulated value of an input action for one trigger.

    Two snapshots are equal when their UID and trigger match.
    """

    uid: UID
    value: InputValue = False
    trigger: TriggerEvent = TriggerEvent.TRIGGERED

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputSnapshot):
            return NotImplemented
        return self.uid == other.uid and self.trigger == other.trigger

    def __hash__(self) -> int:
        return hash((self.uid, self.trigger))


class InputBuffer:
    """Remembers which binding codes are held down on which devices."""

    def __init__(self) -> None:
        self._pressed: set[tuple[int, int]] = set()

    def trigger(self, code: int, device_id: int) -> None:
        self._pressed.add((code, device_id))

    def release(self, code: int, device_id: int) -> None:
        self._pressed.discard((code, device_id))

    def is_pressed(self, code: int, device_id: int) -> bool:
        return (code, device_id) in self._pressed

    def pressed_this_frame(self) -> tuple[tuple[int, int], ...]:
        """Return the held (code, device id) pairs in ascending order."""
        return tuple(sorted(self._pressed))