# rhaster

Building blocks for a small 2D game engine, written against plain Python
objects so that each piece can be used and tested on its own. There are no
runtime dependencies.

## Modules

- `rhaster.hashing`: 64-bit FNV-1a hashing. `hash_int` hashes the eight
  little-endian bytes of an unsigned 64-bit integer, `hash_str` hashes the
  UTF-8 bytes of a string, `type_name` and `type_hash` name and hash a type.
  `UID` is an immutable, ordered, hashable identifier built from a string or an
  integer; `NULL_UID` is `UID("0")`.
- `rhaster.data`:
  - `Blackboard`: a typed store keyed by `UID`. `store` refuses existing keys,
    `edit` refuses missing keys and values of another type (both return
    `False`), `retrieve(uid, data_type)` raises `KeyError` or `TypeError`.
  - `Deleter`: marks elements by identity and later removes them from a list
    (`cleanup`) or from a mapping's values (`cleanup_mapping`).
  - `SparseSet`: dense storage with swap-removal; `data()` gives storage order.
  - `SafeResource`: a value behind a lock, with `lock()` as a context manager,
    `peek`, `set` and `clone` (a deep copy).
- `rhaster.game_time`: `GameTime` measures frame deltas from a clock
  (`time.perf_counter` by default), accumulates lag for fixed steps of
  0.005 s (`fixed_tick`, `is_fixed_tick_required`), reports `delta_time`,
  `fps` and `sleep_time` against a 16 ms frame budget, and runs
  `set_timeout` (once), `set_interval` (until the callback returns `True`) and
  `set_repeating` (forever) callbacks. `TimingType.FIXED_DELTA_TIME` makes
  `delta_time` return the fixed step.
- `rhaster.binding`: `TriggerEvent`, `Modifier`, `DeviceType`, `Vec2`,
  `DeviceInfo`, `InputAction`, `InputSnapshot`, the helpers `mask_to_seq`,
  `bitset_cast`, `trigger_to_value` and `convert_input_value`, and
  `InputBuffer`, which remembers held `(code, device_id)` pairs.
- `rhaster.sound`: `SoundType`, `Audio` and the abstract `SoundSystem`.
- `rhaster.sound_logger`: `SoundSystemLogger` wraps a `SoundSystem` and writes
  one line per request, prefixed `[SoundSystemLogger] :> `, to a log stream
  (standard output by default); failed stop, pause and resume requests go to
  the error stream (standard error by default). `sound_info` formats an
  `Audio` as `[TAG: <tag>, UID: <sound>]`.
- `rhaster.parallel_sound`: `ParallelSoundSystem` wraps a `SoundSystem` and
  performs play, stop, pause and resume on a worker thread. Those calls return
  at once (`-1` for `play`, `False` for the rest); queuing after `close` raises
  `RuntimeError`. It is a context manager.
- `rhaster.services`: `ServiceLocator` and the shared `SERVICE_LOCATOR`;
  `sound_system()` raises `LookupError` until one is registered.
- `rhaster.scene_pool`: `ScenePool` builds scenes with a factory, selects one
  as active and forwards `fixed_tick`, `tick`, `render` and `cleanup` to it.
- `rhaster.resource_manager`: `ResourceManager` loads textures and fonts
  through caller-supplied loaders relative to a data directory, caches them,
  and queues `LifetimeEvent`s that `unload_unused_resources` broadcasts to
  observers as `observer(event_uid, value)`.
- `rhaster.game_instance`: `GameInstance` and the shared `GAME_INSTANCE` own
  controllers and hold `gravity_coefficient` (10.0 by default) and
  `screen_dimensions`.
- `rhaster.renderer`: `Renderer` queues texture draws with a z-index and draws
  them lowest first (equal z-indexes in queue order) through a backend object
  providing `texture_size`, `clear`, `copy`, `copy_ex` and `present`.
  `create_rect`, `resolve_flip`, `Rect`, `Flip` and `RenderRequest` support it.

## Example

```python
from rhaster.data import Blackboard
from rhaster.game_time import GameTime
from rhaster.hashing import UID

board = Blackboard()
board.store(UID("health"), 100)
board.edit(UID("health"), 80)
print(board.retrieve(UID("health"), int))  # 80

ticks = iter([0.0, 0.5, 1.2])
game_time = GameTime(clock=lambda: next(ticks))
game_time.set_timeout(1.0, lambda: print("fired"))
game_time.tick()  # 0.5 s elapsed, nothing yet
game_time.tick()  # 1.2 s elapsed, prints "fired"
```

## What it does not do

The package opens no window, polls no keyboard or gamepad, and plays no
sound. `Renderer` draws only through the backend you pass in, `SoundSystem`
has no concrete implementation here, and `ScenePool` and `ResourceManager`
build scenes, textures and fonts only through the factories and loaders you
supply. There is no game loop and no command to run.

## Installation

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```