# quadframe

Building blocks for small games and interactive programs, independent of any
window or rendering backend.

- `quadframe.color`: `Color` (four float channels) with `from_rgba`,
  `from_hex`, `from_bytes`, `to_bytes`, `to_vec`, `from_vec` and `with_alpha`;
  `color_u8`, `hsl_to_rgb`, `rgb_to_hsl`, and constants such as `WHITE`,
  `BLACK`, `RED` and `BLANK`.
- `quadframe.vec`: immutable `Vec2`, `Vec3`, `Vec4` and `Quat`
  (`from_axis_angle`, `mul_vec3`).
- `quadframe.geometry`: `Rect`, `RectOffset`, `Circle`, `polar_to_cartesian`,
  `cartesian_to_polar` and `clamp`.
- `quadframe.generational`: `GenerationalStorage`, whose `GenerationalId`s go
  stale once their slot is freed, so they never reach data stored later.
- `quadframe.storage`: a global store holding one value per type (`store`,
  `get`, `try_get`, `clear`).
- `quadframe.animation`: `Animation`, `AnimationFrame` and `AnimatedSprite` for
  sprite sheets with one animation per row.
- `quadframe.mouse_camera`: `MouseCamera`, panned by mouse drags and zoomed by
  the wheel around a fixed point.
- `quadframe.input`: `InputState`, the per-frame keyboard, mouse, touch,
  typed-character and dropped-file state, fed with `InputEvent`s.
- `quadframe.events`: `Conf`, `UpdateTrigger` and `EventHandler`, which turns
  window events into `InputState` changes and tracks whether an event should
  wake a blocking loop.

## Installation

```
pip install quadframe
```

There are no runtime dependencies. Python 3.10 or later is required.

## Examples

Colors:

```python
from quadframe.color import Color, hsl_to_rgb, rgb_to_hsl

light_blue = Color.from_hex(0x3CA7D5)
h, s, l = rgb_to_hsl(light_blue)
back = hsl_to_rgb(h, s, l)
print(light_blue.to_bytes())  # (60, 167, 213, 255)
```

Rectangles and circles:

```python
from quadframe.geometry import Circle, Rect
from quadframe.vec import Vec2

rect = Rect(1.0, 1.0, 2.0, 2.0)
assert rect.contains(Vec2(3.0, 3.0))          # borders count as inside
assert Circle(0.0, 0.0, 1.5).overlaps_rect(rect)
print(rect.intersect(Rect(2.0, 2.0, 5.0, 5.0)))  # Rect(x=2.0, y=2.0, w=1.0, h=1.0)
```

Generational storage:

```python
from quadframe.generational import GenerationalStorage

slots = GenerationalStorage()
first = slots.push("a")
slots.free(first)
second = slots.push("b")      # reuses the slot under a new generation
assert slots.get(first) is None
assert slots.get(second) == "b"
```

Per-type storage:

```python
from dataclasses import dataclass
from quadframe import storage

@dataclass
class WorldBoundaries:
    size: int

storage.store(WorldBoundaries(23))
assert storage.get(WorldBoundaries).size == 23
```

`get` raises `KeyError` when nothing of that type is stored; `try_get` returns
`None`.

Sprite animation:

```python
from quadframe.animation import AnimatedSprite, Animation

sprite = AnimatedSprite(
    15, 20,
    [Animation("idle", row=0, frames=20, fps=12), Animation("run", row=1, frames=15, fps=15)],
    playing=True,
)
sprite.set_animation(1)
sprite.update(1 / 60)          # advances one frame once 1/fps seconds have passed
print(sprite.frame().source_rect)
```

Input through an event handler:

```python
from quadframe.events import Conf, EventHandler, UpdateTrigger
from quadframe.input import MouseButton

handler = EventHandler(Conf(update_on=UpdateTrigger(key_down=True)))
handler.key_down_event("space", None, False)
handler.mouse_button_down_event(MouseButton.LEFT, 400.0, 300.0)

assert handler.input.is_key_pressed("space")
assert handler.input.is_mouse_button_pressed(MouseButton.LEFT)
assert handler.take_scheduled_update()
print(handler.input.mouse_position_local())  # Vec2(x=0.0, y=0.0) on an 800x600 screen

handler.input.end_frame()      # pressed/released sets are cleared each frame
assert handler.input.is_key_down("space")
assert not handler.input.is_key_pressed("space")
```

Key codes are any hashable values. Other tools can call
`InputState.register_input_subscriber` and later `take_input_events` to receive
every event seen since their previous call.

## What this package does not do

It keeps state and does arithmetic only. It does not open windows, draw,
play sound, load files or textures, run coroutines or timers, manage a scene
of nodes, drive state machines, or process shader sources. Events have to be
delivered to `EventHandler` or `InputState` by whatever window library the
program uses, and `InputState.end_frame` must be called once per frame.

## Running the tests

```
pip install quadframe[test]
pytest
```