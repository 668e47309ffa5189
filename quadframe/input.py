"""Per-frame keyboard, mouse and touch state fed by window events."""

from __future__ import annotations

import enum
from collections.abc import Hashable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

from quadframe.vec import Vec2

EVENT_KINDS = frozenset(
    {
        "mouse_motion",
        "raw_mouse_motion",
        "mouse_wheel",
        "mouse_button_down",
        "mouse_button_up",
        "char",
        "key_down",
        "key_up",
        "touch",
        "window_minimized",
        "window_restored",
        "files_dropped",
    }
)
"""Every value accepted as `InputEvent.kind`."""

# Kinds that update state but are not replayed to subscribers as they are.
_UNRECORDED = frozenset({"raw_mouse_motion", "files_dropped"})


class TouchPhase(enum.Enum):
    """Stage of a touch in its lifetime."""

    STARTED = "started"
    STATIONARY = "stationary"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


class MouseButton(enum.Enum):
    """A mouse button."""

    RIGHT = "right"
    LEFT = "left"
    MIDDLE = "middle"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Touch:
    """One active touch and where it is."""

    id: int
    phase: TouchPhase
    position: Vec2


@dataclass(frozen=True)
class DroppedFile:
    """A file dropped onto the window: its path and/or its contents."""

    path: Optional[Path] = None
    data: Optional[bytes] = None


@dataclass(frozen=True)
class InputEvent:
    """A window input event.

    `kind` is one of `EVENT_KINDS`; which other fields matter depends on it.
    """

    kind: str
    x: float = 0.0
    y: float = 0.0
    button: Optional[MouseButton] = None
    character: Optional[str] = None
    keycode: Optional[Hashable] = None
    modifiers: Any = None
    repeat: bool = False
    phase: Optional[TouchPhase] = None
    touch_id: int = 0
    files: tuple[DroppedFile, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in EVENT_KINDS:
            raise ValueError(f"unknown input event kind {self.kind!r}")
        if self.kind in ("mouse_button_down", "mouse_button_up") and self.button is None:
            raise ValueError(f"{self.kind} event needs a button")
        if self.kind in ("key_down", "key_up") and self.keycode is None:
            raise ValueError(f"{self.kind} event needs a keycode")
        if self.kind == "char" and self.character is None:
            raise ValueError("char event needs a character")
        if self.kind == "touch" and self.phase is None:
            raise ValueError("touch event needs a phase")


class InputState:
    """Input seen since the last frame, plus what is currently held down.

    Feed it with `push_event` and call `end_frame` once per frame.
    """

    def __init__(
        self,
        screen_width: float = 800.0,
        screen_height: float = 600.0,
        dpi_scale: float = 1.0,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.dpi_scale = dpi_scale
        self.quit_requested = False
        self.quit_prevented = False

        self._simulate_mouse_with_touch = True
        self._cursor_grabbed = False
        self._keys_down: set[Hashable] = set()
        self._keys_pressed: set[Hashable] = set()
        self._keys_released: set[Hashable] = set()
        self._mouse_down: set[MouseButton] = set()
        self._mouse_pressed: set[MouseButton] = set()
        self._mouse_released: set[MouseButton] = set()
        self._touches: dict[int, Touch] = {}
        self._chars: list[str] = []
        self._chars_ui: list[str] = []
        self._mouse_position = Vec2.ZERO
        self._last_mouse_position: Optional[Vec2] = None
        self._mouse_wheel = Vec2.ZERO
        self._subscribers: list[list[InputEvent]] = []
        self._dropped_files: list[DroppedFile] = []

    @property
    def cursor_grabbed(self) -> bool:
        """Whether the cursor is constrained to the window."""
        return self._cursor_grabbed

    def _record(self, event: InputEvent) -> None:
        for queue in self._subscribers:
            queue.append(event)

    def push_event(self, event: InputEvent) -> None:
        """Apply an event to the state and hand it to every subscriber."""
        handler = getattr(self, f"_on_{event.kind}")
        handler(event)
        if event.kind not in _UNRECORDED:
            self._record(event)

    def _on_mouse_motion(self, event: InputEvent) -> None:
        if not self._cursor_grabbed:
            self._mouse_position = Vec2(event.x, event.y)

    def _record_unless_grabbed_motion(self, event: InputEvent) -> bool:
        return not (event.kind == "mouse_motion" and self._cursor_grabbed)

    def _on_raw_mouse_motion(self, event: InputEvent) -> None:
        if self._cursor_grabbed:
            self._mouse_position = self._mouse_position + Vec2(event.x, event.y)
            self._record(
                InputEvent("mouse_motion", x=self._mouse_position.x, y=self._mouse_position.y)
            )

    def _on_mouse_wheel(self, event: InputEvent) -> None:
        self._mouse_wheel = Vec2(event.x, event.y)

    def _on_mouse_button_down(self, event: InputEvent) -> None:
        self._mouse_down.add(event.button)
        self._mouse_pressed.add(event.button)
        if not self._cursor_grabbed:
            self._mouse_position = Vec2(event.x, event.y)

    def _on_mouse_button_up(self, event: InputEvent) -> None:
        self._mouse_down.discard(event.button)
        self._mouse_released.add(event.button)
        if not self._cursor_grabbed:
            self._mouse_position = Vec2(event.x, event.y)

    def _on_touch(self, event: InputEvent) -> None:
        self._touches[event.touch_id] = Touch(event.touch_id, event.phase, Vec2(event.x, event.y))
        if not self._simulate_mouse_with_touch:
            return
        simulated = {
            TouchPhase.STARTED: InputEvent(
                "mouse_button_down", x=event.x, y=event.y, button=MouseButton.LEFT
            ),
            TouchPhase.ENDED: InputEvent(
                "mouse_button_up", x=event.x, y=event.y, button=MouseButton.LEFT
            ),
            TouchPhase.MOVED: InputEvent("mouse_motion", x=event.x, y=event.y),
        }.get(event.phase)
        if simulated is not None:
            self.push_event(simulated)

    def _on_char(self, event: InputEvent) -> None:
        self._chars.append(event.character)
        self._chars_ui.append(event.character)

    def _on_key_down(self, event: InputEvent) -> None:
        self._keys_down.add(event.keycode)
        if not event.repeat:
            self._keys_pressed.add(event.keycode)

    def _on_key_up(self, event: InputEvent) -> None:
        self._keys_down.discard(event.keycode)
        self._keys_released.add(event.keycode)

    def _on_window_minimized(self, event: InputEvent) -> None:
        self._mouse_released |= self._mouse_down
        self._mouse_down.clear()
        self._keys_released |= self._keys_down
        self._keys_down.clear()
        self._touches = {
            touch_id: replace(touch, phase=TouchPhase.ENDED)
            for touch_id, touch in self._touches.items()
        }

    def _on_window_restored(self, event: InputEvent) -> None:
        pass

    def _on_files_dropped(self, event: InputEvent) -> None:
        self._dropped_files.extend(event.files)

    def end_frame(self) -> None:
        """Forget per-frame input and age touches; call once at the end of each frame."""
        self._mouse_wheel = Vec2.ZERO
        self._keys_pressed.clear()
        self._keys_released.clear()
        self._mouse_pressed.clear()
        self._mouse_released.clear()
        self._last_mouse_position = self.mouse_position_local()
        self.quit_requested = False

        aged: dict[int, Touch] = {}
        for touch_id, touch in self._touches.items():
            if touch.phase in (TouchPhase.ENDED, TouchPhase.CANCELLED):
                continue
            if touch.phase in (TouchPhase.STARTED, TouchPhase.MOVED):
                touch = replace(touch, phase=TouchPhase.STATIONARY)
            aged[touch_id] = touch
        self._touches = aged
        self._dropped_files.clear()

    def set_cursor_grab(self, grab: bool) -> None:
        """Constrain the mouse to the window; motion then arrives as raw deltas."""
        self._cursor_grabbed = grab

    def mouse_position(self) -> tuple[float, float]:
        """Mouse position in logical pixels."""
        return (
            self._mouse_position.x / self.dpi_scale,
            self._mouse_position.y / self.dpi_scale,
        )

    def _to_local(self, pixels: Vec2) -> Vec2:
        return Vec2(pixels.x / self.screen_width, pixels.y / self.screen_height) * 2.0 - Vec2.ONE

    def mouse_position_local(self) -> Vec2:
        """Mouse position mapped to the range [-1, 1] on both axes."""
        x, y = self.mouse_position()
        return self._to_local(Vec2(x, y))

    def mouse_delta_position(self) -> Vec2:
        """Local mouse position at the end of last frame minus the current one."""
        current = self.mouse_position_local()
        last = self._last_mouse_position if self._last_mouse_position is not None else current
        return last - current

    def simulate_mouse_with_touch(self, option: bool) -> None:
        """Choose whether touches also raise mouse events (on by default)."""
        self._simulate_mouse_with_touch = option

    def is_simulating_mouse_with_touch(self) -> bool:
        """Whether touches also raise mouse events."""
        return self._simulate_mouse_with_touch

    def touches(self) -> list[Touch]:
        """Active touches with positions in pixels."""
        return list(self._touches.values())

    def touches_local(self) -> list[Touch]:
        """Active touches with positions in the range [-1, 1]."""
        return [replace(t, position=self._to_local(t.position)) for t in self._touches.values()]

    def mouse_wheel(self) -> tuple[float, float]:
        """Wheel movement seen this frame."""
        return (self._mouse_wheel.x, self._mouse_wheel.y)

    def is_key_pressed(self, keycode: Hashable) -> bool:
        """Whether the key went down this frame (repeats excluded)."""
        return keycode in self._keys_pressed

    def is_key_down(self, keycode: Hashable) -> bool:
        """Whether the key is held."""
        return keycode in self._keys_down

    def is_key_released(self, keycode: Hashable) -> bool:
        """Whether the key was released this frame."""
        return keycode in self._keys_released

    def get_char_pressed(self) -> Optional[str]:
        """Take the most recently typed character from the queue, or None."""
        return self._chars.pop() if self._chars else None

    def get_last_key_pressed(self) -> Optional[Hashable]:
        """Some key pressed this frame, or None; which one is not specified."""
        return next(iter(self._keys_pressed), None)

    def get_keys_pressed(self) -> set[Hashable]:
        """Keys that went down this frame."""
        return set(self._keys_pressed)

    def get_keys_down(self) -> set[Hashable]:
        """Keys currently held."""
        return set(self._keys_down)

    def get_keys_released(self) -> set[Hashable]:
        """Keys released this frame."""
        return set(self._keys_released)

    def clear_input_queue(self) -> None:
        """Drop every queued character."""
        self._chars.clear()
        self._chars_ui.clear()

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        """Whether the button is held."""
        return button in self._mouse_down

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        """Whether the button went down this frame."""
        return button in self._mouse_pressed

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        """Whether the button was released this frame."""
        return button in self._mouse_released

    def prevent_quit(self) -> None:
        """Turn window close requests into `is_quit_requested` instead of quitting."""
        self.quit_prevented = True

    def is_quit_requested(self) -> bool:
        """Whether a prevented quit was requested this frame."""
        return self.quit_requested

    def get_dropped_files(self) -> list[DroppedFile]:
        """Take the files dropped onto the window so far."""
        files, self._dropped_files = self._dropped_files, []
        return files

    def register_input_subscriber(self) -> int:
        """Start recording events for a new subscriber; returns its id."""
        self._subscribers.append([])
        return len(self._subscribers) - 1

    def take_input_events(self, subscriber: int) -> list[InputEvent]:
        """Every event recorded for `subscriber` since its last call."""
        if not 0 <= subscriber < len(self._subscribers):
            raise IndexError(f"no input subscriber {subscriber}")
        events, self._subscribers[subscriber] = self._subscribers[subscriber], []
        return events