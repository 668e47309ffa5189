"""Sprite-sheet animations: one animation per row, one frame per tile."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from quadframe.geometry import Rect
from quadframe.vec import Vec2


@dataclass(frozen=True)
class Animation:
    """One animation: the sheet row it lives on, its frame count and speed."""

    name: str
    row: int
    frames: int
    fps: int


@dataclass(frozen=True)
class AnimationFrame:
    """Where to read the current frame from, and the size to draw it at."""

    source_rect: Rect
    dest_size: Vec2


class AnimatedSprite:
    """Tracks the current animation and frame of a tiled sprite sheet."""

    def __init__(
        self,
        tile_width: int,
        tile_height: int,
        animations: Iterable[Animation],
        playing: bool,
    ) -> None:
        self._tile_width = float(tile_width)
        self._tile_height = float(tile_height)
        self._animations = list(animations)
        self._current = 0
        self._time = 0.0
        self._frame = 0
        self.playing = playing

    def set_animation(self, animation: int) -> None:
        """Switch to another animation; the frame index is kept, wrapped to its length."""
        target = self._animations[animation]
        self._current = animation
        self._frame %= target.frames

    def current_animation(self) -> int:
        """Index of the chosen animation."""
        return self._current

    def set_frame(self, frame: int) -> None:
        """Jump to a specific frame."""
        self._frame = frame

    def is_last_frame(self) -> bool:
        """Whether the last frame of the current animation is shown."""
        return self._frame == self._animations[self._current].frames - 1

    def update(self, frame_time: float) -> None:
        """Advance time by `frame_time`; step one frame once 1/fps seconds have passed."""
        animation = self._animations[self._current]
        if self.playing:
            self._time += frame_time
            threshold = math.inf if animation.fps == 0 else 1.0 / animation.fps
            if self._time > threshold:
                self._frame += 1
                self._time = 0.0
        self._frame %= animation.frames

    def frame(self) -> AnimationFrame:
        """The source rectangle and size of the current frame."""
        animation = self._animations[self._current]
        return AnimationFrame(
            source_rect=Rect(
                self._tile_width * self._frame,
                self._tile_height * animation.row,
                self._tile_width,
                self._tile_height,
            ),
            dest_size=Vec2(self._tile_width, self._tile_height),
        )