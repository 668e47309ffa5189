"""Slot storage whose ids carry a generation, so stale ids never reach new data."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class GenerationalId:
    """Index of a slot together with the generation it was filled in."""

    id: int
    generation: int


@dataclass
class _Cell(Generic[T]):
    generation: int
    state: T


class GenerationalStorage(Generic[T]):
    """A vector of slots that reuses freed slots under a new generation."""

    def __init__(self) -> None:
        self._cells: list[Optional[_Cell[T]]] = []
        self._free_indices: list[tuple[int, int]] = []

    def push(self, data: T) -> GenerationalId:
        """Store `data`, reusing the most recently freed slot if there is one."""
        if self._free_indices:
            index, old_generation = self._free_indices.pop()
            generation = old_generation + 1
            self._cells[index] = _Cell(generation, data)
        else:
            index, generation = len(self._cells), 0
            self._cells.append(_Cell(generation, data))
        return GenerationalId(index, generation)

    def _cell(self, gid: GenerationalId) -> Optional[_Cell[T]]:
        if not 0 <= gid.id < len(self._cells):
            return None
        cell = self._cells[gid.id]
        if cell is None or cell.generation != gid.generation:
            return None
        return cell

    def get(self, gid: GenerationalId) -> Optional[T]:
        """The data stored under `gid`, or None if the id is stale or unknown."""
        cell = self._cell(gid)
        return None if cell is None else cell.state

    def set(self, gid: GenerationalId, data: T) -> None:
        """Replace the data stored under a live `gid`."""
        cell = self._cell(gid)
        if cell is None:
            raise KeyError(gid)
        cell.state = data

    def retain(self, predicate: Callable[[T], bool]) -> None:
        """Free every slot whose data makes `predicate` return False.

        Slots are visited once, in order; slots filled while iterating are not visited.
        """
        for index, cell in list(enumerate(self._cells)):
            if cell is None or not self._holds(index, cell):
                continue
            keep = predicate(cell.state)
            if not keep and self._holds(index, cell):
                self._free_indices.append((index, cell.generation))
                self._cells[index] = None

    def _holds(self, index: int, cell: _Cell[T]) -> bool:
        return index < len(self._cells) and self._cells[index] is cell

    def count(self) -> int:
        """Number of occupied slots."""
        return sum(1 for cell in self._cells if cell is not None)

    def clear(self) -> None:
        """Drop every slot and forget all free indices."""
        self._cells.clear()
        self._free_indices.clear()

    def free(self, gid: GenerationalId) -> None:
        """Free the slot of `gid`; outdated or unknown ids are ignored."""
        if self._cell(gid) is None:
            return
        self._free_indices.append((gid.id, gid.generation))
        self._cells[gid.id] = None