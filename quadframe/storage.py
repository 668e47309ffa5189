"""Global storage holding at most one value per type."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

T = TypeVar("T")

_STORAGE: dict[type, Any] = {}


def store(data: Any) -> None:
    """Store `data` under its type, replacing any earlier value of that type."""
    _STORAGE[type(data)] = data


def try_get(cls: type[T]) -> Optional[T]:
    """The stored value of type `cls`, or None."""
    return _STORAGE.get(cls)


def get(cls: type[T]) -> T:
    """The stored value of type `cls`; raises KeyError if there is none."""
    try:
        return _STORAGE[cls]
    except KeyError:
        raise KeyError(f"no value of type {cls.__name__} in storage") from None


def clear() -> None:
    """Remove every stored value."""
    _STORAGE.clear()