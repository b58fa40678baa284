"""Small generic helpers shared by the puzzle solutions."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, MutableSequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def reverse(items: MutableSequence[Any]) -> None:
    """Reverse a mutable sequence in place."""
    items[:] = items[::-1]


def maximum(x: Any, y: Any) -> Any:
    """Return the larger of x and y; y wins unless x is strictly greater."""
    return x if x > y else y


def minimum(x: Any, y: Any) -> Any:
    """Return the smaller of x and y; y wins unless x is strictly smaller."""
    return x if x < y else y


class Set(Generic[H]):
    """A set whose add and remove take any number of values and never fail."""

    def __init__(self, *values: H) -> None:
        self._items: set[H] = set(values)

    def add(self, *args: H) -> None:
        """Add every given value."""
        self._items.update(args)

    def remove(self, *args: H) -> None:
        """Remove every given value; values that are absent are ignored."""
        self._items.difference_update(args)

    def contains(self, value: H) -> bool:
        """Return True if the value is a member."""
        return value in self._items

    def members(self) -> list[H]:
        """Return all members as a list, in no particular order."""
        return list(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[H]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Set):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"Set({', '.join(map(repr, self._items))})"

    @classmethod
    def of(cls, values: Iterable[H]) -> "Set[H]":
        """Build a set from an iterable."""
        return cls(*values)