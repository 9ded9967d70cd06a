"""List operations: resizing, removal, insertion, concatenation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

Reader = Callable[[str], str]
Writer = Callable[[str], Any]


class InvalidPositionError(IndexError):
    """Raised when a position lies outside the allowed range."""


def resize(items: Sequence[T], size: int, fill: Any = 0) -> list:
    """Return a copy of ``items`` truncated or padded with ``fill`` to ``size``."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    result = list(items[:size])
    result.extend([fill] * (size - len(result)))
    return result


def remove_item(items: Sequence[T], position: int) -> list[T]:
    """Return a copy of ``items`` without the element at ``position``."""
    if not 0 <= position < len(items):
        raise InvalidPositionError(f"position {position} outside 0..{len(items) - 1}")
    return [*items[:position], *items[position + 1:]]


def insert_item(items: Sequence[T], position: int, value: T) -> list[T]:
    """Return a copy of ``items`` with ``value`` inserted at ``position``."""
    if not 0 <= position <= len(items):
        raise InvalidPositionError(f"position {position} outside 0..{len(items)}")
    return [*items[:position], value, *items[position:]]


def concat(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Return a new list holding ``first`` followed by ``second``."""
    return [*first, *second]


def _ask_int(read: Reader, write: Writer, prompt: str, valid: Callable[[int], bool]) -> int:
    while True:
        answer = read(prompt)
        try:
            number = int(answer.strip())
        except ValueError:
            number = None
        if number is not None and valid(number):
            return number
        write("Invalid position, enter another value")


def prompt_remove(items: Sequence[T], read: Reader = input, write: Writer = print) -> list[T]:
    """Ask for a position until a valid one is given and remove that element."""
    if not items:
        raise InvalidPositionError("cannot remove from an empty list")
    position = _ask_int(
        read, write, "Enter position to remove: ", lambda n: 0 <= n < len(items)
    )
    return remove_item(items, position)


def prompt_insert(items: Sequence[int], read: Reader = input, write: Writer = print) -> list[int]:
    """Ask for a position and an integer value, then insert the value there."""
    position = _ask_int(
        read, write, "Enter position to insert at: ", lambda n: 0 <= n <= len(items)
    )
    while True:
        answer = read("Enter value to insert: ")
        try:
            value = int(answer.strip())
            break
        except ValueError:
            write("Invalid value, enter another value")
    return insert_item(items, position, value)