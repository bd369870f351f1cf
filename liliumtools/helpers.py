"""Small helpers for splitting strings and picking several items at once."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional, TypeVar

T = TypeVar("T")


class GetManyError(ValueError):
    """Raised when the same in-range index is requested more than once."""


def split_once_owned(text: str, pattern: str) -> Optional[tuple[str, str]]:
    """Split ``text`` at the first ``pattern``; return None if it does not occur."""
    head, sep, tail = text.partition(pattern)
    if not sep:
        return None
    return head, tail


def get_many(items: Sequence[T], indices: Iterable[int]) -> list[Optional[T]]:
    """Return the item at each index, or None where the index is out of range.

    Raises GetManyError if an index that is in range appears more than once.
    """
    wanted = list(indices)
    size = len(items)
    seen: set[int] = set()
    for index in wanted:
        if 0 <= index < size:
            if index in seen:
                raise GetManyError(f"index {index} requested more than once")
            seen.add(index)
    return [items[i] if 0 <= i < size else None for i in wanted]