"""Binary search in a sorted sequence."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def find_position(values: Sequence[int], target: int) -> int | None:
    """Return the index of the first occurrence of ``target`` in sorted ``values``,
    or ``None`` when it is absent."""
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return None