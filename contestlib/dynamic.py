"""Classic dynamic programming problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    if not values:
        raise ValueError("values must not be empty")
    best = current = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def knapsack_max_fill(capacity: int, sizes: Iterable[int]) -> int:
    """Return the largest total of a subset of ``sizes`` not exceeding ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    mask = (1 << (capacity + 1)) - 1
    reachable = 1
    for size in sizes:
        if size < 0:
            raise ValueError(f"negative item size {size}")
        reachable = (reachable | (reachable << size)) & mask
    return reachable.bit_length() - 1


def min_coins(amount: int, denominations: Iterable[int]) -> int | None:
    """Return the fewest coins, each usable any number of times, summing to ``amount``.

    Returns ``None`` when the amount cannot be paid.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for coin in denominations:
        if coin < 0:
            raise ValueError(f"negative denomination {coin}")
        if coin == 0:
            continue
        for total in range(coin, amount + 1):
            best[total] = min(best[total], best[total - coin] + 1)
    return None if best[amount] == unreachable else best[amount]