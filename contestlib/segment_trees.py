"""Bottom-up segment trees over a fixed range of positions ``0 .. size - 1``.

Every tree starts filled with zeros.
"""

from __future__ import annotations


class _BottomUpTree:
    """Array-backed tree whose leaves sit at ``offset + position``."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._offset = 1 << (size - 1).bit_length()
        self._tree = [0] * (2 * self._offset)

    def __len__(self) -> int:
        return self.size

    def _leaf(self, position: int) -> int:
        if not 0 <= position < self.size:
            raise IndexError(f"position {position} outside 0..{self.size - 1}")
        return position + self._offset

    def _leaves(self, left: int, right: int) -> tuple[int, int]:
        if left > right:
            raise ValueError(f"empty range [{left}, {right}]")
        return self._leaf(left), self._leaf(right)

    def _path_to_root(self, position: int):
        node = self._leaf(position)
        while node:
            yield node
            node //= 2

    def _range_nodes(self, left: int, right: int):
        """Yield the nodes that together cover ``[left, right]`` exactly."""
        lo, hi = self._leaves(left, right)
        if lo == hi:
            yield lo
            return
        yield lo
        yield hi
        while hi - lo > 1:
            if lo % 2 == 0:
                yield lo + 1
            if hi % 2 == 1:
                yield hi - 1
            lo //= 2
            hi //= 2


class RangeAddPointSum(_BottomUpTree):
    """Add a value to every position of a range; read one position."""

    def update(self, value: int, left: int, right: int) -> None:
        """Add ``value`` to each position in ``[left, right]``."""
        for node in list(self._range_nodes(left, right)):
            self._tree[node] += value

    def query(self, position: int) -> int:
        """Return the current value at ``position``."""
        return sum(self._tree[node] for node in self._path_to_root(position))


class RangeMaxPointMax(_BottomUpTree):
    """Raise every position of a range to at least a value; read one position."""

    def update(self, value: int, left: int, right: int) -> None:
        """Set each position in ``[left, right]`` to ``max(current, value)``."""
        for node in list(self._range_nodes(left, right)):
            self._tree[node] = max(self._tree[node], value)

    def query(self, position: int) -> int:
        """Return the current value at ``position``."""
        return max(self._tree[node] for node in self._path_to_root(position))


class PointAddRangeSum(_BottomUpTree):
    """Add a value to one position; read the sum of a range."""

    def update(self, position: int, value: int) -> None:
        """Add ``value`` at ``position``."""
        for node in list(self._path_to_root(position)):
            self._tree[node] += value

    def query(self, left: int, right: int) -> int:
        """Return the sum of positions ``left .. right`` inclusive."""
        return sum(self._tree[node] for node in self._range_nodes(left, right))


class PointMaxRangeMax(_BottomUpTree):
    """Raise one position to at least a value; read the maximum of a range."""

    def update(self, position: int, value: int) -> None:
        """Set ``position`` to ``max(current, value)``."""
        for node in list(self._path_to_root(position)):
            self._tree[node] = max(self._tree[node], value)

    def query(self, left: int, right: int) -> int:
        """Return the maximum over positions ``left .. right`` inclusive."""
        return max(self._tree[node] for node in self._range_nodes(left, right))