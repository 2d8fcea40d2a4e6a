"""String algorithms: prefix function and polynomial substring hashing."""

from __future__ import annotations

from collections.abc import Sequence


def prefix_function(sequence: Sequence) -> list[int]:
    """Return the prefix function: for each index, the longest proper border
    of the prefix ending there."""
    pi = [0] * len(sequence)
    for i in range(1, len(sequence)):
        j = pi[i - 1]
        while j > 0 and sequence[i] != sequence[j]:
            j = pi[j - 1]
        if sequence[i] == sequence[j]:
            j += 1
        pi[i] = j
    return pi


class SubstringHasher:
    """Constant-time polynomial hashes of any substring of a fixed text.

    The hash of ``text[position:position + length]`` is
    ``sum(ord(c_k) * base ** (k + 1))`` modulo ``modulus``.
    """

    def __init__(self, text: str, base: int = 31, modulus: int = 10**9 + 7) -> None:
        self.text = text
        self.base = base
        self.modulus = modulus
        n = len(text)
        self._powers = [1] * (n + 1)
        for i in range(1, n + 1):
            self._powers[i] = self._powers[i - 1] * base % modulus
        self._suffix = [0] * (n + 1)
        for i in range(n - 1, -1, -1):
            self._suffix[i] = (ord(text[i]) * base + self._suffix[i + 1] * base) % modulus

    def __len__(self) -> int:
        return len(self.text)

    def hash(self, position: int, length: int) -> int:
        """Return the hash of the substring of ``length`` starting at ``position``."""
        if position < 0 or length < 0 or position + length > len(self.text):
            raise IndexError(
                f"substring at {position} of length {length} is outside the text"
            )
        end = position + length
        return (self._suffix[position] - self._suffix[end] * self._powers[length]) % self.modulus