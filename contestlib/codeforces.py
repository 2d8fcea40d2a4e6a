"""Solutions to assorted Codeforces problems, one function per problem."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from math import comb, gcd

from contestlib.text import prefix_function

MOD = 998244353


def bun_length(n: int) -> int:
    """Length of the chocolate spiral on a bun of size ``n``."""
    return 4 * n + n * (n - 1) // 2 + (n - 1) * (n - 2) // 2 + 1


def _mex(values: Iterable[int]) -> int:
    present = set(values)
    result = 0
    while result in present:
        result += 1
    return result


def constructive_possible(values: Sequence[int]) -> bool:
    """Whether one range assignment can raise the MEX of ``values`` by exactly one."""
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    mex = _mex(values)
    positions = [i for i, v in enumerate(values) if v == mex + 1]
    if not positions:
        if max(values) > mex + 1:
            return True
        return max(values) != len(values) - 1
    first, last = positions[0], positions[-1]
    values[first:last + 1] = [mex] * (last - first + 1)
    return _mex(values) == mex + 1


def _digits(n: int) -> int:
    return len(str(n)) if n else 0


def digital_logarithm_operations(first: Sequence[int], second: Sequence[int]) -> int:
    """Fewest digit-count operations making the two multisets equal."""
    if len(first) != len(second):
        raise ValueError("both sequences must have the same length")
    a = [-x for x in first]
    b = [-x for x in second]
    heapq.heapify(a)
    heapq.heapify(b)
    operations = 0
    while a:
        top_a, top_b = -a[0], -b[0]
        if top_a == top_b:
            heapq.heappop(a)
            heapq.heappop(b)
            continue
        if top_a > top_b:
            heapq.heapreplace(a, -_digits(top_a))
        else:
            heapq.heapreplace(b, -_digits(top_b))
        operations += 1
    return operations


def _smallest_prime_factors(limit: int) -> list[int]:
    spf = list(range(limit + 1))
    for i in range(2, int(limit ** 0.5) + 1):
        if spf[i] == i:
            for j in range(i * i, limit + 1, i):
                if spf[j] == j:
                    spf[j] = i
    return spf


def enlarge_gcd(values: Sequence[int]) -> int:
    """Fewest removals that make the gcd grow, or -1 when impossible."""
    if not values:
        raise ValueError("values must not be empty")
    common = reduce(gcd, values)
    reduced = [v // common for v in values]
    spf = _smallest_prime_factors(max(reduced))
    counts: Counter[int] = Counter()
    for value in reduced:
        while value > 1:
            prime = spf[value]
            counts[prime] += 1
            while value % prime == 0:
                value //= prime
    best = max(counts.values(), default=0)
    return len(values) - best if best else -1


def dentist_order(children: Sequence[tuple[int, int, int]]) -> list[int]:
    """1-based numbers of the children who get treated, in order.

    Each child is ``(cry_volume, hall_volume, confidence)``.
    """
    volume = [c[0] for c in children]
    hall = [c[1] for c in children]
    confidence = [c[2] for c in children]
    n = len(children)
    treated = []

    def scare(start: int, loudness: int) -> None:
        for k in range(start, n):
            if confidence[k] >= 0:
                confidence[k] -= loudness
                if confidence[k] < 0:
                    loudness += hall[k]

    for i in range(n):
        if confidence[i] < 0:
            continue
        treated.append(i + 1)
        loudness = volume[i]
        fled = []
        j = i + 1
        while j < n and loudness > 0:
            if confidence[j] >= 0:
                confidence[j] -= loudness
                loudness -= 1
                if confidence[j] < 0:
                    fled.append(j)
            j += 1
        for k in fled:
            scare(k + 1, hall[k])
    return treated


def ice_and_fire(temperatures: str) -> list[int]:
    """Number of possible winners for every prefix of 2..n players."""
    n = len(temperatures) + 1
    result = [1]
    run = 1
    for i in range(1, n - 1):
        run = run + 1 if temperatures[i] == temperatures[i - 1] else 1
        result.append(i + 2 - run)
    return result


def ideal_point(segments: Iterable[tuple[int, int]], k: int) -> bool:
    """Whether some segment starts at ``k`` and some segment ends at ``k``."""
    segments = list(segments)
    return any(l == k for l, _ in segments) and any(r == k for _, r in segments)


def count_wall_matches(bears: Sequence[int], elephant: Sequence[int]) -> int:
    """Number of segments of the bears' wall that match the elephant's wall."""
    if not elephant:
        raise ValueError("elephant wall must not be empty")
    diff = lambda seq: [b - a for a, b in zip(seq, seq[1:])]
    pattern = diff(elephant)
    combined = [*pattern, object(), *diff(bears)]
    target = len(elephant) - 1
    return sum(1 for value in prefix_function(combined) if value == target)


def min_matryoshka_sets(sizes: Iterable[int]) -> int:
    """Fewest sets of consecutive sizes the dolls can be split into."""
    result = 0
    previous_size = 0
    previous_count = 0
    for size, count in sorted(Counter(sizes).items()):
        if size != previous_size + 1:
            result += previous_count
            previous_count = 0
        previous_size = size
        if count > previous_count:
            previous_count = count
        elif count < previous_count:
            result += previous_count - count
            previous_count = count
    return result + previous_count


def parity_sort_operations(values: Sequence[int]) -> list[tuple[int, int]]:
    """Operations ``(l, r)`` (1-based) that make ``values`` non-decreasing."""
    n = len(values)
    if n <= 1:
        return []
    operations = [(1, n)]
    pivot = values[-1] if (values[0] + values[-1]) % 2 == 0 else values[0]
    for i in range(1, n - 1):
        if (values[i] + pivot) % 2 == 0:
            operations.append((i + 1, n))
        else:
            operations.append((1, i + 1))
    return operations


def _matches(fragment: str, text: str, good: set[str]) -> bool:
    return all(p == c if p != "?" else c in good for p, c in zip(fragment, text))


def pattern_matches(good_letters: str, pattern: str, word: str) -> bool:
    """Whether ``word`` matches ``pattern`` with ``?`` and at most one ``*``."""
    good = set(good_letters)
    if "*" not in pattern:
        return len(word) == len(pattern) and _matches(pattern, word, good)
    if len(word) < len(pattern) - 1:
        return False
    left, _, right = pattern.partition("*")
    middle_end = len(word) - len(right)
    return (
        _matches(left, word[:len(left)], good)
        and _matches(right, word[middle_end:], good)
        and all(c not in good for c in word[len(left):middle_end])
    )


def selfie_lines(
    slopes: Iterable[int], parabolas: Iterable[tuple[int, int, int]]
) -> list[int | None]:
    """For each parabola ``(a, b, c)``, a line slope not touching it, or ``None``."""
    ordered = sorted(set(slopes))
    answers: list[int | None] = []
    for a, b, c in parabolas:
        misses = lambda k: (b - k) ** 2 - 4 * a * c < 0
        index = bisect_left(ordered, b)
        if index < len(ordered) and misses(ordered[index]):
            answers.append(ordered[index])
            continue
        if index > 0:
            index -= 1
        if index < len(ordered) and misses(ordered[index]):
            answers.append(ordered[index])
        else:
            answers.append(None)
    return answers


def casino_winnings(cards: Sequence[Sequence[int]]) -> int:
    """Sum over all pairs of players of the absolute card differences."""
    total = 0
    for column in zip(*cards):
        running = 0
        for count, value in enumerate(sorted(column)):
            total += count * value - running
            running += value
    return total


def removal_cost(kept: str) -> int:
    """Least cost of removing every element marked ``0`` by smallest multiples."""
    state = list(kept)
    n = len(state)
    cost = 0
    for j in range(n):
        step = j + 1
        x = j
        while x < n and state[x] in "02":
            if state[x] == "0":
                cost += step
                state[x] = "2"
            x += step
    return cost


def subsequence_scores(values: Sequence[int]) -> list[int]:
    """Largest subsequence length with best score for each prefix of sorted ``values``."""
    scores = []
    begin = 0
    for i in range(len(values)):
        while values[begin] < i + 1 - begin:
            begin += 1
        scores.append(i + 1 - begin)
    return scores


def triangle_colorings(weights: Sequence[tuple[int, int, int]]) -> int:
    """Number of maximum-weight colourings modulo 998244353."""
    result = 1
    for triple in weights:
        result = result * triple.count(min(triple)) % MOD
    n = len(weights)
    return result * comb(n, n // 2) % MOD


def towers_possible(first: str, second: str) -> bool:
    """Whether moving blocks can make both towers alternate in colour."""
    column = first + second[::-1]
    clashes = sum(1 for a, b in zip(column, column[1:]) if a == b)
    return clashes <= 1


def promotion_cost(price_a: int, price_b: int, amount: int, bonus: int) -> int:
    """Least cost of ``amount`` kilos with a buy-``bonus``-get-one-free offer on day a."""
    if price_a <= price_b:
        return price_a * (amount - amount // (bonus + 1))
    if price_a * bonus < price_b * (bonus + 1):
        groups, rest = divmod(amount, bonus + 1)
        return groups * price_a * bonus + rest * price_b
    return price_b * amount