"""Small numeric and string exercises."""

from __future__ import annotations

import random
import time
from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise

Vector = Sequence[float]
Matrix2 = tuple[tuple[float, float], tuple[float, float]]

_S3 = (
    (1, 2, 3),
    (1, 3, 2),
    (3, 2, 1),
    (3, 1, 2),
    (2, 1, 3),
    (2, 3, 1),
)


def seq_sum(begin: int, end: int, step: int) -> int:
    """Sum ``begin``, ``begin + step``, ... up to ``end``.

    The first term is always counted, even when it already exceeds ``end``.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    total = begin
    current = begin + step
    while current <= end:
        total += current
        current += step
    return total


def rec_func(num: int) -> int:
    """Return ``num - rec_func(num - 5)``, bottoming out at zero or below."""
    if num == 0:
        return 0
    if num < 0:
        return -num
    return num - rec_func(num - 5)


def find_pythagorean_triplet(numbers: Sequence[int]) -> tuple[int, int, int] | None:
    """Find indexes ``(a, b, b + 1)`` with ``n[a]**2 + n[b]**2 == n[b + 1]**2``.

    For each ``a`` the first matching ``b`` is taken; the match for the
    largest such ``a`` is returned, or ``None`` if there is none.
    """
    squares = [value * value for value in numbers]
    found = None
    for a, square_a in enumerate(squares):
        b = next(
            (
                index
                for index, (square_b, square_c) in enumerate(pairwise(squares))
                if square_a + square_b == square_c
            ),
            None,
        )
        if b is not None:
            found = (a, b, b + 1)
    return found


def is_rising(values: Iterable[float]) -> bool:
    """Return whether each value is no smaller than the one before it."""
    return all(left <= right for left, right in pairwise(values))


def _check_2x2(matrix: Sequence[Sequence[float]], name: str) -> None:
    if len(matrix) != 2 or any(len(row) != 2 for row in matrix):
        raise ValueError(f"{name} must be a 2x2 matrix")


def matmul2(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix2:
    """Multiply two 2x2 matrices."""
    _check_2x2(a, "a")
    _check_2x2(b, "b")
    columns = list(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, column)) for column in columns)
        for row in a
    )


def inner_product(u: Vector, v: Vector) -> float:
    """Return the dot product of two vectors of equal length."""
    return sum(x * y for x, y in zip(u, v, strict=True))


def orthogonalize(v1: Vector, v2: Vector) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Turn ``{v1, v2}`` into an orthogonal basis by Gram-Schmidt.

    ``v1`` is kept and ``v2`` loses its projection onto ``v1``; a pair that
    is already orthogonal comes back unchanged.
    """
    first = tuple(v1)
    second = tuple(v2)
    product = inner_product(first, second)
    if product == 0:
        return first, second
    norm = inner_product(first, first)
    if norm == 0:
        raise ValueError("first vector must not be zero")
    factor = product / norm
    return first, tuple(y - factor * x for x, y in zip(first, second))


def mexican_wave(text: str) -> list[str]:
    """Return the text once per non-space character with that character raised.

    Each raised character is lowered again before the next one is raised.
    """
    chars = list(text)
    wave = []
    for index, char in enumerate(chars):
        if char == " ":
            continue
        chars[index] = char.upper()
        wave.append("".join(chars))
        chars[index] = char.lower()
    return wave


def coin_tosses(count: int, rng: random.Random | None = None) -> list[str]:
    """Toss a coin ``count`` times, giving ``"T"`` or ``"H"`` for each."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    return ["T" if rng.randint(1, 2) == 1 else "H" for _ in range(count)]


def streaks(outcomes: Iterable[str]) -> list[int]:
    """Return the lengths of the runs of equal consecutive outcomes."""
    return [sum(1 for _ in run) for _, run in groupby(outcomes)]


def random_below(maximum: int, now: float | None = None) -> int:
    """Derive a number in ``[0, maximum)`` from the current time in seconds."""
    if maximum <= 0:
        raise ValueError("maximum must be positive")
    seconds = int(time.time() if now is None else now)
    return seconds % maximum


def s3_elements() -> tuple[tuple[int, int, int], ...]:
    """Return the six permutations of ``(1, 2, 3)`` forming the group S3."""
    return _S3