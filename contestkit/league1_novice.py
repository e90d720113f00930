"""Solutions to the first league round, novice division."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby


def min_square_area(a: int, b: int) -> int:
    """Return the smallest square area holding two ``a`` x ``b`` rectangles."""
    side = min(max(2 * a, b), max(a, 2 * b))
    return side * side


def is_fair_tournament(a: int, b: int, c: int, d: int) -> bool:
    """Return whether the two strongest players meet in the final."""
    return min(a, b) < max(c, d) and max(a, b) > min(c, d)


def can_be_most_common(sequence: Iterable[int], value: int) -> bool:
    """Return whether some subsegment has ``value`` as its most common element."""
    return value in sequence


def classify_triple(a: int, b: int, c: int) -> str:
    """Return ``"STAIR"``, ``"PEAK"`` or ``"NONE"`` for the three digits."""
    if a < b < c:
        return "STAIR"
    if a < b > c:
        return "PEAK"
    return "NONE"


def yogurt_cost(count: int, single_price: int, pair_price: int) -> int:
    """Return the cheapest price for ``count`` yogurts."""
    if pair_price < 2 * single_price:
        return count // 2 * pair_price + count % 2 * single_price
    return count * single_price


def _digits(year: int) -> tuple[int, int, int, int]:
    return year % 10, year // 10 % 10, year // 100 % 10, year // 1000


def next_distinct_year(year: int) -> int:
    """Return the first year after ``year`` whose four digits are all distinct."""
    candidate = year + 1
    while len(set(_digits(candidate))) != 4:
        candidate += 1
    return candidate


def elephant_steps(distance: int) -> int:
    """Return the fewest moves of length at most 5 that cover ``distance``."""
    return (distance + 4) // 5


def is_dangerous(players: str) -> bool:
    """Return whether seven or more equal characters stand in a row."""
    return any(sum(1 for _ in run) >= 7 for _, run in groupby(players))