"""Solutions to the first league round, veteran division."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from math import perm

BOARD_SIZE = 8
DIE_FACES = 6
DIE_ROLLS = 4
SEARCH_ITERATIONS = 100


@dataclass(frozen=True)
class Sphere:
    """A sphere seen from above: centre ``(x, y)`` and radius ``r``."""

    x: float
    y: float
    r: float


def is_valid_eight_queens(board: Sequence[str]) -> bool:
    """Return whether the 8x8 board holds exactly 8 non-attacking queens (``*``)."""
    rows = list(board)
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError("the board must be 8 rows of 8 cells")
    used_rows: set[int] = set()
    used_cols: set[int] = set()
    used_sums: set[int] = set()
    used_diffs: set[int] = set()
    queens = 0
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell != "*":
                continue
            if i in used_rows or j in used_cols or i + j in used_sums or i - j in used_diffs:
                return False
            used_rows.add(i)
            used_cols.add(j)
            used_sums.add(i + j)
            used_diffs.add(i - j)
            queens += 1
    return queens == BOARD_SIZE


def _best_drop(heights: Iterable[int]) -> int:
    it = iter(heights)
    highest = lowest = next(it)
    best = 0
    for height in it:
        if height >= highest:
            best = max(best, highest - lowest)
            highest = lowest = height
        else:
            lowest = min(lowest, height)
    return best


def bungee_height(heights: Iterable[int]) -> int:
    """Return the highest bungee jump between two walls over the given terrain."""
    terrain = list(heights)
    if not terrain:
        raise ValueError("at least one height is required")
    return max(_best_drop(terrain), _best_drop(reversed(terrain)))


def four_die_rolls(rolls: Sequence[int]) -> tuple[int, int]:
    """Return ``(all_distinct, with_repeat)`` completions of the four die rolls."""
    seen = list(rolls)
    if len(seen) > DIE_ROLLS:
        raise ValueError(f"at most {DIE_ROLLS} rolls are allowed")
    remaining = DIE_ROLLS - len(seen)
    total = DIE_FACES**remaining
    if len(set(seen)) < len(seen):
        return 0, total
    distinct = perm(DIE_FACES - len(seen), remaining)
    return distinct, total - distinct


class _DisjointSet:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size

    def root(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def join(self, a: int, b: int) -> None:
        ra, rb = self.root(a), self.root(b)
        if ra == rb:
            return
        if self._size[ra] < self._size[rb]:
            ra, rb = rb, ra
        self._size[ra] += self._size[rb]
        self._parent[rb] = ra

    def same(self, a: int, b: int) -> bool:
        return self.root(a) == self.root(b)


def _passes(spheres: Sequence[Sphere], width: float, gap: float) -> bool:
    left, right = len(spheres), len(spheres) + 1
    sets = _DisjointSet(len(spheres) + 2)
    for index, sphere in enumerate(spheres):
        if sphere.x + sphere.r + gap >= width:
            sets.join(right, index)
        if sphere.x - sphere.r - gap <= 0:
            sets.join(left, index)
    for i, first in enumerate(spheres):
        for j in range(i + 1, len(spheres)):
            second = spheres[j]
            reach = first.r + second.r + gap
            dx = second.x - first.x
            dy = second.y - first.y
            if reach * reach >= dx * dx + dy * dy:
                sets.join(i, j)
    return not sets.same(left, right)


def largest_passing_radius(width: float, spheres: Iterable[Sphere]) -> float:
    """Return the radius of the largest ball that gets past the spheres."""
    obstacles = list(spheres)
    low, high = 0.0, float(width)
    mid = 0.0
    for _ in range(SEARCH_ITERATIONS):
        mid = (low + high) / 2
        if _passes(obstacles, width, mid):
            low = mid
        else:
            high = mid
    return mid / 2


def _is_weekend(day: int) -> bool:
    return day % 7 in (0, 6)


def _can_schedule(pianos: Sequence[tuple[int, int]], per_day: int, weekends: bool) -> bool:
    booked: Counter[int] = Counter()
    for first, last in pianos:
        for day in range(last, first - 1, -1):
            if not weekends and _is_weekend(day):
                continue
            if booked[day] < per_day:
                booked[day] += 1
                break
        else:
            return False
    return True


def piano_schedule(pianos: Iterable[tuple[int, int]], movers: int) -> str:
    """Return ``"fine"``, ``"weekend work"`` or ``"serious trouble"``.

    Each piano is a ``(first_day, last_day)`` window; two movers carry one
    piano per day.
    """
    per_day = movers // 2
    ordered = sorted(pianos, key=lambda window: (-window[0], window[1]))
    if _can_schedule(ordered, per_day, weekends=False):
        return "fine"
    if _can_schedule(ordered, per_day, weekends=True):
        return "weekend work"
    return "serious trouble"


def classify_drive(first: int, second: int, third: int) -> str:
    """Return ``"turned"``, ``"accelerated"``, ``"braked"`` or ``"cruised"``."""
    if (first > second and third > second) or (first < second and third < second):
        return "turned"
    before = abs(second - first)
    after = abs(third - second)
    if after > before:
        return "accelerated"
    if after < before:
        return "braked"
    return "cruised"