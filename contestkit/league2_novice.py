"""Solutions to the second league round, novice division."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

PUZZLE_SIZE = 4
KNIGHT_BOARD = 5
KNIGHT_COUNT = 9
_KNIGHT_MOVES = ((-2, 1), (-1, 2), (1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1))


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def invert_matrix(a: int, b: int, c: int, d: int) -> tuple[tuple[int, int], tuple[int, int]]:
    """Return the integer inverse of ``((a, b), (c, d))``, truncating each entry."""
    det = a * d - b * c
    if det == 0:
        raise ValueError("matrix is singular")
    return (
        (_trunc_div(d, det), _trunc_div(-b, det)),
        (_trunc_div(-c, det), _trunc_div(a, det)),
    )


def awake_lectures(pattern: str) -> int:
    """Return how many lectures are attended awake.

    A ``"1"`` means a coffee refill, which keeps her awake for that lecture
    and the next two.
    """
    coffees = 0
    awake = 0
    for lecture in pattern:
        if lecture == "1":
            awake += 1
            coffees = 2
        elif coffees > 0:
            coffees -= 1
            awake += 1
    return awake


def puzzle_scatter(grid: Sequence[str]) -> int:
    """Return the total Manhattan distance of the 4x4 tiles from their places."""
    total = 0
    for i, row in enumerate(grid):
        for j, tile in enumerate(row):
            if tile == ".":
                continue
            target_row, target_col = divmod(ord(tile) - ord("A"), PUZZLE_SIZE)
            total += abs(i - target_row) + abs(j - target_col)
    return total


def tower_count(blocks: Iterable[int]) -> int:
    """Return the number of towers built from the blocks in order."""
    sizes = list(blocks)
    if not sizes:
        raise ValueError("at least one block is required")
    return 1 + sum(1 for before, after in pairwise(sizes) if after > before)


def lost_lineup(distances: Sequence[int]) -> list[int]:
    """Return the queue order given how many stand between person 1 and each other."""
    lineup = [0] * (len(distances) + 1)
    lineup[0] = 1
    for person, between in enumerate(distances, start=2):
        lineup[between + 1] = person
    return lineup


def laptop_stickers(
    width: int, height: int, stickers: Iterable[tuple[int, int, int, int]]
) -> list[str]:
    """Return the laptop lid after applying the stickers in order.

    Each sticker is ``(sticker_width, sticker_height, column, row)`` and is
    drawn with the next letter from ``a``; parts off the lid are cut away.
    """
    lid = [["_"] * width for _ in range(height)]
    for index, (sticker_width, sticker_height, column, row) in enumerate(stickers):
        letter = chr(ord("a") + index)
        for i in range(row, min(row + sticker_height, height)):
            for j in range(column, min(column + sticker_width, width)):
                lid[i][j] = letter
    return ["".join(line) for line in lid]


def dance_moves(grid: Sequence[str]) -> int:
    """Return the number of moves: one more than the count of columns without ``$``."""
    if not grid:
        raise ValueError("the grid must have at least one row")
    return 1 + sum(1 for column in zip(*grid) if "$" not in column)


def is_valid_nine_knights(grid: Sequence[str]) -> bool:
    """Return whether the 5x5 grid holds exactly nine non-attacking knights."""
    rows = list(grid)
    if len(rows) != KNIGHT_BOARD or any(len(row) != KNIGHT_BOARD for row in rows):
        raise ValueError("the grid must be 5 rows of 5 cells")
    knights = [(i, j) for i, row in enumerate(rows) for j, cell in enumerate(row) if cell != "."]
    occupied = set(knights)
    attacked = any(
        (i + di, j + dj) in occupied for i, j in knights for di, dj in _KNIGHT_MOVES
    )
    return not attacked and len(knights) == KNIGHT_COUNT


def guess_who(rows: Sequence[str], queries: Iterable[tuple[int, str]]) -> tuple[str, int]:
    """Return ``("unique", person)`` or ``("ambiguous", candidates)``.

    Each query is a 1-based attribute column and the value it must hold.
    """
    candidates = [True] * len(rows)
    for column, value in queries:
        for index, row in enumerate(rows):
            if row[column - 1] != value:
                candidates[index] = False
    matches = [index for index, ok in enumerate(candidates, start=1) if ok]
    if len(matches) == 1:
        return "unique", matches[0]
    return "ambiguous", len(matches)