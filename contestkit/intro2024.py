"""Solutions to the introductory contest problems."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise

DAYS_IN_YEAR = 365


def baby_panda(days: int, slimes: int) -> int:
    """Return the fewest sneezes needed to end with ``slimes`` slimes.

    Each sneeze adds one slime and each night doubles them, so the answer is
    the number of set bits of ``slimes``; the number of days does not matter.
    """
    del days
    return slimes.bit_count()


def stairs_effort(heights: Iterable[int]) -> int:
    """Return the effort needed to walk down the given stair heights to 0."""
    steps = list(heights)
    if not steps:
        raise ValueError("at least one stair height is required")
    effort = 0
    for upper, lower in pairwise(steps):
        effort += upper - lower
        if upper != lower:
            effort -= 1
    last = steps[-1]
    if last != 0:
        effort += last - 1
    return effort


def free_food_days(events: Iterable[tuple[int, int]]) -> int:
    """Return how many distinct days of the year are covered by the events."""
    covered: set[int] = set()
    for first, last in events:
        if not (1 <= first <= DAYS_IN_YEAR and 1 <= last <= DAYS_IN_YEAR):
            raise ValueError(f"event ({first}, {last}) is outside days 1..{DAYS_IN_YEAR}")
        covered.update(range(first, last + 1))
    return len(covered)


def goomba_stacks(rooms: Iterable[tuple[int, int]]) -> bool:
    """Return whether every room can be passed in order.

    Each room is ``(goombas_gained, goombas_required)``; the running total of
    goombas must reach the requirement of every room.
    """
    total = 0
    for gained, required in rooms:
        total += gained
        if total < required:
            return False
    return True


def describe_parity(number: int) -> str:
    """Return ``"<number> is even"`` or ``"<number> is odd"``."""
    kind = "even" if number % 2 == 0 else "odd"
    return f"{number} is {kind}"


def shandy(beer: int, lemonade: int) -> int:
    """Return how much shandy can be mixed from equal parts beer and lemonade."""
    return 2 * min(beer, lemonade)


def shattered_cake_length(width: int, pieces: Iterable[tuple[int, int]]) -> int:
    """Return the cake length given its width and its ``(width, length)`` pieces."""
    area = sum(piece_width * piece_length for piece_width, piece_length in pieces)
    return area // width


def matches_fit(width: int, height: int, lengths: Iterable[int]) -> list[bool]:
    """Return, for each match length, whether it fits in the box."""
    diagonal_squared = width * width + height * height
    return [length * length <= diagonal_squared for length in lengths]


def time_loop(count: int) -> list[str]:
    """Return the lines ``"1 Abracadabra"`` through ``"<count> Abracadabra"``."""
    return [f"{i} Abracadabra" for i in range(1, count + 1)]