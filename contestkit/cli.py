"""Command-line front end: solve a contest problem from its judge-style input."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator

from contestkit import intro2024 as intro
from contestkit import league1_novice as l1n
from contestkit import league1_veteran as l1v
from contestkit import league2_novice as l2n


class _Tokens:
    """Whitespace-separated tokens read the way a judge's input stream is read."""

    def __init__(self, text: str) -> None:
        self._items: deque[str] = deque(text.split())

    def __len__(self) -> int:
        return len(self._items)

    def word(self) -> str:
        if not self._items:
            raise ValueError("unexpected end of input")
        return self._items.popleft()

    def int(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def float(self) -> float:
        token = self.word()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.int(), self.int()) for _ in range(count)]

    def words(self, count: int) -> list[str]:
        return [self.word() for _ in range(count)]

    def chars(self, count: int) -> str:
        """Read ``count`` non-blank characters, possibly spanning tokens."""
        collected = ""
        while len(collected) < count:
            collected += self.word()
        if len(collected) > count:
            self._items.appendleft(collected[count:])
        return collected[:count]


_Handler = Callable[[_Tokens], Iterable[str]]
_PROBLEMS: dict[str, _Handler] = {}


def _problem(name: str) -> Callable[[_Handler], _Handler]:
    def register(handler: _Handler) -> _Handler:
        _PROBLEMS[name] = handler
        return handler

    return register


def _verdict(ok: bool, yes: str, no: str) -> str:
    return yes if ok else no


def _cases(tokens: _Tokens) -> range:
    return range(tokens.int())


# Introductory contest


@_problem("babypanda")
def _babypanda(tokens: _Tokens) -> Iterator[str]:
    days, slimes = tokens.int(), tokens.int()
    yield str(intro.baby_panda(days, slimes))


@_problem("dontfalldownstairs")
def _stairs(tokens: _Tokens) -> Iterator[str]:
    yield str(intro.stairs_effort(tokens.ints(tokens.int())))


@_problem("freefood")
def _freefood(tokens: _Tokens) -> Iterator[str]:
    yield str(intro.free_food_days(tokens.pairs(tokens.int())))


@_problem("goombastacks")
def _goombas(tokens: _Tokens) -> Iterator[str]:
    ok = intro.goomba_stacks(tokens.pairs(tokens.int()))
    yield _verdict(ok, "possible", "impossible")


@_problem("oddities")
def _oddities(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        yield intro.describe_parity(tokens.int())


@_problem("shandy")
def _shandy(tokens: _Tokens) -> Iterator[str]:
    beer, lemonade = tokens.int(), tokens.int()
    yield str(intro.shandy(beer, lemonade))


@_problem("shatteredcake")
def _cake(tokens: _Tokens) -> Iterator[str]:
    width, count = tokens.int(), tokens.int()
    yield str(intro.shattered_cake_length(width, tokens.pairs(count)))


@_problem("sibice")
def _sibice(tokens: _Tokens) -> Iterator[str]:
    count, width, height = tokens.ints(3)
    for fits in intro.matches_fit(width, height, tokens.ints(count)):
        yield _verdict(fits, "DA", "NE")


@_problem("timeloop")
def _timeloop(tokens: _Tokens) -> Iterator[str]:
    yield from intro.time_loop(tokens.int())


# First league round, novice


@_problem("1360A")
def _square(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        a, b = tokens.int(), tokens.int()
        yield str(l1n.min_square_area(a, b))


@_problem("1535A")
def _tournament(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        yield _verdict(l1n.is_fair_tournament(*tokens.ints(4)), "YES", "NO")


@_problem("1878A")
def _most_common(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        length, value = tokens.int(), tokens.int()
        ok = l1n.can_be_most_common(tokens.ints(length), value)
        yield _verdict(ok, "YES", "NO")


@_problem("1950A")
def _stair_peak(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        yield l1n.classify_triple(*tokens.ints(3))


@_problem("1955A")
def _yogurt(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        yield str(l1n.yogurt_cost(*tokens.ints(3)))


@_problem("271A")
def _beautiful_year(tokens: _Tokens) -> Iterator[str]:
    yield str(l1n.next_distinct_year(tokens.int()))


@_problem("617A")
def _elephant(tokens: _Tokens) -> Iterator[str]:
    yield str(l1n.elephant_steps(tokens.int()))


@_problem("96A")
def _football(tokens: _Tokens) -> Iterator[str]:
    yield _verdict(l1n.is_dangerous(tokens.word()), "YES", "NO")


# First league round, veteran


@_problem("8queens")
def _queens(tokens: _Tokens) -> Iterator[str]:
    cells = tokens.chars(l1v.BOARD_SIZE * l1v.BOARD_SIZE)
    board = [cells[start : start + l1v.BOARD_SIZE] for start in range(0, len(cells), l1v.BOARD_SIZE)]
    yield _verdict(l1v.is_valid_eight_queens(board), "valid", "invalid")


@_problem("bungeebuilder")
def _bungee(tokens: _Tokens) -> Iterator[str]:
    yield str(l1v.bungee_height(tokens.ints(tokens.int())))


@_problem("fourdierolls")
def _dice(tokens: _Tokens) -> Iterator[str]:
    distinct, repeated = l1v.four_die_rolls(tokens.ints(tokens.int()))
    yield f"{distinct} {repeated}"


@_problem("gettingthrough")
def _getting_through(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        width, count = tokens.int(), tokens.int()
        spheres = [
            l1v.Sphere(tokens.float(), tokens.float(), tokens.float()) for _ in range(count)
        ]
        yield f"{l1v.largest_passing_radius(width, spheres):.6f}"


@_problem("piano")
def _piano(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        count, movers = tokens.int(), tokens.int()
        yield l1v.piano_schedule(tokens.pairs(count), movers)


@_problem("testdrive")
def _testdrive(tokens: _Tokens) -> Iterator[str]:
    yield l1v.classify_drive(*tokens.ints(3))


# Second league round, novice


@_problem("matrixinverse")
def _matrix_inverse(tokens: _Tokens) -> Iterator[str]:
    case = 1
    while len(tokens) >= 4:
        (p, q), (r, s) = l2n.invert_matrix(*tokens.ints(4))
        yield f"Case {case}:"
        yield f"{p} {q}"
        yield f"{r} {s}"
        case += 1


@_problem("coffeecupcombo")
def _coffee(tokens: _Tokens) -> Iterator[str]:
    yield str(l2n.awake_lectures(tokens.chars(tokens.int())))


@_problem("npuzzle")
def _npuzzle(tokens: _Tokens) -> Iterator[str]:
    yield str(l2n.puzzle_scatter(tokens.words(l2n.PUZZLE_SIZE)))


@_problem("towerconstruction")
def _towers(tokens: _Tokens) -> Iterator[str]:
    yield str(l2n.tower_count(tokens.ints(tokens.int())))


@_problem("lostlineup")
def _lineup(tokens: _Tokens) -> Iterator[str]:
    people = tokens.int()
    lineup = l2n.lost_lineup(tokens.ints(people - 1))
    yield " ".join(map(str, lineup))


@_problem("laptopstickers")
def _stickers(tokens: _Tokens) -> Iterator[str]:
    width, height, count = tokens.ints(3)
    stickers = [tuple(tokens.ints(4)) for _ in range(count)]
    yield from l2n.laptop_stickers(width, height, stickers)


@_problem("epigdanceoff")
def _dance(tokens: _Tokens) -> Iterator[str]:
    height, _width = tokens.int(), tokens.int()
    yield str(l2n.dance_moves(tokens.words(height)))


@_problem("nineknights")
def _knights(tokens: _Tokens) -> Iterator[str]:
    grid = tokens.words(l2n.KNIGHT_BOARD)
    yield _verdict(l2n.is_valid_nine_knights(grid), "valid", "invalid")


@_problem("guesswho")
def _guess_who(tokens: _Tokens) -> Iterator[str]:
    people, _attributes, questions = tokens.ints(3)
    rows = tokens.words(people)
    queries = [(tokens.int(), tokens.chars(1)) for _ in range(questions)]
    verdict, number = l2n.guess_who(rows, queries)
    yield verdict
    yield str(number)


def problems() -> list[str]:
    """Return the names of all problems that can be solved."""
    return sorted(_PROBLEMS)


def solve(problem: str, text: str) -> str:
    """Solve ``problem`` for the judge-style input ``text`` and return its output."""
    try:
        handler = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return "".join(f"{line}\n" for line in handler(_Tokens(text)))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="contestkit", description="Solve a contest problem from its input."
    )
    parser.add_argument("problem", choices=problems(), help="problem to solve")
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)

    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()

    try:
        output = solve(args.problem, text)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0