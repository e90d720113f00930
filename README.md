# contestkit

Solvers for a collection of short competitive-programming problems, from
introductory exercises (parity checks, counting, simple simulation) to
veteran-level tasks (eight queens validation, bungee heights, piano
scheduling, a binary search past sphere obstacles).

Every problem is a plain Python function that takes ordinary values and
returns the answer. A command-line entry point reads a problem's input
text and prints its answer in the contest's output format.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `contestkit.intro2024`: the introductory contest: `baby_panda`,
  `stairs_effort`, `free_food_days`, `goomba_stacks`, `describe_parity`,
  `shandy`, `shattered_cake_length`, `matches_fit`, `time_loop`.
- `contestkit.league1_novice`: league round one, novice problems:
  `min_square_area`, `is_fair_tournament`, `can_be_most_common`,
  `classify_triple`, `yogurt_cost`, `next_distinct_year`,
  `elephant_steps`, `is_dangerous`.
- `contestkit.league1_veteran`: league round one, veteran problems:
  `is_valid_eight_queens`, `bungee_height`, `four_die_rolls`,
  `largest_passing_radius` (obstacles given as `Sphere(x, y, r)`),
  `piano_schedule`, `classify_drive`.
- `contestkit.league2_novice`: league round two, novice problems:
  `invert_matrix`, `awake_lectures`, `puzzle_scatter`, `tower_count`,
  `lost_lineup`, `laptop_stickers`, `dance_moves`,
  `is_valid_nine_knights`, `guess_who`.
- `contestkit.cli`: `solve(problem, text)` runs a named problem on its raw
  input text and returns the output; `problems()` lists the problem
  names; `main()` is the command-line entry point.

Functions raise `ValueError` on input they cannot handle, for example an
empty list of stair heights, an event outside days 1 to 365, a board of
the wrong size or a singular matrix.

## Using the library

```python
from contestkit.intro2024 import baby_panda, shandy
from contestkit.league1_novice import min_square_area, next_distinct_year, elephant_steps
from contestkit.cli import solve

baby_panda(4, 10)          # 2: ten slimes need two sneezes
shandy(3, 5)               # 6
min_square_area(3, 2)      # 16
next_distinct_year(1987)   # 2013
elephant_steps(12)         # 3

solve("oddities", "2\n10\n7\n")   # "10 is even\n7 is odd\n"
```

## Using the command line

```
contestkit PROBLEM [INPUT]
```

`PROBLEM` is one of the problem names below; the input is read from the
file `INPUT`, or from standard input when it is left out. The answer is
printed in the contest's output format. If the input runs short or holds
a value the solver rejects, a line starting with `error:` goes to
standard error and the exit status is 1.

```
echo "3" | contestkit timeloop
contestkit --help
```

Problem names:

- introductory contest: `babypanda`, `dontfalldownstairs`, `freefood`,
  `goombastacks`, `oddities`, `shandy`, `shatteredcake`, `sibice`,
  `timeloop`
- league round one, novice: `1360A`, `1535A`, `1878A`, `1950A`, `1955A`,
  `271A`, `617A`, `96A`
- league round one, veteran: `8queens`, `bungeebuilder`, `fourdierolls`,
  `gettingthrough`, `piano`, `testdrive`
- league round two, novice: `matrixinverse`, `coffeecupcombo`, `npuzzle`,
  `towerconstruction`, `lostlineup`, `laptopstickers`, `epigdanceoff`,
  `nineknights`, `guesswho`

## What it does not do

The package only solves the problems listed above. It does not judge
submissions, fetch problem statements or keep any record of runs. Each
command reads one whole input and prints one answer.