import io

import pytest

from contestkit import intro2024 as intro
from contestkit import league1_novice as l1n
from contestkit import league1_veteran as l1v
from contestkit import league2_novice as l2n
from contestkit.cli import main, problems, solve


def test_timeloop_prints_each_line():
    assert solve("timeloop", "3\n") == "1 Abracadabra\n2 Abracadabra\n3 Abracadabra\n"


def test_oddities_reports_parity_per_case():
    assert solve("oddities", "3\n10\n9\n-5\n") == "10 is even\n9 is odd\n-5 is odd\n"


def test_matrix_inverse_numbers_cases():
    output = solve("matrixinverse", "1 0\n0 1\n\n2 0\n0 2\n").splitlines()
    (p, q), (r, s) = l2n.invert_matrix(2, 0, 0, 2)
    assert output == ["Case 1:", "1 0", "0 1", "Case 2:", f"{p} {q}", f"{r} {s}"]


def test_matrix_inverse_ignores_incomplete_trailing_case():
    output = solve("matrixinverse", "1 0 0 1 5 6").splitlines()
    assert output == ["Case 1:", "1 0", "0 1"]


def test_matrix_inverse_empty_input_gives_nothing():
    assert solve("matrixinverse", "") == ""


def test_matrix_inverse_singular_raises():
    with pytest.raises(ValueError):
        solve("matrixinverse", "1 2 2 4")


def test_unknown_problem_raises():
    with pytest.raises(ValueError):
        solve("nosuchproblem", "1")


def test_truncated_input_raises():
    with pytest.raises(ValueError):
        solve("shandy", "4")


def test_non_integer_input_raises():
    with pytest.raises(ValueError):
        solve("617A", "abc")


@pytest.mark.parametrize(
    ("problem", "text", "expected"),
    [
        ("babypanda", "4 10", str(intro.baby_panda(4, 10))),
        ("dontfalldownstairs", "3\n3 2 1", str(intro.stairs_effort([3, 2, 1]))),
        ("freefood", "2\n1 5\n3 8", str(intro.free_food_days([(1, 5), (3, 8)]))),
        ("shandy", "5 3", str(intro.shandy(5, 3))),
        ("shatteredcake", "4\n2\n2 3\n2 5", str(intro.shattered_cake_length(4, [(2, 3), (2, 5)]))),
        ("1360A", "1\n3 2", str(l1n.min_square_area(3, 2))),
        ("1950A", "1\n1 2 3", l1n.classify_triple(1, 2, 3)),
        ("1955A", "1\n5 3 4", str(l1n.yogurt_cost(5, 3, 4))),
        ("271A", "1987", str(l1n.next_distinct_year(1987))),
        ("617A", "12", str(l1n.elephant_steps(12))),
        ("bungeebuilder", "5\n5 1 4 2 6", str(l1v.bungee_height([5, 1, 4, 2, 6]))),
        ("testdrive", "1 2 4", l1v.classify_drive(1, 2, 4)),
        ("npuzzle", "ABCD\nEFGH\nIJKL\nMNO.", str(l2n.puzzle_scatter(["ABCD", "EFGH", "IJKL", "MNO."]))),
        ("towerconstruction", "4\n4 3 5 1", str(l2n.tower_count([4, 3, 5, 1]))),
        ("epigdanceoff", "2 3\n$_$\n$__", str(l2n.dance_moves(["$_$", "$__"]))),
    ],
)
def test_single_answer_matches_solver(problem, text, expected):
    assert solve(problem, text) == f"{expected}\n"


def test_goombastacks_verdicts():
    assert solve("goombastacks", "2\n3 3\n1 5") == "impossible\n"
    assert solve("goombastacks", "2\n3 3\n2 5") == "possible\n"


def test_sibice_one_verdict_per_match():
    fits = intro.matches_fit(3, 4, [3, 5, 6])
    expected = "".join(("DA" if ok else "NE") + "\n" for ok in fits)
    assert solve("sibice", "3 3 4\n3\n5\n6") == expected


def test_1535A_and_1878A_yes_no():
    fair = l1n.is_fair_tournament(3, 7, 9, 5)
    assert solve("1535A", "1\n3 7 9 5") == ("YES\n" if fair else "NO\n")
    assert solve("1878A", "2\n3 2\n1 2 3\n2 9\n1 1") == "YES\nNO\n"


def test_96A_danger():
    assert solve("96A", "1000000001") == "YES\n"
    assert solve("96A", "001001") == "NO\n"


def test_eight_queens_board_from_characters():
    board = ["*.......", "......*.", "....*...", ".......*", ".*......", "...*....", ".....*..", "..*....."]
    verdict = "valid" if l1v.is_valid_eight_queens(board) else "invalid"
    assert solve("8queens", "\n".join(board)) == f"{verdict}\n"


def test_four_die_rolls_output_pair():
    distinct, repeated = l1v.four_die_rolls([1, 2])
    assert solve("fourdierolls", "2\n1 2") == f"{distinct} {repeated}\n"


def test_getting_through_formats_six_decimals():
    spheres = [l1v.Sphere(5.0, 5.0, 1.0)]
    radius = l1v.largest_passing_radius(10, spheres)
    assert solve("gettingthrough", "1\n10 1\n5 5 1") == f"{radius:.6f}\n"


def test_piano_per_case():
    first = l1v.piano_schedule([(1, 3)], 2)
    second = l1v.piano_schedule([(6, 7), (6, 7)], 2)
    assert solve("piano", "2\n1 2\n1 3\n2 2\n6 7\n6 7") == f"{first}\n{second}\n"


def test_coffee_reads_characters_across_tokens():
    assert solve("coffeecupcombo", "5\n10000") == solve("coffeecupcombo", "5\n1 0 0 0 0")
    assert solve("coffeecupcombo", "5\n10000") == f"{l2n.awake_lectures('10000')}\n"


def test_lost_lineup_space_separated():
    lineup = l2n.lost_lineup([1, 0])
    assert solve("lostlineup", "3\n1 0") == " ".join(map(str, lineup)) + "\n"


def test_laptop_stickers_draws_lid():
    lid = l2n.laptop_stickers(4, 2, [(2, 1, 1, 0)])
    assert solve("laptopstickers", "4 2 1\n2 1 1 0") == "".join(f"{row}\n" for row in lid)


def test_nine_knights_counts_knights():
    assert solve("nineknights", ".....\n.....\n.....\n.....\n.....") == "invalid\n"


def test_guess_who_unique_and_ambiguous():
    rows = ["NYN", "YYN", "NNY"]
    verdict, number = l2n.guess_who(rows, [(1, "Y")])
    assert solve("guesswho", "3 3 1\nNYN\nYYN\nNNY\n1 Y") == f"{verdict}\n{number}\n"
    assert solve("guesswho", "3 3 0\nNYN\nYYN\nNNY").splitlines()[0] == "ambiguous"


def test_problems_lists_registered_names():
    names = problems()
    assert names == sorted(names)
    assert {"timeloop", "oddities", "matrixinverse"} <= set(names)


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main(["timeloop"]) == 0
    assert capsys.readouterr().out == "1 Abracadabra\n2 Abracadabra\n"


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("2\n4\n7\n", encoding="utf-8")
    assert main(["oddities", str(path)]) == 0
    assert capsys.readouterr().out == "4 is even\n7 is odd\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 2 4"))
    assert main(["matrixinverse"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error" in captured.err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit):
        main(["nosuchproblem"])