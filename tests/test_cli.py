import io

import pytest

from weeklysolvers.cli import main, solve
from weeklysolvers.counting import count_gapped_subsets, min_bottles
from weeklysolvers.dsu import largest_component
from weeklysolvers.geometry import count_triangles, sum_of_squared_areas
from weeklysolvers.number_theory import (
    binomial_divisor_count,
    has_distinct_square_sum,
    lucas,
    min_steps_to_equal,
)
from weeklysolvers.segment_tree import count_rejected
from weeklysolvers.sequences import zigzag_arrange
from weeklysolvers.strings import count_segmentations


def test_triangles_matches_library():
    points = [(0, 0), (1, 0), (0, 1), (2, 2)]
    text = "4\n0 0\n1 0\n0 1\n2 2\n"
    assert solve("1A", text) == f"{count_triangles(points)}\n"


def test_problem_name_is_case_insensitive():
    text = "3\n0 0\n1 0\n0 1\n"
    assert solve("1a", text) == solve("1A", text)


def test_segmentations_matches_library():
    text = "abab\n3\na\nb\nab\n"
    expected = count_segmentations("abab", ["a", "b", "ab"])
    assert solve("1B", text) == f"{expected}\n"


def test_multiple_cases_one_line_each():
    text = "2\n1 3\n11 11\n"
    expected = f"{min_steps_to_equal(1, 3)}\n{min_steps_to_equal(11, 11)}\n"
    assert solve("1H", text) == expected


def test_pairs_read_until_end_of_input():
    text = "5 2\n10 3\n"
    expected = f"{binomial_divisor_count(5, 2)}\n{binomial_divisor_count(10, 3)}\n"
    assert solve("1I", text) == expected


def test_gapped_subsets_cases():
    text = "2\n3 1\n1 2 3\n2 5\n4 4\n"
    expected = (
        f"{count_gapped_subsets([1, 2, 3], 1)}\n{count_gapped_subsets([4, 4], 5)}\n"
    )
    assert solve("2E", text) == expected


def test_zigzag_output_is_space_separated():
    assert solve("2B", "4\n1 2 3 4\n") == " ".join(
        map(str, zigzag_arrange([1, 2, 3, 4]))
    ) + "\n"


def test_face_areas_fixed_precision():
    segments = [(0, 0, 1, 0), (1, 0, 1, 1), (1, 1, 0, 1), (0, 1, 0, 0)]
    text = "4\n" + "\n".join(" ".join(map(str, s)) for s in segments) + "\n"
    result = solve("2C", text)
    assert result == f"{sum_of_squared_areas(segments):.6f}\n"
    assert result == "1.000000\n"


def test_seat_commands():
    text = "5 4\nA 3\nA 3\nL 1 5\nA 3\n"
    requests = [("A", 3), ("A", 3), ("L", 1, 5), ("A", 3)]
    assert solve("2D", text) == f"{count_rejected(5, requests)}\n"


def test_bottles_output_and_empty_answer():
    text = "2\n1 1\n100 100\n"
    bottles, poured = min_bottles([1, 1], [100, 100])
    assert solve("2F", text) == f"{bottles} {poured}\n"
    assert solve("2F", "2\n0 0\n1 1\n") == ""


def test_lucas_and_components():
    assert solve("2G", "7") == f"{lucas(7)}\n"
    edges = [(1, 2), (2, 3), (4, 5)]
    assert solve("2H", "5 3\n1 2\n2 3\n4 5\n") == f"{largest_component(5, edges)}\n"


def test_square_sum_answer_words():
    expected = "YES\n" if has_distinct_square_sum(5) else "NO\n"
    assert solve("2J", "5") == expected


def test_unknown_problem_rejected():
    with pytest.raises(ValueError):
        solve("9Z", "1")


def test_truncated_input_rejected():
    with pytest.raises(ValueError):
        solve("1A", "3\n0 0\n1 0\n")


def test_main_reads_file_and_prints(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("5\n")
    assert main(["2G", str(source)]) == 0
    assert capsys.readouterr().out == f"{lucas(5)}\n"


def test_main_writes_output_file(tmp_path):
    source = tmp_path / "input.txt"
    target = tmp_path / "output.txt"
    source.write_text("3\n0 0\n1 0\n0 1\n")
    assert main(["1A", str(source), "-o", str(target)]) == 0
    assert target.read_text() == solve("1A", "3\n0 0\n1 0\n0 1\n")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    assert main(["2g"]) == 0
    assert capsys.readouterr().out == f"{lucas(4)}\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n"))
    assert main(["1A"]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit) as info:
        main(["9Z"])
    assert info.value.code == 2