import io

import pytest

from coursekit.grades import final_grade, letter_grade, main, weighted_scores


def test_perfect_scores_give_the_weights():
    assert weighted_scores(100, 100, 100, 100) == pytest.approx((15, 50, 30, 5))


def test_weighted_scores_sample():
    assert weighted_scores(85, 90, 95, 100) == pytest.approx((12.75, 45, 28.5, 5))


def test_final_grade_is_sum_of_weighted_scores():
    for scores in [(85, 90, 95, 100), (75, 85, 95, 90), (75, 95, 80, 98)]:
        assert final_grade(*scores) == pytest.approx(sum(weighted_scores(*scores)))


def test_final_grade_of_perfect_scores():
    assert final_grade(100, 100, 100, 100) == pytest.approx(100)


def test_final_grade_of_zero_scores():
    assert final_grade(0, 0, 0, 0) == 0


def test_final_grade_sample():
    assert final_grade(85, 90, 95, 100) == pytest.approx(91.25)


@pytest.mark.parametrize(
    "avg, letter",
    [
        (100, "A+"),
        (97, "A+"),
        (95, "A"),
        (91, "A-"),
        (88, "B+"),
        (85, "B"),
        (82, "B-"),
        (78, "C+"),
        (75, "C"),
        (71, "C-"),
        (65, "D"),
        (10, "F"),
    ],
)
def test_letter_grades(avg, letter):
    assert letter_grade(avg) == letter


def test_score_between_ranges_is_f():
    assert letter_grade(96.5) == "F"
    assert letter_grade(89.5) == "F"


def test_letter_grade_of_sample_average():
    assert letter_grade(final_grade(75, 95, 80, 98)) == "B+"


def test_main_with_arguments(capsys):
    assert main(["100", "100", "100", "100"]) == 0
    output = capsys.readouterr().out
    assert "Final Grade: 100.00%" in output
    assert "Your Grade is A+" in output
    assert "15.00% in Programming Assignments" in output


def test_main_simple(capsys):
    assert main(["--simple", "85", "90", "95", "100"]) == 0
    output = capsys.readouterr().out
    assert "12.75% in Programming Assignments" in output
    assert "Final Grade: 91.25%" in output
    assert "Your Grade" not in output


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("75\n95\n80\n98\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "Your Grade is B+" in output


def test_main_rejects_wrong_count(capsys):
    assert main(["100", "100"]) == 2
    assert "four percentages" in capsys.readouterr().err


def test_main_invalid_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "invalid input" in capsys.readouterr().err