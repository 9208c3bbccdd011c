from itertools import takewhile

import pytest

from handycalc.running_sum import main, running_sums


def test_stops_at_first_zero():
    numbers = [4, 7, 0, 100, 200]
    pairs = list(running_sums(numbers))
    assert [number for number, _ in pairs] == [4, 7]


def test_final_total_equals_sum_before_zero():
    numbers = [3, -8, 12, 5, 0, 9]
    pairs = list(running_sums(numbers))
    assert pairs[-1][1] == sum(takewhile(lambda n: n != 0, numbers))


def test_totals_grow_by_each_number():
    numbers = [2, 9, -4, 6]
    pairs = list(running_sums(numbers))
    previous = 0
    for number, total in pairs:
        assert total - previous == number
        previous = total


def test_leading_zero_yields_nothing():
    assert list(running_sums([0, 1, 2])) == []


def test_does_not_consume_past_zero():
    numbers = iter([1, 0, 5, 6])
    list(running_sums(numbers))
    assert list(numbers) == [5, 6]


def test_main_with_arguments(capsys):
    assert main(["5", "10", "0", "99"]) == 0
    out = capsys.readouterr().out
    assert "Number Sum Calculator. Enter 0 to exit." in out
    assert "Entered number: 5" in out
    assert "Entered number: 99" not in out
    assert out.rstrip().endswith("The sum of all entered numbers is: 15")


def test_main_interactive(monkeypatch, capsys):
    answers = iter(["2", "3", "0"])
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return next(answers)

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    assert prompts[0] == "Enter a number: "
    assert prompts[1] == "Enter another number (or 0 to exit): "
    assert "The sum of all entered numbers is: 5" in capsys.readouterr().out


def test_main_rejects_non_integer(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "abc")
    assert main([]) == 1


@pytest.mark.parametrize("numbers", [[1], [1, -1], [7, 7, 7]])
def test_pair_count_matches_nonzero_prefix(numbers):
    assert len(list(running_sums(numbers))) == len(numbers)