import pytest

from handycalc.arithmetic import IntegerCalculator, main

PAIRS = [(7, 2), (-7, 2), (7, -2), (-7, -2), (0, 5), (100, 7), (3, 9)]


def test_division_truncates_toward_zero():
    assert IntegerCalculator(-7, 2).divide() == -3


def test_remainder_takes_sign_of_dividend():
    assert IntegerCalculator(-7, 2).remainder() == -1


@pytest.mark.parametrize("a,b", PAIRS)
def test_division_identity(a, b):
    calc = IntegerCalculator(a, b)
    assert b * calc.divide() + calc.remainder() == a
    assert abs(calc.remainder()) < abs(b)
    assert calc.remainder() == 0 or (calc.remainder() < 0) == (a < 0)


@pytest.mark.parametrize("a,b", PAIRS)
def test_add_and_subtract_are_consistent(a, b):
    calc = IntegerCalculator(a, b)
    assert calc.add() - calc.subtract() == 2 * b
    assert IntegerCalculator(calc.subtract(), b).add() == a


@pytest.mark.parametrize("a,b", PAIRS)
def test_multiply_then_divide_recovers(a, b):
    product = IntegerCalculator(a, b).multiply()
    assert IntegerCalculator(product, b).divide() == a
    assert IntegerCalculator(b, a).multiply() == product


def test_divide_by_zero_raises():
    with pytest.raises(ValueError, match="Division by zero"):
        IntegerCalculator(5, 0).divide()


def test_remainder_by_zero_raises():
    with pytest.raises(ValueError, match="Division by zero"):
        IntegerCalculator(5, 0).remainder()


def test_main_prints_all_results(capsys):
    assert main(["7", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == ""
    assert lines[1] == "Arithmetic operations results:"
    assert lines[2] == "7 + 2 = 9"
    assert lines[5].startswith("7 / 2 = ")
    assert lines[6].startswith("Remainder after division: 7 % 2 = ")
    assert len(lines) == 7


def test_main_prompts_for_input(monkeypatch, capsys):
    answers = iter(["-7", "2"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "-7 / 2 = -3" in out
    assert "-7 % 2 = -1" in out


def test_main_reports_division_by_zero(capsys):
    assert main(["5", "0"]) == 1
    captured = capsys.readouterr()
    assert "Division by zero" in captured.err
    assert "5 * 0 = 0" in captured.out