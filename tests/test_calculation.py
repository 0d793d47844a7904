import pytest

from cipherbox.calculation import Calculator, calc, main


def test_calc_example():
    assert calc(15, 10) == (25, 5)


@pytest.mark.parametrize("a,b", [(0, 0), (3, 7), (-4, 9), (100, -1)])
def test_calc_sum_and_difference_recover_operands(a, b):
    total, diff = calc(a, b)
    assert (total + diff) // 2 == a
    assert (total - diff) // 2 == b


def test_calculator_starts_at_zero_and_remembers_last_result():
    calculator = Calculator()
    assert calculator.calculs == 0
    first = calculator.add(15, 10)
    assert calculator.calculs == first
    second = calculator.add(1, 2)
    assert calculator.calculs == second
    assert second == calc(1, 2)[0]


def test_calculator_add_matches_calc_sum():
    calculator = Calculator()
    assert calculator.add(-3, 8) == calc(-3, 8)[0]


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Sum 25", "Diff 5", "Sum 25", "calculation.Calculs 25"]