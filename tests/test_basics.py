import pytest

from cipherbox import basics


def test_greeting():
    assert basics.greeting().startswith("Hello World!")


def test_classify_source_values():
    assert basics.classify(100, 10) == [
        "x is greater than 90",
        "x greater than 10 and (x or y below 50)",
    ]


def test_classify_small_x_has_single_message():
    assert basics.classify(5, 0) == ["x is less than 10"]


def test_classify_between_without_combined_condition():
    assert basics.classify(50, 60) == ["x is between 10 and 90"]


def test_classify_between_with_combined_condition():
    assert basics.classify(20, 60) == [
        "x is between 10 and 90",
        "x greater than 10 and (x or y below 50)",
    ]


@pytest.mark.parametrize("a,b,expected", [(2, 1, "Sum is 3"), (1, 0, "Sum is 1"), (1, 1, "Sum is 2")])
def test_describe_sum_cases(a, b, expected):
    assert basics.describe_sum(a, b) == expected


def test_describe_sum_default():
    assert basics.describe_sum(5, 5) == "Printing default"


def test_nested_break_leaves_both_loops():
    trace = basics.nested_break_trace(10, 10, 5)
    assert trace == [(1, j) for j in range(1, 6)]


def test_nested_break_never_reached_runs_all():
    trace = basics.nested_break_trace(3, 4, 99)
    assert len(trace) == 12
    assert trace[-1] == (3, 4)


def test_count_until_stops_at_stop():
    assert basics.count_until(10, 7) == list(range(1, 8))


def test_count_until_respects_limit():
    assert basics.count_until(4, 7) == list(range(1, 5))


def test_powers_of_two_doubles():
    pairs = basics.powers_of_two()
    assert len(pairs) == 8
    assert pairs[0] == (0, 1)
    assert [e for e, _ in pairs] == list(range(8))
    for (_, prev), (_, cur) in zip(pairs, pairs[1:]):
        assert cur == 2 * prev


def test_main_output(capsys):
    assert basics.main() == 0
    out = capsys.readouterr().out
    assert "Sum is 3" in out
    assert "x is greater than 90" in out
    assert "variable a= A variable b= B" in out
    assert "i and j: 100 hello" in out
    assert "loop K -->  7" in out
    assert "loop K -->  8" not in out