import pytest

from gigiquant.countdown import START, count_rounds, descend, main


@pytest.mark.parametrize("x", [1, 2, 7, 30, 101])
def test_descend_positive_stops_at_zero_or_minus_one(x):
    result = descend(x)
    assert result in (0, -1)
    assert (x - result) % 2 == 0


@pytest.mark.parametrize("x", [0, -1, -8])
def test_descend_non_positive_unchanged(x):
    assert descend(x) == x


def test_count_rounds_positive_is_one():
    assert count_rounds(START) == 1
    assert count_rounds(3) == 1


@pytest.mark.parametrize("start", [0, -4])
def test_count_rounds_non_positive(start):
    assert count_rounds(start) == 0


def test_main_prints_rounds(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == str(count_rounds(START))