import random

import pytest

from pushswap.randnums import MAX_NUMBER, main, unique_numbers


def test_numbers_are_distinct_and_in_range():
    numbers = unique_numbers(500, rng=random.Random(1))
    assert len(numbers) == 500
    assert len(set(numbers)) == 500
    assert all(0 <= n < MAX_NUMBER for n in numbers)


def test_seeded_rng_is_repeatable():
    first = unique_numbers(20, 100, random.Random(7))
    second = unique_numbers(20, 100, random.Random(7))
    assert first == second


def test_full_range_is_permutation():
    numbers = unique_numbers(10, 10, random.Random(2))
    assert sorted(numbers) == list(range(10))


def test_too_many_raises():
    with pytest.raises(ValueError):
        unique_numbers(11, 10)


def test_negative_count_raises():
    with pytest.raises(ValueError):
        unique_numbers(-1, 10)


def test_main_prints_one_more_than_asked(capsys):
    assert main(["4"]) == 0
    out = capsys.readouterr().out
    assert out.endswith(" ")
    numbers = [int(word) for word in out.split()]
    assert len(numbers) == 5
    assert len(set(numbers)) == 5


def test_main_minus_one_prints_nothing(capsys):
    assert main(["-1"]) == 0
    assert capsys.readouterr().out == ""


def test_main_without_argument_fails(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == ""