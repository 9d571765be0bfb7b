import random
import re

import pytest

from consolegames.sorting import (
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    random_values,
    time_sort,
)


def test_insertion_sort_random_data():
    data = random_values(500, random.Random(7))
    assert insertion_sort(data) == sorted(data)


def test_merge_sort_random_data():
    data = random_values(500, random.Random(7))
    assert merge_sort(data) == sorted(data)


def test_quick_sort_random_data():
    data = random_values(500, random.Random(7))
    assert quick_sort(data) == sorted(data)


def test_empty_and_single():
    assert insertion_sort([]) == []
    assert insertion_sort([5]) == [5]
    assert merge_sort([]) == []
    assert merge_sort([5]) == [5]
    assert quick_sort([]) == []
    assert quick_sort([5]) == [5]


def test_duplicates_and_negatives():
    data = [3, -1, 3, 0, -1, 2, 2, 2]
    expected = [-1, -1, 0, 2, 2, 2, 3, 3]
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


def test_input_not_modified():
    data = [4, 1, 3]
    assert insertion_sort(data) == [1, 3, 4]
    assert merge_sort(data) == [1, 3, 4]
    assert quick_sort(data) == [1, 3, 4]
    assert data == [4, 1, 3]


def test_already_sorted_and_reversed():
    data = list(range(200))
    assert insertion_sort(data) == data
    assert insertion_sort(reversed(data)) == data
    assert merge_sort(data) == data
    assert merge_sort(reversed(data)) == data
    assert quick_sort(data) == data
    assert quick_sort(reversed(data)) == data


def test_random_values_range_and_length():
    values = random_values(300, random.Random(1))
    assert len(values) == 300
    assert all(0 <= v < 300 for v in values)


def test_random_values_deterministic_with_seed():
    first = random_values(50, random.Random(3))
    second = random_values(50, random.Random(3))
    assert len(first) == 50
    assert second == first


def test_random_values_negative_count():
    with pytest.raises(ValueError):
        random_values(-1)


def test_time_sort_returns_sorted_result():
    data = random_values(100, random.Random(2))
    result, elapsed = time_sort(merge_sort, data)
    assert result == sorted(data)
    assert elapsed >= 0.0


@pytest.mark.parametrize("name", ["insertion", "merge", "quick"])
def test_main_prints_time(name, capsys):
    assert main([name, "--size", "50"]) == 0
    out = capsys.readouterr().out
    assert re.fullmatch(r"Tempo de execucao: \d+\.\d{6} ms\n", out)


def test_main_rejects_unknown_algorithm():
    with pytest.raises(SystemExit):
        main(["bogus"])