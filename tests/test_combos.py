import pytest

from pillengine.combos import find_combinations
from pillengine.helpers import combo_signature
from pillengine.types import Pill, combo_dose

PILLS = [5, 3, 2, 1]


@pytest.mark.parametrize("target", [1.0, 2.5, 4.0, 5.0, 7.5, 10.0, 12.5])
@pytest.mark.parametrize("allow_half", [True, False])
def test_every_combo_hits_the_target(target, allow_half):
    """Each returned combination sums to the target within 0.01 mg."""
    combos = find_combinations(target, PILLS, allow_half, 1, 4)
    if allow_half or target.is_integer():
        assert combos
    for combo in combos:
        assert abs(combo_dose(combo) - target) < 0.01
        assert 1 <= len(combo)
        assert sum(p.count for p in combo) <= 4


def test_at_most_one_half_per_strength():
    """A strength never appears as a half pill more than once a day."""
    for target in (0.5, 1.5, 3.5, 6.5, 9.5):
        for combo in find_combinations(target, PILLS, True, 1, 4):
            halves = [p for p in combo if p.half]
            assert len({p.mg for p in halves}) == len(halves)
            assert all(p.count == 1 for p in halves)


def test_combos_are_distinct():
    """No two results share a canonical signature."""
    combos = find_combinations(6.0, PILLS, True, 1, 4)
    keys = [combo_signature(c) for c in combos]
    assert len(keys) == len(set(keys))


def test_zero_target_is_the_empty_combo():
    assert find_combinations(0.0, PILLS, True, 0, 4) == [()]
    assert find_combinations(0.0, PILLS, True, 1, 4) == []


def test_sub_tolerance_target_counts_as_zero():
    """0.005 mg is below the tolerance and behaves like a zero target."""
    for min_pills in (0, 1):
        assert (find_combinations(0.005, PILLS, True, min_pills, 4)
                == find_combinations(0.0, PILLS, True, min_pills, 4))


def test_repeated_whole_pills_are_aggregated():
    assert find_combinations(20.0, [5], False, 1, 4) == [(Pill(mg=5, count=4),)]
    # five pills would be needed
    assert find_combinations(25.0, [5], False, 1, 4) == []


def test_half_pills_need_allow_half():
    assert find_combinations(2.5, [5], True, 1, 4) == [(Pill(mg=5, half=True),)]
    assert find_combinations(2.5, [5], False, 1, 4) == []


def test_whole_and_half_of_same_strength():
    """1.5 mg from {3, 1}: half of a 3, or a 1 plus half of a 1."""
    combos = set(find_combinations(1.5, [3, 1], True, 1, 4))
    assert (Pill(mg=3, half=True),) in combos
    assert (Pill(mg=1), Pill(mg=1, half=True)) in combos


def test_min_pills_filters_short_combos():
    """5 mg as a single pill is dropped when at least two entries are required."""
    combos = find_combinations(5.0, PILLS, False, 2, 4)
    assert (Pill(mg=5),) not in combos
    assert (Pill(mg=2), Pill(mg=3)) in combos
