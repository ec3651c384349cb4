import pytest

from pillengine.helpers import combo_signature, dedupe_schedules, schedule_signature
from pillengine.metrics import with_complexity
from pillengine.ranking import complexity_key, rank_schedules
from pillengine.types import DosageSchedule, Pill


def _uniform(*pills, weekly=0.0):
    return DosageSchedule(kind="uniform", combos=(tuple(pills),), weekly_dose_actual=weekly)


def test_signature_ignores_entry_order():
    assert combo_signature((Pill(mg=2), Pill(mg=3))) == combo_signature((Pill(mg=3), Pill(mg=2)))
    assert combo_signature((Pill(mg=5, half=True),)) == "(5,1,true)"


def test_dedupe_keeps_first_seen():
    a = _uniform(Pill(mg=5), weekly=35.0)
    b = _uniform(Pill(mg=5), weekly=35.0)
    c = _uniform(Pill(mg=2), Pill(mg=3), weekly=35.0)
    unique = dedupe_schedules([a, c, b])
    assert len(unique) == 2
    assert unique[0] is a and unique[1] is c


def test_kind_is_part_of_the_signature():
    uniform = _uniform(Pill(mg=5), weekly=35.0)
    seven = DosageSchedule(kind="non_uniform", combos=((Pill(mg=5),),) * 7,
                           weekly_dose_actual=35.0)
    assert schedule_signature(uniform) != schedule_signature(seven)


def test_half_pills_outrank_uniformity():
    """A non-uniform schedule without halves beats a uniform one with halves."""
    halves = with_complexity(_uniform(Pill(mg=5, half=True), weekly=17.5))
    stop_sunday = with_complexity(DosageSchedule(
        kind="non_uniform",
        combos=((Pill(mg=5),),) * 6 + ((),),
        weekly_dose_actual=30.0,
        base_dose=5.0,
        stop_days=(6,),
    ))
    assert complexity_key(halves) == (1, 0, 0, 1, 7)
    assert complexity_key(stop_sunday) == (0, 1, 1, 1, 6)
    assert rank_schedules([halves, stop_sunday]) == [stop_sunday, halves]


def test_ties_keep_generation_order():
    first = with_complexity(_uniform(Pill(mg=2), Pill(mg=3), weekly=35.0))
    second = with_complexity(_uniform(Pill(mg=1), Pill(mg=4), weekly=35.0))
    assert complexity_key(first) == complexity_key(second)

    ranked = rank_schedules([first, second])
    assert ranked[0] is first and ranked[1] is second
    assert rank_schedules(ranked) == ranked
    reverse = rank_schedules([second, first])
    assert reverse[0] is second


def test_truncates_to_thirty():
    many = [with_complexity(_uniform(Pill(mg=5), weekly=35.0)) for _ in range(40)]
    assert len(rank_schedules(many)) == 30
    assert len(rank_schedules(many, limit=5)) == 5


def test_unscored_schedule_cannot_be_ranked():
    with pytest.raises(ValueError):
        rank_schedules([_uniform(Pill(mg=5), weekly=35.0)])
