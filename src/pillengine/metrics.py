# src/pillengine/metrics.py
from dataclasses import replace

import numpy as np

from .constants import DAYS_PER_WEEK
from .types import ComplexityMetrics, DosageSchedule, PillLineSummary


def score_schedule(schedule: DosageSchedule) -> ComplexityMetrics:
    """
    Complexity of a schedule, scanning all 7 effective days
    (a uniform combo counts 7 times).
    """
    half_strengths: set[int] = set()
    strengths: set[int] = set()
    counts: list[int] = []

    for combo in schedule.week():
        for p in combo:
            if p.count <= 0:
                continue
            strengths.add(p.mg)
            counts.append(p.count)
            if p.half:
                half_strengths.add(p.mg)

    return ComplexityMetrics(
        priority=0 if schedule.kind == "uniform" else 1,
        half_pill_complexity=len(half_strengths),
        pill_color_count=len(strengths),
        total_pill_objects=int(np.sum(counts, dtype=int)),
    )


def with_complexity(schedule: DosageSchedule) -> DosageSchedule:
    """Copy of the schedule with its complexity metrics filled in."""
    return replace(schedule, complexity=score_schedule(schedule))


def weekday_occurrences(days: int, start_day_of_week: int) -> np.ndarray:
    """
    How many times each weekday (Mon..Sun) falls within `days` consecutive
    days starting on start_day_of_week.
    """
    if days <= 0:
        return np.zeros(DAYS_PER_WEEK, dtype=int)
    weekdays = (start_day_of_week + np.arange(days)) % DAYS_PER_WEEK
    return np.bincount(weekdays, minlength=DAYS_PER_WEEK)


def pills_needed(schedule: DosageSchedule, days: int,
                 start_day_of_week: int) -> tuple[PillLineSummary, ...]:
    """
    Tablets to dispense per strength (descending mg) to cover `days` days.

    Half pills pair up into whole tablets; an odd leftover half still needs a
    whole tablet dispensed, but only counts 0.5 towards actual_used.
    """
    occurrences = weekday_occurrences(days, start_day_of_week)
    whole: dict[int, int] = {}
    halves: dict[int, int] = {}

    for day_index, n in enumerate(occurrences):
        if n == 0:
            continue
        for p in schedule.day(day_index):
            bucket = halves if p.half else whole
            bucket[p.mg] = bucket.get(p.mg, 0) + p.count * int(n)

    lines: list[PillLineSummary] = []
    for mg in sorted(set(whole) | set(halves), reverse=True):
        w = whole.get(mg, 0)
        h = halves.get(mg, 0)
        dispensed = w + h // 2 + h % 2
        if dispensed > 0:
            lines.append(PillLineSummary(mg=mg, dispensed_count=dispensed,
                                         actual_used=w + h / 2.0))
    return tuple(lines)
