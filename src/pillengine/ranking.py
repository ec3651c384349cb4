# src/pillengine/ranking.py
from typing import Iterable

from .constants import MAX_RESULTS
from .types import DosageSchedule


def complexity_key(schedule: DosageSchedule) -> tuple[int, int, int, int, int]:
    """
    Sort key, simplest first: fewer split strengths, uniform before
    non-uniform, fewer altered days, fewer strengths, fewer pill units.
    """
    m = schedule.complexity
    if m is None:
        raise ValueError("schedule has not been scored; call metrics.with_complexity first.")
    return (
        m.half_pill_complexity,
        m.priority,
        len(schedule.stop_days) + len(schedule.special_days),
        m.pill_color_count,
        m.total_pill_objects,
    )


def rank_schedules(schedules: Iterable[DosageSchedule],
                   limit: int = MAX_RESULTS) -> list[DosageSchedule]:
    """Stable sort by complexity_key, keeping the first `limit` entries."""
    return sorted(schedules, key=complexity_key)[:limit]
