# src/pillengine/dosing.py
from __future__ import annotations

import logging
from typing import Iterator, Sequence

import numpy as np

from .combos import find_combinations
from .constants import (
    ABSOLUTE_MAX_DAILY_DOSE, BASE_DOSE_STEP, DAYS_PER_WEEK, DOSE_MULTIPLIER_LIMIT,
    FLOAT_TOLERANCE, MAX_PILLS_PER_DAY, MAX_STOP_AND_SPECIAL_DAYS,
)
from .day_patterns import resolve_day_indices
from .types import Combo, DayPattern, DosageSchedule, combo_dose

logger = logging.getLogger(__name__)


def uniform_schedules(weekly_dose: float, available_pills: Sequence[int],
                      allow_half: bool) -> list[DosageSchedule]:
    """
    Schedules taking the same combination every day.
    A zero target yields the single empty ("stop medication") schedule.
    """
    daily_target = weekly_dose / DAYS_PER_WEEK
    min_pills = 0 if daily_target < FLOAT_TOLERANCE else 1
    combos = find_combinations(daily_target, available_pills, allow_half,
                               min_pills, MAX_PILLS_PER_DAY)

    schedules: list[DosageSchedule] = []
    for combo in combos:
        actual = combo_dose(combo) * DAYS_PER_WEEK
        if abs(actual - weekly_dose) < FLOAT_TOLERANCE:
            schedules.append(DosageSchedule(kind="uniform", combos=(combo,),
                                            weekly_dose_actual=actual))
    logger.debug("uniform pass: %d combos, %d schedules", len(combos), len(schedules))
    return schedules


def day_configurations() -> Iterator[tuple[int, int]]:
    """
    (num_stop, num_special) pairs for the non-uniform search, stop days outer.
    (0, 0) is the uniform case and is never produced.
    """
    for num_stop in range(MAX_STOP_AND_SPECIAL_DAYS + 1):
        for num_special in range(MAX_STOP_AND_SPECIAL_DAYS - num_stop + 1):
            if num_stop == 0 and num_special == 0:
                continue
            yield num_stop, num_special


def base_dose_grid() -> np.ndarray:
    """Candidate normal-day doses: 0.5, 1.0, ... up to the daily ceiling."""
    steps = int(round(ABSOLUTE_MAX_DAILY_DOSE / BASE_DOSE_STEP))
    return np.arange(1, steps + 1, dtype=float) * BASE_DOSE_STEP


def non_uniform_schedules(weekly_dose: float, available_pills: Sequence[int],
                          allow_half: bool, pattern: DayPattern) -> list[DosageSchedule]:
    """
    Schedules mixing normal, special and stop days.

    For every day configuration and base dose, the normal days take
    base_dose, stop days take nothing and whatever is left of the weekly
    dose is split evenly over the special days. Special doses equal to the
    base dose, above the daily ceiling or above DOSE_MULTIPLIER_LIMIT times
    the base dose are not considered.
    """
    schedules: list[DosageSchedule] = []
    for num_stop, num_special in day_configurations():
        normal_days = DAYS_PER_WEEK - num_stop - num_special
        stop_days, special_days = resolve_day_indices(num_stop, num_special, pattern)
        found = 0

        for base_dose in base_dose_grid():
            base_dose = float(base_dose)
            normal_combos = find_combinations(base_dose, available_pills, allow_half,
                                              1, MAX_PILLS_PER_DAY)
            if not normal_combos:
                continue

            remaining = weekly_dose - base_dose * normal_days

            if num_special == 0:
                if abs(remaining) >= FLOAT_TOLERANCE:
                    continue
                special_dose = 0.0
                special_combos: list[Combo] = [()]
            else:
                if remaining < FLOAT_TOLERANCE:
                    continue
                special_dose = remaining / num_special
                if abs(special_dose - base_dose) < FLOAT_TOLERANCE or special_dose <= 0:
                    continue
                if (special_dose > ABSOLUTE_MAX_DAILY_DOSE
                        or special_dose > base_dose * DOSE_MULTIPLIER_LIMIT):
                    continue
                special_combos = find_combinations(special_dose, available_pills, allow_half,
                                                   1, MAX_PILLS_PER_DAY)
                if not special_combos:
                    continue

            new = _cross_schedules(weekly_dose, base_dose, special_dose,
                                   normal_combos, special_combos, stop_days, special_days)
            found += len(new)
            schedules.extend(new)

        logger.debug("pattern=%s stop=%d special=%d: %d schedules",
                     pattern, num_stop, num_special, found)
    return schedules


def _cross_schedules(weekly_dose: float, base_dose: float, special_dose: float,
                     normal_combos: Sequence[Combo], special_combos: Sequence[Combo],
                     stop_days: tuple[int, ...], special_days: tuple[int, ...]) -> list[DosageSchedule]:
    out: list[DosageSchedule] = []
    for normal in normal_combos:
        for special in special_combos:
            week: list[Combo] = []
            for day in range(DAYS_PER_WEEK):
                if day in stop_days:
                    week.append(())
                elif day in special_days:
                    week.append(special)
                else:
                    week.append(normal)
            actual = sum(combo_dose(c) for c in week)
            if abs(actual - weekly_dose) < FLOAT_TOLERANCE:
                out.append(DosageSchedule(
                    kind="non_uniform",
                    combos=tuple(week),
                    weekly_dose_actual=actual,
                    base_dose=base_dose,
                    special_dose=special_dose,
                    stop_days=stop_days,
                    special_days=special_days,
                ))
    return out


def assemble_schedules(weekly_dose: float, available_pills: Sequence[int],
                       allow_half: bool, pattern: DayPattern) -> list[DosageSchedule]:
    """
    Every candidate schedule in generation order: uniform ones first, then
    non-uniform ones configuration by configuration.
    available_pills must be sorted descending.
    """
    _validate_non_negative("weekly_dose", weekly_dose)
    schedules = uniform_schedules(weekly_dose, available_pills, allow_half)
    schedules.extend(non_uniform_schedules(weekly_dose, available_pills, allow_half, pattern))
    return schedules


# --------------------------
# Small input validators
# --------------------------
def _validate_non_negative(name: str, x: float) -> None:
    if x < 0:
        raise ValueError(f"{name} must be >= 0 (got {x}).")
