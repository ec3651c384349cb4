# src/pillengine/report.py
from .constants import DAY_ABBREVIATIONS, DAYS_PER_WEEK, FLOAT_TOLERANCE
from .metrics import pills_needed
from .types import (
    DaySchedule, DosageSchedule, RegimenOption, Request, TotalPillsSummary, combo_dose,
)


def describe_schedule(schedule: DosageSchedule) -> str:
    """
    One-line summary, e.g.
      "Every day 5.0 mg"
      "Normal days 4.0 mg, Special days 6.0 mg (Fri), Stop 1 days (Sun)"
    """
    if schedule.kind == "uniform":
        daily = combo_dose(schedule.combos[0])
        if daily > FLOAT_TOLERANCE:
            return f"Every day {daily:.1f} mg"
        return "Stop medication"

    parts: list[str] = []
    if schedule.base_dose > FLOAT_TOLERANCE:
        parts.append(f"Normal days {schedule.base_dose:.1f} mg")
    if schedule.special_days:
        names = ", ".join(DAY_ABBREVIATIONS[i] for i in schedule.special_days)
        parts.append(f"Special days {schedule.special_dose:.1f} mg ({names})")
    if schedule.stop_days:
        names = ", ".join(DAY_ABBREVIATIONS[i] for i in schedule.stop_days)
        parts.append(f"Stop {len(schedule.stop_days)} days ({names})")
    return ", ".join(parts)


def day_schedules(schedule: DosageSchedule) -> tuple[DaySchedule, ...]:
    """Per-day breakdown, Monday first."""
    days = []
    for i in range(DAYS_PER_WEEK):
        combo = schedule.day(i)
        days.append(DaySchedule(
            day_index=i,
            total_dose=combo_dose(combo),
            pills=combo,
            is_stop_day=i in schedule.stop_days,
            is_special_day=i in schedule.special_days,
        ))
    return tuple(days)


def build_option(schedule: DosageSchedule, request: Request) -> RegimenOption:
    total = TotalPillsSummary(
        days=request.days_until_appointment,
        pill_lines=pills_needed(schedule, request.days_until_appointment,
                                request.start_day_of_week),
    )
    return RegimenOption(
        description=describe_schedule(schedule),
        weekly_dose_actual=schedule.weekly_dose_actual,
        weekly_schedule=day_schedules(schedule),
        stop_days=schedule.stop_days,
        special_days=schedule.special_days,
        total_pills=total,
    )
