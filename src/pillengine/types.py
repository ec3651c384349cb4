# src/pillengine/types.py
from dataclasses import dataclass, asdict
from typing import Literal, Sequence

# Doses are in MILLIGRAMS, weekdays are indices with 0 = Monday ... 6 = Sunday.
ScheduleKind = Literal["uniform", "non_uniform"]
DayPattern = Literal["fri-sun", "mon-wed-fri"]


@dataclass(frozen=True)
class Pill:
    """
    One entry of a day's pill combination.

    mg    : nominal strength of a single whole pill
    count : how many pills (or half pills) of that strength
    half  : True when each unit is a pill split in half
    """
    mg: int
    count: int = 1
    half: bool = False

    @property
    def dose_mg(self) -> float:
        return self.mg * self.count * (0.5 if self.half else 1.0)


# A day's pills, aggregated per (mg, half) and sorted ascending by mg.
Combo = tuple[Pill, ...]


def combo_dose(combo: Sequence[Pill]) -> float:
    """Total milligrams delivered by one day's combination."""
    return sum(p.dose_mg for p in combo)


@dataclass(frozen=True)
class ComplexityMetrics:
    """
    Ranking inputs for a schedule, derived once from its content.

    priority             : 0 for uniform, 1 for non-uniform
    half_pill_complexity : number of distinct strengths that are ever split
    pill_color_count     : number of distinct strengths used at all
    total_pill_objects   : pill units handed out over the 7 days
    """
    priority: int
    half_pill_complexity: int
    pill_color_count: int
    total_pill_objects: int


@dataclass(frozen=True)
class DosageSchedule:
    """
    One candidate weekly plan.

    kind               : "uniform" (same combo every day) or "non_uniform"
    combos             : one combo for uniform, seven (Mon..Sun) for non_uniform
    weekly_dose_actual : summed dose over the week
    base_dose          : dose on normal days (non_uniform only)
    special_dose       : dose on special days (0 when there are none)
    stop_days          : ascending weekday indices with no dose
    special_days       : ascending weekday indices with the special dose
    complexity         : filled in by the scorer; None until then
    """
    kind: ScheduleKind
    combos: tuple[Combo, ...]
    weekly_dose_actual: float
    base_dose: float = 0.0
    special_dose: float = 0.0
    stop_days: tuple[int, ...] = ()
    special_days: tuple[int, ...] = ()
    complexity: ComplexityMetrics | None = None

    def day(self, day_index: int) -> Combo:
        """Combination taken on weekday `day_index`."""
        if self.kind == "uniform":
            return self.combos[0]
        return self.combos[day_index]

    def week(self) -> tuple[Combo, ...]:
        """All seven effective days, Monday first."""
        if self.kind == "uniform":
            return self.combos * 7
        return self.combos


@dataclass(frozen=True)
class Request:
    """
    A decoded calculation request.

    weekly_dose            : target mg per week
    allow_half             : whether pills may be split
    available_pills        : pill strengths on hand (mg)
    special_day_pattern    : "fri-sun" or "mon-wed-fri"
    days_until_appointment : days to project pill consumption over
    start_day_of_week      : weekday of the first projected day (0 = Monday)
    """
    weekly_dose: float
    allow_half: bool
    available_pills: tuple[int, ...]
    special_day_pattern: DayPattern = "fri-sun"
    days_until_appointment: int = 7
    start_day_of_week: int = 0


# --------------------------
# Output records
# --------------------------
@dataclass(frozen=True)
class DaySchedule:
    day_index: int
    total_dose: float
    pills: Combo
    is_stop_day: bool
    is_special_day: bool


@dataclass(frozen=True)
class PillLineSummary:
    """
    Tablets of one strength to hand out until the appointment.

    dispensed_count : whole tablets to dispense (an odd leftover half counts as one)
    actual_used     : tablets actually consumed, halves counted as 0.5
    """
    mg: int
    dispensed_count: int
    actual_used: float


@dataclass(frozen=True)
class TotalPillsSummary:
    days: int
    pill_lines: tuple[PillLineSummary, ...]


@dataclass(frozen=True)
class RegimenOption:
    """What a presentation layer needs to show one ranked schedule."""
    description: str
    weekly_dose_actual: float
    weekly_schedule: tuple[DaySchedule, ...]
    stop_days: tuple[int, ...]
    special_days: tuple[int, ...]
    total_pills: TotalPillsSummary

    def to_dict(self) -> dict:
        return asdict(self)
