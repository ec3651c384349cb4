from collections import defaultdict
from typing import Iterable, Sequence

from .types import Combo, DosageSchedule, Pill


def aggregate_combo(pills: Iterable[Pill]) -> Combo:
    """
    Merge repeated (mg, half) entries into one Pill with the summed count,
    sorted ascending by strength.
    """
    counts: dict[tuple[int, bool], int] = defaultdict(int)
    for p in pills:
        counts[(p.mg, p.half)] += p.count
    return tuple(
        Pill(mg=mg, count=count, half=half)
        for (mg, half), count in sorted(counts.items())
    )


def _pill_token(p: Pill) -> str:
    return f"({p.mg},{p.count},{'true' if p.half else 'false'})"


def combo_signature(combo: Sequence[Pill]) -> str:
    """Deterministic text key for a day's pills, independent of entry order."""
    return "|".join(sorted(_pill_token(p) for p in combo))


def schedule_signature(schedule: DosageSchedule) -> str:
    """
    Content key for a schedule: a kind tag followed by its day combos.
    Uniform schedules encode their single combo, non-uniform ones all 7 days.
    """
    days = "/".join(f"[{combo_signature(c)}]" for c in schedule.combos)
    return f"{schedule.kind}:{days}"


def dedupe_schedules(schedules: Iterable[DosageSchedule]) -> list[DosageSchedule]:
    """Drop schedules whose content was already seen; the first one wins."""
    seen: set[str] = set()
    unique: list[DosageSchedule] = []
    for s in schedules:
        key = schedule_signature(s)
        if key in seen:
            continue
        seen.add(key)
        unique.append(s)
    return unique
