# src/pillengine/combos.py
from collections import Counter
from typing import Sequence

from .constants import FLOAT_TOLERANCE, MAX_PILLS_PER_DAY
from .helpers import aggregate_combo, combo_signature
from .types import Combo, Pill


def find_combinations(target_mg: float, available_pills: Sequence[int], allow_half: bool,
                      min_pills: int, max_pills: int = MAX_PILLS_PER_DAY) -> list[Combo]:
    """
    Find every distinct pill combination whose dose equals target_mg
    (within FLOAT_TOLERANCE) using between min_pills and max_pills entries.

    available_pills must already be sorted descending. Search order only
    affects pruning, not which combinations come back.

    At each strength the search either
      - adds a whole pill and stays on that strength (repeats allowed),
      - adds a half pill and moves on (at most one half per strength), or
      - skips the strength.

    Returns combinations in discovery order, each aggregated per
    (mg, half) and sorted ascending by strength.
    """
    if target_mg < FLOAT_TOLERANCE:
        return [()] if min_pills == 0 else []

    raw: list[list[Pill]] = []
    _search(target_mg, available_pills, allow_half, max_pills, 0.0, [], 0, raw)

    seen: set[str] = set()
    results: list[Combo] = []
    for combo in raw:
        if len(combo) < min_pills:
            continue
        halves = Counter(p.mg for p in combo if p.half)
        if any(n > 1 for n in halves.values()):
            continue
        aggregated = aggregate_combo(combo)
        key = combo_signature(aggregated)
        if key in seen:
            continue
        seen.add(key)
        results.append(aggregated)
    return results


def _search(target_mg: float, pills: Sequence[int], allow_half: bool, max_pills: int,
            dose_mg: float, current: list[Pill], idx: int, out: list[list[Pill]]) -> None:
    if len(current) > max_pills or dose_mg > target_mg + FLOAT_TOLERANCE:
        return
    if abs(dose_mg - target_mg) < FLOAT_TOLERANCE:
        out.append(list(current))
        return
    if idx >= len(pills):
        return

    mg = pills[idx]

    current.append(Pill(mg=mg))
    _search(target_mg, pills, allow_half, max_pills, dose_mg + mg, current, idx, out)
    current.pop()

    if allow_half:
        current.append(Pill(mg=mg, half=True))
        _search(target_mg, pills, allow_half, max_pills, dose_mg + mg / 2.0, current, idx + 1, out)
        current.pop()

    _search(target_mg, pills, allow_half, max_pills, dose_mg, current, idx + 1, out)
