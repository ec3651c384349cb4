# src/pillengine/day_patterns.py
from .constants import MAX_STOP_AND_SPECIAL_DAYS
from .types import DayPattern

# Mon=0, Wed=2, Fri=4.
# (num_special, num_stop) -> (special days, stop days). A taper convention, not a formula.
MON_WED_FRI_TABLE: dict[tuple[int, int], tuple[tuple[int, ...], tuple[int, ...]]] = {
    (3, 0): ((0, 2, 4), ()),
    (2, 1): ((0, 4), (2,)),
    (2, 0): ((0, 4), ()),
    (1, 2): ((2,), (0, 4)),
    (1, 1): ((0,), (2,)),
    (1, 0): ((2,), ()),
    (0, 3): ((), (0, 2, 4)),
    (0, 2): ((), (0, 4)),
    (0, 1): ((), (2,)),
    (0, 0): ((), ()),
}


def resolve_day_indices(num_stop: int, num_special: int,
                        pattern: DayPattern) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Map stop/special day counts onto weekday indices for a calendar pattern.

    "fri-sun"     : stop days count back from Sunday (6, 5, 4), special days
                    continue backwards from where the stop days end.
    "mon-wed-fri" : looked up in MON_WED_FRI_TABLE.

    Returns (stop_days, special_days), each sorted ascending.
    """
    _validate_counts(num_stop, num_special)

    if pattern == "fri-sun":
        stop = [6 - i for i in range(num_stop)]
        special = [6 - num_stop - i for i in range(num_special)]
    elif pattern == "mon-wed-fri":
        special, stop = MON_WED_FRI_TABLE[(num_special, num_stop)]
    else:
        raise ValueError(f"Unknown special day pattern '{pattern}'.")

    return tuple(sorted(stop)), tuple(sorted(special))


def _validate_counts(num_stop: int, num_special: int) -> None:
    if num_stop < 0 or num_special < 0:
        raise ValueError(f"Day counts must be >= 0 (got stop={num_stop}, special={num_special}).")
    if num_stop + num_special > MAX_STOP_AND_SPECIAL_DAYS:
        raise ValueError(
            f"At most {MAX_STOP_AND_SPECIAL_DAYS} stop + special days per week "
            f"(got stop={num_stop}, special={num_special})."
        )
