# src/pillengine/suggest.py
import logging
from typing import Any, Mapping, Union

from .dosing import assemble_schedules
from .helpers import dedupe_schedules
from .metrics import with_complexity
from .ranking import rank_schedules
from .report import build_option
from .request import decode_request
from .types import DosageSchedule, RegimenOption, Request

logger = logging.getLogger(__name__)


def suggest_regimens(request: Request) -> list[DosageSchedule]:
    """
    Ranked candidate schedules for a request, simplest first (at most 30).
    A negative weekly dose yields no schedules.
    """
    if request.weekly_dose < 0:
        return []

    pills = sorted(set(request.available_pills), reverse=True)
    candidates = assemble_schedules(request.weekly_dose, pills, request.allow_half,
                                    request.special_day_pattern)
    unique = dedupe_schedules(candidates)
    ranked = rank_schedules(with_complexity(s) for s in unique)
    logger.debug("weekly_dose=%s: %d candidates, %d unique, %d returned",
                 request.weekly_dose, len(candidates), len(unique), len(ranked))
    return ranked


def run(payload: Union[Mapping[str, Any], str, bytes]) -> list[RegimenOption]:
    """
    High-level wrapper: decode a raw payload, search and build output records.
    Raises RequestDecodeError for malformed payloads.
    """
    request = decode_request(payload)
    return [build_option(s, request) for s in suggest_regimens(request)]
