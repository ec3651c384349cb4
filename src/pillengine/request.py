"""
Decoding of incoming calculation payloads.

The wire format uses the field names below. Anything pydantic cannot coerce
into them is reported as a RequestDecodeError, never as an empty result.
"""
from typing import Any, List, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError

from .errors import RequestDecodeError
from .types import Request


class CalculationInput(BaseModel):
    """Calculation request as received from a caller."""

    model_config = ConfigDict(extra="ignore", strict=True)

    weekly_dose: float = Field(..., description="Target dose in mg per week")
    allow_half: bool = Field(..., description="Whether pills may be split in half")
    available_pills: List[PositiveInt] = Field(..., description="Pill strengths on hand, mg")
    special_day_pattern: Literal["fri-sun", "mon-wed-fri"] = Field(
        ..., description="Which weekdays may become special or stop days")
    days_until_appointment: int = Field(7, ge=0, description="Days to project pill use over")
    start_day_of_week: int = Field(0, ge=0, le=6, description="0=Mon..6=Sun")

    def to_request(self) -> Request:
        return Request(
            weekly_dose=float(self.weekly_dose),
            allow_half=self.allow_half,
            available_pills=tuple(self.available_pills),
            special_day_pattern=self.special_day_pattern,
            days_until_appointment=self.days_until_appointment,
            start_day_of_week=self.start_day_of_week,
        )


def decode_request(payload: Union[Mapping[str, Any], str, bytes]) -> Request:
    """
    Build a Request from a mapping or a JSON document.
    Raises RequestDecodeError if the payload is malformed.
    """
    try:
        if isinstance(payload, (str, bytes)):
            parsed = CalculationInput.model_validate_json(payload)
        else:
            parsed = CalculationInput.model_validate(payload)
    except ValidationError as e:
        raise RequestDecodeError(f"Invalid calculation request: {e}") from e
    return parsed.to_request()
