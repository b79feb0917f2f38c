from enum import Enum
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very-active"

    @property
    def label(self) -> str:
        """Human-readable name shown in the activity selector."""
        return self.value.replace("-", " ").title()


class RawInput(BaseModel):
    """
    Field values exactly as submitted by the form, before any parsing.
    Nothing here is trusted; the validator decides what is usable.
    """

    height: Optional[Any] = None
    weight: Optional[Any] = None
    age: Optional[Any] = None
    activity: Optional[Any] = None

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "RawInput":
        return cls(
            height=form.get("height"),
            weight=form.get("weight"),
            age=form.get("age"),
            activity=form.get("activity"),
        )


class ValidatedInput(BaseModel):
    """Parsed and constrained metrics. Only the validator should build these."""

    height: float = Field(..., gt=0, description="Height in centimetres.")
    weight: float = Field(..., gt=0, description="Weight in kilograms.")
    age: float = Field(..., gt=0, description="Age in years.")
    activity: ActivityLevel

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class ValidationIssue(BaseModel):
    message: str

    model_config = ConfigDict(frozen=True)


class ValidationFailure(BaseModel):
    """Every field-level problem found in a single submission, in field order."""

    issues: List[ValidationIssue] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)
