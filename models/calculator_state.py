import enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from models.nutrition_estimate import NutritionEstimate
from models.nutrition_input import ValidationIssue


class CalculatorStatus(str, enum.Enum):
    """Outcome of the most recent submission."""

    IDLE = "idle"
    INVALID = "invalid"
    VALID = "valid"


class CalculatorState(BaseModel):
    """
    What the form should currently display. The caller keeps one of these
    and swaps it for the value returned by each new submission.
    """

    status: CalculatorStatus = CalculatorStatus.IDLE
    issues: Optional[List[ValidationIssue]] = None
    estimate: Optional[NutritionEstimate] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_populated_slot(self) -> "CalculatorState":
        has_issues = bool(self.issues)
        has_estimate = self.estimate is not None
        expected = {
            CalculatorStatus.IDLE: (False, False),
            CalculatorStatus.INVALID: (True, False),
            CalculatorStatus.VALID: (False, True),
        }[self.status]
        if (has_issues, has_estimate) != expected:
            raise ValueError(
                f"State '{self.status.value}' does not match its populated fields."
            )
        return self

    @classmethod
    def idle(cls) -> "CalculatorState":
        return cls()

    @classmethod
    def invalid(cls, issues: List[ValidationIssue]) -> "CalculatorState":
        return cls(status=CalculatorStatus.INVALID, issues=list(issues))

    @classmethod
    def valid(cls, estimate: NutritionEstimate) -> "CalculatorState":
        return cls(status=CalculatorStatus.VALID, estimate=estimate)
