# main.py
import logging
from typing import Any, Mapping

import config
from models.calculator_state import CalculatorState
from models.nutrition_input import RawInput, ValidationFailure, ValidationIssue
from services.nutrition_estimator import estimate
from services.validator import validate

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)


def submit(form: Mapping[str, Any]) -> CalculatorState:
    """
    Runs one form submission through validation and estimation.

    The returned state replaces whatever the caller was showing before.
    """
    try:
        raw = RawInput.from_form(form)
        result = validate(raw)
        if isinstance(result, ValidationFailure):
            logging.warning(
                f"Submission rejected with {len(result.issues)} validation issue(s)."
            )
            return CalculatorState.invalid(result.issues)

        nutrition = estimate(result)
        logging.info(
            f"Estimated {nutrition.calories:.0f} kcal for activity level '{result.activity.value}'."
        )
        return CalculatorState.valid(nutrition)
    except Exception as e:
        logging.error(
            f"An unexpected error occurred while processing a submission: {e}",
            exc_info=True,
        )
        return CalculatorState.invalid(
            [ValidationIssue(message=config.UNEXPECTED_ERROR_MESSAGE)]
        )
