from typing import Union

from pydantic import ValidationError

import config
from models.nutrition_input import (
    RawInput,
    ValidatedInput,
    ValidationFailure,
    ValidationIssue,
)


def validate(raw: RawInput) -> Union[ValidatedInput, ValidationFailure]:
    """
    Checks every field of a submission and returns either the typed input or
    all of the problems found, one message per failing field.

    Unparseable, missing and out-of-range values are reported the same way.
    """
    try:
        return ValidatedInput.model_validate(raw.model_dump())
    except ValidationError as e:
        failed_fields = {err["loc"][0] for err in e.errors() if err["loc"]}
        issues = [
            ValidationIssue(message=message)
            for field, message in config.FIELD_ISSUE_MESSAGES.items()
            if field in failed_fields
        ]
        return ValidationFailure(issues=issues)
