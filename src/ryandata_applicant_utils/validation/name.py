from __future__ import annotations

from ryandata_applicant_utils.models.enums import ValidationOutcome


def validate_name(first: str | None, middle: str | None, last: str | None) -> ValidationOutcome:
    """Check that both first and last name are present.

    The middle name is optional and never affects the outcome.

    Returns:
        MISSING_REQUIRED_FIELD when both are empty, INVALID_FORMAT when only
        one is present, VALID otherwise.
    """
    has_first = bool(first and first.strip())
    has_last = bool(last and last.strip())

    if not has_first and not has_last:
        return ValidationOutcome.MISSING_REQUIRED_FIELD
    if not (has_first and has_last):
        return ValidationOutcome.INVALID_FORMAT
    return ValidationOutcome.VALID
