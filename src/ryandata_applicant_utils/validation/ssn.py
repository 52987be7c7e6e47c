"""Social Security Number validation rules.

The rules encode the pre-2011 issuance scheme: area numbers 000, 666 and
9xx were never issued, serial 0000 was never issued, and a few numbers that
circulated in sample material are permanently reserved.
"""

from __future__ import annotations

import re

from ryandata_applicant_utils.models.enums import ValidationOutcome
from ryandata_applicant_utils.models.errors import SsnValidationError

SSN_FORMAT_PATTERN = re.compile(r"\d{3}-\d{2}-\d{4}|\d{9}", re.ASCII)
DIGITS_ONLY_PATTERN = re.compile(r"\d{9}", re.ASCII)

RESERVED_SSNS: frozenset[str] = frozenset({"219099999", "078051120"})
INVALID_AREA_NUMBERS: frozenset[str] = frozenset({"000", "666"})


def validate_ssn(ssn: str | None) -> ValidationOutcome:
    """Classify an SSN, with or without dashes.

    Checks run in order and the first failing check decides the outcome.
    Never raises.

    Args:
        ssn: SSN as "DDD-DD-DDDD" or nine raw digits.

    Returns:
        ValidationOutcome for the input.
    """
    if ssn is None or not ssn.strip():
        return ValidationOutcome.MISSING_REQUIRED_FIELD

    if not SSN_FORMAT_PATTERN.fullmatch(ssn):
        return ValidationOutcome.INVALID_FORMAT

    digits = ssn.replace("-", "")
    if not DIGITS_ONLY_PATTERN.fullmatch(digits):
        return ValidationOutcome.INVALID_FORMAT

    area_number = digits[:3]
    if area_number in INVALID_AREA_NUMBERS or area_number.startswith("9"):
        return ValidationOutcome.INVALID_AREA_NUMBER

    if digits[5:] == "0000":
        return ValidationOutcome.INVALID_SERIAL_NUMBER

    if digits in RESERVED_SSNS:
        return ValidationOutcome.SPECIAL_CASE_INVALID

    return ValidationOutcome.VALID


def validate_ssn_or_raise(ssn: str | None) -> None:
    """Validate an SSN, raising instead of returning the outcome.

    Raises:
        SsnValidationError: If the SSN is not valid. The error carries the
            outcome and the original input.
    """
    outcome = validate_ssn(ssn)
    if not outcome.is_valid:
        raise SsnValidationError.from_outcome(outcome, ssn)


def normalize_ssn(ssn: str | None) -> str:
    """Strip dashes, returning the nine digits or "" if the result is not nine digits."""
    if ssn is None:
        return ""
    digits = ssn.replace("-", "")
    return digits if DIGITS_ONLY_PATTERN.fullmatch(digits) else ""


def format_ssn(ssn: str | None) -> str:
    """Format nine characters as "DDD-DD-DDDD"; anything else is returned unchanged."""
    if ssn is None:
        return ""
    if len(ssn) != 9:
        return ssn
    return f"{ssn[:3]}-{ssn[3:5]}-{ssn[5:]}"
