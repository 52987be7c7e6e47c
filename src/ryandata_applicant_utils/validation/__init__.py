"""Applicant validation.

Pure rule functions (``validate_ssn``, ``validate_name``) return a
ValidationOutcome and never raise; the validator classes wrap them for use
in a composable pipeline.
"""

from ryandata_applicant_utils.validation.name import validate_name
from ryandata_applicant_utils.validation.ssn import (
    format_ssn,
    normalize_ssn,
    validate_ssn,
    validate_ssn_or_raise,
)
from ryandata_applicant_utils.validation.validators import (
    NameValidator,
    SsnValidator,
    ZipCodeFormatValidator,
    create_applicant_validators,
)

__all__ = [
    "NameValidator",
    "SsnValidator",
    "ZipCodeFormatValidator",
    "create_applicant_validators",
    "format_ssn",
    "normalize_ssn",
    "validate_name",
    "validate_ssn",
    "validate_ssn_or_raise",
]
