from __future__ import annotations

from typing import TYPE_CHECKING

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from ryandata_applicant_utils.core.zip_code import ZipCodeNormalizer
from ryandata_applicant_utils.validation.name import validate_name
from ryandata_applicant_utils.validation.ssn import validate_ssn

if TYPE_CHECKING:
    from ryandata_applicant_utils.models import JobApplicant


class NameValidator(BaseValidator["JobApplicant"]):
    """Validates that the applicant has both a first and a last name."""

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "name"

    def validate(self, applicant: JobApplicant) -> ValidationResult:
        """Validate the applicant's name.

        Args:
            applicant: Applicant to validate.

        Returns:
            ValidationResult with any name errors.
        """
        result = ValidationResult(is_valid=True)
        applicant_name = applicant.name
        outcome = validate_name(applicant_name.first, applicant_name.middle, applicant_name.last)
        if not outcome.is_valid:
            result.add_error("name", outcome.message, applicant_name.full_name())
        return result


class SsnValidator(BaseValidator["JobApplicant"]):
    """Validates the applicant's SSN against the issuance rules."""

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "ssn"

    def validate(self, applicant: JobApplicant) -> ValidationResult:
        """Validate the applicant's SSN.

        Args:
            applicant: Applicant to validate.

        Returns:
            ValidationResult with any SSN errors.
        """
        result = ValidationResult(is_valid=True)
        outcome = validate_ssn(applicant.ssn)
        if not outcome.is_valid:
            result.add_error("ssn", outcome.message, applicant.ssn)
        return result


class ZipCodeFormatValidator(BaseValidator["JobApplicant"]):
    """Validates the ZIP code format (5 digits or ZIP+4).

    This is a fast format validator that doesn't require
    external lookups - it only checks the format is correct.
    """

    def __init__(self, normalizer: ZipCodeNormalizer | None = None) -> None:
        self._normalizer = normalizer or ZipCodeNormalizer()

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "zip_code_format"

    def validate(self, applicant: JobApplicant) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        parsed = self._normalizer.parse(applicant.zip_code)
        if not parsed.is_valid:
            result.add_error("zip_code", parsed.error or "Invalid zip code", applicant.zip_code)
        return result


def create_applicant_validators(
    include_zip_format: bool = True,
) -> CompositeValidator[JobApplicant]:
    """Create the default applicant validation pipeline.

    Args:
        include_zip_format: If True, include the ZIP code format validator.

    Returns:
        CompositeValidator running the name, SSN and ZIP validators.
    """
    builder: ValidatorPipelineBuilder[JobApplicant] = ValidatorPipelineBuilder(
        "applicant_validation"
    )

    builder.add(NameValidator())
    builder.add(SsnValidator())
    if include_zip_format:
        builder.add(ZipCodeFormatValidator())

    return builder.build()
