from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from abstract_validation_base import ValidationResult

from ryandata_applicant_utils.models import Address, JobApplicant, RyanDataApplicantError
from ryandata_applicant_utils.validation.validators import create_applicant_validators

if TYPE_CHECKING:
    from abstract_validation_base import CompositeValidator

    from ryandata_applicant_utils.protocols import CityStateLookupProtocol

logger = logging.getLogger(__name__)


@dataclass
class ApplicantResult:
    """Outcome of processing one job applicant.

    Attributes:
        applicant: The applicant as submitted.
        validation: Errors reported by the validator pipeline.
        address: Address resolved from the ZIP code, when the lookup succeeded.
        lookup_error: Why the address could not be resolved, if it was attempted.
    """

    applicant: JobApplicant
    validation: ValidationResult
    address: Address | None = None
    lookup_error: str | None = None

    @property
    def is_valid(self) -> bool:
        """True when validation passed and no lookup error occurred."""
        return self.validation.is_valid and self.lookup_error is None

    @property
    def error_messages(self) -> list[str]:
        messages = [f"{error.field}: {error.message}" for error in self.validation.errors]
        if self.lookup_error is not None:
            messages.append(f"zip_code: {self.lookup_error}")
        return messages


class ApplicantService:
    """High-level facade for applicant validation.

    Runs the applicant validator pipeline and, for applicants that pass,
    resolves the ZIP code to an Address through a lookup client.

    Example:
        >>> service = ApplicantService()
        >>> result = service.process("John", "Q", "Public", "123-45-6789", "90210")
        >>> result.address.display_format()  # "Beverly Hills, CA 90210"
    """

    def __init__(
        self,
        lookup_client: CityStateLookupProtocol | None = None,
        validator: CompositeValidator[JobApplicant] | None = None,
    ) -> None:
        """Initialize the applicant service.

        Args:
            lookup_client: Lookup implementation. Defaults to the shared client.
            validator: Validator pipeline. Defaults to create_applicant_validators().
        """
        self._lookup_client = lookup_client
        self._validator = validator or create_applicant_validators()

    @property
    def lookup_client(self) -> CityStateLookupProtocol:
        """Get the lookup client, creating the shared default on first use."""
        if self._lookup_client is None:
            from ryandata_applicant_utils.lookup import get_lookup_client

            self._lookup_client = get_lookup_client()
        return self._lookup_client

    @property
    def validator(self) -> CompositeValidator[JobApplicant]:
        """Get the validator pipeline."""
        return self._validator

    def validate(self, applicant: JobApplicant) -> ValidationResult:
        """Run the validator pipeline without any network access."""
        return self._validator.validate(applicant)

    def resolve_address(self, zip_code: str) -> tuple[Address | None, str | None]:
        """Look up a ZIP code and build the matching Address.

        Returns:
            (address, None) on success, (None, reason) otherwise.
        """
        result = self.lookup_client.lookup(zip_code)
        if result.is_failure:
            return None, result.error_message

        try:
            return Address.of(result.get_value(), zip_code), None
        except RyanDataApplicantError as exc:
            return None, exc.message()

    def process_applicant(
        self,
        applicant: JobApplicant,
        *,
        resolve: bool = True,
    ) -> ApplicantResult:
        """Validate an applicant and resolve its address when validation passes.

        Args:
            applicant: Applicant to process.
            resolve: If False, skip the ZIP code lookup.
        """
        validation = self.validate(applicant)
        result = ApplicantResult(applicant=applicant, validation=validation)
        if not validation.is_valid:
            logger.info(
                "Applicant %s failed validation with %d error(s)",
                applicant.name.display_name(),
                len(validation.errors),
            )
            return result
        if not resolve:
            return result

        result.address, result.lookup_error = self.resolve_address(applicant.zip_code)
        return result

    def process(
        self,
        first: str | None,
        middle: str | None,
        last: str | None,
        ssn: str | None,
        zip_code: str | None,
    ) -> ApplicantResult:
        """Create an applicant from raw fields and process it."""
        applicant = JobApplicant.create(first, middle, last, ssn, zip_code)
        return self.process_applicant(applicant)
