"""Social Security Number value object."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ryandata_applicant_utils.models.enums import ValidationOutcome
from ryandata_applicant_utils.models.errors import SsnValidationError
from ryandata_applicant_utils.validation.ssn import (
    format_ssn,
    normalize_ssn,
    validate_ssn,
    validate_ssn_or_raise,
)


class Ssn(BaseModel):
    """Immutable, always-valid SSN holding the nine normalized digits.

    Prefer the factories: ``Ssn.of`` raises SsnValidationError with the
    original input, ``Ssn.of_nullable`` returns None. Direct construction
    validates too, but pydantic reports failures as a ValidationError.
    """

    model_config = ConfigDict(frozen=True)

    digits: str = Field(description="Nine digits, no dashes")

    @field_validator("digits")
    @classmethod
    def _validate_digits(cls, value: str) -> str:
        validate_ssn_or_raise(value)
        return normalize_ssn(value)

    @classmethod
    def of(cls, ssn: str | None) -> Ssn:
        """Create an Ssn from "DDD-DD-DDDD" or nine raw digits.

        Raises:
            SsnValidationError: If the SSN is not valid.
        """
        validate_ssn_or_raise(ssn)
        return cls(digits=normalize_ssn(ssn))

    @classmethod
    def of_nullable(cls, ssn: str | None) -> Ssn | None:
        try:
            return cls.of(ssn)
        except SsnValidationError:
            return None

    @property
    def value(self) -> str:
        return self.digits

    def formatted(self) -> str:
        """Format as "DDD-DD-DDDD"."""
        return format_ssn(self.digits)

    def validate_ssn(self) -> ValidationOutcome:
        return validate_ssn(self.digits)

    def is_valid(self) -> bool:
        return self.validate_ssn().is_valid

    def __str__(self) -> str:
        return self.formatted()
