"""Job applicant model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ryandata_applicant_utils.models.name import Name
from ryandata_applicant_utils.validation.ssn import format_ssn, normalize_ssn


class JobApplicant(BaseModel):
    """Raw applicant data as collected, before validation.

    Fields are kept as entered (trimmed) so that validators can report on
    them; use the value objects (Ssn, Address) once validation passes.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: Name = Field(default_factory=Name)
    ssn: str = Field(default="", description="SSN as entered, with or without dashes")
    zip_code: str = Field(default="", description="ZIP code as entered")

    @field_validator("ssn", "zip_code", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @classmethod
    def create(
        cls,
        first: str | None = None,
        middle: str | None = None,
        last: str | None = None,
        ssn: str | None = None,
        zip_code: str | None = None,
    ) -> JobApplicant:
        return cls(name=Name.of(first, middle, last), ssn=ssn, zip_code=zip_code)

    @classmethod
    def create_spanish(
        cls,
        primer_nombre: str | None,
        segundo_nombre: str | None,
        primer_apellido: str | None,
        segundo_apellido: str | None,
        ssn: str | None = None,
        zip_code: str | None = None,
    ) -> JobApplicant:
        name = Name.of_spanish(primer_nombre, segundo_nombre, primer_apellido, segundo_apellido)
        return cls(name=name, ssn=ssn, zip_code=zip_code)

    def formatted_ssn(self) -> str:
        """SSN as "DDD-DD-DDDD", or "" when it is not nine digits."""
        return format_ssn(normalize_ssn(self.ssn))
