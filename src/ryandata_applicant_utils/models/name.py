"""Applicant name value object."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ryandata_applicant_utils.core.name_formatter import (
    format_display_name,
    format_full_name,
    format_initials,
    format_last_name_first,
    format_spanish_last_name,
)
from ryandata_applicant_utils.models.enums import ValidationOutcome
from ryandata_applicant_utils.validation.name import validate_name


class Name(BaseModel):
    """Immutable three-part name.

    Missing parts default to "" and every part is trimmed. A Name may be
    constructed in an invalid state; use ``validate_name()`` to classify it.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    first: str = Field(default="", description="Given name")
    middle: str = Field(default="", description="Middle name, optional")
    last: str = Field(default="", description="Surname")

    @field_validator("first", "middle", "last", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @classmethod
    def of(
        cls,
        first: str | None = None,
        middle: str | None = None,
        last: str | None = None,
    ) -> Name:
        return cls(first=first, middle=middle, last=last)

    @classmethod
    def of_spanish(
        cls,
        primer_nombre: str | None,
        segundo_nombre: str | None,
        primer_apellido: str | None,
        segundo_apellido: str | None,
    ) -> Name:
        """Build a Name from Spanish naming convention.

        The two given names fill the first and middle slots; both surnames
        are combined into the last name.
        """
        return cls(
            first=primer_nombre,
            middle=segundo_nombre,
            last=format_spanish_last_name(primer_apellido, segundo_apellido),
        )

    def full_name(self) -> str:
        return format_full_name(self.first, self.middle, self.last)

    def last_name_first(self) -> str:
        return format_last_name_first(self.first, self.middle, self.last)

    def display_name(self) -> str:
        return format_display_name(self.first, self.middle, self.last)

    def initials(self) -> str:
        return format_initials(self.first, self.middle, self.last)

    def validate_name(self) -> ValidationOutcome:
        return validate_name(self.first, self.middle, self.last)

    def is_valid(self) -> bool:
        return self.validate_name().is_valid

    def with_first_name(self, first: str | None) -> Name:
        return Name(first=first, middle=self.middle, last=self.last)

    def with_middle_name(self, middle: str | None) -> Name:
        return Name(first=self.first, middle=middle, last=self.last)

    def with_last_name(self, last: str | None) -> Name:
        return Name(first=self.first, middle=self.middle, last=last)
