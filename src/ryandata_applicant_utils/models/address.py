"""Address model.

An Address is a ZIP code paired with the city and state it resolves to.
It can only exist with a non-blank ZIP code and a valid CityState.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ryandata_applicant_utils.models.builder import AddressBuilder
from ryandata_applicant_utils.models.city_state import CityState
from ryandata_applicant_utils.models.errors import PACKAGE_NAME, RyanDataApplicantError

if TYPE_CHECKING:
    from ryandata_applicant_utils.protocols import CityStateResolver


class Address(BaseModel):
    """Validated, immutable address.

    Prefer ``Address.builder()`` or the ``of``/``from_zip_code`` factories,
    which raise RyanDataApplicantError. Constructing the model directly
    reports the same problems as a pydantic.ValidationError.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    zip_code: str = Field(description="ZIP code as entered (5 digits or ZIP+4)")
    city_state: CityState = Field(description="City and state resolved for the ZIP code")

    @model_validator(mode="after")
    def _check_components(self) -> Self:
        if not self.zip_code:
            raise RyanDataApplicantError(
                "address_validation",
                "Zip code cannot be null or empty",
                {"package": PACKAGE_NAME, "field": "zip_code"},
            )
        if not self.city_state.is_valid():
            raise RyanDataApplicantError(
                "address_validation",
                "Valid city and state are required",
                {"package": PACKAGE_NAME, "field": "city_state"},
            )
        return self

    @staticmethod
    def builder() -> AddressBuilder:
        return AddressBuilder()

    @classmethod
    def of(cls, city_state: CityState | None, zip_code: str | None) -> Address:
        return AddressBuilder().with_city_state(city_state).with_zip_code(zip_code).build()

    @classmethod
    def of_parts(cls, city: str, state: str, zip_code: str) -> Address:
        return AddressBuilder().with_city_and_state(city, state).with_zip_code(zip_code).build()

    @classmethod
    def from_zip_code(cls, zip_code: str | None, resolver: CityStateResolver) -> Address:
        """Resolve the city and state for ``zip_code`` and build the Address.

        Raises:
            RyanDataApplicantError: If the ZIP code is blank or cannot be resolved
                to a valid CityState.
        """
        return AddressBuilder().with_zip_code(zip_code).with_lookup(resolver).build()

    @property
    def city(self) -> str:
        return self.city_state.city

    @property
    def state(self) -> str:
        return self.city_state.state

    def is_valid(self) -> bool:
        return bool(self.zip_code) and self.city_state.is_valid()

    def display_format(self) -> str:
        """Format as "City, ST 12345"."""
        return f"{self.city_state.display_format()} {self.zip_code}"

    def with_zip_code(self, zip_code: str | None) -> Address:
        return AddressBuilder().with_city_state(self.city_state).with_zip_code(zip_code).build()

    def with_city_state(self, city: str, state: str) -> Address:
        return (
            AddressBuilder()
            .with_city_and_state(city, state)
            .with_zip_code(self.zip_code)
            .build()
        )

    def __str__(self) -> str:
        return self.display_format()
