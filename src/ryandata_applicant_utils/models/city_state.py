"""City/state value object resolved from a ZIP code."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

from ryandata_applicant_utils.models.errors import PACKAGE_NAME, RyanDataApplicantError


class CityState(BaseModel):
    """Immutable city and state pair.

    Both parts are trimmed and must be non-empty; the state is uppercased,
    the city keeps its case. Instances compare and sort by (city, state).
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    city: str
    state: str

    @field_validator("city", "state", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("city", "state")
    @classmethod
    def _require_non_empty(cls, value: str, info: ValidationInfo) -> str:
        if not value:
            raise RyanDataApplicantError(
                "city_state",
                "{field} cannot be null or empty",
                {"package": PACKAGE_NAME, "field": info.field_name.capitalize()},
            )
        return value

    @field_validator("state")
    @classmethod
    def _uppercase_state(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def of(cls, city: str | None, state: str | None) -> CityState:
        """Create a CityState, raising on blank input.

        Raises:
            RyanDataApplicantError: If city or state is missing or blank.
        """
        try:
            return cls(city=city, state=state)
        except ValidationError as exc:
            raise RyanDataApplicantError.from_validation_error(exc) from exc

    @classmethod
    def of_nullable(cls, city: str | None, state: str | None) -> CityState | None:
        """Create a CityState, or return None if either part is missing or blank."""
        if not (city and city.strip()) or not (state and state.strip()):
            return None
        return cls.of(city, state)

    def is_valid(self) -> bool:
        return bool(self.city) and bool(self.state)

    def display_format(self) -> str:
        """Format as "City, ST"."""
        return f"{self.city}, {self.state}"

    def _sort_key(self) -> tuple[str, str]:
        return (self.city, self.state)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CityState):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CityState):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CityState):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CityState):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        return self.display_format()


# Fallback used when a resolver must return a value for an unresolvable ZIP.
UNKNOWN_CITY_STATE = CityState(city="Unknown", state="Unknown")
