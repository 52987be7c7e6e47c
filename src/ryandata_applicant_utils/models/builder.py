"""Address builder for programmatic address construction.

This module provides a fluent builder interface for constructing
Address objects with validation at build time.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from ryandata_applicant_utils.models.city_state import CityState
from ryandata_applicant_utils.models.errors import PACKAGE_NAME, RyanDataApplicantError
from ryandata_applicant_utils.models.results import Failure, Success

if TYPE_CHECKING:
    from ryandata_applicant_utils.models.address import Address
    from ryandata_applicant_utils.protocols import CityStateResolver

logger = logging.getLogger(__name__)


class AddressBuilder:
    """Builder for programmatic Address construction.

    Accumulates a ZIP code and either a CityState or a resolver that maps
    the ZIP code to one. Nothing is validated until ``build()``.

    Example:
        >>> address = (
        ...     AddressBuilder()
        ...     .with_zip_code("78701")
        ...     .with_lookup(client.lookup)
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._zip_code: str | None = None
        self._city_state: CityState | None = None
        self._resolver: CityStateResolver | None = None

    def with_zip_code(self, zip_code: str | None) -> Self:
        """Set the ZIP code."""
        self._zip_code = zip_code
        return self

    def with_city_state(self, city_state: CityState | None) -> Self:
        """Set an already-resolved CityState."""
        self._city_state = city_state
        return self

    def with_city_and_state(self, city: str, state: str) -> Self:
        """Set the city and state directly.

        Raises:
            RyanDataApplicantError: If city or state is blank.
        """
        self._city_state = CityState.of(city, state)
        return self

    def with_lookup(self, resolver: CityStateResolver) -> Self:
        """Set a resolver used at build time when no CityState was given.

        The resolver receives the trimmed ZIP code and may return a CityState,
        None, or a LookupResult wrapping a CityState.
        """
        self._resolver = resolver
        return self

    def _error(self, message: str, **context: object) -> RyanDataApplicantError:
        return RyanDataApplicantError(
            "address_builder",
            message,
            {"package": PACKAGE_NAME, **context},
        )

    def _resolve(self, zip_code: str) -> CityState | None:
        if self._city_state is not None or self._resolver is None:
            return self._city_state

        try:
            resolved = self._resolver(zip_code)
        except RyanDataApplicantError:
            raise
        except Exception as exc:
            raise self._error(
                "Could not resolve city and state: {reason}",
                reason=str(exc),
                zip_code=zip_code,
            ) from exc

        match resolved:
            case Success(value=value):
                resolved = value
            case Failure(message=message):
                logger.debug("City/state resolution failed for %s: %s", zip_code, message)
                raise self._error(
                    "Could not resolve city and state: {reason}",
                    reason=message,
                    zip_code=zip_code,
                )

        if resolved is not None and not isinstance(resolved, CityState):
            raise self._error(
                "Lookup returned an unsupported value: {value_type}",
                value_type=type(resolved).__name__,
            )
        return resolved

    def build(self) -> Address:
        """Build the Address object.

        Resolves the CityState through the resolver if needed, then checks
        every invariant before the Address is created.

        Raises:
            RyanDataApplicantError: If the ZIP code is blank, or the CityState
                is missing, invalid, or could not be resolved.
        """
        from ryandata_applicant_utils.models.address import Address

        zip_code = self._zip_code.strip() if self._zip_code else ""
        if not zip_code:
            raise self._error("Zip code cannot be null or empty", field="zip_code")

        city_state = self._resolve(zip_code)
        if city_state is None or not city_state.is_valid():
            raise self._error("Valid city and state are required", field="city_state")

        return Address(zip_code=zip_code, city_state=city_state)

    def reset(self) -> Self:
        """Reset the builder to empty state."""
        self._zip_code = None
        self._city_state = None
        self._resolver = None
        return self
