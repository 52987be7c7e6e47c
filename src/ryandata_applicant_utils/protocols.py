from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import Future
from typing import Protocol, Union, runtime_checkable

from ryandata_applicant_utils.models import CityState, LookupResult

# A function resolving a ZIP code to its city and state. Returning None or a
# Failure means the ZIP code could not be resolved.
CityStateResolver = Callable[[str], Union[CityState, LookupResult[CityState], None]]


@runtime_checkable
class CityStateLookupProtocol(Protocol):
    """Protocol for ZIP code to city/state lookup implementations.

    Implementations must report every expected failure (bad input, network
    problems, unexpected payloads) as a Failure result rather than raising.
    """

    def lookup(self, zip_code: str) -> LookupResult[CityState]:
        """Resolve a single ZIP code.

        Args:
            zip_code: US ZIP code (5 digits or ZIP+4 format).

        Returns:
            Success with the CityState, or Failure with a message.
        """
        ...

    def lookup_async(self, zip_code: str) -> Future[LookupResult[CityState]]:
        """Resolve a single ZIP code without blocking the caller."""
        ...

    def lookup_many(self, zip_codes: Sequence[str]) -> list[LookupResult[CityState]]:
        """Resolve several ZIP codes concurrently.

        Args:
            zip_codes: ZIP codes to resolve.

        Returns:
            One result per input, in input order.
        """
        ...
