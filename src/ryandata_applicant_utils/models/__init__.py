"""Data models for applicant validation and city/state lookup.

Provides:
- ValidationOutcome: field validation outcomes with legacy codes
- CityState, Address, AddressBuilder: ZIP-based address value objects
- Name, Ssn, JobApplicant: applicant value objects
- Success, Failure, LookupResult: lookup result wrapper
- Package error classes
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from ryandata_applicant_utils.models.enums import ValidationOutcome
from ryandata_applicant_utils.models.errors import (
    PACKAGE_NAME,
    RyanDataApplicantError,
    SsnValidationError,
    UnwrappedFailureError,
)
from ryandata_applicant_utils.models.results import (
    Failure,
    LookupResult,
    Success,
    failure,
    success,
)
from ryandata_applicant_utils.models.city_state import UNKNOWN_CITY_STATE, CityState
from ryandata_applicant_utils.models.name import Name
from ryandata_applicant_utils.models.ssn import Ssn
from ryandata_applicant_utils.models.builder import AddressBuilder
from ryandata_applicant_utils.models.address import Address
from ryandata_applicant_utils.models.applicant import JobApplicant

__all__ = [
    # Enums
    "ValidationOutcome",
    # Errors
    "PACKAGE_NAME",
    "RyanDataApplicantError",
    "SsnValidationError",
    "UnwrappedFailureError",
    # Results
    "Failure",
    "LookupResult",
    "Success",
    "failure",
    "success",
    # Models
    "Address",
    "AddressBuilder",
    "CityState",
    "JobApplicant",
    "Name",
    "Ssn",
    "UNKNOWN_CITY_STATE",
]
