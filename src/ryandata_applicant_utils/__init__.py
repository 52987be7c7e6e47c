"""ryandata-applicant-utils: job applicant validation with ZIP code lookup.

This package provides:
- SSN and name validation with legacy outcome codes
- Immutable value objects (Name, Ssn, CityState, Address, JobApplicant)
- A REST lookup client resolving ZIP codes to city and state, with
  concurrent, batch and caching variants
- Composable applicant validators
- Pandas integration

Quick Start:
    >>> from ryandata_applicant_utils import ApplicantService
    >>> service = ApplicantService()
    >>> result = service.process("John", "Q", "Public", "123-45-6789", "90210")
    >>> if result.is_valid:
    ...     print(result.address.display_format())
    ... else:
    ...     print(result.error_messages)

    # Look up a ZIP code
    >>> from ryandata_applicant_utils import CityStateLookupClient, Success
    >>> with CityStateLookupClient() as client:
    ...     match client.lookup("78701"):
    ...         case Success(value=city_state):
    ...             print(city_state)  # "Austin, TX"

    # Build addresses programmatically
    >>> from ryandata_applicant_utils import AddressBuilder
    >>> address = (
    ...     AddressBuilder()
    ...     .with_zip_code("78701")
    ...     .with_lookup(client.resolve)
    ...     .build()
    ... )
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from ryandata_applicant_utils.models import (
    PACKAGE_NAME,
    UNKNOWN_CITY_STATE,
    Address,
    AddressBuilder,
    CityState,
    Failure,
    JobApplicant,
    LookupResult,
    Name,
    RyanDataApplicantError,
    Ssn,
    SsnValidationError,
    Success,
    UnwrappedFailureError,
    ValidationOutcome,
    failure,
    success,
)
from ryandata_applicant_utils.core import ZipCodeNormalizer, ZipCodeResult
from ryandata_applicant_utils.validation import (
    NameValidator,
    SsnValidator,
    ZipCodeFormatValidator,
    create_applicant_validators,
    format_ssn,
    normalize_ssn,
    validate_name,
    validate_ssn,
    validate_ssn_or_raise,
)
from ryandata_applicant_utils.protocols import CityStateLookupProtocol, CityStateResolver
from ryandata_applicant_utils.lookup import (
    CachingCityStateLookupClient,
    CityStateLookupClient,
    LookupClientConfig,
    get_lookup_client,
    lookup_city_state,
)
from ryandata_applicant_utils.service import ApplicantResult, ApplicantService

__version__ = "0.1.0"
__package_name__ = "ryandata-applicant-utils"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "ApplicantResult",
    "ApplicantService",
    # Models
    "Address",
    "AddressBuilder",
    "CityState",
    "JobApplicant",
    "Name",
    "Ssn",
    "UNKNOWN_CITY_STATE",
    "ValidationOutcome",
    # Results
    "Failure",
    "LookupResult",
    "Success",
    "failure",
    "success",
    # Errors
    "PACKAGE_NAME",
    "RyanDataApplicantError",
    "SsnValidationError",
    "UnwrappedFailureError",
    # Validation
    "NameValidator",
    "SsnValidator",
    "ZipCodeFormatValidator",
    "create_applicant_validators",
    "format_ssn",
    "normalize_ssn",
    "validate_name",
    "validate_ssn",
    "validate_ssn_or_raise",
    # ZIP codes and lookup
    "CachingCityStateLookupClient",
    "CityStateLookupClient",
    "CityStateLookupProtocol",
    "CityStateResolver",
    "LookupClientConfig",
    "ZipCodeNormalizer",
    "ZipCodeResult",
    "get_lookup_client",
    "lookup_city_state",
]
