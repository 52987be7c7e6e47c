from __future__ import annotations

from ryandata_applicant_utils.lookup.cache import CachingCityStateLookupClient
from ryandata_applicant_utils.lookup.client import (
    INVALID_RESPONSE_MESSAGE,
    INVALID_ZIP_CODE_MESSAGE,
    CityStateLookupClient,
    get_lookup_client,
    lookup_city_state,
    parse_city_state_payload,
)
from ryandata_applicant_utils.lookup.config import LookupClientConfig

__all__ = [
    "CachingCityStateLookupClient",
    "CityStateLookupClient",
    "INVALID_RESPONSE_MESSAGE",
    "INVALID_ZIP_CODE_MESSAGE",
    "LookupClientConfig",
    "get_lookup_client",
    "lookup_city_state",
    "parse_city_state_payload",
]
