"""In-memory caching variant of the city/state lookup client."""

from __future__ import annotations

import logging
import threading
from typing import Any

from ryandata_applicant_utils.lookup.client import CityStateLookupClient
from ryandata_applicant_utils.models import (
    UNKNOWN_CITY_STATE,
    CityState,
    LookupResult,
    success,
)

logger = logging.getLogger(__name__)


class CachingCityStateLookupClient(CityStateLookupClient):
    """Lookup client that remembers resolved ZIP codes.

    Entries are keyed by the 5-digit ZIP code and live as long as this
    instance; there is no eviction and no expiry. Successful lookups are
    cached, and ``resolve`` also caches the UNKNOWN_CITY_STATE fallback so a
    failing ZIP code is not requested again. Two threads missing the same key
    at once may both call the service; the first stored value wins.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._cache: dict[str, CityState] = {}
        self._cache_lock = threading.Lock()

    @property
    def cache_size(self) -> int:
        with self._cache_lock:
            return len(self._cache)

    def clear_cache(self) -> None:
        with self._cache_lock:
            self._cache.clear()

    def _cache_key(self, zip_code: str) -> str | None:
        parsed = self._normalizer.parse(zip_code)
        return parsed.zip5 if parsed.is_valid else None

    def _cached(self, key: str) -> CityState | None:
        with self._cache_lock:
            return self._cache.get(key)

    def _store(self, key: str, city_state: CityState) -> CityState:
        with self._cache_lock:
            return self._cache.setdefault(key, city_state)

    def lookup(self, zip_code: str) -> LookupResult[CityState]:
        key = self._cache_key(zip_code)
        if key is None:
            return super().lookup(zip_code)

        cached = self._cached(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return success(cached)

        result = super().lookup(zip_code)
        return result.map(lambda city_state: self._store(key, city_state))

    def resolve(self, zip_code: str) -> CityState:
        key = self._cache_key(zip_code)
        if key is None:
            return UNKNOWN_CITY_STATE

        city_state = self.lookup(zip_code).get_value_or_default(UNKNOWN_CITY_STATE)
        return self._store(key, city_state)
