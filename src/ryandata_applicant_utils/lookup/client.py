from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Optional

import httpx

from ryandata_applicant_utils.core.zip_code import ZipCodeNormalizer
from ryandata_applicant_utils.lookup.config import LookupClientConfig
from ryandata_applicant_utils.models import (
    UNKNOWN_CITY_STATE,
    CityState,
    LookupResult,
    failure,
    success,
)

logger = logging.getLogger(__name__)

INVALID_ZIP_CODE_MESSAGE = "invalid zip code format"
INVALID_RESPONSE_MESSAGE = "invalid response format"


def parse_city_state_payload(payload: Any) -> LookupResult[CityState]:
    """Reduce a decoded lookup response to a CityState.

    Expects ``{"places": [{"place name": ..., "state abbreviation": ...}]}``
    and only looks at the first place.

    Returns:
        Success with the CityState, or Failure("invalid response format") for
        any other shape.
    """
    if not isinstance(payload, dict):
        return failure(INVALID_RESPONSE_MESSAGE)

    places = payload.get("places")
    if not isinstance(places, list) or not places or not isinstance(places[0], dict):
        return failure(INVALID_RESPONSE_MESSAGE)

    place = places[0]
    city = place.get("place name")
    state = place.get("state abbreviation")
    if not isinstance(city, str) or not isinstance(state, str):
        return failure(INVALID_RESPONSE_MESSAGE)
    if not city.strip() or not state.strip():
        return failure(INVALID_RESPONSE_MESSAGE)

    return success(CityState.of(city, state))


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def _decode_json(response: httpx.Response) -> LookupResult[Any]:
    try:
        payload = response.json()
    except ValueError:
        return failure(INVALID_RESPONSE_MESSAGE)
    if payload is None:
        return failure(INVALID_RESPONSE_MESSAGE)
    return success(payload)


class CityStateLookupClient:
    """REST client resolving US ZIP codes to city and state.

    Every expected problem (malformed ZIP code, transport errors, non-2xx
    responses, unexpected payloads) comes back as a Failure; ``lookup``
    never raises.
    """

    def __init__(
        self,
        config: Optional[LookupClientConfig] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        self._config = config or LookupClientConfig()
        self.base_url = base_url or self._config.base_url
        self._timeout = self._config.timeout if timeout is None else timeout
        self._normalizer = ZipCodeNormalizer()

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=self._timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "User-Agent": self._config.user_agent,
            },
        )

        self._executor = executor
        self._owns_executor = executor is None
        self._executor_lock = threading.Lock()

    def __enter__(self) -> CityStateLookupClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client and any worker pool this client created."""
        self._client.close()
        with self._executor_lock:
            if self._owns_executor and self._executor is not None:
                self._executor.shutdown(wait=False)
                self._executor = None

    def _get_executor(self) -> Executor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(thread_name_prefix="CityStateLookup")
            return self._executor

    def _request(self, zip5: str) -> LookupResult[httpx.Response]:
        path = f"/{self._config.country}/{zip5}"
        try:
            response = self._client.get(path)
        except httpx.HTTPError as exc:
            return failure(f"network error during lookup: {_describe(exc)}")
        except Exception as exc:
            return failure(f"unexpected error during lookup: {_describe(exc)}")

        if not response.is_success:
            return failure(f"HTTP request failed with status {response.status_code}")
        return success(response)

    def lookup(self, zip_code: str) -> LookupResult[CityState]:
        """Resolve a ZIP code to its city and state.

        Only the first five digits are sent to the service.

        Args:
            zip_code: "12345" or "12345-6789", surrounding whitespace allowed.

        Returns:
            Success with the CityState, or Failure with a message.
        """
        parsed = self._normalizer.parse(zip_code)
        if not parsed.is_valid or parsed.zip5 is None:
            logger.debug("Rejected zip code before lookup: %r", zip_code)
            return failure(INVALID_ZIP_CODE_MESSAGE)

        result = (
            self._request(parsed.zip5)
            .flat_map(_decode_json)
            .flat_map(parse_city_state_payload)
        )

        result.if_success(
            lambda city_state: logger.debug("Resolved %s to %s", parsed.zip5, city_state)
        ).if_failure(
            lambda message: logger.warning("Lookup failed for %s: %s", parsed.zip5, message)
        )
        return result

    def lookup_async(self, zip_code: str) -> Future[LookupResult[CityState]]:
        """Run ``lookup`` on the client's worker pool.

        Waiting on the returned future is the only blocking point; abandoning
        the future does not cancel the underlying request.

        The default pool uses ThreadPoolExecutor's default size, so excess
        submissions queue rather than fail. Inject an executor to size it.
        """
        return self._get_executor().submit(self.lookup, zip_code)

    def lookup_many(self, zip_codes: Sequence[str]) -> list[LookupResult[CityState]]:
        """Resolve several ZIP codes concurrently.

        Returns:
            One result per input, in input order. A failed lookup only affects
            its own slot.
        """
        futures = [self.lookup_async(zip_code) for zip_code in zip_codes]

        results: list[LookupResult[CityState]] = []
        for future in futures:
            try:
                results.append(future.result())
            except Exception as exc:
                results.append(failure(exc))
        return results

    def resolve(self, zip_code: str) -> CityState:
        """Resolve a ZIP code, falling back to UNKNOWN_CITY_STATE on failure.

        Suitable as the resolver of an AddressBuilder.
        """
        return self.lookup(zip_code).get_value_or_default(UNKNOWN_CITY_STATE)


_default_lookup_client: Optional[CityStateLookupClient] = None


def get_lookup_client(
    *,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> CityStateLookupClient:
    """Get the shared default lookup client.

    Passing options replaces the shared client; the previous one is closed.
    """
    global _default_lookup_client

    if _default_lookup_client is None or base_url is not None or timeout is not None:
        if _default_lookup_client is not None:
            _default_lookup_client.close()
        _default_lookup_client = CityStateLookupClient(base_url=base_url, timeout=timeout)
    return _default_lookup_client


def lookup_city_state(
    zip_code: str,
    *,
    client: Optional[CityStateLookupClient] = None,
) -> LookupResult[CityState]:
    """Convenience wrapper resolving a ZIP code with the default client."""
    lookup_client = client or get_lookup_client()
    return lookup_client.lookup(zip_code)
