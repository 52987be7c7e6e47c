"""httpx MockTransport handlers imitating the ZIP lookup service."""

from __future__ import annotations

from collections.abc import Callable

import httpx

# Responses keyed by ZIP5
KNOWN_PLACES: dict[str, tuple[str, str]] = {
    "78701": ("Austin", "TX"),
    "90210": ("Beverly Hills", "CA"),
    "10001": ("New York", "NY"),
    "02101": ("Boston", "MA"),
}


def place_payload(zip5: str, city: str, state: str) -> dict:
    """Build a body shaped like the zippopotam.us response."""
    return {
        "post code": zip5,
        "country": "United States",
        "country abbreviation": "US",
        "places": [
            {
                "place name": city,
                "longitude": "-97.7426",
                "state": "Texas",
                "state abbreviation": state,
                "latitude": "30.2713",
            }
        ],
    }


def known_places_handler(request: httpx.Request) -> httpx.Response:
    """Serve KNOWN_PLACES and answer 404 with an empty object for anything else."""
    zip5 = request.url.path.rsplit("/", 1)[-1]
    if zip5 in KNOWN_PLACES:
        city, state = KNOWN_PLACES[zip5]
        return httpx.Response(200, json=place_payload(zip5, city, state))
    return httpx.Response(404, json={})


class RecordingHandler:
    """MockTransport handler that records request paths."""

    def __init__(
        self,
        handler: Callable[[httpx.Request], httpx.Response] = known_places_handler,
    ) -> None:
        self._handler = handler
        self.paths: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.paths.append(request.url.path)
        return self._handler(request)
