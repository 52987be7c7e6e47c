"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest
from hypothesis import Verbosity, settings

from ryandata_applicant_utils.lookup import CachingCityStateLookupClient, CityStateLookupClient
from tests.http_stubs import RecordingHandler

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def recorder() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def lookup_client(recorder: RecordingHandler) -> Iterator[CityStateLookupClient]:
    client = CityStateLookupClient(
        base_url="http://test",
        transport=httpx.MockTransport(recorder),
    )
    yield client
    client.close()


@pytest.fixture
def caching_client(recorder: RecordingHandler) -> Iterator[CachingCityStateLookupClient]:
    client = CachingCityStateLookupClient(
        base_url="http://test",
        transport=httpx.MockTransport(recorder),
    )
    yield client
    client.close()
