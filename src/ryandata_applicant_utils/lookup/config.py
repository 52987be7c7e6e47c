from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_BASE_URL = "http://api.zippopotam.us"
DEFAULT_TIMEOUT = 5.0


@dataclass
class LookupClientConfig:
    """Configuration for the city/state lookup service."""

    base_url: str = field(
        default_factory=lambda: os.getenv("RYANDATA_ZIP_LOOKUP_URL", DEFAULT_BASE_URL)
    )
    timeout: float = field(
        default_factory=lambda: float(
            os.getenv("RYANDATA_ZIP_LOOKUP_TIMEOUT", str(DEFAULT_TIMEOUT))
        )
    )
    country: str = field(default_factory=lambda: os.getenv("RYANDATA_ZIP_LOOKUP_COUNTRY", "us"))
    user_agent: str = field(
        default_factory=lambda: os.getenv(
            "RYANDATA_ZIP_LOOKUP_USER_AGENT", "ryandata-applicant-utils/0.1"
        )
    )
