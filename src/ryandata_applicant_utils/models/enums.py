"""Validation outcome enumeration."""

from __future__ import annotations

from enum import Enum


class ValidationOutcome(Enum):
    """Outcome of validating a single applicant field.

    Each member carries the legacy integer code used by older callers and a
    human-readable message. Outcomes are returned, never raised.
    """

    VALID = (0, "Valid")
    INVALID_FORMAT = (1, "Invalid format")
    INVALID_AREA_NUMBER = (2, "Invalid area number - cannot start with 000, 666, or 9")
    INVALID_SERIAL_NUMBER = (3, "Invalid serial number - cannot be 0000")
    SPECIAL_CASE_INVALID = (4, "Special case - this number is reserved and cannot be used")
    MISSING_REQUIRED_FIELD = (6, "Missing required field")

    def __init__(self, legacy_code: int, message: str) -> None:
        self.legacy_code = legacy_code
        self.message = message

    @property
    def is_valid(self) -> bool:
        return self is ValidationOutcome.VALID

    @classmethod
    def from_legacy_code(cls, code: int) -> ValidationOutcome:
        """Look up an outcome by its legacy integer code.

        Raises:
            ValueError: If no outcome uses the given code.
        """
        for outcome in cls:
            if outcome.legacy_code == code:
                return outcome
        raise ValueError(f"Unknown validation code: {code}")

    def __str__(self) -> str:
        return f"{self.name} ({self.legacy_code}): {self.message}"
