"""ZIP code normalization and validation utilities.

Single place for deciding whether a ZIP code may be sent to the lookup
service and which part of it is used.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

ZIP_CODE_PATTERN = re.compile(r"(\d{5})(?:-(\d{4}))?", re.ASCII)


@dataclass(frozen=True)
class ZipCodeResult:
    """Result of ZIP code parsing and validation.

    Attributes:
        zip5: The 5-digit ZIP code (None if invalid).
        zip4: The 4-digit ZIP+4 extension (None if not present or invalid).
        full: The full formatted ZIP code ("12345" or "12345-6789").
        is_valid: True if the ZIP code is valid.
        error: Error message if invalid, None otherwise.
    """

    zip5: str | None
    zip4: str | None
    full: str | None
    is_valid: bool
    error: str | None


class ZipCodeNormalizer:
    """Parses ZIP codes in "12345" or "12345-6789" form.

    Example:
        >>> normalizer = ZipCodeNormalizer()
        >>> result = normalizer.parse(" 78701-1234 ")
        >>> result.zip5
        '78701'
        >>> result.full
        '78701-1234'
        >>> normalizer.parse("787011234").is_valid
        False
    """

    @staticmethod
    def normalize(zip5: str, zip4: str | None = None) -> str:
        """Format ZIP code as "12345" or "12345-6789"."""
        if zip4:
            return f"{zip5}-{zip4}"
        return zip5

    def parse(self, zip_string: str | None) -> ZipCodeResult:
        """Parse a ZIP code after trimming surrounding whitespace.

        Args:
            zip_string: The ZIP code string to parse.

        Returns:
            ZipCodeResult with parsed components and validation status.
        """
        if not zip_string or not isinstance(zip_string, str):
            return ZipCodeResult(None, None, None, False, "Missing or invalid zip code")

        cleaned = zip_string.strip()
        if not cleaned:
            return ZipCodeResult(None, None, None, False, "Empty zip code")

        match = ZIP_CODE_PATTERN.fullmatch(cleaned)
        if match is None:
            return ZipCodeResult(None, None, None, False, f"Invalid zip code format: {zip_string}")

        zip5, zip4 = match.group(1), match.group(2)
        return ZipCodeResult(
            zip5=zip5,
            zip4=zip4,
            full=self.normalize(zip5, zip4),
            is_valid=True,
            error=None,
        )

    def is_valid(self, zip_string: str | None) -> bool:
        return self.parse(zip_string).is_valid


_default_normalizer: ZipCodeNormalizer | None = None


def get_zip_normalizer() -> ZipCodeNormalizer:
    """Get the default ZipCodeNormalizer singleton."""
    global _default_normalizer
    if _default_normalizer is None:
        _default_normalizer = ZipCodeNormalizer()
    return _default_normalizer
