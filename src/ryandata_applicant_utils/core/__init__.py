"""Reusable, domain-agnostic helpers: name formatting and ZIP code parsing."""

from __future__ import annotations

from ryandata_applicant_utils.core.name_formatter import (
    format_display_name,
    format_full_name,
    format_initials,
    format_last_name_first,
    format_spanish_last_name,
    join_non_empty,
)
from ryandata_applicant_utils.core.zip_code import (
    ZIP_CODE_PATTERN,
    ZipCodeNormalizer,
    ZipCodeResult,
    get_zip_normalizer,
)

__all__ = [
    # Name formatting
    "format_display_name",
    "format_full_name",
    "format_initials",
    "format_last_name_first",
    "format_spanish_last_name",
    "join_non_empty",
    # ZIP code normalization
    "ZIP_CODE_PATTERN",
    "ZipCodeNormalizer",
    "ZipCodeResult",
    "get_zip_normalizer",
]
