"""Shared Hypothesis strategies for applicant testing.

This module provides reusable Hypothesis strategies for generating
SSNs, name parts, ZIP codes and city/state pairs for property-based
testing.
"""

from __future__ import annotations

import hypothesis.strategies as st

from ryandata_applicant_utils.validation.ssn import RESERVED_SSNS

# =============================================================================
# Constants
# =============================================================================

FIRST_NAMES = [
    "John",
    "Jane",
    "Maria",
    "Jose",
    "Wei",
    "Aisha",
    "Olivia",
    "Liam",
    "Noah",
    "Emma",
    "Carlos",
    "Ana",
]

LAST_NAMES = [
    "Smith",
    "Garcia",
    "Johnson",
    "Nguyen",
    "Brown",
    "Martinez",
    "Lopez",
    "Williams",
    "O'Brien",
    "Van Buren",
]

# US cities with their state abbreviations and valid ZIP codes
CITY_STATE_ZIP = [
    ("Austin", "TX", "78749"),
    ("Dallas", "TX", "75201"),
    ("Houston", "TX", "77001"),
    ("New York", "NY", "10001"),
    ("Los Angeles", "CA", "90001"),
    ("Chicago", "IL", "60601"),
    ("Phoenix", "AZ", "85001"),
    ("Philadelphia", "PA", "19101"),
    ("San Antonio", "TX", "78201"),
    ("San Diego", "CA", "92101"),
    ("Miami", "FL", "33101"),
    ("Seattle", "WA", "98101"),
    ("Denver", "CO", "80201"),
    ("Boston", "MA", "02101"),
    ("Atlanta", "GA", "30301"),
]

VALID_ZIPS = [zip_code for _, _, zip_code in CITY_STATE_ZIP]


# =============================================================================
# SSN Strategies
# =============================================================================


def _format(area: int, group: int, serial: int, dashed: bool) -> str:
    separator = "-" if dashed else ""
    return f"{area:03d}{separator}{group:02d}{separator}{serial:04d}"


@st.composite
def valid_ssn_strategy(draw: st.DrawFn) -> str:
    """Generate an SSN that passes every rule, with or without dashes."""
    area = draw(st.integers(min_value=1, max_value=899).filter(lambda a: a != 666))
    group = draw(st.integers(min_value=0, max_value=99))
    serial = draw(st.integers(min_value=1, max_value=9999))
    dashed = draw(st.booleans())
    ssn = _format(area, group, serial, dashed)
    if ssn.replace("-", "") in RESERVED_SSNS:
        return _format(123, 45, 6789, dashed)
    return ssn


@st.composite
def invalid_area_ssn_strategy(draw: st.DrawFn) -> str:
    """Generate a well-formed SSN whose area number was never issued."""
    area = draw(
        st.one_of(
            st.just(0),
            st.just(666),
            st.integers(min_value=900, max_value=999),
        )
    )
    group = draw(st.integers(min_value=0, max_value=99))
    serial = draw(st.integers(min_value=0, max_value=9999))
    return _format(area, group, serial, draw(st.booleans()))


@st.composite
def invalid_serial_ssn_strategy(draw: st.DrawFn) -> str:
    """Generate a well-formed SSN with a valid area and serial 0000."""
    area = draw(st.integers(min_value=1, max_value=899).filter(lambda a: a != 666))
    group = draw(st.integers(min_value=0, max_value=99))
    return _format(area, group, 0, draw(st.booleans()))


@st.composite
def malformed_ssn_strategy(draw: st.DrawFn) -> str:
    """Generate non-blank strings that are not "DDD-DD-DDDD" or nine digits."""
    choice = draw(st.integers(min_value=0, max_value=3))
    if choice == 0:
        # Wrong digit count
        length = draw(st.integers(min_value=1, max_value=12).filter(lambda n: n != 9))
        return draw(st.text(alphabet="0123456789", min_size=length, max_size=length))
    elif choice == 1:
        # Misplaced dashes
        return draw(st.sampled_from(["12-345-6789", "1234-56-789", "123456-789", "123-456789"]))
    elif choice == 2:
        # Contains letters
        return draw(
            st.text(alphabet="0123456789AB", min_size=9, max_size=9).filter(
                lambda x: not x.isdigit()
            )
        )
    else:
        # Surrounding whitespace is not trimmed
        return f" {_format(123, 45, 6789, True)} "


# =============================================================================
# Name Strategies
# =============================================================================


@st.composite
def first_name_strategy(draw: st.DrawFn) -> str:
    return draw(st.sampled_from(FIRST_NAMES))


@st.composite
def last_name_strategy(draw: st.DrawFn) -> str:
    return draw(st.sampled_from(LAST_NAMES))


@st.composite
def optional_name_part_strategy(draw: st.DrawFn) -> str | None:
    """Generate a name part that may be missing, blank, padded, or present."""
    return draw(
        st.one_of(
            st.none(),
            st.sampled_from(["", "   "]),
            st.sampled_from(FIRST_NAMES + LAST_NAMES),
            st.sampled_from(FIRST_NAMES).map(lambda name: f"  {name} "),
        )
    )


# =============================================================================
# ZIP Code Strategies
# =============================================================================


@st.composite
def valid_zip5_strategy(draw: st.DrawFn) -> str:
    """Generate a valid 5-digit ZIP code from known valid ZIPs."""
    return draw(st.sampled_from(VALID_ZIPS))


@st.composite
def random_zip5_strategy(draw: st.DrawFn) -> str:
    """Generate a random 5-digit string that looks like a ZIP code."""
    return draw(st.text(alphabet="0123456789", min_size=5, max_size=5))


@st.composite
def zip4_strategy(draw: st.DrawFn) -> str:
    """Generate a 4-digit ZIP+4 extension."""
    return draw(st.text(alphabet="0123456789", min_size=4, max_size=4))


@st.composite
def valid_zip_plus_4_strategy(draw: st.DrawFn) -> str:
    """Generate a valid ZIP+4 (e.g., 78749-1234)."""
    zip5 = draw(valid_zip5_strategy())
    zip4 = draw(zip4_strategy())
    return f"{zip5}-{zip4}"


@st.composite
def invalid_zip_strategy(draw: st.DrawFn) -> str:
    """Generate invalid ZIP codes for negative testing."""
    choice = draw(st.integers(min_value=0, max_value=4))
    if choice == 0:
        # Too short
        return draw(st.text(alphabet="0123456789", min_size=1, max_size=4))
    elif choice == 1:
        # Too long, no dash
        return draw(st.text(alphabet="0123456789", min_size=6, max_size=10))
    elif choice == 2:
        # Contains letters
        return draw(
            st.text(alphabet="0123456789ABCDEF", min_size=5, max_size=5).filter(
                lambda x: not x.isdigit()
            )
        )
    elif choice == 3:
        # Bad ZIP+4 extension
        zip5 = draw(random_zip5_strategy())
        extension = draw(st.text(alphabet="0123456789", min_size=1, max_size=3))
        return f"{zip5}-{extension}"
    else:
        # Empty or whitespace
        return draw(st.sampled_from(["", "   ", "\t", "\n"]))


@st.composite
def city_state_zip_strategy(draw: st.DrawFn) -> tuple[str, str, str]:
    """Generate a (city, state, zip) tuple from known valid combinations."""
    return draw(st.sampled_from(CITY_STATE_ZIP))
