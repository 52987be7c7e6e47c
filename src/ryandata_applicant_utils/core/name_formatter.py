"""Name formatting utilities.

Pure functions over optional name parts. ``None`` is treated as an empty
string and every part is trimmed before use.
"""

from __future__ import annotations


def _clean(value: str | None) -> str:
    return value.strip() if value else ""


def join_non_empty(delimiter: str, *values: str | None) -> str:
    """Join the non-blank values, trimmed, with ``delimiter``."""
    return delimiter.join(cleaned for cleaned in map(_clean, values) if cleaned)


def format_full_name(first: str | None, middle: str | None, last: str | None) -> str:
    """Format as "First Middle Last", skipping empty parts."""
    return join_non_empty(" ", first, middle, last)


def format_last_name_first(first: str | None, middle: str | None, last: str | None) -> str:
    """Format as "Last, First Middle".

    Returns "" without a last name and the last name alone without a first name.
    """
    first, middle, last = _clean(first), _clean(middle), _clean(last)
    if not last:
        return ""
    if not first:
        return last
    if not middle:
        return f"{last}, {first}"
    return f"{last}, {first} {middle}"


def format_display_name(first: str | None, middle: str | None, last: str | None) -> str:
    """Format as "First M. Last", dropping the initial when there is no middle name."""
    first, middle, last = _clean(first), _clean(middle), _clean(last)
    if not last:
        return first
    if not first:
        return last
    middle_initial = f"{middle[0]}." if middle else ""
    return join_non_empty(" ", first, middle_initial, last)


def format_initials(first: str | None, middle: str | None, last: str | None) -> str:
    """Uppercased initials of the non-empty parts, e.g. "JQP"."""
    return "".join(part[0] for part in map(_clean, (first, middle, last)) if part).upper()


def format_spanish_last_name(primer_apellido: str | None, segundo_apellido: str | None) -> str:
    """Combine both surnames with a single space.

    The second surname is dropped when empty; without a first surname the
    result is "".
    """
    primer, segundo = _clean(primer_apellido), _clean(segundo_apellido)
    if not primer:
        return ""
    if not segundo:
        return primer
    return f"{primer} {segundo}"
