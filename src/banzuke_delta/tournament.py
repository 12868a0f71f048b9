"""Basho id helpers.

A basho id is a six digit ``YYYYMM`` string. Honbasho are held in odd
months, so the previous tournament is two months back.
"""

import re
from datetime import UTC, date, datetime

from banzuke_delta.domain.errors import InvalidTournamentIdError

_BASHO_ID_RE = re.compile(r"^\d{6}$")
BASHO_MONTHS = (1, 3, 5, 7, 9, 11)


def validate_basho_id(basho_id: str) -> str | None:
    """Return a human readable problem with *basho_id*, or None if it is valid."""
    if not _BASHO_ID_RE.match(basho_id):
        return "Invalid format. Use YYYYMM."
    year = int(basho_id[:4])
    month = int(basho_id[4:6])
    if year < 1900 or year > 3000:
        return "Year out of range."
    if month < 1 or month > 12:
        return "Month must be 01-12."
    return None


def parse_basho_id(basho_id: str) -> tuple[int, int]:
    problem = validate_basho_id(basho_id)
    if problem is not None:
        raise InvalidTournamentIdError(f"{basho_id!r}: {problem}")
    return int(basho_id[:4]), int(basho_id[4:6])


def format_basho_id(year: int, month: int) -> str:
    return f"{year}{month:02d}"


def previous_basho_id(basho_id: str) -> str:
    year, month = parse_basho_id(basho_id)
    month -= 2
    if month < 1:
        month += 12
        year -= 1
    return format_basho_id(year, month)


def utc_today() -> date:
    return datetime.now(UTC).date()


def upcoming_basho_id(today: date | None = None) -> str:
    """Current basho id if *today* falls in a basho month, else the next one.

    *today* defaults to the current UTC date.
    """
    today = today or utc_today()
    if today.month in BASHO_MONTHS:
        return format_basho_id(today.year, today.month)
    if today.month == 12:
        return format_basho_id(today.year + 1, 1)
    return format_basho_id(today.year, today.month + 1)
