import logging
from dataclasses import dataclass
from datetime import date

import httpx

from banzuke_delta.domain.errors import RosterFormatError
from banzuke_delta.domain.roster import Basho, Roster
from banzuke_delta.ingest.protocols import BanzukeSource
from banzuke_delta.ingest.sumo_api_source import basho_looks_missing
from banzuke_delta.tournament import previous_basho_id, upcoming_basho_id, validate_basho_id

logger = logging.getLogger(__name__)

MAKUUCHI = "Makuuchi"
JURYO = "Juryo"


@dataclass(frozen=True)
class PreviousContext:
    previous_id: str
    makuuchi: Roster | None
    juryo: Roster | None


def _fetch_optional(source: BanzukeSource, basho_id: str, division: str) -> Roster | None:
    try:
        return source.fetch_banzuke(basho_id, division)
    except (httpx.HTTPError, RosterFormatError) as e:
        logger.warning("Previous %s banzuke for %s unavailable: %s", division, basho_id, e)
        return None


def load_previous_context(
    source: BanzukeSource,
    current_id: str,
    previous_hint: str | None = None,
) -> PreviousContext:
    """Fetch the previous basho's Makuuchi and Juryo rosters.

    *previous_hint* is used when it is a valid basho id; otherwise the
    previous id is two months before *current_id*. Either roster is None
    when it cannot be fetched or decoded.
    """
    if previous_hint and validate_basho_id(previous_hint) is None:
        previous_id = previous_hint
    else:
        previous_id = previous_basho_id(current_id)

    return PreviousContext(
        previous_id=previous_id,
        makuuchi=_fetch_optional(source, previous_id, MAKUUCHI),
        juryo=_fetch_optional(source, previous_id, JURYO),
    )


def resolve_target_id(source: BanzukeSource, supplied: str | None = None, today: date | None = None) -> str:
    """Pick the basho to report on.

    A supplied id wins. Otherwise the API's upcoming basho is used when it
    has real dates, and the odd-month rule for *today* (UTC) is the fallback.
    """
    if supplied:
        return supplied
    try:
        basho = source.fetch_upcoming()
    except (httpx.HTTPError, RosterFormatError) as e:
        logger.warning("Upcoming basho lookup failed, using the calendar: %s", e)
    else:
        if basho.basho_id and validate_basho_id(basho.basho_id) is None and not basho_looks_missing(basho):
            return basho.basho_id
        logger.info("Upcoming basho has no schedule yet, using the calendar")
    return upcoming_basho_id(today)


def load_target_basho(source: BanzukeSource, target_id: str, today: date | None = None) -> Basho | None:
    """Fetch *target_id*, retrying the calendar's upcoming id when it looks missing.

    Returns None when neither has a schedule.
    """
    basho = _fetch_basho_optional(source, target_id)
    if basho_looks_missing(basho):
        fallback_id = upcoming_basho_id(today)
        if fallback_id != target_id:
            basho = _fetch_basho_optional(source, fallback_id)
    return None if basho_looks_missing(basho) else basho


def _fetch_basho_optional(source: BanzukeSource, basho_id: str) -> Basho | None:
    try:
        return source.fetch_basho(basho_id)
    except httpx.HTTPStatusError as e:
        if e.response.status_code != 404:
            raise
        logger.debug("Basho %s not found", basho_id)
        return None
