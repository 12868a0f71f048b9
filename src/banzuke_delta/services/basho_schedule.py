from collections.abc import Sequence
from datetime import UTC, date, datetime, timedelta

from banzuke_delta.domain.basho_schedule import BashoSchedule
from banzuke_delta.domain.roster import Basho
from banzuke_delta.ingest.sumo_api_source import is_unset_date
from banzuke_delta.services.presentation import month_year_from_id, month_year_from_start
from banzuke_delta.tournament import validate_basho_id

BANZUKE_LEAD = timedelta(days=7)


def _utc_date(value: str | None) -> date | None:
    if value is None or is_unset_date(value):
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC)
    return parsed.date()


def build_basho_schedule(basho: Basho, *, month_names: Sequence[str] | None = None) -> BashoSchedule:
    """Key dates and location of *basho*; unset dates become None."""
    start = _utc_date(basho.start_date)
    month_year = month_year_from_start(basho.start_date if start else None, month_names)
    if month_year is None and validate_basho_id(basho.basho_id) is None:
        month_year = month_year_from_id(basho.basho_id, month_names)

    return BashoSchedule(
        basho_id=basho.basho_id,
        title=f"{month_year} Basho" if month_year else "Basho N/A",
        banzuke_release=start - BANZUKE_LEAD if start else None,
        start=start,
        end=_utc_date(basho.end_date),
        city=basho.city,
        venue=basho.venue,
    )
