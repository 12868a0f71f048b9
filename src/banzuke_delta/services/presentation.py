import calendar
from collections.abc import Sequence
from datetime import UTC, datetime

from banzuke_delta.domain.diff import DiffResult
from banzuke_delta.domain.presentation import Presentation, PresentationRow
from banzuke_delta.domain.tier import TIER_ORDER, Tier
from banzuke_delta.ranking import position_of
from banzuke_delta.tournament import parse_basho_id

_TIER_RANK: dict[Tier, int] = {tier: i for i, tier in enumerate(TIER_ORDER)}

ENGLISH_MONTHS: tuple[str, ...] = tuple(calendar.month_name)[1:]


def _month_name(month: int, month_names: Sequence[str] | None) -> str:
    names = month_names or ENGLISH_MONTHS
    if len(names) != 12:
        raise ValueError(f"month_names needs 12 entries, got {len(names)}")
    return names[month - 1]


def month_year_from_start(start_date: str | None, month_names: Sequence[str] | None = None) -> str | None:
    """``"September 2025"`` from an ISO-8601 start date, or None if unparseable."""
    if not start_date:
        return None
    try:
        parsed = datetime.fromisoformat(start_date)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC)
    return f"{_month_name(parsed.month, month_names)} {parsed.year}"


def month_year_from_id(basho_id: str, month_names: Sequence[str] | None = None) -> str:
    year, month = parse_basho_id(basho_id)
    return f"{_month_name(month, month_names)} {year}"


def build_presentation(
    diff: DiffResult,
    *,
    start_date: str | None = None,
    month_names: Sequence[str] | None = None,
) -> Presentation:
    """Build the renderer-agnostic title, subtitle and rows for *diff*.

    The title prefers *start_date* when it parses, falling back to the
    current basho id. *month_names* (January first) replaces the English
    month names. Rows keep the diff's order within each tier.
    """
    title_month = month_year_from_start(start_date, month_names) or month_year_from_id(diff.current_id, month_names)
    previous_month = month_year_from_id(diff.previous_id, month_names)

    rows = [
        PresentationRow(
            tier=r.tier,
            rank_label=r.rank_label,
            shikona=r.shikona,
            delta_label=r.delta_label,
            side=r.side,
            position=position_of(r.rank_value),
        )
        for r in diff.rows
    ]
    # no-op when the diff is already in ladder order
    rows.sort(key=lambda r: _TIER_RANK[r.tier])

    return Presentation(
        title=f"{title_month} Basho",
        subtitle=f"vs {previous_month}",
        rows=tuple(rows),
    )
