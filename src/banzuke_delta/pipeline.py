"""End-to-end banzuke comparison: fetch, diff and present."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import httpx

from banzuke_delta.domain.diff import DiffResult
from banzuke_delta.domain.errors import RosterFormatError
from banzuke_delta.domain.presentation import Presentation
from banzuke_delta.ingest.context import MAKUUCHI, load_previous_context
from banzuke_delta.ingest.protocols import BanzukeSource
from banzuke_delta.ingest.sumo_api_source import basho_looks_missing
from banzuke_delta.services.diff_engine import compute_diff
from banzuke_delta.services.presentation import build_presentation
from banzuke_delta.tournament import parse_basho_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BanzukeComparison:
    diff: DiffResult
    presentation: Presentation


def compare_banzuke(
    source: BanzukeSource,
    current_id: str,
    previous_hint: str | None = None,
    *,
    use_start_date: bool = True,
    month_names: Sequence[str] | None = None,
) -> BanzukeComparison:
    """Compare the Makuuchi banzuke of *current_id* with the previous basho.

    The current roster is required and its fetch errors propagate; the
    previous rosters degrade to None. When *use_start_date* is set the basho
    metadata is fetched for the title month.
    """
    parse_basho_id(current_id)
    current = source.fetch_banzuke(current_id, MAKUUCHI)
    previous = load_previous_context(source, current_id, previous_hint)

    start_date: str | None = None
    if use_start_date:
        try:
            basho = source.fetch_basho(current_id)
        except (httpx.HTTPError, RosterFormatError) as e:
            logger.warning("Basho metadata for %s unavailable, titling from id: %s", current_id, e)
        else:
            if not basho_looks_missing(basho):
                start_date = basho.start_date

    diff = compute_diff(current_id, previous.previous_id, current, previous.makuuchi, previous.juryo)
    presentation = build_presentation(diff, start_date=start_date, month_names=month_names)
    logger.info("Compared basho %s with %s (%d rows)", current_id, previous.previous_id, len(diff.rows))
    return BanzukeComparison(diff=diff, presentation=presentation)
