import logging

from banzuke_delta.domain.diff import NEW_LABEL, PROMOTED_LABEL, DiffResult, DiffRow
from banzuke_delta.domain.roster import Roster
from banzuke_delta.ranking import compute_band_counts, entry_ladder_index, sort_by_ladder

logger = logging.getLogger(__name__)


def format_delta(delta: float) -> str:
    if delta == 0:
        return "0"
    sign = "+" if delta > 0 else ""
    return f"{sign}{delta:.1f}"


def compute_diff(
    current_id: str,
    previous_id: str,
    current: Roster,
    previous_makuuchi: Roster | None,
    previous_juryo: Roster | None,
) -> DiffResult:
    """Compare *current* against the previous Makuuchi and Juryo rosters.

    Wrestlers found in the previous Makuuchi roster get a numeric delta in
    half-step units (positive means they moved up). Wrestlers only found in
    the previous Juryo roster are marked as promoted; anyone else is new.
    The Juryo roster is used for membership only, since its positions live
    on an unrelated scale.
    """
    counts = compute_band_counts(current, previous_makuuchi)

    previous_ladder: dict[int, int] = {}
    if previous_makuuchi is not None:
        for entry in previous_makuuchi.entries:
            previous_ladder[entry.rikishi_id] = entry_ladder_index(entry, counts)

    juryo_ids: set[int] = set()
    if previous_juryo is not None:
        juryo_ids = {entry.rikishi_id for entry in previous_juryo.entries}

    rows: list[DiffRow] = []
    for entry in sort_by_ladder(current.entries, counts):
        ladder = entry_ladder_index(entry, counts)
        prev = previous_ladder.get(entry.rikishi_id)

        delta: float | None = None
        if prev is not None:
            delta = (prev - ladder) / 2
            delta_label = format_delta(delta)
        elif entry.rikishi_id in juryo_ids:
            delta_label = PROMOTED_LABEL
        else:
            delta_label = NEW_LABEL

        rows.append(
            DiffRow(
                rikishi_id=entry.rikishi_id,
                shikona=entry.shikona,
                rank_label=entry.rank_label,
                rank_value=entry.rank_value,
                side=entry.side,
                tier=entry.tier,
                position=entry.position,
                ladder=ladder,
                delta=delta,
                delta_label=delta_label,
            )
        )

    promoted = sum(1 for r in rows if r.delta_label == PROMOTED_LABEL)
    new = sum(1 for r in rows if r.delta_label == NEW_LABEL)
    logger.debug(
        "Diff %s vs %s: %d rows (%d compared, %d promoted, %d new)",
        current_id,
        previous_id,
        len(rows),
        len(rows) - promoted - new,
        promoted,
        new,
    )
    return DiffResult(current_id=current_id, previous_id=previous_id, rows=tuple(rows))
