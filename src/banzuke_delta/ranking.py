"""Band-aware ranking model.

Raw rank values pack a tier code and a numbered position as
``tier_code * 100 + position``. They are decoded once here into a
:class:`Tier` plus position, and every comparison between two rosters goes
through :func:`ladder_index`, a half-step coordinate built from the union of
both rosters' tier populations.
"""

from collections.abc import Iterable

from banzuke_delta.domain.band_counts import MAEGASHIRA_FLOOR, SANYAKU_FLOOR, BandCounts
from banzuke_delta.domain.roster import Entry, Roster
from banzuke_delta.domain.tier import TIER_ORDER, Side, Tier

_TIER_BY_CODE: dict[int, Tier] = {
    1: Tier.YOKOZUNA,
    2: Tier.OZEKI,
    3: Tier.SEKIWAKE,
    4: Tier.KOMUSUBI,
}


def tier_of(rank_value: int) -> Tier:
    """Map a raw rank value to its tier. Codes of 5 and above are Maegashira."""
    return _TIER_BY_CODE.get(rank_value // 100, Tier.MAEGASHIRA)


def position_of(rank_value: int) -> int:
    return rank_value % 100


def compute_band_counts(current: Roster, previous: Roster | None = None) -> BandCounts:
    """Per-tier maximum position over *current* and *previous*, with floors.

    The result is the shared scale for comparing positions drawn from either
    roster, so it must cover the union of both.
    """
    maxima: dict[Tier, int] = {tier: 0 for tier in TIER_ORDER}
    rosters = [current] if previous is None else [current, previous]
    for roster in rosters:
        for entry in roster.entries:
            maxima[entry.tier] = max(maxima[entry.tier], entry.position)

    return BandCounts(
        yokozuna=maxima[Tier.YOKOZUNA] or SANYAKU_FLOOR,
        ozeki=maxima[Tier.OZEKI] or SANYAKU_FLOOR,
        sekiwake=maxima[Tier.SEKIWAKE] or SANYAKU_FLOOR,
        komusubi=maxima[Tier.KOMUSUBI] or SANYAKU_FLOOR,
        maegashira=max(maxima[Tier.MAEGASHIRA], MAEGASHIRA_FLOOR),
    )


def ladder_index(tier: Tier, position: int, side: Side, counts: BandCounts) -> int:
    """Continuous half-step index across all five tiers.

    Each numbered slot takes two units (East then West), so adjacent positions
    on the same side are two apart.
    """
    base = 0
    for band in TIER_ORDER:
        if band is tier:
            break
        base += counts[band] * 2
    side_offset = 0 if side is Side.EAST else 1
    return base + (position - 1) * 2 + side_offset


def entry_ladder_index(entry: Entry, counts: BandCounts) -> int:
    return ladder_index(entry.tier, entry.position, entry.side, counts)


def sort_by_ladder(entries: Iterable[Entry], counts: BandCounts) -> list[Entry]:
    return sorted(entries, key=lambda e: entry_ladder_index(e, counts))
