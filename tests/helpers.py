from banzuke_delta.domain.roster import Entry, Roster
from banzuke_delta.domain.tier import Side
from banzuke_delta.ranking import position_of, tier_of


def make_entry(
    rikishi_id: int,
    rank_value: int,
    side: Side = Side.EAST,
    *,
    shikona: str | None = None,
) -> Entry:
    tier = tier_of(rank_value)
    position = position_of(rank_value)
    return Entry(
        rikishi_id=rikishi_id,
        shikona=shikona or f"Rikishi{rikishi_id}",
        side=side,
        tier=tier,
        position=position,
        rank_value=rank_value,
        rank_label=f"{tier.value} {position} {side.value}",
    )


def make_roster(*entries: Entry, basho_id: str = "202509", division: str = "Makuuchi") -> Roster:
    return Roster(basho_id=basho_id, division=division, entries=tuple(entries))
