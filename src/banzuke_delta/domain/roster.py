from dataclasses import dataclass

from banzuke_delta.domain.tier import Side, Tier


@dataclass(frozen=True)
class Entry:
    rikishi_id: int
    shikona: str
    side: Side
    tier: Tier
    position: int  # 1-based slot within the tier
    rank_value: int
    rank_label: str


@dataclass(frozen=True)
class Roster:
    basho_id: str
    division: str
    entries: tuple[Entry, ...] = ()


@dataclass(frozen=True)
class Basho:
    basho_id: str
    start_date: str | None = None
    end_date: str | None = None
    city: str | None = None
    venue: str | None = None
