from dataclasses import dataclass

from banzuke_delta.domain.tier import Side, Tier

PROMOTED_LABEL = "↑ from Juryo"
NEW_LABEL = "NEW"


@dataclass(frozen=True)
class DiffRow:
    rikishi_id: int
    shikona: str
    rank_label: str
    rank_value: int
    side: Side
    tier: Tier
    position: int
    ladder: int
    delta: float | None
    delta_label: str


@dataclass(frozen=True)
class DiffResult:
    current_id: str
    previous_id: str
    rows: tuple[DiffRow, ...]
