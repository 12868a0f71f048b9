from dataclasses import dataclass

from banzuke_delta.domain.tier import Side, Tier


@dataclass(frozen=True)
class PresentationRow:
    tier: Tier
    rank_label: str
    shikona: str
    delta_label: str
    side: Side
    position: int


@dataclass(frozen=True)
class Presentation:
    title: str
    subtitle: str
    rows: tuple[PresentationRow, ...]
