from dataclasses import dataclass

from banzuke_delta.domain.tier import Tier

SANYAKU_FLOOR = 1
MAEGASHIRA_FLOOR = 20


@dataclass(frozen=True)
class BandCounts:
    """Highest numbered position seen per tier across the compared rosters."""

    yokozuna: int = SANYAKU_FLOOR
    ozeki: int = SANYAKU_FLOOR
    sekiwake: int = SANYAKU_FLOOR
    komusubi: int = SANYAKU_FLOOR
    maegashira: int = MAEGASHIRA_FLOOR

    def __getitem__(self, tier: Tier) -> int:
        return getattr(self, tier.name.lower())

    def as_dict(self) -> dict[Tier, int]:
        return {tier: self[tier] for tier in Tier}
