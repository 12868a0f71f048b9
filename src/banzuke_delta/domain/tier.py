from enum import Enum


class Tier(Enum):
    """Named rank classes of the top division, highest first."""

    YOKOZUNA = "Yokozuna"
    OZEKI = "Ozeki"
    SEKIWAKE = "Sekiwake"
    KOMUSUBI = "Komusubi"
    MAEGASHIRA = "Maegashira"

    @property
    def abbreviation(self) -> str:
        return self.value[0]


class Side(Enum):
    EAST = "East"
    WEST = "West"


TIER_ORDER: tuple[Tier, ...] = (
    Tier.YOKOZUNA,
    Tier.OZEKI,
    Tier.SEKIWAKE,
    Tier.KOMUSUBI,
    Tier.MAEGASHIRA,
)
