from typing import Protocol, runtime_checkable

from banzuke_delta.domain.roster import Basho, Roster


@runtime_checkable
class BanzukeSource(Protocol):
    def fetch_banzuke(self, basho_id: str, division: str) -> Roster: ...

    def fetch_basho(self, basho_id: str) -> Basho: ...

    def fetch_upcoming(self) -> Basho: ...
