import httpx

from banzuke_delta.domain.roster import Basho, Roster


class FakeBanzukeSource:
    """In-memory banzuke source keyed by (basho_id, division).

    Missing rosters and bashos raise ``httpx.HTTPStatusError`` with a 404,
    like the API.
    """

    def __init__(
        self,
        rosters: dict[tuple[str, str], Roster],
        bashos: dict[str, Basho] | None = None,
        upcoming: Basho | None = None,
    ) -> None:
        self._rosters = rosters
        self._bashos = bashos or {}
        self._upcoming = upcoming
        self.requests: list[tuple[str, str]] = []
        self.basho_requests: list[str] = []

    def fetch_banzuke(self, basho_id: str, division: str) -> Roster:
        self.requests.append((basho_id, division))
        try:
            return self._rosters[(basho_id, division)]
        except KeyError:
            raise _not_found(f"/basho/{basho_id}/banzuke/{division}") from None

    def fetch_basho(self, basho_id: str) -> Basho:
        self.basho_requests.append(basho_id)
        try:
            return self._bashos[basho_id]
        except KeyError:
            raise _not_found(f"/basho/{basho_id}") from None

    def fetch_upcoming(self) -> Basho:
        if self._upcoming is None:
            raise _not_found("/basho/upcoming")
        return self._upcoming


def _not_found(path: str) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", f"https://sumo.test{path}")
    return httpx.HTTPStatusError("404 Not Found", request=request, response=httpx.Response(404, request=request))
