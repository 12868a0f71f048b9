import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

import httpx

from banzuke_delta.domain.errors import RosterFormatError
from banzuke_delta.domain.roster import Basho, Roster
from banzuke_delta.ingest._retry import default_http_retry
from banzuke_delta.ingest.roster_mapper import map_banzuke, map_basho

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.sumo-api.com/api"

# sumo-api reports unset dates as the zero timestamp
_UNSET_DATE = "0001-01-01T00:00:00Z"


def is_unset_date(value: str | None) -> bool:
    if not value or value == _UNSET_DATE:
        return True
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return True
    return False


def basho_looks_missing(basho: Basho | None) -> bool:
    if basho is None:
        return True
    return is_unset_date(basho.start_date) or is_unset_date(basho.end_date)


class SumoApiSource:
    def __init__(
        self,
        client: httpx.Client | None = None,
        base_url: str = DEFAULT_BASE_URL,
        retry: Callable[[Callable[..., Any]], Callable[..., Any]] | None = None,
    ) -> None:
        self._client = client or httpx.Client(timeout=httpx.Timeout(30.0, connect=10.0))
        self._base_url = base_url.rstrip("/")
        self._get_with_retry = (retry or default_http_retry("sumo-api call"))(self._do_get)

    def _do_get(self, path: str) -> Any:
        url = f"{self._base_url}{path}"
        logger.debug("GET %s", url)
        response = self._client.get(url)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError as e:
            raise RosterFormatError(f"{url} did not return JSON: {e}") from e

    def fetch_basho(self, basho_id: str) -> Basho:
        payload = self._get_with_retry(f"/basho/{basho_id}")
        return map_basho(payload or {}, basho_id)

    def fetch_upcoming(self) -> Basho:
        payload = self._get_with_retry("/basho/upcoming")
        return map_basho(payload or {})

    def fetch_banzuke(self, basho_id: str, division: str) -> Roster:
        payload = self._get_with_retry(f"/basho/{basho_id}/banzuke/{division}")
        roster = map_banzuke(payload or {}, basho_id, division)
        logger.info("Fetched %d %s entries for basho %s", len(roster.entries), division, basho_id)
        return roster
