from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class BashoSchedule:
    basho_id: str
    title: str
    banzuke_release: date | None  # a week before day one
    start: date | None
    end: date | None
    city: str | None = None
    venue: str | None = None
