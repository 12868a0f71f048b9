"""Decode raw sumo-api banzuke payloads into typed rosters.

This is the only place packed ``rankValue`` integers are split into a tier
and a position.
"""

from typing import Any

from banzuke_delta.domain.errors import RosterFormatError
from banzuke_delta.domain.roster import Basho, Entry, Roster
from banzuke_delta.domain.tier import Side
from banzuke_delta.ranking import position_of, tier_of


def _require(row: dict[str, Any], key: str) -> Any:
    value = row.get(key)
    if value is None:
        raise RosterFormatError(f"banzuke row is missing {key!r}: {row!r}")
    return value


def _require_int(row: dict[str, Any], key: str) -> int:
    value = _require(row, key)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise RosterFormatError(f"banzuke row has non-integer {key!r}: {value!r}") from e


def _parse_side(value: Any) -> Side:
    try:
        return Side(str(value).title())
    except ValueError as e:
        raise RosterFormatError(f"unknown side {value!r}") from e


def map_banzuke_row(row: dict[str, Any], default_side: Side | None = None) -> Entry:
    rank_value = _require_int(row, "rankValue")
    position = position_of(rank_value)
    if position < 1:
        raise RosterFormatError(f"rankValue {rank_value} has no position")

    raw_side = row.get("side")
    if raw_side is not None:
        side = _parse_side(raw_side)
    elif default_side is not None:
        side = default_side
    else:
        raise RosterFormatError(f"banzuke row is missing 'side': {row!r}")

    shikona = row.get("shikonaEn") or row.get("shikona")
    if not shikona:
        raise RosterFormatError(f"banzuke row is missing 'shikonaEn': {row!r}")

    return Entry(
        rikishi_id=_require_int(row, "rikishiID"),
        shikona=str(shikona),
        side=side,
        tier=tier_of(rank_value),
        position=position,
        rank_value=rank_value,
        rank_label=str(row.get("rank") or f"{tier_of(rank_value).value} {position} {side.value}"),
    )


def map_banzuke(payload: dict[str, Any], basho_id: str, division: str) -> Roster:
    """Build a :class:`Roster` from a ``/basho/{id}/banzuke/{division}`` payload.

    The API splits rows into ``east`` and ``west`` lists; rows are read from
    both. A duplicate wrestler id keeps its first row.
    """
    if not isinstance(payload, dict):
        raise RosterFormatError(f"banzuke payload for {basho_id} {division} is not an object")
    entries: list[Entry] = []
    seen: set[int] = set()
    for key, side in (("east", Side.EAST), ("west", Side.WEST)):
        for row in payload.get(key) or []:
            if not isinstance(row, dict):
                raise RosterFormatError(f"banzuke row is not an object: {row!r}")
            entry = map_banzuke_row(row, default_side=side)
            if entry.rikishi_id in seen:
                continue
            seen.add(entry.rikishi_id)
            entries.append(entry)
    return Roster(
        basho_id=str(payload.get("bashoId") or basho_id),
        division=str(payload.get("division") or division),
        entries=tuple(entries),
    )


def map_basho(payload: dict[str, Any], basho_id: str = "") -> Basho:
    """Build a :class:`Basho` from a ``/basho/{id}`` or ``/basho/upcoming`` payload.

    The id is taken from ``bashoId``, then ``date``, then *basho_id*.
    """
    if not isinstance(payload, dict):
        raise RosterFormatError(f"basho payload for {basho_id or 'upcoming'} is not an object")
    return Basho(
        basho_id=str(payload.get("bashoId") or payload.get("date") or basho_id),
        start_date=payload.get("startDate") or None,
        end_date=payload.get("endDate") or None,
        city=payload.get("city") or None,
        venue=payload.get("venue") or None,
    )
