import httpx
import pytest

from banzuke_delta.domain.diff import NEW_LABEL, PROMOTED_LABEL
from banzuke_delta.domain.roster import Basho
from banzuke_delta.domain.tier import Side
from banzuke_delta.ingest.context import JURYO, MAKUUCHI
from banzuke_delta.pipeline import compare_banzuke
from tests.fakes.banzuke_source import FakeBanzukeSource
from tests.helpers import make_entry, make_roster


def _source(bashos: dict[str, Basho] | None = None) -> FakeBanzukeSource:
    current = make_roster(
        make_entry(1, 101, shikona="Hoshoryu"),
        make_entry(2, 501, Side.WEST, shikona="Oho"),
        make_entry(3, 516, shikona="Kusano"),
        make_entry(4, 517, Side.WEST, shikona="Fujiseiun"),
    )
    previous = make_roster(
        make_entry(1, 101, shikona="Hoshoryu"),
        make_entry(2, 503, shikona="Oho"),
        basho_id="202507",
    )
    juryo = make_roster(make_entry(3, 602, shikona="Kusano"), basho_id="202507", division=JURYO)
    return FakeBanzukeSource(
        {("202509", MAKUUCHI): current, ("202507", MAKUUCHI): previous, ("202507", JURYO): juryo},
        bashos,
    )


class TestCompareBanzuke:
    def test_end_to_end(self) -> None:
        comparison = compare_banzuke(_source(), "202509")

        labels = {r.shikona: r.delta_label for r in comparison.presentation.rows}
        assert labels == {"Hoshoryu": "0", "Oho": "+1.5", "Kusano": PROMOTED_LABEL, "Fujiseiun": NEW_LABEL}
        assert comparison.diff.previous_id == "202507"
        assert comparison.presentation.title == "September 2025 Basho"
        assert comparison.presentation.subtitle == "vs July 2025"

    def test_title_from_basho_start_date(self) -> None:
        bashos = {"202509": Basho("202509", start_date="2025-10-01T00:00:00Z", end_date="2025-10-15T00:00:00Z")}
        comparison = compare_banzuke(_source(bashos=bashos), "202509")
        assert comparison.presentation.title == "October 2025 Basho"

    def test_missing_current_roster_propagates(self) -> None:
        with pytest.raises(httpx.HTTPStatusError):
            compare_banzuke(FakeBanzukeSource({}), "202509")
