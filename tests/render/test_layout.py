import pytest

from banzuke_delta.domain.diff import NEW_LABEL, PROMOTED_LABEL
from banzuke_delta.domain.drawable import Anchor, TextRun
from banzuke_delta.domain.errors import TextRenderError
from banzuke_delta.domain.presentation import Presentation, PresentationRow
from banzuke_delta.domain.tier import Side, Tier
from banzuke_delta.render.layout import (
    FALL_COLOR,
    FOOTER_TEXT,
    NEUTRAL_COLOR,
    PROMOTED_COLOR,
    RISE_COLOR,
    STRIPE_FILLS,
    TIER_HEADER_FILL,
    CanvasConfig,
    color_for_delta,
    format_name_delta,
    layout_document,
)
from tests.fakes.shaper import EmptyPathShaper, FakeShaper, NanWidthShaper, ZeroWidthShaper


def _row(name: str, tier: Tier, position: int, side: Side = Side.EAST, delta: str = "0") -> PresentationRow:
    return PresentationRow(
        tier=tier,
        rank_label=f"{tier.value} {position} {side.value}",
        shikona=name,
        delta_label=delta,
        side=side,
        position=position,
    )


def _presentation(*rows: PresentationRow) -> Presentation:
    return Presentation(title="September 2025 Basho", subtitle="vs July 2025", rows=rows)


def _run(runs: tuple[TextRun, ...], text: str) -> TextRun:
    return next(r for r in runs if r.text == text)


class TestDeltaFormatting:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("+1.0", RISE_COLOR),
            ("-0.5", FALL_COLOR),
            (PROMOTED_LABEL, PROMOTED_COLOR),
            (NEW_LABEL, NEUTRAL_COLOR),
            ("0", NEUTRAL_COLOR),
        ],
    )
    def test_color_for_delta(self, label: str, expected: str) -> None:
        assert color_for_delta(label) == expected

    def test_format_name_delta(self) -> None:
        assert format_name_delta("Onosato", "0") == "Onosato (0)"
        assert format_name_delta("Onosato", "+1.5") == "Onosato (+1.5)"
        assert format_name_delta("Onosato", "-2") == "Onosato (-2.0)"
        assert format_name_delta("Onosato", NEW_LABEL) == "Onosato (NEW)"
        assert format_name_delta("Onosato", PROMOTED_LABEL) == f"Onosato ({PROMOTED_LABEL})"


class TestEmptyDocument:
    def test_header_subtitle_and_footer_only(self, shaper: FakeShaper) -> None:
        doc = layout_document(_presentation(), shaper)

        assert doc.width == 720
        # pad + header + subtitle + pad, then pad + footer
        assert doc.height == 24 + 64 + 28 + 24 + 24 + 24
        assert [r.text for r in doc.text_runs] == ["September 2025 Basho", "vs July 2025", FOOTER_TEXT]
        assert len(doc.rects) == 1
        assert not [r for r in doc.rects if r.fill == TIER_HEADER_FILL]


class TestRows:
    def test_height_counts_header_and_distinct_positions(self, shaper: FakeShaper) -> None:
        doc = layout_document(
            _presentation(
                _row("A", Tier.MAEGASHIRA, 1),
                _row("B", Tier.MAEGASHIRA, 1, Side.WEST),
                _row("C", Tier.MAEGASHIRA, 2, Side.WEST),
            ),
            shaper,
        )

        assert doc.height == 140 + (1 + 2) * 36 + 48
        assert [r.fill for r in doc.rects[1:]] == [TIER_HEADER_FILL, STRIPE_FILLS[0], STRIPE_FILLS[1]]
        assert all(r.width == 720 and r.height == 36 for r in doc.rects[1:])

    def test_east_right_aligned_west_left_aligned(self, shaper: FakeShaper) -> None:
        doc = layout_document(
            _presentation(
                _row("Kotozakura", Tier.OZEKI, 1, Side.EAST, "+1.0"),
                _row("Hoshoryu", Tier.OZEKI, 1, Side.WEST, "-0.5"),
            ),
            shaper,
        )
        runs = doc.text_runs

        east = _run(runs, "Kotozakura (+1.0)")
        assert east.anchor is Anchor.END
        assert east.x == 310
        assert east.x_start == pytest.approx(310 - shaper.advance_width(east.text, 16))
        assert east.fill == RISE_COLOR

        west = _run(runs, "Hoshoryu (-0.5)")
        assert west.anchor is Anchor.START
        assert west.x_start == 410
        assert west.fill == FALL_COLOR

        label = _run(runs, "O1")
        assert label.anchor is Anchor.MIDDLE
        assert label.x == 360
        assert label.x_start == pytest.approx(360 - shaper.advance_width("O1", 16) / 2)
        assert label.fill == NEUTRAL_COLOR

    def test_index_label_drawn_without_east_entry(self, shaper: FakeShaper) -> None:
        doc = layout_document(_presentation(_row("Solo", Tier.MAEGASHIRA, 4, Side.WEST, NEW_LABEL)), shaper)
        texts = [r.text for r in doc.text_runs]

        assert "M4" in texts
        assert "Solo (NEW)" in texts
        assert _run(doc.text_runs, "Solo (NEW)").fill == NEUTRAL_COLOR

    def test_tiers_in_hierarchy_order_and_empty_tiers_dropped(self, shaper: FakeShaper) -> None:
        doc = layout_document(
            _presentation(_row("A", Tier.MAEGASHIRA, 1), _row("B", Tier.YOKOZUNA, 1)),
            shaper,
        )
        texts = [r.text for r in doc.text_runs]

        assert texts.index("Yokozuna") < texts.index("Maegashira")
        assert "Ozeki" not in texts
        assert len([r for r in doc.rects if r.fill == TIER_HEADER_FILL]) == 2

    def test_positions_ascending_within_tier(self, shaper: FakeShaper) -> None:
        doc = layout_document(
            _presentation(_row("A", Tier.MAEGASHIRA, 3), _row("B", Tier.MAEGASHIRA, 1)),
            shaper,
        )
        texts = [r.text for r in doc.text_runs]
        assert texts.index("M1") < texts.index("M3")

    def test_column_captions_above_first_band(self, shaper: FakeShaper) -> None:
        doc = layout_document(_presentation(_row("A", Tier.KOMUSUBI, 1)), shaper)

        east = _run(doc.text_runs, "East")
        west = _run(doc.text_runs, "West")
        assert east.anchor is Anchor.END and east.x == 310
        assert west.anchor is Anchor.START and west.x == 410
        first_band_top = doc.rects[1].y
        assert east.y < first_band_top

    def test_custom_canvas(self, shaper: FakeShaper) -> None:
        doc = layout_document(
            _presentation(_row("A", Tier.SEKIWAKE, 1)),
            shaper,
            CanvasConfig(width=1000, row_height=40, pad=10),
        )
        assert doc.width == 1000
        assert doc.height == 10 + 64 + 28 + 10 + 2 * 40 + 10 + 24
        assert _run(doc.text_runs, "S1").x == 500


class TestBaselines:
    def test_centered_runs_use_vertical_metrics(self, shaper: FakeShaper) -> None:
        doc = layout_document(_presentation(), shaper)
        title = _run(doc.text_runs, "September 2025 Basho")
        # centre pad + 32 = 56, shifted by (ascender + descender) / 2 = (25.6 - 6.4) / 2
        assert title.y == pytest.approx(56 - 9.6)

    def test_footer_sits_on_bottom_padding_line(self, shaper: FakeShaper) -> None:
        doc = layout_document(_presentation(), shaper)
        footer = _run(doc.text_runs, FOOTER_TEXT)
        assert footer.y == doc.height - 24
        assert footer.x_start == 24


class TestTextFailures:
    def test_missing_shaper(self) -> None:
        with pytest.raises(TextRenderError):
            layout_document(_presentation(), None)

    def test_zero_advance_width(self) -> None:
        with pytest.raises(TextRenderError, match="advance width"):
            layout_document(_presentation(), ZeroWidthShaper())

    def test_non_finite_advance_width(self) -> None:
        with pytest.raises(TextRenderError):
            layout_document(_presentation(), NanWidthShaper())

    def test_empty_path_data(self) -> None:
        with pytest.raises(TextRenderError, match="no path data"):
            layout_document(_presentation(_row("A", Tier.MAEGASHIRA, 1)), EmptyPathShaper())
