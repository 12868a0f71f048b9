"""Scoreboard layout.

Turns presentation rows into a fully positioned :class:`DrawableDocument`:
a dark canvas with a title block, one highlighted header row per tier and one
striped row per numbered position, East entries right-aligned against the
centre column and West entries left-aligned after it.

All horizontal alignment is computed here from the shaper's advance widths;
the shaper only ever draws text starting at a given x.
"""

import logging
import math
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from banzuke_delta.domain.drawable import Anchor, DrawableDocument, Primitive, Rect, TextRun
from banzuke_delta.domain.errors import TextRenderError
from banzuke_delta.domain.presentation import Presentation, PresentationRow
from banzuke_delta.domain.tier import TIER_ORDER, Side, Tier
from banzuke_delta.render.protocols import TextShaper

logger = logging.getLogger(__name__)

HEADER_HEIGHT = 64
SUBTITLE_HEIGHT = 28
FOOTER_HEIGHT = 24
CENTER_BUFFER = 50

FOOTER_TEXT = "Δ vs previous banzuke. East/West = ±0.5."

BACKGROUND = "#0b0c10"
TITLE_COLOR = "#ffffff"
SUBTITLE_COLOR = "#c0c0c0"
CAPTION_COLOR = "#8a8f98"
TIER_HEADER_FILL = "#141722"
TIER_NAME_COLOR = "#ffd479"
STRIPE_FILLS = ("#10131f", "#0f1220")
NEUTRAL_COLOR = "#e4e7ee"
RISE_COLOR = "#30d158"
FALL_COLOR = "#ff453a"
PROMOTED_COLOR = "#5ac8fa"


@dataclass(frozen=True)
class CanvasConfig:
    width: int = round(1200 * 0.6)
    row_height: int = 36
    pad: int = 24


@dataclass
class _Slot:
    east: PresentationRow | None = None
    west: PresentationRow | None = None


def color_for_delta(delta_label: str) -> str:
    if delta_label.startswith("+"):
        return RISE_COLOR
    if delta_label.startswith("-"):
        return FALL_COLOR
    if "Juryo" in delta_label:
        return PROMOTED_COLOR
    return NEUTRAL_COLOR


def format_name_delta(name: str, delta_label: str) -> str:
    """``"Hoshoryu (+1.5)"``; numeric labels are normalized to one decimal."""
    if delta_label == "0":
        return f"{name} (0)"
    try:
        value = float(delta_label)
    except ValueError:
        return f"{name} ({delta_label})"
    sign = "+" if value > 0 else ""
    return f"{name} ({sign}{value:.1f})"


def group_slots(rows: Iterable[PresentationRow]) -> dict[Tier, dict[int, _Slot]]:
    """Group rows by tier, then by numbered position into East/West slots.

    Tiers without rows are omitted; the result is in tier order.
    """
    grouped: dict[Tier, dict[int, _Slot]] = defaultdict(dict)
    for row in rows:
        slot = grouped[row.tier].setdefault(row.position, _Slot())
        if row.side is Side.EAST:
            slot.east = row
        else:
            slot.west = row
    return {tier: grouped[tier] for tier in TIER_ORDER if grouped.get(tier)}


class _TextPlacer:
    """Measures and outlines text runs, refusing to produce unusable output."""

    def __init__(self, shaper: TextShaper | None) -> None:
        if shaper is None:
            raise TextRenderError("A text shaper is required to lay out the document")
        self._shaper = shaper

    def place(
        self,
        text: str,
        x: float,
        y: float,
        size: float,
        fill: str,
        anchor: Anchor,
        *,
        center_y: bool = True,
    ) -> TextRun:
        width = self._shaper.advance_width(text, size)
        if text and (not math.isfinite(width) or width <= 0):
            raise TextRenderError(f"Text shaper returned unusable advance width {width!r} for {text!r}")

        if anchor is Anchor.END:
            x_start = x - width
        elif anchor is Anchor.MIDDLE:
            x_start = x - width / 2
        else:
            x_start = x

        baseline = self._middle_baseline(y, size) if center_y else y
        path_data = self._shaper.text_path(text, x_start, baseline, size)
        if text and not (path_data and path_data.strip()):
            raise TextRenderError(f"Text shaper returned no path data for {text!r}")

        return TextRun(
            text=text,
            x=x,
            y=baseline,
            size=size,
            fill=fill,
            anchor=anchor,
            x_start=x_start,
            path_data=path_data,
        )

    def _middle_baseline(self, y_center: float, size: float) -> float:
        ascender, descender = self._shaper.vertical_metrics(size)
        return y_center - (ascender + descender) / 2


def document_height(groups: dict[Tier, dict[int, _Slot]], config: CanvasConfig) -> int:
    top = config.pad + HEADER_HEIGHT + SUBTITLE_HEIGHT + config.pad
    row_count = sum(1 + len(slots) for slots in groups.values())
    return top + row_count * config.row_height + config.pad + FOOTER_HEIGHT


def layout_document(
    presentation: Presentation,
    shaper: TextShaper | None,
    config: CanvasConfig | None = None,
) -> DrawableDocument:
    """Lay out *presentation* as a drawable scoreboard.

    Raises:
        TextRenderError: If *shaper* is missing or cannot measure or outline
            any text run. No partial document is returned.
    """
    config = config or CanvasConfig()
    placer = _TextPlacer(shaper)

    groups = group_slots(presentation.rows)
    width = config.width
    height = document_height(groups, config)
    row_h = config.row_height
    pad = config.pad
    center_x = width // 2

    primitives: list[Primitive] = [Rect(0, 0, width, height, BACKGROUND)]
    primitives.append(placer.place(presentation.title, pad, pad + 32, 32, TITLE_COLOR, Anchor.START))
    primitives.append(placer.place(presentation.subtitle, pad, pad + 58, 18, SUBTITLE_COLOR, Anchor.START))

    y = pad + HEADER_HEIGHT + SUBTITLE_HEIGHT + pad
    if groups:
        caption_y = y - row_h / 2
        primitives.append(placer.place("East", center_x - CENTER_BUFFER, caption_y, 14, CAPTION_COLOR, Anchor.END))
        primitives.append(placer.place("West", center_x + CENTER_BUFFER, caption_y, 14, CAPTION_COLOR, Anchor.START))

    for tier, slots in groups.items():
        primitives.append(Rect(0, y, width, row_h, TIER_HEADER_FILL))
        primitives.append(placer.place(tier.value, center_x, y + row_h / 2, 16, TIER_NAME_COLOR, Anchor.MIDDLE))
        y += row_h

        for i, position in enumerate(sorted(slots)):
            slot = slots[position]
            mid = y + row_h / 2
            primitives.append(Rect(0, y, width, row_h, STRIPE_FILLS[i % 2]))

            if slot.east is not None:
                primitives.append(
                    placer.place(
                        format_name_delta(slot.east.shikona, slot.east.delta_label),
                        center_x - CENTER_BUFFER,
                        mid,
                        16,
                        color_for_delta(slot.east.delta_label),
                        Anchor.END,
                    )
                )

            primitives.append(
                placer.place(f"{tier.abbreviation}{position}", center_x, mid, 16, NEUTRAL_COLOR, Anchor.MIDDLE)
            )

            if slot.west is not None:
                primitives.append(
                    placer.place(
                        format_name_delta(slot.west.shikona, slot.west.delta_label),
                        center_x + CENTER_BUFFER,
                        mid,
                        16,
                        color_for_delta(slot.west.delta_label),
                        Anchor.START,
                    )
                )

            y += row_h

    primitives.append(placer.place(FOOTER_TEXT, pad, height - pad, 14, CAPTION_COLOR, Anchor.START, center_y=False))

    logger.debug("Laid out %d primitives on a %dx%d canvas", len(primitives), width, height)
    return DrawableDocument(
        width=width,
        height=height,
        title=presentation.title,
        subtitle=presentation.subtitle,
        primitives=tuple(primitives),
    )
