from banzuke_delta.domain.presentation import Presentation, PresentationRow
from banzuke_delta.domain.tier import TIER_ORDER, Tier
from banzuke_delta.render.layout import FOOTER_TEXT


def render_text(presentation: Presentation) -> str:
    """Compact Markdown listing of *presentation*, one block per tier."""
    lines = [f"**{presentation.title}**", f"_{presentation.subtitle}_", ""]

    by_tier: dict[Tier, list[PresentationRow]] = {tier: [] for tier in TIER_ORDER}
    for row in presentation.rows:
        by_tier[row.tier].append(row)

    for tier in TIER_ORDER:
        rows = by_tier[tier]
        if not rows:
            continue
        lines.append(f"**{tier.value}**")
        for row in rows:
            lines.append(f"{row.rank_label.ljust(20)}  {row.shikona.ljust(16)}  {row.delta_label}")
        lines.append("")

    lines.append(f"_{FOOTER_TEXT}_")
    return "\n".join(lines)
