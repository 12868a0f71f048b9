from xml.sax.saxutils import quoteattr

from banzuke_delta.domain.drawable import DrawableDocument, Rect, TextRun


def _num(value: float) -> str:
    return f"{value:g}"


def _rect(rect: Rect) -> str:
    return (
        f'<rect x="{_num(rect.x)}" y="{_num(rect.y)}" width="{_num(rect.width)}" '
        f'height="{_num(rect.height)}" fill="{rect.fill}"/>'
    )


def _path(run: TextRun) -> str:
    return f'<path d={quoteattr(run.path_data)} fill="{run.fill}"/>'


def render_svg(document: DrawableDocument) -> str:
    """Serialize *document* as a standalone SVG with text drawn as paths."""
    lines: list[str] = []
    for primitive in document.primitives:
        if isinstance(primitive, Rect):
            lines.append(_rect(primitive))
        else:
            lines.append(_path(primitive))
    body = "\n".join(lines)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{document.width}" height="{document.height}">\n'
        f"{body}\n"
        "</svg>"
    )
