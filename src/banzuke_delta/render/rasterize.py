import logging
import re

from banzuke_delta.domain.errors import RasterizeError
from banzuke_delta.render.protocols import Rasterizer

logger = logging.getLogger(__name__)

_DRAWABLE_RE = re.compile(r"<(?:path|rect|circle|line|polygon)\b")


def has_drawable_content(svg: str) -> bool:
    return _DRAWABLE_RE.search(svg) is not None


def rasterize(svg: str, rasterizer: Rasterizer, width_hint: int | None = None) -> bytes:
    """Convert *svg* markup to image bytes with *rasterizer*.

    Markup without any drawable element is rejected before the rasterizer is
    called, so a broken pipeline never produces a blank image. Errors raised
    by the rasterizer itself propagate unchanged.
    """
    if not has_drawable_content(svg):
        raise RasterizeError("SVG appears empty.")
    image = rasterizer.render(svg, width_hint)
    logger.debug("Rasterized %d bytes of SVG into %d bytes", len(svg), len(image))
    return image
