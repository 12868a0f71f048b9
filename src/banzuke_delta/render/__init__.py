"""Rendering of banzuke presentations: layout, SVG, Markdown and rasterization."""

from banzuke_delta.render.layout import CanvasConfig, layout_document
from banzuke_delta.render.protocols import Rasterizer, TextShaper
from banzuke_delta.render.rasterize import rasterize
from banzuke_delta.render.svg import render_svg
from banzuke_delta.render.text import render_text

__all__ = [
    "CanvasConfig",
    "Rasterizer",
    "TextShaper",
    "layout_document",
    "rasterize",
    "render_svg",
    "render_text",
]
