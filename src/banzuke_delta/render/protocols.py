from typing import Protocol, runtime_checkable


@runtime_checkable
class TextShaper(Protocol):
    """Font-backed text measurement and outline generation.

    Implementations wrap a parsed font; all sizes and results are in pixels.
    """

    def advance_width(self, text: str, size: float) -> float:
        """Kerned advance width of *text* at *size*."""
        ...

    def text_path(self, text: str, x: float, baseline: float, size: float) -> str:
        """SVG path data for *text* starting at *x* on *baseline*."""
        ...

    def vertical_metrics(self, size: float) -> tuple[float, float]:
        """Ascender and descender (negative) at *size*."""
        ...


@runtime_checkable
class Rasterizer(Protocol):
    def render(self, svg: str, width_hint: int | None = None) -> bytes: ...
