from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class Anchor(Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str


@dataclass(frozen=True)
class TextRun:
    text: str
    x: float  # anchor point
    y: float  # baseline actually used for the path
    size: float
    fill: str
    anchor: Anchor
    x_start: float  # left edge after alignment
    path_data: str


Primitive: TypeAlias = Rect | TextRun


@dataclass(frozen=True)
class DrawableDocument:
    width: int
    height: int
    title: str
    subtitle: str
    primitives: tuple[Primitive, ...]

    @property
    def rects(self) -> tuple[Rect, ...]:
        return tuple(p for p in self.primitives if isinstance(p, Rect))

    @property
    def text_runs(self) -> tuple[TextRun, ...]:
        return tuple(p for p in self.primitives if isinstance(p, TextRun))
