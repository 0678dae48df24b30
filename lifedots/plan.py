"""
Draw Plan
Backend independent draw primitives and the viewport transform
"""

from dataclasses import dataclass, field, replace
from typing import List, Tuple, Union

Color = Tuple[int, int, int, int]
Point = Tuple[float, float]

ALIGN_LEFT = "left"
ALIGN_RIGHT = "right"


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float
    color: Color


@dataclass(frozen=True)
class TextRun:
    """A single-style run of text; y is the baseline"""
    x: float
    y: float
    text: str
    font_size: float
    color: Color
    align: str = ALIGN_LEFT
    bold: bool = False


Primitive = Union[Circle, TextRun]


@dataclass(frozen=True)
class Transform:
    """
    Uniform scale about (cx, cy) followed by a translation.

    Maps p to c + scale * (p - c) + (tx, ty).
    """
    scale: float = 1.0
    cx: float = 0.0
    cy: float = 0.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def for_viewport(cls, width: float, height: float, scale: float,
                     offset_x: float, offset_y: float) -> "Transform":
        """Zoom about the viewport center, then pan by the fractional offsets"""
        return cls(
            scale=scale,
            cx=width / 2,
            cy=height / 2,
            tx=(offset_x - 0.5) * width,
            ty=(offset_y - 0.5) * height,
        )

    def apply(self, x: float, y: float) -> Point:
        return (
            self.cx + self.scale * (x - self.cx) + self.tx,
            self.cy + self.scale * (y - self.cy) + self.ty,
        )

    def length(self, value: float) -> float:
        return value * self.scale

    def apply_to(self, primitive: Primitive) -> Primitive:
        x, y = self.apply(primitive.x, primitive.y)
        if isinstance(primitive, Circle):
            return replace(primitive, x=x, y=y, radius=self.length(primitive.radius))
        return replace(primitive, x=x, y=y, font_size=self.length(primitive.font_size))


@dataclass
class DrawPlan:
    background: Color
    items: List[Primitive] = field(default_factory=list)

    def add(self, primitive: Primitive):
        self.items.append(primitive)

    def extend(self, primitives):
        self.items.extend(primitives)

    @property
    def circles(self) -> List[Circle]:
        return [item for item in self.items if isinstance(item, Circle)]

    @property
    def text_runs(self) -> List[TextRun]:
        return [item for item in self.items if isinstance(item, TextRun)]

    def transformed(self, transform: Transform) -> "DrawPlan":
        """Return a new plan with every coordinate, radius and font size mapped"""
        return DrawPlan(
            background=self.background,
            items=[transform.apply_to(item) for item in self.items],
        )
