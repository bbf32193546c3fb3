from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    x: int
    y: int
    on_curve: bool

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "onCurve": self.on_curve}


@dataclass(frozen=True)
class Contour:
    points: Tuple[Point, ...]

    def to_dict(self) -> dict:
        return {"points": [point.to_dict() for point in self.points]}


@dataclass(frozen=True)
class SimpleGlyph:
    x_min: int
    y_min: int
    x_max: int
    y_max: int
    contours: Tuple[Contour, ...]

    @classmethod
    def empty(cls) -> "SimpleGlyph":
        return cls(x_min=0, y_min=0, x_max=0, y_max=0, contours=())

    @property
    def bbox(self) -> Tuple[int, int, int, int]:
        return self.x_min, self.y_min, self.x_max, self.y_max

    @property
    def point_count(self) -> int:
        return sum(len(contour.points) for contour in self.contours)

    def to_dict(self) -> dict:
        return {
            "xMin": self.x_min,
            "yMin": self.y_min,
            "xMax": self.x_max,
            "yMax": self.y_max,
            "contours": [contour.to_dict() for contour in self.contours],
        }


@dataclass(frozen=True)
class DecodeFailure:
    character: str
    glyph_id: int | None
    error: Exception
