"""Pixel-space geometry primitives shared by every analysis."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """Axis-aligned box. Origin top-left, y grows downward."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    width: float = Field(default=0.0, ge=0)
    height: float = Field(default=0.0, ge=0)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    @property
    def center(self) -> tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def area(self) -> float:
        return self.width * self.height

    def as_bbox(self) -> tuple[float, float, float, float]:
        """(xmin, ymin, xmax, ymax), the layout used by the spatial helpers."""
        return (self.x, self.y, self.right, self.bottom)

    def expanded(self, padding: float) -> Position:
        return Position(
            x=self.x - padding,
            y=self.y - padding,
            width=self.width + 2 * padding,
            height=self.height + 2 * padding,
        )

    @classmethod
    def from_bbox(cls, bbox: tuple[float, float, float, float]) -> Position:
        x0, y0, x1, y1 = bbox
        return cls(x=x0, y=y0, width=max(0.0, x1 - x0), height=max(0.0, y1 - y0))


class ImageDimensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = Field(default=1000.0, gt=0)
    height: float = Field(default=1000.0, gt=0)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def area(self) -> float:
        return self.width * self.height
