"""Chart schemas for ROC and PR curves.

Pydantic models mirroring the C3.js chart configuration, so a curve can be
dumped to a dict or JSON and handed to a C3-compatible renderer as is.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field


class CurveKind(str, Enum):
    """Series label of a curve chart."""

    ROC = "ROC"
    PR = "PR"


class AxisTick(BaseModel):
    """Tick marks along an axis."""

    values: list[float] = Field(
        ...,
        description="Positions of the tick marks"
    )


class AxisPadding(BaseModel):
    """Padding below and above the y axis range."""

    bottom: float = Field(default=0.0)
    top: float = Field(default=0.0)


class ChartAxis(BaseModel):
    """Range, padding and ticks of one axis."""

    min: float = Field(default=0.0)
    max: float = Field(default=1.0)
    padding: Union[float, AxisPadding] = Field(
        default=0.0,
        description="Scalar padding (x axis) or bottom/top padding (y axis)"
    )
    tick: AxisTick = Field(...)


class ChartAxes(BaseModel):
    """Both axes of a chart."""

    x: ChartAxis
    y: ChartAxis


class ChartData(BaseModel):
    """Row-oriented chart data: a header row followed by one row per point."""

    x: str = Field(
        default="x",
        description="Name of the column holding x values"
    )
    rows: list[list[Union[float, str]]] = Field(
        ...,
        description="Header row ['x', <series label>] then [x, y] rows"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "x": "x",
                "rows": [["x", "ROC"], [0.0, 0.0], [0.0, 0.5], [1.0, 1.0]],
            }
        }


class CurveChart(BaseModel):
    """A single ROC or PR curve ready for rendering."""

    data: ChartData
    axis: ChartAxes

    @property
    def label(self) -> str:
        """Series label from the header row."""
        return str(self.data.rows[0][1])

    @property
    def points(self) -> list[tuple[float, float]]:
        """The (x, y) points of the curve, without the header row."""
        return [(float(x), float(y)) for x, y in self.data.rows[1:]]

    def to_dict(self) -> dict[str, Any]:
        """Plain dict payload for the renderer."""
        return self.model_dump(mode="json")
