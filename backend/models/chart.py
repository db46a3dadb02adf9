"""Declarative chart descriptions handed to the frontend charting widget."""
from typing import Literal, Optional, Union
from pydantic import BaseModel, Field

# Slice/bar colours, in the order the widget cycles through them
PALETTE = [
    "rgba(255, 99, 132, 0.7)",
    "rgba(54, 162, 235, 0.7)",
    "rgba(255, 206, 86, 0.7)",
    "rgba(75, 192, 192, 0.7)",
    "rgba(153, 102, 255, 0.7)",
    "rgba(255, 159, 64, 0.7)",
    "rgba(199, 199, 199, 0.7)",
    "rgba(83, 102, 255, 0.7)",
    "rgba(78, 252, 3, 0.7)",
    "rgba(252, 45, 3, 0.7)",
]


class ChartSeries(BaseModel):
    label: Optional[str] = None
    values: list[Union[int, float]]
    colors: list[str] = Field(default_factory=list)   # one per value, or a single colour for the series


class ChartOptions(BaseModel):
    orientation: Literal["vertical", "horizontal"] = "vertical"
    show_axes: bool = True
    begin_at_zero: bool = True
    legend_position: Literal["top", "right", "bottom", "left"] = "top"
    x_axis_title: Optional[str] = None
    y_axis_title: Optional[str] = None


class ChartSpec(BaseModel):
    type: Literal["pie", "bar", "line"]
    title: str
    labels: list[str]
    series: list[ChartSeries]
    options: ChartOptions = Field(default_factory=ChartOptions)
