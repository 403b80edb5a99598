from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from luvatrix_axes.axis import AxisDomain
from luvatrix_axes.constants import AxisId, Orientation
from luvatrix_axes.scales import Scale
from luvatrix_axes.sizing import LayoutMetrics
from luvatrix_axes.stretch import StretchFactor


@dataclass(frozen=True)
class AxisPlacement:
    axis_id: AxisId
    x: float
    y: float
    orientation: Orientation
    scale: Scale | None
    tick_values: tuple[Any, ...]
    tick_labels: tuple[str, ...]
    tick_count: float
    aria_hidden: bool

    @property
    def translate(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class AxisLabelPlacement:
    axis_id: AxisId
    text: str
    x: float
    y: float
    rotate_deg: int
    shape_x: float | None = None
    shape_y: float | None = None
    shape_step: float = 0.0

    def shape_position(self, shape_count: int) -> tuple[float, float] | None:
        if self.shape_x is None or self.shape_y is None:
            return None
        return (self.shape_x, self.shape_y + self.shape_step * shape_count)


@dataclass(frozen=True)
class ReferenceLinePlacement:
    axis_id: AxisId
    visible: bool
    start: tuple[float, float]
    end: tuple[float, float]
    translate: tuple[float, float]


@dataclass(frozen=True)
class AxisLayout:
    """Everything a backend needs to draw the axes without re-deriving geometry."""

    metrics: LayoutMetrics
    stretch: StretchFactor
    domains: dict[AxisId, AxisDomain]
    x: AxisPlacement
    y: AxisPlacement
    y2: AxisPlacement | None
    axis_info_row: AxisPlacement
    labels: tuple[AxisLabelPlacement, ...]
    reference_lines: tuple[ReferenceLinePlacement, ...]
    transition_ms: int

    def label_for(self, axis_id: AxisId) -> AxisLabelPlacement | None:
        for label in self.labels:
            if label.axis_id == axis_id:
                return label
        return None

    def reference_line_for(self, axis_id: AxisId) -> ReferenceLinePlacement | None:
        for line in self.reference_lines:
            if line.axis_id == axis_id:
                return line
        return None
