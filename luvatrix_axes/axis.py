from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Union

from luvatrix_axes.constants import AxisId, AxisType, Orientation, X_AXIS, Y2_AXIS, Y_AXIS


DomainValue = Union[float, dt.datetime]


def domain_value_to_float(value: DomainValue) -> float:
    if isinstance(value, dt.datetime):
        return value.timestamp()
    return float(value)


@dataclass(frozen=True)
class AxisDomain:
    lower_limit: DomainValue
    upper_limit: DomainValue

    def as_floats(self) -> tuple[float, float]:
        return (domain_value_to_float(self.lower_limit), domain_value_to_float(self.upper_limit))

    @property
    def is_time(self) -> bool:
        return isinstance(self.lower_limit, dt.datetime)


@dataclass
class DataRange:
    """Running extent of the data seen on one axis.

    `old_min`/`old_max` keep one generation of history so a backend can
    animate from the previous range to the current one.
    """

    min: float | None = None
    max: float | None = None
    old_min: float | None = None
    old_max: float | None = None
    is_range_modified: bool = False

    @property
    def has_snapshot(self) -> bool:
        return self.min is not None and self.max is not None


@dataclass(frozen=True)
class AxisTicks:
    values: tuple[Any, ...] | None = None
    format: str | None = None


@dataclass
class AxisDefinition:
    show: bool = True
    type: AxisType = AxisType.DEFAULT
    domain: AxisDomain | None = None
    ticks: AxisTicks = field(default_factory=AxisTicks)
    range_rounding: bool = False
    label: str | None = None
    orientation: Orientation = Orientation.BOTTOM
    data_range: DataRange = field(default_factory=DataRange)

    def __post_init__(self) -> None:
        if self.type == AxisType.TIME_SERIES and self.domain is not None and not self.domain.is_time:
            raise ValueError("time series axis domain must use datetime limits")


@dataclass
class AxesDefinition:
    x: AxisDefinition
    y: AxisDefinition
    y2: AxisDefinition | None = None

    def get(self, axis_id: AxisId) -> AxisDefinition | None:
        if axis_id == X_AXIS:
            return self.x
        if axis_id == Y_AXIS:
            return self.y
        if axis_id == Y2_AXIS:
            return self.y2
        raise ValueError(f"unknown axis id: {axis_id}")

    def vertical_axes(self) -> tuple[AxisId, ...]:
        if has_y2_axis(self):
            return (Y_AXIS, Y2_AXIS)
        return (Y_AXIS,)


def has_y2_axis(axes: AxesDefinition) -> bool:
    return axes.y2 is not None and axes.y2.show
