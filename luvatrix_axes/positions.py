"""Pixel placement of axes, labels and the axis info row.

Every function is a pure function of the chart config and the layout metrics
produced by `luvatrix_axes.sizing`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from luvatrix_axes.axis import AxisDomain
from luvatrix_axes.constants import (
    BASE_LABEL_ICON_HEIGHT_PADDING,
    DEFAULT_Y_AXIS_SPACING,
    MAX_TICK_VARIANCE,
    MIN_TICKS,
    Y2_AXIS,
    Y_AXIS,
    AxisId,
    Orientation,
)

if TYPE_CHECKING:
    from luvatrix_axes.config import ChartConfig
    from luvatrix_axes.sizing import LayoutMetrics


def rotation_for_axis(axis_id: AxisId) -> int:
    if axis_id == Y_AXIS:
        return -90
    if axis_id == Y2_AXIS:
        return 90
    return 0


def is_x_axis_top(config: ChartConfig) -> bool:
    return config.axes.x.orientation == Orientation.TOP


def vertical_padding(config: ChartConfig, metrics: LayoutMetrics) -> float:
    if not is_x_axis_top(config):
        return config.padding.bottom
    if not metrics.labels.x_height:
        return config.padding.top
    return metrics.labels.x_height * 2 + config.padding.top


def y_axis_height(config: ChartConfig) -> float:
    return config.height


def x_axis_width(config: ChartConfig, metrics: LayoutMetrics) -> float:
    sizes = metrics.axis_sizes
    labels = metrics.labels
    return config.canvas_width - sizes.y - sizes.y2 - labels.y_width - labels.y2_width


def x_axis_x(config: ChartConfig, metrics: LayoutMetrics) -> float:
    return metrics.axis_sizes.y + metrics.labels.y_width


def x_axis_y(config: ChartConfig, metrics: LayoutMetrics) -> float:
    if is_x_axis_top(config):
        return vertical_padding(config, metrics)
    return y_axis_height(config) + vertical_padding(config, metrics)


def y_axis_x(config: ChartConfig, metrics: LayoutMetrics) -> float:
    return x_axis_x(config, metrics)


def y_axis_y(config: ChartConfig, metrics: LayoutMetrics) -> float:
    return vertical_padding(config, metrics)


def y2_axis_x(config: ChartConfig, metrics: LayoutMetrics) -> float:
    return y_axis_x(config, metrics) + x_axis_width(config, metrics)


def y2_axis_y(config: ChartConfig, metrics: LayoutMetrics) -> float:
    return vertical_padding(config, metrics)


def axis_info_row_orientation(config: ChartConfig) -> Orientation:
    return Orientation.BOTTOM if is_x_axis_top(config) else Orientation.TOP


def axis_info_row_y(config: ChartConfig, metrics: LayoutMetrics) -> float:
    if is_x_axis_top(config):
        return y_axis_height(config) + vertical_padding(config, metrics)
    return vertical_padding(config, metrics)


def x_axis_label_x(config: ChartConfig, metrics: LayoutMetrics) -> float:
    return x_axis_x(config, metrics) + x_axis_width(config, metrics) / 2


def x_axis_label_y(config: ChartConfig, metrics: LayoutMetrics) -> float:
    labels = metrics.labels
    if is_x_axis_top(config):
        return vertical_padding(config, metrics) - labels.x_height * 2
    return (
        x_axis_y(config, metrics)
        + labels.x_height * 2
        + (config.padding.bottom - labels.axis_info_row_label_height) * 2
    )


def y_axis_label_x(config: ChartConfig, metrics: LayoutMetrics) -> float:
    return config.padding.left - metrics.labels.y_width


def y_axis_label_y(config: ChartConfig, metrics: LayoutMetrics) -> float:
    return y_axis_y(config, metrics) + (y_axis_height(config) - config.padding.left / 2) / 2


def y_axis_label_shape_x(config: ChartConfig, metrics: LayoutMetrics) -> float:
    return y_axis_label_x(config, metrics) + BASE_LABEL_ICON_HEIGHT_PADDING


def y_axis_label_shape_y(config: ChartConfig, metrics: LayoutMetrics, shape_count: int) -> float:
    return y_axis_label_y(config, metrics) + label_shape_step(Y_AXIS) * shape_count


def y2_axis_label_x(config: ChartConfig, metrics: LayoutMetrics) -> float:
    return y2_axis_x(config, metrics) + config.padding.right + metrics.labels.y2_width


def y2_axis_label_shape_x(config: ChartConfig, metrics: LayoutMetrics) -> float:
    return y2_axis_label_x(config, metrics) - BASE_LABEL_ICON_HEIGHT_PADDING


def y2_axis_label_shape_y(config: ChartConfig, metrics: LayoutMetrics, shape_count: int) -> float:
    return y_axis_label_y(config, metrics) + label_shape_step(Y2_AXIS) * shape_count


def label_shape_step(axis_id: AxisId) -> float:
    # Y labels read bottom-up, Y2 labels top-down.
    step = BASE_LABEL_ICON_HEIGHT_PADDING / 1.5
    return -step if axis_id == Y2_AXIS else step


def x_axis_range(config: ChartConfig, metrics: LayoutMetrics) -> tuple[float, float]:
    return (0.0, x_axis_width(config, metrics))


def y_axis_range(config: ChartConfig) -> tuple[float, float]:
    return (y_axis_height(config), 0.0)


def x_tick_count(config: ChartConfig, metrics: LayoutMetrics) -> float:
    return max(x_axis_width(config, metrics) / MAX_TICK_VARIANCE, MIN_TICKS)


def y_tick_count(config: ChartConfig) -> float:
    return y_axis_height(config) / DEFAULT_Y_AXIS_SPACING


def straddles_zero(domain: AxisDomain) -> bool:
    lower, upper = domain.as_floats()
    return min(lower, upper) < 0 < max(lower, upper)
