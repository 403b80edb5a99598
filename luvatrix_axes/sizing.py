from __future__ import annotations

from dataclasses import dataclass

from luvatrix_axes.axis import AxisDefinition, has_y2_axis
from luvatrix_axes.config import ChartConfig
from luvatrix_axes.constants import DEFAULT_TICK_COUNT, Y2_AXIS, Y2_FALLBACK_WIDTH, Y_AXIS
from luvatrix_axes.formatting import LocaleTickFormatProvider, format_tick_labels
from luvatrix_axes.measure import TextMeasurer, axis_footprint
from luvatrix_axes.positions import rotation_for_axis
from luvatrix_axes.scales import build_scale


@dataclass(frozen=True)
class LabelMetrics:
    x_height: float = 0.0
    y_width: float = 0.0
    y2_width: float = 0.0
    axis_info_row_label_height: float = 0.0


@dataclass(frozen=True)
class AxisSizes:
    x: float = 0.0
    y: float = 0.0
    y2: float = 0.0


@dataclass(frozen=True)
class LayoutMetrics:
    labels: LabelMetrics
    axis_sizes: AxisSizes


def size_labels(config: ChartConfig, measurer: TextMeasurer) -> LabelMetrics:
    if not config.show_label:
        return LabelMetrics()
    axes = config.axes
    x_height = 0.0
    y_width = 0.0
    y2_width = 0.0
    if axes.x.label:
        x_height = measurer.text_size(axes.x.label)[1]
    if axes.y.label:
        y_width = measurer.text_size(axes.y.label, rotate_deg=rotation_for_axis(Y_AXIS))[0]
    if has_y2_axis(axes) and axes.y2 is not None and axes.y2.label:
        y2_width = measurer.text_size(axes.y2.label, rotate_deg=rotation_for_axis(Y2_AXIS))[0]
    return LabelMetrics(x_height=x_height, y_width=y_width, y2_width=y2_width)


def size_axes(config: ChartConfig, labels: LabelMetrics, measurer: TextMeasurer) -> LayoutMetrics:
    padding = config.padding
    if padding.has_custom_padding:
        sizes = AxisSizes(x=padding.bottom, y=padding.left, y2=padding.right)
        return LayoutMetrics(labels=labels, axis_sizes=sizes)

    axes = config.axes
    y_width = _vertical_axis_width(axes.y, config, measurer) + padding.left
    if has_y2_axis(axes) and axes.y2 is not None:
        y2_width = _vertical_axis_width(axes.y2, config, measurer) + padding.right
    else:
        y2_width = Y2_FALLBACK_WIDTH + padding.right
    x_height = _x_axis_height(config, measurer)
    return LayoutMetrics(labels=labels, axis_sizes=AxisSizes(x=x_height, y=y_width, y2=y2_width))


def _vertical_axis_width(axis: AxisDefinition, config: ChartConfig, measurer: TextMeasurer) -> float:
    if not axis.show or axis.domain is None:
        return 0.0
    scale = build_scale(axis.type, axis.domain, (config.height, 0.0))
    ticks = scale.ticks(DEFAULT_TICK_COUNT)
    labels = format_tick_labels(LocaleTickFormatProvider(), None, axis.type, list(ticks))
    return axis_footprint(measurer, labels, vertical=True)


def _x_axis_height(config: ChartConfig, measurer: TextMeasurer) -> float:
    axis = config.axes.x
    if not axis.show or axis.domain is None:
        return 0.0
    scale = build_scale(axis.type, axis.domain, (0.0, config.canvas_width))
    ticks = list(scale.ticks(DEFAULT_TICK_COUNT))
    labels = format_tick_labels(LocaleTickFormatProvider(), None, axis.type, ticks)
    return axis_footprint(measurer, labels, vertical=False)
