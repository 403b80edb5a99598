"""Axis domain, outlier stretch and layout engine for Luvatrix charts."""

from luvatrix_axes.assembler import assemble_axes, rendering_domains
from luvatrix_axes.axis import AxesDefinition, AxisDefinition, AxisDomain, AxisTicks, DataRange, has_y2_axis
from luvatrix_axes.chart import AxisChart
from luvatrix_axes.config import (
    ChartConfig,
    ChartSettings,
    Padding,
    chart_config_from_dict,
    gantt_config_from_dict,
    validate_gantt_input,
)
from luvatrix_axes.constants import AxisType, Orientation
from luvatrix_axes.content import AxisExtent, ContentItem, GroupedContent, SimpleContent, content_from_dict
from luvatrix_axes.data_range import update_range
from luvatrix_axes.errors import AxisConfigError, AxisLayoutError
from luvatrix_axes.formatting import LocaleTickFormatProvider, TickFormatProvider, tick_formatter
from luvatrix_axes.layout import AxisLabelPlacement, AxisLayout, AxisPlacement, ReferenceLinePlacement
from luvatrix_axes.measure import PillowTextMeasurer, TextMeasurer
from luvatrix_axes.sizing import AxisSizes, LabelMetrics, LayoutMetrics, size_axes, size_labels
from luvatrix_axes.stretch import StretchFactor, compute_stretch, stretch_domain

__all__ = [
    "AxesDefinition",
    "AxisChart",
    "AxisConfigError",
    "AxisDefinition",
    "AxisDomain",
    "AxisExtent",
    "AxisLabelPlacement",
    "AxisLayout",
    "AxisLayoutError",
    "AxisPlacement",
    "AxisSizes",
    "AxisTicks",
    "AxisType",
    "ChartConfig",
    "ChartSettings",
    "ContentItem",
    "DataRange",
    "GroupedContent",
    "LabelMetrics",
    "LayoutMetrics",
    "LocaleTickFormatProvider",
    "Orientation",
    "Padding",
    "PillowTextMeasurer",
    "ReferenceLinePlacement",
    "SimpleContent",
    "StretchFactor",
    "TextMeasurer",
    "TickFormatProvider",
    "assemble_axes",
    "chart_config_from_dict",
    "compute_stretch",
    "content_from_dict",
    "gantt_config_from_dict",
    "has_y2_axis",
    "rendering_domains",
    "size_axes",
    "size_labels",
    "stretch_domain",
    "tick_formatter",
    "update_range",
    "validate_gantt_input",
]
