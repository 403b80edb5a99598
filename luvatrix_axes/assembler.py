from __future__ import annotations

import logging
from typing import Any

from luvatrix_axes import positions
from luvatrix_axes.axis import AxesDefinition, AxisDefinition, AxisDomain, has_y2_axis
from luvatrix_axes.config import ChartConfig
from luvatrix_axes.constants import X_AXIS, Y2_AXIS, Y_AXIS, AxisId, AxisType, Orientation
from luvatrix_axes.errors import AxisLayoutError
from luvatrix_axes.formatting import LocaleTickFormatProvider, TickFormatProvider, format_tick_labels
from luvatrix_axes.layout import AxisLabelPlacement, AxisLayout, AxisPlacement, ReferenceLinePlacement
from luvatrix_axes.measure import TextMeasurer
from luvatrix_axes.scales import Scale, build_scale, process_tick_values
from luvatrix_axes.sizing import LayoutMetrics, size_axes, size_labels
from luvatrix_axes.stretch import StretchFactor, compute_stretch, stretch_domain

LOGGER = logging.getLogger(__name__)


def rendering_domains(axes: AxesDefinition, stretch: StretchFactor) -> dict[AxisId, AxisDomain]:
    domains: dict[AxisId, AxisDomain] = {}
    if axes.x.domain is not None:
        domains[X_AXIS] = axes.x.domain
    for axis_id in axes.vertical_axes():
        axis = axes.get(axis_id)
        if axis is not None and axis.domain is not None:
            domains[axis_id] = stretch_domain(axis.domain, stretch)
    return domains


def assemble_axes(
    config: ChartConfig,
    measurer: TextMeasurer,
    formatting: TickFormatProvider | None = None,
) -> AxisLayout:
    """Run the layout pipeline in order: labels, axis sizes, domains, positions, scales."""
    if config.canvas_width <= 0 or config.height <= 0:
        raise AxisLayoutError(f"canvas must be positive, got {config.canvas_width}x{config.height}")
    provider = formatting if formatting is not None else LocaleTickFormatProvider(config.locale)
    axes = config.axes

    labels = size_labels(config, measurer)
    metrics = size_axes(config, labels, measurer)
    stretch = compute_stretch(axes)
    domains = rendering_domains(axes, stretch)

    x_scale = _scale_for(axes.x, domains.get(X_AXIS), positions.x_axis_range(config, metrics))
    y_scale = _scale_for(axes.y, domains.get(Y_AXIS), positions.y_axis_range(config))

    x_placement = _placement(
        X_AXIS,
        axes.x,
        x_scale,
        provider,
        x=positions.x_axis_x(config, metrics),
        y=positions.x_axis_y(config, metrics),
        orientation=axes.x.orientation,
        tick_count=positions.x_tick_count(config, metrics),
    )
    y_placement = _placement(
        Y_AXIS,
        axes.y,
        y_scale,
        provider,
        x=positions.y_axis_x(config, metrics),
        y=positions.y_axis_y(config, metrics),
        orientation=Orientation.LEFT,
        tick_count=positions.y_tick_count(config),
    )
    y2_placement: AxisPlacement | None = None
    y2_scale: Scale | None = None
    if has_y2_axis(axes) and axes.y2 is not None:
        y2_scale = _scale_for(axes.y2, domains.get(Y2_AXIS), positions.y_axis_range(config))
        y2_placement = _placement(
            Y2_AXIS,
            axes.y2,
            y2_scale,
            provider,
            x=positions.y2_axis_x(config, metrics),
            y=positions.y2_axis_y(config, metrics),
            orientation=Orientation.RIGHT,
            tick_count=positions.y_tick_count(config),
        )
    info_row = AxisPlacement(
        axis_id=X_AXIS,
        x=positions.x_axis_x(config, metrics),
        y=positions.axis_info_row_y(config, metrics),
        orientation=positions.axis_info_row_orientation(config),
        scale=x_scale,
        tick_values=(),
        tick_labels=(),
        tick_count=0.0,
        aria_hidden=True,
    )

    reference_lines = [_reference_line(Y_AXIS, config, metrics, domains, x_scale, y_scale)]
    if y2_placement is not None:
        reference_lines.append(_reference_line(Y2_AXIS, config, metrics, domains, x_scale, y2_scale))

    LOGGER.debug(
        "axis layout: sizes=%s labels=%s stretch=%s",
        metrics.axis_sizes,
        metrics.labels,
        stretch,
    )
    return AxisLayout(
        metrics=metrics,
        stretch=stretch,
        domains=domains,
        x=x_placement,
        y=y_placement,
        y2=y2_placement,
        axis_info_row=info_row,
        labels=_label_placements(config, metrics),
        reference_lines=tuple(line for line in reference_lines if line is not None),
        transition_ms=config.settings.transition_ms,
    )


def _scale_for(axis: AxisDefinition, domain: AxisDomain | None, value_range: tuple[float, float]) -> Scale | None:
    if domain is None:
        return None
    return build_scale(axis.type, domain, value_range, rounding=axis.range_rounding)


def _placement(
    axis_id: AxisId,
    axis: AxisDefinition,
    scale: Scale | None,
    provider: TickFormatProvider,
    *,
    x: float,
    y: float,
    orientation: Orientation,
    tick_count: float,
) -> AxisPlacement:
    values: list[Any] = []
    if scale is not None:
        explicit = process_tick_values(axis.ticks.values, axis.type)
        if explicit is not None:
            values = explicit
        elif axis.type == AxisType.TIME_SERIES:
            values = list(scale.ticks(tick_count))
        else:
            values = [float(v) for v in scale.ticks(tick_count)]
    tick_labels = format_tick_labels(provider, axis.ticks.format, axis.type, values) if values else []
    return AxisPlacement(
        axis_id=axis_id,
        x=x,
        y=y,
        orientation=orientation,
        scale=scale,
        tick_values=tuple(values),
        tick_labels=tuple(tick_labels),
        tick_count=tick_count,
        aria_hidden=not axis.show,
    )


def _reference_line(
    axis_id: AxisId,
    config: ChartConfig,
    metrics: LayoutMetrics,
    domains: dict[AxisId, AxisDomain],
    x_scale: Scale | None,
    y_scale: Scale | None,
) -> ReferenceLinePlacement | None:
    domain = domains.get(axis_id)
    x_domain = domains.get(X_AXIS)
    if domain is None or x_domain is None or x_scale is None or y_scale is None:
        return None
    y_zero = y_scale.map(0.0)
    return ReferenceLinePlacement(
        axis_id=axis_id,
        visible=positions.straddles_zero(domain),
        start=(x_scale.map(x_domain.lower_limit), y_zero),  # type: ignore[arg-type]
        end=(x_scale.map(x_domain.upper_limit), y_zero),  # type: ignore[arg-type]
        translate=(positions.y_axis_x(config, metrics), positions.y_axis_y(config, metrics)),
    )


def _label_placements(config: ChartConfig, metrics: LayoutMetrics) -> tuple[AxisLabelPlacement, ...]:
    if not config.show_label:
        return ()
    axes = config.axes
    out: list[AxisLabelPlacement] = []
    if axes.x.label:
        out.append(
            AxisLabelPlacement(
                axis_id=X_AXIS,
                text=axes.x.label,
                x=positions.x_axis_label_x(config, metrics),
                y=positions.x_axis_label_y(config, metrics),
                rotate_deg=positions.rotation_for_axis(X_AXIS),
            )
        )
    if axes.y.label:
        out.append(
            AxisLabelPlacement(
                axis_id=Y_AXIS,
                text=axes.y.label,
                x=positions.y_axis_label_x(config, metrics),
                y=positions.y_axis_label_y(config, metrics),
                rotate_deg=positions.rotation_for_axis(Y_AXIS),
                shape_x=positions.y_axis_label_shape_x(config, metrics),
                shape_y=positions.y_axis_label_shape_y(config, metrics, 0),
                shape_step=positions.label_shape_step(Y_AXIS),
            )
        )
    if has_y2_axis(axes) and axes.y2 is not None and axes.y2.label:
        out.append(
            AxisLabelPlacement(
                axis_id=Y2_AXIS,
                text=axes.y2.label,
                x=positions.y2_axis_label_x(config, metrics),
                y=positions.y_axis_label_y(config, metrics),
                rotate_deg=positions.rotation_for_axis(Y2_AXIS),
                shape_x=positions.y2_axis_label_shape_x(config, metrics),
                shape_y=positions.y2_axis_label_shape_y(config, metrics, 0),
                shape_step=positions.label_shape_step(Y2_AXIS),
            )
        )
    return tuple(out)
