from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from luvatrix_axes.axis import AxesDefinition, AxisDefinition, AxisDomain, AxisTicks, DomainValue
from luvatrix_axes.constants import (
    DEFAULT_LOCALE,
    DEFAULT_TRANSITION_MS,
    PADDING,
    AxisType,
    Orientation,
)
from luvatrix_axes.errors import AxisConfigError
from luvatrix_axes.formatting import LOCALE_SEPARATORS


@dataclass(frozen=True)
class Padding:
    top: float = PADDING.top
    bottom: float = PADDING.bottom
    left: float = PADDING.left
    right: float = PADDING.right
    has_custom_padding: bool = False

    def __post_init__(self) -> None:
        for name in ("top", "bottom", "left", "right"):
            if getattr(self, name) < 0:
                raise ValueError(f"Padding.{name} must be >= 0")


@dataclass(frozen=True)
class ChartSettings:
    """Backend-only settings carried through the layout untouched."""

    transition_ms: int = DEFAULT_TRANSITION_MS


@dataclass
class ChartConfig:
    axes: AxesDefinition
    canvas_width: float = 0.0
    height: float = 0.0
    padding: Padding = field(default_factory=Padding)
    show_label: bool = True
    locale: str = DEFAULT_LOCALE
    settings: ChartSettings = field(default_factory=ChartSettings)
    bind_to: str | None = None

    @property
    def has_custom_padding(self) -> bool:
        return self.padding.has_custom_padding


def padding_from_dict(raw: Mapping[str, Any] | None, *, default_left: float = PADDING.left) -> Padding:
    if raw is None:
        return Padding(left=default_left)
    return Padding(
        top=float(raw.get("top", PADDING.top)),
        bottom=float(raw.get("bottom", PADDING.bottom)),
        left=float(raw.get("left", default_left)),
        right=float(raw.get("right", PADDING.right)),
        has_custom_padding=True,
    )


def axis_from_dict(
    raw: Mapping[str, Any],
    *,
    axis_type: AxisType | None = None,
    range_rounding_default: bool = False,
    require_limits: bool = True,
) -> AxisDefinition:
    resolved_type = axis_type or _coerce_axis_type(raw.get("type"))
    domain = _domain_from_dict(raw, resolved_type, require_limits=require_limits)
    raw_ticks = raw.get("ticks") or {}
    if not isinstance(raw_ticks, Mapping):
        raise AxisConfigError("axis `ticks` must be a mapping")
    values = raw_ticks.get("values")
    return AxisDefinition(
        show=bool(raw.get("show", True)),
        type=resolved_type,
        domain=domain,
        ticks=AxisTicks(values=tuple(values) if values else None, format=raw_ticks.get("format")),
        range_rounding=bool(_pick(raw, "range_rounding", "rangeRounding", default=range_rounding_default)),
        label=_coerce_label(raw.get("label")),
        orientation=Orientation(str(raw.get("orientation", Orientation.BOTTOM.value)).lower()),
    )


def chart_config_from_dict(payload: Mapping[str, Any]) -> ChartConfig:
    """Generic X/Y/Y2 chart input."""
    raw_axis = payload.get("axis")
    if not isinstance(raw_axis, Mapping) or not isinstance(raw_axis.get("x"), Mapping):
        raise AxisConfigError("chart input requires `axis.x`")
    if not isinstance(raw_axis.get("y"), Mapping):
        raise AxisConfigError("chart input requires `axis.y`")
    raw_y2 = raw_axis.get("y2")
    axes = AxesDefinition(
        x=axis_from_dict(raw_axis["x"]),
        y=axis_from_dict(raw_axis["y"]),
        y2=axis_from_dict(raw_y2) if isinstance(raw_y2, Mapping) else None,
    )
    return ChartConfig(
        axes=axes,
        canvas_width=float(payload.get("width", 0.0)),
        height=float(payload.get("height", 0.0)),
        padding=padding_from_dict(payload.get("padding")),
        show_label=bool(_pick(payload, "show_label", "showLabel", default=True)),
        locale=_coerce_locale(payload.get("locale")),
        settings=_settings_from_dict(payload),
        bind_to=_coerce_label(_pick(payload, "bind_to", "bindTo")),
    )


def validate_gantt_input(payload: Mapping[str, Any] | None) -> None:
    if not payload:
        raise AxisConfigError("no chart input loaded")
    if not _pick(payload, "bind_to", "bindTo"):
        raise AxisConfigError("chart input requires `bind_to`")
    raw_axis = payload.get("axis")
    if not isinstance(raw_axis, Mapping) or not raw_axis.get("x"):
        raise AxisConfigError("chart input requires `axis.x`")
    raw_x = raw_axis["x"]
    lower = _pick(raw_x, "lower_limit", "lowerLimit")
    upper = _pick(raw_x, "upper_limit", "upperLimit")
    if lower in (None, "") or upper in (None, ""):
        raise AxisConfigError("`axis.x` requires lower and upper limits")
    try:
        lower_dt = _coerce_datetime(lower)
        upper_dt = _coerce_datetime(upper)
    except (TypeError, ValueError) as exc:
        raise AxisConfigError("`axis.x` limits must be ISO-8601 dates") from exc
    if lower_dt > upper_dt:
        raise AxisConfigError("`axis.x` lower limit must not be after upper limit")


def gantt_config_from_dict(payload: Mapping[str, Any]) -> ChartConfig:
    validate_gantt_input(payload)
    raw_axis = payload["axis"]
    raw_y = raw_axis.get("y")
    if isinstance(raw_y, Mapping):
        y_axis = AxisDefinition(
            show=bool(raw_y.get("show", True)),
            range_rounding=bool(_pick(raw_y, "range_rounding", "rangeRounding", default=True)),
            label=_coerce_label(raw_y.get("label")),
        )
    else:
        y_axis = AxisDefinition(show=True, range_rounding=False)
    axes = AxesDefinition(
        x=axis_from_dict(raw_axis["x"], axis_type=AxisType.TIME_SERIES, range_rounding_default=True),
        y=y_axis,
    )
    return ChartConfig(
        axes=axes,
        canvas_width=float(payload.get("width", 0.0)),
        height=float(payload.get("height", 0.0)),
        padding=padding_from_dict(payload.get("padding"), default_left=PADDING.track_label),
        show_label=bool(_pick(payload, "show_label", "showLabel", default=True)),
        locale=_coerce_locale(payload.get("locale")),
        settings=_settings_from_dict(payload),
        bind_to=_coerce_label(_pick(payload, "bind_to", "bindTo")),
    )


def _domain_from_dict(raw: Mapping[str, Any], axis_type: AxisType, *, require_limits: bool) -> AxisDomain | None:
    lower = _pick(raw, "lower_limit", "lowerLimit")
    upper = _pick(raw, "upper_limit", "upperLimit")
    if lower is None or upper is None:
        if require_limits:
            raise AxisConfigError("axis requires lower and upper limits")
        return None
    lower_value: DomainValue
    upper_value: DomainValue
    try:
        if axis_type == AxisType.TIME_SERIES:
            lower_value = _coerce_datetime(lower)
            upper_value = _coerce_datetime(upper)
        else:
            lower_value = float(lower)
            upper_value = float(upper)
    except (TypeError, ValueError) as exc:
        raise AxisConfigError(f"invalid axis limits for {axis_type.value} axis: {lower!r}, {upper!r}") from exc
    if lower_value > upper_value:  # type: ignore[operator]
        raise AxisConfigError("axis lower limit must be <= upper limit")
    return AxisDomain(lower_limit=lower_value, upper_limit=upper_value)


def _settings_from_dict(payload: Mapping[str, Any]) -> ChartSettings:
    raw = _pick(payload, "settings", "settingsDictionary") or {}
    if not isinstance(raw, Mapping):
        raise AxisConfigError("`settings` must be a mapping")
    return ChartSettings(transition_ms=int(raw.get("transition", DEFAULT_TRANSITION_MS)))


def _coerce_axis_type(raw: object) -> AxisType:
    if raw is None:
        return AxisType.DEFAULT
    if isinstance(raw, AxisType):
        return raw
    try:
        return AxisType(str(raw).lower())
    except ValueError as exc:
        raise AxisConfigError(f"unsupported axis type: {raw!r}") from exc


def _coerce_locale(raw: object) -> str:
    locale = str(raw).strip() if raw else DEFAULT_LOCALE
    if locale not in LOCALE_SEPARATORS:
        raise AxisConfigError(f"unsupported locale: {raw!r}")
    return locale


def _coerce_datetime(raw: object) -> dt.datetime:
    if isinstance(raw, dt.datetime):
        return raw
    if isinstance(raw, dt.date):
        return dt.datetime.combine(raw, dt.time())
    if isinstance(raw, str):
        return dt.datetime.fromisoformat(raw.strip())
    raise TypeError(f"expected ISO date string, got {type(raw)!r}")


def _coerce_label(raw: object) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return text if text else None


def _pick(raw: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return default
