from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import numpy as np

from luvatrix_axes.constants import DEFAULT_LOCALE, AxisType
from luvatrix_axes.scales import format_tick, format_ticks_for_axis


TickFormatter = Callable[[Any], str]

DEFAULT_TIME_FORMAT = "%b %d"

# (decimal separator, thousands separator)
LOCALE_SEPARATORS: dict[str, tuple[str, str]] = {
    "en-US": (".", ","),
    "en-GB": (".", ","),
    "de-DE": (",", "."),
    "fr-FR": (",", " "),
    "es-ES": (",", "."),
}


class TickFormatProvider(Protocol):
    def number_format(self, fmt: str) -> TickFormatter: ...

    def time_format(self, fmt: str) -> TickFormatter: ...


@dataclass(frozen=True)
class LocaleTickFormatProvider:
    """Python format specs for numbers, strftime patterns for time."""

    locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        if self.locale not in LOCALE_SEPARATORS:
            raise ValueError(f"unsupported locale: {self.locale}")

    def number_format(self, fmt: str) -> TickFormatter:
        decimal_sep, thousands_sep = LOCALE_SEPARATORS[self.locale]

        def _format(value: Any) -> str:
            text = format(float(value), fmt)
            if (decimal_sep, thousands_sep) == (".", ","):
                return text
            return text.replace(",", "\0").replace(".", decimal_sep).replace("\0", thousands_sep)

        return _format

    def time_format(self, fmt: str) -> TickFormatter:
        def _format(value: Any) -> str:
            if not isinstance(value, dt.datetime):
                value = dt.datetime.fromtimestamp(float(value))
            return value.strftime(fmt)

        return _format


def tick_formatter(provider: TickFormatProvider, fmt: str | None, axis_type: AxisType = AxisType.DEFAULT) -> TickFormatter:
    if not fmt:
        if axis_type == AxisType.TIME_SERIES:
            return provider.time_format(DEFAULT_TIME_FORMAT)
        return lambda value: format_tick(float(value))
    if axis_type == AxisType.TIME_SERIES:
        return provider.time_format(fmt)
    return provider.number_format(fmt)


def format_tick_labels(
    provider: TickFormatProvider,
    fmt: str | None,
    axis_type: AxisType,
    values: Sequence[Any],
) -> list[str]:
    if not fmt and axis_type != AxisType.TIME_SERIES:
        # Step-aware default keeps decimals consistent across the axis.
        return format_ticks_for_axis(np.asarray(values, dtype=np.float64))
    formatter = tick_formatter(provider, fmt, axis_type)
    return [formatter(v) for v in values]
