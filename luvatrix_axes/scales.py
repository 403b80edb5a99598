from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

import numpy as np

from luvatrix_axes.axis import AxisDomain, domain_value_to_float
from luvatrix_axes.constants import AxisType


@dataclass(frozen=True)
class LinearScale:
    domain: tuple[float, float]
    range: tuple[float, float]
    rounding: bool = False

    def map(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            out = (r0 + r1) / 2
        else:
            out = r0 + (float(value) - d0) * (r1 - r0) / (d1 - d0)
        return float(round(out)) if self.rounding else out

    def ticks(self, count: float) -> np.ndarray:
        d0, d1 = self.domain
        target = max(1, int(count))
        ticks = generate_nice_ticks(min(d0, d1), max(d0, d1), target)
        lo, hi = min(d0, d1), max(d0, d1)
        step = float(abs(ticks[1] - ticks[0])) if ticks.size > 1 else 1.0
        eps = max(1e-12, step * 1e-9)
        return ticks[(ticks >= lo - eps) & (ticks <= hi + eps)]


@dataclass(frozen=True)
class TimeScale:
    domain: tuple[dt.datetime, dt.datetime]
    range: tuple[float, float]
    rounding: bool = False

    def _linear(self) -> LinearScale:
        return LinearScale(
            domain=(self.domain[0].timestamp(), self.domain[1].timestamp()),
            range=self.range,
            rounding=self.rounding,
        )

    def map(self, value: dt.datetime | float) -> float:
        return self._linear().map(domain_value_to_float(value))

    def ticks(self, count: float) -> list[dt.datetime]:
        # Calendar-aware bucketing belongs to the backend; evenly spaced instants here.
        t0, t1 = self.domain[0].timestamp(), self.domain[1].timestamp()
        target = max(2, int(count))
        if t0 == t1:
            return [self.domain[0]]
        tz = self.domain[0].tzinfo
        return [dt.datetime.fromtimestamp(float(v), tz=tz) for v in np.linspace(t0, t1, target)]


Scale = LinearScale | TimeScale


def build_scale(axis_type: AxisType, domain: AxisDomain, value_range: tuple[float, float], *, rounding: bool = False) -> Scale:
    if axis_type == AxisType.TIME_SERIES:
        lower = domain.lower_limit
        upper = domain.upper_limit
        if not isinstance(lower, dt.datetime) or not isinstance(upper, dt.datetime):
            raise ValueError("time series scale requires datetime domain limits")
        return TimeScale(domain=(lower, upper), range=value_range, rounding=rounding)
    return LinearScale(domain=domain.as_floats(), range=value_range, rounding=rounding)


def process_tick_values(values: tuple[Any, ...] | None, axis_type: AxisType) -> list[Any] | None:
    if not values:
        return None
    if axis_type != AxisType.TIME_SERIES:
        return [float(v) for v in values]
    out: list[Any] = []
    for value in values:
        if isinstance(value, str):
            out.append(dt.datetime.fromisoformat(value.strip()))
        else:
            out.append(value)
    return out


def generate_nice_ticks(vmin: float, vmax: float, target: int) -> np.ndarray:
    if target <= 0:
        raise ValueError("target must be > 0")
    if vmin == vmax:
        return np.asarray([vmin], dtype=np.float64)

    span = _nice_number(vmax - vmin, round_result=False)
    step = _nice_number(span / max(target - 1, 1), round_result=True)
    tick_min = np.floor(vmin / step) * step
    tick_max = np.ceil(vmax / step) * step

    ticks = np.arange(tick_min, tick_max + 0.5 * step, step, dtype=np.float64)
    # Normalize floating-point drift so values like -4.44e-16 become 0.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return ticks


def format_tick(value: float, *, step: float | None = None) -> str:
    if not np.isfinite(value):
        return str(value)
    if step is not None and np.isfinite(step) and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    abs_v = abs(value)
    decimals = _decimals_from_step(step) if step is not None else 6
    if abs_v != 0 and (abs_v >= 1e6 or (step is not None and abs(step) < 1e-4) or abs_v < 1e-6):
        return f"{value:.4e}"

    d = Decimal(str(value))
    quant = Decimal("1").scaleb(-decimals)
    try:
        q = d.quantize(quant)
    except InvalidOperation:
        q = d
    out = format(q, "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def format_ticks_for_axis(ticks: np.ndarray) -> list[str]:
    if ticks.size == 0:
        return []
    if ticks.size == 1:
        return [format_tick(float(ticks[0]))]
    step = float(abs(ticks[1] - ticks[0]))
    return [format_tick(float(v), step=step) for v in ticks]


def _nice_number(value: float, *, round_result: bool) -> float:
    exp = np.floor(np.log10(value))
    frac = value / (10**exp)

    if round_result:
        if frac < 1.5:
            nice_frac = 1.0
        elif frac < 3.0:
            nice_frac = 2.0
        elif frac < 7.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0
    else:
        if frac <= 1.0:
            nice_frac = 1.0
        elif frac <= 2.0:
            nice_frac = 2.0
        elif frac <= 5.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0

    return float(nice_frac * (10**exp))


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not np.isfinite(step):
        return 6
    d = Decimal(str(step)).normalize()
    exp = d.as_tuple().exponent
    decimals = max(0, -int(exp))
    return min(12, decimals)
