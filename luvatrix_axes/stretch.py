from __future__ import annotations

import datetime as dt
import logging
import math
from dataclasses import dataclass

from luvatrix_axes.axis import AxesDefinition, AxisDefinition, AxisDomain
from luvatrix_axes.constants import AxisId

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class StretchFactor:
    lower_limit: float = 1.0
    upper_limit: float = 1.0


def midpoint(domain: AxisDomain) -> float:
    lower, upper = domain.as_floats()
    return lower + (upper - lower) / 2


def lower_stretch_factor(axis: AxisDefinition, axis_id: AxisId = "y") -> float:
    if axis.domain is None or axis.data_range.min is None:
        return 1.0
    lower, _ = axis.domain.as_floats()
    mid = midpoint(axis.domain)
    reach = min(float(axis.data_range.min), lower)
    return _clamp_factor(abs(mid - reach), abs(mid - lower), axis_id)


def upper_stretch_factor(axis: AxisDefinition, axis_id: AxisId = "y") -> float:
    if axis.domain is None or axis.data_range.max is None:
        return 1.0
    _, upper = axis.domain.as_floats()
    mid = midpoint(axis.domain)
    reach = max(float(axis.data_range.max), upper)
    return _clamp_factor(abs(reach - mid), abs(upper - mid), axis_id)


def compute_stretch(axes: AxesDefinition) -> StretchFactor:
    lower_factors: list[float] = []
    upper_factors: list[float] = []
    for axis_id in axes.vertical_axes():
        axis = axes.get(axis_id)
        if axis is None:
            continue
        lower_factors.append(lower_stretch_factor(axis, axis_id))
        upper_factors.append(upper_stretch_factor(axis, axis_id))
    return StretchFactor(lower_limit=max(lower_factors), upper_limit=max(upper_factors))


def stretch_domain(domain: AxisDomain, factor: StretchFactor) -> AxisDomain:
    """Rendering domain scaled about the midpoint of `domain`."""
    lower, upper = domain.as_floats()
    mid = midpoint(domain)
    new_lower = mid - (mid - lower) * factor.lower_limit
    new_upper = mid + (upper - mid) * factor.upper_limit
    if domain.is_time:
        tz = domain.lower_limit.tzinfo  # type: ignore[union-attr]
        return AxisDomain(
            lower_limit=dt.datetime.fromtimestamp(new_lower, tz=tz),
            upper_limit=dt.datetime.fromtimestamp(new_upper, tz=tz),
        )
    return AxisDomain(lower_limit=new_lower, upper_limit=new_upper)


def _clamp_factor(numerator: float, denominator: float, axis_id: AxisId) -> float:
    if denominator == 0:
        if numerator != 0:
            LOGGER.warning("axis %s domain collapses to its midpoint; stretch clamped to 1", axis_id)
        return 1.0
    factor = numerator / denominator
    if not math.isfinite(factor):
        return 1.0
    return factor if factor > 1 else 1.0
