from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import ClassVar, Literal, Union

from luvatrix_axes.axis import domain_value_to_float


ContentKind = Literal["simple", "grouped"]


@dataclass(frozen=True)
class AxisExtent:
    min: float
    max: float

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"extent min must be <= max (got {self.min} > {self.max})")

    def encloses(self, other: "AxisExtent") -> bool:
        return self.min <= other.min and self.max >= other.max

    def union(self, other: "AxisExtent") -> "AxisExtent":
        return AxisExtent(min=min(self.min, other.min), max=max(self.max, other.max))


@dataclass(frozen=True)
class SimpleContent:
    key: str
    values_range: Mapping[str, AxisExtent] = field(default_factory=dict)
    kind: ClassVar[ContentKind] = "simple"

    def extent(self, axis_id: str) -> AxisExtent | None:
        return self.values_range.get(axis_id)


@dataclass(frozen=True)
class GroupedContent:
    """Stacked content; members of one group add up on the shared axis band."""

    key: str
    group: str
    values_range: Mapping[str, AxisExtent] = field(default_factory=dict)
    kind: ClassVar[ContentKind] = "grouped"

    def __post_init__(self) -> None:
        if not str(self.group).strip():
            raise ValueError("GroupedContent.group must be non-empty")

    def extent(self, axis_id: str) -> AxisExtent | None:
        return self.values_range.get(axis_id)


ContentItem = Union[SimpleContent, GroupedContent]


def content_from_dict(payload: Mapping[str, object]) -> ContentItem:
    key = str(payload.get("key", "")).strip()
    if not key:
        raise ValueError("content `key` must be non-empty")
    raw_range = payload.get("values_range") or payload.get("valuesRange") or {}
    if not isinstance(raw_range, Mapping):
        raise TypeError("`values_range` must be a mapping of axis id to {min, max}")
    values_range = {str(axis_id): _coerce_extent(raw) for axis_id, raw in raw_range.items() if raw}
    group = payload.get("group")
    if group is not None and str(group).strip():
        return GroupedContent(key=key, group=str(group), values_range=values_range)
    return SimpleContent(key=key, values_range=values_range)


def _coerce_extent(raw: object) -> AxisExtent:
    if isinstance(raw, AxisExtent):
        return raw
    if not isinstance(raw, Mapping):
        raise TypeError("each values_range entry must be a mapping with `min` and `max`")
    return AxisExtent(min=_coerce_number(raw["min"]), max=_coerce_number(raw["max"]))


def _coerce_number(raw: object) -> float:
    if isinstance(raw, dt.datetime):
        return domain_value_to_float(raw)
    if isinstance(raw, str):
        try:
            return float(raw)
        except ValueError:
            return dt.datetime.fromisoformat(raw).timestamp()
    return float(raw)  # type: ignore[arg-type]
