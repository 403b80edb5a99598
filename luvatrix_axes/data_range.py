from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from luvatrix_axes.axis import AxesDefinition
from luvatrix_axes.constants import AxisId
from luvatrix_axes.content import AxisExtent, ContentItem

LOGGER = logging.getLogger(__name__)


def content_extent(item: ContentItem, content: Sequence[ContentItem], axis_id: AxisId) -> AxisExtent | None:
    """Contribution of one item to the axis extent.

    Grouped items are summed with every other member of their group that sits
    on the same axis. The envelope with each member keeps mixed-sign stacks
    inside the result.
    """
    own = item.extent(axis_id)
    if own is None:
        return None
    if item.kind != "grouped":
        return own

    members = [
        other.extent(axis_id)
        for other in content
        if other.kind == "grouped" and other.group == item.group  # type: ignore[union-attr]
    ]
    members = [m for m in members if m is not None]
    if not members:
        members = [own]
    summed = AxisExtent(min=sum(m.min for m in members), max=sum(m.max for m in members))
    for member in members:
        summed = summed.union(member)
    return summed


def aggregate_extent(content: Sequence[ContentItem], axis_id: AxisId) -> AxisExtent | None:
    out: AxisExtent | None = None
    seen_groups: set[str] = set()
    for item in content:
        if item.kind == "grouped":
            group = item.group  # type: ignore[union-attr]
            if item.extent(axis_id) is None or group in seen_groups:
                continue
            seen_groups.add(group)
        contribution = content_extent(item, content, axis_id)
        if contribution is None:
            continue
        out = contribution if out is None else out.union(contribution)
    return out


def update_range(axes: AxesDefinition, axis_id: AxisId, content: Iterable[ContentItem] | None) -> None:
    axis = axes.get(axis_id)
    if axis is None or content is None:
        return
    items = list(content)
    current = aggregate_extent(items, axis_id)
    if current is None:
        return

    data_range = axis.data_range
    if data_range.has_snapshot:
        previous = AxisExtent(min=data_range.min, max=data_range.max)  # type: ignore[arg-type]
        modified = not previous.encloses(current)
    else:
        modified = True

    data_range.is_range_modified = modified
    if not modified:
        return
    data_range.old_min = data_range.min
    data_range.old_max = data_range.max
    data_range.min = current.min
    data_range.max = current.max
    LOGGER.debug(
        "axis %s data range modified: (%s, %s) -> (%s, %s)",
        axis_id,
        data_range.old_min,
        data_range.old_max,
        current.min,
        current.max,
    )
