from __future__ import annotations

import logging
from collections.abc import Mapping

from luvatrix_axes.assembler import assemble_axes
from luvatrix_axes.config import ChartConfig
from luvatrix_axes.constants import X_AXIS, Y2_AXIS, Y_AXIS
from luvatrix_axes.content import ContentItem, content_from_dict
from luvatrix_axes.data_range import update_range
from luvatrix_axes.errors import AxisLayoutError
from luvatrix_axes.formatting import TickFormatProvider
from luvatrix_axes.layout import AxisLayout
from luvatrix_axes.measure import PillowTextMeasurer, TextMeasurer

LOGGER = logging.getLogger(__name__)

AXIS_IDS = (X_AXIS, Y_AXIS, Y2_AXIS)


class AxisChart:
    """Owns one chart's axis state and re-runs the layout pipeline on change."""

    def __init__(
        self,
        config: ChartConfig,
        *,
        measurer: TextMeasurer | None = None,
        formatting: TickFormatProvider | None = None,
    ) -> None:
        self.config = config
        self.measurer = measurer if measurer is not None else PillowTextMeasurer()
        self.formatting = formatting
        self._content: list[ContentItem] = []
        self._dirty = True

    @property
    def content(self) -> tuple[ContentItem, ...]:
        return tuple(self._content)

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def load(self, item: ContentItem | Mapping[str, object]) -> "AxisChart":
        resolved = item if not isinstance(item, Mapping) else content_from_dict(item)
        if any(existing.key == resolved.key for existing in self._content):
            raise ValueError(f"content key already loaded: {resolved.key}")
        self._content.append(resolved)
        self._refresh_ranges(tuple(resolved.values_range.keys()))
        return self

    def unload(self, key: str) -> "AxisChart":
        removed = [item for item in self._content if item.key == key]
        if not removed:
            raise KeyError(key)
        self._content = [item for item in self._content if item.key != key]
        self._refresh_ranges(tuple(removed[0].values_range.keys()))
        return self

    def resize(self, width: float, height: float) -> "AxisChart":
        if width <= 0 or height <= 0:
            raise AxisLayoutError(f"canvas must be positive, got {width}x{height}")
        self.config.canvas_width = float(width)
        self.config.height = float(height)
        self._dirty = True
        return self

    def layout(self) -> AxisLayout:
        """Re-run the whole pipeline against the current config and content.

        `is_dirty` only tells a backend whether the last layout it drew is out of
        date because of a range change or a resize.
        """
        layout = assemble_axes(self.config, self.measurer, self.formatting)
        self._dirty = False
        return layout

    def _refresh_ranges(self, axis_ids: tuple[str, ...]) -> None:
        for axis_id in axis_ids:
            if axis_id not in AXIS_IDS:
                continue
            axis = self.config.axes.get(axis_id)  # type: ignore[arg-type]
            if axis is None:
                continue
            update_range(self.config.axes, axis_id, self._content)  # type: ignore[arg-type]
            if axis.data_range.is_range_modified:
                LOGGER.debug("axis %s range modified; layout invalidated", axis_id)
                self._dirty = True
