from __future__ import annotations

import unittest

from luvatrix_axes.chart import AxisChart
from luvatrix_axes.config import chart_config_from_dict
from luvatrix_axes.content import GroupedContent
from luvatrix_axes.errors import AxisLayoutError
from luvatrix_axes.measure import rotated_size


class _FakeMeasurer:
    def text_size(self, text: str, *, rotate_deg: float = 0) -> tuple[float, float]:
        return rotated_size(6.0 * len(text), 10.0, rotate_deg)


def _chart() -> AxisChart:
    config = chart_config_from_dict(
        {
            "width": 900,
            "height": 360,
            "axis": {
                "x": {"lowerLimit": 0, "upperLimit": 50},
                "y": {"lowerLimit": 0, "upperLimit": 10},
                "y2": {"lowerLimit": 0, "upperLimit": 100},
            },
        }
    )
    return AxisChart(config, measurer=_FakeMeasurer())


def _range(key: str, axis_id: str, lo: float, hi: float, group: str | None = None) -> dict[str, object]:
    payload: dict[str, object] = {"key": key, "valuesRange": {axis_id: {"min": lo, "max": hi}}}
    if group is not None:
        payload["group"] = group
    return payload


class AxisChartTests(unittest.TestCase):
    def _assert_domains_contain_content(self, chart: AxisChart) -> None:
        layout = chart.layout()
        for item in chart.content:
            for axis_id, extent in item.values_range.items():
                if axis_id == "x":
                    continue
                domain = layout.domains[axis_id]  # type: ignore[index]
                self.assertLessEqual(domain.lower_limit, extent.min, msg=f"{item.key} on {axis_id}")
                self.assertGreaterEqual(domain.upper_limit, extent.max, msg=f"{item.key} on {axis_id}")

    def test_rendering_domain_contains_content_through_add_and_remove(self) -> None:
        chart = _chart()
        steps = [
            ("load", _range("a", "y", -4.0, 8.0)),
            ("load", _range("b", "y2", 10.0, 150.0)),
            ("load", _range("c", "y", 0.0, 7.0, group="g1")),
            ("load", _range("d", "y", 0.0, 6.0, group="g1")),
            ("unload", "b"),
            ("load", _range("e", "y", -20.0, 2.0)),
            ("unload", "a"),
        ]
        for action, arg in steps:
            if action == "load":
                chart.load(arg)  # type: ignore[arg-type]
            else:
                chart.unload(arg)  # type: ignore[arg-type]
            self._assert_domains_contain_content(chart)

    def test_grouped_payload_is_resolved_on_load(self) -> None:
        chart = _chart()
        chart.load(_range("c", "y", 0.0, 5.0, group="g1"))
        self.assertIsInstance(chart.content[0], GroupedContent)

    def test_enclosed_content_does_not_invalidate_layout(self) -> None:
        chart = _chart()
        chart.load(_range("a", "y", -4.0, 8.0))
        self.assertTrue(chart.is_dirty)
        first = chart.layout()
        self.assertFalse(chart.is_dirty)
        chart.load(_range("b", "y", 1.0, 2.0))
        self.assertFalse(chart.is_dirty)
        self.assertEqual(chart.layout(), first)

    def test_layout_follows_config_changes(self) -> None:
        chart = _chart()
        chart.config.axes.x.label = "Index"
        self.assertEqual(chart.layout().metrics.labels.x_height, 10.0)
        chart.config.show_label = False
        self.assertEqual(chart.layout().metrics.labels.x_height, 0.0)
        self.assertEqual(chart.layout().labels, ())

    def test_resize_recomputes_layout(self) -> None:
        chart = _chart()
        before = chart.layout()
        chart.resize(1200, 360)
        self.assertTrue(chart.is_dirty)
        after = chart.layout()
        self.assertGreater(after.y2.x, before.y2.x)  # type: ignore[union-attr]

    def test_resize_rejects_empty_canvas(self) -> None:
        with self.assertRaises(AxisLayoutError):
            _chart().resize(0, 100)

    def test_duplicate_and_unknown_keys(self) -> None:
        chart = _chart()
        chart.load(_range("a", "y", 0.0, 1.0))
        with self.assertRaises(ValueError):
            chart.load(_range("a", "y", 0.0, 1.0))
        with self.assertRaises(KeyError):
            chart.unload("missing")

    def test_unknown_axis_ids_are_ignored(self) -> None:
        chart = _chart()
        chart.load(_range("a", "z", 0.0, 1.0))
        self.assertIsNone(chart.config.axes.y.data_range.min)


if __name__ == "__main__":
    unittest.main()
