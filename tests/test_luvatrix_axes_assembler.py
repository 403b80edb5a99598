from __future__ import annotations

import datetime as dt
import unittest

from luvatrix_axes import positions
from luvatrix_axes.assembler import assemble_axes
from luvatrix_axes.config import chart_config_from_dict, gantt_config_from_dict
from luvatrix_axes.constants import Orientation
from luvatrix_axes.content import AxisExtent, SimpleContent
from luvatrix_axes.data_range import update_range
from luvatrix_axes.errors import AxisLayoutError
from luvatrix_axes.measure import rotated_size
from luvatrix_axes.scales import LinearScale, TimeScale


class _RecordingMeasurer:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def text_size(self, text: str, *, rotate_deg: float = 0) -> tuple[float, float]:
        self.calls.append(text)
        return rotated_size(7.0 * len(text), 10.0, rotate_deg)


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "bind_to": "#chart",
        "width": 800,
        "height": 400,
        "axis": {
            "x": {"lowerLimit": 0, "upperLimit": 100, "label": "Index"},
            "y": {"lowerLimit": 0, "upperLimit": 10, "label": "Temp"},
            "y2": {"lowerLimit": -5, "upperLimit": 5, "label": "Rate"},
        },
    }
    payload.update(overrides)
    return payload


class AxisAssemblerTests(unittest.TestCase):
    def test_pipeline_is_deterministic(self) -> None:
        config = chart_config_from_dict(_payload())
        first = assemble_axes(config, _RecordingMeasurer())
        second = assemble_axes(config, _RecordingMeasurer())
        self.assertEqual(first, second)

    def test_labels_are_measured_before_axis_ticks(self) -> None:
        measurer = _RecordingMeasurer()
        assemble_axes(chart_config_from_dict(_payload()), measurer)
        self.assertEqual(measurer.calls[:3], ["Index", "Temp", "Rate"])
        self.assertGreater(len(measurer.calls), 3)

    def test_axis_placements_match_position_resolver(self) -> None:
        config = chart_config_from_dict(_payload())
        layout = assemble_axes(config, _RecordingMeasurer())
        metrics = layout.metrics
        self.assertEqual(layout.x.translate, (positions.x_axis_x(config, metrics), positions.x_axis_y(config, metrics)))
        self.assertEqual(layout.y.translate, (positions.y_axis_x(config, metrics), positions.y_axis_y(config, metrics)))
        assert layout.y2 is not None
        self.assertEqual(layout.y2.translate, (positions.y2_axis_x(config, metrics), positions.y2_axis_y(config, metrics)))
        self.assertEqual(layout.x.tick_count, positions.x_tick_count(config, metrics))
        self.assertEqual(layout.y.orientation, Orientation.LEFT)
        self.assertEqual(layout.y2.orientation, Orientation.RIGHT)
        self.assertIsInstance(layout.x.scale, LinearScale)

    def test_axis_info_row_has_no_ticks_and_is_hidden(self) -> None:
        config = chart_config_from_dict(_payload())
        layout = assemble_axes(config, _RecordingMeasurer())
        row = layout.axis_info_row
        self.assertEqual(row.tick_values, ())
        self.assertEqual(row.tick_labels, ())
        self.assertTrue(row.aria_hidden)
        self.assertEqual(row.x, layout.x.x)
        self.assertEqual(row.y, positions.axis_info_row_y(config, layout.metrics))
        self.assertEqual(row.orientation, Orientation.TOP)

    def test_reference_line_visibility_follows_stretched_domain(self) -> None:
        config = chart_config_from_dict(_payload())
        layout = assemble_axes(config, _RecordingMeasurer())
        y_line = layout.reference_line_for("y")
        y2_line = layout.reference_line_for("y2")
        assert y_line is not None and y2_line is not None
        self.assertFalse(y_line.visible)
        self.assertTrue(y2_line.visible)

        update_range(config.axes, "y", [SimpleContent(key="a", values_range={"y": AxisExtent(-4.0, 10.0)})])
        layout = assemble_axes(config, _RecordingMeasurer())
        y_line = layout.reference_line_for("y")
        assert y_line is not None
        self.assertTrue(y_line.visible)
        self.assertAlmostEqual(layout.domains["y"].lower_limit, -4.0)
        self.assertAlmostEqual(layout.stretch.lower_limit, 1.8)
        self.assertEqual(y_line.start[1], y_line.end[1])

    def test_configured_domain_is_not_mutated(self) -> None:
        config = chart_config_from_dict(_payload())
        update_range(config.axes, "y", [SimpleContent(key="a", values_range={"y": AxisExtent(-40.0, 90.0)})])
        assemble_axes(config, _RecordingMeasurer())
        assert config.axes.y.domain is not None
        self.assertEqual(config.axes.y.domain.as_floats(), (0.0, 10.0))

    def test_explicit_ticks_and_format(self) -> None:
        payload = _payload()
        payload["axis"]["x"]["ticks"] = {"values": [0, 50, 100], "format": ".1f"}  # type: ignore[index]
        layout = assemble_axes(chart_config_from_dict(payload), _RecordingMeasurer())
        self.assertEqual(layout.x.tick_values, (0.0, 50.0, 100.0))
        self.assertEqual(layout.x.tick_labels, ("0.0", "50.0", "100.0"))

    def test_hidden_axis_is_aria_hidden(self) -> None:
        payload = _payload()
        payload["axis"]["y"]["show"] = False  # type: ignore[index]
        layout = assemble_axes(chart_config_from_dict(payload), _RecordingMeasurer())
        self.assertTrue(layout.y.aria_hidden)
        self.assertFalse(layout.x.aria_hidden)

    def test_labels_are_omitted_when_hidden(self) -> None:
        layout = assemble_axes(chart_config_from_dict(_payload(show_label=False)), _RecordingMeasurer())
        self.assertEqual(layout.labels, ())
        self.assertEqual(layout.metrics.labels.x_height, 0.0)

    def test_label_shape_positions(self) -> None:
        config = chart_config_from_dict(_payload())
        layout = assemble_axes(config, _RecordingMeasurer())
        y_label = layout.label_for("y")
        assert y_label is not None
        self.assertEqual(y_label.rotate_deg, -90)
        self.assertEqual(
            y_label.shape_position(2),
            (
                positions.y_axis_label_shape_x(config, layout.metrics),
                positions.y_axis_label_shape_y(config, layout.metrics, 2),
            ),
        )
        x_label = layout.label_for("x")
        assert x_label is not None
        self.assertIsNone(x_label.shape_position(1))

    def test_gantt_layout_uses_time_scale_and_track_padding(self) -> None:
        config = gantt_config_from_dict(
            {
                "bind_to": "#gantt",
                "width": 1000,
                "height": 300,
                "axis": {"x": {"lowerLimit": "2026-01-01T00:00:00", "upperLimit": "2026-02-01T00:00:00"}},
            }
        )
        layout = assemble_axes(config, _RecordingMeasurer())
        self.assertIsInstance(layout.x.scale, TimeScale)
        self.assertTrue(all(isinstance(v, dt.datetime) for v in layout.x.tick_values))
        self.assertIsNone(layout.y.scale)
        self.assertEqual(layout.reference_lines, ())
        self.assertIsNone(layout.y2)
        self.assertEqual(layout.metrics.axis_sizes.y, 250.0)
        self.assertEqual(layout.transition_ms, 250)

    def test_rejects_empty_canvas(self) -> None:
        config = chart_config_from_dict(_payload(width=0))
        with self.assertRaises(AxisLayoutError):
            assemble_axes(config, _RecordingMeasurer())


if __name__ == "__main__":
    unittest.main()
