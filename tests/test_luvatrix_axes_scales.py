from __future__ import annotations

import datetime as dt
import unittest

import numpy as np

from luvatrix_axes.axis import AxisDomain
from luvatrix_axes.constants import AxisType
from luvatrix_axes.formatting import LocaleTickFormatProvider, format_tick_labels, tick_formatter
from luvatrix_axes.scales import (
    LinearScale,
    TimeScale,
    build_scale,
    format_ticks_for_axis,
    generate_nice_ticks,
    process_tick_values,
)


class ScaleTests(unittest.TestCase):
    def test_nice_ticks_cover_domain(self) -> None:
        ticks = generate_nice_ticks(0.0, 10.0, 10)
        self.assertEqual(ticks.tolist(), [float(v) for v in range(11)])

    def test_nice_ticks_snap_zero(self) -> None:
        ticks = generate_nice_ticks(-0.3, 0.3, 7)
        self.assertIn(0.0, ticks.tolist())

    def test_linear_scale_maps_and_rounds(self) -> None:
        scale = LinearScale(domain=(0.0, 10.0), range=(400.0, 0.0))
        self.assertEqual(scale.map(0.0), 400.0)
        self.assertEqual(scale.map(10.0), 0.0)
        self.assertEqual(scale.map(2.5), 300.0)
        rounded = LinearScale(domain=(0.0, 3.0), range=(0.0, 100.0), rounding=True)
        self.assertEqual(rounded.map(1.0), 33.0)

    def test_linear_scale_ticks_stay_in_domain(self) -> None:
        ticks = LinearScale(domain=(-4.0, 10.0), range=(0.0, 1.0)).ticks(16)
        self.assertGreaterEqual(float(ticks.min()), -4.0)
        self.assertLessEqual(float(ticks.max()), 10.0)

    def test_time_scale(self) -> None:
        start = dt.datetime(2026, 1, 1, tzinfo=dt.timezone.utc)
        end = dt.datetime(2026, 1, 11, tzinfo=dt.timezone.utc)
        scale = TimeScale(domain=(start, end), range=(0.0, 1000.0))
        self.assertEqual(scale.map(start), 0.0)
        self.assertEqual(scale.map(dt.datetime(2026, 1, 6, tzinfo=dt.timezone.utc)), 500.0)
        ticks = scale.ticks(3)
        self.assertEqual(ticks, [start, dt.datetime(2026, 1, 6, tzinfo=dt.timezone.utc), end])

    def test_build_scale_dispatches_on_axis_type(self) -> None:
        linear = build_scale(AxisType.DEFAULT, AxisDomain(0.0, 1.0), (0.0, 10.0))
        self.assertIsInstance(linear, LinearScale)
        time = build_scale(AxisType.TIME_SERIES, AxisDomain(dt.datetime(2026, 1, 1), dt.datetime(2026, 1, 2)), (0.0, 10.0))
        self.assertIsInstance(time, TimeScale)
        with self.assertRaises(ValueError):
            build_scale(AxisType.TIME_SERIES, AxisDomain(0.0, 1.0), (0.0, 10.0))

    def test_process_tick_values(self) -> None:
        self.assertIsNone(process_tick_values(None, AxisType.DEFAULT))
        self.assertEqual(process_tick_values((1, 2), AxisType.DEFAULT), [1.0, 2.0])
        self.assertEqual(
            process_tick_values(("2026-01-01T00:00:00",), AxisType.TIME_SERIES),
            [dt.datetime(2026, 1, 1)],
        )


class TickFormattingTests(unittest.TestCase):
    def test_default_numeric_labels_use_consistent_decimals(self) -> None:
        ticks = np.asarray([1.5, 2.0, 2.5, 3.0], dtype=np.float64)
        self.assertEqual(format_ticks_for_axis(ticks), ["1.5", "2", "2.5", "3"])
        provider = LocaleTickFormatProvider()
        self.assertEqual(format_tick_labels(provider, None, AxisType.DEFAULT, [20.0, 30.0]), ["20", "30"])

    def test_numeric_format_spec_respects_locale(self) -> None:
        us = tick_formatter(LocaleTickFormatProvider("en-US"), ",.1f")
        de = tick_formatter(LocaleTickFormatProvider("de-DE"), ",.1f")
        self.assertEqual(us(1234.5), "1,234.5")
        self.assertEqual(de(1234.5), "1.234,5")

    def test_time_format_dispatch(self) -> None:
        formatter = tick_formatter(LocaleTickFormatProvider(), "%Y-%m-%d", AxisType.TIME_SERIES)
        self.assertEqual(formatter(dt.datetime(2026, 3, 9)), "2026-03-09")
        default = tick_formatter(LocaleTickFormatProvider(), None, AxisType.TIME_SERIES)
        self.assertEqual(default(dt.datetime(2026, 3, 9)), "Mar 09")

    def test_unknown_locale_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            LocaleTickFormatProvider("xx-XX")


if __name__ == "__main__":
    unittest.main()
