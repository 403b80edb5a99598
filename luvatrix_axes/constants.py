from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal


AxisId = Literal["x", "y", "y2"]

X_AXIS: AxisId = "x"
Y_AXIS: AxisId = "y"
Y2_AXIS: AxisId = "y2"
VERTICAL_AXES: tuple[AxisId, ...] = (Y_AXIS, Y2_AXIS)


class AxisType(str, Enum):
    DEFAULT = "default"
    TIME_SERIES = "timeseries"


class Orientation(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class PaddingDefaults:
    top: float = 10.0
    bottom: float = 5.0
    left: float = 30.0
    right: float = 50.0
    track_label: float = 250.0


PADDING = PaddingDefaults()

# Pixels of X axis width per tick before another tick is allowed.
MAX_TICK_VARIANCE = 100.0
MIN_TICKS = 2.0
DEFAULT_Y_AXIS_SPACING = 25.0
BASE_LABEL_ICON_HEIGHT_PADDING = 5.0

# Reserved Y2 band when the Y2 axis is absent or hidden.
Y2_FALLBACK_WIDTH = 20.0

# Tick band geometry of a measured axis stub.
TICK_SIZE = 6.0
TICK_PADDING = 3.0
DEFAULT_TICK_COUNT = 10

DEFAULT_LOCALE = "en-US"
DEFAULT_TRANSITION_MS = 250
