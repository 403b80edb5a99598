from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from PIL import Image, ImageDraw, ImageFont

from luvatrix_axes.constants import TICK_PADDING, TICK_SIZE


DEFAULT_FONT_FAMILY = "DejaVu Sans"
DEFAULT_FONT_SIZE_PX = 12.0
FONT_FALLBACK_PATTERNS = (
    "dejavusans",
    "dejavu sans",
    "helvetica",
    "arial",
    "liberationsans",
)


class TextMeasurer(Protocol):
    def text_size(self, text: str, *, rotate_deg: float = 0) -> tuple[float, float]: ...


class PillowTextMeasurer:
    """Measures text on a throwaway Pillow surface per call."""

    def __init__(self, *, font_family: str = DEFAULT_FONT_FAMILY, font_size_px: float = DEFAULT_FONT_SIZE_PX) -> None:
        if font_size_px <= 0:
            raise ValueError("font_size_px must be > 0")
        self.font_family = font_family
        self.font_size_px = font_size_px

    def text_size(self, text: str, *, rotate_deg: float = 0) -> tuple[float, float]:
        font = _load_font(self.font_family, self.font_size_px)
        with measurement_surface() as draw:
            if text:
                left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
                w = float(max(0, right - left))
                h = float(max(1, bottom - top))
            else:
                w = 0.0
                h = 0.0
        return rotated_size(w, h, rotate_deg)


@contextmanager
def measurement_surface() -> Iterator[ImageDraw.ImageDraw]:
    surface = Image.new("L", (1, 1), 0)
    try:
        yield ImageDraw.Draw(surface)
    finally:
        surface.close()


def rotated_size(width: float, height: float, rotate_deg: float) -> tuple[float, float]:
    if rotate_deg % 90 == 0:
        if (int(rotate_deg) // 90) % 2 == 1:
            return (height, width)
        return (width, height)
    theta = math.radians(rotate_deg)
    cos_t = abs(math.cos(theta))
    sin_t = abs(math.sin(theta))
    return (width * cos_t + height * sin_t, width * sin_t + height * cos_t)


def axis_footprint(measurer: TextMeasurer, tick_labels: Sequence[str], *, vertical: bool) -> float:
    """Band reserved for tick marks and tick text of one axis."""
    if not tick_labels:
        return TICK_SIZE + TICK_PADDING
    sizes = [measurer.text_size(label) for label in tick_labels]
    widest = max(w for w, _ in sizes) if vertical else max(h for _, h in sizes)
    return TICK_SIZE + TICK_PADDING + widest


@lru_cache(maxsize=64)
def _load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is None:
        return ImageFont.load_default()
    try:
        return ImageFont.truetype(str(font_path), size=size)
    except OSError:
        return ImageFont.load_default()


def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() if font_family.strip() else DEFAULT_FONT_FAMILY.lower()
    patterns = (wanted,) + FONT_FALLBACK_PATTERNS

    font_dirs = [
        Path.home() / "Library" / "Fonts",
        Path("/Library/Fonts"),
        Path("/System/Library/Fonts"),
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
    ]

    candidates: list[Path] = []
    for base in font_dirs:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf"):
            candidates.extend(base.rglob(ext))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            if p in path.stem.lower().replace(" ", ""):
                return path
    return None
