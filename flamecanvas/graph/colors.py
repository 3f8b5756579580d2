# flamecanvas/graph/colors.py
from __future__ import annotations

import colorsys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from flamecanvas.model.call_tree import Category


if TYPE_CHECKING:
    from flamecanvas.config.base import ColorConfig
    from flamecanvas.graph.columns import Frame


@dataclass(frozen=True)
class HslColor:
    """Color in HSL space: hue in degrees, saturation/luminance in percent."""

    hue: float
    saturation: float
    luminance: float

    def to_css(self) -> str:
        return f"hsl({self.hue:g}, {self.saturation:g}%, {self.luminance:g}%)"

    def to_rgb(self) -> tuple[float, float, float]:
        """Convert to an RGB triple in [0, 1] (matplotlib's convention)."""
        return colorsys.hls_to_rgb(
            self.hue / 360.0,
            max(0.0, min(self.luminance, 100.0)) / 100.0,
            max(0.0, min(self.saturation, 100.0)) / 100.0,
        )


@dataclass(frozen=True)
class ColorPair:
    """Normal (light) and hovered (dark) fill of a box."""

    light: HslColor
    dark: HslColor


# #999 / #888
SYSTEM_COLORS = ColorPair(
    light=HslColor(0.0, 0.0, 60.0),
    dark=HslColor(0.0, 0.0, 800.0 / 15.0),
)

_HASH_PRIME = 5381
_MASK_32 = 0xFFFFFFFF


def pick_color(
    frame: Frame,
    fade: bool = False,
    config: ColorConfig | None = None,
) -> ColorPair:
    """Deterministic color for a frame.

    System frames are gray. Other frames take hue, saturation and luminance
    from three bytes of a multiplicative hash of ``graph_id``; faded frames
    (ancestors above a zoomed level) lose saturation.

    Parameters
    ----------
    frame : Frame
        Frame to color.
    fade : bool, optional
        Return the desaturated variant (default: False).
    config : ColorConfig, optional
        Fade and hover offsets. Defaults to ``ColorConfig()``.

    Returns
    -------
    ColorPair
        Light and dark variants.
    """
    if frame.location.category is Category.SYSTEM:
        return SYSTEM_COLORS

    fade_saturation = config.fade_saturation if config else 50.0
    hover_darken = config.hover_darken if config else 7.0

    h = (frame.graph_id * _HASH_PRIME) & _MASK_32
    hue = 40 - (60 * (h & 0xFF)) / 0xFF
    if hue < 0:
        hue += 360

    saturation = 80 + (((h >> 8) & 0xFF) / 0xFF) * 20
    if fade:
        saturation -= fade_saturation

    lum = 30 + (20 * ((h >> 16) & 0xFF)) / 0xFF
    return ColorPair(
        light=HslColor(hue, saturation, lum),
        dark=HslColor(hue, saturation, lum - hover_darken),
    )
