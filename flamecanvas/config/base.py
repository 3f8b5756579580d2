"""Configuration dataclasses for flame graph layout, interaction and color."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict

from flamecanvas.config.validation import ConfigValidator


@dataclass
class LayoutConfig:
    """Pixel layout of the flame graph grid."""

    box_height: float = 20.0
    """Height of one stack-depth row [px]"""

    timeline_height: float = 22.0
    """Height of the timeline strip drawn above the first row [px]"""

    timeline_label_spacing: float = 200.0
    """Approximate horizontal distance between timeline labels [px]"""

    def validate(self) -> None:
        ConfigValidator.validate_positive(self.box_height, "layout.box_height", "16-24")
        ConfigValidator.validate_non_negative(
            self.timeline_height, "layout.timeline_height", "22"
        )
        ConfigValidator.validate_positive(
            self.timeline_label_spacing, "layout.timeline_label_spacing", "100-300"
        )


@dataclass
class InteractionConfig:
    """Thresholds for pointer, wheel and drag handling."""

    min_window: float = 0.005
    """Smallest horizontal window (fraction of the timeline) a resize may produce"""

    wheel_divisor: float = 400.0
    """Wheel delta that corresponds to zooming the full window onto the cursor"""

    click_max_ms: float = 500.0
    """A drag released sooner than this may count as a click [ms]"""

    click_max_px: float = 100.0
    """A drag that moved less than this on both axes may count as a click [px]"""

    def validate(self) -> None:
        ConfigValidator.validate_in_range(
            self.min_window, "interaction.min_window", 1e-6, 1.0, "0.001-0.01"
        )
        ConfigValidator.validate_positive(self.wheel_divisor, "interaction.wheel_divisor", "400")
        ConfigValidator.validate_non_negative(self.click_max_ms, "interaction.click_max_ms")
        ConfigValidator.validate_non_negative(self.click_max_px, "interaction.click_max_px")


@dataclass
class ColorConfig:
    """Color adjustments applied on top of the per-frame hash colors."""

    fade_saturation: float = 50.0
    """Saturation points removed from ancestors above the zoomed level"""

    hover_darken: float = 7.0
    """Luminance points removed for the dark (hover) variant"""

    def validate(self) -> None:
        ConfigValidator.validate_in_range(
            self.fade_saturation, "colors.fade_saturation", 0.0, 80.0, "50"
        )
        ConfigValidator.validate_in_range(self.hover_darken, "colors.hover_darken", 0.0, 30.0, "7")


@dataclass
class FlameGraphConfig:
    """Top-level flame graph configuration.

    Examples
    --------
    >>> config = FlameGraphConfig()
    >>> config.layout.box_height
    20.0
    >>> config = FlameGraphConfig(interaction=InteractionConfig(min_window=0.01))
    >>> config.validate()
    """

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    interaction: InteractionConfig = field(default_factory=InteractionConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)

    def validate(self) -> None:
        """Validate every section.

        Raises:
            ValidationError: If any value is out of range
        """
        self.layout.validate()
        self.interaction.validate()
        self.colors.validate()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FlameGraphConfig:
        return cls(
            layout=LayoutConfig(**data.get("layout", {})),
            interaction=InteractionConfig(**data.get("interaction", {})),
            colors=ColorConfig(**data.get("colors", {})),
        )
