"""Configuration system for flamecanvas."""

from __future__ import annotations

from flamecanvas.config.base import (
    ColorConfig,
    FlameGraphConfig,
    InteractionConfig,
    LayoutConfig,
)
from flamecanvas.config.loader import load_config, save_config
from flamecanvas.config.validation import ConfigValidator, ValidationError


__all__ = [
    "ColorConfig",
    "ConfigValidator",
    "FlameGraphConfig",
    "InteractionConfig",
    "LayoutConfig",
    "ValidationError",
    "load_config",
    "save_config",
]
