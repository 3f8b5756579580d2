"""Configuration loading and saving utilities."""

from __future__ import annotations

import copy
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional

import yaml

from flamecanvas.config.base import (
    ColorConfig,
    FlameGraphConfig,
    InteractionConfig,
    LayoutConfig,
)
from flamecanvas.config.validation import ConfigValidator, ValidationError


_SECTIONS = {
    "layout": LayoutConfig,
    "interaction": InteractionConfig,
    "colors": ColorConfig,
}


def load_config(config_path: str | Path, _visited: Optional[set] = None) -> FlameGraphConfig:
    """Load flame graph configuration from a YAML file.

    Supports the 'extends' keyword for config inheritance. The parent path is
    resolved relative to the file that extends it, and child values override
    parent values (deep merge for nested sections).

    Args:
        config_path: Path to YAML configuration file
        _visited: Internal parameter to track visited configs (prevents circular refs)

    Returns:
        FlameGraphConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the file has circular inheritance
        ValidationError: If the file or a section is not a mapping, a section or
            key is unknown, or a value is out of range
    """
    if _visited is None:
        _visited = set()

    data = _load_config_data(Path(config_path).resolve(), _visited)

    sections = {}
    for section, values in data.items():
        if section not in _SECTIONS:
            raise ValidationError(
                ConfigValidator.format_enum_error("config section", section, list(_SECTIONS))
            )
        sections[section] = values = ConfigValidator.validate_section(values, section)
        known = [f.name for f in fields(_SECTIONS[section])]
        for key in values:
            if key not in known:
                raise ValidationError(
                    ConfigValidator.format_enum_error(f"{section} key", key, known)
                )

    config = FlameGraphConfig.from_dict(sections)
    config.validate()

    return config


def _load_config_data(config_path: Path, visited: set) -> dict[Any, Any]:
    """Load a config file as a raw dictionary with inheritance resolved."""
    if str(config_path) in visited:
        raise ValueError(f"Circular config inheritance detected: {config_path}")

    visited.add(str(config_path))

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValidationError(
            f"Invalid config file {config_path}: expected a mapping of sections, "
            f"got {type(data).__name__}"
        )

    if "extends" in data:
        parent_path = (config_path.parent / data.pop("extends")).resolve()
        parent_data = _load_config_data(parent_path, visited)
        data = _deep_merge_dicts(parent_data, data)

    return data


def _deep_merge_dicts(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries (override values take precedence).

    Examples:
        >>> base = {"layout": {"box_height": 20, "timeline_height": 22}}
        >>> override = {"layout": {"box_height": 16}}
        >>> _deep_merge_dicts(base, override)
        {'layout': {'box_height': 16, 'timeline_height': 22}}
    """
    result = copy.deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def save_config(config: FlameGraphConfig, output_path: str | Path) -> None:
    """Save flame graph configuration to a YAML file."""
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
