"""Validation of flame graph settings and command line options.

Errors name the offending config key or option, list what is accepted and
suggest the closest spelling for typos such as ``box_hieght`` or ``.svgg``.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table


class ValidationError(Exception):
    """A setting, option or config file that cannot be used."""

    pass


class ConfigValidator:
    """Checks for flame graph settings and their error messages."""

    VALID_OUTPUT_FORMATS = ["png", "svg", "pdf", "html"]
    VALID_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]

    OUTPUT_FORMAT_DESCRIPTIONS = {
        "png": "Raster image rendered with matplotlib",
        "svg": "Vector image rendered with matplotlib",
        "pdf": "Vector document rendered with matplotlib",
        "html": "Interactive plotly page with hover tooltips",
    }

    @staticmethod
    def suggest_correction(
        invalid: str, valid_options: List[str], n: int = 1, cutoff: float = 0.6
    ) -> Optional[str]:
        """Closest spelling of ``invalid`` among ``valid_options``, if any is close."""
        matches = get_close_matches(str(invalid), valid_options, n=n, cutoff=cutoff)
        return matches[0] if matches else None

    @classmethod
    def format_enum_error(
        cls,
        param_name: str,
        invalid_value: str,
        valid_options: List[str],
        descriptions: Optional[Dict[str, str]] = None,
    ) -> str:
        descriptions = descriptions or {}
        options = [
            f"  - '{opt}' → {descriptions[opt]}" if opt in descriptions else f"  - '{opt}'"
            for opt in valid_options
        ]
        message = f"Invalid {param_name}: '{invalid_value}'\n\nValid options:\n" + "\n".join(
            options
        )

        suggestion = cls.suggest_correction(invalid_value, valid_options)
        if suggestion:
            message += f"\n\nDid you mean '{suggestion}'?"
        return message

    @staticmethod
    def format_range_error(
        param_name: str,
        invalid_value: Any,
        valid_range: str,
        typical_values: Optional[str] = None,
    ) -> str:
        """Message for a number outside its accepted range.

        ``valid_range`` reads after "Must be", e.g. ``"positive (> 0)"`` or
        ``"[0.0, 30.0]"``.
        """
        message = f"Invalid {param_name}: {invalid_value}\n  → Must be {valid_range}"
        if typical_values:
            message += f"\n  → Typical values: {typical_values}"
        return message

    @classmethod
    def validate_choice(
        cls,
        value: str,
        param_name: str,
        valid_options: List[str],
        descriptions: Optional[Dict[str, str]] = None,
    ) -> None:
        if value not in valid_options:
            raise ValidationError(
                cls.format_enum_error(param_name, value, valid_options, descriptions)
            )

    @classmethod
    def validate_log_level(cls, level: str) -> str:
        """Upper-cased loguru level name; raises ValidationError for unknown names."""
        level = level.upper()
        cls.validate_choice(level, "log level", cls.VALID_LOG_LEVELS)
        return level

    @staticmethod
    def validate_section(value: Any, section: str) -> Dict[str, Any]:
        """Contents of a config file section, which must be a mapping or empty."""
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValidationError(
                f"Invalid config section '{section}': expected a mapping of keys, "
                f"got {type(value).__name__} {value!r}"
            )
        return value

    @classmethod
    def validate_positive(
        cls, value: float, param_name: str, typical_values: Optional[str] = None
    ) -> None:
        if value <= 0:
            raise ValidationError(
                cls.format_range_error(param_name, value, "positive (> 0)", typical_values)
            )

    @classmethod
    def validate_non_negative(
        cls, value: float, param_name: str, typical_values: Optional[str] = None
    ) -> None:
        if value < 0:
            raise ValidationError(
                cls.format_range_error(param_name, value, "non-negative (≥ 0)", typical_values)
            )

    @classmethod
    def validate_in_range(
        cls,
        value: float,
        param_name: str,
        min_val: Optional[float] = None,
        max_val: Optional[float] = None,
        typical_values: Optional[str] = None,
    ) -> None:
        """Check ``min_val <= value <= max_val``; either bound may be omitted."""
        too_low = min_val is not None and value < min_val
        too_high = max_val is not None and value > max_val
        if not (too_low or too_high):
            return

        if min_val is not None and max_val is not None:
            valid_range = f"[{min_val}, {max_val}]"
        elif min_val is not None:
            valid_range = f">= {min_val}"
        else:
            valid_range = f"<= {max_val}"
        raise ValidationError(
            cls.format_range_error(param_name, value, valid_range, typical_values)
        )

    @classmethod
    def print_output_formats(cls, console: Optional[Console] = None) -> None:
        """Print the formats ``flamecanvas render`` can write, keyed by file suffix."""
        console = console or Console()
        table = Table(title="Output formats")
        table.add_column("Suffix", style="cyan")
        table.add_column("Description")
        for fmt in cls.VALID_OUTPUT_FORMATS:
            table.add_row(f".{fmt}", cls.OUTPUT_FORMAT_DESCRIPTIONS[fmt])
        console.print(table)
