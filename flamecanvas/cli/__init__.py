"""Command-line interface for flamecanvas."""

from __future__ import annotations

from flamecanvas.cli.render import create_parser, flamecanvas_command, main


__all__ = ["create_parser", "flamecanvas_command", "main"]
