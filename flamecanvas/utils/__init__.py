"""Shared utilities for flamecanvas."""

from __future__ import annotations

from flamecanvas.utils.logging_config import setup_logging


__all__ = ["setup_logging"]
