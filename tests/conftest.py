"""Shared test fixtures for flamecanvas unit tests."""

from __future__ import annotations

import pytest

from flamecanvas.config import FlameGraphConfig
from flamecanvas.interaction import FlameGraphController
from flamecanvas.model import Category, build_model_from_stacks
from flamecanvas.viewport import CanvasSize


@pytest.fixture
def make_model():
    """Factory building a model from root-first stacks of function names."""
    return build_model_from_stacks


@pytest.fixture
def abc_model():
    """Four samples: A>B>C, A>B>C, A>B, A, one millisecond each."""
    return build_model_from_stacks(
        [["A", "B", "C"], ["A", "B", "C"], ["A", "B"], ["A"]],
        deltas=[1000, 1000, 1000, 1000],
        sources={"A": "/src/main.py", "B": "/src/work.py"},
    )


@pytest.fixture
def wide_model():
    """Model with several siblings at each level, including a system frame."""
    stacks = [
        ["main", "load", "read"],
        ["main", "load", "read"],
        ["main", "load", "parse"],
        ["main", "run", "step"],
        ["main", "run", "step", "gc"],
        ["main", "run", "flush"],
        ["main", "idle"],
        ["main", "run", "step"],
    ]
    return build_model_from_stacks(
        stacks,
        deltas=[500, 700, 300, 900, 200, 400, 1000, 600],
        sources={"main": "/src/main.py", "run": "/src/run.py", "step": "/src/run.py"},
        categories={"gc": Category.SYSTEM},
    )


@pytest.fixture
def config():
    """Default configuration."""
    return FlameGraphConfig()


@pytest.fixture
def controller(wide_model, config):
    """Controller over ``wide_model`` on an 800x200 canvas, recording open requests."""
    opened = []
    ctrl = FlameGraphController(
        wide_model,
        config=config,
        canvas=CanvasSize(width=800, height=200),
        on_open_document=opened.append,
    )
    ctrl.opened = opened
    return ctrl
