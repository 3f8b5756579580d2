# flamecanvas/model/storage.py
from __future__ import annotations

import json
from pathlib import Path

from loguru import logger

from flamecanvas.model.call_tree import CallTreeModel


def save_model(model: CallTreeModel, path: Path) -> None:
    """Save a call tree model as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(model.to_dict(), f, indent=2)


def load_model(path: Path) -> CallTreeModel:
    """Load a call tree model from JSON.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a valid model document
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Model file not found: {path}")

    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path} is not valid JSON: {e}") from e

    model = CallTreeModel.from_dict(data)
    logger.debug(
        f"Loaded {path.name}: {len(model.nodes)} nodes, {len(model.samples)} samples, "
        f"{model.duration / 1000:.1f} ms"
    )
    return model
