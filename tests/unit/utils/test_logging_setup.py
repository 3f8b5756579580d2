"""Tests for the flamecanvas loguru sinks."""

from __future__ import annotations

import sys

import pytest
from loguru import logger

from flamecanvas.config import ValidationError
from flamecanvas.graph import build_columns
from flamecanvas.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_default_sink():
    yield
    logger.remove()
    logger.add(sys.stderr)


def _written(log_file):
    logger.remove()  # closes the file sink
    return log_file.read_text()


class TestSetupLogging:
    def test_file_sink_keeps_package_records_only(self, abc_model, tmp_path):
        log_file = tmp_path / "flame.log"
        sink_ids = setup_logging(level="debug", log_file=log_file)
        assert len(sink_ids) == 2

        build_columns(abc_model)
        logger.info("host application record")

        text = _written(log_file)
        assert "columns from" in text
        assert "flamecanvas.graph.columns" in text
        assert "host application record" not in text

    def test_all_records_when_not_package_only(self, tmp_path):
        log_file = tmp_path / "all.log"
        setup_logging(log_file=log_file, package_only=False)
        logger.info("host application record")
        assert "host application record" in _written(log_file)

    def test_level_filters_debug(self, abc_model, tmp_path):
        log_file = tmp_path / "info.log"
        setup_logging(level="INFO", log_file=log_file)
        build_columns(abc_model)
        assert "Built" not in _written(log_file)

    def test_unknown_level(self):
        with pytest.raises(ValidationError, match="Invalid log level: 'LOUD'"):
            setup_logging(level="loud")
