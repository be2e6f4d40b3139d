"""Tests for the shared logging and error-policy helpers."""

import sys

import pytest
from loguru import logger

from geodraw.common.errors import ConfigError, raise_fatal_with_remedy, warn_soft_degrade
from geodraw.common.logging import configure_logging


class TestErrors:
    def test_raise_fatal_with_remedy(self):
        with pytest.raises(RuntimeError, match="Remediation: do this"):
            raise_fatal_with_remedy("it broke", "do this")

    def test_custom_exception_type(self):
        with pytest.raises(ConfigError, match="bad value"):
            raise_fatal_with_remedy("bad value", "fix it", ConfigError)

    def test_warn_soft_degrade(self, logs):
        warn_soft_degrade("drawing surface", "not attached", "ignoring request")
        assert (
            "WARNING:Optional component 'drawing surface' issue: not attached. "
            "Fallback: ignoring request"
        ) in logs


class TestLogging:
    def test_configure_logging_is_idempotent(self, capsys):
        try:
            configure_logging(verbose=True)
            configure_logging(verbose=False)
            logger.debug("hidden")
            logger.info("shown")
            err = capsys.readouterr().err
            assert "shown" in err
            assert "hidden" not in err
        finally:
            logger.remove()
            logger.add(lambda msg: sys.stderr.write(msg))

    def test_log_file_sink(self, tmp_path):
        log_file = tmp_path / "editor.log"
        try:
            configure_logging(log_file=log_file)
            logger.info("Started draw_polygon")
        finally:
            logger.remove()
            logger.add(lambda msg: sys.stderr.write(msg))
        assert "Started draw_polygon" in log_file.read_text()

