"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Generator

import pytest
import structlog

from adschema.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("adschema")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("adschema").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("adschema").level == logging.WARNING

    def test_reconfigure_replaces_handler(self) -> None:
        first = configure_logging()
        second = configure_logging()
        handlers = logging.getLogger().handlers
        assert second in handlers
        assert first not in handlers

    def test_foreign_handlers_kept(self) -> None:
        foreign = logging.NullHandler()
        logging.getLogger().addHandler(foreign)
        configure_logging()
        assert foreign in logging.getLogger().handlers

    def test_explicit_stream(self) -> None:
        stream = io.StringIO()
        configure_logging(log_json=True, stream=stream)
        logging.getLogger("adschema.domain.audit").warning("catalog has %d errors", 2)
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "catalog has 2 errors"
        assert parsed["logger"] == "adschema.domain.audit"

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("adschema.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "adschema.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_routed_through_structlog(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("adschema.services.schema").debug("validated %d values", 3)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "validated 3 values"
        assert parsed["level"] == "debug"
