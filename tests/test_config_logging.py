"""Tests for settings and structured logging."""

import logging

import pytest

from validwrap.config import DEFAULT_REGEX_SIZE_LIMIT, Settings
from validwrap.logging import LoggerRegistry, configure_logging, get_logger, validation_logger
from validwrap.validation import regex_string


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("REGEX_SIZE_LIMIT", "HOST_INTEGRATION", "LOG_LEVEL", "LOG_JSON"):
            monkeypatch.delenv(f"VALIDWRAP_{name}", raising=False)
        s = Settings(_env_file=None)
        assert s.REGEX_SIZE_LIMIT == DEFAULT_REGEX_SIZE_LIMIT
        assert s.HOST_INTEGRATION is False
        assert s.LOG_LEVEL == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("VALIDWRAP_REGEX_SIZE_LIMIT", "4096")
        monkeypatch.setenv("VALIDWRAP_HOST_INTEGRATION", "true")
        s = Settings(_env_file=None)
        assert s.REGEX_SIZE_LIMIT == 4096
        assert s.HOST_INTEGRATION is True


class TestLogging:
    def test_registry_caches_domain_loggers(self):
        assert LoggerRegistry.get("validation") is validation_logger()

    def test_rejection_logged_at_debug(self, caplog):
        Greet = regex_string("Greet", r"^Hi$")
        with caplog.at_level(logging.DEBUG, logger="validwrap.validation"):
            assert Greet.from_str("Hey").is_err()
        assert any("validation_rejected" in r.getMessage() for r in caplog.records)

    def test_pattern_failure_logged_at_warning(self, caplog):
        Broken = regex_string("Broken", r"(")
        with caplog.at_level(logging.WARNING, logger="validwrap.validation"):
            Broken.from_str("x")
        assert any(
            r.levelno == logging.WARNING and "pattern_compile_failed" in r.getMessage()
            for r in caplog.records
        )

    @pytest.mark.parametrize("json_logs", [False, True])
    def test_configure_logging(self, json_logs):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("DEBUG", json_logs=json_logs)
            assert root.level == logging.DEBUG
            get_logger("validwrap.test").info("configured", json_logs=json_logs)
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)
