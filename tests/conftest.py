"""Shared fixtures for the validwrap test-suite."""
from __future__ import annotations

import pytest

from validwrap import config


@pytest.fixture
def host_integration(monkeypatch):
    """Enable form-value decoding for the duration of a test."""
    monkeypatch.setattr(config.settings, "HOST_INTEGRATION", True)
    return config.settings


@pytest.fixture
def no_host_integration(monkeypatch):
    monkeypatch.setattr(config.settings, "HOST_INTEGRATION", False)
    return config.settings


@pytest.fixture
def small_regex_limit(monkeypatch):
    """Shrink the pattern size ceiling so oversized patterns are cheap to build."""
    monkeypatch.setattr(config.settings, "REGEX_SIZE_LIMIT", 1_000)
    return config.settings
