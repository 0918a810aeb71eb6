"""Shared pytest fixtures."""

import pytest

import xdgdir.core.services.observability as obs


@pytest.fixture(autouse=True)
def reset_observability(monkeypatch):
    """Start every test with a fresh run id and default logging settings."""
    monkeypatch.setattr(obs, "_current_run_id", None)
    for name in ("XDGDIR_RUN_ID", "XDGDIR_LOG_FORMAT", "XDGDIR_DEBUG", "XDGDIR_LOG_SILENT"):
        monkeypatch.delenv(name, raising=False)
    yield
