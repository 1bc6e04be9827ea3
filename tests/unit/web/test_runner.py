"""Tests for the uvicorn runner."""

import copy

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from hitbadge.app import App
from hitbadge.web.runner import run_server


def test_run_server_leaves_uvicorn_defaults_untouched(config, monkeypatch):
    """Test that custom log formats go to a private copy of uvicorn's config."""
    original = copy.deepcopy(LOGGING_CONFIG)
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))

    run_server(App(config), config)

    assert LOGGING_CONFIG == original
    log_config = calls[0]["log_config"]
    assert log_config["formatters"]["default"]["fmt"] == "%(asctime)s - %(levelname)s - %(message)s"
    assert calls[0]["host"] == config.host
    assert calls[0]["port"] == config.port
