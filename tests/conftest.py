"""Shared fixtures."""

import logging
from pathlib import Path

import pytest

SERVER_CONFIG = "[Server]\nhost=localhost\nport=8080\n"


@pytest.fixture
def server_config(tmp_path: Path) -> Path:
    path = tmp_path / "server.cfg"
    path.write_text(SERVER_CONFIG, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("CONFIGFILEIO_DELIMITER", "CONFIGFILEIO_ENCODING", "CONFIGFILEIO_CREATE_IF_MISSING"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logging.getLogger("configfileio").handlers.clear()
