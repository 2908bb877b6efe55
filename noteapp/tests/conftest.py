from __future__ import annotations

import logging

import pytest

from noteapp.db import initialize
from noteapp.services.note_svc import NoteService


class FakeClock:
    """Deterministic clock; each tick() moves time forward by ``step`` seconds."""

    def __init__(self, start: int = 1_700_000_000, step: int = 1):
        self.now = start
        self.step = step

    def __call__(self) -> float:
        return float(self.now)

    def tick(self, seconds: int | None = None):
        self.now += self.step if seconds is None else seconds


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # Never let a test touch the real user data dir or a stray config.yaml
    for key in ("NOTEAPP_CONFIG", "NOTEAPP_DATA_DIR", "NOTEAPP_APP_NAME", "NOTEAPP_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    yield
    # setup_logging() attaches handlers to streams/files owned by this test
    app_logger = logging.getLogger("noteapp")
    for h in list(app_logger.handlers):
        app_logger.removeHandler(h)
        h.close()
    app_logger.setLevel(logging.NOTSET)


@pytest.fixture()
def data_dir(tmp_path):
    return tmp_path / "data" / "NoteApp"


@pytest.fixture()
def conn(data_dir):
    c = initialize("NoteApp", data_dir=data_dir)
    try:
        yield c
    finally:
        c.close()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def service(conn, clock):
    return NoteService(conn, clock=clock)
