"""Tests for the command-line helpers under scripts/."""

import logging
import runpy
from pathlib import Path

import pytest
import uvicorn
from sqlalchemy.exc import OperationalError

import app.db.init_db as init_db_module

SCRIPTS = Path(__file__).resolve().parents[2] / "scripts"


def test_run_dev_logs_banner_and_starts_uvicorn(monkeypatch, caplog):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))
    caplog.set_level(logging.INFO)

    runpy.run_path(str(SCRIPTS / "run_dev.py"), run_name="__main__")

    assert calls == [("app.main:app", {"host": "0.0.0.0", "port": 3001, "reload": True, "log_level": "info"})]
    assert "Starting Powerlog API" in caplog.text


def test_init_db_logs_success(monkeypatch, caplog):
    created = []
    monkeypatch.setattr(init_db_module, "init_db", lambda: created.append(True))
    caplog.set_level(logging.INFO)

    runpy.run_path(str(SCRIPTS / "init_db.py"), run_name="__main__")

    assert created == [True]
    assert "Database initialized" in caplog.text


def test_init_db_logs_failure_and_exits(monkeypatch, caplog):
    def broken():
        raise OperationalError("CREATE TABLE users", {}, Exception("disk full"))

    monkeypatch.setattr(init_db_module, "init_db", broken)

    with pytest.raises(SystemExit) as exc_info:
        runpy.run_path(str(SCRIPTS / "init_db.py"), run_name="__main__")

    assert exc_info.value.code == 1
    assert "Database initialization failed" in caplog.text
