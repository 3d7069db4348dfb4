# tests/test_logging_setup.py
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from app.shared.config import LogFormat
from utils import logging_setup


@pytest.fixture(autouse=True)
def _restore_logging(monkeypatch: pytest.MonkeyPatch):
    root = logging.getLogger()
    saved_level = root.level
    monkeypatch.setattr(logging_setup, "_INITIALIZED", False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    yield
    # Undo LOG_FILE / LOG_FORMAT overrides before configuring again.
    monkeypatch.undo()
    logging_setup.init_logging(force=True)
    root.setLevel(saved_level)


def test_init_logging_is_idempotent() -> None:
    logging_setup.init_logging(level=logging.WARNING)
    assert logging.getLogger().level == logging.WARNING

    # Second call without force keeps the first configuration.
    logging_setup.init_logging(level=logging.DEBUG)
    assert logging.getLogger().level == logging.WARNING

    logging_setup.init_logging(level=logging.DEBUG, force=True)
    assert logging.getLogger().level == logging.DEBUG


def test_log_file_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    log_path = tmp_path / "plural.log"
    monkeypatch.setenv("LOG_FILE", str(log_path))
    monkeypatch.setattr(logging_setup.settings, "LOG_FORMAT", LogFormat.JSON)

    logging_setup.init_logging(level=logging.INFO)
    logging_setup.get_logger("tests.logging").info("irregulars_built", nouns=3)
    for handler in logging.getLogger().handlers:
        handler.flush()

    record = json.loads(log_path.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert record["event"] == "irregulars_built"
    assert record["nouns"] == 3
    assert record["level"] == "info"
    assert record["logger"] == "tests.logging"


def test_get_logger_initializes_on_first_use() -> None:
    assert not logging_setup._INITIALIZED
    logging_setup.get_logger("tests.logging")
    assert logging_setup._INITIALIZED
