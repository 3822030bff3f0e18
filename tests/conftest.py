# tests/conftest.py
from __future__ import annotations

import os
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from loguru import logger

from circlog.utils.clock import Clock

ENV_KEYS = ("CIRCLOG_CONFIG", "CIRCLOG_LOG_DIR", "CIRCLOG_DIAG_LEVEL")


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """
    load_dotenv writes straight into os.environ, so drop our keys on both sides.
    """
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    for key in ENV_KEYS:
        os.environ.pop(key, None)


class ManualClock(Clock):
    def __init__(self, start: datetime):
        self.current = start

    def now(self) -> datetime:
        return self.current

    def set(self, dt_: datetime) -> None:
        self.current = dt_

    def advance(self, **delta) -> None:
        self.current = self.current + timedelta(**delta)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(datetime(2025, 1, 3, 10, 5, 0))


@pytest.fixture
def captured_logs():
    messages = []
    logger.add(lambda msg: messages.append(str(msg)), level="DEBUG", format="{level} | {message}")
    return messages


@pytest.fixture
def make_config(tmp_path: Path):
    """
    Write a JSON config record and return its path.

        path = make_config(loggingType="hour", frequency=2, maxEntries=3)
    """
    import json

    def _make(**record) -> Path:
        path = tmp_path / "config.json"
        path.write_text(json.dumps(record), encoding="utf-8")
        return path

    return _make


def make_log_files(directory: Path, count: int, start: float = 1_000_000.0, prefix: str = "old") -> list:
    """
    count 个 .log 文件，mtime 依次递增（最旧的在前）
    """
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for i in range(count):
        p = directory / f"{prefix}-{i:02d}.log"
        p.write_text(f"{i}\n", encoding="utf-8")
        os.utime(p, (start + i * 60, start + i * 60))
        paths.append(p)
    return paths


@pytest.fixture
def log_files():
    return make_log_files
