"""Pytest configuration for test isolation.

The CLI loads ``.env`` from the working directory and reads
``STATEMENT_IMPORT_*`` variables, and ``configure_logging`` is a
process-wide one-shot. Each test gets a clean environment, an empty working
directory, and unconfigured package logging.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from statement_import.logging_setup import reset_logging

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("STATEMENT_IMPORT_FORMAT", raising=False)
    monkeypatch.delenv("STATEMENT_IMPORT_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR
