"""Pytest configuration and reusable fixtures for hostsmith tests."""
from __future__ import annotations

import logging
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Iterator

import pytest

# ---------------------------------------------------------------------------
# Test path setup – make sure `src/` is importable when tests are invoked from
# the project root without an editable install.
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"

if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


SAMPLE_HOSTS = """\
127.0.0.1 localhost
# 10.0.0.5 old-service
10.0.0.1 api.example.com db.example.com
"""


# ---------------------------------------------------------------------------
# Generic fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def temp_dir() -> Iterator[Path]:
    """Return a temporary directory path that is cleaned up afterwards."""
    tmp_path = Path(tempfile.mkdtemp())
    try:
        yield tmp_path
    finally:
        shutil.rmtree(tmp_path, ignore_errors=True)


@pytest.fixture()
def hosts_file(temp_dir: Path) -> Path:
    """A hosts file pre-filled with a small sample."""
    path = temp_dir / "hosts"
    path.write_text(SAMPLE_HOSTS, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep HOSTSMITH_* settings from the developer's shell out of tests."""
    for key in ("HOSTSMITH_FILE", "HOSTSMITH_LOG_LEVEL", "HOSTSMITH_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Drop handlers installed by ``setup_logging`` during a test."""
    root = logging.getLogger()
    package_logger = logging.getLogger("hostsmith")
    handlers, level, package_level = root.handlers[:], root.level, package_logger.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    package_logger.setLevel(package_level)
