"""
Pytest configuration and shared fixtures for pollwatch tests.
"""

import sys
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru():
    """Give every test a fresh stderr sink.

    CLI tests reconfigure loguru against CliRunner's temporary streams,
    which are closed once the invocation returns.
    """
    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message), level="DEBUG")


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="TRACE")
    yield messages
    logger.remove(handler_id)


def make_files(basedir: Path, files: list[str]) -> list[Path]:
    """Create empty files (and their parent directories) under ``basedir``."""
    fullpaths = []
    for file in files:
        path = basedir / file
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        fullpaths.append(path)
    return fullpaths


@pytest.fixture
def files_in(tmp_path):
    """Factory fixture: ``files_in(["a.txt", "nested/b.txt"])`` -> tmp_path."""

    def _make(files: list[str]) -> Path:
        make_files(tmp_path, files)
        return tmp_path

    return _make
