"""Shared test fixtures."""

from pathlib import Path

import pytest

from batsmen.reader import read_batsmen


DATA_DIR = Path(__file__).resolve().parent.parent / 'data'


@pytest.fixture(scope='session')
def data_dir() -> Path:
    """Path to the data directory."""
    return DATA_DIR


@pytest.fixture(scope='session')
def sample_batsmen():
    """All batsmen from batsmen.txt."""
    return read_batsmen(DATA_DIR / 'batsmen.txt')
