"""Pytest configuration — ensure the repository root is on sys.path."""

import sys
from pathlib import Path

import pytest

# Add the repository root to sys.path so `triangle_solver` and `handler` are importable
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR
