# tests/conftest.py

"""Shared pytest fixtures for all tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path: Path) -> Generator[None, None, None]:
    """Point log and result directories at a per-test temp dir."""
    with (
        patch.object(Settings, "LOGS_DIR", tmp_path / "logs"),
        patch.object(Settings, "RESULTS_DIR", tmp_path / "results"),
    ):
        yield
