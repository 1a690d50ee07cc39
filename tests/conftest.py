# tests/conftest.py

"""Shared pytest fixtures for the storefront tests."""

import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from storefront.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path: Path) -> Generator[Path, None, None]:
    """Send session logs to a temp ``logs/`` dir and drop handlers after."""
    logs_dir = tmp_path / "logs"
    with patch.object(Settings, "LOGS_DIR", logs_dir):
        yield logs_dir

    project_logger = logging.getLogger("storefront")
    for handler in list(project_logger.handlers):
        handler.close()
        project_logger.removeHandler(handler)
