# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Shared fixtures for contextlog tests."""

from io import StringIO
from unittest.mock import patch

import pytest

from contextlog import FileLoggerOptions, LoggerOptions


@pytest.fixture
def streams():
    """Capture stdout and stderr as StringIO objects."""
    with patch("sys.stdout", new_callable=StringIO) as stdout, patch(
        "sys.stderr", new_callable=StringIO
    ) as stderr:
        yield stdout, stderr


@pytest.fixture
def plain_options() -> LoggerOptions:
    """Options producing deterministic, uncolored lines without timestamps."""
    return LoggerOptions(level="debug", context="test", timestamp=False)


@pytest.fixture
def file_options(tmp_path) -> FileLoggerOptions:
    """File options writing into a temporary directory without timestamps."""
    return FileLoggerOptions(
        context="test",
        timestamp=False,
        file_path=str(tmp_path / "logs" / "app.log"),
    )
