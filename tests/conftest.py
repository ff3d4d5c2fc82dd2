"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import os
import tempfile

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
# Keep log files and user settings out of the real home directory.
os.environ.setdefault("XDG_CONFIG_HOME", tempfile.mkdtemp(prefix="foldline-tests-"))


@pytest.fixture(scope="session")
def qt_app():
    """Provide a shared QApplication instance for widget tests."""

    from PySide6.QtWidgets import QApplication

    try:
        return QApplication.instance() or QApplication([])
    except RuntimeError as exc:  # pragma: no cover - depends on the host display stack
        pytest.skip(f"Qt application unavailable: {exc}")
