"""Application bootstrap for the Foldline viewer."""
from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from PySide6.QtWidgets import QApplication, QMainWindow, QMessageBox

from foldline.core.config import ConfigManager
from foldline.core.logging import configure_logging, get_logger
from foldline.core.theme import ThemeManager
from foldline.editor.source_viewer import SourceViewer

IMAGE_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "svg"}

logger = get_logger(__name__)


def load_text(path: Path) -> str:
    """Return the text to display for ``path``, or a user-facing message.

    Undecodable bytes are replaced rather than rejected.
    """
    if path.is_dir():
        return "Error: Path is a directory, not a file."
    if path.suffix.lower().lstrip(".") in IMAGE_EXTENSIONS:
        return "Image files are not displayed in the source viewer."
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("Could not load %s: %s", path, exc)
        return "Could not load file content."


class ViewerWindow(QMainWindow):
    def __init__(self, config: ConfigManager, theme: ThemeManager) -> None:
        super().__init__()
        self.viewer = SourceViewer(self, config=config, theme=theme)
        self.setCentralWidget(self.viewer)
        self.setWindowTitle("Foldline")
        self.resize(960, 720)

    def open_file(self, path: Path) -> None:
        self.setWindowTitle(f"{path.name} - Foldline")
        self.viewer.set_content(load_text(path))


class FoldlineApplication:
    """Owns application-wide objects and startup sequence."""

    def __init__(self, argv: Sequence[str] | None = None) -> None:
        self.args = self._parse_args(argv)
        configure_logging(logging.DEBUG if self.args.debug else logging.INFO)
        self.logger = get_logger(__name__)
        self.qt_app = QApplication.instance() or QApplication(sys.argv)
        self._install_exception_hook()
        self.theme = ThemeManager()
        self.theme.apply(self.qt_app)
        self.config = ConfigManager()
        self.window = ViewerWindow(self.config, self.theme)

    def _parse_args(self, argv: Sequence[str] | None) -> argparse.Namespace:
        parser = argparse.ArgumentParser(description="Foldline source viewer")
        parser.add_argument("path", nargs="?", help="File to open")
        parser.add_argument("--debug", action="store_true", help="Enable debug logging")
        return parser.parse_args(argv)

    def run(self) -> int:
        try:
            if self.args.path:
                self.window.open_file(Path(self.args.path))
            self.window.show()
            return self.qt_app.exec()
        except Exception:
            self.logger.exception("Unhandled exception in main loop")
            return 1

    # Error handling
    def _install_exception_hook(self) -> None:
        sys.excepthook = self._handle_exception  # type: ignore[assignment]

    def _handle_exception(self, exc_type, exc_value, exc_tb) -> None:  # type: ignore[override]
        """Global exception hook that avoids recursive crashes when formatting fails."""
        try:
            formatted = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
        except RecursionError:
            logging.error("Uncaught exception (formatting failed with RecursionError)")
            return
        logging.error("Uncaught exception:\n%s", formatted)
        dialog = QMessageBox()
        dialog.setWindowTitle("Unexpected Error")
        dialog.setIcon(QMessageBox.Critical)
        dialog.setText("An unexpected error occurred. Details have been written to the log file.")
        dialog.setDetailedText(formatted)
        dialog.exec()
