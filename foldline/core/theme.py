"""Theme helpers for the Foldline viewer."""
from __future__ import annotations

from PySide6.QtGui import QColor, QFont, QFontDatabase, QPalette
from PySide6.QtWidgets import QApplication


class ThemeManager:
    """Applies and exposes the dark viewer theme."""

    def __init__(self) -> None:
        self._palette = self._build_dark_palette()

    def apply(self, app: QApplication) -> None:
        """Apply the dark palette and fixed-width font to the application."""
        app.setStyle("Fusion")
        self._palette = self._build_dark_palette()
        app.setPalette(self._palette)
        app.setFont(self.preferred_font())

    def editor_color(self, key: str) -> QColor:
        """Get viewer-specific colors (line numbers, gutter, fold markers)."""
        editor_colors = {
            "line_number": QColor("#858585"),
            "active_line_number": QColor("#C6C6C6"),
            "gutter_background": QColor("#1E1E1E"),
            "gutter_divider": QColor("#2D2D30"),
            "fold_marker": QColor("#8B8B8B"),
            "folded_marker": QColor("#569CD6"),
        }
        return editor_colors.get(key, QColor(200, 200, 200))

    def _build_dark_palette(self) -> QPalette:
        palette = QPalette()
        palette.setColor(QPalette.Window, QColor("#101113"))
        palette.setColor(QPalette.WindowText, QColor("#D4D4D4"))
        palette.setColor(QPalette.Base, QColor("#101113"))
        palette.setColor(QPalette.AlternateBase, QColor("#15171a"))
        palette.setColor(QPalette.ToolTipBase, QColor("#101113"))
        palette.setColor(QPalette.ToolTipText, QColor("#D4D4D4"))
        palette.setColor(QPalette.Text, QColor("#D4D4D4"))
        palette.setColor(QPalette.Button, QColor("#101113"))
        palette.setColor(QPalette.ButtonText, QColor("#D4D4D4"))
        palette.setColor(QPalette.BrightText, QColor("#ffffff"))
        palette.setColor(QPalette.Highlight, QColor("#264F78"))  # Selection background
        palette.setColor(QPalette.HighlightedText, QColor("#ffffff"))
        palette.setColor(QPalette.Link, QColor("#569CD6"))
        palette.setColor(QPalette.Dark, QColor("#0d0e10"))
        return palette

    def preferred_font(self, family: str = "JetBrains Mono", size: float = 11) -> QFont:
        if family in QFontDatabase.families():
            font = QFont(family)
        else:
            font = QFontDatabase.systemFont(QFontDatabase.FixedFont)
        font.setPointSizeF(float(size))
        return font
