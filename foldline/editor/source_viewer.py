"""Read-only source viewer with structural folding and wheel/pinch zoom."""
from __future__ import annotations

from typing import List

from PySide6.QtCore import QEvent, QRect, QSize, Qt, Signal
from PySide6.QtGui import QEventPoint, QMouseEvent, QPainter, QTouchEvent, QWheelEvent
from PySide6.QtWidgets import QPlainTextEdit, QWidget

from foldline.core.config import DEFAULT_ZOOM_BOUNDS, ConfigManager
from foldline.core.logging import get_logger
from foldline.core.theme import ThemeManager
from foldline.editor.folding.manager import FoldingManager
from foldline.editor.folding.visibility import LineDirective, hidden_lines
from foldline.editor.gutter import gutter_width, marker_glyph, marker_rect
from foldline.editor.zoom import Point, ZoomController

logger = get_logger(__name__)


class FoldGutter(QWidget):
    """Side widget that paints line numbers and fold markers."""

    def __init__(self, viewer: "SourceViewer") -> None:
        super().__init__(viewer)
        self.viewer = viewer

    def sizeHint(self) -> QSize:  # type: ignore[override]
        return QSize(self.viewer.gutter_width(), 0)

    def paintEvent(self, event) -> None:  # type: ignore[override]
        self.viewer._paint_gutter(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        self.viewer.toggle_fold_from_gutter(event)


def _touch_points(event: QTouchEvent) -> List[Point]:
    points = []
    for point in event.points():
        if point.state() == QEventPoint.State.Released:
            continue
        position = point.position()
        points.append((position.x(), position.y()))
    return points


class SourceViewer(QPlainTextEdit):
    """Displays text read-only and folds bracket or tag delimited blocks.

    Folding never edits the document: collapsed interiors are hidden by
    toggling block visibility, so ``toPlainText`` always returns the full
    content. Modifier+wheel and two-finger pinch change the font scale;
    single-pointer input is left to the default selection handling.
    """

    foldsApplied = Signal()

    def __init__(
        self,
        parent: QWidget | None = None,
        config: ConfigManager | None = None,
        theme: ThemeManager | None = None,
    ) -> None:
        super().__init__(parent)
        self.config = config
        self.theme = theme or ThemeManager()
        viewer_cfg = config.section("viewer") if config else {}
        self._show_line_numbers = bool(viewer_cfg.get("show_line_numbers", True))
        self._font_family = str(viewer_cfg.get("font_family", "JetBrains Mono"))
        self._content: str | None = None
        self._directives: list[LineDirective] = []

        self.setReadOnly(True)
        self.setTextInteractionFlags(Qt.TextSelectableByMouse | Qt.TextSelectableByKeyboard)
        self.setLineWrapMode(QPlainTextEdit.NoWrap)

        minimum, maximum = config.zoom_bounds() if config else DEFAULT_ZOOM_BOUNDS
        initial = config.initial_font_scale() if config else 14.0
        self.zoom = ZoomController(initial, minimum, maximum, parent=self)
        self.setFont(self.theme.preferred_font(self._font_family, self.zoom.scale))

        self.folding = FoldingManager(
            self,
            comment_prefixes=config.comment_prefixes() if config else None,
            enabled=config.folding_enabled() if config else True,
        )
        self.gutter = FoldGutter(self)
        self.viewport().setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)

        self.zoom.scaleChanged.connect(self._apply_font_scale)
        self.folding.rangesChanged.connect(self._apply_folds)
        self.folding.foldToggled.connect(self._on_fold_toggled)
        self.blockCountChanged.connect(self._update_gutter_width)
        self.updateRequest.connect(self._update_gutter_area)
        self._update_gutter_width()

    # Content ---------------------------------------------------------------
    @property
    def content(self) -> str | None:
        return self._content

    @property
    def font_scale(self) -> float:
        return self.zoom.scale

    def set_content(self, text: str | None) -> None:
        """Replace the displayed text and recompute fold ranges from scratch."""
        self.zoom.cancel_gesture()
        self._content = text
        self.setPlainText(text or "")
        # Qt also breaks blocks on "\r" and U+2029, so fold lines come from the blocks.
        self.folding.set_content(None if text is None else "\n".join(self._block_texts()))

    def _block_texts(self) -> List[str]:
        texts = []
        block = self.document().firstBlock()
        while block.isValid():
            texts.append(block.text())
            block = block.next()
        return texts

    def line_directive(self, line: int) -> LineDirective:
        if 1 <= line <= len(self._directives):
            return self._directives[line - 1]
        return self.folding.directive(line)

    def activate_line(self, line: int, selected_text: str = "") -> bool:
        """Toggle the fold starting at ``line`` unless text was just selected."""
        directive = self.line_directive(line)
        if directive.on_activate is None:
            return False
        return directive.on_activate(selected_text)

    # Folding -------------------------------------------------------------
    def _apply_folds(self) -> None:
        self._directives = self.folding.directives()
        doc = self.document()
        mask = hidden_lines(doc.blockCount(), self.folding.ranges, self.folding.state)
        block = doc.firstBlock()
        while block.isValid():
            block.setVisible(not mask[block.blockNumber() + 1])
            block = block.next()
        doc.markContentsDirty(0, doc.characterCount())
        self._ensure_cursor_visible()
        self.viewport().update()
        self.gutter.update()
        self.foldsApplied.emit()

    def _on_fold_toggled(self, start: int, collapsed: bool) -> None:
        logger.debug("Fold at line %d %s", start, "collapsed" if collapsed else "expanded")
        self._apply_folds()

    def _ensure_cursor_visible(self) -> None:
        cursor = self.textCursor()
        block = cursor.block()
        if block.isVisible():
            return
        while block.isValid() and not block.isVisible():
            block = block.previous()
        if block.isValid():
            cursor.setPosition(block.position())
            self.setTextCursor(cursor)

    # Zoom ----------------------------------------------------------------
    def _apply_font_scale(self, scale: float) -> None:
        font = self.font()
        font.setPointSizeF(scale)
        self.setFont(font)
        self._update_gutter_width()
        self.gutter.update()

    def wheelEvent(self, event: QWheelEvent) -> None:  # type: ignore[override]
        precision = bool(event.modifiers() & (Qt.ControlModifier | Qt.MetaModifier))
        if self.zoom.handle_wheel(event.angleDelta().y(), precision):
            event.accept()
            return
        super().wheelEvent(event)

    def viewportEvent(self, event: QEvent) -> bool:  # type: ignore[override]
        event_type = event.type()
        if event_type in (QEvent.Type.TouchBegin, QEvent.Type.TouchUpdate):
            if self.zoom.update_pinch(_touch_points(event)):
                event.accept()
                return True
        elif event_type in (QEvent.Type.TouchEnd, QEvent.Type.TouchCancel):
            self.zoom.end_pinch()
        return super().viewportEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        super().mouseReleaseEvent(event)
        if event.button() != Qt.MouseButton.LeftButton:
            return
        selected_text = self.textCursor().selectedText()
        line = self.cursorForPosition(event.position().toPoint()).blockNumber() + 1
        self.activate_line(line, selected_text)

    # Gutter plumbing -----------------------------------------------------
    def gutter_width(self) -> int:
        metrics = self.fontMetrics()
        return gutter_width(
            self.blockCount(),
            metrics.horizontalAdvance("9"),
            metrics.height(),
            self._show_line_numbers,
        )

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        cr = self.contentsRect()
        self.gutter.setGeometry(QRect(cr.left(), cr.top(), self.gutter_width(), cr.height()))

    def _update_gutter_width(self, _=None) -> None:
        self.setViewportMargins(self.gutter_width(), 0, 0, 0)

    def _update_gutter_area(self, rect, dy) -> None:
        if dy:
            self.gutter.scroll(0, dy)
        else:
            self.gutter.update(0, rect.y(), self.gutter.width(), rect.height())

    def _paint_gutter(self, event) -> None:
        painter = QPainter(self.gutter)
        painter.fillRect(event.rect(), self.theme.editor_color("gutter_background"))

        block = self.firstVisibleBlock()
        top = int(self.blockBoundingGeometry(block).translated(self.contentOffset()).top())
        bottom = top + int(self.blockBoundingRect(block).height())
        current_line = self.textCursor().blockNumber()
        line_height = self.fontMetrics().height()
        width = self.gutter.width()

        while block.isValid() and top <= event.rect().bottom():
            block_number = block.blockNumber()
            if block.isVisible() and bottom >= event.rect().top():
                if self._show_line_numbers:
                    key = "active_line_number" if block_number == current_line else "line_number"
                    painter.setPen(self.theme.editor_color(key))
                    painter.drawText(
                        0, top, width - line_height - 8, line_height, Qt.AlignRight, str(block_number + 1)
                    )
                glyph = marker_glyph(self.line_directive(block_number + 1))
                if glyph:
                    folded = self.folding.is_folded(block_number + 1)
                    painter.setPen(self.theme.editor_color("folded_marker" if folded else "fold_marker"))
                    painter.drawText(marker_rect(width, top, line_height, line_height), Qt.AlignCenter, glyph)
            block = block.next()
            top = bottom
            bottom = top + int(self.blockBoundingRect(block).height())

        painter.setPen(self.theme.editor_color("gutter_divider"))
        painter.drawLine(width - 1, event.rect().top(), width - 1, event.rect().bottom())

    def _block_at_position(self, y: float):
        block = self.firstVisibleBlock()
        top = int(self.blockBoundingGeometry(block).translated(self.contentOffset()).top())
        bottom = top + int(self.blockBoundingRect(block).height())
        while block.isValid() and top <= y:
            if block.isVisible() and bottom >= y:
                return block
            block = block.next()
            top = bottom
            bottom = top + int(self.blockBoundingRect(block).height())
        return None

    def toggle_fold_from_gutter(self, event: QMouseEvent) -> None:
        block = self._block_at_position(event.position().y())
        if block is not None:
            self.activate_line(block.blockNumber() + 1)

