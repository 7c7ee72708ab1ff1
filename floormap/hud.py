from __future__ import annotations
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from .utils import PANEL_BG, PANEL_FONT_PX, PANEL_MARGIN, PANEL_PADDING


class DescriptionPanel(QWidget):
    """Room description pinned to the bottom-left corner of the map viewport."""

    def __init__(self, view):
        super().__init__(view.viewport())
        self.view = view
        self.setObjectName("DescriptionPanel")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setAttribute(Qt.WA_TransparentForMouseEvents, True)
        self.setStyleSheet(f"""
            QWidget#DescriptionPanel {{ background: {PANEL_BG}; }}
            QLabel {{ color: white; font-size: {PANEL_FONT_PX}px; background: transparent; }}
        """)

        lay = QHBoxLayout(self)
        lay.setContentsMargins(PANEL_PADDING, PANEL_PADDING, PANEL_PADDING, PANEL_PADDING)
        self.label = QLabel(self)
        self.label.setWordWrap(True)
        self.label.setTextFormat(Qt.PlainText)
        lay.addWidget(self.label)
        self.hide()

    def text(self) -> str:
        return self.label.text()

    def set_text(self, text: str):
        self.label.setText(text)
        if not text:
            self.hide()
            return
        self.setMaximumWidth(max(1, self.view.viewport().width() - 2 * PANEL_MARGIN))
        self.adjustSize()
        self.reposition()
        self.show()
        self.raise_()

    def reposition(self):
        vh = self.view.viewport().height()
        self.move(PANEL_MARGIN, vh - self.height() - PANEL_MARGIN)
