# -*- coding: utf-8 -*-
"""
Card Components
Framed sections, advisory banners and derived-value labels.
"""

from PyQt5.QtWidgets import QFrame, QLabel, QVBoxLayout
from PyQt5.QtCore import Qt

from pcos_assessment.app.config import Config

ADVISORY_COLORS = {
    "info": ("#EFF6FF", "#1D4ED8"),
    "success": ("#F0FDF4", Config.SUCCESS_COLOR),
    "warning": ("#FFFBEB", Config.WARNING_COLOR),
    "error": ("#FEF2F2", Config.ERROR_COLOR),
}


class Card(QFrame):
    """
    White rounded frame with an optional bold title.

    Child widgets go into card.content_layout.
    """

    def __init__(self, title: str = "", parent=None):
        super().__init__(parent)
        self.setObjectName("card")
        self.setStyleSheet(f"""
            QFrame#card {{
                background-color: white;
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 10px;
            }}
        """)

        self.content_layout = QVBoxLayout(self)
        self.content_layout.setContentsMargins(16, 14, 16, 14)
        self.content_layout.setSpacing(10)

        self.title_label = None
        if title:
            self.title_label = QLabel(title)
            self.title_label.setStyleSheet(
                f"font-weight: bold; font-size: 14px; color: {Config.TEXT_COLOR}; border: none;"
            )
            self.content_layout.addWidget(self.title_label)


class AdvisoryLabel(QLabel):
    """
    Coloured banner for advisories (elevated BP, Rotterdam criterion, ...).

    Variants: info, success, warning, error.
    """

    def __init__(self, text: str = "", variant: str = "info", parent=None):
        super().__init__(text, parent)
        self.setWordWrap(True)
        self.set_variant(variant)

    def set_variant(self, variant: str):
        self.variant = variant
        background, foreground = ADVISORY_COLORS.get(variant, ADVISORY_COLORS["info"])
        self.setStyleSheet(f"""
            QLabel {{
                background-color: {background};
                color: {foreground};
                border: 1px solid {foreground};
                border-radius: 6px;
                padding: 8px 10px;
            }}
        """)


class MetricLabel(QFrame):
    """Caption over a large read-only value, e.g. "Calculated BMI / 25.7"."""

    def __init__(self, caption: str, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.caption_label = QLabel(caption)
        self.caption_label.setStyleSheet(f"color: {Config.TEXT_LIGHT}; font-size: 12px;")
        layout.addWidget(self.caption_label)

        self.value_label = QLabel("")
        self.value_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.value_label.setStyleSheet(
            f"color: {Config.PRIMARY_COLOR}; font-size: 22px; font-weight: bold;"
        )
        layout.addWidget(self.value_label)

    def set_value(self, text: str):
        self.value_label.setText(text)

    def value(self) -> str:
        return self.value_label.text()
