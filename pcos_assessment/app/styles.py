# -*- coding: utf-8 -*-
"""
Application-wide stylesheet.
"""

from .config import Config


def get_stylesheet() -> str:
    """Generate the main application stylesheet."""
    return f"""
    /* ===== Global Styles ===== */
    QWidget {{
        font-family: "{Config.FONT_FAMILY}", sans-serif;
        font-size: {Config.FONT_SIZE}pt;
        color: {Config.TEXT_COLOR};
    }}

    QMainWindow, QScrollArea, QStackedWidget {{
        background-color: {Config.BACKGROUND_COLOR};
    }}

    /* ===== Buttons ===== */
    QPushButton {{
        background-color: white;
        border: 1px solid {Config.BORDER_COLOR};
        border-radius: 6px;
        padding: 6px 14px;
    }}

    QPushButton:hover {{
        border-color: {Config.PRIMARY_COLOR};
    }}

    QPushButton:disabled {{
        color: #9CA3AF;
    }}

    /* ===== Check Boxes ===== */
    QCheckBox::indicator {{
        width: 16px;
        height: 16px;
    }}
    """


def primary_button_style() -> str:
    """Filled purple button used for the wizard's forward action."""
    return f"""
        QPushButton {{
            background-color: {Config.PRIMARY_COLOR};
            color: white;
            border: none;
            border-radius: 6px;
            padding: 0 16px;
            font-weight: bold;
        }}
        QPushButton:disabled {{
            background-color: #c4b5fd;
        }}
    """


def progress_bar_style(height: int) -> str:
    """Thin rounded progress bar filled with the primary colour."""
    radius = height // 2
    return f"""
        QProgressBar {{ border: none; background-color: #e9ecef; border-radius: {radius}px; }}
        QProgressBar::chunk {{ background-color: {Config.PRIMARY_COLOR}; border-radius: {radius}px; }}
    """
