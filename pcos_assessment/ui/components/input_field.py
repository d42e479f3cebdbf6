# -*- coding: utf-8 -*-
"""
Input Field Components
Line edit for numeric values and a combo box for coded options.
"""

from typing import List, Optional, Tuple

from PyQt5.QtWidgets import QComboBox, QLineEdit

from pcos_assessment.app.config import Config
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.utils.helpers import format_field_value, parse_number

INPUT_STYLE = f"""
    QLineEdit, QComboBox {{
        border: 1px solid {Config.BORDER_COLOR};
        border-radius: 6px;
        padding: 6px 8px;
        background-color: white;
        min-height: 22px;
    }}
    QLineEdit:focus, QComboBox:focus {{
        border: 1px solid {Config.PRIMARY_COLOR};
    }}
"""


class NumberField(QLineEdit):
    """
    Free-text numeric input.

    No validator is attached: text that does not parse is kept as typed
    and reads back as NaN.

    Usage:
        field = NumberField(placeholder="e.g., 165")
        field.textChanged.connect(self.on_input_changed)
        height = field.value()  # None, float or NaN
    """

    def __init__(self, placeholder: str = "", parent=None):
        super().__init__(parent)
        if placeholder:
            self.setPlaceholderText(placeholder)
        self.setStyleSheet(INPUT_STYLE)

    def value(self) -> Optional[float]:
        """Parsed value: None when empty, NaN when not a number."""
        return parse_number(self.text())

    def set_value(self, value: Optional[float]):
        self.setText(format_field_value(value))


class OptionCombo(QComboBox):
    """
    Combo box over (code, label) options with an empty "Select..." entry.
    """

    def __init__(self, options: List[Tuple[str, str]], placeholder: str = None, parent=None):
        super().__init__(parent)
        self.addItem(placeholder or tr("wizard.select_placeholder"), None)
        for code, label in options:
            self.addItem(label, code)
        self.setStyleSheet(INPUT_STYLE)

    def value(self) -> Optional[str]:
        """Selected option code, or None."""
        return self.currentData()

    def set_value(self, code: Optional[str]):
        index = self.findData(code) if code is not None else 0
        self.setCurrentIndex(index if index >= 0 else 0)
