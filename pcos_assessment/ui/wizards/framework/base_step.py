# -*- coding: utf-8 -*-
"""
Base Step - one page of a wizard.

A step owns a draft of its section in its widgets. On every show it is
re-seeded from a copy of the context, and its output leaves only through
collect_data(), which the wizard hands to StepNavigator.advance().
"""

from typing import Dict, Any, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal

from pcos_assessment.app.config import Config


class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Lets QWidget subclasses declare abstract methods."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract wizard step.

    Subclasses build widgets in setup_ui(), read them back in collect_data()
    and usually override populate_data() and can_continue().
    """

    # Current value of can_continue()
    validation_changed = pyqtSignal(bool)

    # Key of this step's record in the aggregate (None for Review)
    section_name: Optional[str] = None

    def __init__(self, context: 'WizardContext', parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.context = context
        self._built = False

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

    def on_show(self):
        """Build on first show, then re-seed from the context and publish the gate."""
        if not self._built:
            self.setup_ui()
            self._built = True
        self.populate_data()
        self.emit_validation_changed()

    def on_hide(self):
        pass

    @abstractmethod
    def setup_ui(self):
        pass

    @abstractmethod
    def collect_data(self) -> Dict[str, Any]:
        """
        Read the widgets into a partial aggregate.

        Returns:
            e.g. {"vitals": VitalsRecord(...)}
        """
        pass

    def populate_data(self):
        pass

    def can_continue(self) -> bool:
        return True

    def get_step_title(self) -> str:
        return self.__class__.__name__

    def get_continue_button_text(self) -> Optional[str]:
        """Label for Continue on this step; None keeps the default."""
        return None

    # =========================================================================
    # Helpers for subclasses
    # =========================================================================

    def get_section(self, default: Any = None) -> Any:
        """Copy of this step's record, or default if it was never confirmed."""
        if self.section_name is None:
            return default
        return self.context.get_data(self.section_name, default)

    def on_input_changed(self, *args):
        """Connect widget edit signals here."""
        self.update_derived_values()
        self.emit_validation_changed()

    def update_derived_values(self):
        pass

    def emit_validation_changed(self):
        self.validation_changed.emit(self.can_continue())

    def create_header(self, title: str, description: str = ""):
        heading = QLabel(title)
        heading.setObjectName("stepHeading")
        heading.setStyleSheet(f"font-size: 18px; font-weight: bold; color: {Config.TEXT_COLOR};")
        self.main_layout.addWidget(heading)

        if description:
            desc = QLabel(description)
            desc.setWordWrap(True)
            desc.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
            self.main_layout.addWidget(desc)
