# -*- coding: utf-8 -*-
"""
Base Wizard - shell shared by step-by-step forms.

Lays out a header (title, reference number, "Step X of N" and a progress
bar), the stacked step pages and a Back / Continue footer. The forward
button turns into Submit on the last step and stays locked while a
submission is in flight.
"""

from typing import Any, List, Optional
from abc import abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFrame, QStackedWidget, QProgressBar
)
from PyQt5.QtCore import pyqtSignal

from .base_step import ABCQWidgetMeta, BaseStep
from .wizard_context import WizardContext
from .step_navigator import StepNavigator
from pcos_assessment.app.config import Config
from pcos_assessment.app.styles import primary_button_style, progress_bar_style
from pcos_assessment.ui.error_handler import ErrorHandler
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)

BAR_STYLE = f"background-color: {Config.BACKGROUND_COLOR};"


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract wizard shell.

    Subclasses provide the context, the steps and on_submit(). Submission
    is asynchronous: on_submit() only starts it, and the subclass reports
    the outcome through submission_finished() or submission_failed().
    """

    # Emitted with the submission result
    wizard_completed = pyqtSignal(object)

    title_key = "wizard.title"
    submit_key = "wizard.button.submit"

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._submitting = False

        self.context = self.create_context()
        self.steps = self.create_steps()
        self.navigator = StepNavigator(self.context, self.steps)

        self._setup_ui()

        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.can_go_next_changed.connect(self._refresh_buttons)
        self.navigator.can_go_previous_changed.connect(self._refresh_buttons)
        self.navigator.start()

    @abstractmethod
    def create_context(self) -> WizardContext:
        pass

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        pass

    @abstractmethod
    def on_submit(self) -> bool:
        """
        Start submitting the collected data.

        Returns:
            True if a submission was started
        """
        pass

    def on_submission_state_changed(self, submitting: bool):
        """Hook for views that show submission progress."""
        pass

    # =========================================================================
    # UI
    # =========================================================================

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        layout.addWidget(self._build_header())
        layout.addWidget(self._separator())

        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        layout.addWidget(self.step_container, 1)

        layout.addWidget(self._separator())
        layout.addWidget(self._build_footer())

    def _separator(self) -> QFrame:
        line = QFrame()
        line.setFrameShape(QFrame.HLine)
        line.setFixedHeight(1)
        line.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        return line

    def _build_header(self) -> QWidget:
        header = QWidget()
        header.setStyleSheet(BAR_STYLE)
        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(10)

        title_row = QHBoxLayout()
        self.title_label = QLabel(tr(self.title_key))
        self.title_label.setStyleSheet("font-size: 18px; font-weight: bold;")
        title_row.addWidget(self.title_label)
        title_row.addStretch()
        self.reference_label = QLabel(self.context.reference_number)
        self.reference_label.setStyleSheet(f"color: {Config.TEXT_LIGHT}; font-size: 11px;")
        title_row.addWidget(self.reference_label)
        layout.addLayout(title_row)

        self.progress_label = QLabel()
        layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(progress_bar_style(6))
        layout.addWidget(self.progress_bar)
        return header

    def _build_footer(self) -> QWidget:
        footer = QWidget()
        footer.setStyleSheet(BAR_STYLE)
        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 12, 20, 12)

        self.btn_previous = QPushButton(tr("wizard.button.back"))
        self.btn_previous.setFixedHeight(40)
        self.btn_previous.clicked.connect(self.navigator.retreat)
        layout.addWidget(self.btn_previous)
        layout.addStretch()

        self.btn_next = QPushButton(tr("wizard.button.continue"))
        self.btn_next.setFixedHeight(40)
        self.btn_next.setMinimumWidth(180)
        self.btn_next.setStyleSheet(primary_button_style())
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)
        return footer

    # =========================================================================
    # Navigation and submission
    # =========================================================================

    def _handle_next(self):
        """Continue, or submit from the last step. Ignored while locked."""
        step = self.navigator.get_current_step()
        if self._submitting or step is None or not step.can_continue():
            return

        on_last_step = self.navigator.is_last_step()
        # On the last step this merges without moving
        self.navigator.advance(step.collect_data())

        if on_last_step and self.on_submit():
            self._set_submitting(True)

    def submission_finished(self, result: Any):
        """The submission succeeded; hand the result to whoever listens."""
        self._set_submitting(False)
        self.context.status = "completed"
        logger.info(f"{self.context.reference_number} completed")
        self.wizard_completed.emit(result)

    def submission_failed(self, message: str):
        """The submission failed; unlock the last step so the user can retry."""
        self._set_submitting(False)
        logger.warning(f"{self.context.reference_number} submission failed: {message}")
        ErrorHandler.show_error(self, tr("error.submit_failed", details=message))

    def is_submitting(self) -> bool:
        return self._submitting

    def _set_submitting(self, submitting: bool):
        self._submitting = submitting
        self.context.status = "submitting" if submitting else "in_progress"
        self.on_submission_state_changed(submitting)
        self._refresh_buttons()

    def _on_step_changed(self, old_index: int, new_index: int):
        self.step_container.setCurrentIndex(new_index)
        self.progress_label.setText(tr(
            "wizard.progress",
            current=new_index + 1,
            total=self.navigator.get_step_count(),
            title=self.steps[new_index].get_step_title()
        ))
        self.progress_bar.setValue(int(round(self.navigator.get_progress_percentage())))
        self._refresh_buttons()

    def _refresh_buttons(self, *args):
        locked = self._submitting
        self.btn_previous.setEnabled(self.navigator.can_go_previous() and not locked)
        self.btn_next.setEnabled(self.navigator.can_go_next() and not locked)

        if locked:
            text = tr("wizard.button.submitting")
        elif self.navigator.is_last_step():
            text = tr(self.submit_key)
        else:
            text = self.navigator.get_current_step().get_continue_button_text() or tr("wizard.button.continue")
        self.btn_next.setText(text)
