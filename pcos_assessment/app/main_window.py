# -*- coding: utf-8 -*-
"""
Main application window with QStackedWidget routing between the
assessment wizard and the results page.
"""

from PyQt5.QtWidgets import QMainWindow, QStackedWidget

from .config import Config, Pages
from pcos_assessment.models.result import ResultSummary
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_window()
        self._create_widgets()
        self.navigate_to(Pages.ASSESSMENT)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(f"{Config.APP_NAME} - {Config.APP_TITLE}")
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

    def _create_widgets(self):
        """Create pages."""
        # Import here to avoid circular imports
        from pcos_assessment.ui.pages.results_page import ResultsPage

        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.pages = {}
        self.pages[Pages.ASSESSMENT] = self._create_wizard()
        self.stack.addWidget(self.pages[Pages.ASSESSMENT])

        self.pages[Pages.RESULTS] = ResultsPage(parent=self)
        self.pages[Pages.RESULTS].new_assessment_requested.connect(self.start_new_assessment)
        self.stack.addWidget(self.pages[Pages.RESULTS])

    def _create_wizard(self):
        from pcos_assessment.ui.wizards.assessment import AssessmentWizard

        wizard = AssessmentWizard(parent=self)
        wizard.assessment_completed.connect(self._on_assessment_completed)
        return wizard

    def navigate_to(self, page_id: str):
        """Navigate to a specific page."""
        if page_id not in self.pages:
            logger.error(f"Page not found: {page_id}")
            return

        self.stack.setCurrentWidget(self.pages[page_id])
        logger.debug(f"Navigated to: {page_id}")

    def _on_assessment_completed(self, summary: ResultSummary):
        """Show the results of a finished assessment."""
        self.pages[Pages.RESULTS].set_result(summary)
        self.navigate_to(Pages.RESULTS)

    def start_new_assessment(self):
        """Discard the previous wizard and its data, then start over."""
        old = self.pages[Pages.ASSESSMENT]
        self.pages[Pages.ASSESSMENT] = self._create_wizard()
        self.stack.insertWidget(0, self.pages[Pages.ASSESSMENT])
        self.stack.removeWidget(old)
        old.deleteLater()

        logger.info("Starting a new assessment")
        self.navigate_to(Pages.ASSESSMENT)
