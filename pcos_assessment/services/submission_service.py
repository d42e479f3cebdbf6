# -*- coding: utf-8 -*-
"""
Assessment submission.

Without an inference service configured, submission is a fixed-delay mock
that always resolves to the placeholder ResultSummary. With
INFERENCE_API_URL set, the assessment is posted from a background thread.
"""

from typing import Any, Dict, Optional

from PyQt5.QtCore import QObject, QThread, QTimer, pyqtSignal

from pcos_assessment.app.config import Config
from pcos_assessment.models.result import ResultSummary
from pcos_assessment.services.api_client import ApiConfig, InferenceApiClient
from pcos_assessment.services.error_mapper import CONTEXT_INFERENCE, map_exception
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionWorker(QThread):
    """Background worker for the inference request."""

    succeeded = pyqtSignal(object)  # ResultSummary
    failed = pyqtSignal(object)  # Exception

    def __init__(self, client: InferenceApiClient, payload: Dict[str, Any]):
        super().__init__()
        self.client = client
        self.payload = payload

    def run(self):
        """Run the request in background."""
        try:
            response = self.client.submit_assessment(self.payload)
            summary = ResultSummary.from_dict(response)
        except Exception as e:
            # Exceptions cannot cross the thread boundary; hand them to the GUI thread
            self.failed.emit(e)
            return
        self.succeeded.emit(summary)


class SubmissionService(QObject):
    """
    Submits a serialized assessment and reports the outcome via signals.

    Only one submission runs at a time.
    """

    submission_started = pyqtSignal()
    submission_succeeded = pyqtSignal(object)  # ResultSummary
    submission_failed = pyqtSignal(str)  # user-facing message

    def __init__(
        self,
        client: Optional[InferenceApiClient] = None,
        delay_ms: Optional[int] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        if client is None and Config.INFERENCE_API_URL:
            client = InferenceApiClient(ApiConfig())
        self.client = client
        self.delay_ms = Config.SUBMIT_DELAY_MS if delay_ms is None else delay_ms
        self._worker: Optional[SubmissionWorker] = None
        self._in_progress = False

    @property
    def uses_mock(self) -> bool:
        return self.client is None

    def is_in_progress(self) -> bool:
        return self._in_progress

    def submit(self, payload: Dict[str, Any]) -> bool:
        """
        Start a submission.

        Returns:
            False if a submission is already running
        """
        if self._in_progress:
            logger.warning("Submission already in progress, ignoring request")
            return False

        self._in_progress = True
        self.submission_started.emit()

        if self.uses_mock:
            logger.info(f"Mock submission started ({self.delay_ms} ms)")
            QTimer.singleShot(self.delay_ms, self._complete_mock)
        else:
            logger.info("Submitting assessment to inference service")
            self._worker = SubmissionWorker(self.client, payload)
            self._worker.succeeded.connect(self._on_succeeded)
            self._worker.failed.connect(self._on_failed)
            self._worker.start()
        return True

    def _complete_mock(self):
        self._on_succeeded(ResultSummary())

    def _on_succeeded(self, summary: ResultSummary):
        self._in_progress = False
        self._release_worker()
        logger.info(f"Submission complete: risk score {summary.risk_score} ({summary.risk_level})")
        self.submission_succeeded.emit(summary)

    def _on_failed(self, error: Exception):
        self._in_progress = False
        self._release_worker()
        logger.error(f"Submission failed: {error}", exc_info=error)
        self.submission_failed.emit(map_exception(error, context=CONTEXT_INFERENCE))

    def _release_worker(self):
        if self._worker is not None:
            self._worker.wait()
            self._worker.deleteLater()
            self._worker = None
