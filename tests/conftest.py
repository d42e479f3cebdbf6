# -*- coding: utf-8 -*-
"""
Shared test configuration.

Environment is set before any application module reads it, so tests never
write logs into the source tree and always use the instant mock submission.
"""

import os
import tempfile

os.environ["PCOS_LOGS_DIR"] = tempfile.mkdtemp(prefix="pcos_logs_")
os.environ["PCOS_REPORTS_DIR"] = tempfile.mkdtemp(prefix="pcos_reports_")
os.environ["INFERENCE_API_URL"] = ""
os.environ["SUBMIT_DELAY_MS"] = "0"
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtWidgets import QMessageBox


@pytest.fixture(autouse=True)
def dialogs(monkeypatch):
    """Record message boxes instead of blocking on them."""
    shown = []

    def record(kind):
        def _show(parent, title, message, *args, **kwargs):
            shown.append((kind, title, message))
            return QMessageBox.Ok
        return _show

    monkeypatch.setattr(QMessageBox, "critical", record("critical"))
    monkeypatch.setattr(QMessageBox, "warning", record("warning"))
    monkeypatch.setattr(QMessageBox, "information", record("information"))
    monkeypatch.setattr(QMessageBox, "question", lambda *args, **kwargs: QMessageBox.Yes)
    return shown
