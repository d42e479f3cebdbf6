# -*- coding: utf-8 -*-
"""Tests for the ResultsPage."""

import pytest

from pcos_assessment.models.result import ResultSummary
from pcos_assessment.services.report_service import ReportService
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.ui.pages import ResultsPage


@pytest.fixture
def page(qtbot, tmp_path):
    page = ResultsPage(report_service=ReportService(output_dir=tmp_path))
    qtbot.addWidget(page)
    return page


class TestSetResult:

    def test_placeholder_result(self, page):
        page.set_result(ResultSummary())

        assert page.score_label.text() == "68"
        assert page.badge_label.text() == "MODERATE RISK"
        assert page.probability_bar.value() == 72
        assert page.probability_value.text() == "72%"
        assert page.metabolic_bar.value() == 58
        assert page.model_version_label.text() == "GAN-PINN v2.1.0"
        assert page.consultation_alert.isHidden()

    def test_high_risk_shows_consultation(self, page):
        page.set_result(ResultSummary(risk_score=85))

        assert page.badge_label.text() == "HIGH RISK"
        assert not page.consultation_alert.isHidden()

    def test_low_risk(self, page):
        page.set_result(ResultSummary(risk_score=40))
        assert page.badge_label.text() == "LOW RISK"

    def test_empty_lists_hide_cards(self, page):
        page.set_result(ResultSummary(key_factors=[], residuals=[], recommendations=[]))

        assert page.factors_card.isHidden()
        assert page.residuals_card.isHidden()
        assert page.recommendations_card.isHidden()

    def test_rows_are_rendered(self, page):
        page.set_result(ResultSummary())

        assert page.factors_layout.count() == 4
        assert page.residuals_layout.count() == 3
        assert page.recommendations_layout.count() == 3


class TestActions:

    def test_export_without_result_does_nothing(self, page, tmp_path, dialogs):
        assert page.export_pdf(str(tmp_path / "out.pdf")) is None
        assert dialogs == []

    def test_export_pdf(self, page, tmp_path, dialogs):
        page.set_result(ResultSummary())
        target = tmp_path / "out.pdf"

        path = page.export_pdf(str(target))

        assert path == target
        assert target.read_bytes().startswith(b"%PDF")
        assert dialogs[-1][0] == "information"

    def test_export_failure_shows_error(self, page, tmp_path, dialogs, monkeypatch):
        page.set_result(ResultSummary())

        def fail(summary, file_path=None):
            raise PermissionError("read-only")

        monkeypatch.setattr(page.report_service, "export_results", fail)

        assert page.export_pdf(str(tmp_path / "out.pdf")) is None
        assert dialogs[-1] == ("critical", tr("dialog.error"), tr("error.export_failed", details="read-only"))

    def test_share_shows_info(self, page, dialogs):
        page.btn_share.click()
        assert dialogs == [("information", tr("dialog.info"), tr("results.share_unavailable"))]

    def test_new_assessment_signal(self, page, qtbot):
        with qtbot.waitSignal(page.new_assessment_requested, timeout=1000):
            page.btn_new.click()
