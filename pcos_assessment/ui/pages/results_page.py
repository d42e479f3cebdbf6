# -*- coding: utf-8 -*-
"""
Results Page
Displays a ResultSummary: overall risk, contributing factors,
physiological validation, recommendations and model information.
"""

from pathlib import Path
from typing import Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame,
    QScrollArea, QPushButton, QProgressBar, QGridLayout, QFileDialog
)
from PyQt5.QtCore import Qt, pyqtSignal

from pcos_assessment.app.config import Config
from pcos_assessment.app.styles import progress_bar_style
from pcos_assessment.models.result import ResultSummary
from pcos_assessment.services.error_mapper import CONTEXT_EXPORT
from pcos_assessment.services.report_service import ReportService
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.ui.components import AdvisoryLabel, Card
from pcos_assessment.ui.error_handler import ErrorHandler
from pcos_assessment.utils.helpers import format_date
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)

RISK_COLORS = {
    "high": Config.ERROR_COLOR,
    "moderate": Config.WARNING_COLOR,
    "low": Config.SUCCESS_COLOR,
}

IMPACT_COLORS = {
    "High": Config.ERROR_COLOR,
    "Moderate": Config.WARNING_COLOR,
}

TREND_ARROWS = {
    "increasing": "↑",
    "decreasing": "↓",
    "stable": "→",
}


def _clear_layout(layout):
    while layout.count():
        item = layout.takeAt(0)
        if item.widget():
            item.widget().deleteLater()


class ResultsPage(QWidget):
    """Results view shown after a successful submission."""

    new_assessment_requested = pyqtSignal()

    def __init__(self, report_service: Optional[ReportService] = None, parent=None):
        super().__init__(parent)
        self.report_service = report_service or ReportService()
        self.summary: Optional[ResultSummary] = None
        self._setup_ui()

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # Header bar
        header = QWidget()
        header.setStyleSheet("background-color: #f8f9fa;")
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(20, 16, 20, 16)

        titles = QVBoxLayout()
        title = QLabel(tr("results.title"))
        title.setStyleSheet(f"font-size: 20px; font-weight: bold; color: {Config.TEXT_COLOR};")
        titles.addWidget(title)
        self.generated_label = QLabel("")
        self.generated_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        titles.addWidget(self.generated_label)
        header_layout.addLayout(titles, 1)

        self.btn_export = QPushButton(tr("results.export_pdf"))
        self.btn_export.clicked.connect(lambda: self.export_pdf())
        header_layout.addWidget(self.btn_export)

        self.btn_share = QPushButton(tr("results.share"))
        self.btn_share.clicked.connect(self._handle_share)
        header_layout.addWidget(self.btn_share)

        self.btn_new = QPushButton(tr("results.new_assessment"))
        self.btn_new.clicked.connect(self.new_assessment_requested.emit)
        header_layout.addWidget(self.btn_new)

        main_layout.addWidget(header)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)
        scroll.setWidget(content)
        main_layout.addWidget(scroll, 1)

        # Overall risk
        overall = Card(tr("results.overall"))
        score_row = QHBoxLayout()
        self.score_label = QLabel("")
        self.score_label.setStyleSheet("font-size: 44px; font-weight: bold; border: none;")
        score_row.addWidget(self.score_label)
        self.badge_label = QLabel("")
        score_row.addWidget(self.badge_label, 0, Qt.AlignVCenter)
        score_row.addStretch()
        overall.content_layout.addLayout(score_row)

        self.profile_label = QLabel("")
        self.profile_label.setWordWrap(True)
        self.profile_label.setStyleSheet("border: none;")
        overall.content_layout.addWidget(self.profile_label)

        self.probability_bar, self.probability_value = self._add_probability(
            overall, tr("results.pcos_probability"))
        self.metabolic_bar, self.metabolic_value = self._add_probability(
            overall, tr("results.metabolic_risk"))
        layout.addWidget(overall)

        self.consultation_alert = AdvisoryLabel(
            f"<b>{tr('results.consultation.title')}</b><br>{tr('results.consultation.body')}",
            variant="error"
        )
        self.consultation_alert.hide()
        layout.addWidget(self.consultation_alert)

        self.factors_card = Card(tr("results.factors.title"))
        self.factors_layout = self._add_section_body(self.factors_card, tr("results.factors.description"))
        layout.addWidget(self.factors_card)

        self.residuals_card = Card(tr("results.physio.title"))
        self.residuals_layout = self._add_section_body(self.residuals_card, tr("results.physio.description"))
        note = QLabel(tr("results.physio.note"))
        note.setWordWrap(True)
        note.setStyleSheet(f"color: {Config.TEXT_LIGHT}; font-size: 11px; border: none;")
        self.residuals_card.content_layout.addWidget(note)
        layout.addWidget(self.residuals_card)

        self.recommendations_card = Card(tr("results.recommendations.title"))
        self.recommendations_layout = self._add_section_body(
            self.recommendations_card, tr("results.recommendations.description"))
        layout.addWidget(self.recommendations_card)

        model_card = Card(tr("results.model.title"))
        model_grid = QGridLayout()
        self.model_version_label = QLabel("")
        for col, (caption, value_label) in enumerate((
            (tr("results.model.version"), self.model_version_label),
            (tr("results.model.training"), QLabel(Config.MODEL_TRAINING)),
            (tr("results.model.updated"), QLabel(Config.MODEL_UPDATED)),
        )):
            caption_label = QLabel(caption)
            caption_label.setStyleSheet(f"color: {Config.TEXT_LIGHT}; border: none;")
            value_label.setStyleSheet("font-weight: bold; border: none;")
            model_grid.addWidget(caption_label, 0, col)
            model_grid.addWidget(value_label, 1, col)
        model_card.content_layout.addLayout(model_grid)
        layout.addWidget(model_card)

        layout.addStretch()

    def _add_probability(self, card: Card, caption: str):
        row = QHBoxLayout()
        label = QLabel(caption)
        label.setStyleSheet("border: none;")
        value = QLabel("")
        value.setStyleSheet("font-weight: bold; border: none;")
        row.addWidget(label, 1)
        row.addWidget(value)
        card.content_layout.addLayout(row)

        bar = QProgressBar()
        bar.setRange(0, 100)
        bar.setTextVisible(False)
        bar.setFixedHeight(8)
        bar.setStyleSheet(progress_bar_style(8))
        card.content_layout.addWidget(bar)
        return bar, value

    def _add_section_body(self, card: Card, description: str) -> QVBoxLayout:
        desc = QLabel(description)
        desc.setStyleSheet(f"color: {Config.TEXT_LIGHT}; border: none;")
        card.content_layout.addWidget(desc)
        body = QVBoxLayout()
        body.setSpacing(8)
        card.content_layout.addLayout(body)
        return body

    def _row(self, left: str, right: str, right_color: str = None) -> QFrame:
        row = QFrame()
        row.setStyleSheet("QFrame { background-color: #F9FAFB; border-radius: 6px; }")
        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(10, 8, 10, 8)
        left_label = QLabel(left)
        left_label.setWordWrap(True)
        row_layout.addWidget(left_label, 1)
        right_label = QLabel(right)
        if right_color:
            right_label.setStyleSheet(f"color: {right_color}; font-weight: bold;")
        row_layout.addWidget(right_label)
        return row

    # =========================================================================
    # Data
    # =========================================================================

    def set_result(self, summary: ResultSummary):
        """Render a result summary."""
        self.summary = summary
        level = summary.risk_level
        color = RISK_COLORS[level]

        self.generated_label.setText(tr(
            "results.generated_on",
            date=format_date(summary.generated_at, Config.DATE_FORMAT_DISPLAY)
        ))
        self.score_label.setText(str(summary.risk_score))
        self.score_label.setStyleSheet(f"font-size: 44px; font-weight: bold; color: {color}; border: none;")
        self.badge_label.setText(tr("results.risk_badge", level=level.upper()))
        self.badge_label.setStyleSheet(
            f"background-color: {color}; color: white; border-radius: 8px; padding: 2px 10px;"
        )
        self.profile_label.setText(tr("results.risk_profile", level=level))

        self.probability_bar.setValue(int(round(summary.pcos_probability * 100)))
        self.probability_value.setText(f"{summary.pcos_probability * 100:.0f}%")
        self.metabolic_bar.setValue(int(round(summary.metabolic_risk * 100)))
        self.metabolic_value.setText(f"{summary.metabolic_risk * 100:.0f}%")

        self.consultation_alert.setVisible(summary.needs_consultation)

        _clear_layout(self.factors_layout)
        for factor in summary.key_factors:
            arrow = TREND_ARROWS.get(factor.trend, "")
            self.factors_layout.addWidget(self._row(
                f"<b>{factor.factor}</b>  {factor.value} {arrow}",
                factor.impact,
                IMPACT_COLORS.get(factor.impact, Config.TEXT_LIGHT)
            ))
        self.factors_card.setVisible(bool(summary.key_factors))

        _clear_layout(self.residuals_layout)
        for residual in summary.residuals:
            self.residuals_layout.addWidget(self._row(
                f"<b>{residual.constraint}</b><br>"
                + tr("results.physio.residual", value=f"{residual.residual:.2f}"),
                residual.status,
                Config.SUCCESS_COLOR if residual.is_normal else Config.WARNING_COLOR
            ))
        self.residuals_card.setVisible(bool(summary.residuals))

        _clear_layout(self.recommendations_layout)
        for rec in summary.recommendations:
            label = QLabel(f"<b>{rec.title}</b><br>{rec.description}")
            label.setWordWrap(True)
            label.setStyleSheet("border: none;")
            self.recommendations_layout.addWidget(label)
        self.recommendations_card.setVisible(bool(summary.recommendations))

        self.model_version_label.setText(summary.model_version)
        logger.info(f"Showing results: score {summary.risk_score} ({level})")

    # =========================================================================
    # Actions
    # =========================================================================

    def export_pdf(self, file_path: Optional[str] = None) -> Optional[Path]:
        """
        Export the current result to PDF.

        Without a path the user picks one in a save dialog.

        Returns:
            Written path, or None if cancelled or failed
        """
        if self.summary is None:
            return None

        if file_path is None:
            default = str(self.report_service.default_path(self.summary))
            file_path, _ = QFileDialog.getSaveFileName(
                self,
                tr("results.export.dialog_title"),
                default,
                tr("results.export.filter")
            )
            if not file_path:
                return None

        try:
            path = self.report_service.export_results(self.summary, Path(file_path))
        except OSError as e:
            ErrorHandler.handle(e, self, context=CONTEXT_EXPORT)
            return None

        ErrorHandler.show_success(self, tr("results.export.success", path=str(path)))
        return path

    def _handle_share(self):
        ErrorHandler.show_info(self, tr("results.share_unavailable"))
