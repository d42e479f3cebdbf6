# -*- coding: utf-8 -*-
"""
Review Step - Step 7 of the Assessment Wizard.

Read-only summary of the aggregate:
- Consent confirmation
- Section completeness (informational, never blocks submission)
- Key metrics (BMI, HOMA-IR, LH/FSH ratio)
- Analysis method
"""

from typing import Dict, Any, List

from PyQt5.QtWidgets import QFrame, QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget

from pcos_assessment.app.config import Config
from pcos_assessment.models.assessment import SECTION_DEMOGRAPHICS, SECTION_LABS
from pcos_assessment.services.clinical_metrics import (
    calculate_bmi,
    calculate_homa_ir,
    calculate_lh_fsh_ratio,
)
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.services.wizard.step_validator import StepValidator
from pcos_assessment.ui.components import AdvisoryLabel, Card, MetricLabel
from pcos_assessment.ui.wizards.framework import BaseStep
from pcos_assessment.utils.helpers import format_number

BADGE_STYLE = {
    True: f"background-color: {Config.PRIMARY_COLOR}; color: white;",
    False: "background-color: #E5E7EB; color: #374151;",
}


class ReviewStep(BaseStep):
    """Step 7: Review & submit."""

    def setup_ui(self):
        self.create_header(tr("review.heading"), tr("review.description"))

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)
        scroll.setWidget(content)
        self.main_layout.addWidget(scroll, 1)

        self.consent_label = AdvisoryLabel(
            f"<b>{tr('review.consent.title')}</b><br>{tr('review.consent.body')}",
            variant="success"
        )
        layout.addWidget(self.consent_label)

        # Completeness checklist
        completeness = Card(tr("review.completeness"))
        self.completeness_rows = QVBoxLayout()
        self.completeness_rows.setSpacing(6)
        completeness.content_layout.addLayout(self.completeness_rows)
        note = QLabel(tr("review.completeness_note"))
        note.setWordWrap(True)
        note.setStyleSheet(f"color: {Config.TEXT_LIGHT}; border: none;")
        completeness.content_layout.addWidget(note)
        layout.addWidget(completeness)
        self.completeness_badges: List[QLabel] = []

        # Key metrics
        self.metrics_card = Card(tr("review.key_metrics"))
        metrics_row = QHBoxLayout()
        self.bmi_metric = MetricLabel(tr("review.bmi"))
        self.homa_metric = MetricLabel(tr("review.homa_ir"))
        self.ratio_metric = MetricLabel(tr("review.lh_fsh_ratio"))
        for metric in (self.bmi_metric, self.homa_metric, self.ratio_metric):
            metrics_row.addWidget(metric)
        self.metrics_card.content_layout.addLayout(metrics_row)
        layout.addWidget(self.metrics_card)

        # Analysis method
        method = Card(tr("review.method"))
        for text in (
            tr("review.method.model", model=Config.MODEL_NAME),
            tr("review.method.training"),
            tr("review.method.validation"),
        ):
            line = QLabel(text)
            line.setWordWrap(True)
            line.setStyleSheet("border: none;")
            method.content_layout.addWidget(line)
        layout.addWidget(method)

        self.status_label = AdvisoryLabel(variant="info")
        self.status_label.hide()
        layout.addWidget(self.status_label)

        layout.addStretch()

    def _rebuild_completeness(self, sections):
        while self.completeness_rows.count():
            item = self.completeness_rows.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self.completeness_badges = []

        for name, complete in sections:
            row = QFrame()
            row.setStyleSheet("QFrame { background-color: #F9FAFB; border-radius: 6px; }")
            row_layout = QHBoxLayout(row)
            row_layout.setContentsMargins(10, 6, 10, 6)
            label = QLabel(name)
            label.setStyleSheet("font-weight: bold;")
            badge = QLabel(tr("review.complete") if complete else tr("review.incomplete"))
            badge.setStyleSheet(f"{BADGE_STYLE[complete]} border-radius: 8px; padding: 2px 8px;")
            row_layout.addWidget(label, 1)
            row_layout.addWidget(badge)
            self.completeness_rows.addWidget(row)
            self.completeness_badges.append(badge)

    def _set_metric(self, metric: MetricLabel, value, decimals: int):
        metric.setVisible(value is not None)
        metric.set_value(format_number(value, decimals))

    def populate_data(self):
        snapshot = self.context.snapshot()
        self.completeness = StepValidator.section_completeness(snapshot)
        self._rebuild_completeness(self.completeness)
        self.consent_label.setVisible(StepValidator.consents_confirmed(snapshot))

        demographics = snapshot.get(SECTION_DEMOGRAPHICS)
        labs = snapshot.get(SECTION_LABS)
        self.metrics_card.setVisible(demographics is not None)

        if demographics is not None:
            self._set_metric(self.bmi_metric, calculate_bmi(demographics.height, demographics.weight), 1)
        if labs is not None:
            self._set_metric(self.homa_metric, calculate_homa_ir(labs.glucose, labs.insulin), 2)
            self._set_metric(self.ratio_metric, calculate_lh_fsh_ratio(labs.lh, labs.fsh), 2)
        else:
            self.homa_metric.hide()
            self.ratio_metric.hide()

        self.status_label.hide()

    def set_submitting(self, submitting: bool):
        """Show or clear the in-progress notice."""
        if submitting:
            self.status_label.setText(tr("review.submitting", model=Config.MODEL_NAME))
            self.status_label.set_variant("info")
            self.status_label.show()
        else:
            self.status_label.hide()

    def show_submitted(self):
        self.status_label.setText(tr("review.submitted"))
        self.status_label.set_variant("success")
        self.status_label.show()

    def collect_data(self) -> Dict[str, Any]:
        # Review contributes no section of its own
        return {}

    def get_step_title(self) -> str:
        return tr("wizard.step.review")
