# -*- coding: utf-8 -*-
"""
Consent Step - Step 1 of the Assessment Wizard.

Four consent statements; all must be accepted before continuing.
"""

from typing import Dict, Any

from PyQt5.QtWidgets import QCheckBox, QLabel

from pcos_assessment.models.assessment import ConsentRecord, SECTION_CONSENTS
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.services.wizard.step_validator import StepValidator
from pcos_assessment.ui.components import AdvisoryLabel, Card
from pcos_assessment.ui.wizards.framework import BaseStep
from pcos_assessment.app.config import Config

CONSENT_FIELDS = (
    "data_collection",
    "data_storage",
    "synthetic_generation",
    "research_use",
)


class ConsentStep(BaseStep):
    """Step 1: Consent & Privacy."""

    section_name = SECTION_CONSENTS

    def setup_ui(self):
        self.create_header(tr("consent.heading"), tr("consent.description"))

        privacy = AdvisoryLabel(
            f"<b>{tr('consent.privacy.title')}</b><br>{tr('consent.privacy.body')}",
            variant="info"
        )
        self.main_layout.addWidget(privacy)

        self.checkboxes: Dict[str, QCheckBox] = {}
        for name in CONSENT_FIELDS:
            card = Card()
            checkbox = QCheckBox(tr(f"consent.{name}.title"))
            checkbox.setStyleSheet("font-weight: bold; border: none;")
            checkbox.stateChanged.connect(self.on_input_changed)
            card.content_layout.addWidget(checkbox)

            body = QLabel(tr(f"consent.{name}.body"))
            body.setWordWrap(True)
            body.setStyleSheet(f"color: {Config.TEXT_LIGHT}; border: none; margin-left: 24px;")
            card.content_layout.addWidget(body)

            self.checkboxes[name] = checkbox
            self.main_layout.addWidget(card)

        self.main_layout.addStretch()

    def _current_record(self) -> ConsentRecord:
        return ConsentRecord(**{
            name: checkbox.isChecked() for name, checkbox in self.checkboxes.items()
        })

    def populate_data(self):
        record = self.get_section(ConsentRecord())
        for name, checkbox in self.checkboxes.items():
            checkbox.setChecked(getattr(record, name))

    def can_continue(self) -> bool:
        if not self._built:
            return False
        return StepValidator.can_continue_consent(self._current_record())

    def collect_data(self) -> Dict[str, Any]:
        return {SECTION_CONSENTS: self._current_record()}

    def get_step_title(self) -> str:
        return tr("wizard.step.consent")

    def get_continue_button_text(self) -> str:
        return tr("wizard.button.accept")
