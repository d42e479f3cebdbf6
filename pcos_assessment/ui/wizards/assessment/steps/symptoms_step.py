# -*- coding: utf-8 -*-
"""
Symptoms Step - Step 3 of the Assessment Wizard.
"""

from typing import Dict, Any

from PyQt5.QtWidgets import QCheckBox, QLabel

from pcos_assessment.models.assessment import SymptomsRecord, SECTION_SYMPTOMS
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.ui.components import Card, OptionCombo
from pcos_assessment.ui.wizards.framework import BaseStep


class SymptomsStep(BaseStep):
    """Step 3: Symptoms & medical history. Nothing is required."""

    section_name = SECTION_SYMPTOMS

    def setup_ui(self):
        self.create_header(tr("symptoms.heading"), tr("symptoms.description"))

        cycle_card = Card()
        cycle_card.content_layout.addWidget(QLabel(tr("symptoms.menstrual_cycle")))
        self.cycle_combo = OptionCombo(SymptomsRecord.MENSTRUAL_CYCLE_OPTIONS)
        self.cycle_combo.currentIndexChanged.connect(self.on_input_changed)
        cycle_card.content_layout.addWidget(self.cycle_combo)
        self.main_layout.addWidget(cycle_card)

        self.checkboxes: Dict[str, QCheckBox] = {}
        for title_key, options in (
            ("symptoms.current", SymptomsRecord.SYMPTOM_FIELDS),
            ("symptoms.family_history", SymptomsRecord.FAMILY_HISTORY_FIELDS),
        ):
            card = Card(tr(title_key))
            for name, label in options:
                checkbox = QCheckBox(label)
                checkbox.setStyleSheet("border: none;")
                checkbox.stateChanged.connect(self.on_input_changed)
                card.content_layout.addWidget(checkbox)
                self.checkboxes[name] = checkbox
            self.main_layout.addWidget(card)

        self.main_layout.addStretch()

    def populate_data(self):
        record = self.get_section(SymptomsRecord())
        self.cycle_combo.set_value(record.menstrual_cycle)
        for name, checkbox in self.checkboxes.items():
            checkbox.setChecked(getattr(record, name))

    def collect_data(self) -> Dict[str, Any]:
        record = SymptomsRecord(
            menstrual_cycle=self.cycle_combo.value(),
            **{name: checkbox.isChecked() for name, checkbox in self.checkboxes.items()}
        )
        return {SECTION_SYMPTOMS: record}

    def get_step_title(self) -> str:
        return tr("wizard.step.symptoms")
