# -*- coding: utf-8 -*-
"""
Demographics Step - Step 2 of the Assessment Wizard.

Age, sex, height and weight are required. BMI is shown once height and
weight are entered.
"""

from typing import Dict, Any

from PyQt5.QtWidgets import QGridLayout, QLabel

from pcos_assessment.models.assessment import DemographicsRecord, SECTION_DEMOGRAPHICS
from pcos_assessment.services.clinical_metrics import calculate_bmi
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.services.wizard.step_validator import StepValidator
from pcos_assessment.ui.components import Card, MetricLabel, NumberField, OptionCombo
from pcos_assessment.ui.wizards.framework import BaseStep
from pcos_assessment.utils.helpers import format_number


class DemographicsStep(BaseStep):
    """Step 2: Demographics."""

    section_name = SECTION_DEMOGRAPHICS

    def setup_ui(self):
        self.create_header(tr("demographics.heading"), tr("demographics.description"))

        card = Card()
        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        grid.setVerticalSpacing(6)

        self.age_input = NumberField(tr("demographics.age.placeholder"))
        self.sex_combo = OptionCombo(DemographicsRecord.SEX_OPTIONS)
        self.ethnicity_combo = OptionCombo(DemographicsRecord.ETHNICITY_OPTIONS)
        self.height_input = NumberField(tr("demographics.height.placeholder"))
        self.weight_input = NumberField(tr("demographics.weight.placeholder"))
        self.waist_input = NumberField(tr("demographics.waist.placeholder"))

        fields = [
            ("demographics.age", self.age_input),
            ("demographics.sex", self.sex_combo),
            ("demographics.ethnicity", self.ethnicity_combo),
            ("demographics.height", self.height_input),
            ("demographics.weight", self.weight_input),
            ("demographics.waist", self.waist_input),
        ]
        for i, (label_key, widget) in enumerate(fields):
            row, col = divmod(i, 2)
            grid.addWidget(QLabel(tr(label_key)), row * 2, col)
            grid.addWidget(widget, row * 2 + 1, col)

        card.content_layout.addLayout(grid)
        self.main_layout.addWidget(card)

        for field in (self.age_input, self.height_input, self.weight_input, self.waist_input):
            field.textChanged.connect(self.on_input_changed)
        for combo in (self.sex_combo, self.ethnicity_combo):
            combo.currentIndexChanged.connect(self.on_input_changed)

        self.bmi_card = Card()
        self.bmi_label = MetricLabel(tr("demographics.bmi"))
        self.bmi_card.content_layout.addWidget(self.bmi_label)
        self.bmi_card.hide()
        self.main_layout.addWidget(self.bmi_card)

        self.main_layout.addStretch()

    def _current_record(self) -> DemographicsRecord:
        return DemographicsRecord(
            age=self.age_input.value(),
            sex=self.sex_combo.value(),
            ethnicity=self.ethnicity_combo.value(),
            height=self.height_input.value(),
            weight=self.weight_input.value(),
            waist=self.waist_input.value(),
        )

    def populate_data(self):
        record = self.get_section(DemographicsRecord())
        self.age_input.set_value(record.age)
        self.sex_combo.set_value(record.sex)
        self.ethnicity_combo.set_value(record.ethnicity)
        self.height_input.set_value(record.height)
        self.weight_input.set_value(record.weight)
        self.waist_input.set_value(record.waist)
        self.update_derived_values()

    def update_derived_values(self):
        bmi = calculate_bmi(self.height_input.value(), self.weight_input.value())
        self.bmi_card.setVisible(bmi is not None)
        self.bmi_label.set_value(format_number(bmi, 1))

    def can_continue(self) -> bool:
        if not self._built:
            return False
        return StepValidator.can_continue_demographics(self._current_record())

    def collect_data(self) -> Dict[str, Any]:
        return {SECTION_DEMOGRAPHICS: self._current_record()}

    def get_step_title(self) -> str:
        return tr("wizard.step.demographics")
