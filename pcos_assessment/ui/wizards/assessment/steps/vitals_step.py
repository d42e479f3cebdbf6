# -*- coding: utf-8 -*-
"""
Vitals Step - Step 4 of the Assessment Wizard.

The blood pressure reading is shown once both systolic and diastolic are
entered, flagged as elevated at >= 140 systolic or >= 90 diastolic.
"""

from typing import Dict, Any

from PyQt5.QtWidgets import QGridLayout, QLabel

from pcos_assessment.models.assessment import VitalsRecord, SECTION_VITALS
from pcos_assessment.services.clinical_metrics import is_blood_pressure_elevated
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.ui.components import AdvisoryLabel, Card, MetricLabel, NumberField
from pcos_assessment.ui.wizards.framework import BaseStep
from pcos_assessment.utils.helpers import format_field_value


class VitalsStep(BaseStep):
    """Step 4: Vital signs."""

    section_name = SECTION_VITALS

    def setup_ui(self):
        self.create_header(tr("vitals.heading"), tr("vitals.description"))

        card = Card()
        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        grid.setVerticalSpacing(6)

        self.systolic_input = NumberField(tr("vitals.systolic.placeholder"))
        self.diastolic_input = NumberField(tr("vitals.diastolic.placeholder"))
        self.heart_rate_input = NumberField(tr("vitals.heart_rate.placeholder"))

        grid.addWidget(QLabel(tr("vitals.systolic")), 0, 0)
        grid.addWidget(self.systolic_input, 1, 0)
        grid.addWidget(QLabel(tr("vitals.diastolic")), 0, 1)
        grid.addWidget(self.diastolic_input, 1, 1)
        grid.addWidget(QLabel(tr("vitals.heart_rate")), 2, 0)
        grid.addWidget(self.heart_rate_input, 3, 0)
        card.content_layout.addLayout(grid)
        self.main_layout.addWidget(card)

        for field in (self.systolic_input, self.diastolic_input, self.heart_rate_input):
            field.textChanged.connect(self.on_input_changed)

        self.bp_card = Card()
        self.bp_label = MetricLabel(tr("vitals.bp_reading"))
        self.bp_card.content_layout.addWidget(self.bp_label)
        self.bp_status = AdvisoryLabel()
        self.bp_card.content_layout.addWidget(self.bp_status)
        self.bp_card.hide()
        self.main_layout.addWidget(self.bp_card)

        self.main_layout.addStretch()

    def update_derived_values(self):
        systolic = self.systolic_input.value()
        diastolic = self.diastolic_input.value()

        if systolic is None or diastolic is None:
            self.bp_card.hide()
            return

        self.bp_label.set_value(tr(
            "vitals.bp_value",
            systolic=format_field_value(systolic),
            diastolic=format_field_value(diastolic)
        ))
        if is_blood_pressure_elevated(systolic, diastolic):
            self.bp_status.setText(tr("vitals.bp_elevated"))
            self.bp_status.set_variant("warning")
        else:
            self.bp_status.setText(tr("vitals.bp_normal"))
            self.bp_status.set_variant("success")
        self.bp_card.show()

    def is_bp_elevated_shown(self) -> bool:
        """True when the elevated advisory is displayed."""
        return not self.bp_card.isHidden() and self.bp_status.variant == "warning"

    def populate_data(self):
        record = self.get_section(VitalsRecord())
        self.systolic_input.set_value(record.systolic)
        self.diastolic_input.set_value(record.diastolic)
        self.heart_rate_input.set_value(record.heart_rate)
        self.update_derived_values()

    def collect_data(self) -> Dict[str, Any]:
        return {SECTION_VITALS: VitalsRecord(
            systolic=self.systolic_input.value(),
            diastolic=self.diastolic_input.value(),
            heart_rate=self.heart_rate_input.value(),
        )}

    def get_step_title(self) -> str:
        return tr("wizard.step.vitals")
