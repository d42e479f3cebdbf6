# -*- coding: utf-8 -*-
"""
Labs Step - Step 5 of the Assessment Wizard.

All lab values are optional. HOMA-IR and the LH/FSH ratio are computed as
soon as both of their inputs are entered.
"""

from typing import Dict, Any, List

from PyQt5.QtWidgets import (
    QComboBox, QFrame, QGridLayout, QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget
)

from pcos_assessment.models.assessment import LabsRecord, SECTION_LABS
from pcos_assessment.services.clinical_metrics import (
    calculate_homa_ir,
    calculate_lh_fsh_ratio,
    is_insulin_resistant,
    is_lh_fsh_elevated,
)
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.ui.components import AdvisoryLabel, Card, MetricLabel, NumberField
from pcos_assessment.ui.components.input_field import INPUT_STYLE
from pcos_assessment.ui.wizards.framework import BaseStep
from pcos_assessment.utils.helpers import format_number

LIPID_FIELDS = ["total_cholesterol", "hdl", "ldl", "triglycerides"]
HORMONAL_FIELDS = ["lh", "fsh", "testosterone", "shbg", "tsh", "prolactin"]


class LabsStep(BaseStep):
    """Step 5: Laboratory values."""

    section_name = SECTION_LABS

    def setup_ui(self):
        self.create_header(tr("labs.heading"), tr("labs.description"))

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)
        scroll.setWidget(content)
        self.main_layout.addWidget(scroll, 1)

        self.inputs: Dict[str, NumberField] = {}

        # Metabolic panel: glucose carries its unit selector
        metabolic = Card(tr("labs.metabolic_panel"))
        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        grid.addWidget(QLabel(tr("labs.glucose")), 0, 0)
        glucose_row = QHBoxLayout()
        self.inputs["glucose"] = NumberField()
        self.glucose_unit_combo = QComboBox()
        self.glucose_unit_combo.addItems(LabsRecord.GLUCOSE_UNITS)
        self.glucose_unit_combo.setStyleSheet(INPUT_STYLE)
        glucose_row.addWidget(self.inputs["glucose"], 1)
        glucose_row.addWidget(self.glucose_unit_combo)
        grid.addLayout(glucose_row, 1, 0)
        self._add_fields(grid, ["hba1c", "insulin"], start=1)
        metabolic.content_layout.addLayout(grid)

        self.homa_label = MetricLabel(tr("labs.homa_ir"))
        self.homa_status = AdvisoryLabel()
        self.homa_box = self._metric_box(self.homa_label, self.homa_status)
        metabolic.content_layout.addWidget(self.homa_box)
        layout.addWidget(metabolic)

        lipid = Card(tr("labs.lipid_panel"))
        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        self._add_fields(grid, LIPID_FIELDS)
        lipid.content_layout.addLayout(grid)
        layout.addWidget(lipid)

        hormonal = Card(tr("labs.hormonal_panel"))
        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        self._add_fields(grid, HORMONAL_FIELDS)
        hormonal.content_layout.addLayout(grid)

        self.ratio_label = MetricLabel(tr("labs.lh_fsh_ratio"))
        self.ratio_status = AdvisoryLabel()
        self.ratio_box = self._metric_box(self.ratio_label, self.ratio_status)
        hormonal.content_layout.addWidget(self.ratio_box)
        layout.addWidget(hormonal)

        layout.addStretch()

        for field in self.inputs.values():
            field.textChanged.connect(self.on_input_changed)

    def _add_fields(self, grid: QGridLayout, names: List[str], start: int = 0):
        """Lay out label/input pairs two per row."""
        for i, name in enumerate(names, start=start):
            row, col = divmod(i, 2)
            field = NumberField()
            self.inputs[name] = field
            grid.addWidget(QLabel(tr(f"labs.{name}")), row * 2, col)
            grid.addWidget(field, row * 2 + 1, col)

    def _metric_box(self, metric: MetricLabel, status: AdvisoryLabel) -> QWidget:
        box = QWidget()
        box_layout = QVBoxLayout(box)
        box_layout.setContentsMargins(0, 8, 0, 0)
        box_layout.addWidget(metric)
        box_layout.addWidget(status)
        box.hide()
        return box

    def _show_metric(self, box: QWidget, metric: MetricLabel, status: AdvisoryLabel,
                     value, flagged: bool, flag_text: str):
        """Show a derived value with its advisory, or hide it when not computable."""
        if value is None:
            box.hide()
            return

        text = format_number(value, 2)
        metric.set_value(text)
        if not text:
            status.hide()
        elif flagged:
            status.setText(flag_text)
            status.set_variant("warning")
            status.show()
        else:
            status.setText(tr("labs.normal"))
            status.set_variant("success")
            status.show()
        box.show()

    def current_homa_ir(self):
        return calculate_homa_ir(self.inputs["glucose"].value(), self.inputs["insulin"].value())

    def current_lh_fsh_ratio(self):
        return calculate_lh_fsh_ratio(self.inputs["lh"].value(), self.inputs["fsh"].value())

    def update_derived_values(self):
        homa_ir = self.current_homa_ir()
        self._show_metric(
            self.homa_box, self.homa_label, self.homa_status,
            homa_ir, is_insulin_resistant(homa_ir), tr("labs.insulin_resistance")
        )

        ratio = self.current_lh_fsh_ratio()
        self._show_metric(
            self.ratio_box, self.ratio_label, self.ratio_status,
            ratio, is_lh_fsh_elevated(ratio), tr("labs.lh_fsh_elevated")
        )

    def populate_data(self):
        record = self.get_section(LabsRecord())
        for name, field in self.inputs.items():
            field.set_value(getattr(record, name))
        index = self.glucose_unit_combo.findText(record.glucose_unit)
        self.glucose_unit_combo.setCurrentIndex(index if index >= 0 else 0)
        self.update_derived_values()

    def collect_data(self) -> Dict[str, Any]:
        values = {name: field.value() for name, field in self.inputs.items()}
        return {SECTION_LABS: LabsRecord(
            glucose_unit=self.glucose_unit_combo.currentText(),
            **values
        )}

    def get_step_title(self) -> str:
        return tr("wizard.step.labs")
