# -*- coding: utf-8 -*-
"""
Tests for individual assessment steps: continue gates, derived values
and advisories driven through the real widgets.
"""

import pytest

from pcos_assessment.models.assessment import (
    ConsentRecord,
    DemographicsRecord,
    ImagingRecord,
    LabsRecord,
    SymptomsRecord,
    UploadedFile,
    VitalsRecord,
)
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.ui.wizards.assessment.assessment_context import AssessmentContext
from pcos_assessment.ui.wizards.assessment.steps import (
    ConsentStep,
    DemographicsStep,
    SymptomsStep,
    VitalsStep,
    LabsStep,
    ImagingStep,
    ReviewStep,
)


@pytest.fixture
def context():
    return AssessmentContext()


@pytest.fixture
def make_step(qtbot, context):
    """Build a step on the shared context and show it."""
    def _make(step_class):
        step = step_class(context)
        qtbot.addWidget(step)
        step.on_show()
        return step
    return _make


class TestConsentStep:

    def test_blocked_until_all_accepted(self, make_step):
        step = make_step(ConsentStep)
        names = list(step.checkboxes)
        for name in names[:3]:
            step.checkboxes[name].setChecked(True)
        assert not step.can_continue()

        step.checkboxes[names[3]].setChecked(True)
        assert step.can_continue()

    def test_emits_gate_on_change(self, make_step, qtbot):
        step = make_step(ConsentStep)
        for checkbox in list(step.checkboxes.values())[:3]:
            checkbox.setChecked(True)
        with qtbot.waitSignal(step.validation_changed) as blocker:
            list(step.checkboxes.values())[3].setChecked(True)
        assert blocker.args == [True]

    def test_collect_data(self, make_step):
        step = make_step(ConsentStep)
        for checkbox in step.checkboxes.values():
            checkbox.setChecked(True)
        assert step.collect_data() == {"consents": ConsentRecord(True, True, True, True)}

    def test_seeded_from_context(self, make_step, context):
        context.merge({"consents": ConsentRecord(True, True, True, True)})
        step = make_step(ConsentStep)
        assert all(cb.isChecked() for cb in step.checkboxes.values())


class TestDemographicsStep:

    def _fill(self, step, age="28", sex="female", height="165", weight="70"):
        step.age_input.setText(age)
        step.sex_combo.set_value(sex)
        step.height_input.setText(height)
        step.weight_input.setText(weight)

    def test_required_fields_gate(self, make_step):
        step = make_step(DemographicsStep)
        self._fill(step, weight="")
        assert not step.can_continue()
        step.weight_input.setText("70")
        assert step.can_continue()

    def test_sex_is_required(self, make_step):
        step = make_step(DemographicsStep)
        self._fill(step, sex=None)
        assert not step.can_continue()

    def test_bmi_displayed(self, make_step):
        step = make_step(DemographicsStep)
        self._fill(step)
        assert not step.bmi_card.isHidden()
        assert step.bmi_label.value() == "25.7"

    def test_bmi_hidden_without_weight(self, make_step):
        step = make_step(DemographicsStep)
        step.height_input.setText("165")
        assert step.bmi_card.isHidden()

    def test_bmi_blank_for_unparseable_input(self, make_step):
        step = make_step(DemographicsStep)
        self._fill(step, height="tall")
        assert step.bmi_label.value() == ""
        # Non-empty text still satisfies the gate
        assert step.can_continue()

    def test_collect_data(self, make_step):
        step = make_step(DemographicsStep)
        self._fill(step)
        step.ethnicity_combo.set_value("asian")
        record = step.collect_data()["demographics"]
        assert record == DemographicsRecord(
            age=28.0, sex="female", ethnicity="asian", height=165.0, weight=70.0, waist=None
        )


class TestSymptomsStep:

    def test_always_continues(self, make_step):
        assert make_step(SymptomsStep).can_continue()

    def test_collect_and_restore(self, make_step, context):
        step = make_step(SymptomsStep)
        step.cycle_combo.set_value("irregular")
        step.checkboxes["hirsutism"].setChecked(True)
        step.checkboxes["family_history_diabetes"].setChecked(True)

        record = step.collect_data()["symptoms"]
        assert record == SymptomsRecord(
            menstrual_cycle="irregular", hirsutism=True, family_history_diabetes=True
        )

        context.merge({"symptoms": record})
        restored = make_step(SymptomsStep)
        assert restored.cycle_combo.value() == "irregular"
        assert restored.checkboxes["hirsutism"].isChecked()
        assert not restored.checkboxes["acne"].isChecked()


class TestVitalsStep:

    def test_elevated_systolic(self, make_step):
        step = make_step(VitalsStep)
        step.systolic_input.setText("145")
        step.diastolic_input.setText("85")
        assert step.is_bp_elevated_shown()
        assert step.bp_label.value() == "145/85 mmHg"
        assert step.bp_status.text() == tr("vitals.bp_elevated")

    def test_normal_reading(self, make_step):
        step = make_step(VitalsStep)
        step.systolic_input.setText("120")
        step.diastolic_input.setText("80")
        assert not step.bp_card.isHidden()
        assert not step.is_bp_elevated_shown()
        assert step.bp_status.text() == tr("vitals.bp_normal")

    def test_reading_needs_both_values(self, make_step):
        step = make_step(VitalsStep)
        step.systolic_input.setText("150")
        assert step.bp_card.isHidden()

    def test_collect_data(self, make_step):
        step = make_step(VitalsStep)
        step.heart_rate_input.setText("72")
        assert step.collect_data() == {"vitals": VitalsRecord(heart_rate=72.0)}


class TestLabsStep:

    def test_homa_ir_normal(self, make_step):
        step = make_step(LabsStep)
        step.inputs["glucose"].setText("95")
        step.inputs["insulin"].setText("10")
        assert not step.homa_box.isHidden()
        assert step.homa_label.value() == "2.35"
        assert step.homa_status.text() == tr("labs.normal")

    def test_homa_ir_insulin_resistance(self, make_step):
        step = make_step(LabsStep)
        step.inputs["glucose"].setText("110")
        step.inputs["insulin"].setText("10")
        assert step.homa_status.text() == tr("labs.insulin_resistance")

    def test_glucose_unit_does_not_change_homa_ir(self, make_step):
        step = make_step(LabsStep)
        step.inputs["glucose"].setText("5")
        step.inputs["insulin"].setText("10")
        step.glucose_unit_combo.setCurrentText("mmol/L")

        assert step.current_homa_ir() == pytest.approx(50 / 405)
        assert step.homa_label.value() == "0.12"
        assert step.homa_status.text() == tr("labs.normal")
        assert step.collect_data()["labs"].glucose_unit == "mmol/L"

    def test_lh_fsh_ratio(self, make_step):
        step = make_step(LabsStep)
        step.inputs["lh"].setText("12")
        step.inputs["fsh"].setText("5")
        assert step.ratio_label.value() == "2.40"
        assert step.ratio_status.text() == tr("labs.lh_fsh_elevated")

    def test_unparseable_value_blanks_ratio(self, make_step):
        step = make_step(LabsStep)
        step.inputs["lh"].setText("n/a")
        step.inputs["fsh"].setText("5")
        assert not step.ratio_box.isHidden()
        assert step.ratio_label.value() == ""
        assert step.ratio_status.isHidden()

    def test_collect_data(self, make_step):
        step = make_step(LabsStep)
        step.inputs["glucose"].setText("95")
        step.inputs["tsh"].setText("2.1")
        record = step.collect_data()["labs"]
        assert record == LabsRecord(glucose=95.0, tsh=2.1)


class TestImagingStep:

    def test_rotterdam_advisory(self, make_step):
        step = make_step(ImagingStep)
        step.follicle_count_input.setText("12")
        assert step.is_rotterdam_shown()
        step.follicle_count_input.setText("11")
        assert not step.is_rotterdam_shown()

    def test_add_and_remove_files(self, make_step, tmp_path):
        step = make_step(ImagingStep)
        paths = []
        for name, size in (("a.png", 10), ("b.dcm", 20), ("c.jpg", 30)):
            path = tmp_path / name
            path.write_bytes(b"x" * size)
            paths.append(str(path))

        assert step.add_files(paths) == 3
        assert step.upload_status.text() == tr("imaging.files_added", count=3)

        step.remove_file(1)
        assert step.file_names() == ["a.png", "c.jpg"]

        record = step.collect_data()["imaging"]
        assert record.ultrasound_files == [UploadedFile("a.png", 10), UploadedFile("c.jpg", 30)]

    def test_missing_file_is_skipped(self, make_step, tmp_path):
        step = make_step(ImagingStep)
        assert step.add_files([str(tmp_path / "missing.png")]) == 0
        assert step.file_names() == []

    def test_remove_out_of_range_is_ignored(self, make_step):
        step = make_step(ImagingStep)
        step.remove_file(5)
        assert step.file_names() == []

    def test_seeded_from_context(self, make_step, context):
        context.merge({"imaging": ImagingRecord(
            follicle_count=14.0,
            ultrasound_files=[UploadedFile("scan.dcm", 1024)],
        )})
        step = make_step(ImagingStep)
        assert step.file_names() == ["scan.dcm"]
        assert step.is_rotterdam_shown()


class TestReviewStep:

    def test_completeness_and_metrics(self, make_step, context):
        context.merge({
            "consents": ConsentRecord(True, True, True, True),
            "demographics": DemographicsRecord(age=28.0, sex="female", height=165.0, weight=70.0),
            "labs": LabsRecord(glucose=95.0, insulin=10.0, lh=12.0, fsh=5.0),
        })
        step = make_step(ReviewStep)

        assert [complete for _, complete in step.completeness] == [True, False, False, True, False]
        assert [badge.text() for badge in step.completeness_badges] == [
            "Complete", "Incomplete", "Incomplete", "Complete", "Incomplete"
        ]
        assert not step.consent_label.isHidden()
        assert step.bmi_metric.value() == "25.7"
        assert step.homa_metric.value() == "2.35"
        assert step.ratio_metric.value() == "2.40"

    def test_homa_ir_ignores_glucose_unit(self, make_step, context):
        context.merge({
            "demographics": DemographicsRecord(age=28.0, sex="female", height=165.0, weight=70.0),
            "labs": LabsRecord(glucose=5.0, glucose_unit="mmol/L", insulin=10.0),
        })
        step = make_step(ReviewStep)
        assert step.homa_metric.value() == "0.12"

    def test_metrics_hidden_without_demographics(self, make_step):
        step = make_step(ReviewStep)
        assert step.metrics_card.isHidden()
        assert step.consent_label.isHidden()

    def test_never_blocks_submission(self, make_step):
        step = make_step(ReviewStep)
        assert step.can_continue()
        assert step.collect_data() == {}
