# -*- coding: utf-8 -*-
"""
Tests for the Assessment Wizard.

Tests cover:
- Wizard initialization
- advance/retreat properties of the navigator
- Button state and labels
- Submission through the mock service
"""

import pytest

from pcos_assessment.models.assessment import (
    ConsentRecord,
    DemographicsRecord,
    ImagingRecord,
    LabsRecord,
    SymptomsRecord,
    VitalsRecord,
)
from pcos_assessment.models.result import ResultSummary
from pcos_assessment.services.exceptions import NetworkException
from pcos_assessment.services.submission_service import SubmissionService
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.ui.wizards.assessment import AssessmentContext, AssessmentWizard

PARTIALS = [
    {"consents": ConsentRecord(True, True, True, True)},
    {"demographics": DemographicsRecord(age=28.0, sex="female", height=165.0, weight=70.0)},
    {"symptoms": SymptomsRecord(acne=True)},
    {"vitals": VitalsRecord(systolic=120.0, diastolic=80.0)},
    {"labs": LabsRecord(glucose=95.0, insulin=10.0)},
    {"imaging": ImagingRecord(follicle_count=12.0)},
]


@pytest.fixture
def wizard(qtbot):
    """Create wizard instance with an instant mock submission."""
    wizard = AssessmentWizard(submission_service=SubmissionService(delay_ms=0))
    qtbot.addWidget(wizard)
    return wizard


def advance_to(wizard, index):
    for partial in PARTIALS[:index]:
        wizard.navigator.advance(partial)


class TestWizardInitialization:

    def test_wizard_has_context(self, wizard):
        assert isinstance(wizard.context, AssessmentContext)
        assert wizard.context.snapshot() == {}

    def test_wizard_has_seven_steps(self, wizard):
        titles = [step.get_step_title() for step in wizard.steps]
        assert titles == [
            "Consent & Privacy",
            "Demographics",
            "Symptoms & History",
            "Vital Signs",
            "Laboratory Values",
            "Medical Imaging",
            "Review & Submit",
        ]

    def test_wizard_starts_at_first_step(self, wizard):
        assert wizard.navigator.current_index == 0
        assert wizard.progress_label.text() == "Step 1 of 7: Consent & Privacy"
        assert wizard.progress_bar.value() == 14

    def test_header_shows_reference_number(self, wizard):
        assert wizard.reference_label.text() == wizard.context.reference_number
        assert wizard.reference_label.text().startswith("PCA-")

    def test_buttons_on_first_step(self, wizard):
        assert not wizard.btn_previous.isEnabled()
        assert not wizard.btn_next.isEnabled()
        assert wizard.btn_next.text() == tr("wizard.button.accept")


class TestNavigatorProperties:

    @pytest.mark.parametrize("index", range(6))
    def test_advance_moves_forward_and_merges(self, wizard, index):
        advance_to(wizard, index)
        before = dict(wizard.context.snapshot())

        assert wizard.navigator.advance(PARTIALS[index])

        assert wizard.navigator.current_index == index + 1
        after = wizard.context.snapshot()
        expected = dict(before)
        expected.update(PARTIALS[index])
        assert dict(after) == expected

    @pytest.mark.parametrize("index", range(1, 7))
    def test_retreat_keeps_aggregate(self, wizard, index):
        advance_to(wizard, index)
        before = dict(wizard.context.snapshot())

        assert wizard.navigator.retreat()

        assert wizard.navigator.current_index == index - 1
        assert dict(wizard.context.snapshot()) == before

    def test_advance_records_completed_steps(self, wizard):
        advance_to(wizard, 3)
        assert wizard.context.completed_steps == {0, 1, 2}
        assert wizard.context.to_dict()["completed_steps"] == [0, 1, 2]

    def test_retreat_from_first_step_is_noop(self, wizard):
        assert not wizard.navigator.retreat()
        assert wizard.navigator.current_index == 0

    def test_advance_from_last_step_is_noop(self, wizard):
        advance_to(wizard, 6)
        before = dict(wizard.context.snapshot())

        assert not wizard.navigator.advance({})

        assert wizard.navigator.current_index == 6
        assert dict(wizard.context.snapshot()) == before

    def test_progress_on_last_step(self, wizard):
        advance_to(wizard, 6)
        assert wizard.progress_bar.value() == 100
        assert wizard.btn_next.text() == tr("wizard.button.submit")

    def test_back_reseeds_step_from_aggregate(self, wizard):
        advance_to(wizard, 2)
        wizard.navigator.retreat()
        step = wizard.steps[1]
        assert step.height_input.text() == "165"
        assert step.bmi_label.value() == "25.7"


class TestWizardButtons:

    def test_consent_gate_controls_continue(self, wizard):
        checkboxes = list(wizard.steps[0].checkboxes.values())
        for checkbox in checkboxes[:3]:
            checkbox.setChecked(True)
        assert not wizard.btn_next.isEnabled()

        checkboxes[3].setChecked(True)
        assert wizard.btn_next.isEnabled()

    def test_continue_click_advances(self, wizard):
        for checkbox in wizard.steps[0].checkboxes.values():
            checkbox.setChecked(True)

        wizard.btn_next.click()

        assert wizard.navigator.current_index == 1
        assert wizard.context.get_section("consents").all_accepted
        assert wizard.btn_previous.isEnabled()
        # Demographics are still empty
        assert not wizard.btn_next.isEnabled()

    def test_disabled_continue_does_not_advance(self, wizard):
        wizard.btn_next.click()
        assert wizard.navigator.current_index == 0
        assert wizard.context.snapshot() == {}

    def test_back_click(self, wizard):
        advance_to(wizard, 3)
        wizard.btn_previous.click()
        assert wizard.navigator.current_index == 2


class TestSubmission:

    def test_submit_completes_with_mock_result(self, wizard, qtbot):
        advance_to(wizard, 6)

        with qtbot.waitSignal(wizard.assessment_completed, timeout=2000) as blocker:
            wizard.btn_next.click()
            assert wizard.is_submitting()
            assert not wizard.btn_next.isEnabled()
            assert not wizard.btn_previous.isEnabled()
            assert wizard.btn_next.text() == tr("wizard.button.submitting")

        summary = blocker.args[0]
        assert isinstance(summary, ResultSummary)
        assert summary.risk_score == 68
        assert wizard.context.status == "completed"
        assert not wizard.review_step.status_label.isHidden()
        assert wizard.review_step.status_label.text() == tr("review.submitted")

    def test_failed_submission_stays_on_review(self, qtbot, dialogs):
        class FailingClient:
            def submit_assessment(self, payload):
                raise NetworkException("refused", original_error=ConnectionRefusedError("refused"))

        service = SubmissionService(client=FailingClient())
        wizard = AssessmentWizard(submission_service=service)
        qtbot.addWidget(wizard)
        advance_to(wizard, 6)

        with qtbot.waitSignal(service.submission_failed, timeout=5000):
            wizard.btn_next.click()

        assert wizard.navigator.current_index == 6
        assert not wizard.is_submitting()
        assert wizard.btn_next.isEnabled()
        assert dialogs[-1][0] == "critical"
        assert tr("error.api.connection") in dialogs[-1][2]
