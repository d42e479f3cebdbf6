# -*- coding: utf-8 -*-
"""
Assessment Wizard.

Multi-step wizard collecting the clinical data for a PCOS risk assessment.

Steps:
1. Consent - Four consent statements
2. Demographics - Age, sex, height, weight (BMI)
3. Symptoms - Cycle regularity, symptoms, family history
4. Vitals - Blood pressure and heart rate
5. Labs - Metabolic, lipid and hormonal panels (HOMA-IR, LH/FSH)
6. Imaging - Ultrasound files and ovarian measurements
7. Review & Submit
"""

from typing import List, Optional

from PyQt5.QtCore import pyqtSignal

from pcos_assessment.services.submission_service import SubmissionService
from pcos_assessment.ui.wizards.framework import BaseWizard, BaseStep
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
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)


class AssessmentWizard(BaseWizard):
    """
    Clinical assessment wizard.

    Emits assessment_completed with the ResultSummary once the submission
    resolves.
    """

    assessment_completed = pyqtSignal(object)

    def __init__(self, submission_service: Optional[SubmissionService] = None, parent=None):
        """Initialize the wizard."""
        self.submission_service = submission_service or SubmissionService()
        super().__init__(parent)
        self.submission_service.setParent(self)

        self.submission_service.submission_succeeded.connect(self._on_submission_succeeded)
        self.submission_service.submission_failed.connect(self.submission_failed)
        self.wizard_completed.connect(self.assessment_completed.emit)

    def create_context(self) -> AssessmentContext:
        """Create and return wizard context."""
        return AssessmentContext()

    def create_steps(self) -> List[BaseStep]:
        """Create and return list of wizard steps."""
        self.review_step = ReviewStep(self.context, self)
        return [
            ConsentStep(self.context, self),
            DemographicsStep(self.context, self),
            SymptomsStep(self.context, self),
            VitalsStep(self.context, self),
            LabsStep(self.context, self),
            ImagingStep(self.context, self),
            self.review_step,
        ]

    def on_submit(self) -> bool:
        """Send the aggregate to the submission service."""
        logger.info(f"Submitting assessment {self.context.reference_number}")
        return self.submission_service.submit(self.context.to_dict())

    def on_submission_state_changed(self, submitting: bool):
        self.review_step.set_submitting(submitting)

    def _on_submission_succeeded(self, summary):
        self.submission_finished(summary)
        self.review_step.show_submitted()
