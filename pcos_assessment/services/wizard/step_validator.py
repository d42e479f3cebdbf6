# -*- coding: utf-8 -*-
"""
Step validation service for the assessment wizard.

Validates section records without UI coupling.
"""

from typing import Any, List, Mapping, Optional, Tuple

from pcos_assessment.models.assessment import (
    ConsentRecord,
    DemographicsRecord,
    SECTION_CONSENTS,
    SECTION_DEMOGRAPHICS,
    SECTION_SYMPTOMS,
    SECTION_VITALS,
    SECTION_LABS,
    SECTION_IMAGING,
)
from pcos_assessment.services.translation_manager import tr
from pcos_assessment.utils.helpers import is_present


class StepValidator:
    """Continue gates and review completeness for the assessment steps."""

    DEMOGRAPHICS_REQUIRED = ("age", "sex", "height", "weight")

    @staticmethod
    def can_continue_consent(record: Optional[ConsentRecord]) -> bool:
        """All four consent flags must be accepted."""
        return record is not None and record.all_accepted

    @staticmethod
    def missing_demographics(record: Optional[DemographicsRecord]) -> List[str]:
        """Names of required demographic fields that are still empty."""
        if record is None:
            return list(StepValidator.DEMOGRAPHICS_REQUIRED)
        return [
            name for name in StepValidator.DEMOGRAPHICS_REQUIRED
            if not is_present(getattr(record, name))
        ]

    @staticmethod
    def can_continue_demographics(record: Optional[DemographicsRecord]) -> bool:
        """Age, sex, height and weight must be entered."""
        return not StepValidator.missing_demographics(record)

    @staticmethod
    def section_completeness(aggregate: Mapping[str, Any]) -> List[Tuple[str, bool]]:
        """
        Per-section completeness for the review checklist.

        Informational only; incomplete sections never block submission.

        Returns:
            List of (display name, is_complete)
        """
        demographics = aggregate.get(SECTION_DEMOGRAPHICS)
        vitals = aggregate.get(SECTION_VITALS)
        labs = aggregate.get(SECTION_LABS)

        return [
            (tr("review.section.demographics"),
             demographics is not None and is_present(demographics.age)),
            (tr("review.section.symptoms"),
             aggregate.get(SECTION_SYMPTOMS) is not None),
            (tr("review.section.vitals"),
             vitals is not None and is_present(vitals.systolic)),
            (tr("review.section.labs"),
             labs is not None and is_present(labs.glucose)),
            (tr("review.section.imaging"),
             aggregate.get(SECTION_IMAGING) is not None),
        ]

    @staticmethod
    def consents_confirmed(aggregate: Mapping[str, Any]) -> bool:
        return StepValidator.can_continue_consent(aggregate.get(SECTION_CONSENTS))
