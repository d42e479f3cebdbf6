# -*- coding: utf-8 -*-
"""
Assessment Context - State and data for the clinical assessment wizard.

The aggregate maps section name to record:
consents, demographics, symptoms, vitals, labs, imaging.
"""

from typing import Any, Dict, Optional

from pcos_assessment.models.assessment import RECORD_TYPES, SECTIONS
from pcos_assessment.ui.wizards.framework import WizardContext
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)


class AssessmentContext(WizardContext):
    """Context for the clinical assessment wizard."""

    reference_prefix = "PCA"

    def get_section(self, name: str) -> Optional[Any]:
        """Copy of a section record, or None if the step was never confirmed."""
        return self.get_data(name)

    def has_section(self, name: str) -> bool:
        return name in self.data

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary (inference request body)."""
        base_data = super().to_dict()
        base_data["assessment"] = {
            name: self.data[name].to_dict()
            for name in SECTIONS
            if name in self.data
        }
        return base_data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AssessmentContext':
        """Restore context from dictionary."""
        ctx = cls()
        ctx._restore_session(data)

        for name, section in (data.get("assessment") or {}).items():
            record_type = RECORD_TYPES.get(name)
            if record_type is None:
                logger.warning(f"Ignoring unknown assessment section: {name}")
                continue
            ctx.data[name] = record_type.from_dict(section)

        return ctx
