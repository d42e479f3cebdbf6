# -*- coding: utf-8 -*-
"""Clinical assessment wizard."""

from .assessment_context import AssessmentContext
from .assessment_wizard import AssessmentWizard

__all__ = ['AssessmentContext', 'AssessmentWizard']
