# -*- coding: utf-8 -*-
"""
Wizard Framework - multi-step wizard system.

Provides base classes for creating multi-step wizards with linear
navigation, per-step continue gates and a single-owner data context.
"""

from .base_wizard import BaseWizard
from .base_step import BaseStep
from .wizard_context import WizardContext
from .step_navigator import StepNavigator

__all__ = [
    'BaseWizard',
    'BaseStep',
    'WizardContext',
    'StepNavigator'
]
