# -*- coding: utf-8 -*-
"""Assessment wizard steps."""

from .consent_step import ConsentStep
from .demographics_step import DemographicsStep
from .symptoms_step import SymptomsStep
from .vitals_step import VitalsStep
from .labs_step import LabsStep
from .imaging_step import ImagingStep
from .review_step import ReviewStep

__all__ = [
    'ConsentStep',
    'DemographicsStep',
    'SymptomsStep',
    'VitalsStep',
    'LabsStep',
    'ImagingStep',
    'ReviewStep',
]
