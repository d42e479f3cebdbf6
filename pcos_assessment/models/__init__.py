# -*- coding: utf-8 -*-
"""
PCOS Assessment Data Models
"""

from .assessment import (
    ConsentRecord,
    DemographicsRecord,
    SymptomsRecord,
    VitalsRecord,
    LabsRecord,
    ImagingRecord,
    UploadedFile,
)
from .result import ResultSummary, KeyFactor, ConstraintResidual, Recommendation

__all__ = [
    "ConsentRecord",
    "DemographicsRecord",
    "SymptomsRecord",
    "VitalsRecord",
    "LabsRecord",
    "ImagingRecord",
    "UploadedFile",
    "ResultSummary",
    "KeyFactor",
    "ConstraintResidual",
    "Recommendation",
]
