# -*- coding: utf-8 -*-
"""
Derived clinical values shown next to the assessment inputs.

All functions take parsed numbers (None = not entered, NaN = unparseable)
and return None when an input is missing. Unparseable inputs propagate as
NaN, which the UI renders as a blank value.
"""

from typing import Optional
import math


# Thresholds
HOMA_IR_INSULIN_RESISTANCE = 2.5
LH_FSH_ELEVATED = 2.0
SYSTOLIC_ELEVATED = 140
DIASTOLIC_ELEVATED = 90
ROTTERDAM_FOLLICLE_COUNT = 12

HOMA_IR_DIVISOR = 405.0


def _divide(numerator: float, denominator: float) -> float:
    """Float division that yields inf/NaN instead of raising on zero."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _is_finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def calculate_bmi(height_cm: Optional[float], weight_kg: Optional[float]) -> Optional[float]:
    """BMI = weight / (height in metres)^2."""
    if height_cm is None or weight_kg is None:
        return None
    return _divide(weight_kg, (height_cm / 100) ** 2)


def calculate_homa_ir(glucose: Optional[float], insulin: Optional[float]) -> Optional[float]:
    """
    HOMA-IR = fasting insulin (uU/mL) x fasting glucose / 405.

    The selected glucose unit is recorded with the labs but does not change
    the formula.
    """
    if glucose is None or insulin is None:
        return None
    return (insulin * glucose) / HOMA_IR_DIVISOR


def calculate_lh_fsh_ratio(lh: Optional[float], fsh: Optional[float]) -> Optional[float]:
    """LH divided by FSH."""
    if lh is None or fsh is None:
        return None
    return _divide(lh, fsh)


def is_insulin_resistant(homa_ir: Optional[float]) -> bool:
    """HOMA-IR above 2.5 indicates insulin resistance."""
    return _is_finite(homa_ir) and round(homa_ir, 2) > HOMA_IR_INSULIN_RESISTANCE


def is_lh_fsh_elevated(ratio: Optional[float]) -> bool:
    """An LH/FSH ratio above 2 is common in PCOS."""
    return _is_finite(ratio) and round(ratio, 2) > LH_FSH_ELEVATED


def is_blood_pressure_elevated(
    systolic: Optional[float],
    diastolic: Optional[float]
) -> bool:
    """Either systolic >= 140 or diastolic >= 90 is elevated."""
    if systolic is not None and systolic >= SYSTOLIC_ELEVATED:
        return True
    if diastolic is not None and diastolic >= DIASTOLIC_ELEVATED:
        return True
    return False


def meets_rotterdam_follicle_criterion(follicle_count: Optional[float]) -> bool:
    """An antral follicle count of 12 or more is one of the Rotterdam criteria."""
    return follicle_count is not None and follicle_count >= ROTTERDAM_FOLLICLE_COUNT
