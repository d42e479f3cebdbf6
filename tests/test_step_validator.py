# -*- coding: utf-8 -*-
"""
Tests for continue gates and review completeness.
"""

import math

from pcos_assessment.models.assessment import (
    ConsentRecord,
    DemographicsRecord,
    ImagingRecord,
    LabsRecord,
    SymptomsRecord,
    VitalsRecord,
)
from pcos_assessment.services.wizard.step_validator import StepValidator


def _complete(aggregate):
    return [complete for _, complete in StepValidator.section_completeness(aggregate)]


class TestContinueGates:

    def test_consent_three_of_four(self):
        assert not StepValidator.can_continue_consent(ConsentRecord(True, True, False, True))

    def test_consent_all_four(self):
        assert StepValidator.can_continue_consent(ConsentRecord(True, True, True, True))

    def test_consent_missing_record(self):
        assert not StepValidator.can_continue_consent(None)

    def test_demographics_required_fields(self):
        record = DemographicsRecord(age=28.0, sex="female", height=165.0)
        assert StepValidator.missing_demographics(record) == ["weight"]
        assert not StepValidator.can_continue_demographics(record)

        record.weight = 70.0
        assert StepValidator.can_continue_demographics(record)

    def test_demographics_optional_fields_not_required(self):
        record = DemographicsRecord(age=28.0, sex="other", height=165.0, weight=70.0)
        assert record.ethnicity is None and record.waist is None
        assert StepValidator.can_continue_demographics(record)

    def test_unparseable_text_counts_as_entered(self):
        record = DemographicsRecord(age=math.nan, sex="male", height=165.0, weight=70.0)
        assert StepValidator.can_continue_demographics(record)


class TestSectionCompleteness:

    def test_empty_aggregate_is_all_incomplete(self):
        assert _complete({}) == [False, False, False, False, False]

    def test_presence_rules(self):
        aggregate = {
            "demographics": DemographicsRecord(age=30.0),
            "symptoms": SymptomsRecord(),
            "vitals": VitalsRecord(diastolic=80.0),
            "labs": LabsRecord(glucose=95.0),
            "imaging": ImagingRecord(),
        }
        # Vital signs count only with a systolic value
        assert _complete(aggregate) == [True, True, False, True, True]

    def test_section_names(self):
        names = [name for name, _ in StepValidator.section_completeness({})]
        assert names == [
            "Demographics",
            "Symptoms",
            "Vital Signs",
            "Laboratory Values",
            "Medical Imaging",
        ]

    def test_consents_confirmed(self):
        assert StepValidator.consents_confirmed({"consents": ConsentRecord(True, True, True, True)})
        assert not StepValidator.consents_confirmed({})
