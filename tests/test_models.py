# -*- coding: utf-8 -*-
"""
Tests for assessment records, results and context serialization.
"""

import json
import math

import pytest

from pcos_assessment.models import (
    ConsentRecord,
    DemographicsRecord,
    LabsRecord,
    ImagingRecord,
    UploadedFile,
    ResultSummary,
)
from pcos_assessment.models.assessment import SECTION_DEMOGRAPHICS, SECTION_IMAGING, SECTION_LABS
from pcos_assessment.ui.wizards.assessment.assessment_context import AssessmentContext


class TestRecords:

    def test_consent_requires_all_four(self):
        assert not ConsentRecord(True, True, True, False).all_accepted
        assert ConsentRecord(True, True, True, True).all_accepted

    def test_nan_serializes_as_null(self):
        data = DemographicsRecord(age=math.nan, height=165.0).to_dict()
        assert data["age"] is None
        assert data["height"] == 165.0
        json.dumps(data)

    def test_from_dict_ignores_unknown_keys(self):
        record = LabsRecord.from_dict({"glucose": 95, "unknown": 1})
        assert record.glucose == 95
        assert record.glucose_unit == "mg/dL"

    def test_imaging_keeps_file_order(self):
        record = ImagingRecord(ultrasound_files=[
            UploadedFile("a.png", 10),
            UploadedFile("b.dcm", 20),
        ])
        restored = ImagingRecord.from_dict(record.to_dict())
        assert [f.name for f in restored.ultrasound_files] == ["a.png", "b.dcm"]
        assert restored == record


class TestResultSummary:

    def test_default_is_placeholder_result(self):
        summary = ResultSummary()
        assert summary.risk_score == 68
        assert summary.pcos_probability == 0.72
        assert summary.metabolic_risk == 0.58
        assert len(summary.key_factors) == 4
        assert len(summary.residuals) == 3
        assert [r.is_normal for r in summary.residuals] == [True, False, True]

    def test_risk_levels(self):
        assert ResultSummary(risk_score=71).risk_level == "high"
        assert ResultSummary(risk_score=70).risk_level == "moderate"
        assert ResultSummary(risk_score=41).risk_level == "moderate"
        assert ResultSummary(risk_score=40).risk_level == "low"
        assert ResultSummary(risk_score=85).needs_consultation
        assert not ResultSummary().needs_consultation

    def test_from_dict_clamps_score_and_defaults_lists(self):
        summary = ResultSummary.from_dict({"risk_score": 140, "pcos_probability": 0.9})
        assert summary.risk_score == 100
        assert summary.pcos_probability == 0.9
        assert summary.key_factors == []
        assert summary.residuals == []

    def test_from_dict_reads_nested_lists(self):
        original = ResultSummary()
        restored = ResultSummary.from_dict(original.to_dict())
        assert restored.key_factors == original.key_factors
        assert restored.residuals == original.residuals
        assert restored.recommendations == original.recommendations
        assert restored.generated_at == original.generated_at


class TestAssessmentContext:

    def test_reference_number_prefix(self):
        assert AssessmentContext().reference_number.startswith("PCA-")

    def test_merge_overwrites_sections(self):
        ctx = AssessmentContext()
        ctx.merge({SECTION_LABS: LabsRecord(glucose=90.0)})
        ctx.merge({SECTION_LABS: LabsRecord(glucose=100.0)})
        assert ctx.get_section(SECTION_LABS).glucose == 100.0

    def test_get_section_returns_copy(self):
        ctx = AssessmentContext()
        ctx.merge({SECTION_IMAGING: ImagingRecord(ultrasound_files=[UploadedFile("a.png", 1)])})
        copy = ctx.get_section(SECTION_IMAGING)
        copy.ultrasound_files.clear()
        assert len(ctx.get_section(SECTION_IMAGING).ultrasound_files) == 1

    def test_snapshot_is_read_only(self):
        ctx = AssessmentContext()
        snapshot = ctx.snapshot()
        with pytest.raises(TypeError):
            snapshot[SECTION_LABS] = LabsRecord()
        assert not ctx.has_section(SECTION_LABS)

    def test_round_trip_through_json(self):
        ctx = AssessmentContext()
        ctx.merge({
            SECTION_DEMOGRAPHICS: DemographicsRecord(age=28.0, sex="female", height=165.0, weight=70.0),
            SECTION_LABS: LabsRecord(glucose=math.nan, insulin=10.0),
        })
        payload = json.loads(json.dumps(ctx.to_dict()))
        assert payload["assessment"]["labs"]["glucose"] is None

        restored = AssessmentContext.from_dict(payload)
        assert restored.reference_number == ctx.reference_number
        assert restored.get_section(SECTION_DEMOGRAPHICS) == ctx.get_section(SECTION_DEMOGRAPHICS)
        assert restored.get_section(SECTION_LABS).insulin == 10.0
