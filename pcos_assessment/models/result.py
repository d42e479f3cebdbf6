# -*- coding: utf-8 -*-
"""
Risk result entity model.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass
class KeyFactor:
    """An indicator that contributed to the risk score."""

    factor: str
    value: str
    impact: str  # High, Moderate, Low
    trend: str  # increasing, stable, decreasing

    def to_dict(self) -> dict:
        return {
            "factor": self.factor,
            "value": self.value,
            "impact": self.impact,
            "trend": self.trend,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "KeyFactor":
        return cls(
            factor=str(data.get("factor", "")),
            value=str(data.get("value", "")),
            impact=str(data.get("impact", "")),
            trend=str(data.get("trend", "")),
        )


@dataclass
class ConstraintResidual:
    """Residual of one physiological constraint check."""

    constraint: str
    residual: float
    status: str  # normal, attention

    @property
    def is_normal(self) -> bool:
        return self.status == "normal"

    def to_dict(self) -> dict:
        return {
            "constraint": self.constraint,
            "residual": self.residual,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ConstraintResidual":
        return cls(
            constraint=str(data.get("constraint", "")),
            residual=float(data.get("residual", 0.0)),
            status=str(data.get("status", "normal")),
        )


@dataclass
class Recommendation:
    """A follow-up recommendation shown on the results page."""

    title: str
    description: str

    def to_dict(self) -> dict:
        return {"title": self.title, "description": self.description}

    @classmethod
    def from_dict(cls, data: dict) -> "Recommendation":
        return cls(
            title=str(data.get("title", "")),
            description=str(data.get("description", "")),
        )


def _default_key_factors() -> List[KeyFactor]:
    return [
        KeyFactor("HOMA-IR Index", "4.2", "High", "increasing"),
        KeyFactor("LH/FSH Ratio", "2.8", "Moderate", "stable"),
        KeyFactor("Testosterone Level", "68 ng/dL", "Moderate", "increasing"),
        KeyFactor("BMI", "28.5", "Moderate", "stable"),
    ]


def _default_residuals() -> List[ConstraintResidual]:
    return [
        ConstraintResidual("Insulin-Glucose Dynamics", 0.12, "normal"),
        ConstraintResidual("Hormonal Balance", 0.34, "attention"),
        ConstraintResidual("Metabolic Conservation", 0.08, "normal"),
    ]


def _default_recommendations() -> List[Recommendation]:
    return [
        Recommendation(
            "Schedule Clinical Follow-up",
            "Consult with an endocrinologist or PCOS specialist for "
            "comprehensive evaluation and treatment planning.",
        ),
        Recommendation(
            "Metabolic Panel Monitoring",
            "Regular monitoring of insulin resistance markers (HOMA-IR), "
            "lipid profile, and glucose tolerance recommended.",
        ),
        Recommendation(
            "Lifestyle Modifications",
            "Evidence supports structured diet, exercise, and stress "
            "management for metabolic health improvement.",
        ),
    ]


@dataclass
class ResultSummary:
    """
    Risk assessment result.

    The default instance holds the fixed placeholder values shown when no
    inference service is configured.
    """

    risk_score: int = 68
    pcos_probability: float = 0.72
    metabolic_risk: float = 0.58
    key_factors: List[KeyFactor] = field(default_factory=_default_key_factors)
    residuals: List[ConstraintResidual] = field(default_factory=_default_residuals)
    recommendations: List[Recommendation] = field(default_factory=_default_recommendations)
    model_version: str = "GAN-PINN v2.1.0"
    generated_at: datetime = field(default_factory=datetime.now)

    # (level, lower bound exclusive)
    RISK_LEVELS = [
        ("high", 70),
        ("moderate", 40),
    ]

    @property
    def risk_level(self) -> str:
        """high above 70, moderate above 40, otherwise low."""
        for level, threshold in self.RISK_LEVELS:
            if self.risk_score > threshold:
                return level
        return "low"

    @property
    def needs_consultation(self) -> bool:
        return self.risk_level == "high"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "risk_score": self.risk_score,
            "pcos_probability": self.pcos_probability,
            "metabolic_risk": self.metabolic_risk,
            "key_factors": [f.to_dict() for f in self.key_factors],
            "residuals": [r.to_dict() for r in self.residuals],
            "recommendations": [r.to_dict() for r in self.recommendations],
            "model_version": self.model_version,
            "generated_at": self.generated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ResultSummary":
        """
        Create ResultSummary from an inference response.

        Missing lists fall back to empty lists, missing scalars to the
        placeholder defaults.
        """
        summary = cls()
        if "risk_score" in data:
            summary.risk_score = max(0, min(100, int(round(float(data["risk_score"])))))
        if "pcos_probability" in data:
            summary.pcos_probability = float(data["pcos_probability"])
        if "metabolic_risk" in data:
            summary.metabolic_risk = float(data["metabolic_risk"])
        summary.key_factors = [KeyFactor.from_dict(f) for f in data.get("key_factors", [])]
        summary.residuals = [ConstraintResidual.from_dict(r) for r in data.get("residuals", [])]
        summary.recommendations = [
            Recommendation.from_dict(r) for r in data.get("recommendations", [])
        ]
        if data.get("model_version"):
            summary.model_version = str(data["model_version"])
        if isinstance(data.get("generated_at"), str):
            summary.generated_at = datetime.fromisoformat(data["generated_at"])
        return summary
