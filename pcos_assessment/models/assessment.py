# -*- coding: utf-8 -*-
"""
Assessment section records.

Each wizard step produces one record; the wizard context keeps them in a
mapping keyed by section name.
"""

from dataclasses import dataclass, field, asdict, fields
from typing import Optional, List
import math


# Section names (keys of the assessment aggregate)
SECTION_CONSENTS = "consents"
SECTION_DEMOGRAPHICS = "demographics"
SECTION_SYMPTOMS = "symptoms"
SECTION_VITALS = "vitals"
SECTION_LABS = "labs"
SECTION_IMAGING = "imaging"

SECTIONS = (
    SECTION_CONSENTS,
    SECTION_DEMOGRAPHICS,
    SECTION_SYMPTOMS,
    SECTION_VITALS,
    SECTION_LABS,
    SECTION_IMAGING,
)


def _number_to_json(value: Optional[float]):
    """NaN is not valid JSON; serialize it as null."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    return value


class _Record:
    """Shared serialization for section records."""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            key: _number_to_json(value) if isinstance(value, float) else value
            for key, value in asdict(self).items()
        }

    @classmethod
    def from_dict(cls, data: dict):
        """Create a record from a dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in names})


@dataclass
class ConsentRecord(_Record):
    """Four consent flags; all must be accepted to proceed."""

    data_collection: bool = False
    data_storage: bool = False
    synthetic_generation: bool = False
    research_use: bool = False

    @property
    def all_accepted(self) -> bool:
        return all((
            self.data_collection,
            self.data_storage,
            self.synthetic_generation,
            self.research_use,
        ))


@dataclass
class DemographicsRecord(_Record):
    """
    Demographic and anthropometric data.

    Height and waist are in cm, weight in kg.
    """

    age: Optional[float] = None
    sex: Optional[str] = None
    ethnicity: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    waist: Optional[float] = None

    SEX_OPTIONS = [
        ("female", "Female"),
        ("male", "Male"),
        ("other", "Other"),
    ]

    ETHNICITY_OPTIONS = [
        ("caucasian", "Caucasian"),
        ("african", "African American"),
        ("asian", "Asian"),
        ("hispanic", "Hispanic/Latino"),
        ("other", "Other"),
    ]


@dataclass
class SymptomsRecord(_Record):
    """Symptoms and family history. No field is required."""

    menstrual_cycle: Optional[str] = None
    hirsutism: bool = False
    acne: bool = False
    hair_thinning: bool = False
    fertility_issues: bool = False
    family_history_pcos: bool = False
    family_history_diabetes: bool = False
    family_history_cvd: bool = False

    MENSTRUAL_CYCLE_OPTIONS = [
        ("regular", "Regular (21-35 days)"),
        ("irregular", "Irregular (variable length)"),
        ("absent", "Absent (amenorrhea)"),
        ("infrequent", "Infrequent (>35 days)"),
    ]

    SYMPTOM_FIELDS = [
        ("hirsutism", "Hirsutism (excessive hair growth)"),
        ("acne", "Persistent acne"),
        ("hair_thinning", "Hair thinning or loss"),
        ("fertility_issues", "Fertility concerns"),
    ]

    FAMILY_HISTORY_FIELDS = [
        ("family_history_pcos", "Family history of PCOS"),
        ("family_history_diabetes", "Family history of diabetes"),
        ("family_history_cvd", "Family history of cardiovascular disease"),
    ]


@dataclass
class VitalsRecord(_Record):
    """Blood pressure (mmHg) and resting heart rate (bpm)."""

    systolic: Optional[float] = None
    diastolic: Optional[float] = None
    heart_rate: Optional[float] = None


@dataclass
class LabsRecord(_Record):
    """Laboratory values. All optional."""

    glucose: Optional[float] = None
    glucose_unit: str = "mg/dL"
    hba1c: Optional[float] = None
    insulin: Optional[float] = None
    total_cholesterol: Optional[float] = None
    hdl: Optional[float] = None
    ldl: Optional[float] = None
    triglycerides: Optional[float] = None
    lh: Optional[float] = None
    fsh: Optional[float] = None
    testosterone: Optional[float] = None
    shbg: Optional[float] = None
    tsh: Optional[float] = None
    prolactin: Optional[float] = None

    GLUCOSE_UNITS = ["mg/dL", "mmol/L"]


@dataclass
class UploadedFile(_Record):
    """Reference to a selected image file. Contents are never read."""

    name: str = ""
    size: int = 0


@dataclass
class ImagingRecord:
    """Ultrasound measurements and selected image files."""

    ovarian_volume: Optional[float] = None
    follicle_count: Optional[float] = None
    ultrasound_files: List[UploadedFile] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "ovarian_volume": _number_to_json(self.ovarian_volume),
            "follicle_count": _number_to_json(self.follicle_count),
            "ultrasound_files": [f.to_dict() for f in self.ultrasound_files],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ImagingRecord":
        """Create ImagingRecord from dictionary."""
        data = data or {}
        return cls(
            ovarian_volume=data.get("ovarian_volume"),
            follicle_count=data.get("follicle_count"),
            ultrasound_files=[
                UploadedFile.from_dict(f) for f in data.get("ultrasound_files", [])
            ],
        )


# Section name -> record class
RECORD_TYPES = {
    SECTION_CONSENTS: ConsentRecord,
    SECTION_DEMOGRAPHICS: DemographicsRecord,
    SECTION_SYMPTOMS: SymptomsRecord,
    SECTION_VITALS: VitalsRecord,
    SECTION_LABS: LabsRecord,
    SECTION_IMAGING: ImagingRecord,
}
