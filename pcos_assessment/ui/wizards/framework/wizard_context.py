# -*- coding: utf-8 -*-
"""
Wizard Context - owner of the data a wizard accumulates.

Steps never hold a reference into the aggregate: they read deep copies
(get_data, snapshot) and hand new records back through merge().
"""

from typing import Dict, Any, Mapping
from datetime import datetime
from abc import ABC, abstractmethod
from types import MappingProxyType
import copy
import uuid


class WizardContext(ABC):
    """
    Aggregate plus session bookkeeping for one wizard run.

    Subclasses name the reference prefix and restore their own sections in
    from_dict().
    """

    reference_prefix = "WIZ"

    def __init__(self):
        self.wizard_id = str(uuid.uuid4())
        self.created_at = datetime.now()
        self.updated_at = self.created_at
        # in_progress -> submitting -> completed
        self.status = "in_progress"
        self.current_step_index = 0
        self.completed_steps = set()
        self.data: Dict[str, Any] = {}
        # e.g. PCA-20260118153045-A3F2
        self.reference_number = "{}-{}-{}".format(
            self.reference_prefix,
            self.created_at.strftime("%Y%m%d%H%M%S"),
            self.wizard_id[:4].upper()
        )

    def merge(self, partial: Mapping[str, Any], step_index: int = None):
        """
        Shallow-merge a step's output; keys already present are replaced.

        step_index, when given, is recorded as completed.
        """
        self.data.update(partial)
        if step_index is not None:
            self.completed_steps.add(step_index)
        self.updated_at = datetime.now()

    def get_data(self, key: str, default: Any = None) -> Any:
        if key not in self.data:
            return default
        return copy.deepcopy(self.data[key])

    def snapshot(self) -> Mapping[str, Any]:
        """Read-only deep copy of the whole aggregate."""
        return MappingProxyType(copy.deepcopy(self.data))

    def to_dict(self) -> Dict[str, Any]:
        """Session fields; subclasses add the serialized aggregate."""
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "completed_steps": sorted(self.completed_steps),
        }

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WizardContext':
        pass

    def _restore_session(self, data: Dict[str, Any]):
        """Counterpart of to_dict() for the session fields."""
        self.wizard_id = data.get("wizard_id", self.wizard_id)
        self.reference_number = data.get("reference_number", self.reference_number)
        self.status = data.get("status", self.status)
        self.current_step_index = data.get("current_step_index", 0)
        self.completed_steps = set(data.get("completed_steps", []))
        if "created_at" in data:
            self.created_at = datetime.fromisoformat(data["created_at"])
        if "updated_at" in data:
            self.updated_at = datetime.fromisoformat(data["updated_at"])
