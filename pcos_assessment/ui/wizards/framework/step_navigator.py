# -*- coding: utf-8 -*-
"""
Step Navigator - moves a wizard one step at a time.

advance() merges the current step's output and moves forward; retreat()
moves back without touching the data. The index stays within the step
list: there is no wraparound and no skipping.
"""

from typing import Any, List, Mapping, Optional
from PyQt5.QtCore import QObject, pyqtSignal

from .base_step import BaseStep
from .wizard_context import WizardContext
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Index over the steps of one wizard.

    No validation happens here. A step that is not ready keeps the wizard's
    Continue button disabled through can_continue().
    """

    step_changed = pyqtSignal(int, int)  # old_index, new_index
    can_go_next_changed = pyqtSignal(bool)
    can_go_previous_changed = pyqtSignal(bool)

    def __init__(self, context: WizardContext, steps: List[BaseStep]):
        super().__init__()
        self.context = context
        self.steps = steps
        self.current_index = 0

        for step in steps:
            step.validation_changed.connect(self._on_step_validation_changed)

    def get_current_step(self) -> Optional[BaseStep]:
        if 0 <= self.current_index < len(self.steps):
            return self.steps[self.current_index]
        return None

    def get_step_count(self) -> int:
        return len(self.steps)

    def is_last_step(self) -> bool:
        return self.current_index == len(self.steps) - 1

    def can_go_next(self) -> bool:
        step = self.get_current_step()
        return step is not None and step.can_continue()

    def can_go_previous(self) -> bool:
        return self.current_index > 0

    def get_progress_percentage(self) -> float:
        """Step 1 of 7 is 1/7 done; the last step is 100."""
        if not self.steps:
            return 0.0
        return (self.current_index + 1) / len(self.steps) * 100.0

    def advance(self, partial: Mapping[str, Any]) -> bool:
        """
        Merge partial into the aggregate, then show the next step.

        On the last step the merge still happens but the index stays.

        Returns:
            True if the index moved
        """
        self.context.merge(partial, step_index=self.current_index)

        if self.is_last_step():
            logger.debug(f"Merged output of last step {self.current_index}; index unchanged")
            return False
        return self._show(self.current_index + 1)

    def retreat(self) -> bool:
        """
        Show the previous step. The aggregate is not touched.

        Returns:
            True if the index moved
        """
        if not self.can_go_previous():
            return False
        return self._show(self.current_index - 1)

    def start(self):
        """Show the first step."""
        self._show(0)

    def _show(self, index: int) -> bool:
        """Hide the current step (if any other is shown) and show index."""
        if not 0 <= index < len(self.steps):
            logger.error(f"Step index {index} outside 0..{len(self.steps) - 1}")
            return False

        old_index = self.current_index
        if index != old_index:
            self.steps[old_index].on_hide()
            logger.info(f"Step {old_index + 1} -> {index + 1} ({self.steps[index].get_step_title()})")

        self.current_index = index
        self.context.current_step_index = index
        self.steps[index].on_show()

        self.step_changed.emit(old_index, index)
        self.can_go_next_changed.emit(self.can_go_next())
        self.can_go_previous_changed.emit(self.can_go_previous())
        return True

    def _on_step_validation_changed(self, is_valid: bool):
        # Hidden steps re-publish their gate when shown
        if self.sender() is self.get_current_step():
            self.can_go_next_changed.emit(is_valid)
