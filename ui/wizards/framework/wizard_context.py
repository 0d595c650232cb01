# -*- coding: utf-8 -*-
"""
Wizard Session - state of one open wizard.

Holds:
- Current step and completed steps
- Immutable form state and per-field errors
- Submission status and outcome
- Reference number for logs and support
"""

from datetime import datetime
from typing import Any, Dict, Optional
import uuid

from models.wizard import Confirmation, FieldError, FormState, WizardStatus


class WizardSession:
    """
    In-memory state of a wizard session.

    The session is mutated only by its controller. It is never persisted:
    it lives from opening the wizard until success or abandonment.
    """

    def __init__(self, step_count: int, reference_prefix: str = "WIZ"):
        if step_count < 1:
            raise ValueError("A wizard session needs at least one step")

        self.wizard_id: str = str(uuid.uuid4())
        self.step_count = step_count
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = self.created_at
        self.reference_number: str = self._generate_reference_number(reference_prefix)

        self._current_step_index = 0
        self.completed_steps: set = set()

        self.form_state = FormState()
        self.field_errors: Dict[str, FieldError] = {}
        # True once advance() has been attempted on the current step
        self.validated = False

        self.status = WizardStatus.EDITING
        self.submission_error: Optional[str] = None
        self.confirmation: Optional[Confirmation] = None

    def _generate_reference_number(self, prefix: str) -> str:
        """
        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: REG-20260118153045-A3F2
        """
        timestamp = self.created_at.strftime("%Y%m%d%H%M%S")
        return f"{prefix}-{timestamp}-{self.wizard_id[:4].upper()}"

    # ==================== Navigation ====================

    @property
    def current_step_index(self) -> int:
        return self._current_step_index

    def move_to(self, step_index: int):
        """Make ``step_index`` the current step."""
        if not 0 <= step_index < self.step_count:
            raise IndexError(
                f"Invalid step index: {step_index} (valid range: 0-{self.step_count - 1})"
            )
        self._current_step_index = step_index
        self.touch()

    @property
    def is_first_step(self) -> bool:
        return self._current_step_index == 0

    @property
    def is_last_step(self) -> bool:
        return self._current_step_index == self.step_count - 1

    def mark_step_completed(self, step_index: int):
        self.completed_steps.add(step_index)
        self.touch()

    def is_step_completed(self, step_index: int) -> bool:
        return step_index in self.completed_steps

    # ==================== Status ====================

    @property
    def is_editing(self) -> bool:
        return self.status == WizardStatus.EDITING

    @property
    def is_submitting(self) -> bool:
        return self.status == WizardStatus.SUBMITTING

    @property
    def is_submitted(self) -> bool:
        return self.status == WizardStatus.SUBMITTED

    def touch(self):
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """
        Summary of the session for logging.

        Form values are not included; they may contain credentials.
        """
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status.value,
            "current_step_index": self._current_step_index,
            "completed_steps": sorted(self.completed_steps),
            "fields": sorted(self.form_state.keys()),
            "errors": sorted(self.field_errors.keys()),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
