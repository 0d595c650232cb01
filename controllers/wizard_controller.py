# -*- coding: utf-8 -*-
"""
Wizard Controller
=================
Drives a multi-step form wizard: step navigation, per-step validation,
role-dependent step content and the single final submission.

The controller owns a WizardSession. Pages call update_field() on every
edit and advance() / retreat() / submit() on button clicks; they listen to
the signals below to redraw.
"""

from typing import Any, Dict, List, Optional

from PyQt5.QtCore import pyqtSignal, pyqtSlot

from controllers.base_controller import BaseController
from models.wizard import FieldError, StepDescriptor, WizardStatus
from services.error_mapper import map_exception
from services.submission_adapter import SubmissionAdapter
from services.wizard import StepContentResolver, StepValidator
from ui.wizards.framework.submission_worker import SubmissionWorker
from ui.wizards.framework.wizard_context import WizardSession
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardController(BaseController):
    """
    Controller for one wizard session.

    States: Step[0] .. Step[N-1], then Submitting while the final request
    is in flight, then Submitted (terminal). Every operation is a no-op
    returning False once the session is submitted.
    """

    step_changed = pyqtSignal(int, int)  # old index, new index
    errors_changed = pyqtSignal(dict)  # field name -> FieldError
    submission_started = pyqtSignal()
    submission_succeeded = pyqtSignal(object)  # Confirmation
    submission_failed = pyqtSignal(str)  # user-facing message

    reference_prefix = "WIZ"
    # Form field whose value selects the content of branched steps
    discriminator_field: Optional[str] = None

    def __init__(
        self,
        resolver: StepContentResolver,
        adapter: SubmissionAdapter,
        step_validator: Optional[StepValidator] = None,
        run_in_background: bool = True,
        parent=None
    ):
        super().__init__(parent)
        self.resolver = resolver
        self.adapter = adapter
        self.step_validator = step_validator or StepValidator()
        self.run_in_background = run_in_background
        self._worker: Optional[SubmissionWorker] = None

        self.session = WizardSession(resolver.step_count, self.reference_prefix)
        logger.info(
            f"{self.__class__.__name__} opened {self.session.reference_number} "
            f"({self.step_count} steps)"
        )

    # ==================== State ====================

    @property
    def step_count(self) -> int:
        return self.resolver.step_count

    @property
    def current_step_index(self) -> int:
        return self.session.current_step_index

    @property
    def status(self) -> WizardStatus:
        return self.session.status

    @property
    def form_state(self):
        return self.session.form_state

    @property
    def field_errors(self) -> Dict[str, FieldError]:
        return dict(self.session.field_errors)

    @property
    def validated(self) -> bool:
        return self.session.validated

    @property
    def submission_error(self) -> Optional[str]:
        return self.session.submission_error

    @property
    def confirmation(self):
        return self.session.confirmation

    def get_field_error(self, field_name: str) -> Optional[FieldError]:
        return self.session.field_errors.get(field_name)

    def get_value(self, field_name: str, default: Any = None) -> Any:
        return self.session.form_state.get(field_name, default)

    def get_step_titles(self) -> List[str]:
        return self.resolver.get_step_titles()

    def current_descriptor(self) -> StepDescriptor:
        """Field set of the current step for the current discriminator value."""
        return self.resolver.resolve_step(self.current_step_index, self._discriminator())

    def _discriminator(self) -> Any:
        if self.discriminator_field is None:
            return None
        return self.session.form_state.get(self.discriminator_field)

    # ==================== Editing ====================

    def update_field(self, field_name: str, value: Any) -> bool:
        """
        Store a field value.

        Re-validates the field right away once the user has tried to leave
        the current step; before that validation waits for advance().

        Returns:
            True if the form state changed
        """
        if self.session.is_submitted:
            return False

        current = self.session.form_state
        updated = current.set(field_name, value)
        if updated is current:
            return False

        self.session.form_state = updated
        self.session.touch()

        if field_name == self.discriminator_field:
            logger.info(f"Discriminator '{field_name}' changed to '{value}'")

        self._refresh_errors(field_name)
        return True

    def _refresh_errors(self, field_name: str):
        descriptor = self.current_descriptor()
        # Errors of fields the step no longer shows are stale
        errors = {
            name: error for name, error in self.session.field_errors.items()
            if descriptor.has_field(name)
        }

        if self.session.validated and descriptor.has_field(field_name):
            names = [field_name] + [name for name, _ in descriptor.conditional_fields]
            for name in names:
                error = self.step_validator.validate_field(descriptor, name, self.session.form_state)
                if error is None:
                    errors.pop(name, None)
                else:
                    errors[name] = error

        self._set_field_errors(errors)

    def _set_field_errors(self, errors: Dict[str, FieldError]):
        if errors == self.session.field_errors:
            return
        self.session.field_errors = dict(errors)
        self.errors_changed.emit(dict(errors))

    # ==================== Navigation ====================

    def advance(self) -> bool:
        """
        Validate the current step and move forward.

        On the last step a valid form starts the submission instead.

        Returns:
            True if the step was valid and the wizard moved on (or the
            submission was started)
        """
        if not self.session.is_editing:
            logger.warning(f"advance() ignored while {self.session.status.value}")
            return False

        index = self.current_step_index
        descriptor = self.current_descriptor()
        errors = self.step_validator.validate_step(descriptor, self.session.form_state)

        if errors:
            self.session.validated = True
            self._set_field_errors(errors)
            logger.warning(
                f"Step {index} ({descriptor.step_id}) blocked: "
                f"{len(errors)} invalid field(s): {', '.join(errors)}"
            )
            return False

        self._set_field_errors({})
        self.session.mark_step_completed(index)

        if self.session.is_last_step:
            return self._start_submission()

        self.session.validated = False
        self.session.move_to(index + 1)
        logger.info(f"Navigating: Step {index} → {index + 1}")
        self.step_changed.emit(index, index + 1)
        return True

    def retreat(self) -> bool:
        """
        Go back one step, keeping every value entered so far.

        Returns:
            True if the wizard moved back
        """
        if not self.session.is_editing or self.session.is_first_step:
            return False

        index = self.current_step_index
        self.session.validated = False
        self.session.submission_error = None
        self._set_field_errors({})
        self.session.move_to(index - 1)
        logger.info(f"Navigating back: Step {index} → {index - 1}")
        self.step_changed.emit(index, index - 1)
        return True

    def submit(self) -> bool:
        """Submit from the last step; same as advance() there."""
        if not self.session.is_last_step:
            logger.warning(
                f"submit() refused on step {self.current_step_index} "
                f"(last step is {self.step_count - 1})"
            )
            return False
        return self.advance()

    # ==================== Submission ====================

    def _start_submission(self) -> bool:
        snapshot = self.session.form_state

        self.session.status = WizardStatus.SUBMITTING
        self.session.submission_error = None
        self.session.touch()
        logger.info(f"Submitting {self.session.reference_number}")

        self._emit_started("submit")
        self.submission_started.emit()

        if not self.run_in_background:
            try:
                confirmation = self.adapter.submit(snapshot)
            except Exception as e:
                self._on_submission_failed(e)
            else:
                self._on_submission_succeeded(confirmation)
            return True

        if self._worker is not None and self._worker.isRunning():
            self._worker.wait()

        self._worker = SubmissionWorker(self.adapter, snapshot)
        self._worker.succeeded.connect(self._on_submission_succeeded)
        self._worker.failed.connect(self._on_submission_failed)
        self._worker.start()
        return True

    @pyqtSlot(object)
    def _on_submission_succeeded(self, confirmation):
        self.session.status = WizardStatus.SUBMITTED
        self.session.confirmation = confirmation
        self.session.touch()
        logger.info(
            f"Submission {self.session.reference_number} accepted "
            f"(reference={getattr(confirmation, 'reference', None)})"
        )
        logger.debug(f"Session summary: {self.session.to_dict()}")
        self._emit_completed("submit", True)
        self.submission_succeeded.emit(confirmation)

    @pyqtSlot(object)
    def _on_submission_failed(self, error):
        message = map_exception(error)
        self.session.status = WizardStatus.EDITING
        self.session.submission_error = message
        self.session.touch()
        self._emit_error("submit", message)
        self.submission_failed.emit(message)

    def wait_for_submission(self, timeout_ms: int = 30000) -> bool:
        """Block until the background submission thread has finished."""
        if self._worker is None:
            return True
        return self._worker.wait(timeout_ms)
