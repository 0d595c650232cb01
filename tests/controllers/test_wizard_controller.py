# -*- coding: utf-8 -*-
"""
Tests for the registration wizard controller.

Tests cover:
- Step navigation and per-step validation
- Live re-validation after a failed advance
- Role switching
- Submission success, rejection and network failure
- Background submission (one request at a time)
"""

import threading
from unittest.mock import Mock

import pytest

from controllers import RegistrationController
from models.wizard import Confirmation, ErrorKind, WizardStatus
from services.exceptions import (
    DuplicateSubmissionError,
    NetworkUnreachableError,
    ServerRejectedError,
)
from services.registration_service import RegistrationService
from services.submission_adapter import SubmissionAdapter
from services.wizard.registration_steps import (
    STEP_PERSONAL_INFO,
    STEP_ROLE_DETAILS,
    STEP_VERIFICATION,
)


def fill(controller, values):
    for name, value in values.items():
        controller.update_field(name, value)


@pytest.fixture
def adapter():
    """Submission adapter double."""
    adapter = Mock(spec=SubmissionAdapter)
    adapter.submit.return_value = Confirmation(reference="u-1", message="Registered")
    return adapter


@pytest.fixture
def controller(qapp, adapter):
    """Controller that submits synchronously."""
    return RegistrationController(adapter=adapter, run_in_background=False)


@pytest.fixture
def errors_log(controller):
    """Record every errors_changed emission."""
    log = []
    controller.errors_changed.connect(lambda errors: log.append(errors))
    return log


@pytest.fixture
def at_last_step(controller, personal_info, patient_details, verification):
    """Controller on Verification with every field valid."""
    fill(controller, personal_info)
    assert controller.advance()
    fill(controller, patient_details)
    assert controller.advance()
    fill(controller, verification)
    assert controller.current_step_index == STEP_VERIFICATION
    return controller


class TestInitialState:
    """Test a freshly opened wizard."""

    def test_starts_on_first_step(self, controller):
        assert controller.current_step_index == STEP_PERSONAL_INFO
        assert controller.step_count == 3
        assert controller.status == WizardStatus.EDITING
        assert len(controller.form_state) == 0
        assert controller.field_errors == {}
        assert not controller.validated

    def test_reference_number(self, controller):
        assert controller.session.reference_number.startswith("REG-")

    def test_step_titles(self, controller):
        assert controller.get_step_titles() == ["Personal Info", "Role Details", "Verification"]


class TestAdvance:
    """Test moving forward."""

    def test_blocked_on_empty_step(self, controller, errors_log):
        assert controller.advance() is False

        assert controller.current_step_index == STEP_PERSONAL_INFO
        assert controller.validated
        assert set(controller.field_errors) == {
            "fullName", "dateOfBirth", "gender", "role", "streetAddress"
        }
        assert len(errors_log) == 1

    def test_missing_full_name(self, controller, personal_info, errors_log):
        """Only the missing name blocks the step, and fixing it unblocks."""
        values = dict(personal_info)
        del values["fullName"]
        fill(controller, values)

        assert controller.advance() is False
        error = controller.get_field_error("fullName")
        assert list(controller.field_errors) == ["fullName"]
        assert error.kind == ErrorKind.REQUIRED
        assert error.message == "Please provide your full name."

        controller.update_field("fullName", "Jane Doe")
        assert controller.field_errors == {}
        assert errors_log[-1] == {}

        assert controller.advance() is True
        assert controller.current_step_index == STEP_ROLE_DETAILS

    def test_success_moves_forward(self, controller, personal_info):
        changes = []
        controller.step_changed.connect(lambda old, new: changes.append((old, new)))
        fill(controller, personal_info)

        assert controller.advance() is True

        assert changes == [(0, 1)]
        assert controller.session.is_step_completed(STEP_PERSONAL_INFO)
        assert not controller.validated

    def test_role_details_follow_role(self, controller, personal_info):
        fill(controller, personal_info)
        controller.update_field("role", "Doctor")
        controller.advance()

        assert controller.current_descriptor().step_id == "doctor_details"
        assert controller.advance() is False
        assert "medicalLicenseNumber" in controller.field_errors
        assert "emergencyContactName" not in controller.field_errors

    def test_lowercase_role_accepted(self, controller, personal_info):
        fill(controller, personal_info)
        controller.update_field("role", "doctor")

        assert controller.advance() is True
        assert controller.current_descriptor().step_id == "doctor_details"

    def test_short_phone_blocks(self, at_last_step):
        at_last_step.update_field("phoneNumber", "(-----1")

        assert at_last_step.advance() is False
        assert at_last_step.get_field_error("phoneNumber").kind == ErrorKind.INVALID_FORMAT

    def test_non_finite_fee_blocks(self, controller, personal_info, doctor_details):
        fill(controller, personal_info)
        controller.update_field("role", "Doctor")
        controller.advance()
        fill(controller, doctor_details)
        controller.update_field("consultationFee", "nan")

        assert controller.advance() is False
        assert list(controller.field_errors) == ["consultationFee"]

    def test_invalid_values_block(self, controller, personal_info):
        fill(controller, personal_info)
        controller.update_field("dateOfBirth", "not a date")

        assert controller.advance() is False
        assert controller.get_field_error("dateOfBirth").kind == ErrorKind.INVALID_FORMAT


class TestUpdateField:
    """Test editing values."""

    def test_validation_deferred_until_advance(self, controller, errors_log):
        controller.update_field("fullName", "")

        assert controller.field_errors == {}
        assert errors_log == []

    def test_idempotent(self, controller, errors_log):
        assert controller.update_field("city", "Springfield") is True
        state = controller.form_state

        assert controller.update_field("city", "Springfield") is False
        assert controller.form_state is state
        assert errors_log == []

    def test_live_revalidation_after_failed_advance(self, at_last_step):
        controller = at_last_step
        controller.update_field("email", "jane")
        assert controller.field_errors == {}

        assert controller.advance() is False
        assert controller.get_field_error("email").kind == ErrorKind.INVALID_FORMAT
        controller.update_field("email", "jane@example")
        assert controller.get_field_error("email").kind == ErrorKind.INVALID_FORMAT
        controller.update_field("email", "jane@example.com")
        assert controller.get_field_error("email") is None

    def test_off_step_field_not_validated(self, controller, personal_info):
        values = dict(personal_info)
        del values["fullName"]
        fill(controller, values)
        controller.advance()

        controller.update_field("email", "garbage")
        assert list(controller.field_errors) == ["fullName"]

    def test_custom_hours_error_follows_schedule(self, controller, personal_info, pharmacist_details):
        fill(controller, personal_info)
        controller.update_field("role", "Pharmacist")
        controller.advance()
        fill(controller, pharmacist_details)
        controller.update_field("weekdayHours", "Custom")

        assert controller.advance() is False
        assert list(controller.field_errors) == ["customHours"]

        controller.update_field("weekdayHours", "8AM-5PM")
        assert controller.field_errors == {}


class TestRoleSwitch:
    """Test changing the role after entering role details."""

    def test_stale_errors_dropped(self, controller, personal_info, doctor_details):
        fill(controller, personal_info)
        controller.update_field("role", "Doctor")
        controller.advance()
        controller.advance()
        assert "medicalLicenseNumber" in controller.field_errors

        controller.update_field("role", "Patient")

        assert controller.current_descriptor().step_id == "patient_details"
        assert "medicalLicenseNumber" not in controller.field_errors

    def test_common_fields_untouched(self, controller, personal_info, doctor_details):
        fill(controller, personal_info)
        controller.update_field("role", "Doctor")
        controller.advance()
        fill(controller, doctor_details)

        controller.retreat()
        controller.update_field("role", "Patient")

        assert controller.get_value("fullName") == "Jane Doe"
        assert controller.get_value("streetAddress") == "12 Main Street"
        assert controller.advance() is True
        assert controller.selected_role.value == "Patient"

    def test_stale_role_values_not_submitted(self, qapp, personal_info, doctor_details,
                                             patient_details, verification, api_client):
        api_client.register_user.return_value = {"success": True, "data": {"user": {"_id": "u-9"}}}
        controller = RegistrationController(api_client=api_client, run_in_background=False)

        fill(controller, personal_info)
        controller.update_field("role", "Doctor")
        controller.advance()
        fill(controller, doctor_details)
        controller.retreat()
        controller.update_field("role", "Patient")
        controller.advance()
        fill(controller, patient_details)
        controller.advance()
        fill(controller, verification)
        controller.advance()

        payload = api_client.register_user.call_args[0][0]
        assert payload["role"] == "patient"
        assert "medicalLicenseNumber" not in payload
        assert payload["policyNumber"] == "POL-12345"


class TestRetreat:
    """Test moving back."""

    def test_noop_on_first_step(self, controller):
        assert controller.retreat() is False
        assert controller.current_step_index == STEP_PERSONAL_INFO

    def test_keeps_data_and_hides_errors(self, controller, personal_info):
        fill(controller, personal_info)
        controller.advance()
        controller.advance()
        assert controller.field_errors

        assert controller.retreat() is True

        assert controller.current_step_index == STEP_PERSONAL_INFO
        assert controller.field_errors == {}
        assert not controller.validated
        assert controller.get_value("fullName") == "Jane Doe"

    def test_round_trip(self, at_last_step):
        controller = at_last_step
        state = controller.form_state

        controller.retreat()
        assert controller.advance() is True

        assert controller.current_step_index == STEP_VERIFICATION
        assert controller.form_state is state


class TestSubmit:
    """Test the final submission."""

    def test_refused_before_last_step(self, controller, adapter, personal_info):
        fill(controller, personal_info)

        assert controller.submit() is False
        assert controller.current_step_index == STEP_PERSONAL_INFO
        adapter.submit.assert_not_called()

    def test_invalid_last_step_not_submitted(self, at_last_step, adapter):
        at_last_step.update_field("password", "short")

        assert at_last_step.submit() is False
        assert at_last_step.get_field_error("password").kind == ErrorKind.TOO_SHORT
        adapter.submit.assert_not_called()

    def test_success(self, at_last_step, adapter):
        controller = at_last_step
        received = []
        controller.submission_succeeded.connect(received.append)

        assert controller.submit() is True

        assert controller.status == WizardStatus.SUBMITTED
        assert controller.confirmation.reference == "u-1"
        assert received == [controller.confirmation]
        assert adapter.submit.call_args[0][0] is controller.form_state
        assert not controller.is_loading

    def test_advance_on_last_step_submits(self, at_last_step, adapter):
        assert at_last_step.advance() is True
        adapter.submit.assert_called_once()

    def test_everything_noop_after_submission(self, at_last_step, adapter):
        controller = at_last_step
        controller.submit()
        state = controller.form_state

        assert controller.advance() is False
        assert controller.retreat() is False
        assert controller.submit() is False
        assert controller.update_field("fullName", "Someone Else") is False
        assert controller.form_state is state
        assert controller.current_step_index == STEP_VERIFICATION
        adapter.submit.assert_called_once()

    def test_email_already_registered(self, at_last_step, adapter):
        controller = at_last_step
        adapter.submit.side_effect = DuplicateSubmissionError("Email already registered", status_code=400)
        messages = []
        controller.submission_failed.connect(messages.append)
        state = controller.form_state

        controller.submit()

        assert controller.status == WizardStatus.EDITING
        assert controller.current_step_index == STEP_VERIFICATION
        assert controller.submission_error == "Email already registered"
        assert messages == ["Email already registered"]
        assert controller.form_state is state
        assert controller.last_error == "Email already registered"

    def test_retry_after_failure(self, at_last_step, adapter):
        controller = at_last_step
        adapter.submit.side_effect = [
            NetworkUnreachableError("refused"),
            Confirmation(reference="u-2"),
        ]

        controller.submit()
        assert controller.submission_error == (
            "Could not reach the server. Please check your connection and try again."
        )

        controller.submit()
        assert controller.status == WizardStatus.SUBMITTED
        assert controller.submission_error is None
        assert adapter.submit.call_count == 2

    def test_rejection_without_message(self, at_last_step, adapter):
        adapter.submit.side_effect = ServerRejectedError("", status_code=500)
        at_last_step.submit()
        assert at_last_step.submission_error == (
            "The submission was not accepted. Please review your details and try again."
        )

    def test_unexpected_error(self, at_last_step, adapter):
        adapter.submit.side_effect = RuntimeError("boom")
        at_last_step.submit()

        assert at_last_step.status == WizardStatus.EDITING
        assert at_last_step.submission_error == (
            "Something went wrong while submitting. Please try again."
        )

    def test_retreat_clears_banner(self, at_last_step, adapter):
        adapter.submit.side_effect = ServerRejectedError("Nope")
        at_last_step.submit()

        at_last_step.retreat()
        assert at_last_step.submission_error is None

    def test_real_adapter_duplicate(self, qapp, api_client, personal_info, patient_details, verification):
        api_client.register_user.return_value = {"success": False, "message": "Email already registered"}
        controller = RegistrationController(
            adapter=RegistrationService(api_client), run_in_background=False
        )
        fill(controller, personal_info)
        controller.advance()
        fill(controller, patient_details)
        controller.advance()
        fill(controller, verification)

        controller.submit()

        assert controller.submission_error == "Email already registered"
        assert controller.status == WizardStatus.EDITING


class TestBackgroundSubmission:
    """Test submission on the worker thread."""

    @pytest.fixture
    def threaded(self, qapp, adapter, personal_info, patient_details, verification):
        controller = RegistrationController(adapter=adapter, run_in_background=True)
        fill(controller, personal_info)
        controller.advance()
        fill(controller, patient_details)
        controller.advance()
        fill(controller, verification)
        yield controller
        controller.wait_for_submission()

    def test_success_signal(self, qtbot, threaded):
        with qtbot.waitSignal(threaded.submission_succeeded, timeout=5000) as blocker:
            assert threaded.submit() is True

        assert blocker.args[0].reference == "u-1"
        assert threaded.status == WizardStatus.SUBMITTED

    def test_failure_signal(self, qtbot, threaded, adapter):
        adapter.submit.side_effect = DuplicateSubmissionError("Email already registered", status_code=409)

        with qtbot.waitSignal(threaded.submission_failed, timeout=5000) as blocker:
            threaded.submit()

        assert blocker.args == ["Email already registered"]
        assert threaded.status == WizardStatus.EDITING

    def test_one_submission_in_flight(self, qtbot, threaded, adapter):
        release = threading.Event()

        def slow_submit(form_state):
            release.wait(5)
            return Confirmation(reference="u-slow")

        adapter.submit.side_effect = slow_submit

        with qtbot.waitSignal(threaded.submission_succeeded, timeout=5000):
            assert threaded.submit() is True
            assert threaded.status == WizardStatus.SUBMITTING
            assert threaded.is_loading

            assert threaded.submit() is False
            assert threaded.advance() is False
            assert threaded.retreat() is False
            release.set()

        assert adapter.submit.call_count == 1
        assert threaded.confirmation.reference == "u-slow"
