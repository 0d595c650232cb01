# -*- coding: utf-8 -*-
"""
Booking Controller
==================
Wizard controller for booking an appointment with a doctor.
"""

from typing import Optional

from controllers.wizard_controller import WizardController
from services.api_client import TelehealthApiClient
from services.appointment_service import AppointmentService
from services.submission_adapter import SubmissionAdapter
from services.wizard import StepValidator, build_booking_resolver


class BookingController(WizardController):
    """Controller for the Provider → Type → Date & Time → Reason → Confirm flow."""

    reference_prefix = "APT"

    def __init__(
        self,
        api_client: Optional[TelehealthApiClient] = None,
        adapter: Optional[SubmissionAdapter] = None,
        step_validator: Optional[StepValidator] = None,
        run_in_background: bool = True,
        parent=None
    ):
        super().__init__(
            build_booking_resolver(),
            adapter or AppointmentService(api_client),
            step_validator=step_validator,
            run_in_background=run_in_background,
            parent=parent
        )
