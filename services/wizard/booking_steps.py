# -*- coding: utf-8 -*-
"""
Appointment booking wizard steps: Provider, Type, Date & Time, Reason, Confirm.
"""

from models.wizard import StepDescriptor
from services.translation_manager import tr
from .step_resolver import StepContentResolver

STEP_PROVIDER = 0
STEP_APPOINTMENT_TYPE = 1
STEP_DATE_TIME = 2
STEP_REASON = 3
STEP_CONFIRM = 4


def build_booking_resolver() -> StepContentResolver:
    """Create the step resolver for the appointment booking wizard."""
    return StepContentResolver([
        StepDescriptor(step_id="provider", title=tr("step.provider"), required_fields=("doctorId",)),
        StepDescriptor(
            step_id="appointment_type",
            title=tr("step.appointment_type"),
            required_fields=("appointmentType",),
        ),
        StepDescriptor(step_id="date_time", title=tr("step.date_time"), required_fields=("date", "time")),
        StepDescriptor(step_id="reason", title=tr("step.reason"), optional_fields=("reason",)),
        StepDescriptor(step_id="confirm", title=tr("step.confirm")),
    ])
