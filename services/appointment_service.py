# -*- coding: utf-8 -*-
"""
Appointment Service - submits the appointment booking wizard.

Booking needs a signed-in patient: without an auth token the submission
fails before any request is made.
"""

from typing import Any, Dict, Mapping, Optional

from app.config import Config
from services.submission_adapter import SubmissionAdapter
from utils.helpers import is_blank


class AppointmentService(SubmissionAdapter):
    """Requests appointments for the signed-in patient."""

    success_message_key = "submission.booking.success"
    requires_auth = True

    def build_payload(self, form_state: Mapping[str, Any]) -> Dict[str, Any]:
        reason = form_state.get("reason")
        return {
            "doctorId": self._clean(form_state.get("doctorId")),
            "date": self._clean(form_state.get("date")),
            "time": self._clean(form_state.get("time")),
            "type": self._clean(form_state.get("appointmentType")),
            "reason": Config.DEFAULT_APPOINTMENT_REASON if is_blank(reason) else self._clean(reason),
        }

    def send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self.api_client.create_appointment(payload)

    def extract_reference(self, data: Dict[str, Any]) -> Optional[str]:
        appointment = data.get("appointment")
        if isinstance(appointment, dict):
            data = appointment
        return super().extract_reference(data)
