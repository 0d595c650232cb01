# -*- coding: utf-8 -*-
"""
Telehealth Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "TelehealthApiClient",
    "SubmissionAdapter",
    "RegistrationService",
    "AppointmentService",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "TelehealthApiClient":
        from .api_client import TelehealthApiClient
        return TelehealthApiClient
    elif name == "SubmissionAdapter":
        from .submission_adapter import SubmissionAdapter
        return SubmissionAdapter
    elif name == "RegistrationService":
        from .registration_service import RegistrationService
        return RegistrationService
    elif name == "AppointmentService":
        from .appointment_service import AppointmentService
        return AppointmentService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
