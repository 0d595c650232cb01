# -*- coding: utf-8 -*-
"""
Telehealth Data Models
"""

from .wizard import (
    Confirmation,
    ErrorKind,
    FieldError,
    FormState,
    Role,
    StepDescriptor,
    WizardStatus,
)

__all__ = [
    "Confirmation",
    "ErrorKind",
    "FieldError",
    "FormState",
    "Role",
    "StepDescriptor",
    "WizardStatus",
]
