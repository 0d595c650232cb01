# -*- coding: utf-8 -*-
"""
Validation Factory - the single rule set for every wizard field.

Required-ness is decided by the step being validated; everything else
(patterns, lengths, allowed options, date and number formats) is registered
here per field name.
"""

import re
from datetime import date
from typing import Any, Dict, List, Optional

from app.config import Config
from models.wizard import ErrorKind, FieldError
from services.translation_manager import has_translation, tr
from utils.helpers import is_blank
from .validation_strategy import (
    ChoiceValidator,
    DateValidator,
    MinLengthValidator,
    NumberValidator,
    PatternValidator,
    PhoneValidator,
    RequiredValidator,
    RoleValidator,
    TimeValidator,
    ValidationStrategy,
)

EMAIL_PATTERN = r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}"

GENDER_OPTIONS = ("Male", "Female", "Other", "Prefer not to say")
RELATIONSHIP_OPTIONS = ("Spouse", "Parent", "Child", "Sibling", "Friend", "Other")
SPECIALIZATION_OPTIONS = (
    "General Practice",
    "Internal Medicine",
    "Pediatrics",
    "Cardiology",
    "Dermatology",
    "Neurology",
    "Psychiatry",
    "Obstetrics & Gynecology",
    "Ophthalmology",
    "Oncology",
    "Other",
)
CUSTOM_HOURS = "Custom"
WEEKDAY_HOURS_OPTIONS = ("8AM-5PM", "9AM-6PM", "8AM-8PM", "24hours", CUSTOM_HOURS)
WEEKEND_HOURS_OPTIONS = ("Closed", "8AM-12PM", "9AM-5PM", "8AM-8PM", "24hours", CUSTOM_HOURS)
APPOINTMENT_TYPE_OPTIONS = ("Video Call", "Phone Call", "In-Person Visit")


class ValidationFactory:
    """
    Registry of validation strategies keyed by field name.

    validate() is a pure function of (field name, value, rule set): it
    returns the first failing rule as a FieldError, or None.
    """

    def __init__(self, register_defaults: bool = True):
        self._validators: Dict[str, List[ValidationStrategy]] = {}
        self._required = RequiredValidator()
        if register_defaults:
            self._register_default_validators()

    def _register_default_validators(self):
        """Register the telehealth registration and booking rules."""
        phone = PhoneValidator()

        # Personal info
        self.register_validator('dateOfBirth', DateValidator(max_date=date.today))
        self.register_validator('gender', ChoiceValidator(GENDER_OPTIONS))
        self.register_validator('role', RoleValidator())

        # Patient
        self.register_validator('emergencyContactPhone', phone)
        self.register_validator('emergencyContactRelationship', ChoiceValidator(RELATIONSHIP_OPTIONS))

        # Doctor
        self.register_validator('specialization', ChoiceValidator(SPECIALIZATION_OPTIONS))
        self.register_validator('yearsExperience', NumberValidator(minimum=0, integer=True))
        self.register_validator('licenseExpiryDate', DateValidator())
        self.register_validator('consultationFee', NumberValidator(minimum=0))

        # Pharmacist
        self.register_validator('pharmacyPhone', phone)
        self.register_validator('weekdayHours', ChoiceValidator(WEEKDAY_HOURS_OPTIONS))
        self.register_validator('weekendHours', ChoiceValidator(WEEKEND_HOURS_OPTIONS))

        # Verification
        self.register_validator('email', PatternValidator(EMAIL_PATTERN, re.IGNORECASE))
        self.register_validator('phoneNumber', phone)
        self.register_validator('password', MinLengthValidator(Config.PASSWORD_MIN_LENGTH))

        # Booking
        self.register_validator('appointmentType', ChoiceValidator(APPOINTMENT_TYPE_OPTIONS))
        self.register_validator('date', DateValidator(min_date=date.today))
        self.register_validator('time', TimeValidator())

    def register_validator(self, field_name: str, *validators: ValidationStrategy):
        """
        Append validation strategies to a field's rule list.

        Args:
            field_name: Form field name (e.g., 'email', 'password')
            validators: Strategies run in registration order
        """
        self._validators.setdefault(field_name, []).extend(validators)

    def get_validators(self, field_name: str) -> List[ValidationStrategy]:
        return list(self._validators.get(field_name, []))

    def get_registered_fields(self) -> List[str]:
        return list(self._validators.keys())

    def get_label(self, field_name: str) -> str:
        """Human-readable label for a field."""
        key = f"field.{field_name}"
        return tr(key) if has_translation(key) else field_name

    def validate(self, field_name: str, value: Any, required: bool = True) -> Optional[FieldError]:
        """
        Validate one field value.

        Args:
            field_name: Form field name
            value: Current value
            required: Whether a blank value is an error

        Returns:
            FieldError for the first failing rule, or None if valid
        """
        if required:
            if self._required.validate(value) is not None:
                return self._build_error(field_name, ErrorKind.REQUIRED, self._required)
        elif is_blank(value):
            return None

        for validator in self._validators.get(field_name, []):
            kind = validator.validate(value)
            if kind is not None:
                return self._build_error(field_name, kind, validator)
        return None

    def is_valid(self, field_name: str, value: Any, required: bool = True) -> bool:
        return self.validate(field_name, value, required) is None

    def _build_error(self, field_name: str, kind: ErrorKind, validator: ValidationStrategy) -> FieldError:
        params = {"label": self.get_label(field_name)}
        params.update(validator.message_params())

        specific_key = f"validation.{kind.value}.{field_name}"
        key = specific_key if has_translation(specific_key) else f"validation.{kind.value}"
        return FieldError(field=field_name, kind=kind, message=tr(key, **params))


_default_factory: Optional[ValidationFactory] = None


def get_validation_factory() -> ValidationFactory:
    """Shared factory with the default rule set."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ValidationFactory()
    return _default_factory


def validate(field_name: str, value: Any, required: bool = True) -> Optional[FieldError]:
    """Validate one field against the default rule set."""
    return get_validation_factory().validate(field_name, value, required)
