# -*- coding: utf-8 -*-
"""
Registration wizard steps: Personal Info, Role Details, Verification.

Role Details branches on the role chosen in Personal Info.
"""

from typing import Any, Mapping

from models.wizard import Role, StepDescriptor
from services.translation_manager import tr
from services.validation.validation_factory import CUSTOM_HOURS
from .step_resolver import RoleBranch, StepContentResolver

ROLE_FIELD = "role"

STEP_PERSONAL_INFO = 0
STEP_ROLE_DETAILS = 1
STEP_VERIFICATION = 2

PERSONAL_INFO_REQUIRED = ("fullName", "dateOfBirth", "gender", "role", "streetAddress")
PERSONAL_INFO_OPTIONAL = ("city", "stateProvince", "zipCode", "country")

PATIENT_REQUIRED = (
    "emergencyContactName",
    "emergencyContactPhone",
    "emergencyContactRelationship",
    "insuranceProvider",
    "policyNumber",
)
PATIENT_OPTIONAL = ("groupNumber",)

DOCTOR_REQUIRED = (
    "medicalLicenseNumber",
    "issuingAuthority",
    "specialization",
    "yearsExperience",
    "hospitalName",
    "hospitalAddress",
    "accountHolder",
    "bankName",
    "accountNumber",
)
DOCTOR_OPTIONAL = ("licenseExpiryDate", "practiceLocation", "consultationFee", "routingNumber")

PHARMACIST_REQUIRED = (
    "pharmacyLicenseId",
    "pharmacyName",
    "pharmacyAddress",
    "pharmacyPhone",
    "weekdayHours",
    "weekendHours",
)
PHARMACIST_OPTIONAL = ("issuingAuthority", "yearsExperience", "bankName", "accountNumber", "routingNumber")

VERIFICATION_REQUIRED = ("email", "password")
VERIFICATION_OPTIONAL = ("phoneNumber",)


def needs_custom_hours(form_state: Mapping[str, Any]) -> bool:
    """Custom hours must be described when either schedule is "Custom"."""
    return (
        form_state.get("weekdayHours") == CUSTOM_HOURS
        or form_state.get("weekendHours") == CUSTOM_HOURS
    )


def build_registration_resolver() -> StepContentResolver:
    """Create the step resolver for the registration wizard."""
    role_details = tr("step.role_details")

    return StepContentResolver([
        StepDescriptor(
            step_id="personal_info",
            title=tr("step.personal_info"),
            required_fields=PERSONAL_INFO_REQUIRED,
            optional_fields=PERSONAL_INFO_OPTIONAL,
        ),
        RoleBranch(
            step_id="role_details",
            title=role_details,
            variants={
                Role.PATIENT: StepDescriptor(
                    step_id="patient_details",
                    title=role_details,
                    required_fields=PATIENT_REQUIRED,
                    optional_fields=PATIENT_OPTIONAL,
                ),
                Role.DOCTOR: StepDescriptor(
                    step_id="doctor_details",
                    title=role_details,
                    required_fields=DOCTOR_REQUIRED,
                    optional_fields=DOCTOR_OPTIONAL,
                ),
                Role.PHARMACIST: StepDescriptor(
                    step_id="pharmacist_details",
                    title=role_details,
                    required_fields=PHARMACIST_REQUIRED,
                    optional_fields=PHARMACIST_OPTIONAL,
                    conditional_fields=(("customHours", needs_custom_hours),),
                ),
            },
        ),
        StepDescriptor(
            step_id="verification",
            title=tr("step.verification"),
            required_fields=VERIFICATION_REQUIRED,
            optional_fields=VERIFICATION_OPTIONAL,
        ),
    ])
