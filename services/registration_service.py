# -*- coding: utf-8 -*-
"""
Registration Service - submits the registration wizard.

Builds the /auth/register payload from the collected form values: the
common account fields are always sent, role-specific fields only for the
selected role.
"""

import math
from typing import Any, Dict, Mapping, Optional

from models.wizard import Role
from services.exceptions import ValidationException
from services.submission_adapter import SubmissionAdapter
from services.wizard.registration_steps import ROLE_FIELD, needs_custom_hours
from utils.logger import get_logger

logger = get_logger(__name__)


# API key -> form field; sent even when empty
COMMON_FIELDS = {
    "name": "fullName",
    "email": "email",
    "password": "password",
    "dateOfBirth": "dateOfBirth",
    "gender": "gender",
    "streetAddress": "streetAddress",
    "city": "city",
    "stateProvince": "stateProvince",
    "zipCode": "zipCode",
    "country": "country",
    "phoneNumber": "phoneNumber",
}

# API key -> form field; sent only when filled in
ROLE_FIELDS = {
    Role.PATIENT: {
        "emergencyContactName": "emergencyContactName",
        "emergencyContactPhone": "emergencyContactPhone",
        "emergencyContactRelationship": "emergencyContactRelationship",
        "insuranceProvider": "insuranceProvider",
        "policyNumber": "policyNumber",
        "groupNumber": "groupNumber",
    },
    Role.DOCTOR: {
        "medicalLicenseNumber": "medicalLicenseNumber",
        "licenseExpiryDate": "licenseExpiryDate",
        "issuingAuthority": "issuingAuthority",
        "specialization": "specialization",
        "yearsExperience": "yearsExperience",
        "hospitalName": "hospitalName",
        "hospitalAffiliation": "hospitalName",
        "hospitalAddress": "hospitalAddress",
        "practiceLocation": "practiceLocation",
        "consultationFee": "consultationFee",
        "accountHolder": "accountHolder",
        "bankName": "bankName",
        "accountNumber": "accountNumber",
        "routingNumber": "routingNumber",
    },
    Role.PHARMACIST: {
        "licenseNumber": "pharmacyLicenseId",
        "issuingAuthority": "issuingAuthority",
        "yearsExperience": "yearsExperience",
        "pharmacyName": "pharmacyName",
        "pharmacyAddress": "pharmacyAddress",
        "pharmacyPhone": "pharmacyPhone",
        "weekdayHours": "weekdayHours",
        "weekendHours": "weekendHours",
        "bankName": "bankName",
        "accountNumber": "accountNumber",
        "routingNumber": "routingNumber",
    },
}

NUMERIC_FIELDS = {"yearsExperience": int, "consultationFee": float}


class RegistrationService(SubmissionAdapter):
    """Submits new patient, doctor and pharmacist accounts."""

    success_message_key = "submission.registration.success"

    def build_payload(self, form_state: Mapping[str, Any]) -> Dict[str, Any]:
        role = Role.from_value(form_state.get(ROLE_FIELD))
        if role is None:
            raise ValidationException(
                "A valid role is required to register",
                field=ROLE_FIELD,
                context="RegistrationService"
            )

        payload: Dict[str, Any] = {}
        for api_key, form_key in COMMON_FIELDS.items():
            value = form_state.get(form_key)
            payload[api_key] = "" if value is None else self._clean(value)
        payload["role"] = role.api_value

        self._copy_present(payload, form_state, ROLE_FIELDS[role])
        if role is Role.PHARMACIST and needs_custom_hours(form_state):
            self._copy_present(payload, form_state, {"customHours": "customHours"})

        for key, convert in NUMERIC_FIELDS.items():
            if key in payload:
                payload[key] = self._to_number(key, payload[key], convert)

        logger.debug(f"Registration payload built for role '{role.api_value}'")
        return payload

    def send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self.api_client.register_user(payload)

    def extract_reference(self, data: Dict[str, Any]) -> Optional[str]:
        user = data.get("user")
        if isinstance(user, dict):
            for key in ("id", "_id"):
                if user.get(key):
                    return str(user[key])
        return super().extract_reference(data)

    @staticmethod
    def _to_number(field_name: str, value: Any, convert) -> Any:
        if isinstance(value, bool):
            return value
        try:
            number = float(str(value).strip())
        except ValueError:
            return value
        if not math.isfinite(number):
            raise ValidationException(
                f"{field_name} must be a finite number",
                field=field_name,
                context="RegistrationService"
            )
        if convert is int:
            return int(number) if number.is_integer() else value
        return convert(number)
