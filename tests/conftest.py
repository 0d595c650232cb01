# -*- coding: utf-8 -*-
"""
Shared test configuration.

Tests run headless: Qt uses the offscreen platform and log files go to a
temporary directory.
"""
import os
import sys
import tempfile
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("TELEHEALTH_LOGS_DIR", tempfile.mkdtemp(prefix="telehealth-logs-"))

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from unittest.mock import Mock

from services.api_client import TelehealthApiClient


@pytest.fixture
def personal_info():
    """Valid Personal Info values for a patient."""
    return {
        "fullName": "Jane Doe",
        "dateOfBirth": "1990-05-14",
        "gender": "Female",
        "role": "Patient",
        "streetAddress": "12 Main Street",
        "city": "Springfield",
    }


@pytest.fixture
def patient_details():
    return {
        "emergencyContactName": "John Doe",
        "emergencyContactPhone": "+1 555 123 4567",
        "emergencyContactRelationship": "Spouse",
        "insuranceProvider": "Acme Health",
        "policyNumber": "POL-12345",
    }


@pytest.fixture
def doctor_details():
    return {
        "medicalLicenseNumber": "MD-998877",
        "issuingAuthority": "State Medical Board",
        "specialization": "Cardiology",
        "yearsExperience": "12",
        "hospitalName": "General Hospital",
        "hospitalAddress": "1 Hospital Road",
        "accountHolder": "Dr. Jane Doe",
        "bankName": "First Bank",
        "accountNumber": "000123456789",
    }


@pytest.fixture
def pharmacist_details():
    return {
        "pharmacyLicenseId": "PH-4455",
        "pharmacyName": "Corner Pharmacy",
        "pharmacyAddress": "5 Market Square",
        "pharmacyPhone": "(555) 987-6543",
        "weekdayHours": "9AM-6PM",
        "weekendHours": "Closed",
    }


@pytest.fixture
def verification():
    return {
        "email": "jane.doe@example.com",
        "password": "s3cure-passw0rd",
    }


@pytest.fixture
def booking_values():
    return {
        "doctorId": "doc-42",
        "appointmentType": "Video Call",
        "date": "2999-01-15",
        "time": "10:30",
    }


@pytest.fixture
def api_client():
    """API client double; no HTTP traffic."""
    client = Mock(spec=TelehealthApiClient)
    client.is_authenticated.return_value = True
    return client
