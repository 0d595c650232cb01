# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# Form rules
_PASSWORD_MIN_LENGTH = int(os.getenv("PASSWORD_MIN_LENGTH", "8"))

# Localization
_DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")

# Logging
_LOGS_DIR = os.getenv("TELEHEALTH_LOGS_DIR", None)


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Telehealth"
    APP_TITLE: str = "Telehealth Patient & Provider Portal"
    VERSION: str = "1.0.0"

    # HTTP API Backend Settings
    # Reads from .env file (API_BASE_URL, API_TIMEOUT, API_VERIFY_SSL)
    # If .env not found, uses default (http://localhost:5000/api)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL
    API_USER_AGENT: str = "Telehealth-Client/1.0"

    # Endpoints
    REGISTER_ENDPOINT: str = "/auth/register"
    APPOINTMENTS_ENDPOINT: str = "/appointments"

    # Form validation
    PASSWORD_MIN_LENGTH: int = _PASSWORD_MIN_LENGTH
    DEFAULT_APPOINTMENT_REASON: str = "General consultation"

    # Localization
    DEFAULT_LANGUAGE: str = _DEFAULT_LANGUAGE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
