# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""

from typing import Any, Dict, Optional


class ApiException(Exception):
    """Exception raised for API errors."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message

    @property
    def server_message(self) -> Optional[str]:
        """The ``message`` field of the JSON error body, if any."""
        message = self.response_data.get("message") if isinstance(self.response_data, dict) else None
        return message if isinstance(message, str) and message.strip() else None


class ValidationException(Exception):
    """Exception raised when form data is handed over without passing validation."""

    def __init__(self, message: str, field: str = None,
                 errors: Dict[str, Any] = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or {}
        self.context = context


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class SubmissionError(Exception):
    """
    Base class for failures of the final wizard submission.

    Every submission error leaves the session editable so the user can
    correct their data and retry.
    """

    def __init__(self, message: str = "", context: str = None):
        super().__init__(message)
        self.message = message
        self.context = context


class ServerRejectedError(SubmissionError):
    """The backend answered and refused the submission."""

    def __init__(self, message: str = "", status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message, context)
        self.status_code = status_code
        self.response_data = response_data or {}


class DuplicateSubmissionError(ServerRejectedError):
    """The backend reported a conflict (e.g. email already registered)."""


class NetworkUnreachableError(SubmissionError):
    """The backend could not be reached or did not answer in time."""

    def __init__(self, message: str = "", original_error: Exception = None,
                 context: str = None):
        super().__init__(message, context)
        self.original_error = original_error


class AuthenticationRequiredError(SubmissionError):
    """The submission needs a signed-in user and no auth token is available."""
