# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

import requests

from services.translation_manager import tr
from services.exceptions import (
    ApiException,
    AuthenticationRequiredError,
    NetworkException,
    NetworkUnreachableError,
    ServerRejectedError,
    SubmissionError,
)
from utils.logger import get_logger

logger = get_logger(__name__)


def map_submission_error(error: SubmissionError) -> str:
    """Map a submission failure to the banner message shown on the final step.

    Server rejections show the server's own message verbatim; everything
    else gets a generic, retryable message. Technical details are logged.
    """
    if isinstance(error, ServerRejectedError):
        if error.status_code:
            logger.warning(f"Submission rejected ({error.status_code}): {error.message or '-'}")
        else:
            logger.warning(f"Submission rejected: {error.message or '-'}")
        if error.message and error.message.strip():
            return error.message
        return tr("submission.rejected")

    if isinstance(error, NetworkUnreachableError):
        logger.warning(f"Submission failed, backend unreachable: {error.original_error or error.message}")
        if _is_timeout(error.original_error or error.message):
            return tr("submission.timeout")
        return tr("submission.network")

    if isinstance(error, AuthenticationRequiredError):
        logger.warning("Submission refused: no authenticated user")
        return tr("submission.auth_required")

    logger.warning(f"Submission failed: {error}")
    return tr("submission.unexpected")


def map_exception(error: Exception) -> str:
    """Map any exception raised around a submission to a user-facing message."""
    if isinstance(error, SubmissionError):
        return map_submission_error(error)

    if isinstance(error, ApiException):
        return map_submission_error(
            ServerRejectedError(error.server_message or "", error.status_code, error.response_data)
        )

    if isinstance(error, NetworkException):
        return map_submission_error(NetworkUnreachableError(error.message, error.original_error))

    logger.error(f"Unexpected submission error: {error!r}")
    return tr("submission.unexpected")


def _is_timeout(error) -> bool:
    if isinstance(error, requests.exceptions.Timeout):
        return True
    msg = str(error) if error else ""
    return "timeout" in msg.lower() or "timed out" in msg.lower()
