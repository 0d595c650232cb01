# -*- coding: utf-8 -*-
"""
Submission Adapter - base class for sending a finished wizard to the backend.

Subclasses map the form state to the endpoint's payload and call the API
client; this class turns the answer into a Confirmation or a typed
SubmissionError. The adapter never touches the wizard session.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from models.wizard import Confirmation
from services.api_client import TelehealthApiClient
from services.exceptions import (
    ApiException,
    AuthenticationRequiredError,
    DuplicateSubmissionError,
    NetworkException,
    NetworkUnreachableError,
    ServerRejectedError,
)
from services.translation_manager import tr
from utils.helpers import is_blank
from utils.logger import get_logger

logger = get_logger(__name__)

_DUPLICATE_PATTERN = re.compile(r"already (registered|exists)", re.IGNORECASE)


class SubmissionAdapter(ABC):
    """
    Maps a FormState to an API call and its response to a result.

    Subclasses implement:
    - build_payload(): form state -> request body
    - send(): perform the HTTP call through the API client
    """

    # Translation key of the message used when the server sends none
    success_message_key = "submission.unexpected"
    requires_auth = False

    def __init__(self, api_client: Optional[TelehealthApiClient] = None):
        self.api_client = api_client or TelehealthApiClient()

    @abstractmethod
    def build_payload(self, form_state: Mapping[str, Any]) -> Dict[str, Any]:
        """Map form values to the request body."""
        pass

    @abstractmethod
    def send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Send the payload and return the decoded response body."""
        pass

    def submit(self, form_state: Mapping[str, Any]) -> Confirmation:
        """
        Submit a completed wizard.

        Args:
            form_state: Final form values

        Returns:
            Confirmation of the accepted submission

        Raises:
            AuthenticationRequiredError: sign-in needed and no token available
            ServerRejectedError: the backend refused the data
            DuplicateSubmissionError: the backend reported a conflict
            NetworkUnreachableError: the backend could not be reached
        """
        name = self.__class__.__name__

        if self.requires_auth and not self.api_client.is_authenticated():
            raise AuthenticationRequiredError("No auth token available", context=name)

        payload = self.build_payload(form_state)
        logger.info(f"{name}: submitting {len(payload)} fields")

        try:
            response = self.send(payload)
        except ApiException as e:
            raise self._rejection(
                e.server_message or "",
                status_code=e.status_code,
                response_data=e.response_data
            ) from e
        except NetworkException as e:
            raise NetworkUnreachableError(e.message, original_error=e.original_error, context=name) from e

        return self._to_confirmation(response)

    def extract_reference(self, data: Dict[str, Any]) -> Optional[str]:
        """Pull the server-side identifier out of the response ``data``."""
        for key in ("id", "_id"):
            if data.get(key):
                return str(data[key])
        return None

    def _to_confirmation(self, response: Any) -> Confirmation:
        body = response if isinstance(response, dict) else {}
        message = body.get("message") if isinstance(body.get("message"), str) else ""

        if body.get("success") is False or body.get("status") == "error":
            raise self._rejection(message, response_data=body)

        data = body.get("data") if isinstance(body.get("data"), dict) else {}
        confirmation = Confirmation(
            reference=self.extract_reference(data),
            message=message or tr(self.success_message_key),
            data=data
        )
        logger.info(f"{self.__class__.__name__}: accepted (reference={confirmation.reference})")
        return confirmation

    def _rejection(self, message: str, status_code: int = None,
                   response_data: dict = None) -> ServerRejectedError:
        if status_code == 409 or (message and _DUPLICATE_PATTERN.search(message)):
            error_class = DuplicateSubmissionError
        else:
            error_class = ServerRejectedError
        return error_class(
            message,
            status_code=status_code,
            response_data=response_data,
            context=self.__class__.__name__
        )

    @staticmethod
    def _clean(value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    def _copy_present(self, payload: Dict[str, Any], form_state: Mapping[str, Any],
                      mapping: Mapping[str, str]):
        """Copy non-blank form values into ``payload`` under their API names."""
        for api_key, form_key in mapping.items():
            value = form_state.get(form_key)
            if not is_blank(value):
                payload[api_key] = self._clean(value)
