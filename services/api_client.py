# -*- coding: utf-8 -*-
"""
Telehealth API Client
=====================

JSON-over-HTTP client for the telehealth backend. The wizard uses it for
its single outbound call: registering a user or requesting an appointment.
"""

import json
import requests
import urllib3
from typing import Any, Callable, Dict, Optional
from dataclasses import dataclass

from utils.logger import get_logger, redact
from services.exceptions import ApiException, NetworkException

logger = get_logger(__name__)

# Returns the current bearer token, or None when nobody is signed in
TokenProvider = Callable[[], Optional[str]]


@dataclass
class ApiConfig:
    """
    API connection settings.

    Unset fields are loaded from Config, which reads the .env file:
        API_BASE_URL=http://localhost:5000/api
        API_TIMEOUT=30
        API_VERIFY_SSL=true
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        if self.base_url is None or self.timeout is None or self.verify_ssl is None:
            from app.config import Config

            if self.base_url is None:
                self.base_url = Config.API_BASE_URL
            if self.timeout is None:
                self.timeout = Config.API_TIMEOUT
            if self.verify_ssl is None:
                self.verify_ssl = Config.API_VERIFY_SSL


class TelehealthApiClient:
    """
    Client for the telehealth REST backend.

    The auth token is never stored here: it is read on every request from
    ``token_provider`` (the application's session storage).

    Usage:
        client = TelehealthApiClient(ApiConfig(base_url="http://localhost:5000/api"))
        client.register_user({"name": "Jane Doe", ...})
    """

    def __init__(self, config: Optional[ApiConfig] = None,
                 token_provider: Optional[TokenProvider] = None):
        from app.config import Config

        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')
        self._token_provider = token_provider
        self._user_agent = Config.API_USER_AGENT
        self._register_endpoint = Config.REGISTER_ENDPOINT
        self._appointments_endpoint = Config.APPOINTMENTS_ENDPOINT

        if not self.config.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
            logger.warning(f"SSL verification disabled for {self.base_url}")

    # ==================== Authentication ====================

    def set_token_provider(self, token_provider: Optional[TokenProvider]):
        """Replace the callable used to look up the bearer token."""
        self._token_provider = token_provider

    def get_access_token(self) -> Optional[str]:
        """Current bearer token from the token provider, if any."""
        if self._token_provider is None:
            return None
        token = self._token_provider()
        return token or None

    def is_authenticated(self) -> bool:
        return self.get_access_token() is not None

    def _headers(self, authenticated: bool) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self._user_agent,
        }
        if authenticated:
            token = self.get_access_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    # ==================== Transport ====================

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None,
        authenticated: bool = False
    ) -> Any:
        """
        Execute an HTTP request and decode the JSON answer.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (e.g., "/auth/register")
            json_data: JSON payload
            params: Query parameters
            authenticated: Attach the bearer token when one is available

        Returns:
            Decoded response body (None for an empty body)

        Raises:
            ApiException: the server answered with an HTTP error status
            NetworkException: the server could not be reached
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.debug(f"[API REQ] Params: {params}")
        if json_data:
            logger.debug(
                f"[API REQ] Body: {json.dumps(redact(json_data), ensure_ascii=False, default=str)}"
            )

        try:
            response = requests.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(authenticated),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()

            result = None
            if response.text:
                try:
                    result = response.json()
                except ValueError as e:
                    logger.error(f"Invalid JSON from {endpoint}: {e}")
                    raise ApiException(
                        message=f"Invalid JSON response: {e}",
                        status_code=response.status_code,
                        context=endpoint
                    )

            logger.info(f"[API RES] {response.status_code} {endpoint}")
            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data if isinstance(response_data, dict) else {},
                context=endpoint
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                context=endpoint
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                context=endpoint
            )

    # ==================== Registration ====================

    def register_user(self, user_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Register a new patient, doctor or pharmacist account.

        Args:
            user_data: Registration payload (common + role-specific fields)

        Returns:
            Response body ({success, data?, message?})
        """
        return self._request("POST", self._register_endpoint, json_data=user_data) or {}

    # ==================== Appointments ====================

    def create_appointment(self, appointment_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Request an appointment for the signed-in patient.

        Args:
            appointment_data: {doctorId, date, time, type, reason}

        Returns:
            Response body ({success, data?, message?})
        """
        return self._request(
            "POST",
            self._appointments_endpoint,
            json_data=appointment_data,
            authenticated=True
        ) or {}
