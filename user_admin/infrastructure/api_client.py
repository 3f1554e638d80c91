"""
HTTP client for the remote user-administration API.

Every call returns an ApiResponse (decoded JSON body plus headers) or raises
ApiError with a message fit for showing to the user.
"""

from __future__ import annotations

import json
from typing import Any, Mapping
from urllib.parse import quote

import requests

from user_admin.domains.user_management.models import ApiResponse, User
from user_admin.utils.config import api_base_url, api_timeout, api_token, app_name
from user_admin.utils.logger import get_logger

logger = get_logger()

USERS_PATH = "/users"
AUTHORITIES_PATH = "/users/authorities"

_MAX_ERROR_BODY_CHARS = 500


class ApiError(RuntimeError):
    """Raised for any failed call: transport error, non-2xx status or bad JSON."""

    def __init__(self, message: str, status_code: int | None = None, original: Exception | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.original = original


def _server_detail(response: requests.Response | None) -> str:
    """Pull a readable reason out of an error response, if it has one."""
    if response is None:
        return ""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("detail", "title", "message", "error"):
            val = body.get(key)
            if isinstance(val, str) and val.strip():
                return val.strip()
    try:
        text = (response.text or "").strip()
    except Exception:
        text = ""
    return text[:_MAX_ERROR_BODY_CHARS]


def _describe_failure(e: requests.RequestException, url: str, timeout: float) -> tuple[str, int | None]:
    if isinstance(e, requests.exceptions.HTTPError):
        response = e.response
        status = getattr(response, "status_code", None)
        detail = _server_detail(response)
        msg = f"HTTP error {status}" if status else "HTTP error"
        return (f"{msg}: {detail}" if detail else msg), status
    if isinstance(e, requests.exceptions.ConnectionError):
        return f"Connection failed: could not reach the user API at {url}.", None
    if isinstance(e, requests.exceptions.Timeout):
        return f"Request timed out after {timeout:g} seconds.", None
    return f"{type(e).__name__}: {e}", None


def alert_from_headers(headers: Mapping[str, Any] | None, app: str | None = None) -> str | None:
    """
    Return the server's alert message from an X-<app>-alert header, if present.

    Args:
        headers: Response headers.
        app: Application name in the header prefix. Empty or None matches any
            header ending in "-alert".
    """
    if not headers:
        return None
    app = app if app is not None else app_name()
    wanted = f"x-{app.lower()}-alert" if app else None
    for key, value in headers.items():
        k = str(key).lower()
        if (wanted and k == wanted) or (not wanted and k.startswith("x-") and k.endswith("-alert")):
            return str(value) if value else None
    return None


class UserAdminApiClient:
    """
    requests-based wrapper around the user-admin endpoints.

    Configuration defaults come from the environment (see utils.config); tests
    pass a mock session.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        token: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or api_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else api_timeout()
        self._token = token if token is not None else api_token()
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> ApiResponse:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, url, dict(params) if params else {})
        try:
            r = self._session.request(
                method,
                url,
                params=params or None,
                json=body,
                headers=self._headers(),
                timeout=self.timeout,
            )
            r.raise_for_status()
        except requests.RequestException as e:
            message, status = _describe_failure(e, url, self.timeout)
            logger.warning("%s %s failed: %s", method, url, message)
            raise ApiError(message, status_code=status, original=e) from e

        data: Any = None
        if r.content:
            try:
                data = r.json()
            except (json.JSONDecodeError, ValueError) as e:
                logger.warning("%s %s returned invalid JSON: %s", method, url, e)
                raise ApiError(f"Invalid JSON in response from {url}", status_code=r.status_code, original=e) from e
        logger.info("%s %s -> %s", method, url, r.status_code)
        return ApiResponse(data=data, headers=r.headers)

    def list_users(self, params: Mapping[str, Any] | None = None) -> ApiResponse:
        return self._request("GET", USERS_PATH, params=params)

    def get_user(self, login: str) -> ApiResponse:
        return self._request("GET", f"{USERS_PATH}/{quote(login, safe='')}")

    def list_authorities(self) -> ApiResponse:
        return self._request("GET", AUTHORITIES_PATH)

    def create_user(self, user: User) -> ApiResponse:
        return self._request("POST", USERS_PATH, body=user)

    def update_user(self, user: User) -> ApiResponse:
        return self._request("PUT", USERS_PATH, body=user)

    def delete_user(self, login: str) -> ApiResponse:
        return self._request("DELETE", f"{USERS_PATH}/{quote(login, safe='')}")

    def close(self) -> None:
        self._session.close()


__all__ = ["ApiError", "UserAdminApiClient", "alert_from_headers"]
