"""
HTTP request pipeline shared by every PayArk resource.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import requests

from .config import DEFAULT_BASE_URL, PayArkConfig, stringify
from .errors import ErrorCode, PayArkError, map_status_to_code

__all__ = [
    "SDK_VERSION",
    "USER_AGENT",
    "build_headers",
    "build_url",
    "request",
]

SDK_VERSION = "0.1.0"
USER_AGENT = f"payark-sdk-python/{SDK_VERSION}"


def build_url(
    config: PayArkConfig,
    path: str,
    query: Optional[Mapping[str, Any]] = None,
) -> str:
    base_url = (config.base_url or DEFAULT_BASE_URL).rstrip("/")
    url = f"{base_url}{path}"
    if query:
        params = [(key, stringify(value)) for key, value in query.items() if value is not None]
        if params:
            url = f"{url}?{urlencode(params)}"
    return url


def build_headers(
    config: PayArkConfig,
    extra: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    headers = {
        "Authorization": f"Bearer {config.api_key}",
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }
    if extra:
        headers.update(extra)
    if config.sandbox:
        headers["x-sandbox-mode"] = "true"
    return headers


def _serialize_body(body: Any) -> str:
    try:
        return json.dumps(body, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise PayArkError(
            f"Invalid request body: {exc}",
            status_code=400,
            code=ErrorCode.INVALID_REQUEST_ERROR,
        ) from exc


def _error_body(response: requests.Response) -> Optional[Dict[str, Any]]:
    # Error bodies are best effort; empty or non-JSON bodies are not an error.
    try:
        payload = response.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None


def _error_message(error_body: Optional[Dict[str, Any]]) -> Optional[str]:
    if not error_body:
        return None
    error = error_body.get("error")
    if isinstance(error, dict):
        error = error.get("message")
    return error if isinstance(error, str) and error else None


def request(
    method: str,
    path: str,
    config: PayArkConfig,
    *,
    query: Optional[Mapping[str, Any]] = None,
    body: Any = None,
    headers: Optional[Mapping[str, str]] = None,
    session: Optional[requests.Session] = None,
) -> Any:
    """
    Execute a single API call and return the parsed JSON body.

    Raises :class:`PayArkError` for transport failures, non-2xx responses and
    request bodies that cannot be serialized. A ``204`` response yields ``{}``.
    """
    url = build_url(config, path, query)
    request_headers = build_headers(config, headers)
    data = _serialize_body(body) if body is not None else None

    http = session if session is not None else requests.Session()
    logging.debug("PayArk request %s %s", method, url)
    try:
        response = http.request(
            method,
            url,
            headers=request_headers,
            data=data,
            timeout=config.timeout_seconds,
        )
    except requests.RequestException as exc:
        logging.warning("PayArk request %s %s failed: %s", method, url, exc)
        raise PayArkError(
            f"Network error: {exc}",
            status_code=0,
            code=ErrorCode.CONNECTION_ERROR,
        ) from exc
    finally:
        if session is None:
            http.close()

    status = response.status_code
    if 200 <= status < 300:
        if status == 204:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise PayArkError(
                f"Failed to parse response: {exc}",
                status_code=status,
                code=ErrorCode.API_ERROR,
            ) from exc

    error_body = _error_body(response)
    server_message = _error_message(error_body) or f"Request failed with status {status}"

    logging.warning("PayArk responded with %s for %s %s", status, method, url)
    raise PayArkError(
        server_message,
        status_code=status,
        code=map_status_to_code(status),
        raw=error_body,
    )
