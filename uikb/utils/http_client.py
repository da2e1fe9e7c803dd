"""
HTTP Client

Thin `requests` wrapper used to talk to the hosted model API. Transport
failures become LLM connection/timeout errors; non-2xx responses become
HTTPError carrying the upstream body so callers can report it verbatim.

Usage:
    from uikb.utils.http_client import http_json_get, HTTPError

    try:
        data = http_json_get(url, params={"pageSize": 100}, timeout=15)
    except HTTPError as e:
        print(e.status_code, e.response_text)
"""

from typing import Any, Optional

import requests

from uikb.configs.constants import get_timeout
from uikb.exceptions import LLMConnectionError, LLMTimeoutError

DEFAULT_TIMEOUT = get_timeout("http_default")

# Longest upstream error body kept on HTTPError
MAX_ERROR_TEXT = 4000


class HTTPError(Exception):
    """Upstream answered with an error status (or unparseable JSON)."""

    def __init__(self, message: str, status_code: Optional[int] = None, response_text: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


def _send(method: str, url: str, timeout: float, raise_for_status: bool, **kwargs: Any) -> requests.Response:
    try:
        response = requests.request(method, url, timeout=timeout, **kwargs)
    except requests.exceptions.ConnectionError as e:
        raise LLMConnectionError(f"Connection failed: {url}") from e
    except requests.exceptions.Timeout as e:
        raise LLMTimeoutError(f"Request timed out: {url}") from e

    if raise_for_status and not response.ok:
        body = response.text or None
        raise HTTPError(
            f"HTTP {response.status_code}: {url}",
            status_code=response.status_code,
            response_text=body[:MAX_ERROR_TEXT] if body else None,
        )
    return response


def _parse_json(response: requests.Response, url: str) -> dict[str, Any]:
    try:
        return response.json()
    except ValueError as e:
        raise HTTPError(f"Invalid JSON response from {url}", status_code=response.status_code) from e


def http_get(
    url: str,
    params: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
    raise_for_status: bool = True,
) -> requests.Response:
    """GET `url`. Raises HTTPError on 4xx/5xx unless `raise_for_status` is off."""
    return _send("GET", url, timeout, raise_for_status, params=params, headers=headers)


def http_post(
    url: str,
    json: Optional[dict[str, Any]] = None,
    data: bytes | str | None = None,
    headers: Optional[dict[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
    raise_for_status: bool = True,
) -> requests.Response:
    """POST a JSON or raw body to `url`."""
    return _send("POST", url, timeout, raise_for_status, json=json, data=data, headers=headers)


def http_json_get(
    url: str,
    params: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """GET `url` and decode the JSON body."""
    return _parse_json(http_get(url, params=params, headers=headers, timeout=timeout), url)


def http_json_post(
    url: str,
    json: dict[str, Any],
    headers: Optional[dict[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """POST a JSON body to `url` and decode the JSON reply."""
    return _parse_json(http_post(url, json=json, headers=headers, timeout=timeout), url)
