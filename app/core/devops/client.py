"""Low-level HTTP client for the DevOps API.

Executes one request/response cycle per call and classifies the outcome.
There is no authentication, retry or caching at this layer.
"""
from __future__ import annotations
import math
import os
from typing import Optional
from urllib.parse import urlparse

import requests

from .exceptions import ConfigurationError, NotFoundError, RemoteError, TransportError

REQUEST_TIMEOUT = 10
ENDPOINT_ENV_VAR = "DEVOPS_ENDPOINT"


class DevOpsClient:
    """HTTP client for the DevOps API.

    Features:
    - Bounded timeout per request (no retry)
    - Whole body read before the status is classified
    - Centralized error handling (2xx succeeds, anything else raises)

    The only state is the base URL and timeout, both fixed at construction,
    so one instance can be shared between threads.

    Usage:
        client = DevOpsClient("http://localhost:8080")
        body = client.get("/engineers")
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """Initialize DevOps client.

        Args:
            base_url: DevOps API base URL (defaults to DEVOPS_ENDPOINT env var)
            timeout: Request timeout in seconds (default: REQUEST_TIMEOUT)

        Raises:
            ConfigurationError: If no usable endpoint is available
        """
        if base_url is None:
            base_url = os.environ.get(ENDPOINT_ENV_VAR, "")
        endpoint = base_url.strip()
        if not endpoint:
            raise ConfigurationError(
                "Missing DevOps API endpoint. Pass an endpoint explicitly "
                f"or set the {ENDPOINT_ENV_VAR} environment variable."
            )
        parsed = urlparse(endpoint)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(f"Invalid DevOps API endpoint '{endpoint}': expected an http(s) URL")
        if timeout is not None and (not math.isfinite(timeout) or timeout <= 0):
            raise ConfigurationError(f"Invalid timeout {timeout!r}: must be a positive finite number")

        self._base_url = endpoint.rstrip("/")
        self._timeout = timeout if timeout is not None else REQUEST_TIMEOUT

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def url(self, path: str) -> str:
        """Build full URL from an API path such as "/engineers/abc"."""
        return f"{self._base_url}{path}"

    def execute(self, method: str, url: str, body: Optional[bytes] = None) -> bytes:
        """Issue a single HTTP request and return the raw response body.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            url: Absolute URL
            body: Encoded JSON payload, if any

        Returns:
            Response body bytes for any status in [200, 300)

        Raises:
            TransportError: No response was obtained
            NotFoundError: Response status was 404
            RemoteError: Any other status outside [200, 300)
        """
        headers = {"Accept": "application/json"}
        if body is not None:
            headers["Content-Type"] = "application/json"

        try:
            resp = requests.request(method, url, data=body, headers=headers, timeout=self._timeout)
            # .content drains the stream so status and payload are inspected together
            content = resp.content
        except requests.RequestException as exc:
            raise TransportError(exc, url) from exc

        self._handle_error(resp, content, url)
        return content

    def get(self, path: str) -> bytes:
        """Execute GET request."""
        return self.execute("GET", self.url(path))

    def post(self, path: str, body: Optional[bytes] = None) -> bytes:
        """Execute POST request."""
        return self.execute("POST", self.url(path), body)

    def put(self, path: str, body: Optional[bytes] = None) -> bytes:
        """Execute PUT request."""
        return self.execute("PUT", self.url(path), body)

    def delete(self, path: str) -> bytes:
        """Execute DELETE request."""
        return self.execute("DELETE", self.url(path))

    def _handle_error(self, resp: requests.Response, content: bytes, url: str) -> None:
        """Centralized error handling for HTTP responses.

        Raises:
            NotFoundError: On 404
            RemoteError: On any other status outside [200, 300)
        """
        status = resp.status_code
        if 200 <= status < 300:
            return
        text = content.decode("utf-8", errors="replace") if content else ""
        if status == 404:
            raise NotFoundError(status, text, url)
        raise RemoteError(status, text, url)


def new_client(endpoint: Optional[str] = None, timeout: Optional[float] = None) -> DevOpsClient:
    """Create a configured DevOpsClient.

    The endpoint falls back to DEVOPS_ENDPOINT when not given.
    """
    return DevOpsClient(endpoint, timeout)
