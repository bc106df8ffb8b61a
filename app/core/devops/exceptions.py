"""DevOps API exceptions for error handling."""
from __future__ import annotations
from typing import Any, Dict, Optional

# Raw bodies are truncated in to_dict() so diagnostics stay readable
_BODY_EXCERPT = 512


class DevOpsError(Exception):
    """Base exception for all DevOps API operations."""

    kind = "devops_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Structured form for presentation layers."""
        return {"kind": self.kind, "message": self.message}


class ConfigurationError(DevOpsError):
    """Client cannot be built - endpoint missing or invalid."""

    kind = "configuration"


class TransportError(DevOpsError):
    """No response obtained (connection refused, DNS failure, timeout).

    Attributes:
        cause: Underlying exception raised by the HTTP library
        endpoint: URL that was being called
    """

    kind = "transport"

    def __init__(self, cause: BaseException, endpoint: str):
        self.cause = cause
        self.endpoint = endpoint
        super().__init__(f"{endpoint}: {cause}")


class RemoteError(DevOpsError):
    """Response obtained with a status outside 2xx.

    Attributes:
        status_code: HTTP status code
        body: Raw response body text
        endpoint: API endpoint that failed
    """

    kind = "remote"

    def __init__(self, status_code: int, body: str, endpoint: str):
        self.status_code = status_code
        self.body = body
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {body}")

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["status"] = self.status_code
        if self.body:
            result["body"] = self.body[:_BODY_EXCERPT]
        return result


class NotFoundError(RemoteError):
    """Resource does not exist (HTTP 404, or no match in a collection scan)."""

    kind = "not_found"

    def __init__(self, status_code: int = 404, body: str = "", endpoint: str = ""):
        super().__init__(status_code, body, endpoint)


class DecodeError(DevOpsError):
    """Response body is malformed or misses fields required by the entity shape."""

    kind = "decode"

    def __init__(self, message: str, body: Optional[bytes] = None):
        self.body = body
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.body:
            result["body"] = self.body[:_BODY_EXCERPT].decode("utf-8", errors="replace")
        return result


class EncodeError(DevOpsError):
    """Entity could not be serialized to JSON."""

    kind = "encode"


class InvalidRequestError(DevOpsError, ValueError):
    """Request rejected before it is sent (e.g. empty resource id)."""

    kind = "invalid_request"
