# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured error hierarchy for the 3Commas client.

Only argument validation, exhausted rate-limit retries and network failures
are raised. Malformed bodies and unexpected statuses stay in the
:class:`~threecommas.core.results.ApiResponse` envelope, except in the typed
namespace helpers which raise :class:`HttpError`.
"""

from __future__ import annotations

import datetime as _dt
from typing import TYPE_CHECKING, Any, Dict, Optional

from ._error_codes import HTTP_429, TRANSIENT_STATUS_CODES, TRANSPORT_NETWORK_FAILURE, http_subcode

if TYPE_CHECKING:
    from .results import ApiResponse


class ThreeCommasError(Exception):
    """Base structured error for the 3Commas client."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(ThreeCommasError):
    """Raised for missing or malformed arguments, before any network access."""

    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details, source="client")


class HttpError(ThreeCommasError):
    def __init__(
        self,
        message: str,
        status_code: int,
        is_transient: bool = False,
        subcode: Optional[str] = None,
        endpoint: Optional[str] = None,
        body_excerpt: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = details or {}
        if endpoint is not None:
            d["endpoint"] = endpoint
        if body_excerpt is not None:
            d["body_excerpt"] = body_excerpt
        super().__init__(
            message,
            code="http_error",
            subcode=subcode,
            status_code=status_code,
            details=d,
            source="server",
            is_transient=is_transient,
        )


class RateLimitExhaustedError(ThreeCommasError):
    """Raised when the API keeps answering 429 after the configured number of attempts."""

    def __init__(self, message: str, *, attempts: int, retry_after: Optional[float] = None) -> None:
        d: Dict[str, Any] = {"attempts": attempts}
        if retry_after is not None:
            d["retry_after"] = retry_after
        super().__init__(
            message,
            code="rate_limit_exhausted",
            subcode=HTTP_429,
            status_code=429,
            details=d,
            source="server",
            is_transient=True,
        )
        self.attempts = attempts


class TransportError(ThreeCommasError):
    """Raised when the HTTP request itself fails (DNS, connection, timeout)."""

    def __init__(self, message: str, *, endpoint: Optional[str] = None, method: Optional[str] = None) -> None:
        d: Dict[str, Any] = {}
        if method is not None:
            d["method"] = method
        if endpoint is not None:
            d["endpoint"] = endpoint
        super().__init__(
            message,
            code="transport_error",
            subcode=TRANSPORT_NETWORK_FAILURE,
            details=d,
            source="client",
            is_transient=True,
        )


def raise_for_response(response: "ApiResponse", endpoint: Optional[str] = None) -> None:
    """
    Raise :class:`HttpError` unless ``response`` is a parsed 2xx envelope.

    :raises HttpError: With an ``http_<status>`` subcode for unexpected statuses,
        or the envelope's ``error`` message for malformed success bodies.
    """
    if response.ok:
        return
    body = response.data if isinstance(response.data, str) else None
    excerpt = body[:200] if body else None
    message = response.error or f"Unexpected status {response.status} from {endpoint}"
    raise HttpError(
        message,
        status_code=response.status,
        is_transient=response.status in TRANSIENT_STATUS_CODES,
        subcode=http_subcode(response.status),
        endpoint=endpoint,
        body_excerpt=excerpt,
    )


__all__ = [
    "ThreeCommasError",
    "ValidationError",
    "HttpError",
    "RateLimitExhaustedError",
    "TransportError",
    "raise_for_response",
]
