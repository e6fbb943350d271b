# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Response envelope returned by single (non-paginated) calls.

Example::

    response = client.get(credentials, "/ver1/accounts")
    if response.ok:
        for account in response.data:
            print(account["name"])
    else:
        print(response.status, response.error)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ApiResponse:
    """
    Normalized result of one HTTP call to the API.

    :param data: Parsed JSON (``dict`` or ``list``) on success. The raw body text
        when the body could not be parsed or the status was unexpected. An empty
        list for rate-limited or degraded responses.
    :type data: Any
    :param status: HTTP status code.
    :type status: int
    :param headers: Response headers.
    :type headers: dict[str, str]
    :param error: Description of a malformed success body, otherwise ``None``.
    :type error: str | None
    """

    data: Any
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True for a 2xx status with a parsed body."""
        return 200 <= self.status < 300 and self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Return the envelope as ``{data, status, headers[, error]}``."""
        out: Dict[str, Any] = {"data": self.data, "status": self.status, "headers": dict(self.headers)}
        if self.error is not None:
            out["error"] = self.error
        return out


__all__ = ["ApiResponse"]
