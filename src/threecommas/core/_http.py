# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
HTTP client with automatic retry logic, timeout handling, and optional session support.

This module provides :class:`~threecommas.core._http._HttpClient`, a wrapper
around the requests library that retries transient network errors with
exponential backoff, applies per-method default timeouts, and reuses a
``requests.Session`` for connection pooling when one is supplied.

HTTP status codes are never retried here; rate limiting is handled one layer
up by :class:`~threecommas.data._rate_limit._RateLimitRetrier`.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ._clock import Clock, SystemClock

logger = logging.getLogger(__name__)


class _HttpClient:
    """
    HTTP client with configurable network retry logic, timeout handling, and optional session support.

    :param retries: Maximum number of attempts for network errors. Default is 3.
    :type retries: :class:`int` | None
    :param backoff: Base delay in seconds between retry attempts. Default is 0.5.
    :type backoff: :class:`float` | None
    :param timeout: Default request timeout in seconds. If None, uses per-method defaults.
    :type timeout: :class:`float` | None
    :param session: Optional requests.Session for connection pooling.
    :type session: :class:`requests.Session` | None
    :param clock: Sleep provider used between attempts. Defaults to :class:`SystemClock`.
    :type clock: :class:`~threecommas.core._clock.Clock` | None
    """

    def __init__(
        self,
        retries: Optional[int] = None,
        backoff: Optional[float] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.max_attempts = max(1, retries if retries is not None else 3)
        self.base_delay = backoff if backoff is not None else 0.5
        self.default_timeout: Optional[float] = timeout
        self._session = session
        self._clock = clock or SystemClock()

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Execute an HTTP request with network retry logic and timeout management.

        Applies default timeouts based on HTTP method (120s for POST/PATCH/DELETE,
        30s for GET) and retries on network errors with exponential backoff.

        :param method: HTTP method (GET, POST, PATCH, DELETE).
        :type method: :class:`str`
        :param url: Target URL for the request.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()`` or
            ``session.request()``, including headers, json, etc.
        :return: HTTP response object.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: If all retry attempts fail.
        """
        if "timeout" not in kwargs:
            if self.default_timeout is not None:
                kwargs["timeout"] = self.default_timeout
            else:
                m = (method or "").lower()
                kwargs["timeout"] = 120 if m in ("post", "patch", "delete") else 30

        for attempt in range(self.max_attempts):
            try:
                if self._session is not None:
                    return self._session.request(method, url, **kwargs)
                return requests.request(method, url, **kwargs)
            except requests.exceptions.RequestException as exc:
                if attempt == self.max_attempts - 1:
                    raise
                delay = self.base_delay * (2**attempt)
                logger.warning(
                    "Network error on %s (attempt %d/%d): %s; retrying in %.2fs",
                    method,
                    attempt + 1,
                    self.max_attempts,
                    type(exc).__name__,
                    delay,
                )
                self._clock.sleep(delay)
