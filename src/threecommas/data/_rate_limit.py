# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Bounded retry loop for rate-limited (HTTP 429) responses."""

from __future__ import annotations

import logging
import math
from typing import Optional

from ..common.constants import RATE_LIMITED_STATUS_CODE
from ..core._clock import Clock, SystemClock
from ..core.errors import RateLimitExhaustedError
from ..core.results import ApiResponse
from ._transport import _Transport

logger = logging.getLogger(__name__)


class _RateLimitRetrier:
    """
    Wraps :class:`~threecommas.data._transport._Transport` and retries while the
    API answers 429.

    The first attempt goes out immediately. After each 429 the retrier waits
    ``delay`` seconds (doubled per consecutive 429 when ``exponential`` is set,
    replaced by a finite, non-negative ``Retry-After`` header when present, always capped at
    ``max_delay``) and tries again, up to ``max_attempts`` attempts in total.

    :param transport: Transport performing the actual request.
    :param clock: Sleep provider. Defaults to :class:`~threecommas.core._clock.SystemClock`.
    :param delay: Base wait after a 429, in seconds.
    :param max_attempts: Total attempts before :class:`RateLimitExhaustedError` is raised.
    :param max_delay: Upper bound for one wait, in seconds.
    :param exponential: Grow the wait exponentially instead of keeping it fixed.
    """

    def __init__(
        self,
        transport: _Transport,
        clock: Optional[Clock] = None,
        *,
        delay: float = 3.5,
        max_attempts: int = 10,
        max_delay: float = 60.0,
        exponential: bool = False,
    ) -> None:
        self._transport = transport
        self._clock = clock or SystemClock()
        self.delay = delay
        self.max_attempts = max(1, max_attempts)
        self.max_delay = max_delay
        self.exponential = exponential

    def _next_delay(self, retry_count: int, response: ApiResponse) -> float:
        retry_after = response.headers.get("Retry-After") or response.headers.get("retry-after")
        if retry_after is not None:
            try:
                seconds = float(retry_after)
            except (TypeError, ValueError):
                seconds = None
            if seconds is not None and math.isfinite(seconds) and seconds >= 0:
                return min(seconds, self.max_delay)
        delay = self.delay * (2 ** (retry_count - 1)) if self.exponential else self.delay
        return min(delay, self.max_delay)

    def send(
        self,
        url: str,
        method: str,
        api_key: str,
        signature: str,
        *,
        endpoint: Optional[str] = None,
    ) -> ApiResponse:
        """
        Send a request, waiting and retrying on 429.

        :return: The full envelope on 200. For any other non-429 status, an
            envelope whose ``data`` is an empty list, keeping status, headers
            and error.
        :raises RateLimitExhaustedError: If every attempt was rate limited.
        :raises TransportError: If the request fails at the network level.
        """
        retry_count = 0
        while True:
            response = self._transport.send(url, method, api_key, signature, endpoint=endpoint)

            if response.status == RATE_LIMITED_STATUS_CODE:
                retry_count += 1
                if retry_count >= self.max_attempts:
                    logger.error("Still rate limited after %d attempts on %s", retry_count, endpoint)
                    raise RateLimitExhaustedError(
                        f"Rate limited on {endpoint} after {retry_count} attempts",
                        attempts=retry_count,
                    )
                wait = self._next_delay(retry_count, response)
                logger.warning("Rate limited on %s, retry %d in %.2fs", endpoint, retry_count, wait)
                self._clock.sleep(wait)
                continue

            if response.status == 200:
                logger.debug("Successful call to %s after %d retries", endpoint, retry_count)
                return response

            return ApiResponse(data=[], status=response.status, headers=response.headers, error=response.error)
