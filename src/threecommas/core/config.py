# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from ..common.constants import DEFAULT_BASE_URL, DEFAULT_MAX_OFFSET, PAGE_SIZE

_ENV_PREFIX = "THREECOMMAS_"


@dataclass(frozen=True)
class ThreeCommasConfig:
    """
    Configuration settings for 3Commas client operations.

    :param base_url: Scheme and host of the API. Default is ``https://api.3commas.io``.
    :type base_url: str
    :param http_retries: Maximum number of attempts for network-level failures (default: 3).
    :type http_retries: int or None
    :param http_backoff: Base delay in seconds for exponential backoff on network failures (default: 0.5).
    :type http_backoff: float or None
    :param http_timeout: Request timeout in seconds (default: method-dependent).
    :type http_timeout: float or None
    :param rate_limit_delay: Seconds to wait after a 429 response before trying again (default: 3.5).
    :type rate_limit_delay: float
    :param rate_limit_max_attempts: Attempts allowed while the API keeps answering 429 (default: 10).
    :type rate_limit_max_attempts: int
    :param rate_limit_max_delay: Upper bound for a single rate-limit wait in seconds (default: 60.0).
    :type rate_limit_max_delay: float
    :param rate_limit_exponential: Double the wait after each consecutive 429 instead of a fixed delay (default: False).
    :type rate_limit_exponential: bool
    :param page_size: Records requested per page by paginated calls (default: 1000).
    :type page_size: int
    :param max_offset: Offset ceiling for paginated calls that do not pass a limit (default: 2000).
    :type max_offset: int
    """

    base_url: str = DEFAULT_BASE_URL

    # Network-level retry configuration
    http_retries: Optional[int] = None
    http_backoff: Optional[float] = None
    http_timeout: Optional[float] = None

    # Rate-limit (HTTP 429) handling
    rate_limit_delay: float = 3.5
    rate_limit_max_attempts: int = 10
    rate_limit_max_delay: float = 60.0
    rate_limit_exponential: bool = False

    # Pagination
    page_size: int = PAGE_SIZE
    max_offset: int = DEFAULT_MAX_OFFSET

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ThreeCommasConfig":
        """
        Create a configuration instance with default settings, overridden by
        ``THREECOMMAS_<FIELD>`` environment variables when present.

        For example ``THREECOMMAS_RATE_LIMIT_DELAY=5`` sets ``rate_limit_delay``.

        :param environ: Mapping to read instead of ``os.environ``.
        :type environ: Mapping[str, str] or None
        :return: Configuration instance.
        :rtype: ~threecommas.core.config.ThreeCommasConfig
        :raises ValueError: If a variable cannot be converted to the field's type.
        """
        env = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = env.get(_ENV_PREFIX + f.name.upper())
            if raw is None or raw == "":
                continue
            overrides[f.name] = _convert(f.name, raw)
        return cls(**overrides)


_INT_FIELDS = {"http_retries", "rate_limit_max_attempts", "page_size", "max_offset"}
_FLOAT_FIELDS = {"http_backoff", "http_timeout", "rate_limit_delay", "rate_limit_max_delay"}
_BOOL_FIELDS = {"rate_limit_exponential"}


def _convert(name: str, raw: str) -> Any:
    if name in _INT_FIELDS:
        return int(raw)
    if name in _FLOAT_FIELDS:
        return float(raw)
    if name in _BOOL_FIELDS:
        value = raw.strip().lower()
        if value in ("1", "true", "yes", "on"):
            return True
        if value in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"Invalid boolean for {_ENV_PREFIX}{name.upper()}: {raw!r}")
    return raw.rstrip("/")
