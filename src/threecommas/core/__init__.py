# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the 3Commas client.

This module contains the foundational components including credentials,
configuration, signing, the HTTP client, and error handling.
"""

from .config import ThreeCommasConfig
from .credentials import Credentials
from .errors import (
    HttpError,
    RateLimitExhaustedError,
    ThreeCommasError,
    TransportError,
    ValidationError,
)
from .results import ApiResponse

__all__ = [
    "ThreeCommasConfig",
    "Credentials",
    "ThreeCommasError",
    "ValidationError",
    "HttpError",
    "RateLimitExhaustedError",
    "TransportError",
    "ApiResponse",
]
