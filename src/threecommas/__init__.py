# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Client for the 3Commas public REST API.

Signs requests with HMAC-SHA256, retries rate-limited pages and pages through
list endpoints.
"""

import logging

from .client import ThreeCommasClient
from .core.config import ThreeCommasConfig
from .core.credentials import Credentials
from .core.errors import (
    HttpError,
    RateLimitExhaustedError,
    ThreeCommasError,
    TransportError,
    ValidationError,
)
from .core.results import ApiResponse

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ThreeCommasClient",
    "ThreeCommasConfig",
    "Credentials",
    "ApiResponse",
    "ThreeCommasError",
    "ValidationError",
    "HttpError",
    "RateLimitExhaustedError",
    "TransportError",
]
