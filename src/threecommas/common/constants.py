# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for the 3Commas public REST API.

These constants define the wire-level names the API expects: where requests
go, which headers carry the credentials, and how list endpoints page.
"""

DEFAULT_BASE_URL = "https://api.3commas.io"
API_PREFIX = "/public/api"

# Request headers read by the API for every signed call
HEADER_API_KEY = "APIKEY"
HEADER_SIGNATURE = "Signature"

# List endpoints return at most this many records per request
PAGE_SIZE = 1000
"""Records requested per page when looping through a list endpoint."""

DEFAULT_MAX_OFFSET = 2000
"""Offset ceiling used when a paginated call does not pass an explicit limit."""

RESERVED_QUERY_KEYS = ("api_key", "secret", "limit", "offset")
"""Query keys the signer writes itself; caller filters may not repeat them."""

# Status handling
SUCCESS_STATUS_CODES = frozenset({200, 201, 204})
RATE_LIMITED_STATUS_CODE = 429

SUPPORTED_METHODS = ("GET", "POST", "PATCH", "DELETE")
PAYLOAD_METHODS = ("POST", "PATCH")
