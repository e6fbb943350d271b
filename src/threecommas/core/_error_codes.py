# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_429 = "http_429"
HTTP_500 = "http_500"
HTTP_502 = "http_502"
HTTP_503 = "http_503"
HTTP_504 = "http_504"

TRANSIENT_STATUS_CODES = {429, 502, 503, 504}

# Validation subcodes
VALIDATION_METHOD_MISSING = "validation_method_missing"
VALIDATION_METHOD_UNSUPPORTED = "validation_method_unsupported"
VALIDATION_ENDPOINT_MISSING = "validation_endpoint_missing"
VALIDATION_CREDENTIALS_MISSING = "validation_credentials_missing"
VALIDATION_LOOP_NOT_GET = "validation_loop_not_get"
VALIDATION_LIMIT_INVALID = "validation_limit_invalid"
VALIDATION_PARAMS_INVALID = "validation_params_invalid"
VALIDATION_PAYLOAD_INVALID = "validation_payload_invalid"
VALIDATION_RESPONSE_SHAPE = "validation_response_shape"

# Transport subcodes
TRANSPORT_NETWORK_FAILURE = "transport_network_failure"


def http_subcode(status: int) -> str:
    """Return the ``http_<status>`` subcode for a status code."""
    return f"http_{status}"
