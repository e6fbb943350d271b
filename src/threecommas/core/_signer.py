# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Query-string construction and request signing.

The API recomputes the HMAC-SHA256 of the path and query (everything from
``/public/api`` on) with the account secret and compares it with the
``Signature`` header, so the string built here must be exactly the one sent.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlencode

from ..common.constants import API_PREFIX
from ._error_codes import VALIDATION_ENDPOINT_MISSING, VALIDATION_PARAMS_INVALID
from .credentials import Credentials
from .errors import ValidationError

Params = Union[str, Mapping[str, Any], None]


def format_params(params: Params) -> str:
    """
    Render extra query parameters as a string starting with ``&``.

    Strings are appended verbatim (a leading ``&`` is added when missing);
    mappings are url-encoded, with ``None`` values dropped and booleans
    lowercased.

    :raises ValidationError: If ``params`` is neither a string nor a mapping.
    """
    if params is None or params == "":
        return ""
    if isinstance(params, str):
        return params if params.startswith("&") else "&" + params
    if isinstance(params, Mapping):
        pairs = []
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            pairs.append((key, value))
        if not pairs:
            return ""
        return "&" + urlencode(pairs)
    raise ValidationError(
        f"params must be a string or a mapping, got {type(params).__name__}",
        subcode=VALIDATION_PARAMS_INVALID,
    )


def build_query_string(
    endpoint: str,
    credentials: Credentials,
    params: Params = "",
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> str:
    """
    Build the signed portion of a request URL.

    Example::

        >>> build_query_string("/ver1/bots", Credentials("k", "s"), "&scope=enabled", limit=1000, offset=0)
        '/public/api/ver1/bots?api_key=k&secret=s&limit=1000&offset=0&scope=enabled'

    :param endpoint: Endpoint path without the ``/public/api`` prefix, e.g. ``/ver1/bots``.
    :param credentials: Account credentials.
    :param params: Extra parameters (see :func:`format_params`).
    :param limit: Page size, only for paginated calls.
    :param offset: Page offset, only for paginated calls.
    :return: Path and query string, starting with ``/public/api``.
    """
    if not endpoint:
        raise ValidationError("Missing the endpoint.", subcode=VALIDATION_ENDPOINT_MISSING)
    if not endpoint.startswith("/"):
        endpoint = "/" + endpoint
    query = f"{API_PREFIX}{endpoint}?api_key={credentials.api_key}&secret={credentials.api_secret}"
    if limit is not None:
        query += f"&limit={limit}"
    if offset is not None:
        query += f"&offset={offset}"
    return query + format_params(params)


def sign(query_string: str, secret: str) -> str:
    """
    Compute the lowercase hex HMAC-SHA256 of ``query_string`` keyed by ``secret``.

    :raises ValidationError: If either input is empty.
    """
    if not query_string or not secret:
        raise ValidationError("Both a query string and a secret are required to sign a request.")
    return hmac.new(secret.encode("utf-8"), query_string.encode("utf-8"), hashlib.sha256).hexdigest()
