# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Single signed request and response classification."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import requests

from ..common.constants import (
    HEADER_API_KEY,
    HEADER_SIGNATURE,
    PAYLOAD_METHODS,
    RATE_LIMITED_STATUS_CODE,
    SUCCESS_STATUS_CODES,
)
from ..core._http import _HttpClient
from ..core.errors import TransportError
from ..core.results import ApiResponse

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON object was returned. Check to make sure your endpoint is correct."


def _parse_json_body(text: str) -> Optional[Any]:
    """Return the parsed body if it is a JSON object or array, else ``None``."""
    try:
        value = json.loads(text)
    except (TypeError, ValueError):
        return None
    if isinstance(value, (dict, list)):
        return value
    return None


class _Transport:
    """
    Performs one HTTP request with the ``APIKEY`` and ``Signature`` headers and
    normalizes the response into an :class:`~threecommas.core.results.ApiResponse`.

    :param http: Underlying HTTP client.
    :type http: ~threecommas.core._http._HttpClient
    """

    def __init__(self, http: _HttpClient) -> None:
        self._http = http

    def send(
        self,
        url: str,
        method: str,
        api_key: str,
        signature: str,
        payload: Optional[Any] = None,
        *,
        endpoint: Optional[str] = None,
    ) -> ApiResponse:
        """
        Send the request and classify the response.

        - 200/201/204: body parsed as JSON; a body that is not a JSON object or
          array leaves the raw text in ``data`` and sets ``error``.
        - 429: ``data`` is an empty list; retrying is the caller's job.
        - Anything else: raw text in ``data``, logged as an unknown error.

        :param url: Full request URL, including the signed query string.
        :param method: HTTP method.
        :param api_key: Value of the ``APIKEY`` header.
        :param signature: Value of the ``Signature`` header.
        :param payload: JSON body, attached for POST and PATCH only.
        :param endpoint: Endpoint path, used for logs and error details.
        :raises TransportError: If the request fails at the network level.
        """
        method = method.upper()
        kwargs: dict = {"headers": {HEADER_API_KEY: api_key, HEADER_SIGNATURE: signature}}
        if payload is not None:
            if method in PAYLOAD_METHODS:
                kwargs["json"] = payload
            else:
                logger.debug("Ignoring payload for %s %s", method, endpoint)

        try:
            res = self._http._request(method, url, **kwargs)
        except requests.exceptions.RequestException as exc:
            logger.error("%s %s failed: %s", method, endpoint, exc.__class__.__name__)
            raise TransportError(
                f"{method} {endpoint} failed: {exc.__class__.__name__}",
                endpoint=endpoint,
                method=method,
            ) from exc

        status = res.status_code
        text = res.text or ""
        headers = dict(res.headers or {})
        logger.debug("Response Code - %s (%s %s)", status, method, endpoint)

        if status in SUCCESS_STATUS_CODES:
            data = _parse_json_body(text)
            if data is None:
                logger.error("%s (%s %s, status %s)", INVALID_JSON_MESSAGE, method, endpoint, status)
                return ApiResponse(data=text, status=status, headers=headers, error=INVALID_JSON_MESSAGE)
            return ApiResponse(data=data, status=status, headers=headers)

        if status == RATE_LIMITED_STATUS_CODE:
            logger.warning("429 - rate limited on %s %s", method, endpoint)
            return ApiResponse(data=[], status=status, headers=headers)

        logger.error("Unknown error. Status Code: %s (%s %s)", status, method, endpoint)
        return ApiResponse(data=text, status=status, headers=headers)
