# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import logging
from typing import Any, List, Optional, Union

import requests

from .common.constants import SUPPORTED_METHODS
from .core._clock import Clock, SystemClock
from .core._error_codes import (
    VALIDATION_ENDPOINT_MISSING,
    VALIDATION_LIMIT_INVALID,
    VALIDATION_LOOP_NOT_GET,
    VALIDATION_METHOD_MISSING,
    VALIDATION_METHOD_UNSUPPORTED,
    VALIDATION_PAYLOAD_INVALID,
)
from .core._http import _HttpClient
from .core._signer import Params, build_query_string, sign
from .core.config import ThreeCommasConfig
from .core.credentials import Credentials, CredentialsLike
from .core.errors import ValidationError
from .core.results import ApiResponse
from .data._paginator import _Paginator
from .data._rate_limit import _RateLimitRetrier
from .data._transport import _Transport
from .operations.accounts import AccountOperations
from .operations.bots import BotOperations
from .operations.dataframe import DataFrameOperations
from .operations.deals import DealOperations

logger = logging.getLogger(__name__)


class ThreeCommasClient:
    """
    High-level client for the 3Commas public REST API.

    The client signs every request with the caller's credentials, which are
    passed on each call and never stored. Single calls return an
    :class:`~threecommas.core.results.ApiResponse`; looped (paginated) GET
    calls return the flat list of records from every page.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager enables connection pooling and
        ensures the session is closed::

            with ThreeCommasClient() as client:
                bots = client.get(credentials, "/ver1/bots", loop=True)

    **Without Context Manager**:
        Resources are created lazily on first use. Call ``close()`` when done::

            client = ThreeCommasClient()
            try:
                response = client.get(credentials, "/ver1/accounts")
            finally:
                client.close()

    Namespaces:

    - ``client.bots``: typed bot listing and lookup
    - ``client.deals``: typed deal listing and lookup
    - ``client.accounts``: typed account listing
    - ``client.dataframe``: paginated reads as pandas DataFrames

    :param config: Optional configuration for base URL, timeouts, rate-limit
        retries and pagination. Defaults to :meth:`ThreeCommasConfig.from_env`.
    :type config: ~threecommas.core.config.ThreeCommasConfig or None
    :param clock: Sleep provider for retry waits. Defaults to :class:`~threecommas.core._clock.SystemClock`.
    :type clock: ~threecommas.core._clock.Clock or None
    :param session: Optional externally owned ``requests.Session``. The client never closes it.
    :type session: requests.Session or None

    Example::

        from threecommas import Credentials, ThreeCommasClient

        credentials = Credentials(api_key="...", api_secret="...")
        with ThreeCommasClient() as client:
            deals = client.get(credentials, "/ver1/deals", "&scope=finished", loop=True, limit=5000)
            response = client.post(credentials, "/ver1/bots/123/enable")
            print(response.status, response.data)
    """

    def __init__(
        self,
        config: Optional[ThreeCommasConfig] = None,
        clock: Optional[Clock] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config or ThreeCommasConfig.from_env()
        self._base_url = (self._config.base_url or "").rstrip("/")
        if not self._base_url:
            raise ValueError("base_url is required.")
        self._clock = clock or SystemClock()
        self._session: Optional[requests.Session] = session
        self._owns_session: bool = False
        self._http: Optional[_HttpClient] = None
        self._transport: Optional[_Transport] = None
        self._paginator: Optional[_Paginator] = None

        self.bots = BotOperations(self)
        self.deals = DealOperations(self)
        self.accounts = AccountOperations(self)
        self.dataframe = DataFrameOperations(self)

    @property
    def config(self) -> ThreeCommasConfig:
        return self._config

    def __enter__(self) -> "ThreeCommasClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling unless one was supplied.
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            self._reset_pipeline()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Release the pooled session (if the client created it). Safe to call multiple times.
        """
        self._reset_pipeline()
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False

    def _reset_pipeline(self) -> None:
        self._http = None
        self._transport = None
        self._paginator = None

    def _get_transport(self) -> _Transport:
        """Lazily build the HTTP client and transport, bound to the current session."""
        if self._transport is None:
            cfg = self._config
            self._http = _HttpClient(
                retries=cfg.http_retries,
                backoff=cfg.http_backoff,
                timeout=cfg.http_timeout,
                session=self._session,
                clock=self._clock,
            )
            self._transport = _Transport(self._http)
        return self._transport

    def _get_paginator(self) -> _Paginator:
        if self._paginator is None:
            cfg = self._config
            retrier = _RateLimitRetrier(
                self._get_transport(),
                self._clock,
                delay=cfg.rate_limit_delay,
                max_attempts=cfg.rate_limit_max_attempts,
                max_delay=cfg.rate_limit_max_delay,
                exponential=cfg.rate_limit_exponential,
            )
            self._paginator = _Paginator(retrier, self._base_url, page_size=cfg.page_size)
        return self._paginator

    def _resolve_max_offset(self, limit: Optional[int]) -> int:
        if limit is None or limit == "":
            return self._config.max_offset
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValidationError(
                f"limit must be a positive integer, got {limit!r}",
                subcode=VALIDATION_LIMIT_INVALID,
            )
        return limit

    def _fetch_pages(
        self,
        credentials: CredentialsLike,
        endpoint: str,
        params: Params = "",
        limit: Optional[int] = None,
    ) -> List[Any]:
        """
        Paginated GET for the typed namespaces.

        Unlike ``get(..., loop=True)``, a page with a non-success status or a
        malformed body raises :class:`~threecommas.core.errors.HttpError`
        instead of ending the loop with the records gathered so far.
        """
        if not endpoint:
            raise ValidationError("Missing the method or endpoint.", subcode=VALIDATION_ENDPOINT_MISSING)
        creds = Credentials.coerce(credentials)
        max_offset = self._resolve_max_offset(limit)
        return self._get_paginator().paginate("GET", endpoint, params, creds, max_offset=max_offset, strict=True)

    # ---------------- Generic call ----------------
    def call(
        self,
        credentials: CredentialsLike,
        method: str,
        endpoint: str,
        params: Params = "",
        loop: bool = False,
        payload: Optional[Any] = None,
        limit: Optional[int] = None,
    ) -> Union[ApiResponse, List[Any]]:
        """
        Sign and send a request to ``endpoint``.

        :param credentials: :class:`~threecommas.core.credentials.Credentials` or a mapping
            with ``apikey``/``apisecret`` keys.
        :param method: ``GET``, ``POST``, ``PATCH`` or ``DELETE``.
        :param endpoint: Endpoint path without ``/public/api``, e.g. ``/ver1/bots``.
        :param params: Extra query parameters: a string like ``"&scope=enabled"`` or a mapping.
            Do not include ``limit`` or ``offset`` for looped calls.
        :param loop: GET only. Page through the endpoint and return every record.
        :param payload: JSON body for POST and PATCH.
        :param limit: GET loop only. Offset ceiling; defaults to ``config.max_offset``.
        :return: The flat record list for looped calls, otherwise the response envelope.
        :raises ValidationError: For a missing method, endpoint or credential, an
            unsupported method, or ``loop`` with a method other than GET. Raised
            before any network access.
        :raises TransportError: If the request fails at the network level.
        :raises RateLimitExhaustedError: If a page stays rate limited.
        """
        if not method:
            raise ValidationError("Missing the method or endpoint.", subcode=VALIDATION_METHOD_MISSING)
        if not endpoint:
            raise ValidationError("Missing the method or endpoint.", subcode=VALIDATION_ENDPOINT_MISSING)
        creds = Credentials.coerce(credentials)
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValidationError(
                f"Unsupported method {method!r}; expected one of {', '.join(SUPPORTED_METHODS)}",
                subcode=VALIDATION_METHOD_UNSUPPORTED,
            )
        if payload is not None and not isinstance(payload, (dict, list)):
            raise ValidationError(
                f"payload must be a dict or a list, got {type(payload).__name__}",
                subcode=VALIDATION_PAYLOAD_INVALID,
            )

        if loop:
            if method != "GET":
                raise ValidationError("Only GET supports loop=True.", subcode=VALIDATION_LOOP_NOT_GET)
            max_offset = self._resolve_max_offset(limit)
            return self._get_paginator().paginate(method, endpoint, params, creds, max_offset=max_offset)

        query = build_query_string(endpoint, creds, params)
        signature = sign(query, creds.api_secret)
        response = self._get_transport().send(
            self._base_url + query,
            method,
            creds.api_key,
            signature,
            payload,
            endpoint=endpoint,
        )
        logger.info("%s %s - %s", method, endpoint, response.status)
        return response

    # ---------------- Verb helpers ----------------
    def get(
        self,
        credentials: CredentialsLike,
        endpoint: str,
        params: Params = "",
        loop: bool = False,
        limit: Optional[int] = None,
    ) -> Union[ApiResponse, List[Any]]:
        """
        GET ``endpoint``.

        With ``loop=True`` returns the records of every page (no status or headers);
        otherwise returns the :class:`~threecommas.core.results.ApiResponse`.
        """
        return self.call(credentials, "GET", endpoint, params, loop=loop, limit=limit)

    def post(
        self,
        credentials: CredentialsLike,
        endpoint: str,
        params: Params = "",
        payload: Optional[Any] = None,
    ) -> ApiResponse:
        """POST to ``endpoint``. Many 3Commas POST endpoints take no payload."""
        return self.call(credentials, "POST", endpoint, params, payload=payload)

    def patch(
        self,
        credentials: CredentialsLike,
        endpoint: str,
        params: Params = "",
        payload: Optional[Any] = None,
    ) -> ApiResponse:
        """PATCH ``endpoint`` with an optional JSON payload."""
        return self.call(credentials, "PATCH", endpoint, params, payload=payload)

    def delete(
        self,
        credentials: CredentialsLike,
        endpoint: str,
        params: Params = "",
    ) -> ApiResponse:
        """DELETE ``endpoint``."""
        return self.call(credentials, "DELETE", endpoint, params)
