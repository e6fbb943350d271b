# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Module-level shortcuts for one-off calls.

Each function runs a single call on a short-lived
:class:`~threecommas.client.ThreeCommasClient` with default configuration.
Use the client directly to share a pooled session or custom configuration
across calls.

Example::

    from threecommas import api

    keys = {"apikey": "...", "apisecret": "..."}
    bots = api.get(keys, "/ver1/bots", loop=True)
    response = api.post(keys, "/ver1/bots/123/disable")
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from .client import ThreeCommasClient
from .core._signer import Params
from .core.credentials import CredentialsLike
from .core.results import ApiResponse


def call(
    credentials: CredentialsLike,
    method: str,
    endpoint: str,
    params: Params = "",
    loop: bool = False,
    payload: Optional[Any] = None,
    limit: Optional[int] = None,
) -> Union[ApiResponse, List[Any]]:
    """See :meth:`ThreeCommasClient.call <threecommas.client.ThreeCommasClient.call>`."""
    with ThreeCommasClient() as client:
        return client.call(credentials, method, endpoint, params, loop=loop, payload=payload, limit=limit)


def get(
    credentials: CredentialsLike,
    endpoint: str,
    params: Params = "",
    loop: bool = False,
    limit: Optional[int] = None,
) -> Union[ApiResponse, List[Any]]:
    """See :meth:`ThreeCommasClient.get <threecommas.client.ThreeCommasClient.get>`."""
    return call(credentials, "GET", endpoint, params, loop=loop, limit=limit)


def post(
    credentials: CredentialsLike,
    endpoint: str,
    params: Params = "",
    payload: Optional[Any] = None,
) -> ApiResponse:
    """See :meth:`ThreeCommasClient.post <threecommas.client.ThreeCommasClient.post>`."""
    return call(credentials, "POST", endpoint, params, payload=payload)
