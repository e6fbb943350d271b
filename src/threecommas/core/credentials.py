# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""API key and secret pair passed with every call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from ._error_codes import VALIDATION_CREDENTIALS_MISSING
from .errors import ValidationError

CredentialsLike = Union["Credentials", Mapping[str, Any]]

_MISSING_MESSAGE = (
    "Missing API keys. Pass Credentials(api_key, api_secret) or a mapping "
    "structured like {'apikey': ..., 'apisecret': ...}."
)


@dataclass(frozen=True)
class Credentials:
    """
    3Commas API credentials.

    The secret is excluded from ``repr`` so credentials can appear in logs and
    tracebacks without leaking it.

    :param api_key: The account's API key, sent in the ``APIKEY`` header.
    :type api_key: str
    :param api_secret: The account's API secret, used to sign each query string.
    :type api_secret: str
    """

    api_key: str
    api_secret: str = field(repr=False)

    @classmethod
    def coerce(cls, value: CredentialsLike) -> "Credentials":
        """
        Build credentials from a :class:`Credentials` instance or a mapping.

        Mappings may use either ``apikey``/``apisecret`` or ``api_key``/``api_secret`` keys.

        :raises ValidationError: If the key or secret is missing or empty.
        """
        if isinstance(value, Credentials):
            creds = value
        elif isinstance(value, Mapping):
            creds = cls(
                api_key=value.get("apikey") or value.get("api_key") or "",
                api_secret=value.get("apisecret") or value.get("api_secret") or "",
            )
        else:
            raise ValidationError(_MISSING_MESSAGE, subcode=VALIDATION_CREDENTIALS_MISSING)
        if not creds.api_key or not creds.api_secret:
            raise ValidationError(_MISSING_MESSAGE, subcode=VALIDATION_CREDENTIALS_MISSING)
        return creds
