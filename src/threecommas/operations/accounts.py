# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Exchange account operations namespace."""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from ..core.credentials import CredentialsLike
from ..core.errors import raise_for_response
from ..models.account import Account

if TYPE_CHECKING:
    from ..client import ThreeCommasClient

ACCOUNTS_ENDPOINT = "/ver1/accounts"


class AccountOperations:
    """Read access to connected exchange accounts, via ``client.accounts``."""

    def __init__(self, client: "ThreeCommasClient") -> None:
        self._client = client

    def list(self, credentials: CredentialsLike) -> List[Account]:
        """
        List accounts with one call to ``/ver1/accounts`` (the endpoint is not paginated).

        :raises HttpError: If the API does not answer with a parsed success body.
        """
        response = self._client.get(credentials, ACCOUNTS_ENDPOINT)
        raise_for_response(response, ACCOUNTS_ENDPOINT)
        return Account.from_api_list(response.data)
