# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Deal operations namespace."""

from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from ..core._error_codes import VALIDATION_PARAMS_INVALID
from ..core.credentials import CredentialsLike
from ..core.errors import ValidationError, raise_for_response
from ..models.deal import DEAL_SCOPES, Deal

if TYPE_CHECKING:
    from ..client import ThreeCommasClient

DEALS_ENDPOINT = "/ver1/deals"


class DealOperations:
    """
    Read access to deals.

    Accessed via ``client.deals``.

    Example::

        finished = client.deals.list(credentials, scope="finished", limit=5000)
        profit = sum(d.usd_final_profit or 0 for d in finished)
    """

    def __init__(self, client: "ThreeCommasClient") -> None:
        self._client = client

    def list(
        self,
        credentials: CredentialsLike,
        scope: Optional[str] = None,
        bot_id: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Deal]:
        """
        List deals, paging through ``/ver1/deals``.

        :param scope: One of ``active``, ``finished``, ``completed``, ``cancelled``, ``failed``.
        :param bot_id: Only deals opened by this bot.
        :param limit: Offset ceiling; defaults to the client's ``max_offset``.
        :raises ValidationError: If ``scope`` is not a known value.
        :raises HttpError: If a page comes back with a non-success status.
        """
        if scope is not None and scope not in DEAL_SCOPES:
            raise ValidationError(
                f"Unknown deal scope {scope!r}; expected one of {', '.join(DEAL_SCOPES)}",
                subcode=VALIDATION_PARAMS_INVALID,
            )
        params = {"scope": scope, "bot_id": bot_id}
        records = self._client._fetch_pages(credentials, DEALS_ENDPOINT, params, limit=limit)
        return Deal.from_api_list(records)

    def get(self, credentials: CredentialsLike, deal_id: int) -> Deal:
        """Fetch one deal from ``/ver1/deals/<id>/show``."""
        endpoint = f"{DEALS_ENDPOINT}/{int(deal_id)}/show"
        response = self._client.get(credentials, endpoint)
        raise_for_response(response, endpoint)
        return Deal.from_api(response.data)
