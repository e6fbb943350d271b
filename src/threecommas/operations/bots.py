# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""DCA bot operations namespace."""

from __future__ import annotations

from typing import Any, List, Optional, TYPE_CHECKING

from ..common.constants import RESERVED_QUERY_KEYS
from ..core._error_codes import VALIDATION_PARAMS_INVALID
from ..core.credentials import CredentialsLike
from ..core.errors import ValidationError, raise_for_response
from ..models.bot import Bot

if TYPE_CHECKING:
    from ..client import ThreeCommasClient

BOTS_ENDPOINT = "/ver1/bots"


class BotOperations:
    """
    Read access to DCA bots.

    Accessed via ``client.bots``.

    Example::

        enabled = client.bots.list(credentials, scope="enabled")
        bot = client.bots.get(credentials, enabled[0].id)
    """

    def __init__(self, client: "ThreeCommasClient") -> None:
        self._client = client

    def list(
        self,
        credentials: CredentialsLike,
        *,
        limit: Optional[int] = None,
        **filters: Any,
    ) -> List[Bot]:
        """
        List bots, paging through ``/ver1/bots``.

        :param credentials: Account credentials.
        :param limit: Offset ceiling; defaults to the client's ``max_offset``.
        :param filters: Extra query parameters such as ``scope``, ``account_id``
            or ``strategy``. ``None`` values are dropped.
        :return: Bots as typed records.
        :raises ValidationError: If a filter repeats a key the client sets itself
            (``api_key``, ``secret``, ``limit``, ``offset``), or a bot payload lacks an ``id``.
        :raises HttpError: If a page comes back with a non-success status.
        """
        reserved = sorted(set(filters) & set(RESERVED_QUERY_KEYS))
        if reserved:
            raise ValidationError(
                f"Filters may not set {', '.join(reserved)}; use limit= for the offset ceiling",
                subcode=VALIDATION_PARAMS_INVALID,
            )
        records = self._client._fetch_pages(credentials, BOTS_ENDPOINT, filters, limit=limit)
        return Bot.from_api_list(records)

    def get(self, credentials: CredentialsLike, bot_id: int) -> Bot:
        """
        Fetch one bot from ``/ver1/bots/<id>/show``.

        :raises HttpError: If the API does not answer with a parsed success body.
        """
        endpoint = f"{BOTS_ENDPOINT}/{int(bot_id)}/show"
        response = self._client.get(credentials, endpoint)
        raise_for_response(response, endpoint)
        return Bot.from_api(response.data)
