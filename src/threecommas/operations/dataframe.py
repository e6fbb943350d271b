# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""DataFrame operations namespace."""

from __future__ import annotations

from typing import Optional, Sequence, TYPE_CHECKING

import pandas as pd

from ..core._signer import Params
from ..core.credentials import CredentialsLike
from ..utils._pandas import records_to_dataframe

if TYPE_CHECKING:
    from ..client import ThreeCommasClient


class DataFrameOperations:
    """
    Paginated reads returned as :class:`pandas.DataFrame`.

    Accessed via ``client.dataframe``.

    Example::

        df = client.dataframe.get(credentials, "/ver1/deals", {"scope": "finished"}, limit=5000)
        print(df.groupby("bot_id")["usd_final_profit"].apply(lambda s: s.astype(float).sum()))
    """

    def __init__(self, client: "ThreeCommasClient") -> None:
        self._client = client

    def get(
        self,
        credentials: CredentialsLike,
        endpoint: str,
        params: Params = "",
        limit: Optional[int] = None,
        columns: Optional[Sequence[str]] = None,
    ) -> pd.DataFrame:
        """
        Page through ``endpoint`` and return one row per record.

        :param columns: Optional subset and order of columns.
        :return: DataFrame with known timestamp columns parsed as UTC.
        :raises HttpError: If a page comes back with a non-success status.
        """
        records = self._client._fetch_pages(credentials, endpoint, params, limit=limit)
        return records_to_dataframe(records, columns=columns)
