# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Deal record from ``/ver1/deals``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .record import ApiRecord, _to_float, _to_int

# Values accepted by the ``scope`` filter of /ver1/deals
DEAL_SCOPES = ("active", "finished", "completed", "cancelled", "failed")


@dataclass
class Deal(ApiRecord):
    """A deal opened by a bot."""

    bot_id: Optional[int] = None
    account_id: Optional[int] = None
    pair: str = ""
    status: str = ""
    created_at: Optional[str] = None
    closed_at: Optional[str] = None
    bought_volume: Optional[float] = None
    sold_volume: Optional[float] = None
    final_profit: Optional[float] = None
    usd_final_profit: Optional[float] = None
    actual_profit_percentage: Optional[float] = None

    @property
    def is_finished(self) -> bool:
        return self.closed_at is not None

    @classmethod
    def from_api(cls, payload: Any) -> "Deal":
        data = cls._require(payload)
        return cls(
            id=int(data["id"]),
            raw=dict(data),
            bot_id=_to_int(data.get("bot_id")),
            account_id=_to_int(data.get("account_id")),
            pair=data.get("pair") or "",
            status=data.get("status") or "",
            created_at=data.get("created_at"),
            closed_at=data.get("closed_at"),
            bought_volume=_to_float(data.get("bought_volume")),
            sold_volume=_to_float(data.get("sold_volume")),
            final_profit=_to_float(data.get("final_profit")),
            usd_final_profit=_to_float(data.get("usd_final_profit")),
            actual_profit_percentage=_to_float(data.get("actual_profit_percentage")),
        )
