# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Exchange account record from ``/ver1/accounts``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .record import ApiRecord, _to_float


@dataclass
class Account(ApiRecord):
    """An exchange account connected to 3Commas."""

    name: str = ""
    exchange_name: str = ""
    market_code: str = ""
    usd_amount: Optional[float] = None
    btc_amount: Optional[float] = None
    created_at: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Any) -> "Account":
        data = cls._require(payload)
        return cls(
            id=int(data["id"]),
            raw=dict(data),
            name=data.get("name") or "",
            exchange_name=data.get("exchange_name") or "",
            market_code=data.get("market_code") or "",
            usd_amount=_to_float(data.get("usd_amount")),
            btc_amount=_to_float(data.get("btc_amount")),
            created_at=data.get("created_at"),
        )
