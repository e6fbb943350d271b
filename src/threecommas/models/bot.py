# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""DCA bot record from ``/ver1/bots``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .record import ApiRecord, _to_float, _to_int


@dataclass
class Bot(ApiRecord):
    """
    A 3Commas DCA bot.

    Example::

        bots = client.bots.list(credentials, scope="enabled")
        for bot in bots:
            print(bot.name, bot.pairs, bot.active_deals_count)
    """

    name: str = ""
    account_id: Optional[int] = None
    is_enabled: bool = False
    pairs: List[str] = field(default_factory=list)
    base_order_volume: Optional[float] = None
    take_profit: Optional[float] = None
    max_active_deals: Optional[int] = None
    active_deals_count: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Any) -> "Bot":
        data = cls._require(payload)
        pairs = data.get("pairs") or []
        return cls(
            id=int(data["id"]),
            raw=dict(data),
            name=data.get("name") or "",
            account_id=_to_int(data.get("account_id")),
            is_enabled=bool(data.get("is_enabled", False)),
            pairs=[str(p) for p in pairs] if isinstance(pairs, list) else [str(pairs)],
            base_order_volume=_to_float(data.get("base_order_volume")),
            take_profit=_to_float(data.get("take_profit")),
            max_active_deals=_to_int(data.get("max_active_deals")),
            active_deals_count=_to_int(data.get("active_deals_count")),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
