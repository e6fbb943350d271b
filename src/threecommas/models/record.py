# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Base record type for API payloads.

Subclasses declare the fields they type; everything the API returned stays
available through dict-like access on :attr:`ApiRecord.raw`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Type, TypeVar

from ..core._error_codes import VALIDATION_RESPONSE_SHAPE
from ..core.errors import ValidationError

R = TypeVar("R", bound="ApiRecord")


def _to_float(value: Any) -> Optional[float]:
    """3Commas encodes most amounts as strings; ``None`` and ``""`` map to ``None``."""
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass
class ApiRecord:
    """
    Record returned by the API with dict-like access to the original payload.

    :param id: Record identifier.
    :type id: int
    :param raw: The payload exactly as returned by the API.
    :type raw: dict[str, Any]
    """

    id: int
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def _require(cls, payload: Any) -> Mapping[str, Any]:
        """Validate the payload shape shared by every record type."""
        if not isinstance(payload, Mapping):
            raise ValidationError(
                f"{cls.__name__} payload must be an object, got {type(payload).__name__}",
                subcode=VALIDATION_RESPONSE_SHAPE,
            )
        rid = _to_int(payload.get("id"))
        if rid is None:
            raise ValidationError(
                f"{cls.__name__} payload is missing a numeric 'id'",
                subcode=VALIDATION_RESPONSE_SHAPE,
                details={"keys": sorted(payload.keys())},
            )
        return payload

    @classmethod
    def from_api(cls: Type[R], payload: Any) -> R:
        data = cls._require(payload)
        return cls(id=int(data["id"]), raw=dict(data))

    @classmethod
    def from_api_list(cls: Type[R], payloads: Any) -> List[R]:
        """Build records from a list payload."""
        if not isinstance(payloads, list):
            raise ValidationError(
                f"Expected a list of {cls.__name__} payloads, got {type(payloads).__name__}",
                subcode=VALIDATION_RESPONSE_SHAPE,
            )
        return [cls.from_api(p) for p in payloads]

    def __getitem__(self, key: str) -> Any:
        return self.raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.raw)

    def __len__(self) -> int:
        return len(self.raw)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Return a shallow copy of the original payload."""
        return dict(self.raw)
