# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

import pandas as pd

# 3Commas timestamps are ISO 8601 strings in these columns
_TIMESTAMP_COLUMNS = ("created_at", "updated_at", "closed_at")


def records_to_dataframe(
    records: Iterable[Any],
    columns: Optional[Sequence[str]] = None,
    parse_dates: bool = True,
) -> pd.DataFrame:
    """Convert API records (dicts or typed records) to a DataFrame.

    :param records: Dicts, or objects exposing ``to_dict()``.
    :param columns: Optional subset and order of columns. Missing columns are filled with NaN.
    :param parse_dates: Convert known timestamp columns to UTC ``Timestamp`` values.
    """
    rows: List[dict] = []
    for r in records:
        rows.append(r.to_dict() if hasattr(r, "to_dict") else dict(r))
    df = pd.DataFrame(rows)
    if columns is not None:
        df = df.reindex(columns=list(columns))
    if parse_dates:
        for col in _TIMESTAMP_COLUMNS:
            if col in df.columns:
                df[col] = pd.to_datetime(df[col], errors="coerce", utc=True)
    return df
