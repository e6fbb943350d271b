# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Sleep abstraction so retry waits can be replaced in tests."""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Anything that can block for a number of seconds."""

    def sleep(self, seconds: float) -> None: ...


class SystemClock:
    """Clock backed by :func:`time.sleep`."""

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)
