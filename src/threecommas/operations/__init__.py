# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the 3Commas client.

This module contains the operation namespace classes that organize
related endpoints under intuitive namespaces:
- BotOperations: DCA bots
- DealOperations: deals
- AccountOperations: exchange accounts
- DataFrameOperations: paginated reads as pandas DataFrames
"""

__all__ = []
