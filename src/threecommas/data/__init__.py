# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request pipeline for the 3Commas client.

Internal modules: one signed request and its classification
(:mod:`._transport`), bounded rate-limit retries (:mod:`._rate_limit`) and
offset pagination (:mod:`._paginator`).
"""

__all__ = []
