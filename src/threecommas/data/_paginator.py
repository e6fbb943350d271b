# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Offset pagination over list endpoints."""

from __future__ import annotations

import logging
from typing import Any, List

from ..common.constants import PAGE_SIZE
from ..core._error_codes import VALIDATION_LIMIT_INVALID, VALIDATION_LOOP_NOT_GET
from ..core._signer import Params, build_query_string, sign
from ..core.credentials import Credentials
from ..core.errors import ValidationError, raise_for_response
from ._rate_limit import _RateLimitRetrier

logger = logging.getLogger(__name__)


class _Paginator:
    """
    Loops over ``offset`` in steps of ``page_size`` and accumulates records.

    The loop stops on the first page whose length differs from ``page_size``
    or when ``offset`` reaches ``max_offset``. A data set larger than the
    ceiling is therefore truncated at the ceiling, and a last page of exactly
    ``page_size`` records costs one extra request.

    :param retrier: Rate-limit aware sender used for every page.
    :param base_url: Scheme and host, e.g. ``https://api.3commas.io``.
    :param page_size: Records requested per page.
    """

    def __init__(self, retrier: _RateLimitRetrier, base_url: str, page_size: int = PAGE_SIZE) -> None:
        self._retrier = retrier
        self._base_url = base_url.rstrip("/")
        self.page_size = page_size

    def paginate(
        self,
        method: str,
        endpoint: str,
        params: Params,
        credentials: Credentials,
        *,
        max_offset: int,
        strict: bool = False,
    ) -> List[Any]:
        """
        Fetch every page of ``endpoint`` up to ``max_offset``.

        :param method: Must be ``GET``.
        :param endpoint: Endpoint path, e.g. ``/ver1/deals``.
        :param params: Extra query parameters, without ``limit`` or ``offset``.
        :param credentials: Account credentials.
        :param max_offset: Offset ceiling; no page is requested at or beyond it.
        :param strict: Raise instead of stopping when a page comes back with a
            non-success status or a malformed body.
        :return: Flat list of records from all pages.
        :raises ValidationError: If ``method`` is not GET or ``max_offset`` is not positive.
        :raises HttpError: In strict mode, for the first page that is not a parsed success.
        """
        if (method or "").upper() != "GET":
            raise ValidationError("Only GET supports pagination.", subcode=VALIDATION_LOOP_NOT_GET)
        if not isinstance(max_offset, int) or isinstance(max_offset, bool) or max_offset <= 0:
            raise ValidationError(
                f"max_offset must be a positive integer, got {max_offset!r}",
                subcode=VALIDATION_LIMIT_INVALID,
            )

        records: List[Any] = []
        for offset in range(0, max_offset, self.page_size):
            query = build_query_string(endpoint, credentials, params, limit=self.page_size, offset=offset)
            signature = sign(query, credentials.api_secret)
            response = self._retrier.send(
                self._base_url + query, "GET", credentials.api_key, signature, endpoint=endpoint
            )
            if strict:
                raise_for_response(response, endpoint)

            page = response.data
            if not isinstance(page, list):
                logger.warning(
                    "Expected a list page from %s at offset %d, got %s; stopping",
                    endpoint,
                    offset,
                    type(page).__name__,
                )
                break

            records.extend(page)
            logger.debug(
                "Fetched %d records from %s at offset %d (total %d, status %s)",
                len(page),
                endpoint,
                offset,
                len(records),
                response.status,
            )
            if len(page) != self.page_size:
                break

        logger.info("Fetched %d records from %s", len(records), endpoint)
        return records
