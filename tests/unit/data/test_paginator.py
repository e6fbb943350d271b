# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import pytest

from threecommas.core._error_codes import HTTP_401, HTTP_500
from threecommas.core._signer import sign
from threecommas.core.credentials import Credentials
from threecommas.core.errors import HttpError, ValidationError
from threecommas.data._paginator import _Paginator
from threecommas.data._rate_limit import _RateLimitRetrier
from threecommas.data._transport import INVALID_JSON_MESSAGE, _Transport

CREDS = Credentials("key", "secret")


@pytest.fixture
def make_paginator(fake_http, clock):
    """Build a paginator over a transport replaying ``responses``; returns ``(paginator, http, clock)``."""

    def _make(responses, page_size=1000):
        http = fake_http(responses)
        retrier = _RateLimitRetrier(_Transport(http), clock)
        return _Paginator(retrier, "https://api.example.test/", page_size=page_size), http, clock

    return _make


class TestPaginator:
    def test_three_pages_until_short_page(self, make_paginator, fake_response, make_records):
        responses = [
            fake_response(200, make_records(1000)),
            fake_response(200, make_records(1000, start=1000)),
            fake_response(200, make_records(200, start=2000)),
        ]
        paginator, http, _ = make_paginator(responses)

        result = paginator.paginate("GET", "/ver1/deals", "", CREDS, max_offset=5000)

        assert len(result) == 2200
        assert [r["id"] for r in result] == list(range(2200))
        assert http.offsets == [0, 1000, 2000]

    def test_stops_at_ceiling(self, make_paginator, fake_response, make_records):
        paginator, http, _ = make_paginator([fake_response(200, make_records(1000))] * 5)

        result = paginator.paginate("GET", "/ver1/deals", "", CREDS, max_offset=2000)

        assert len(result) == 2000
        assert http.offsets == [0, 1000]

    def test_exact_page_triggers_one_extra_request(self, make_paginator, fake_response, make_records):
        paginator, http, _ = make_paginator([fake_response(200, make_records(1000)), fake_response(200, "[]")])

        result = paginator.paginate("GET", "/ver1/bots", "", CREDS, max_offset=5000)

        assert len(result) == 1000
        assert http.offsets == [0, 1000]

    def test_each_page_signed(self, make_paginator, fake_response, make_records):
        paginator, http, _ = make_paginator([fake_response(200, make_records(2))])

        paginator.paginate("GET", "/ver1/bots", "&scope=enabled", CREDS, max_offset=2000)

        method, url, kwargs = http.calls[0]
        query = "/public/api/ver1/bots?api_key=key&secret=secret&limit=1000&offset=0&scope=enabled"
        assert method == "GET"
        assert url == "https://api.example.test" + query
        assert kwargs["headers"]["Signature"] == sign(query, "secret")
        assert kwargs["headers"]["APIKEY"] == "key"

    def test_rate_limited_page_retried(self, make_paginator, fake_response, make_records):
        paginator, http, clock = make_paginator([fake_response(429, ""), fake_response(200, make_records(5))])

        result = paginator.paginate("GET", "/ver1/deals", "", CREDS, max_offset=2000)

        assert len(result) == 5
        assert http.offsets == [0, 0]
        assert clock.sleeps == [3.5]

    def test_error_page_ends_loop(self, make_paginator, fake_response, make_records):
        paginator, http, _ = make_paginator([fake_response(200, make_records(1000)), fake_response(500, "oops")])

        result = paginator.paginate("GET", "/ver1/deals", "", CREDS, max_offset=5000)

        assert len(result) == 1000
        assert http.offsets == [0, 1000]

    def test_non_list_page_ends_loop(self, make_paginator, fake_response):
        paginator, http, _ = make_paginator([fake_response(200, {"error": "unknown"})])

        assert paginator.paginate("GET", "/ver1/deals", "", CREDS, max_offset=2000) == []
        assert len(http.calls) == 1

    def test_custom_page_size(self, make_paginator, fake_response, make_records):
        paginator, http, _ = make_paginator(
            [fake_response(200, make_records(2)), fake_response(200, make_records(1))], page_size=2
        )

        assert len(paginator.paginate("GET", "/ver1/deals", "", CREDS, max_offset=10)) == 3
        assert http.offsets == [0, 2]

    def test_only_get(self, make_paginator):
        paginator, http, _ = make_paginator([])
        with pytest.raises(ValidationError):
            paginator.paginate("POST", "/ver1/deals", "", CREDS, max_offset=2000)
        assert http.calls == []

    @pytest.mark.parametrize("max_offset", [0, -1000, "2000", True])
    def test_invalid_ceiling(self, make_paginator, max_offset):
        paginator, _, _ = make_paginator([])
        with pytest.raises(ValidationError):
            paginator.paginate("GET", "/ver1/deals", "", CREDS, max_offset=max_offset)


class TestStrictPagination:
    def test_first_page_rejected(self, make_paginator, fake_response):
        paginator, http, _ = make_paginator([fake_response(401, '{"error":"signature_invalid"}')])

        with pytest.raises(HttpError) as exc:
            paginator.paginate("GET", "/ver1/bots", "", CREDS, max_offset=2000, strict=True)

        assert exc.value.status_code == 401
        assert exc.value.subcode == HTTP_401
        assert exc.value.details["endpoint"] == "/ver1/bots"
        assert len(http.calls) == 1

    def test_later_page_rejected(self, make_paginator, fake_response, make_records):
        paginator, http, _ = make_paginator([fake_response(200, make_records(1000)), fake_response(500, "oops")])

        with pytest.raises(HttpError) as exc:
            paginator.paginate("GET", "/ver1/deals", "", CREDS, max_offset=5000, strict=True)

        assert exc.value.subcode == HTTP_500
        assert exc.value.is_transient is False
        assert http.offsets == [0, 1000]

    def test_malformed_page_rejected(self, make_paginator, fake_response):
        paginator, _, _ = make_paginator([fake_response(200, "<html>")])

        with pytest.raises(HttpError) as exc:
            paginator.paginate("GET", "/ver1/deals", "", CREDS, max_offset=2000, strict=True)

        assert exc.value.message == INVALID_JSON_MESSAGE

    def test_success_pages_unchanged(self, make_paginator, fake_response, make_records):
        paginator, http, _ = make_paginator(
            [fake_response(200, make_records(1000)), fake_response(200, make_records(3))]
        )

        result = paginator.paginate("GET", "/ver1/deals", "", CREDS, max_offset=5000, strict=True)

        assert len(result) == 1003
        assert http.offsets == [0, 1000]
