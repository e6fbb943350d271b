# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import hashlib
import hmac

import pytest

from threecommas.core._signer import build_query_string, format_params, sign
from threecommas.core.credentials import Credentials
from threecommas.core.errors import ValidationError


class TestSign:
    """Signature must match what the API recomputes server-side."""

    def test_known_vector(self):
        # RFC 4231 test case 2
        assert sign("what do ya want for nothing?", "Jefe") == (
            "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
        )

    def test_matches_independent_hmac(self):
        query = "/public/api/ver1/bots?api_key=k&secret=s&limit=1000&offset=0"
        expected = hmac.new(b"s", query.encode(), hashlib.sha256).hexdigest()
        assert sign(query, "s") == expected

    def test_deterministic_lowercase_and_zero_padded(self):
        first = sign("/public/api/ver1/accounts?api_key=a&secret=b", "b")
        second = sign("/public/api/ver1/accounts?api_key=a&secret=b", "b")
        assert first == second
        assert len(first) == 64
        assert first == first.lower()

    def test_different_secret_changes_signature(self):
        assert sign("/q", "one") != sign("/q", "two")

    @pytest.mark.parametrize("query,secret", [("", "s"), ("/q", "")])
    def test_missing_inputs_rejected(self, query, secret):
        with pytest.raises(ValidationError):
            sign(query, secret)


class TestBuildQueryString:
    def setup_method(self):
        self.creds = Credentials("key", "secret")

    def test_single_call_shape(self):
        assert build_query_string("/ver1/accounts", self.creds) == (
            "/public/api/ver1/accounts?api_key=key&secret=secret"
        )

    def test_paging_before_extra_params(self):
        query = build_query_string("/ver1/deals", self.creds, "&scope=active", limit=1000, offset=2000)
        assert query == "/public/api/ver1/deals?api_key=key&secret=secret&limit=1000&offset=2000&scope=active"

    def test_endpoint_without_leading_slash(self):
        assert build_query_string("ver1/bots", self.creds).startswith("/public/api/ver1/bots?")

    def test_missing_endpoint(self):
        with pytest.raises(ValidationError):
            build_query_string("", self.creds)


class TestFormatParams:
    def test_string_verbatim(self):
        assert format_params("&scope=enabled&account_id=5") == "&scope=enabled&account_id=5"

    def test_string_gets_leading_ampersand(self):
        assert format_params("scope=enabled") == "&scope=enabled"

    def test_empty(self):
        assert format_params("") == ""
        assert format_params(None) == ""
        assert format_params({"scope": None}) == ""

    def test_mapping_encoded(self):
        assert format_params({"scope": "finished", "bot_id": 7, "skip": None}) == "&scope=finished&bot_id=7"

    def test_mapping_booleans_lowercased(self):
        assert format_params({"include_events": True}) == "&include_events=true"

    def test_invalid_type(self):
        with pytest.raises(ValidationError):
            format_params(42)
