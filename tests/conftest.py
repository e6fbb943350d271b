# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for 3Commas client tests.

This module provides fake HTTP layers, a recording clock, credentials and
record builders that can be used across all test modules.
"""

import json
from urllib.parse import parse_qs, urlsplit

import pytest

from threecommas.client import ThreeCommasClient
from threecommas.core.config import ThreeCommasConfig
from threecommas.core.credentials import Credentials
from threecommas.data._transport import _Transport


class _FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code=200, body="", headers=None):
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)
        self.headers = headers or {}


class _FakeHttp:
    """Replays queued responses (or exceptions) and records every request."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def _request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if not self._responses:
            raise AssertionError("No more responses")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def offsets(self):
        return [int(parse_qs(urlsplit(url).query)["offset"][0]) for _, url, _ in self.calls]


class _RecordingClock:
    """Clock that records requested sleeps instead of sleeping."""

    def __init__(self):
        self.sleeps = []

    def sleep(self, seconds):
        self.sleeps.append(seconds)


@pytest.fixture
def credentials():
    return Credentials(api_key="test-key", api_secret="test-secret")


@pytest.fixture
def fake_response():
    """Factory for fake ``requests.Response`` objects: ``fake_response(status, body, headers)``."""
    return _FakeResponse


@pytest.fixture
def fake_http():
    """Factory for a fake ``_HttpClient`` replaying the given responses."""
    return _FakeHttp


@pytest.fixture
def clock():
    """Clock that records sleeps instead of sleeping."""
    return _RecordingClock()


@pytest.fixture
def make_records():
    """Build ``count`` deal-like records with sequential ids."""

    def _records(count, start=0):
        return [{"id": start + i, "pair": "USDT_BTC"} for i in range(count)]

    return _records


@pytest.fixture
def make_client(fake_http, clock):
    """
    Build a :class:`ThreeCommasClient` whose transport replays ``responses``.

    Returns ``(client, http, clock)`` so tests can inspect outgoing requests
    and recorded rate-limit waits.
    """

    def _make(responses, config=None):
        client = ThreeCommasClient(config or ThreeCommasConfig(), clock=clock)
        http = fake_http(responses)
        client._transport = _Transport(http)
        return client, http, clock

    return _make
