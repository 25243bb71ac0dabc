"""
Shared fixtures for the API client tests

Clients are built with an httpx.AsyncClient backed by httpx.MockTransport, so
no test touches the network. Handlers receive the outgoing httpx.Request and
return the httpx.Response the fake server should answer with.
"""

import os
from typing import Callable, List

import httpx
import pytest

from BandwidthAPI.clients import CatapultClient, NumbersClient

CATAPULT_BASE_URL = "https://api.example.com"
NUMBERS_BASE_URL = "https://dashboard.example.com"
USER_ID = "u-123"
ACCOUNT_ID = "9900000"


class RecordingHandler:
    """MockTransport handler that records requests and replies via a responder"""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)


def _respond_with(status_code: int = 200, content: bytes = b"", headers=None):
    return lambda request: httpx.Response(status_code, content=content, headers=headers)


def _http_client(handler, timeout=None) -> httpx.AsyncClient:
    if timeout is None:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), timeout=timeout)


@pytest.fixture
def recorder():
    """Build a RecordingHandler from a responder or a canned response"""
    def _make(responder=None, status_code=200, content=b"", headers=None):
        return RecordingHandler(responder or _respond_with(status_code, content, headers))
    return _make


@pytest.fixture
def catapult_client():
    """Create a Catapult client whose transport is the given handler"""
    def _make(handler, client_timeout=None, **kwargs):
        return CatapultClient(
            user_id=USER_ID,
            api_token="token",
            api_secret="secret",
            base_url=CATAPULT_BASE_URL,
            http_client=_http_client(handler, client_timeout),
            **kwargs
        )
    return _make


@pytest.fixture
def numbers_client():
    """Create a Numbers client whose transport is the given handler"""
    def _make(handler, client_timeout=None, **kwargs):
        return NumbersClient(
            account_id=ACCOUNT_ID,
            username="user",
            password="pass",
            base_url=NUMBERS_BASE_URL,
            http_client=_http_client(handler, client_timeout),
            **kwargs
        )
    return _make


@pytest.fixture
def isolated_environ(monkeypatch):
    """Give the test a private copy of os.environ (load_dotenv writes into it)"""
    environ = dict(os.environ)
    for key in list(environ):
        if key.startswith("BANDWIDTH_"):
            del environ[key]
    monkeypatch.setattr(os, "environ", environ)
    return environ
