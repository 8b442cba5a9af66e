"""Unit tests for GroupMeClient."""

import asyncio

import pytest
from unittest.mock import patch

import aiohttp

from groupmebot.adapters.groupme.client import GROUPME_BOTS_POST_URL, GroupMeClient
from groupmebot.ports.outbound import ChatPort, OutboundMessage, SendResult


def _mock_aiohttp_session(status=202, error=None, calls=None):
    """Return a class that stands in for aiohttp.ClientSession.

    Every post() is recorded in ``calls`` as (url, kwargs).
    """
    if calls is None:
        calls = []

    class FakeResponse:
        def __init__(self):
            self.status = status

        async def __aenter__(self):
            if error is not None:
                raise error
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def post(self, url, **kwargs):
            calls.append((url, kwargs))
            return FakeResponse()

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    return FakeSession


class TestOutboundMessage:
    def test_payload(self):
        assert OutboundMessage("B1", "hi").to_payload() == {"bot_id": "B1", "text": "hi"}


class TestIsConfigured:
    def test_configured(self):
        assert GroupMeClient("B1").is_configured is True

    def test_unconfigured(self):
        assert GroupMeClient("").is_configured is False

    def test_implements_port(self):
        assert isinstance(GroupMeClient("B1"), ChatPort)


class TestSend:
    @pytest.mark.asyncio
    async def test_posts_json_payload(self):
        calls = []
        client = GroupMeClient("B1")
        with patch("groupmebot.adapters.groupme.client.aiohttp.ClientSession",
                   _mock_aiohttp_session(calls=calls)):
            result = await client.send("hi there")
        assert result == SendResult(status=202)
        assert result.ok is True
        assert calls == [(GROUPME_BOTS_POST_URL, {"json": {"bot_id": "B1", "text": "hi there"}})]

    @pytest.mark.asyncio
    async def test_custom_api_url(self):
        calls = []
        client = GroupMeClient("B1", api_url="http://localhost:9999/post")
        with patch("groupmebot.adapters.groupme.client.aiohttp.ClientSession",
                   _mock_aiohttp_session(calls=calls)):
            await client.send("x")
        assert calls[0][0] == "http://localhost:9999/post"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [200, 400, 500])
    async def test_http_status_not_an_error(self, status):
        client = GroupMeClient("B1")
        with patch("groupmebot.adapters.groupme.client.aiohttp.ClientSession",
                   _mock_aiohttp_session(status=status)):
            result = await client.send("hi")
        assert result.ok is True
        assert result.status == status

    @pytest.mark.asyncio
    async def test_transport_error_captured(self):
        client = GroupMeClient("B1")
        with patch("groupmebot.adapters.groupme.client.aiohttp.ClientSession",
                   _mock_aiohttp_session(error=aiohttp.ClientConnectionError("refused"))):
            result = await client.send("hi")
        assert result.ok is False
        assert result.status is None
        assert "refused" in result.error

    @pytest.mark.asyncio
    async def test_os_error_captured(self):
        client = GroupMeClient("B1")
        with patch("groupmebot.adapters.groupme.client.aiohttp.ClientSession",
                   _mock_aiohttp_session(error=ConnectionResetError())):
            result = await client.send("hi")
        assert result.ok is False
        assert result.error == "ConnectionResetError"

    @pytest.mark.asyncio
    async def test_timeout_captured(self):
        client = GroupMeClient("B1")
        with patch("groupmebot.adapters.groupme.client.aiohttp.ClientSession",
                   _mock_aiohttp_session(error=asyncio.TimeoutError())):
            result = await client.send("hi")
        assert result.ok is False
        assert result.error == "TimeoutError"


class TestSendResult:
    def test_defaults(self):
        r = SendResult()
        assert r.status is None
        assert r.error is None
        assert r.ok is True
