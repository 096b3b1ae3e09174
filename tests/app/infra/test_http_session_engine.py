"""Testes do adapter httpx do motor de sessão (MockTransport)."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from app.domain.identity import AgentIdentity
from app.infra.session_engine import HttpSessionEngineClient
from app.protocols.session_engine import ChannelRef, InjectionMeta
from utils.errors import SessionEngineError

META = InjectionMeta(
    sender="Ana",
    channel=ChannelRef(id="G1", type="googlechat", name="Team"),
)


def _client(
    handler: Callable[[httpx.Request], httpx.Response],
    token: str = "",
) -> HttpSessionEngineClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpSessionEngineClient(
        http_client=http_client,
        base_url="http://engine.local/",
        token=token,
    )


@pytest.mark.asyncio
async def test_inject_posts_to_session_and_returns_text() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"text": "pong"})

    reply = await _client(handler, token="t0k").inject("group:G1", "ping", META)

    assert reply == "pong"
    request = seen[0]
    assert request.method == "POST"
    assert request.url.raw_path == b"/sessions/group%3AG1/inject"
    assert request.headers["Authorization"] == "Bearer t0k"
    assert json.loads(request.content) == {
        "text": "ping",
        "from": "Ana",
        "channel": {"id": "G1", "type": "googlechat", "name": "Team"},
    }


@pytest.mark.asyncio
async def test_inject_http_error_raises_session_engine_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, json={"error": "bad gateway"})

    with pytest.raises(SessionEngineError) as exc_info:
        await _client(handler).inject("dm:U1", "hi", META)

    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_inject_transport_error_raises_session_engine_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(SessionEngineError):
        await _client(handler).inject("dm:U1", "hi", META)


@pytest.mark.asyncio
async def test_inject_missing_text_returns_empty_reply() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    assert await _client(handler).inject("dm:U1", "hi", META) == ""


@pytest.mark.asyncio
async def test_log_passive_message_and_notify_removed() -> None:
    paths: list[tuple[str, dict[str, object]]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append((request.url.raw_path.decode(), json.loads(request.content)))
        return httpx.Response(204)

    client = _client(handler)
    await client.log_passive_message("dm:U1", "quiet", META)
    await client.notify_removed("G9")

    assert paths[0][0] == "/sessions/dm%3AU1/messages"
    assert paths[0][1]["text"] == "quiet"
    assert paths[1] == ("/channels/googlechat/removed", {"spaceId": "G9"})


@pytest.mark.asyncio
async def test_get_agent_identity() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/identity"
        return httpx.Response(200, json={"name": "Otto", "emoji": ":robot:"})

    assert await _client(handler).get_agent_identity() == AgentIdentity("Otto", ":robot:")


@pytest.mark.asyncio
async def test_get_agent_identity_falls_back_to_default() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    assert await _client(handler).get_agent_identity() == AgentIdentity()
