"""Testes do channel provider (registros e envio assíncrono)."""

from __future__ import annotations

from typing import Any

import pytest

from app.coordinators.googlechat import (
    ChannelCommand,
    ChannelMessageParser,
    GoogleChatChannelProvider,
)
from app.domain.identity import AgentIdentity
from app.domain.policy_config import PolicyConfig
from app.infra.stores import PolicyConfigStore
from tests.fakes.fake_session_engine import PassthroughFormatter
from utils.errors import ChatApiError


class FakeChatApiClient:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.sent: list[tuple[str, dict[str, Any]]] = []

    async def create_message(self, space_name: str, body: dict[str, Any]) -> dict[str, Any]:
        self.sent.append((space_name, body))
        if self.error is not None:
            raise self.error
        return {"name": f"{space_name}/messages/1"}


def _provider(
    chat_client: FakeChatApiClient | None,
    config: PolicyConfig | None = None,
) -> GoogleChatChannelProvider:
    return GoogleChatChannelProvider(
        chat_client=chat_client,
        formatter=PassthroughFormatter(),
        policy_store=PolicyConfigStore(config),
        agent_identity=AgentIdentity(name="Otto"),
    )


class TestRegistries:
    """Comandos e parsers registrados por outros componentes."""

    def test_provider_identity(self) -> None:
        provider = _provider(None)
        assert provider.id == "googlechat"
        assert provider.get_bot_username() == "Otto"

    def test_register_and_unregister_command(self) -> None:
        provider = _provider(None)
        provider.register_command(ChannelCommand(name="status", description="Show status"))
        provider.register_command(ChannelCommand(name="help"))

        assert [c.name for c in provider.get_commands()] == ["status", "help"]

        provider.unregister_command("status")
        provider.unregister_command("missing")
        assert [c.name for c in provider.get_commands()] == ["help"]

    def test_register_command_replaces_same_name(self) -> None:
        provider = _provider(None)
        provider.register_command(ChannelCommand(name="status", description="v1"))
        provider.register_command(ChannelCommand(name="status", description="v2"))

        assert [c.description for c in provider.get_commands()] == ["v2"]

    def test_message_parsers(self) -> None:
        provider = _provider(None)
        provider.add_message_parser(ChannelMessageParser(id="ticket", pattern=r"#\d+"))

        assert [p.id for p in provider.get_message_parsers()] == ["ticket"]

        provider.remove_message_parser("ticket")
        assert provider.get_message_parsers() == []


class TestSend:
    """Envio assíncrono via API REST."""

    @pytest.mark.asyncio
    async def test_send_qualifies_bare_space_id(self) -> None:
        client = FakeChatApiClient()

        await _provider(client).send("AAA", "hello")

        assert client.sent == [("spaces/AAA", {"text": "hello"})]

    @pytest.mark.asyncio
    async def test_send_keeps_qualified_space_name(self) -> None:
        client = FakeChatApiClient()

        await _provider(client).send("spaces/BBB", "hello")

        assert client.sent[0][0] == "spaces/BBB"

    @pytest.mark.asyncio
    async def test_send_truncates_and_uses_card_when_rich(self) -> None:
        client = FakeChatApiClient()

        await _provider(client, PolicyConfig(use_rich_format=True)).send("AAA", "x" * 5000)

        body = client.sent[0][1]
        text = body["cardsV2"][0]["card"]["sections"][0]["widgets"][0]["textParagraph"]["text"]
        assert len(text) == 4096
        assert text.endswith("...")

    @pytest.mark.asyncio
    async def test_send_without_client_logs_and_returns(self) -> None:
        await _provider(None).send("AAA", "hello")

    @pytest.mark.asyncio
    async def test_send_failure_is_reraised(self) -> None:
        client = FakeChatApiClient(error=ChatApiError("create_message: HTTP 403"))

        with pytest.raises(ChatApiError):
            await _provider(client).send("AAA", "hello")
