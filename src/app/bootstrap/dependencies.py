"""Factories de dependências: conecta implementações concretas aos protocolos.

O app/ não importa api/; o formatter concreto (payload builders) é
injetado aqui, no composition root.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.payload_builders.googlechat import GoogleChatResponseFormatter
from app.coordinators.googlechat import EventDispatcher, GoogleChatChannelProvider
from app.infra.config import ConfigChangeBus, load_policy_config
from app.infra.session_engine import HttpSessionEngineClient
from app.infra.stores import PolicyConfigStore

if TYPE_CHECKING:
    import httpx

    from app.domain.identity import AgentIdentity
    from app.protocols.chat_api import ChatApiClientProtocol
    from app.protocols.formatter import ResponseFormatterProtocol
    from app.protocols.session_engine import SessionEngineProtocol
    from config.settings import GoogleChatSettings, SessionEngineSettings

logger = logging.getLogger(__name__)


def create_session_engine(
    settings: SessionEngineSettings,
    http_client: httpx.AsyncClient,
) -> HttpSessionEngineClient | None:
    """Cria o cliente do motor de sessão (None quando não configurado)."""
    if not settings.configured:
        logger.warning("session_engine_not_configured")
        return None
    return HttpSessionEngineClient(
        http_client=http_client,
        base_url=settings.base_url,
        token=settings.token,
    )


def create_policy_store(settings: GoogleChatSettings) -> PolicyConfigStore:
    """Carrega a política inicial do YAML configurado."""
    return PolicyConfigStore(load_policy_config(settings.policy_config_path or None))


def create_config_bus() -> ConfigChangeBus:
    return ConfigChangeBus()


def create_formatter() -> ResponseFormatterProtocol:
    return GoogleChatResponseFormatter()


def create_dispatcher(
    *,
    session_engine: SessionEngineProtocol,
    formatter: ResponseFormatterProtocol,
    agent_identity: AgentIdentity,
) -> EventDispatcher:
    return EventDispatcher(
        session_engine=session_engine,
        formatter=formatter,
        agent_identity=agent_identity,
    )


def create_channel_provider(
    *,
    chat_client: ChatApiClientProtocol | None,
    formatter: ResponseFormatterProtocol,
    policy_store: PolicyConfigStore,
    agent_identity: AgentIdentity,
) -> GoogleChatChannelProvider:
    return GoogleChatChannelProvider(
        chat_client=chat_client,
        formatter=formatter,
        policy_store=policy_store,
        agent_identity=agent_identity,
    )
