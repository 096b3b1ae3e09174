"""Entrypoint da aplicação gchat_relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8443

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from api.routes.googlechat.webhook_runtime import (
    WebhookRuntime,
    get_shutdown_state,
    install_runtime,
    reset_runtime,
)
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_chat_api_client, create_http_client
from app.bootstrap.dependencies import (
    create_channel_provider,
    create_config_bus,
    create_dispatcher,
    create_formatter,
    create_policy_store,
    create_session_engine,
)
from app.coordinators.googlechat.background import drain_side_effects
from app.domain.identity import AgentIdentity
from config.logging import get_logger
from config.settings import (
    get_base_settings,
    get_googlechat_settings,
    get_session_engine_settings,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Logging configurado antes de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Carrega a política e assina mudanças
    - Lê a identidade do agente (uma vez, cacheada)
    - Monta dispatcher e channel provider

    Shutdown:
    - Recusa novos eventos (503) e aguarda os em voo
    - Drena canais laterais pendentes
    - Libera assinatura e cliente HTTP
    """
    service_name = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service_name})
    validate_runtime_settings()
    reset_runtime()

    gchat_settings = get_googlechat_settings()
    engine_settings = get_session_engine_settings()

    http_client = create_http_client(engine_settings)
    session_engine = create_session_engine(engine_settings, http_client)
    policy_store = create_policy_store(gchat_settings)
    config_bus = create_config_bus()
    subscription = policy_store.subscribe(config_bus)
    formatter = create_formatter()

    agent_identity = (
        await session_engine.get_agent_identity() if session_engine is not None else AgentIdentity()
    )
    chat_client = create_chat_api_client(gchat_settings) if gchat_settings.enabled else None

    app.state.session_engine = session_engine
    app.state.policy_store = policy_store
    app.state.config_bus = config_bus
    app.state.agent_identity = agent_identity
    app.state.chat_api_client = chat_client
    app.state.channel_provider = create_channel_provider(
        chat_client=chat_client,
        formatter=formatter,
        policy_store=policy_store,
        agent_identity=agent_identity,
    )

    if session_engine is not None:
        install_runtime(
            WebhookRuntime(
                dispatcher=create_dispatcher(
                    session_engine=session_engine,
                    formatter=formatter,
                    agent_identity=agent_identity,
                ),
                policy_store=policy_store,
            )
        )
    logger.info(
        "app_ready",
        extra={
            "service": service_name,
            "agent_name": agent_identity.name,
            "async_send_enabled": chat_client is not None,
        },
    )

    try:
        yield
    finally:
        logger.info("app_shutting_down", extra={"service": service_name})
        loop = asyncio.get_running_loop()
        deadline = loop.time() + gchat_settings.drain_timeout_seconds

        shutdown = get_shutdown_state()
        shutdown.begin_drain()
        await shutdown.wait_idle(gchat_settings.drain_timeout_seconds)
        await drain_side_effects(timeout_seconds=max(0.0, deadline - loop.time()))

        subscription.close()
        await http_client.aclose()
        logger.info("app_stopped", extra={"service": service_name})


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    gchat_settings = get_googlechat_settings()

    fastapi_app = FastAPI(
        title="gchat_relay",
        description="Adapter do Google Chat para o motor de sessões",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if get_base_settings().is_production else "/docs",
        redoc_url=None,
    )

    fastapi_app.include_router(
        create_api_router(
            webhook_path=gchat_settings.webhook_path,
            googlechat_enabled=gchat_settings.enabled,
        )
    )

    logger.info(
        "app_configured",
        extra={
            "googlechat_enabled": gchat_settings.enabled,
            "webhook_path": gchat_settings.webhook_path,
        },
    )
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    gchat_settings = get_googlechat_settings()
    logger.info("Starting gchat_relay", extra={"port": gchat_settings.webhook_port})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=gchat_settings.webhook_port,
        reload=get_base_settings().debug,
    )


if __name__ == "__main__":
    main()
