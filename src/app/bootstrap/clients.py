"""Factories de clientes externos: httpx e API REST do Google Chat."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from app.infra.googlechat import GoogleChatApiClient

if TYPE_CHECKING:
    from config.settings import GoogleChatSettings, SessionEngineSettings

logger = logging.getLogger(__name__)


def create_http_client(settings: SessionEngineSettings) -> httpx.AsyncClient:
    """Cria o AsyncClient compartilhado (fechado no shutdown do app).

    Sem SESSION_ENGINE_TIMEOUT_SECONDS a injeção não tem timeout: a
    latência do motor é responsabilidade dele.
    """
    client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout))
    logger.info(
        "http_client_created",
        extra={"timeout_seconds": settings.http_timeout},
    )
    return client


def create_chat_api_client(settings: GoogleChatSettings) -> GoogleChatApiClient | None:
    """Cria o cliente da API REST se houver credenciais.

    Falha ao ler as credenciais não impede o boot: o webhook síncrono
    segue funcionando, só o envio assíncrono fica indisponível.
    """
    if not settings.service_account_key_path:
        logger.info("chat_api_client_disabled", extra={"reason": "no_credentials"})
        return None

    try:
        client = GoogleChatApiClient.from_service_account_file(settings.service_account_key_path)
    except Exception as exc:
        logger.warning(
            "chat_api_client_not_ready",
            extra={"error_type": type(exc).__name__},
        )
        return None

    logger.info("chat_api_client_created", extra={"project_number": settings.project_number})
    return client
