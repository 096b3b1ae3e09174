"""Client concreto da API REST do Google Chat (envio assíncrono).

Autentica com service account (escopo chat.bot). A biblioteca do Google é
síncrona: as chamadas rodam em thread via asyncio.to_thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.observability import get_correlation_id
from utils.errors import ChatApiError

logger = logging.getLogger(__name__)

_COMPONENT = "google_chat_api_client"
CHAT_BOT_SCOPE = "https://www.googleapis.com/auth/chat.bot"


class GoogleChatApiClient:
    """Implementação de ChatApiClientProtocol usando a API v1 do Google Chat."""

    __slots__ = ("_service",)

    def __init__(self, *, service: Any) -> None:
        self._service = service

    @classmethod
    def from_service_account_file(cls, key_path: str) -> GoogleChatApiClient:
        """Cria o client a partir do JSON da service account."""
        credentials = service_account.Credentials.from_service_account_file(
            key_path,
            scopes=[CHAT_BOT_SCOPE],
        )
        service = build("chat", "v1", credentials=credentials, cache_discovery=False)
        return cls(service=service)

    async def create_message(self, space_name: str, body: dict[str, Any]) -> dict[str, Any]:
        """Cria mensagem no espaço (spaces/XXX).

        Raises:
            ChatApiError: Se a API recusar ou a chamada falhar.
        """
        try:
            return await asyncio.to_thread(self._create_message_sync, space_name, body)
        except HttpError as exc:
            self._log_error(action="create_message", exc=exc)
            raise ChatApiError(f"create_message: HTTP {_http_status(exc)}") from exc
        except Exception as exc:
            self._log_error(action="create_message", exc=exc)
            raise ChatApiError(f"create_message: {type(exc).__name__}") from exc

    def _create_message_sync(self, space_name: str, body: dict[str, Any]) -> dict[str, Any]:
        request = self._service.spaces().messages().create(parent=space_name, body=body)
        return request.execute()

    def _log_error(self, *, action: str, exc: Exception) -> None:
        extra: dict[str, Any] = {
            "component": _COMPONENT,
            "action": action,
            "result": "error",
            "error_type": type(exc).__name__,
            "correlation_id": get_correlation_id(),
        }
        if isinstance(exc, HttpError):
            extra["status_code"] = _http_status(exc)
        logger.error("google_chat_api_error", extra=extra)


def _http_status(exc: HttpError) -> int | None:
    resp = getattr(exc, "resp", None)
    status = getattr(resp, "status", None)
    return int(status) if status is not None else None
