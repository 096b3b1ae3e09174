"""Infra do Google Chat (API REST para envio assíncrono)."""

from app.infra.googlechat.chat_api_client import CHAT_BOT_SCOPE, GoogleChatApiClient

__all__ = ["CHAT_BOT_SCOPE", "GoogleChatApiClient"]
