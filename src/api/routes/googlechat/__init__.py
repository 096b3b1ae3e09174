"""Rotas HTTP do Google Chat (montadas no path configurado do webhook)."""

from api.routes.googlechat.webhook import router

__all__ = ["router"]
