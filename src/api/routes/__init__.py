"""Rotas HTTP da API.

- routes/googlechat/: webhook de eventos do Google Chat
- routes/health/: liveness e readiness
- router.py: registra os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
