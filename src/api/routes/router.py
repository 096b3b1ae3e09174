"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router(webhook_path="/googlechat/events"))
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.googlechat import router as googlechat_router
from api.routes.health.router import router as health_router


def create_api_router(
    *,
    webhook_path: str | None = None,
    googlechat_enabled: bool = True,
) -> APIRouter:
    """Cria router principal com os sub-routers registrados.

    Args:
        webhook_path: Path do webhook de eventos (default das settings).
        googlechat_enabled: Registra as rotas do canal.

    Returns:
        APIRouter configurado.
    """
    api_router = APIRouter()

    # Health checks na raiz (/health, /ready)
    api_router.include_router(health_router, tags=["health"])

    if googlechat_enabled:
        if webhook_path is None:
            from config.settings import DEFAULT_WEBHOOK_PATH

            webhook_path = DEFAULT_WEBHOOK_PATH
        api_router.include_router(
            googlechat_router,
            prefix=webhook_path.rstrip("/"),
            tags=["googlechat"],
        )

    return api_router
