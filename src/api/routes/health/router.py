"""Endpoints de health check."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.routes.googlechat.webhook_runtime import get_runtime, get_shutdown_state
from config.settings import get_base_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: o processo está de pé."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: fora de drain, com motor de sessão e runtime prontos."""
    shutdown_check = _check_shutdown()
    engine_check = _check_session_engine(getattr(request.app.state, "session_engine", None))
    runtime_check = _check_runtime()
    chat_api_check = _check_chat_api(getattr(request.app.state, "chat_api_client", None))

    ready = all(
        check.status == "ok" for check in (shutdown_check, engine_check, runtime_check)
    )
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "shutdown": shutdown_check.as_dict(),
            "session_engine": engine_check.as_dict(),
            "webhook_runtime": runtime_check.as_dict(),
            "chat_api": chat_api_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_shutdown() -> DependencyCheck:
    if get_shutdown_state().draining:
        return DependencyCheck(status="failed", error="draining")
    return DependencyCheck(status="ok")


def _check_session_engine(session_engine: Any | None) -> DependencyCheck:
    if session_engine is None:
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")


def _check_runtime() -> DependencyCheck:
    if get_runtime() is None:
        return DependencyCheck(status="failed", error="not_installed")
    return DependencyCheck(status="ok")


def _check_chat_api(chat_api_client: Any | None) -> DependencyCheck:
    # Sem API só o envio assíncrono fica indisponível
    if chat_api_client is None:
        return DependencyCheck(status="degraded", error="not_configured")
    return DependencyCheck(status="ok")
