"""Settings do motor de sessão (colaborador de inferência)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class SessionEngineSettings:
    """Configurações de acesso ao motor de sessão.

    Attributes:
        base_url: URL base da API do motor
        token: Bearer token (opcional)
        timeout_seconds: Timeout HTTP; 0 = sem timeout no core
    """

    base_url: str = ""
    token: str = ""
    timeout_seconds: float = 0.0

    @property
    def configured(self) -> bool:
        return bool(self.base_url)

    @property
    def http_timeout(self) -> float | None:
        """Timeout para httpx (None desativa)."""
        return self.timeout_seconds if self.timeout_seconds > 0 else None

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.base_url:
            errors.append("SESSION_ENGINE_URL não configurado")
        elif not self.base_url.startswith(("http://", "https://")):
            errors.append("SESSION_ENGINE_URL deve usar http(s)")

        if self.timeout_seconds < 0:
            errors.append("SESSION_ENGINE_TIMEOUT_SECONDS deve ser >= 0")

        return errors


def _load_session_engine_from_env() -> SessionEngineSettings:
    """Carrega SessionEngineSettings de variáveis de ambiente."""
    return SessionEngineSettings(
        base_url=os.getenv("SESSION_ENGINE_URL", ""),
        token=os.getenv("SESSION_ENGINE_TOKEN", ""),
        timeout_seconds=float(os.getenv("SESSION_ENGINE_TIMEOUT_SECONDS", "0")),
    )


@lru_cache(maxsize=1)
def get_session_engine_settings() -> SessionEngineSettings:
    """Retorna instância cacheada de SessionEngineSettings."""
    return _load_session_engine_from_env()
