"""Exceções de domínio para falhas de colaboradores externos."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class SessionEngineError(InfrastructureError):
    """Falha ao chamar o motor de sessão (inject, log, identidade)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ChatApiError(InfrastructureError):
    """Falha ao chamar a API REST do Google Chat."""


class PolicyConfigError(ValueError):
    """Configuração de política inválida (arquivo ou notificação)."""
