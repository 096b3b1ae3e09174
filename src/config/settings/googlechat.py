"""Settings específicas do Google Chat.

Configurações do webhook de interação e da API REST do canal. A política
de acesso (dmPolicy, groupPolicy, ...) não mora aqui: é carregada do YAML
apontado por `policy_config_path` e pode mudar em runtime.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_WEBHOOK_PATH = "/googlechat/events"
DEFAULT_WEBHOOK_PORT = 8443
DEFAULT_DRAIN_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class GoogleChatSettings:
    """Configurações do canal Google Chat.

    Attributes:
        enabled: Canal ativo (rotas do webhook registradas)
        webhook_path: Path HTTP onde o Google entrega os eventos
        webhook_port: Porta do endpoint HTTP
        service_account_key_path: JSON da service account (API REST)
        project_number: Número do projeto Google Cloud
        policy_config_path: YAML com a política do canal
        drain_timeout_seconds: Prazo de drain no shutdown
    """

    enabled: bool = True
    webhook_path: str = DEFAULT_WEBHOOK_PATH
    webhook_port: int = DEFAULT_WEBHOOK_PORT
    service_account_key_path: str = ""
    project_number: str = ""
    policy_config_path: str = ""
    drain_timeout_seconds: float = DEFAULT_DRAIN_TIMEOUT_SECONDS

    @property
    def async_send_enabled(self) -> bool:
        """Envio assíncrono exige credenciais da service account."""
        return bool(self.service_account_key_path)

    def validate(self) -> list[str]:
        """Valida configurações mínimas do canal.

        Credenciais da service account são opcionais: sem elas o canal roda
        só no modo síncrono (webhook) e o /ready reporta chat_api degradado.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.webhook_path.startswith("/") or self.webhook_path.rstrip("/") == "":
            errors.append("GCHAT_WEBHOOK_PATH deve começar com '/' e não ser a raiz")

        if not 0 < self.webhook_port < 65536:
            errors.append("GCHAT_WEBHOOK_PORT fora do intervalo 1-65535")

        if self.drain_timeout_seconds <= 0:
            errors.append("GCHAT_DRAIN_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_googlechat_from_env() -> GoogleChatSettings:
    """Carrega GoogleChatSettings de variáveis de ambiente."""
    return GoogleChatSettings(
        enabled=os.getenv("GCHAT_ENABLED", "true").lower() in ("true", "1", "yes"),
        webhook_path=os.getenv("GCHAT_WEBHOOK_PATH", DEFAULT_WEBHOOK_PATH),
        webhook_port=int(os.getenv("GCHAT_WEBHOOK_PORT", str(DEFAULT_WEBHOOK_PORT))),
        service_account_key_path=(
            os.getenv("GCHAT_SERVICE_ACCOUNT_KEY_PATH", "")
            or os.getenv("GOOGLE_APPLICATION_CREDENTIALS", "")
        ),
        project_number=(
            os.getenv("GCHAT_PROJECT_NUMBER", "") or os.getenv("GOOGLE_PROJECT_NUMBER", "")
        ),
        policy_config_path=os.getenv("GCHAT_POLICY_CONFIG_PATH", ""),
        drain_timeout_seconds=float(
            os.getenv("GCHAT_DRAIN_TIMEOUT_SECONDS", str(DEFAULT_DRAIN_TIMEOUT_SECONDS))
        ),
    )


@lru_cache(maxsize=1)
def get_googlechat_settings() -> GoogleChatSettings:
    """Retorna instância cacheada de GoogleChatSettings."""
    return _load_googlechat_from_env()
