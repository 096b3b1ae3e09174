"""Store em memória do snapshot vigente da política do canal.

Invariantes:
    - O snapshot nunca é mutado: mudanças trocam a referência inteira.
    - Cada request lê o snapshot uma única vez na entrada (snapshot()).
    - Valor inválido vindo de notificação é descartado; o anterior permanece.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.policy_config import PolicyConfig
from app.infra.config.policy_loader import POLICY_CONFIG_KEY, parse_policy_config
from utils.errors import PolicyConfigError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.infra.config.change_bus import ConfigChangeBus

logger = logging.getLogger(__name__)


class ConfigSubscription:
    """Handle cancelável de uma assinatura de mudança de configuração.

    Adquirido no startup e liberado no shutdown (close() ou `with`).
    """

    __slots__ = ("_unsubscribe",)

    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe: Callable[[], None] | None = unsubscribe

    @property
    def active(self) -> bool:
        return self._unsubscribe is not None

    def close(self) -> None:
        """Cancela a assinatura (idempotente)."""
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()

    def __enter__(self) -> ConfigSubscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class PolicyConfigStore:
    """Mantém a política vigente e a substitui atomicamente."""

    def __init__(self, initial: PolicyConfig | None = None) -> None:
        self._current = initial or PolicyConfig()

    def snapshot(self) -> PolicyConfig:
        """Snapshot consistente para um request."""
        return self._current

    def replace(self, new_value: Any) -> PolicyConfig:
        """Valida e troca o snapshot (uma única atribuição).

        Raises:
            PolicyConfigError: Se o novo valor for inválido.
        """
        config = parse_policy_config(new_value)
        self._current = config
        logger.info(
            "policy_config_updated",
            extra={
                "channel": "googlechat",
                "dm_policy": config.dm_policy,
                "group_policy": config.group_policy,
                "use_rich_format": config.use_rich_format,
            },
        )
        return config

    def subscribe(self, bus: ConfigChangeBus, key: str = POLICY_CONFIG_KEY) -> ConfigSubscription:
        """Assina mudanças da chave no barramento."""
        return ConfigSubscription(bus.on(key, self._on_change))

    def _on_change(self, new_value: Any) -> None:
        try:
            self.replace(new_value)
        except PolicyConfigError as exc:
            logger.warning(
                "policy_config_rejected",
                extra={"channel": "googlechat", "error": str(exc)},
            )
