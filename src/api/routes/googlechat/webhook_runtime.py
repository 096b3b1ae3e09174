"""Estado de runtime do webhook Google Chat.

Guarda o dispatcher e o store de política instalados pelo lifespan e o
estado de shutdown compartilhado por todos os requests do processo.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.coordinators.googlechat.dispatcher import EventDispatcher
    from app.infra.stores.policy_config_store import PolicyConfigStore

logger = logging.getLogger(__name__)


class ShutdownState:
    """Portão de entrada de requests e contagem dos que estão em voo.

    Depois de begin_drain(), try_enter() recusa novos requests; os que já
    passaram pelo portão terminam normalmente e wait_idle() aguarda por eles.
    """

    def __init__(self) -> None:
        self._draining = False
        self._in_flight = 0
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def draining(self) -> bool:
        return self._draining

    @property
    def in_flight(self) -> int:
        return self._in_flight

    def try_enter(self) -> bool:
        if self._draining:
            return False
        self._in_flight += 1
        self._idle.clear()
        return True

    def leave(self) -> None:
        self._in_flight = max(0, self._in_flight - 1)
        if self._in_flight == 0:
            self._idle.set()

    def begin_drain(self) -> None:
        if not self._draining:
            logger.info(
                "webhook_drain_started",
                extra={"channel": "googlechat", "in_flight": self._in_flight},
            )
        self._draining = True

    async def wait_idle(self, timeout_seconds: float) -> bool:
        """Aguarda os requests em voo; retorna False se o prazo estourar."""
        try:
            await asyncio.wait_for(self._idle.wait(), timeout=timeout_seconds)
        except TimeoutError:
            logger.warning(
                "webhook_drain_timeout",
                extra={"channel": "googlechat", "in_flight": self._in_flight},
            )
            return False
        return True


@dataclass(frozen=True, slots=True)
class WebhookRuntime:
    """Dependências do handler, montadas no startup."""

    dispatcher: EventDispatcher
    policy_store: PolicyConfigStore


_runtime: WebhookRuntime | None = None
_shutdown_state = ShutdownState()


def install_runtime(runtime: WebhookRuntime) -> None:
    global _runtime
    _runtime = runtime


def get_runtime() -> WebhookRuntime | None:
    return _runtime


def get_shutdown_state() -> ShutdownState:
    return _shutdown_state


def reset_runtime() -> None:
    """Volta ao estado inicial (novo processo/testes)."""
    global _runtime, _shutdown_state
    _runtime = None
    _shutdown_state = ShutdownState()
