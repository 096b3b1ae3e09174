"""Fakes do motor de sessão e do formatter para testes do dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from api.payload_builders.googlechat import format_response
from app.domain.identity import AgentIdentity
from utils.errors import SessionEngineError


@dataclass
class InjectCall:
    session_key: str
    text: str
    meta: Any


@dataclass
class FakeSessionEngine:
    """Registra chamadas; `reply` ou `error` controlam o inject."""

    reply: str = "agent reply"
    error: Exception | None = None
    side_channel_error: Exception | None = None
    identity: AgentIdentity = field(default_factory=lambda: AgentIdentity(name="Otto"))
    injected: list[InjectCall] = field(default_factory=list)
    passive: list[InjectCall] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)

    async def inject(self, session_key: str, text: str, meta: Any) -> str:
        self.injected.append(InjectCall(session_key, text, meta))
        if self.error is not None:
            raise self.error
        return self.reply

    async def log_passive_message(self, session_key: str, text: str, meta: Any) -> None:
        self.passive.append(InjectCall(session_key, text, meta))
        if self.side_channel_error is not None:
            raise self.side_channel_error

    async def notify_removed(self, space_id: str) -> None:
        self.removed.append(space_id)
        if self.side_channel_error is not None:
            raise self.side_channel_error

    async def get_agent_identity(self) -> AgentIdentity:
        return self.identity


def failing_engine(status_code: int = 500) -> FakeSessionEngine:
    return FakeSessionEngine(error=SessionEngineError("inject: HTTP 500", status_code))


class PassthroughFormatter:
    """Formatter real (texto/card) exposto via protocolo."""

    def format_response(self, text: str, config: Any, agent_name: str) -> Any:
        return format_response(text, config, agent_name)


class InlineScheduler:
    """Agendador síncrono: guarda as coroutines para o teste aguardar."""

    def __init__(self) -> None:
        self.scheduled: list[tuple[str, Any]] = []

    def __call__(self, name: str, coroutine: Any) -> int:
        self.scheduled.append((name, coroutine))
        return len(self.scheduled)

    async def run_all(self) -> None:
        for _, coroutine in self.scheduled:
            try:
                await coroutine
            except Exception:
                pass

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.scheduled]
