"""Modelos de domínio para eventos de interação do Google Chat.

O payload cru (dict) é convertido em dataclasses imutáveis na borda
(api/normalizers/googlechat); daqui para dentro nenhum código inspeciona
dicts do Google diretamente.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.constants.googlechat import EventKind, SurfaceKind


@dataclass(frozen=True, slots=True)
class ConversationSurface:
    """Superfície de conversa (DM ou grupo) derivada de `space`.

    Atributos:
        id: ID do espaço sem o prefixo `spaces/`
        name: Nome completo do recurso (ex.: spaces/AAA)
        display_name: Nome exibido do espaço (pode ser vazio em DMs)
        kind: DM ou GROUP
    """

    id: str
    name: str
    display_name: str | None
    kind: SurfaceKind

    @property
    def is_dm(self) -> bool:
        return self.kind is SurfaceKind.DM


@dataclass(frozen=True, slots=True)
class Sender:
    """Autor de uma mensagem ou usuário que disparou o evento."""

    id: str
    name: str
    display_name: str
    is_bot: bool = False


@dataclass(frozen=True, slots=True)
class SlashCommandAnnotation:
    """Anotação SLASH_COMMAND presente na mensagem."""

    command_id: str
    command_name: str | None = None


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """Mensagem recebida em um evento MESSAGE (ou ADDED_TO_SPACE com menção).

    Atributos:
        name: Recurso da mensagem (spaces/X/messages/Y)
        text: Texto bruto, incluindo a menção ao bot
        argument_text: Texto sem o prefixo de @menção (quando presente)
        sender: Autor da mensagem
        surface: Superfície onde a mensagem foi enviada
        thread_name: Recurso da thread (spaces/X/threads/Z), se houver
        slash_command_id: ID do slash command invocado, se houver
        annotations: Anotações de slash command encontradas
    """

    name: str
    text: str
    sender: Sender
    surface: ConversationSurface
    argument_text: str | None = None
    thread_name: str | None = None
    slash_command_id: str | None = None
    annotations: tuple[SlashCommandAnnotation, ...] = ()

    @property
    def is_slash_command(self) -> bool:
        return self.slash_command_id is not None


@dataclass(frozen=True, slots=True)
class CardAction:
    """Ação disparada por clique em card."""

    method_name: str
    parameters: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class IncomingEvent:
    """União discriminada por `kind` sobre os quatro tipos de evento.

    Os sub-registros são opcionais e dependem do tipo; um ADDED_TO_SPACE
    pode trazer `message` quando o bot é adicionado via @menção.
    """

    kind: EventKind
    event_time: str = ""
    message: ChatMessage | None = None
    space: ConversationSurface | None = None
    user: Sender | None = None
    action: CardAction | None = None

    @property
    def surface(self) -> ConversationSurface | None:
        """Superfície efetiva: a da mensagem tem precedência sobre a do evento."""
        if self.message is not None:
            return self.message.surface
        return self.space
