"""Testes do EventDispatcher (Classify -> Authorize -> Handle -> Format)."""

from __future__ import annotations

import pytest

from api.normalizers.googlechat import parse_event
from app.constants.googlechat_replies import EMPTY_REPLY_TEXT, GENERIC_ERROR_TEXT
from app.coordinators.googlechat import EventDispatcher
from app.domain.identity import AgentIdentity
from app.domain.policy_config import GroupOverride, PolicyConfig
from tests.fakes import googlechat_events as events
from tests.fakes.fake_session_engine import (
    FakeSessionEngine,
    InlineScheduler,
    PassthroughFormatter,
    failing_engine,
)


def _dispatcher(
    engine: FakeSessionEngine, scheduler: InlineScheduler | None = None
) -> EventDispatcher:
    return EventDispatcher(
        session_engine=engine,
        formatter=PassthroughFormatter(),
        agent_identity=AgentIdentity(name="Otto"),
        schedule=scheduler or InlineScheduler(),
    )


class TestPlainMessage:
    """Sub-caminho de mensagem comum."""

    @pytest.mark.asyncio
    async def test_dm_default_policy_injects_and_replies(self) -> None:
        engine = FakeSessionEngine(reply="hi there")
        event = parse_event(
            events.message_event(
                text="hello", space=events.dm_space("D1"), sender=events.human("U7")
            )
        )

        envelope = await _dispatcher(engine).dispatch(event, PolicyConfig())

        assert envelope.to_dict() == {"text": "hi there"}
        assert len(engine.injected) == 1
        call = engine.injected[0]
        assert call.session_key == "dm:U7"
        assert call.text == "hello"
        assert call.meta.to_dict() == {
            "from": "Ana",
            "channel": {"id": "D1", "type": "googlechat", "name": "DM with Ana"},
        }

    @pytest.mark.asyncio
    async def test_group_uses_group_key_and_display_name(self) -> None:
        engine = FakeSessionEngine()
        event = parse_event(events.message_event(space=events.group_space("G1", "Team Room")))

        await _dispatcher(engine).dispatch(event, PolicyConfig())

        call = engine.injected[0]
        assert call.session_key == "group:G1"
        assert call.meta.channel.name == "Team Room"

    @pytest.mark.asyncio
    async def test_group_without_display_name_uses_surface_id(self) -> None:
        engine = FakeSessionEngine()
        event = parse_event(events.message_event(space=events.group_space("G5", None)))

        await _dispatcher(engine).dispatch(event, PolicyConfig())

        assert engine.injected[0].meta.channel.name == "G5"

    @pytest.mark.asyncio
    async def test_argument_text_is_stripped_and_preferred(self) -> None:
        engine = FakeSessionEngine()
        event = parse_event(events.message_event(text="@Otto  ping ", argument_text="  ping "))

        await _dispatcher(engine).dispatch(event, PolicyConfig())

        assert engine.injected[0].text == "ping"

    @pytest.mark.asyncio
    async def test_injection_failure_returns_generic_error(self) -> None:
        engine = failing_engine()
        event = parse_event(events.message_event())

        envelope = await _dispatcher(engine).dispatch(event, PolicyConfig())

        assert envelope.to_dict() == {"text": GENERIC_ERROR_TEXT}

    @pytest.mark.asyncio
    async def test_empty_reply_uses_fallback_text(self) -> None:
        engine = FakeSessionEngine(reply="")
        event = parse_event(events.message_event())

        envelope = await _dispatcher(engine).dispatch(event, PolicyConfig())

        assert envelope.text == EMPTY_REPLY_TEXT

    @pytest.mark.asyncio
    async def test_thread_attached_when_threading_enabled(self) -> None:
        engine = FakeSessionEngine(reply="ok")
        event = parse_event(events.message_event(thread="spaces/DM1/threads/T1"))

        envelope = await _dispatcher(engine).dispatch(event, PolicyConfig(threading_mode="thread"))

        assert envelope.to_dict() == {
            "text": "ok",
            "thread": {"threadKey": "spaces/DM1/threads/T1"},
        }

    @pytest.mark.asyncio
    async def test_thread_omitted_when_threading_off(self) -> None:
        engine = FakeSessionEngine(reply="ok")
        event = parse_event(events.message_event(thread="spaces/DM1/threads/T1"))

        envelope = await _dispatcher(engine).dispatch(event, PolicyConfig())

        assert "thread" not in envelope.to_dict()

    @pytest.mark.asyncio
    async def test_rich_format_returns_card(self) -> None:
        engine = FakeSessionEngine(reply="rich")
        event = parse_event(events.message_event())

        envelope = await _dispatcher(engine).dispatch(
            event, PolicyConfig(use_rich_format=True, theme_color="#00ff00")
        )

        body = envelope.to_dict()
        assert "text" not in body
        header = body["cardsV2"][0]["card"]["header"]
        assert header["title"] == "Otto"
        assert header["imageAltText"] == "#00ff00"


class TestSlashCommand:
    """Sub-caminho de slash command."""

    @pytest.mark.asyncio
    async def test_command_name_from_annotation(self) -> None:
        engine = FakeSessionEngine(reply="done")
        event = parse_event(
            events.message_event(
                text="/deploy prod",
                argument_text=" prod ",
                slash_command={"commandId": "3"},
                annotations=[
                    {
                        "type": "SLASH_COMMAND",
                        "slashCommand": {"commandId": "3", "commandName": "deploy"},
                    }
                ],
                thread="spaces/DM1/threads/T1",
            )
        )

        envelope = await _dispatcher(engine).dispatch(event, PolicyConfig(threading_mode="thread"))

        assert engine.injected[0].text == "/deploy prod"
        assert envelope.to_dict() == {"text": "done"}

    @pytest.mark.asyncio
    async def test_command_name_fallback(self) -> None:
        engine = FakeSessionEngine()
        event = parse_event(events.message_event(text="/x", slash_command={"commandId": "9"}))

        await _dispatcher(engine).dispatch(event, PolicyConfig())

        assert engine.injected[0].text == "/command-9"

    @pytest.mark.asyncio
    async def test_command_failure_returns_generic_error(self) -> None:
        engine = failing_engine()
        event = parse_event(events.message_event(slash_command={"commandId": "1"}))

        envelope = await _dispatcher(engine).dispatch(event, PolicyConfig())

        assert envelope.text == GENERIC_ERROR_TEXT


class TestUnauthorizedMessage:
    """Mensagens sem resposta: log passivo em background."""

    @pytest.mark.asyncio
    async def test_allowlist_without_entry_returns_empty_and_logs_passively(self) -> None:
        engine = FakeSessionEngine()
        scheduler = InlineScheduler()
        event = parse_event(events.message_event(text="psst", space=events.group_space("G1")))

        envelope = await _dispatcher(engine, scheduler).dispatch(
            event, PolicyConfig(group_policy="allowlist")
        )
        await scheduler.run_all()

        assert envelope.to_dict() == {}
        assert engine.injected == []
        assert scheduler.names == ["log_passive_message"]
        passive = engine.passive[0]
        assert passive.session_key == "group:G1"
        assert passive.text == "psst"
        assert passive.meta.to_dict()["channel"] == {"id": "G1", "type": "googlechat"}

    @pytest.mark.asyncio
    async def test_allowlisted_group_is_answered(self) -> None:
        engine = FakeSessionEngine()
        event = parse_event(events.message_event(space=events.group_space("G1")))
        config = PolicyConfig(
            group_policy="allowlist",
            per_group_override={"G1": GroupOverride()},
        )

        envelope = await _dispatcher(engine).dispatch(event, config)

        assert envelope.text == "agent reply"

    @pytest.mark.asyncio
    async def test_bot_message_ignored(self) -> None:
        engine = FakeSessionEngine()
        scheduler = InlineScheduler()
        event = parse_event(events.message_event(sender=events.bot()))

        envelope = await _dispatcher(engine, scheduler).dispatch(event, PolicyConfig())
        await scheduler.run_all()

        assert envelope.is_empty
        assert engine.injected == []

    @pytest.mark.asyncio
    async def test_passive_log_failure_does_not_change_reply(self) -> None:
        engine = FakeSessionEngine(side_channel_error=RuntimeError("down"))
        scheduler = InlineScheduler()
        event = parse_event(events.message_event())

        envelope = await _dispatcher(engine, scheduler).dispatch(
            event, PolicyConfig(dm_policy="closed")
        )
        await scheduler.run_all()

        assert envelope.is_empty

    @pytest.mark.asyncio
    async def test_scheduler_failure_is_swallowed(self) -> None:
        engine = FakeSessionEngine()

        def _broken_schedule(name: str, coroutine: object) -> int:
            coroutine.close()  # type: ignore[attr-defined]
            raise RuntimeError("no loop")

        dispatcher = EventDispatcher(
            session_engine=engine,
            formatter=PassthroughFormatter(),
            schedule=_broken_schedule,
        )
        event = parse_event(events.message_event())

        envelope = await dispatcher.dispatch(event, PolicyConfig(dm_policy="closed"))

        assert envelope.is_empty


class TestMembershipEvents:
    """ADDED_TO_SPACE e REMOVED_FROM_SPACE."""

    @pytest.mark.asyncio
    async def test_added_returns_welcome(self) -> None:
        engine = FakeSessionEngine()
        event = parse_event(events.added_event(events.group_space("G1", "Team Room")))

        envelope = await _dispatcher(engine).dispatch(event, PolicyConfig())

        assert envelope.text == (
            "Hello! I'm Otto. I'm ready to chat in Team Room. "
            "Send me a message or use a slash command to get started."
        )
        assert engine.injected == []

    @pytest.mark.asyncio
    async def test_added_without_display_name(self) -> None:
        event = parse_event(events.added_event(events.dm_space()))

        envelope = await _dispatcher(FakeSessionEngine()).dispatch(event, PolicyConfig())

        assert envelope.text is not None
        assert "ready to chat in this space." in envelope.text

    @pytest.mark.asyncio
    async def test_added_with_mention_goes_to_message_path(self) -> None:
        engine = FakeSessionEngine(reply="answer")
        payload = events.message_event(
            text="@Otto what's up",
            argument_text="what's up",
            space=events.group_space("G1"),
            event_type="ADDED_TO_SPACE",
        )
        event = parse_event(payload)

        # allowlist vazia: a entrada via menção é autorizada pela tabela
        envelope = await _dispatcher(engine).dispatch(
            event, PolicyConfig(group_policy="allowlist")
        )

        assert envelope.text == "answer"
        assert engine.injected[0].text == "what's up"
        assert engine.injected[0].session_key == "group:G1"

    @pytest.mark.asyncio
    async def test_added_welcome_uses_card_when_rich(self) -> None:
        event = parse_event(events.added_event())

        envelope = await _dispatcher(FakeSessionEngine()).dispatch(
            event, PolicyConfig(use_rich_format=True)
        )

        assert envelope.cards is not None
        assert envelope.text is None

    @pytest.mark.asyncio
    async def test_removed_returns_empty_and_notifies(self) -> None:
        engine = FakeSessionEngine()
        scheduler = InlineScheduler()
        event = parse_event(events.removed_event(events.group_space("G4")))

        envelope = await _dispatcher(engine, scheduler).dispatch(event, PolicyConfig())
        await scheduler.run_all()

        assert envelope.to_dict() == {}
        assert scheduler.names == ["notify_removed"]
        assert engine.removed == ["G4"]

    @pytest.mark.asyncio
    async def test_removed_notification_failure_ignored(self) -> None:
        engine = FakeSessionEngine(side_channel_error=RuntimeError("boom"))
        scheduler = InlineScheduler()
        event = parse_event(events.removed_event())

        envelope = await _dispatcher(engine, scheduler).dispatch(event, PolicyConfig())
        await scheduler.run_all()

        assert envelope.is_empty


class TestCardClicked:
    """Cliques em card."""

    @pytest.mark.asyncio
    async def test_action_acknowledged_with_update(self) -> None:
        engine = FakeSessionEngine()
        event = parse_event(events.card_clicked_event("approve"))

        envelope = await _dispatcher(engine).dispatch(event, PolicyConfig(dm_policy="closed"))

        assert envelope.to_dict() == {
            "text": 'Action "approve" received.',
            "actionResponse": {"type": "UPDATE_MESSAGE"},
        }
        assert engine.injected == []

    @pytest.mark.asyncio
    async def test_without_action_returns_empty(self) -> None:
        event = parse_event(events.card_clicked_event(None))

        envelope = await _dispatcher(FakeSessionEngine()).dispatch(event, PolicyConfig())

        assert envelope.is_empty


def test_default_agent_identity() -> None:
    dispatcher = EventDispatcher(
        session_engine=FakeSessionEngine(),
        formatter=PassthroughFormatter(),
        schedule=InlineScheduler(),
    )
    assert dispatcher.agent_identity == AgentIdentity()
