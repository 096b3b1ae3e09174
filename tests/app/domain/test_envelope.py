"""Testes de serialização do ResponseEnvelope."""

from __future__ import annotations

from app.constants.googlechat import ActionResponseType
from app.domain.envelope import ResponseEnvelope


def test_empty_envelope_serializes_to_empty_object() -> None:
    envelope = ResponseEnvelope.empty()
    assert envelope.is_empty
    assert envelope.to_dict() == {}


def test_text_with_thread() -> None:
    envelope = ResponseEnvelope(text="hi").with_thread("spaces/S/threads/T")
    assert envelope.to_dict() == {"text": "hi", "thread": {"threadKey": "spaces/S/threads/T"}}


def test_with_thread_none_is_noop() -> None:
    envelope = ResponseEnvelope(text="hi")
    assert envelope.with_thread(None) is envelope


def test_cards_and_action_response() -> None:
    card = {"cardId": "c1", "card": {}}
    envelope = ResponseEnvelope(
        cards=(card,),
        action_response=ActionResponseType.UPDATE_MESSAGE,
    )
    assert envelope.to_dict() == {
        "cardsV2": [card],
        "actionResponse": {"type": "UPDATE_MESSAGE"},
    }
