"""
Tests for decoding Telegram updates into dispatcher events.
"""

from __future__ import annotations

import pytest

from app.application.dto.telegram_update import TelegramUpdateDTO
from app.domain.entities.update_event import ButtonPressEvent, MessageEvent


def test_message_update():
    event = TelegramUpdateDTO.model_validate(
        {
            "update_id": 1,
            "message": {"message_id": 5, "chat": {"id": 100}, "from": {"id": 7}, "text": "/start"},
        }
    ).extract_event()

    assert event == MessageEvent(chat_id="100", user_id="7", text="/start")


def test_message_without_text():
    event = TelegramUpdateDTO.model_validate(
        {"message": {"chat": {"id": 100}, "from": {"id": 7}, "sticker": {}}}
    ).extract_event()

    assert event == MessageEvent(chat_id="100", user_id="7", text=None)


def test_callback_query_update():
    event = TelegramUpdateDTO.model_validate(
        {
            "update_id": 2,
            "callback_query": {
                "id": "cbq-1",
                "from": {"id": 7},
                "message": {"chat": {"id": 100}},
                "data": "product_serum",
            },
        }
    ).extract_event()

    assert event == ButtonPressEvent(event_id="cbq-1", chat_id="100", user_id="7", token="product_serum")


def test_other_updates_are_ignored():
    assert TelegramUpdateDTO.model_validate({"update_id": 3, "edited_message": {}}).extract_event() is None


def test_malformed_message_raises():
    with pytest.raises(KeyError):
        TelegramUpdateDTO.model_validate({"message": {"text": "hi"}}).extract_event()
