"""
Tests for the Bot API adapter, using an in-process httpx transport.
"""

from __future__ import annotations

import json

import httpx
import pytest

from app.application.exceptions import TelegramAPIError
from app.application.use_cases.reply_composer import ReplyComposer
from app.domain.entities.reply import Reply
from app.infrastructure.telegram.telegram_client import TelegramClient
from app.infrastructure.telegram.telegram_platform import TelegramPlatform


def _platform(handler) -> TelegramPlatform:
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return TelegramPlatform(TelegramClient(bot_token="TOKEN", base_url="https://tg.test", http_client=http_client))


def test_send_reply_with_keyboard(catalog):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.url.path, json.loads(request.content)))
        return httpx.Response(200, json={"ok": True, "result": {}})

    _platform(handler).send_reply("100", ReplyComposer(catalog).welcome())

    path, payload = calls[0]
    assert path == "/botTOKEN/sendMessage"
    assert payload["chat_id"] == "100"
    assert payload["parse_mode"] == "Markdown"
    assert payload["reply_markup"]["inline_keyboard"][0] == [
        {"text": "🧪 Start Formulation", "callback_data": "start_formulation"},
        {"text": "📚 Browse Ingredients", "callback_data": "browse_ingredients"},
    ]


def test_plain_reply_omits_parse_mode_and_markup():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(json.loads(request.content))
        return httpx.Response(200, json={"ok": True, "result": {}})

    _platform(handler).send_reply("100", Reply("hello"))

    assert calls == [{"chat_id": "100", "text": "hello"}]


def test_acknowledge_and_register():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.url.path, json.loads(request.content)))
        return httpx.Response(200, json={"ok": True, "result": True})

    platform = _platform(handler)
    platform.acknowledge_button_press("cb1")
    platform.register_callback_endpoint("https://bot.example.com/webhook")

    assert calls == [
        ("/botTOKEN/answerCallbackQuery", {"callback_query_id": "cb1"}),
        ("/botTOKEN/setWebhook", {"url": "https://bot.example.com/webhook"}),
    ]


def test_api_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"ok": False, "error_code": 400, "description": "Bad Request: chat not found"})

    with pytest.raises(TelegramAPIError) as exc_info:
        _platform(handler).send_reply("100", Reply("hello"))

    assert exc_info.value.method == "sendMessage"
    assert exc_info.value.status_code == 400
    assert "chat not found" in str(exc_info.value)


def test_network_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TelegramAPIError):
        _platform(handler).acknowledge_button_press("cb1")


def test_missing_token_fails_without_http_call():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"ok": True, "result": True})

    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    platform = TelegramPlatform(TelegramClient(bot_token="", http_client=http_client))

    with pytest.raises(TelegramAPIError) as exc_info:
        platform.acknowledge_button_press("cb1")

    assert exc_info.value.method == "answerCallbackQuery"
    assert calls == []
