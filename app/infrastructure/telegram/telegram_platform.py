from __future__ import annotations

from typing import Any

from app.application.ports.message_platform import MessagePlatformPort
from app.domain.entities.reply import Reply, ReplyFormat
from app.infrastructure.telegram.telegram_client import TelegramClient


class TelegramPlatform(MessagePlatformPort):
    def __init__(self, client: TelegramClient) -> None:
        self._client = client

    def send_reply(self, chat_id: str, reply: Reply) -> None:
        parse_mode = reply.parse_mode.value if reply.parse_mode is not ReplyFormat.PLAIN else None
        self._client.send_message(
            chat_id=chat_id,
            text=reply.text,
            parse_mode=parse_mode,
            reply_markup=build_inline_keyboard(reply),
        )

    def acknowledge_button_press(self, event_id: str) -> None:
        self._client.answer_callback_query(event_id)

    def register_callback_endpoint(self, url: str) -> None:
        self._client.set_webhook(url)


def build_inline_keyboard(reply: Reply) -> dict[str, Any] | None:
    if not reply.buttons:
        return None
    return {
        "inline_keyboard": [
            [{"text": button.label, "callback_data": button.token} for button in row]
            for row in reply.buttons
        ]
    }
