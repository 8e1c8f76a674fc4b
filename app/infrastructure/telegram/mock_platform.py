from __future__ import annotations

import logging

from app.application.ports.message_platform import MessagePlatformPort
from app.domain.entities.reply import Reply


class MockTelegramPlatform(MessagePlatformPort):
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def send_reply(self, chat_id: str, reply: Reply) -> None:
        self._logger.info("Mock send to Telegram", extra={"chat_id": chat_id, "reply_text": reply.text})

    def acknowledge_button_press(self, event_id: str) -> None:
        self._logger.info("Mock callback acknowledgment", extra={"event_id": event_id})

    def register_callback_endpoint(self, url: str) -> None:
        self._logger.info("Mock webhook registration: %s", url)
