from __future__ import annotations

import logging

from app.application.ports.message_platform import MessagePlatformPort
from app.domain.entities.reply import Reply


class SendReplyUseCase:
    def __init__(self, platform: MessagePlatformPort) -> None:
        self._platform = platform
        self._logger = logging.getLogger(__name__)

    def execute(self, chat_id: str, reply: Reply) -> None:
        """Hand a reply to the transport. Transport errors propagate to the caller."""
        self._logger.debug("Sending %s reply", reply.parse_mode.value, extra={"chat_id": chat_id})
        self._platform.send_reply(chat_id=chat_id, reply=reply)
