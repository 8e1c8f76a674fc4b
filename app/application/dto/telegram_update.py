from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from app.domain.entities.update_event import ButtonPressEvent, MessageEvent, UpdateEvent


class TelegramUpdateDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    update_id: int | None = None
    message: dict[str, Any] | None = None
    callback_query: dict[str, Any] | None = None

    def extract_event(self) -> UpdateEvent | None:
        """
        Reduce the Bot API update to the event the dispatcher understands.

        Missing nested fields raise KeyError; the webhook turns that into a 500.
        Updates that are neither a message nor a callback query yield None.
        """
        if self.message is not None:
            message = self.message
            text = message.get("text")
            return MessageEvent(
                chat_id=str(message["chat"]["id"]),
                user_id=str(message["from"]["id"]),
                text=str(text) if text is not None else None,
            )

        if self.callback_query is not None:
            query = self.callback_query
            return ButtonPressEvent(
                event_id=str(query["id"]),
                chat_id=str(query["message"]["chat"]["id"]),
                user_id=str(query["from"]["id"]),
                token=str(query.get("data") or ""),
            )

        return None
