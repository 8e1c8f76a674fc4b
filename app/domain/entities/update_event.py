from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MessageEvent:
    chat_id: str
    user_id: str
    text: str | None


@dataclass(frozen=True)
class ButtonPressEvent:
    event_id: str
    chat_id: str
    user_id: str
    token: str


UpdateEvent = MessageEvent | ButtonPressEvent
