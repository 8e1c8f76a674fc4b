from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ReplyFormat(str, Enum):
    MARKDOWN = "Markdown"
    PLAIN = "plain"


@dataclass(frozen=True)
class Button:
    label: str
    token: str


@dataclass(frozen=True)
class Reply:
    text: str
    parse_mode: ReplyFormat = ReplyFormat.PLAIN
    buttons: tuple[tuple[Button, ...], ...] = ()
