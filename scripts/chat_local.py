#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP, no Telegram).

Usage:
  python3 scripts/chat_local.py

What it does:
- Keeps a stable user id for the session
- Sends typed text through the same HandleIncomingUpdateUseCase the webhook uses
- Prints every reply with its parse mode and button layout
- `:press <token>` simulates a button press, `:state` shows the session, `:quit` exits
"""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.ports.message_platform import MessagePlatformPort
from app.application.use_cases.handle_incoming_update import HandleIncomingUpdateUseCase
from app.application.use_cases.send_reply import SendReplyUseCase
from app.domain.entities.reply import Reply
from app.domain.entities.update_event import ButtonPressEvent, MessageEvent
from app.infrastructure.knowledge.ingredient_catalog_store import IngredientCatalogStore
from app.infrastructure.store.memory_store import MemorySessionStore


class ConsolePlatform(MessagePlatformPort):
    def send_reply(self, chat_id: str, reply: Reply) -> None:
        print(f"\n--- Reply ({reply.parse_mode.value}) ---")
        print(reply.text)
        for row in reply.buttons:
            print("  " + "   ".join(f"[{b.label} -> {b.token}]" for b in row))
        print("-" * 60)

    def acknowledge_button_press(self, event_id: str) -> None:
        print(f"(ack {event_id})")

    def register_callback_endpoint(self, url: str) -> None:
        print(f"(webhook {url})")


def _print_header(user_id: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"user_id: {user_id}")
    print("Type a message or command and press Enter.")
    print("Harness commands: :press <token>, :state, :quit")
    print("-" * 60)


def main() -> None:
    user_id = os.getenv("CHAT_USER_ID", "local_user_1")
    platform = ConsolePlatform()
    store = MemorySessionStore()
    use_case = HandleIncomingUpdateUseCase(
        store=store,
        catalog=IngredientCatalogStore(),
        platform=platform,
        send_reply=SendReplyUseCase(platform=platform),
    )
    _print_header(user_id)

    while True:
        try:
            user_text = input("\n> ")
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        # Multi-line compatibility input: separate ingredients with " | "
        user_text = user_text.replace(" | ", "\n").strip()
        if not user_text:
            continue

        if user_text in (":quit", ":exit"):
            print("Bye!")
            return
        if user_text == ":state":
            session = store.get_or_create(user_id)
            print(f"current_step: {session.current_step.value}")
            print(f"product_type: {session.formulation.product_type}")
            continue
        if user_text.startswith(":press "):
            token = user_text.split(" ", 1)[1].strip()
            use_case.handle(
                ButtonPressEvent(event_id=f"local_{int(time.time() * 1000)}", chat_id=user_id, user_id=user_id, token=token)
            )
            continue

        use_case.handle(MessageEvent(chat_id=user_id, user_id=user_id, text=user_text))


if __name__ == "__main__":
    main()
