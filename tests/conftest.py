from __future__ import annotations

import pytest

from app.application.ports.message_platform import MessagePlatformPort
from app.application.use_cases.handle_incoming_update import HandleIncomingUpdateUseCase
from app.application.use_cases.send_reply import SendReplyUseCase
from app.domain.entities.reply import Reply
from app.infrastructure.knowledge.ingredient_catalog_store import IngredientCatalogStore
from app.infrastructure.store.memory_store import MemorySessionStore


class RecordingPlatform(MessagePlatformPort):
    """Keeps every outbound call; can be told to fail sends or acknowledgments."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, Reply]] = []
        self.acknowledged: list[str] = []
        self.registered: list[str] = []
        self.fail_sends = 0
        self.fail_ack = False

    def send_reply(self, chat_id: str, reply: Reply) -> None:
        if self.fail_sends:
            self.fail_sends -= 1
            raise RuntimeError("send rejected")
        self.sent.append((chat_id, reply))

    def acknowledge_button_press(self, event_id: str) -> None:
        if self.fail_ack:
            raise RuntimeError("ack rejected")
        self.acknowledged.append(event_id)

    def register_callback_endpoint(self, url: str) -> None:
        self.registered.append(url)

    @property
    def texts(self) -> list[str]:
        return [reply.text for _, reply in self.sent]


@pytest.fixture
def platform() -> RecordingPlatform:
    return RecordingPlatform()


@pytest.fixture
def store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def catalog() -> IngredientCatalogStore:
    return IngredientCatalogStore()


@pytest.fixture
def use_case(store, catalog, platform) -> HandleIncomingUpdateUseCase:
    return HandleIncomingUpdateUseCase(
        store=store,
        catalog=catalog,
        platform=platform,
        send_reply=SendReplyUseCase(platform=platform),
    )
