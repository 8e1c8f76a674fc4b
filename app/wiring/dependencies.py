from functools import lru_cache
import logging

from app.core.config import settings
from app.application.ports.ingredient_catalog import IngredientCatalogPort
from app.application.ports.message_platform import MessagePlatformPort
from app.application.ports.session_store import SessionStorePort
from app.application.use_cases.handle_incoming_update import HandleIncomingUpdateUseCase
from app.application.use_cases.send_reply import SendReplyUseCase
from app.infrastructure.knowledge.ingredient_catalog_store import IngredientCatalogStore
from app.infrastructure.store.memory_store import MemorySessionStore
from app.infrastructure.telegram.mock_platform import MockTelegramPlatform
from app.infrastructure.telegram.telegram_client import TelegramClient
from app.infrastructure.telegram.telegram_platform import TelegramPlatform


@lru_cache
def get_session_store() -> SessionStorePort:
    return MemorySessionStore()


@lru_cache
def get_ingredient_catalog() -> IngredientCatalogPort:
    return IngredientCatalogStore()


@lru_cache
def get_telegram_platform() -> MessagePlatformPort:
    logger = logging.getLogger(__name__)
    logger.info(
        "VELGURU_BOT_TOKEN present=%s len=%s",
        bool(settings.VELGURU_BOT_TOKEN),
        len(settings.VELGURU_BOT_TOKEN or ""),
    )

    if not settings.VELGURU_BOT_TOKEN:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockTelegramPlatform (token missing, ENV=dev/local)")
            return MockTelegramPlatform()
        logger.error("VELGURU_BOT_TOKEN missing; Telegram calls will fail until it is set")

    logger.info("Using real TelegramPlatform")
    client = TelegramClient(
        bot_token=settings.VELGURU_BOT_TOKEN or "",
        base_url=settings.TELEGRAM_API_BASE_URL,
        timeout=settings.TELEGRAM_TIMEOUT_SECONDS,
    )
    return TelegramPlatform(client=client)


def get_handle_incoming_update_use_case() -> HandleIncomingUpdateUseCase:
    platform = get_telegram_platform()
    return HandleIncomingUpdateUseCase(
        store=get_session_store(),
        catalog=get_ingredient_catalog(),
        platform=platform,
        send_reply=SendReplyUseCase(platform=platform),
    )

