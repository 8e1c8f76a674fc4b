import logging
import os
import signal
import threading
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from app.api.webhooks import router as webhooks_router
from app.core.config import settings
from app.wiring.dependencies import get_telegram_platform


CONTEXT_KEYS = (
    "chat_id",
    "user_id",
    "command",
    "token",
    "event_id",
    "found",
    "not_found",
    "incompatibilities",
    "method",
    "status",
    "error_code",
    "reply_text",
    "error",
)


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

logger = logging.getLogger(__name__)


def register_webhook() -> bool:
    """One-shot webhook registration. Never retried, never fatal."""
    webhook_url = f"{settings.WEBHOOK_URL}/webhook"
    try:
        get_telegram_platform().register_callback_endpoint(webhook_url)
    except Exception as e:
        logger.exception("Webhook setup failed", extra={"error": str(e)})
        return False
    logger.info("Webhook set up successfully: %s", webhook_url)
    return True


def _handle_sigterm(signum, frame) -> None:
    logger.info("%s shutting down...", settings.SERVICE_NAME)
    logging.shutdown()
    os._exit(0)


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info("%s starting...", settings.SERVICE_NAME)
    logger.info("Webhook URL: %s", settings.WEBHOOK_URL)

    if threading.current_thread() is threading.main_thread():
        signal.signal(signal.SIGTERM, _handle_sigterm)

    if settings.WEBHOOK_URL and settings.VELGURU_BOT_TOKEN:
        register_webhook()
        logger.info("%s is ready for formulation requests!", settings.SERVICE_NAME)
    else:
        logger.error("Missing environment variables. Check VELGURU_BOT_TOKEN and WEBHOOK_URL")
    yield


app = FastAPI(title="VelGuru Formulation Assistant", version="1.0.0", lifespan=lifespan)

app.include_router(webhooks_router, tags=["webhooks"])


@app.get("/", response_class=PlainTextResponse)
def index() -> str:
    return "🧪 VelGuru Bot is running! Ready to formulate amazing skincare products."


@app.get("/health")
def health() -> dict[str, str]:
    return {
        "status": "healthy",
        "service": settings.SERVICE_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }


def run() -> None:
    logger.info("%s server running on port %s", settings.SERVICE_NAME, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
