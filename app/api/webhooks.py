from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from app.application.dto.telegram_update import TelegramUpdateDTO
from app.wiring.dependencies import get_handle_incoming_update_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/webhook")
async def telegram_webhook(request: Request) -> PlainTextResponse:
    try:
        body = await request.body()
        payload = json.loads(body.decode("utf-8")) if body else {}

        event = TelegramUpdateDTO.model_validate(payload).extract_event()
        if event is not None:
            use_case = get_handle_incoming_update_use_case()
            await run_in_threadpool(use_case.handle, event)

        return PlainTextResponse("OK", status_code=200)
    except Exception as e:
        logger.exception("Webhook error", extra={"error": str(e)})
        return PlainTextResponse("Error", status_code=500)
