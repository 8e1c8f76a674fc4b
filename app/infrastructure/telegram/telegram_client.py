from __future__ import annotations

import logging
from typing import Any

import httpx

from app.application.exceptions import TelegramAPIError


class TelegramClient:
    def __init__(
        self,
        bot_token: str,
        base_url: str = "https://api.telegram.org",
        timeout: float = 10.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._has_token = bool(bot_token)
        self._base_url = f"{base_url.rstrip('/')}/bot{bot_token}"
        self._client = http_client or httpx.Client(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    def send_message(
        self,
        chat_id: str,
        text: str,
        parse_mode: str | None = None,
        reply_markup: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"chat_id": chat_id, "text": text}
        if parse_mode:
            payload["parse_mode"] = parse_mode
        if reply_markup:
            payload["reply_markup"] = reply_markup
        return self._call("sendMessage", payload)

    def answer_callback_query(self, callback_query_id: str) -> dict[str, Any]:
        return self._call("answerCallbackQuery", {"callback_query_id": callback_query_id})

    def set_webhook(self, url: str) -> dict[str, Any]:
        return self._call("setWebhook", {"url": url})

    def _call(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        if not self._has_token:
            raise TelegramAPIError(method, "bot token is not configured")

        try:
            resp = self._client.post(f"{self._base_url}/{method}", json=payload)
        except httpx.HTTPError as e:
            raise TelegramAPIError(method, str(e)) from e

        try:
            body = resp.json()
        except ValueError:
            body = {"ok": False, "description": resp.text}

        if resp.status_code >= 400 or not body.get("ok"):
            description = body.get("description") or f"HTTP {resp.status_code}"
            self._logger.error(
                "Telegram call failed",
                extra={
                    "method": method,
                    "status": resp.status_code,
                    "error_code": body.get("error_code"),
                    "error": description,
                },
            )
            raise TelegramAPIError(method, description, status_code=resp.status_code)

        return body
