from __future__ import annotations

import logging
from typing import Callable

from app.application.exceptions import EmptyMessageError
from app.application.ports.ingredient_catalog import IngredientCatalogPort
from app.application.ports.message_platform import MessagePlatformPort
from app.application.ports.session_store import SessionStorePort
from app.application.use_cases.check_compatibility import CompatibilityMatcher
from app.application.use_cases.reply_composer import ReplyComposer
from app.application.use_cases.send_reply import SendReplyUseCase
from app.domain.entities.session import ConversationStep, Session
from app.domain.entities.update_event import ButtonPressEvent, MessageEvent, UpdateEvent


PRODUCT_TOKEN_PREFIX = "product_"

Handler = Callable[[str, Session], None]


class HandleIncomingUpdateUseCase:
    def __init__(
        self,
        store: SessionStorePort,
        catalog: IngredientCatalogPort,
        platform: MessagePlatformPort,
        send_reply: SendReplyUseCase,
    ) -> None:
        self._store = store
        self._platform = platform
        self._send_reply = send_reply
        self._composer = ReplyComposer(catalog)
        self._matcher = CompatibilityMatcher(catalog)
        self._logger = logging.getLogger(__name__)

        self._commands: dict[str, Handler] = {
            "/start": self._send_welcome,
            "/formulate": self._start_formulation,
            "/ingredients": self._show_ingredients,
            "/compatibility": self._start_compatibility_check,
            "/help": self._send_help,
        }
        self._buttons: dict[str, Handler] = {
            "start_formulation": self._start_formulation,
            "browse_ingredients": self._show_ingredients,
            "check_compatibility": self._start_compatibility_check,
            "help": self._send_help,
        }
        self._inputs: dict[ConversationStep, Callable[[str, str, Session], None]] = {
            ConversationStep.COMPATIBILITY_INPUT: self._check_compatibility,
        }

    def handle(self, event: UpdateEvent) -> None:
        if isinstance(event, MessageEvent):
            self.handle_message(event)
        elif isinstance(event, ButtonPressEvent):
            self.handle_button_press(event)

    def handle_message(self, event: MessageEvent) -> None:
        session = self._store.get_or_create(event.user_id)
        try:
            if event.text is None:
                raise EmptyMessageError("Message has no text")
            if event.text.startswith("/"):
                self._dispatch_command(event.chat_id, event.text, session)
            else:
                self._dispatch_input(event.chat_id, event.text, session)
        except Exception as e:
            self._logger.exception(
                "Message handling error",
                extra={"chat_id": event.chat_id, "user_id": event.user_id, "error": str(e)},
            )
            # A failure here propagates to the webhook.
            self._send_reply.execute(event.chat_id, self._composer.error_fallback())

    def handle_button_press(self, event: ButtonPressEvent) -> None:
        session = self._store.get_or_create(event.user_id)

        try:
            self._platform.acknowledge_button_press(event.event_id)
        except Exception as e:
            self._logger.exception(
                "Button acknowledgment failed",
                extra={"chat_id": event.chat_id, "token": event.token, "error": str(e)},
            )

        try:
            self._dispatch_button(event.chat_id, event.token, session)
        except Exception as e:
            self._logger.exception(
                "Button press handling error",
                extra={"chat_id": event.chat_id, "user_id": event.user_id, "token": event.token, "error": str(e)},
            )

    def _dispatch_command(self, chat_id: str, text: str, session: Session) -> None:
        command = text.split(" ")[0]
        handler = self._commands.get(command)
        if handler is None:
            self._logger.info("Unknown command", extra={"chat_id": chat_id, "command": command})
            self._send_reply.execute(chat_id, self._composer.unknown_command())
            return
        handler(chat_id, session)

    def _dispatch_input(self, chat_id: str, text: str, session: Session) -> None:
        handler = self._inputs.get(session.current_step)
        if handler is None:
            self._send_reply.execute(chat_id, self._composer.use_a_command())
            return
        handler(chat_id, text, session)

    def _dispatch_button(self, chat_id: str, token: str, session: Session) -> None:
        handler = self._buttons.get(token)
        if handler is not None:
            handler(chat_id, session)
        elif token.startswith(PRODUCT_TOKEN_PREFIX):
            self._select_product(chat_id, token, session)
        else:
            self._logger.info("Ignoring unrecognized button token", extra={"chat_id": chat_id, "token": token})

    def _send_welcome(self, chat_id: str, session: Session) -> None:
        self._send_reply.execute(chat_id, self._composer.welcome())

    def _start_formulation(self, chat_id: str, session: Session) -> None:
        session.current_step = ConversationStep.SELECT_PRODUCT_TYPE
        self._send_reply.execute(chat_id, self._composer.formulation_wizard())

    def _show_ingredients(self, chat_id: str, session: Session) -> None:
        self._send_reply.execute(chat_id, self._composer.ingredients())

    def _start_compatibility_check(self, chat_id: str, session: Session) -> None:
        session.current_step = ConversationStep.COMPATIBILITY_INPUT
        self._send_reply.execute(chat_id, self._composer.compatibility_prompt())

    def _send_help(self, chat_id: str, session: Session) -> None:
        self._send_reply.execute(chat_id, self._composer.help())

    def _select_product(self, chat_id: str, token: str, session: Session) -> None:
        product_type = token.removeprefix(PRODUCT_TOKEN_PREFIX)
        session.formulation.product_type = product_type
        self._send_reply.execute(chat_id, self._composer.product_suggestions(product_type))

    def _check_compatibility(self, chat_id: str, text: str, session: Session) -> None:
        result = self._matcher.match(text)
        self._logger.info(
            "Compatibility checked",
            extra={
                "chat_id": chat_id,
                "found": len(result.found),
                "not_found": len(result.not_found),
                "incompatibilities": len(result.incompatibilities),
            },
        )
        self._send_reply.execute(chat_id, self._composer.compatibility_report(result))
        session.current_step = ConversationStep.IDLE
