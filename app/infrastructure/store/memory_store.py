from __future__ import annotations

import logging

from app.application.ports.session_store import SessionStorePort
from app.domain.entities.session import Session


class MemorySessionStore(SessionStorePort):
    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._logger = logging.getLogger(__name__)

    def get_or_create(self, user_id: str) -> Session:
        session = self._sessions.get(user_id)
        if session is None:
            session = Session(user_id=user_id)
            self._sessions[user_id] = session
            self._logger.debug("Session created", extra={"user_id": user_id})
        return session

    def __len__(self) -> int:
        return len(self._sessions)
