from abc import ABC, abstractmethod

from app.domain.entities.session import Session


class SessionStorePort(ABC):
    @abstractmethod
    def get_or_create(self, user_id: str) -> Session:
        """
        Return the session for user_id, creating an idle one on first contact.
        Repeat calls for the same user return the same mutable instance.
        """
        raise NotImplementedError
