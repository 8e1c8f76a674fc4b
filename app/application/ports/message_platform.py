from abc import ABC, abstractmethod

from app.domain.entities.reply import Reply


class MessagePlatformPort(ABC):
    @abstractmethod
    def send_reply(self, chat_id: str, reply: Reply) -> None:
        raise NotImplementedError

    @abstractmethod
    def acknowledge_button_press(self, event_id: str) -> None:
        """Clear the pending indicator on the pressed button."""
        raise NotImplementedError

    @abstractmethod
    def register_callback_endpoint(self, url: str) -> None:
        raise NotImplementedError
