class TransportError(RuntimeError):
    """Raised when the messaging transport rejects or fails an outbound call."""
    pass


class TelegramAPIError(TransportError):
    """Raised when the Bot API answers with an HTTP error or ok=false."""

    def __init__(self, method: str, description: str, status_code: int | None = None) -> None:
        super().__init__(f"{method} failed: {description}")
        self.method = method
        self.description = description
        self.status_code = status_code


class EmptyMessageError(ValueError):
    """Raised when a message event carries no text to dispatch on."""
    pass
