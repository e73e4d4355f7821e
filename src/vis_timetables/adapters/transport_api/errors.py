"""Transport API errors."""


class TransportApiError(RuntimeError):
    """Raised when the transport API does not return a usable response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
