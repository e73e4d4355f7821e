"""Failure details shown for a fetch that did not complete."""

import asyncio
import re

from pydantic import BaseModel, ConfigDict

_STATUS_REASONS = {
    404: "Not found",
    502: "Bad gateway (server error)",
    503: "Service unavailable",
    504: "Gateway timeout",
}

# Messages look like "API Error: (502) Bad Gateway"
_STATUS_IN_MESSAGE = re.compile(r"\((\d{3})\)")


class ErrorDetails(BaseModel):
    """Why a line or departures fetch failed, with the HTTP status when known."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    @property
    def is_server_error(self) -> bool:
        return self.status_code is not None and self.status_code >= 500

    @classmethod
    def from_exception(cls, error: BaseException) -> "ErrorDetails":
        """Build user-facing details from a repository exception."""
        status_code = getattr(error, "status_code", None)
        if not isinstance(status_code, int):
            status_match = _STATUS_IN_MESSAGE.search(str(error))
            status_code = int(status_match.group(1)) if status_match else None

        if status_code is not None:
            reason = _STATUS_REASONS.get(status_code, f"HTTP {status_code}")
        elif isinstance(error, asyncio.TimeoutError):
            reason = "Timeout"
        else:
            reason = str(error) or type(error).__name__
        return cls(status_code=status_code, reason=reason)
