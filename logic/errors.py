"""Error types shared by the ticket conversion service and the seed script."""

from __future__ import annotations

from typing import Optional


class TicketToolError(RuntimeError):
    """Base error; ``details`` carries extra diagnostic text when available."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.details = details


class ConfigurationMissingError(TicketToolError):
    """Raised when a required credential or endpoint is not configured."""


class InvalidRequestError(TicketToolError):
    """Raised for caller errors such as a bad method or body."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamError(TicketToolError):
    """Raised when the text-generation call fails."""


class MalformedOutputError(TicketToolError):
    """Raised when a repaired completion still is not valid JSON."""


class StoreError(TicketToolError):
    """Raised when the ticket store rejects a write."""

    def __init__(self, message: str, details: Optional[str] = None, hint: Optional[str] = None) -> None:
        super().__init__(message, details)
        self.hint = hint
