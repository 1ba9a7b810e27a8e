"""Domain-level error types for use-case and adapter mapping.

Validation errors stay inside the dialog, recoverable save errors are shown
to the user with their root cause, and fatal persist errors always reach the
crash reporter.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .ports import UseCaseError


class ValidationError(UseCaseError):
    """User-correctable problem with the project type form."""


class MissingServerName(ValidationError):
    def __init__(self) -> None:
        super().__init__("MISSING_SERVER_NAME", "You must pick a server.")


class InvalidServerName(ValidationError):
    def __init__(self, server_name: str) -> None:
        super().__init__(
            "INVALID_SERVER_NAME",
            "The server name is not considered valid.",
            meta={"server_name": server_name},
        )
        self.server_name = server_name


class RecoverableSaveError(UseCaseError):
    """Backend save failed; the user may retry or cancel."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__("SAVE_FAILED", message)
        self.cause = cause


class FatalPersistError(UseCaseError):
    """Project file could not be written or its directory could not be watched."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__("PERSIST_FAILED", message, meta={"path": str(path) if path else None})
        self.path = path


__all__ = [
    "FatalPersistError",
    "InvalidServerName",
    "MissingServerName",
    "RecoverableSaveError",
    "ValidationError",
]
