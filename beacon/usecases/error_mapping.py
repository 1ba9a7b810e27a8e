"""Translate save failures into user-facing UseCaseError instances."""

from __future__ import annotations


from typing import Optional

from beacon.domain.errors import RecoverableSaveError
from beacon.domain.ports import UseCaseError

SAVE_FAILED_PREFIX = "An error was encountered whilst trying to save the project"


def root_cause(exc: BaseException) -> BaseException:
    """Follow ``__cause__``/``__context__`` links to the innermost exception."""
    seen = {id(exc)}
    current = exc
    while True:
        nested = current.__cause__ or current.__context__
        if nested is None or id(nested) in seen:
            return current
        seen.add(id(nested))
        current = nested


def describe_cause(exc: BaseException) -> str:
    """Render an exception as ``TypeName: message`` for alerts."""
    text = str(exc).strip()
    name = type(exc).__name__
    return f"{name}: {text}" if text else name


def map_save_error(exc: BaseException, *, default_message: Optional[str] = None) -> UseCaseError:
    """Map a backend save failure to a retryable error carrying the root cause.

    Errors that already are UseCaseErrors pass through unchanged.
    """
    if isinstance(exc, UseCaseError):
        return exc
    cause = root_cause(exc)
    message = default_message or f"{SAVE_FAILED_PREFIX}: {describe_cause(cause)}"
    return RecoverableSaveError(message, cause=cause)


__all__ = ["describe_cause", "map_save_error", "root_cause"]
