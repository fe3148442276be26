"""Exception hierarchy for loading-state."""

from __future__ import annotations


class LoadingStateError(Exception):
    """Base exception for all loading-state errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class OutcomeTypeError(LoadingStateError, TypeError):
    """A value other than ``Ok`` or ``Err`` was offered as a finished outcome."""
