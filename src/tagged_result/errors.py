"""Exception hierarchy for tagged-result."""

from __future__ import annotations

from typing import Any


class TaggedResultError(Exception):
    """Base exception for all tagged-result errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidTagError(TaggedResultError, TypeError, ValueError):
    """A custom tag suffix was not a non-empty string.

    Raised by ``ok``/``err`` before any value is built. Subclasses both
    ``TypeError`` (wrong kind of argument) and ``ValueError`` (empty string) so
    callers can catch whichever matches their mental model.
    """

    def __init__(self, message: str, *, tag: Any, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.tag = tag


class ConfigurationError(TaggedResultError):
    """Settings could not be resolved from the environment."""
