"""Internal helpers for tag-suffix validation and normalization.

Centralizes how a caller-supplied suffix becomes a discriminator so ``ok``,
``err`` and the tag helpers share one set of rules and error messages.
"""

from __future__ import annotations

import logging
import typing

from tagged_result.config import current_settings
from tagged_result.constants import SEPARATOR
from tagged_result.errors import InvalidTagError

logger = logging.getLogger(__name__)

_TAG_HINT = (
    "Pass a non-empty string such as 'USER_CREATED', or call with the payload "
    "alone to use the default tag."
)


def _require(
    *,
    condition: bool,
    message: str,
    tag: typing.Any,
    field_name: str | None = None,
) -> None:
    """Raise InvalidTagError with optional field context when *condition* fails."""
    if not condition:
        if field_name:
            message = f"{field_name}: {message}"
        raise InvalidTagError(message, tag=tag, hint=_TAG_HINT)


def normalize_suffix(default: str, suffix: typing.Any, *, field_name: str = "tag") -> str:
    """Return *suffix* stripped of a leading ``<default>_`` and leading separators.

    An empty result means the suffix names the bare default tag itself
    (``"SUCCESS"``, ``"SUCCESS_"`` or ``"_"`` given for ``"SUCCESS"``).
    """
    _require(
        condition=isinstance(suffix, str),
        message=f"must be a str, got {type(suffix).__name__}",
        tag=suffix,
        field_name=field_name,
    )
    _require(
        condition=bool(suffix),
        message="must be a non-empty string",
        tag=suffix,
        field_name=field_name,
    )

    if suffix == default:
        return ""

    normalized = suffix.removeprefix(default + SEPARATOR).lstrip(SEPARATOR)
    if normalized != suffix:
        logger.debug("Normalized tag suffix %r to %r", suffix, normalized)

    if current_settings().warn_on_lowercase_tags and normalized != normalized.upper():
        logger.warning(
            "Tag suffix %r is not uppercase; consider %r", suffix, normalized.upper()
        )
    return normalized


def join_tag(default: str, suffix: typing.Any) -> str:
    """Build the full discriminator for *default* and a caller *suffix*."""
    normalized = normalize_suffix(default, suffix)
    if not normalized:
        return default
    return f"{default}{SEPARATOR}{normalized}"
