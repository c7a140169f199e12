"""Tagged result construction: ``ok`` and ``err``.

Both constructors accept either the payload alone, which uses the default tag,
or a tag suffix followed by the payload, which is joined onto the default tag
with a single underscore:

    >>> ok({"id": 1})
    TaggedResult(type='SUCCESS', data={'id': 1})
    >>> err("NOT_FOUND", {"id": 1})
    TaggedResult(type='ERROR_NOT_FOUND', data={'id': 1})

The payload is stored as passed. Nothing is copied or validated.
"""

from __future__ import annotations

import re
from typing import Any, Final, Literal, LiteralString, overload

from tagged_result._validation import join_tag
from tagged_result.constants import ERROR, SEPARATOR, SUCCESS
from tagged_result.types import DefaultError, DefaultSuccess, TaggedResult

_SUGGESTED_TAG: Final = re.compile(r"(?:SUCCESS|ERROR)(?:_[A-Z0-9_]+)?")


def _build(default: str, name: str, args: tuple[Any, ...]) -> TaggedResult[Any, Any]:
    match args:
        case (data,):
            return TaggedResult(default, data)
        case (tag, data):
            return TaggedResult(join_tag(default, tag), data)
        case _:
            raise TypeError(
                f"{name}() takes ({name}(data) or {name}(tag, data)), "
                f"got {len(args)} positional arguments"
            )


@overload
def ok[D](data: D, /) -> DefaultSuccess[D]: ...
@overload
def ok[D](tag: LiteralString, data: D, /) -> TaggedResult[Any, D]: ...
def ok(*args: Any) -> TaggedResult[Any, Any]:
    """Build a success result.

    Args:
        *args: ``(data)`` for a ``"SUCCESS"`` result, or ``(tag, data)`` for a
            ``"SUCCESS_<tag>"`` result.

    Returns:
        A new TaggedResult holding ``data`` unchanged.

    Raises:
        InvalidTagError: ``tag`` is not a non-empty string.
        TypeError: Called with no arguments or more than two.

    Example:
        result = ok("USER_CREATED", {"id": 123, "name": "Alice"})
        assert result.type == "SUCCESS_USER_CREATED"
    """
    return _build(SUCCESS, "ok", args)


@overload
def err[D](data: D, /) -> DefaultError[D]: ...
@overload
def err[D](tag: LiteralString, data: D, /) -> TaggedResult[Any, D]: ...
def err(*args: Any) -> TaggedResult[Any, Any]:
    """Build an error result.

    Mirrors ``ok`` with ``"ERROR"`` as the default tag. A suffix that already
    carries the prefix is not prefixed twice: ``err("ERROR_NETWORK", e)`` has
    type ``"ERROR_NETWORK"``.
    """
    return _build(ERROR, "err", args)


class Result:
    """Namespace for ``Result.ok(...)`` / ``Result.err(...)`` call sites."""

    __slots__ = ()

    ok = staticmethod(ok)
    err = staticmethod(err)


@overload
def success_tag() -> Literal["SUCCESS"]: ...
@overload
def success_tag(suffix: LiteralString) -> str: ...
def success_tag(suffix: str | None = None) -> str:
    """Return the discriminator ``ok`` would assign for *suffix*."""
    return SUCCESS if suffix is None else join_tag(SUCCESS, suffix)


@overload
def error_tag() -> Literal["ERROR"]: ...
@overload
def error_tag(suffix: LiteralString) -> str: ...
def error_tag(suffix: str | None = None) -> str:
    """Return the discriminator ``err`` would assign for *suffix*."""
    return ERROR if suffix is None else join_tag(ERROR, suffix)


def is_success(result: TaggedResult[Any, Any]) -> bool:
    """Return True if *result* was built by ``ok``."""
    return result.type == SUCCESS or result.type.startswith(SUCCESS + SEPARATOR)


def is_error(result: TaggedResult[Any, Any]) -> bool:
    """Return True if *result* was built by ``err``."""
    return result.type == ERROR or result.type.startswith(ERROR + SEPARATOR)


def is_suggested_tag(tag: str) -> bool:
    """Return True if *tag* follows the ``SUCCESS[_UPPER]``/``ERROR[_UPPER]`` convention.

    Advisory only; ``ok``/``err`` accept any non-empty suffix.
    """
    return _SUGGESTED_TAG.fullmatch(tag) is not None


__all__ = [
    "Result",
    "err",
    "error_tag",
    "is_error",
    "is_success",
    "is_suggested_tag",
    "ok",
    "success_tag",
]
