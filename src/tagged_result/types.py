"""Core data type and typing aliases for tagged results.

``TaggedResult`` is the only runtime type. The aliases exist for annotations:
declare the union of variants a function can return and a type checker narrows
``data`` once ``type`` has been compared against a literal.

Example:
    ```python
    from typing import Literal

    from tagged_result import ErrorResult, SuccessResult, err, ok

    type Parsed = (
        SuccessResult[Literal["SUCCESS_PARSED"], int]
        | ErrorResult[Literal["ERROR_PARSE_FAILED"], str]
    )


    def parse(text: str) -> Parsed:
        if text.isdigit():
            return ok("PARSED", int(text))
        return err("PARSE_FAILED", text)


    result = parse("42")
    if result.type == "SUCCESS_PARSED":
        total = result.data + 1  # data is int here
    ```

Python has no template-literal types, so ``SuccessResult``/``ErrorResult`` take
the full tag literal (``"SUCCESS_PARSED"``) rather than the suffix. The prefix
is applied at runtime by ``ok``/``err``.
"""

from __future__ import annotations

import dataclasses
from typing import Literal


@dataclasses.dataclass(frozen=True, slots=True)
class TaggedResult[T: str, D]:
    """An immutable ``{type, data}`` record.

    ``type`` is the discriminator; ``data`` is the payload exactly as it was
    passed to the constructor.
    """

    type: T
    data: D


type SuccessTag = Literal["SUCCESS"]
type ErrorTag = Literal["ERROR"]

type DefaultSuccess[D] = TaggedResult[Literal["SUCCESS"], D]
"""Result of ``ok(data)``."""

type DefaultError[D] = TaggedResult[Literal["ERROR"], D]
"""Result of ``err(data)``."""

type SuccessResult[T: str, D] = TaggedResult[T, D]
"""Success variant; ``T`` is the full tag literal, e.g. ``Literal["SUCCESS_SAVED"]``."""

type ErrorResult[T: str, D] = TaggedResult[T, D]
"""Error variant; ``T`` is the full tag literal, e.g. ``Literal["ERROR_NOT_FOUND"]``."""

__all__ = [
    "DefaultError",
    "DefaultSuccess",
    "ErrorResult",
    "ErrorTag",
    "SuccessResult",
    "SuccessTag",
    "TaggedResult",
]
