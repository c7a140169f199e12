"""tagged-result: Tagged success/error values with a string discriminator.

Public API:
    - ok(): Build a success result (``"SUCCESS"`` or ``"SUCCESS_<tag>"``)
    - err(): Build an error result (``"ERROR"`` or ``"ERROR_<tag>"``)
    - TaggedResult: The immutable ``{type, data}`` record
    - SuccessResult / ErrorResult: Annotation aliases for narrowing on ``type``
"""

from __future__ import annotations

import logging

from tagged_result.config import (
    Settings,
    configure,
    configure_from_env,
    current_settings,
)
from tagged_result.constants import ERROR, SEPARATOR, SUCCESS
from tagged_result.errors import ConfigurationError, InvalidTagError, TaggedResultError
from tagged_result.result import (
    Result,
    err,
    error_tag,
    is_error,
    is_success,
    is_suggested_tag,
    ok,
    success_tag,
)
from tagged_result.types import (
    DefaultError,
    DefaultSuccess,
    ErrorResult,
    ErrorTag,
    SuccessResult,
    SuccessTag,
    TaggedResult,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("tagged-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("tagged_result").addHandler(logging.NullHandler())

__all__ = [
    "ERROR",
    "SEPARATOR",
    "SUCCESS",
    "ConfigurationError",
    "DefaultError",
    "DefaultSuccess",
    "ErrorResult",
    "ErrorTag",
    "InvalidTagError",
    "Result",
    "Settings",
    "SuccessResult",
    "SuccessTag",
    "TaggedResult",
    "TaggedResultError",
    "__version__",
    "configure",
    "configure_from_env",
    "current_settings",
    "err",
    "error_tag",
    "is_error",
    "is_success",
    "is_suggested_tag",
    "ok",
    "success_tag",
]
