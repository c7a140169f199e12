"""Canonical discriminator literals shared by every tagged result."""

from __future__ import annotations

from typing import Final, Literal

# ==============================================================================
# Default tags
# ==============================================================================

SUCCESS: Final[Literal["SUCCESS"]] = "SUCCESS"
ERROR: Final[Literal["ERROR"]] = "ERROR"

# Joins a default tag and a caller suffix; always inserted exactly once.
SEPARATOR: Final[Literal["_"]] = "_"

# ==============================================================================
# Environment
# ==============================================================================

ENV_PREFIX: Final[str] = "TAGGED_RESULT_"
ENV_WARN_LOWERCASE: Final[str] = f"{ENV_PREFIX}WARN_LOWERCASE"
