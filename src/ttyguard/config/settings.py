"""Where: src/ttyguard/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated values to the CLI without repeating boundary checks.
Assumptions: - Non-positive sizes in config are mistakes, not requests to disable limits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from ttyguard.config.config import (
    COPY_CHUNK_SIZE_DEFAULT,
    TRUNCATION_LIMIT_DEFAULT,
    Config,
)
from ttyguard.platform.logging import logger


def _positive_or_default(name: str, value: object, default: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    logger.warning("Invalid %s %r in configuration; using %d", name, value, default)
    return default


@final
@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Validated values the CLI hands to the stream adapters."""

    truncation_limit: int = TRUNCATION_LIMIT_DEFAULT
    copy_chunk_size: int = COPY_CHUNK_SIZE_DEFAULT

    @classmethod
    def from_config(cls, config: Config) -> RuntimeSettings:
        return cls(
            truncation_limit=_positive_or_default(
                "truncation_limit", config.truncation_limit, TRUNCATION_LIMIT_DEFAULT
            ),
            copy_chunk_size=_positive_or_default(
                "copy_chunk_size", config.copy_chunk_size, COPY_CHUNK_SIZE_DEFAULT
            ),
        )


__all__ = ["RuntimeSettings"]
