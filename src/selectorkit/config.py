from __future__ import annotations

import os
from dataclasses import dataclass

ENV_PREFIX = "SELECTORKIT_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class SelectorKitConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None

    @classmethod
    def from_env(cls) -> SelectorKitConfig:
        """Read settings from ``SELECTORKIT_*`` environment variables."""
        kwargs: dict[str, object] = {}
        if os.environ.get(ENV_PREFIX + "LOG_LEVEL"):
            level = os.environ[ENV_PREFIX + "LOG_LEVEL"].upper()
            if level not in LOG_LEVELS:
                raise ValueError(
                    f"{ENV_PREFIX}LOG_LEVEL must be one of "
                    f"{', '.join(LOG_LEVELS)}, got {level!r}"
                )
            kwargs["log_level"] = level
        if os.environ.get(ENV_PREFIX + "JSON_INDENT"):
            raw = os.environ[ENV_PREFIX + "JSON_INDENT"]
            try:
                kwargs["json_indent"] = int(raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}JSON_INDENT must be an integer, got {raw!r}"
                ) from None
        return cls(**kwargs)  # type: ignore[arg-type]
