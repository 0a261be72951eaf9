"""
Application settings and configuration.

This module defines the configuration class for managing environment variables.
"""

import os
from dataclasses import dataclass
from typing import List, Tuple


def _env_float(name: str, default: float, problems: List[str]) -> float:
    """
    Read a float environment variable, falling back to default when unset or blank.

    An unparsable value also falls back to default and is recorded in
    ``problems`` so that ``Config.validate`` can report it later.
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        problems.append(f"{name} must be a number, got {raw!r}")
        return default


@dataclass(frozen=True, repr=False)
class Config:
    """Configuration values read once from the environment."""

    TELEGRAM_BOT_TOKEN: str = ""
    TELEGRAM_API_BASE_URL: str = "https://api.telegram.org/bot"
    TELEGRAM_SEND_TIMEOUT: float = 5.0
    BOT_STATUS: str = "Running on AWS Lambda"
    LOG_LEVEL: str = "INFO"
    INVALID_SETTINGS: Tuple[str, ...] = ()

    @classmethod
    def from_env(cls) -> "Config":
        """
        Build configuration from environment variables.

        Malformed values do not raise here; they are kept in
        ``INVALID_SETTINGS`` and reported by ``validate``.

        Returns:
            Config populated from the current environment
        """
        problems: List[str] = []
        return cls(
            TELEGRAM_BOT_TOKEN=os.getenv("TELEGRAM_BOT_TOKEN", ""),
            TELEGRAM_API_BASE_URL=os.getenv("TELEGRAM_API_BASE_URL", cls.TELEGRAM_API_BASE_URL),
            TELEGRAM_SEND_TIMEOUT=_env_float("TELEGRAM_SEND_TIMEOUT", cls.TELEGRAM_SEND_TIMEOUT, problems),
            BOT_STATUS=os.getenv("BOT_STATUS", cls.BOT_STATUS),
            LOG_LEVEL=os.getenv("LOG_LEVEL", cls.LOG_LEVEL).upper(),
            INVALID_SETTINGS=tuple(problems),
        )

    def validate(self) -> bool:
        """
        Validate configuration.

        Checks that all required environment variables are set and that
        the values read are usable.

        Returns:
            True if validation succeeds

        Raises:
            ValueError: If any required environment variables are missing
                or any value is malformed
        """
        required = ["TELEGRAM_BOT_TOKEN"]
        missing = [var for var in required if not getattr(self, var)]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")

        problems = list(self.INVALID_SETTINGS)
        if not self.TELEGRAM_SEND_TIMEOUT > 0:
            problems.append(f"TELEGRAM_SEND_TIMEOUT must be positive, got {self.TELEGRAM_SEND_TIMEOUT!r}")
        if problems:
            raise ValueError(f"Invalid configuration: {'; '.join(problems)}")
        return True

    def __repr__(self) -> str:
        token = "***" if self.TELEGRAM_BOT_TOKEN else "<unset>"
        return (
            f"Config(TELEGRAM_BOT_TOKEN={token}, "
            f"TELEGRAM_API_BASE_URL={self.TELEGRAM_API_BASE_URL!r}, "
            f"TELEGRAM_SEND_TIMEOUT={self.TELEGRAM_SEND_TIMEOUT!r}, "
            f"BOT_STATUS={self.BOT_STATUS!r}, LOG_LEVEL={self.LOG_LEVEL!r})"
        )

    __str__ = __repr__
