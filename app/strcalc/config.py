"""
Configuration Module

Loads settings from environment variables and the config/.env file.
The calculator core takes no configuration; these settings only shape
how runners log and report.
"""

import os
from dataclasses import dataclass
from typing import List, Optional
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv
PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / "config" / ".env"
load_dotenv(dotenv_path=ENV_PATH)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class Config:
    """
    Application configuration.

    All settings are loaded from environment variables prefixed with STRCALC_.
    See config/.env.example for available options.
    """

    # === Logging Settings ===
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    json_logs: bool = False

    # === Output Settings ===
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Load configuration from environment variables.

        Environment variables override defaults.
        """
        def get_bool(key: str, default: bool) -> bool:
            """Helper to parse boolean env vars."""
            value = os.getenv(key, str(default)).lower()
            return value in ("true", "1", "yes")

        return cls(
            log_level=os.getenv("STRCALC_LOG_LEVEL", "WARNING").upper(),
            log_file=os.getenv("STRCALC_LOG_FILE") or None,
            json_logs=get_bool("STRCALC_JSON_LOGS", False),
            timestamp_format=os.getenv("STRCALC_TIMESTAMP_FORMAT", "%Y-%m-%d %H:%M:%S"),
        )

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"STRCALC_LOG_LEVEL must be one of: {', '.join(VALID_LOG_LEVELS)}")

        if not self.timestamp_format:
            errors.append("STRCALC_TIMESTAMP_FORMAT must not be empty")

        return errors

    def __post_init__(self):
        """Validate after initialization."""
        errors = self.validate()
        if errors:
            raise ValueError(f"Configuration errors: {errors}")


def load_config() -> Config:
    """
    Load configuration from environment.

    Usage:
        from strcalc.config import load_config
        config = load_config()
    """
    return Config.from_env()
