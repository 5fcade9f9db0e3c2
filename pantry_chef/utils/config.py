"""Configuration management for Pantry Chef.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Gemini API Key: checked per request, a missing key yields a 500 for every generation
        self.GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
        # Default: gemini-1.5-flash (fast, cost-effective for short recipes)
        self.GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
        # Server bind address
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        # Server Port
        self.PORT: int = int(os.getenv("PORT", "7777"))
        # Seed the pantry with the default ingredient list on startup
        self.SEED_PANTRY: bool = os.getenv("SEED_PANTRY", "true").lower() in ("true", "1", "yes")
        # Logging: LOG_LEVEL is read by the logger module, kept here for visibility
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        # Log output format: "text" (colored console) or "json" (structured)
        self.LOG_TYPE: str = os.getenv("LOG_TYPE", "text").lower()

    @property
    def has_api_key(self) -> bool:
        """Whether a provider credential is configured."""
        return bool(self.GEMINI_API_KEY)

    def validate(self) -> None:
        """Validate configuration values.

        The API key is intentionally not required here; its absence is
        reported on each generation request instead.

        Raises:
            ValueError: If invalid values are provided.
        """
        if not (1024 <= self.PORT <= 65535):
            raise ValueError(f"PORT must be between 1024 and 65535, got: {self.PORT}")
        if self.LOG_TYPE not in ("text", "json"):
            raise ValueError(f"LOG_TYPE must be 'text' or 'json', got: {self.LOG_TYPE}")
        if not self.GEMINI_MODEL:
            raise ValueError("GEMINI_MODEL must not be empty")


# Create module-level config instance and validate immediately
config = Config()
config.validate()
