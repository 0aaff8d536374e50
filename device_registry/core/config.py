# Standard library imports
import os
from typing import Final, Optional


DEVICE_STORE_MONGO = "mongo"
DEVICE_STORE_MEMORY = "memory"


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "device_registry")
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
        )

        # Device store backend: "mongo" or "memory"
        self.device_store: Final[str] = os.getenv("DEVICE_STORE", DEVICE_STORE_MONGO).strip().lower()

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # HTTP
        self.cors_origins: Final[list[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://localhost:5173",
            ).split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
