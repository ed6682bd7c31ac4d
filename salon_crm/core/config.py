# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/London")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "salon_crm")

        # Collection Names
        self.customers_collection: Final[str] = os.getenv("CUSTOMERS_COLLECTION", "customers")
        self.products_collection: Final[str] = os.getenv("PRODUCTS_COLLECTION", "products")
        self.clients_collection: Final[str] = os.getenv("CLIENTS_COLLECTION", "clients")
        self.menu_items_collection: Final[str] = os.getenv("MENU_ITEMS_COLLECTION", "menu_items")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.log_json: Final[bool] = os.getenv(
            "LOG_JSON", "false"
        ).lower() in ("true", "1", "yes")

        # HTTP Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8000"))
        self.api_prefix: Final[str] = os.getenv("API_PREFIX", "/api/v1")
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]


# Global settings instance (lazily created, read-only after creation)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings.

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
