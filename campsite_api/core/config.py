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
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/Berlin")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Server Configuration
        self.api_host: Final[str] = os.getenv("API_HOST", "0.0.0.0")
        self.api_port: Final[int] = int(os.getenv("API_PORT", "8000"))

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "nucampsite")

        # Collection Names
        self.campsites_collection: Final[str] = os.getenv("CAMPSITES_COLLECTION", "campsites")
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")

        # JWT Configuration (bearer tokens are issued by the user service)
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "dev-secret-change-in-production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.jwt_issuer: Final[Optional[str]] = os.getenv("JWT_ISSUER") or None
        self.jwt_audience: Final[Optional[str]] = os.getenv("JWT_AUDIENCE") or None
        self.jwt_leeway_seconds: Final[int] = int(
            os.getenv("JWT_LEEWAY_SECONDS", "30")
        )

        # CORS Configuration (comma separated)
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
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
