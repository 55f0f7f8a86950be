"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode
from typing import Annotated, Optional, Dict, Any, List
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class TranslationProviderSettings(BaseSettings):
    """Translation provider (Google Translate v2) configuration"""

    key: Optional[str] = Field(default=None, description="Translation API key")
    url: str = Field(default="https://translation.googleapis.com/language/translate/v2")
    source_language: str = Field(default="en")
    timeout_seconds: float = Field(default=10.0, gt=0, le=120)

    model_config = {"env_prefix": "TRANSLATION_API_"}


class PlacesProviderSettings(BaseSettings):
    """Geo-search provider (Places nearby search) configuration"""

    key: Optional[str] = Field(default=None, description="Places API key")
    url: str = Field(default="https://maps.googleapis.com/maps/api/place/nearbysearch/json")
    radius_m: int = Field(default=50, ge=1, le=50000)
    default_latitude: float = Field(default=35.6895, ge=-90, le=90)
    default_longitude: float = Field(default=139.6917, ge=-180, le=180)
    timeout_seconds: float = Field(default=10.0, gt=0, le=120)

    model_config = {"env_prefix": "PLACES_API_"}


class AuthSettings(BaseSettings):
    """Identity token verification configuration"""

    token_secret: str = Field(default="please-change-me")
    algorithm: str = Field(default="HS256")
    audience: Optional[str] = Field(default=None)
    issuer: Optional[str] = Field(default=None)
    token_ttl_minutes: int = Field(default=60, ge=1, le=60 * 24)

    model_config = {"env_prefix": "AUTH_"}


class StoreSettings(BaseSettings):
    """Document store configuration"""

    database_url: str = Field(default="sqlite:///./favorites.db")
    favorites_collection: str = Field(default="favorite")
    echo: bool = Field(default=False)

    model_config = {"env_prefix": "STORE_"}


class SecuritySettings(BaseSettings):
    """Cross-origin admission configuration"""

    cors_origin_regex: str = Field(default=".*")
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])
    cors_allow_headers: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])

    @field_validator('cors_allow_methods', 'cors_allow_headers', mode='before')
    @classmethod
    def parse_csv(cls, v):
        """Parse comma separated lists from environment variables"""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v or ["*"]

    model_config = {"env_prefix": "SECURITY_"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="Travel Favorites BFF")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    log_json: bool = Field(default=False)

    # Nested Settings
    translation: TranslationProviderSettings = Field(
        default_factory=TranslationProviderSettings
    )
    places: PlacesProviderSettings = Field(default_factory=PlacesProviderSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for the CORS middleware"""
        return {
            "allow_origin_regex": self.security.cors_origin_regex,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
