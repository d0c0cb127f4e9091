from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from blaide_api.errors import MissingConfigurationError


DEFAULT_SENDER = "Blaide <noreply@blaidelabs.com>"
DEFAULT_ADMIN_EMAIL = "admin@example.com"
DEV_API_BASE_URL = "http://localhost:8000/api"
PROD_API_BASE_URL = "/api"


class Settings(BaseSettings):
    # MongoDB
    mongodb_url: str = "mongodb://localhost:27017"
    database_name: str = Field("blaide_db", validation_alias=AliasChoices("MONGODB_DB", "DATABASE_NAME"))

    # CORS
    cors_origins: List[str] = ["*"]

    # Server
    debug: bool = True
    mode: str = Field("development", validation_alias=AliasChoices("APP_ENV", "MODE", "NODE_ENV"))
    api_base_url: Optional[str] = Field(None, validation_alias=AliasChoices("API_BASE_URL", "VITE_API_BASE_URL"))

    # Admin console
    admin_token: Optional[str] = None

    # Email (Resend). Runtime names win over the build-time VITE_ names.
    resend_api_key: Optional[str] = Field(None, validation_alias=AliasChoices("RESEND_API_KEY", "VITE_RESEND_API_KEY"))
    from_email: Optional[str] = Field(None, validation_alias=AliasChoices("FROM_EMAIL", "VITE_FROM_EMAIL"))
    admin_email: Optional[str] = Field(None, validation_alias=AliasChoices("ADMIN_EMAIL", "VITE_ADMIN_EMAIL"))
    contact_email: Optional[str] = Field(None, validation_alias=AliasChoices("CONTACT_EMAIL", "VITE_CONTACT_EMAIL"))
    email_relay_remote: bool = False

    class Config:
        env_file = str(Path(__file__).parent.parent / ".env")
        env_file_encoding = 'utf-8'
        extra = 'ignore'  # Ignore extra fields from .env
        populate_by_name = True


@dataclass(frozen=True)
class EnvironmentConfig:
    """Deployment-dependent settings for the email path"""
    mode: str
    api_base_url: str
    sender: str
    admin_email: str
    email_api_key: Optional[str] = None

    @property
    def is_development(self) -> bool:
        return self.mode != "production"

    def require_email_api_key(self) -> str:
        if not self.email_api_key:
            raise MissingConfigurationError("RESEND_API_KEY", "Resend API key not configured")
        return self.email_api_key


def get_settings() -> Settings:
    """Read settings from the environment on every call"""
    return Settings()


def get_mode(settings: Settings) -> str:
    mode = (settings.mode or "").strip().lower()
    return "production" if mode in ("production", "prod") else "development"


def resolve_environment_config(settings: Optional[Settings] = None) -> EnvironmentConfig:
    """
    Build an EnvironmentConfig from the environment.

    Values with a sensible default fall back to it; the Resend API key is the
    only required secret and is checked lazily by require_email_api_key() so
    that resolving configuration never blocks non-email endpoints.
    """
    if settings is None:
        settings = get_settings()

    mode = get_mode(settings)
    if settings.api_base_url:
        api_base_url = settings.api_base_url.rstrip("/")
    elif mode == "production":
        api_base_url = PROD_API_BASE_URL
    else:
        api_base_url = DEV_API_BASE_URL

    return EnvironmentConfig(
        mode=mode,
        api_base_url=api_base_url,
        sender=settings.from_email or DEFAULT_SENDER,
        admin_email=settings.admin_email or settings.contact_email or DEFAULT_ADMIN_EMAIL,
        email_api_key=settings.resend_api_key or None,
    )
