import secrets
from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException, status

from blaide_api.config import EnvironmentConfig, Settings, get_settings, resolve_environment_config
from blaide_api.database import get_database
from blaide_api.errors import MissingConfigurationError, PersistenceError
from blaide_api.models.contact_message import ContactMessageStore
from blaide_api.models.site_settings import SiteSettingsStore
from blaide_api.services.email_service import EmailRelay
from blaide_api.services.relay_client import RelayClient


def get_environment_config(settings: Settings = Depends(get_settings)) -> EnvironmentConfig:
    """Resolved per request so serverless invocations never share state"""
    return resolve_environment_config(settings)


def get_email_relay(config: EnvironmentConfig = Depends(get_environment_config)) -> EmailRelay:
    return EmailRelay(config)


def get_dispatcher(
    settings: Settings = Depends(get_settings),
    config: EnvironmentConfig = Depends(get_environment_config),
    relay: EmailRelay = Depends(get_email_relay)
):
    if settings.email_relay_remote:
        return RelayClient(config)
    return relay


def _db():
    try:
        return get_database()
    except RuntimeError as e:
        raise PersistenceError(str(e)) from e


def get_contact_store() -> ContactMessageStore:
    return ContactMessageStore(_db())


def get_contact_store_factory() -> Callable[[], ContactMessageStore]:
    """Defers the MongoDB connection until a submission has been validated"""
    return get_contact_store


def get_settings_store() -> SiteSettingsStore:
    return SiteSettingsStore(_db())


def require_admin(
    x_admin_token: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings)
):
    """Check the X-Admin-Token header against ADMIN_TOKEN"""
    if not settings.admin_token:
        raise MissingConfigurationError("ADMIN_TOKEN")

    if not x_admin_token or not secrets.compare_digest(x_admin_token, settings.admin_token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin token"
        )
