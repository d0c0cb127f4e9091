from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from blaide_api.config import EnvironmentConfig, Settings, get_settings
from blaide_api.deps import (
    get_contact_store,
    get_contact_store_factory,
    get_email_relay,
    get_environment_config,
    get_settings_store,
)
from blaide_api.main import app
from blaide_api.services.email_service import EmailRelay

ADMIN_TOKEN = "admin-secret"
STORED_ID = "65f0c0ffee0000000000abcd"


@pytest.fixture
def config():
    return EnvironmentConfig(
        mode="development",
        api_base_url="http://localhost:8000/api",
        sender="Blaide <noreply@blaidelabs.com>",
        admin_email="admin@blaide.test",
        email_api_key="re_test_key",
    )


@pytest.fixture
def provider():
    """Stand-in for ResendEmailService: admin send first, confirmation second"""
    provider = MagicMock()
    provider.send = AsyncMock(side_effect=["abc123", "conf456"])
    return provider


@pytest.fixture
def relay(config, provider):
    return EmailRelay(config, provider_factory=lambda api_key: provider)


@pytest.fixture
def store():
    store = MagicMock()
    store.create.return_value = {"_id": STORED_ID}
    return store


@pytest.fixture
def settings_store():
    return MagicMock()


@pytest.fixture
def settings():
    return Settings(_env_file=None, admin_token=ADMIN_TOKEN, email_relay_remote=False)


@pytest.fixture
def client(config, relay, store, settings_store, settings):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_environment_config] = lambda: config
    app.dependency_overrides[get_email_relay] = lambda: relay
    app.dependency_overrides[get_contact_store] = lambda: store
    app.dependency_overrides[get_contact_store_factory] = lambda: (lambda: store)
    app.dependency_overrides[get_settings_store] = lambda: settings_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def valid_form():
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "+44 20 7946 0000",
        "division": "Blaide Labs",
        "message": "We would like to talk about a consulting project.",
    }
