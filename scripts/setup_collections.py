#!/usr/bin/env python
"""
Database setup script for the contact form
- Creates contact_messages indexes
- Seeds the settings document with the contact email
"""
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.errors import PyMongoError
import logging

from blaide_api.config import get_settings, resolve_environment_config
from blaide_api.models.site_settings import SiteSettingsStore

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def setup_collections(db, contact_email: str):
    """Create indexes and the settings document; safe to run repeatedly"""
    db.contact_messages.create_index([("created_at", DESCENDING)])
    db.contact_messages.create_index([("is_read", ASCENDING)])
    logger.info("✅ contact_messages indexes created")

    store = SiteSettingsStore(db)
    if store.get_contact_email():
        logger.info("Settings document already present, leaving it unchanged")
    else:
        store.set_contact_email(contact_email)
        logger.info(f"✅ Settings document created with contact email {contact_email}")


def main():
    settings = get_settings()
    config = resolve_environment_config(settings)

    client = MongoClient(settings.mongodb_url, serverSelectionTimeoutMS=5000)
    try:
        client.admin.command("ping")
        setup_collections(client[settings.database_name], config.admin_email)
    except PyMongoError as e:
        logger.error(f"❌ Collection setup failed: {e}")
        return False
    finally:
        client.close()
    return True


if __name__ == "__main__":
    logger.info("=" * 60)
    logger.info("Contact Collections Setup Script")
    logger.info("=" * 60)

    if main():
        logger.info("\n✅ Collection setup completed successfully!")
    else:
        sys.exit(1)
