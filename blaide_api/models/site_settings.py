from datetime import datetime
from typing import Optional

from pymongo.errors import PyMongoError

from blaide_api.errors import PersistenceError

SETTINGS_DOCUMENT_ID = "site"


class SiteSettingsStore:
    """The single settings document edited from the admin console"""

    def __init__(self, db):
        self.db = db
        self.collection = db.settings

    def get(self) -> dict:
        try:
            return self.collection.find_one({"_id": SETTINGS_DOCUMENT_ID}) or {}
        except PyMongoError as e:
            raise PersistenceError(str(e)) from e

    def get_contact_email(self) -> Optional[str]:
        return self.get().get("contact_email")

    def set_contact_email(self, contact_email: str) -> dict:
        try:
            self.collection.update_one(
                {"_id": SETTINGS_DOCUMENT_ID},
                {"$set": {"contact_email": contact_email, "updated_at": datetime.utcnow()}},
                upsert=True
            )
        except PyMongoError as e:
            raise PersistenceError(str(e)) from e
        return self.get()
