import logging
from datetime import datetime
from typing import Optional

from bson.objectid import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from blaide_api.errors import PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def to_object_id(message_id: str) -> ObjectId:
    try:
        return ObjectId(message_id)
    except (InvalidId, TypeError):
        raise ValidationError("id", f"Invalid message id: {message_id}") from None


class ContactMessageStore:
    """Contact form submissions from the landing page"""

    def __init__(self, db):
        self.db = db
        self.collection = db.contact_messages

    def create(self, name: str, email: str, message: str, division: str,
               phone: Optional[str] = None):
        """Insert a new message; created_at is always assigned here"""
        message_data = {
            "name": name,
            "email": email,
            "phone": phone,
            "division": division,
            "message": message,
            "created_at": datetime.utcnow(),
            "is_read": False,
        }
        try:
            result = self.collection.insert_one(message_data)
        except PyMongoError as e:
            logger.error(f"Failed to store contact message from {email}: {e}")
            raise PersistenceError(str(e)) from e
        message_data["_id"] = str(result.inserted_id)
        return message_data

    def get_all(self, skip: int = 0, limit: int = 50, unread_only: bool = False):
        """Messages newest first (admin console)"""
        query = {"is_read": False} if unread_only else {}
        try:
            cursor = self.collection.find(query).sort("created_at", DESCENDING).skip(skip).limit(limit)
            return list(cursor)
        except PyMongoError as e:
            raise PersistenceError(str(e)) from e

    def count(self, unread_only: bool = False) -> int:
        query = {"is_read": False} if unread_only else {}
        try:
            return self.collection.count_documents(query)
        except PyMongoError as e:
            raise PersistenceError(str(e)) from e

    def get_by_id(self, message_id: str):
        try:
            return self.collection.find_one({"_id": to_object_id(message_id)})
        except PyMongoError as e:
            raise PersistenceError(str(e)) from e

    def mark_as_read(self, message_id: str) -> bool:
        """Flip is_read to True; returns False when the message does not exist"""
        try:
            result = self.collection.update_one(
                {"_id": to_object_id(message_id)},
                {"$set": {"is_read": True}}
            )
        except PyMongoError as e:
            raise PersistenceError(str(e)) from e
        return result.matched_count > 0
