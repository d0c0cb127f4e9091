from datetime import datetime
from unittest.mock import MagicMock

import pytest
from bson.objectid import ObjectId
from pymongo.errors import PyMongoError

from blaide_api.errors import PersistenceError, ValidationError
from blaide_api.models.contact_message import ContactMessageStore
from blaide_api.models.site_settings import SETTINGS_DOCUMENT_ID, SiteSettingsStore


@pytest.fixture
def db():
    return MagicMock()


class TestContactMessageStore:

    def test_create_assigns_created_at_and_unread(self, db):
        inserted_id = ObjectId()
        db.contact_messages.insert_one.return_value.inserted_id = inserted_id

        stored = ContactMessageStore(db).create(
            name="Ada", email="ada@example.com", message="Hi", division="General"
        )

        document = db.contact_messages.insert_one.call_args.args[0]
        assert isinstance(document["created_at"], datetime)
        assert document["is_read"] is False
        assert document["phone"] is None
        assert stored["_id"] == str(inserted_id)

    def test_create_failure_is_persistence_error(self, db):
        db.contact_messages.insert_one.side_effect = PyMongoError("connection closed")

        with pytest.raises(PersistenceError):
            ContactMessageStore(db).create(name="Ada", email="ada@example.com", message="Hi", division="General")

    def test_mark_as_read(self, db):
        message_id = ObjectId()
        db.contact_messages.update_one.return_value.matched_count = 1

        assert ContactMessageStore(db).mark_as_read(str(message_id)) is True
        db.contact_messages.update_one.assert_called_once_with(
            {"_id": message_id}, {"$set": {"is_read": True}}
        )

    def test_mark_as_read_unknown(self, db):
        db.contact_messages.update_one.return_value.matched_count = 0

        assert ContactMessageStore(db).mark_as_read(str(ObjectId())) is False

    def test_malformed_id(self, db):
        with pytest.raises(ValidationError) as exc_info:
            ContactMessageStore(db).mark_as_read("not-an-object-id")

        assert exc_info.value.field == "id"
        assert exc_info.value.__suppress_context__ is True
        db.contact_messages.update_one.assert_not_called()

    def test_unread_filter(self, db):
        ContactMessageStore(db).count(unread_only=True)

        db.contact_messages.count_documents.assert_called_once_with({"is_read": False})


class TestSiteSettingsStore:

    def test_set_contact_email_upserts_single_document(self, db):
        db.settings.find_one.return_value = {"_id": SETTINGS_DOCUMENT_ID, "contact_email": "hello@blaide.test"}

        document = SiteSettingsStore(db).set_contact_email("hello@blaide.test")

        filter_, update = db.settings.update_one.call_args.args
        assert filter_ == {"_id": SETTINGS_DOCUMENT_ID}
        assert update["$set"]["contact_email"] == "hello@blaide.test"
        assert db.settings.update_one.call_args.kwargs == {"upsert": True}
        assert document["contact_email"] == "hello@blaide.test"

    def test_missing_document_reads_as_empty(self, db):
        db.settings.find_one.return_value = None

        assert SiteSettingsStore(db).get_contact_email() is None
