from fastapi import APIRouter, Depends, Query
import logging

from blaide_api.deps import get_contact_store, get_settings_store, require_admin
from blaide_api.errors import NotFoundError
from blaide_api.models.contact_message import ContactMessageStore
from blaide_api.models.site_settings import SiteSettingsStore
from blaide_api.schemas.contact import ContactMessageListResponse, ContactMessageResponse
from blaide_api.schemas.settings import SiteSettingsResponse, SiteSettingsUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def format_message(message: dict) -> dict:
    return {
        "_id": str(message["_id"]),
        "name": message["name"],
        "email": message["email"],
        "phone": message.get("phone"),
        "division": message.get("division") or "General",
        "message": message["message"],
        "created_at": message["created_at"],
        "is_read": message.get("is_read", False),
    }


@router.get("/messages", response_model=ContactMessageListResponse)
async def list_messages(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    unread_only: bool = False,
    store: ContactMessageStore = Depends(get_contact_store)
):
    """Contact messages, newest first"""
    messages = store.get_all(skip=skip, limit=limit, unread_only=unread_only)
    return {
        "total": store.count(),
        "unread": store.count(unread_only=True),
        "messages": [format_message(message) for message in messages],
    }


@router.patch("/messages/{message_id}/read", response_model=ContactMessageResponse)
async def mark_message_read(
    message_id: str,
    store: ContactMessageStore = Depends(get_contact_store)
):
    if not store.mark_as_read(message_id):
        raise NotFoundError(f"Message {message_id} not found")

    logger.info(f"Contact message {message_id} marked as read")
    return format_message(store.get_by_id(message_id))


@router.get("/settings", response_model=SiteSettingsResponse)
async def get_site_settings(store: SiteSettingsStore = Depends(get_settings_store)):
    document = store.get()
    return {
        "contact_email": document.get("contact_email"),
        "updated_at": document.get("updated_at"),
    }


@router.put("/settings", response_model=SiteSettingsResponse)
async def update_site_settings(
    data: SiteSettingsUpdate,
    store: SiteSettingsStore = Depends(get_settings_store)
):
    document = store.set_contact_email(str(data.contact_email))
    logger.info(f"Contact email updated to {data.contact_email}")
    return {
        "contact_email": document.get("contact_email"),
        "updated_at": document.get("updated_at"),
    }
