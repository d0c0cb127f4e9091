from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class ContactSubmission(BaseModel):
    """A validated contact form submission"""
    name: str
    email: str
    message: str
    division: str = "General"
    phone: Optional[str] = None


class SubmissionResponse(BaseModel):
    success: bool
    id: Optional[str] = None
    message_id: Optional[str] = None


class ContactMessageResponse(BaseModel):
    """Schema for a stored contact message"""
    id: str = Field(alias="_id")
    name: str
    email: str
    phone: Optional[str] = None
    division: str = "General"
    message: str
    created_at: datetime
    is_read: bool = False

    class Config:
        populate_by_name = True


class ContactMessageListResponse(BaseModel):
    total: int
    unread: int
    messages: List[ContactMessageResponse]
