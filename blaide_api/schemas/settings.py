from pydantic import BaseModel, EmailStr
from typing import Optional, List
from datetime import datetime


class SiteSettingsResponse(BaseModel):
    contact_email: Optional[str] = None
    updated_at: Optional[datetime] = None


class SiteSettingsUpdate(BaseModel):
    contact_email: EmailStr


class PublicConfigResponse(BaseModel):
    """Configuration safe to hand to the browser"""
    mode: str
    api_base_url: str


class DivisionsResponse(BaseModel):
    divisions: List[str]
