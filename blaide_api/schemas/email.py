from pydantic import BaseModel, Field
from typing import Optional

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class SendEmailRequest(BaseModel):
    """Body of POST /api/sendEmail"""
    to: Optional[str] = None
    from_email: str = Field(..., pattern=EMAIL_PATTERN)
    from_name: str = Field(..., min_length=1)
    division: str = "General"
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    phone: Optional[str] = None


class SendEmailResponse(BaseModel):
    success: bool
    id: Optional[str] = None


class EmailDispatchRequest(BaseModel):
    """One outbound email; never persisted"""
    sender: str
    recipient: str
    subject: str
    html: str
    reply_to: Optional[str] = None

    def to_resend_payload(self) -> dict:
        payload = {
            "from": self.sender,
            "to": self.recipient,
            "subject": self.subject,
            "html": self.html,
        }
        if self.reply_to:
            payload["reply_to"] = self.reply_to
        return payload
