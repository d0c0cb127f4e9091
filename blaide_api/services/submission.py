import logging
import re
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol

from blaide_api.config import EnvironmentConfig
from blaide_api.divisions import DIVISIONS, normalize_division
from blaide_api.errors import ValidationError
from blaide_api.schemas.contact import ContactSubmission
from blaide_api.schemas.email import EMAIL_PATTERN, SendEmailRequest

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(EMAIL_PATTERN)
REQUIRED_FIELDS = ("name", "email", "message")


class EmailDispatcher(Protocol):
    async def send_contact_email(self, request: SendEmailRequest) -> Optional[str]:
        ...


@dataclass
class SubmissionResult:
    success: bool
    id: Optional[str] = None
    message_id: Optional[str] = None


def _clean(value) -> str:
    return value.strip() if isinstance(value, str) else ""


def validate_submission(raw: Mapping) -> ContactSubmission:
    """Check required fields, then email shape, then division; first failure wins"""
    for field in REQUIRED_FIELDS:
        if not _clean(raw.get(field)):
            raise ValidationError(field, f"{field.capitalize()} is required")

    email = _clean(raw.get("email"))
    if not EMAIL_RE.match(email):
        raise ValidationError("email", "Please enter a valid email address")

    division = normalize_division(raw.get("division"))
    if division is None:
        raise ValidationError("division", f"Division must be one of: {', '.join(DIVISIONS)}")

    return ContactSubmission(
        name=_clean(raw.get("name")),
        email=email,
        message=_clean(raw.get("message")),
        division=division,
        phone=_clean(raw.get("phone")) or None,
    )


class ContactSubmissionHandler:
    """Validate, store, then hand the submission to the email dispatcher"""

    def __init__(self, store, dispatcher: EmailDispatcher, config: EnvironmentConfig):
        self.store = store
        self.dispatcher = dispatcher
        self.config = config

    def build_email_request(self, submission: ContactSubmission) -> SendEmailRequest:
        return SendEmailRequest(
            to=self.config.admin_email,
            from_email=submission.email,
            from_name=submission.name,
            division=submission.division,
            subject=f"{submission.division} inquiry",
            message=submission.message,
            phone=submission.phone,
        )

    async def submit(self, raw: Mapping) -> SubmissionResult:
        return await self.process(validate_submission(raw))

    async def process(self, submission: ContactSubmission) -> SubmissionResult:
        """Store an already validated submission, then send its emails"""
        logger.info(f"New contact submission from {submission.email} ({submission.division})")

        # PersistenceError propagates; nothing is emailed for an unsaved message
        stored = self.store.create(
            name=submission.name,
            email=submission.email,
            message=submission.message,
            division=submission.division,
            phone=submission.phone,
        )
        message_id = stored["_id"]
        logger.info(f"Contact message stored: {message_id}")

        email_id = await self.dispatcher.send_contact_email(self.build_email_request(submission))

        return SubmissionResult(success=True, id=email_id, message_id=message_id)
