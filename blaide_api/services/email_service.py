import html
import logging
from typing import Callable, Optional

import httpx

from blaide_api.config import EnvironmentConfig
from blaide_api.errors import DispatchError, EmailProviderError
from blaide_api.schemas.email import EmailDispatchRequest, SendEmailRequest

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"
CONFIRMATION_SUBJECT = "Thank you for contacting Blaide"


class ResendEmailService:
    """Async email service using Resend API for transactional emails"""

    def __init__(self, api_key: str, api_url: str = RESEND_API_URL, timeout: float = 10.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport

    async def send(self, email: EmailDispatchRequest) -> Optional[str]:
        """Send one email and return the id Resend assigned to it"""
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    json=email.to_resend_payload(),
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    timeout=self.timeout
                )
        except httpx.HTTPError as e:
            raise EmailProviderError(f"Failed to reach Resend: {e}") from e

        if response.status_code not in (200, 201):
            logger.error(f"Resend API error ({response.status_code}): {response.text}")
            raise EmailProviderError(_provider_message(response), response.status_code)

        body = _json_body(response)
        if body is None:
            raise EmailProviderError(f"Unexpected Resend response: {response.text[:200]}", response.status_code)
        return body.get("id")


def _json_body(response: httpx.Response) -> Optional[dict]:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def _provider_message(response: httpx.Response) -> str:
    message = (_json_body(response) or {}).get("message")
    return message or response.text or f"Resend API error ({response.status_code})"


def build_admin_notification(request: SendEmailRequest, config: EnvironmentConfig) -> EmailDispatchRequest:
    """Internal notification for a new inquiry; replies go to the submitter"""
    html_content = f"""
        <h1>New Contact Form Submission</h1>
        <p><strong>From:</strong> {html.escape(request.from_name)} ({html.escape(request.from_email)})</p>
        <p><strong>Phone:</strong> {html.escape(request.phone or 'Not provided')}</p>
        <p><strong>Division:</strong> {html.escape(request.division)}</p>
        <p><strong>Subject:</strong> {html.escape(request.subject)}</p>
        <p><strong>Message:</strong></p>
        <p>{html.escape(request.message).replace(chr(10), '<br>')}</p>
    """
    return EmailDispatchRequest(
        sender=config.sender,
        recipient=request.to or config.admin_email,
        reply_to=request.from_email,
        subject=f"New Contact Form Submission: {request.subject}",
        html=html_content,
    )


def build_confirmation(request: SendEmailRequest, config: EnvironmentConfig) -> EmailDispatchRequest:
    html_content = f"""
        <h1>Thank you for contacting Blaide</h1>
        <p>Dear {html.escape(request.from_name)},</p>
        <p>Thanks for contacting Blaide. We will get back to you shortly.</p>
        <p>Best regards,<br>The Blaide Team</p>
    """
    return EmailDispatchRequest(
        sender=config.sender,
        recipient=request.from_email,
        subject=CONFIRMATION_SUBJECT,
        html=html_content,
    )


class EmailRelay:
    """
    Sends the two emails for one contact submission.

    The admin notification goes first. If it fails the confirmation is not
    attempted and DispatchError is raised. A failed confirmation is only
    logged. Nothing is retried.
    """

    def __init__(self, config: EnvironmentConfig,
                 provider_factory: Callable[[str], ResendEmailService] = ResendEmailService):
        self.config = config
        self.provider_factory = provider_factory

    async def send_contact_email(self, request: SendEmailRequest) -> Optional[str]:
        api_key = self.config.require_email_api_key()
        provider = self.provider_factory(api_key)

        admin_email = build_admin_notification(request, self.config)
        try:
            admin_id = await provider.send(admin_email)
        except EmailProviderError as e:
            logger.error(f"Admin email error: {e.message}")
            raise DispatchError(e.message) from e

        logger.info(f"Admin notification {admin_id} sent to {admin_email.recipient}")

        try:
            await provider.send(build_confirmation(request, self.config))
            logger.info(f"Confirmation email sent to {request.from_email}")
        except Exception as e:
            # Confirmation is best-effort once the admin has been notified
            logger.exception(f"User confirmation email error for {request.from_email}: {e}")

        return admin_id
