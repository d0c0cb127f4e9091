import logging
from typing import Optional

import httpx

from blaide_api.config import EnvironmentConfig
from blaide_api.errors import DispatchError, MissingConfigurationError
from blaide_api.schemas.email import SendEmailRequest

logger = logging.getLogger(__name__)


class RelayClient:
    """Calls a remote /sendEmail relay instead of sending in-process"""

    def __init__(self, config: EnvironmentConfig, timeout: float = 10.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.timeout = timeout
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{self.config.api_base_url}/sendEmail"

    async def send_contact_email(self, request: SendEmailRequest) -> Optional[str]:
        if not self.url.startswith(("http://", "https://")):
            raise MissingConfigurationError(
                "API_BASE_URL", f"Remote email relay needs an absolute API base URL, got {self.config.api_base_url}"
            )

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.url,
                    json=request.model_dump(exclude_none=True),
                    headers={"Accept": "application/json"},
                    timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logger.error(f"Error calling email relay at {self.url}: {e}")
            raise DispatchError(str(e)) from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.status_code != 200:
            raise DispatchError(data.get("error") or "Failed to send email")

        return data.get("id")
