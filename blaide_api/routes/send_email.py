from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
import logging

from blaide_api.config import EnvironmentConfig
from blaide_api.deps import get_email_relay, get_environment_config
from blaide_api.errors import ConfigurationError, DispatchError
from blaide_api.schemas.email import SendEmailRequest
from blaide_api.services.email_service import EmailRelay

logger = logging.getLogger(__name__)

router = APIRouter(tags=["email"])

# Every verb is routed here so non-POST requests get the JSON 405 body
RELAY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.api_route("/api/sendEmail", methods=RELAY_METHODS)
@router.api_route("/sendEmail", methods=RELAY_METHODS, include_in_schema=False)
async def send_email(
    request: Request,
    config: EnvironmentConfig = Depends(get_environment_config),
    relay: EmailRelay = Depends(get_email_relay)
):
    """
    Relay a contact submission as two emails via Resend.

    The recipient is always the configured admin address, whatever the
    client sent in `to`.
    """
    if request.method != "POST":
        return error_response(status.HTTP_405_METHOD_NOT_ALLOWED, "Method not allowed")

    if not config.email_api_key:
        logger.error("Resend API key not configured")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Resend API key not configured")

    try:
        body = await request.json()
        payload = SendEmailRequest.model_validate(body)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "body"
        return error_response(status.HTTP_400_BAD_REQUEST, f"Invalid field {field}: {first['msg']}")
    except ValueError:
        return error_response(status.HTTP_400_BAD_REQUEST, "Request body must be valid JSON")

    payload = payload.model_copy(update={"to": config.admin_email})

    try:
        email_id = await relay.send_contact_email(payload)
    except ConfigurationError as e:
        logger.error(f"Email relay misconfigured: {e.message}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)
    except DispatchError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)
    except Exception as e:
        logger.exception(f"Error sending email: {e}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    return {"success": True, "id": email_id}
