from dataclasses import asdict
from typing import Any, Callable, Dict

from fastapi import APIRouter, Body, Depends, status
import logging

from blaide_api.config import EnvironmentConfig
from blaide_api.deps import get_contact_store_factory, get_dispatcher, get_environment_config
from blaide_api.models.contact_message import ContactMessageStore
from blaide_api.schemas.contact import SubmissionResponse
from blaide_api.services.submission import ContactSubmissionHandler, validate_submission

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact_message(
    payload: Dict[str, Any] = Body(...),
    store_factory: Callable[[], ContactMessageStore] = Depends(get_contact_store_factory),
    dispatcher=Depends(get_dispatcher),
    config: EnvironmentConfig = Depends(get_environment_config)
):
    """
    Submit the landing page contact form.

    The form is validated before MongoDB is touched, and the message is
    stored before any email is sent. Errors are converted to JSON by the
    handlers registered in main.py.
    """
    submission = validate_submission(payload)
    handler = ContactSubmissionHandler(store_factory(), dispatcher, config)
    result = await handler.process(submission)
    return asdict(result)
