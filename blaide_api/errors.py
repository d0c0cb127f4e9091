"""
Error types raised by the contact pipeline.

Each error carries the HTTP status and the message shown to the caller;
main.py converts them into a uniform {"error": ...} JSON body.
"""
from typing import Optional


class BlaideError(Exception):
    status_code = 500
    public_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message

    def to_dict(self) -> dict:
        return {"error": self.public_message}


class ValidationError(BlaideError):
    """A submission field is missing or malformed"""
    status_code = 400

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        return {"error": self.message, "field": self.field}


class ConfigurationError(BlaideError):
    """A required setting is absent; the detail is only logged"""
    status_code = 503
    public_message = "Service temporarily unavailable"


class MissingConfigurationError(ConfigurationError):
    def __init__(self, variable: str, message: Optional[str] = None):
        super().__init__(message or f"{variable} is not configured")
        self.variable = variable


class PersistenceError(BlaideError):
    """Writing to or reading from MongoDB failed"""
    status_code = 500
    public_message = "Failed to save your message. Please try again."


class NotFoundError(BlaideError):
    status_code = 404
    public_message = "Not found"

    def to_dict(self) -> dict:
        return {"error": self.message}


class DispatchError(BlaideError):
    """The admin notification email could not be sent"""
    status_code = 500
    public_message = "Failed to send your message. Please try again."


class EmailProviderError(Exception):
    """The Resend API rejected a send or could not be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
