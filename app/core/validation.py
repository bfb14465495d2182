"""
Server-side validation for contact form submissions.
"""
import re
from typing import Any, Optional

from app.models.contact import ContactSubmission

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS_ERROR = "Name, email, and message are required"
INVALID_EMAIL_ERROR = "Invalid email format"


class ContactValidationError(ValueError):
    """Submission rejected before any delivery attempt."""

    def __init__(self, error: str, field: Optional[str] = None):
        super().__init__(error)
        self.error = error
        self.field = field


def is_valid_email(email: str) -> bool:
    """
    Check an address against the loose user@domain.tld shape.

    Args:
        email: Candidate address

    Returns:
        True if it has a local part, an @, and a dotted domain without spaces
    """
    if not isinstance(email, str):
        return False
    return bool(EMAIL_PATTERN.match(email))


def _clean(value: Any) -> str:
    """
    Normalize one field to text.
    Non-zero numbers are stringified; other non-string values count as missing.
    """
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value) if value else ""
    if not isinstance(value, str):
        return ""
    return value.strip()


def validate_submission(body: Any) -> ContactSubmission:
    """
    Validate a decoded JSON body.

    Args:
        body: Decoded request body; anything but an object has no fields

    Returns:
        ContactSubmission with whitespace-trimmed fields

    Raises:
        ContactValidationError: Missing required fields or malformed email
        TypeError: The body is JSON null
    """
    if body is None:
        raise TypeError("Contact body must not be null")
    if not isinstance(body, dict):
        body = {}

    name = _clean(body.get("name"))
    email = _clean(body.get("email"))
    message = _clean(body.get("message"))
    phone = _clean(body.get("phone")) or None

    if not name or not email or not message:
        missing = next(
            field
            for field, value in (("name", name), ("email", email), ("message", message))
            if not value
        )
        raise ContactValidationError(REQUIRED_FIELDS_ERROR, field=missing)

    if not is_valid_email(email):
        raise ContactValidationError(INVALID_EMAIL_ERROR, field="email")

    return ContactSubmission(name=name, email=email, phone=phone, message=message)
