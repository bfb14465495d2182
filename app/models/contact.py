"""
Contact form models
"""
from typing import Optional

from pydantic import BaseModel, Field


class ContactSubmission(BaseModel):
    """Validated contact form submission"""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: Optional[str] = None
    message: str = Field(..., min_length=1)


class ContactResponse(BaseModel):
    """Successful relay response"""

    message: str


class ErrorResponse(BaseModel):
    """Error body shared by the public endpoints"""

    error: str


class LocaleUpdate(BaseModel):
    """Requested locale switch"""

    locale: str


class LocaleState(BaseModel):
    """Locale after a switch request"""

    locale: str
    direction: str
    changed: bool
