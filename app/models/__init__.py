"""
Data models for the Averroez site backend
"""
from .contact import (
    ContactResponse,
    ContactSubmission,
    ErrorResponse,
    LocaleState,
    LocaleUpdate,
)

__all__ = [
    "ContactResponse",
    "ContactSubmission",
    "ErrorResponse",
    "LocaleState",
    "LocaleUpdate",
]
