"""
Internationalization for the English/Arabic site.
"""
from .catalog import catalog_gaps, load_messages, translator
from .locale import (
    DEFAULT_LOCALE,
    RTL_LOCALES,
    SUPPORTED_LOCALES,
    direction,
    is_supported,
    parse_accept_language,
    resolve_locale,
)

__all__ = [
    "DEFAULT_LOCALE",
    "RTL_LOCALES",
    "SUPPORTED_LOCALES",
    "catalog_gaps",
    "direction",
    "is_supported",
    "load_messages",
    "parse_accept_language",
    "resolve_locale",
    "translator",
]
