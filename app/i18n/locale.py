"""
Locale constants and resolution helpers.
"""
from typing import List, Optional, Tuple

from app.config import DEFAULT_LOCALE as _CONFIGURED_DEFAULT

SUPPORTED_LOCALES: Tuple[str, ...] = ("en", "ar")
RTL_LOCALES = frozenset({"ar"})

DEFAULT_LOCALE = (
    _CONFIGURED_DEFAULT if _CONFIGURED_DEFAULT in SUPPORTED_LOCALES else "en"
)


def is_supported(locale: Optional[str]) -> bool:
    return bool(locale) and locale in SUPPORTED_LOCALES


def direction(locale: str) -> str:
    """Text direction for the html dir attribute."""
    return "rtl" if locale in RTL_LOCALES else "ltr"


def parse_accept_language(header: Optional[str]) -> List[str]:
    """
    Parse an Accept-Language header into primary language subtags,
    ordered by quality (highest first). Entries with q=0 are dropped.

    >>> parse_accept_language("ar-EG,ar;q=0.9,en;q=0.8")
    ['ar', 'ar', 'en']
    """
    if not header:
        return []

    entries = []
    for index, part in enumerate(header.split(",")):
        part = part.strip()
        if not part:
            continue
        tag, _, params = part.partition(";")
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        if quality <= 0:
            continue
        primary = tag.strip().split("-")[0].lower()
        if primary and primary != "*":
            entries.append((-quality, index, primary))

    return [primary for _, _, primary in sorted(entries)]


def resolve_locale(
    cookie_value: Optional[str] = None, accept_language: Optional[str] = None
) -> str:
    """
    Pick the request locale: explicit cookie first, then the browser's
    Accept-Language preferences, then the default.
    """
    if is_supported(cookie_value):
        return cookie_value

    for candidate in parse_accept_language(accept_language):
        if candidate in SUPPORTED_LOCALES:
            return candidate

    return DEFAULT_LOCALE
