"""
Message catalogs loaded from app/i18n/messages/<locale>.json.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict

from .locale import DEFAULT_LOCALE, SUPPORTED_LOCALES

log = logging.getLogger(__name__)

MESSAGES_DIR = Path(__file__).resolve().parent / "messages"


@lru_cache(maxsize=None)
def load_messages(locale: str) -> Dict[str, Any]:
    """Load the full catalog for a supported locale."""
    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported locale: {locale}")

    path = MESSAGES_DIR / f"{locale}.json"
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


def _lookup(messages: Dict[str, Any], namespace: str, key: str):
    dotted = f"{namespace}.{key}" if namespace else key
    node: Any = messages
    for part in dotted.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translator(locale: str, namespace: str = "") -> Callable[[str], str]:
    """
    Build a t(key) function for one namespace.
    Missing keys fall back to the default locale, then to the key itself.
    """
    if locale not in SUPPORTED_LOCALES:
        locale = DEFAULT_LOCALE

    primary = load_messages(locale)
    fallback = load_messages(DEFAULT_LOCALE)

    def t(key: str) -> str:
        value = _lookup(primary, namespace, key)
        if value is None:
            value = _lookup(fallback, namespace, key)
            if value is None:
                log.warning("I18N|missing_key|locale=%s|key=%s.%s", locale, namespace, key)
                return key
        return value

    return t


def flatten_keys(messages: Dict[str, Any], prefix: str = "") -> set:
    """All dotted leaf keys of a catalog."""
    keys = set()
    for name, value in messages.items():
        dotted = f"{prefix}.{name}" if prefix else name
        if isinstance(value, dict):
            keys |= flatten_keys(value, dotted)
        else:
            keys.add(dotted)
    return keys


def catalog_gaps() -> Dict[str, set]:
    """Keys of the default catalog that each other locale lacks."""
    reference = flatten_keys(load_messages(DEFAULT_LOCALE))
    gaps = {}
    for locale in SUPPORTED_LOCALES:
        if locale == DEFAULT_LOCALE:
            continue
        missing = reference - flatten_keys(load_messages(locale))
        if missing:
            gaps[locale] = missing
    return gaps
