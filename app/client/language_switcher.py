"""
Client-side EN | AR switcher.
"""
import logging
from typing import Awaitable, Callable, Optional, Union

import httpx

from app.i18n import SUPPORTED_LOCALES

log = logging.getLogger(__name__)

RefreshCallback = Callable[[str], Union[None, Awaitable[None]]]


class LanguageSwitcher:
    """Posts the chosen locale and asks the page to refresh."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        current_locale: str,
        on_refresh: Optional[RefreshCallback] = None,
        endpoint: str = "/api/locale",
    ):
        self.client = client
        self.current_locale = current_locale
        self.on_refresh = on_refresh
        self.endpoint = endpoint
        self.is_pending = False

    @property
    def options(self):
        return SUPPORTED_LOCALES

    def is_active(self, locale: str) -> bool:
        return locale == self.current_locale

    async def change(self, new_locale: str) -> bool:
        """
        Switch to new_locale.

        Returns:
            True if the locale was changed, False if nothing happened
        """
        if new_locale == self.current_locale or self.is_pending:
            return False
        if new_locale not in self.options:
            raise ValueError(f"Unsupported locale: {new_locale}")

        self.is_pending = True
        try:
            response = await self.client.post(self.endpoint, json={"locale": new_locale})
            response.raise_for_status()
            self.current_locale = response.json().get("locale", new_locale)

            if self.on_refresh is not None:
                outcome = self.on_refresh(self.current_locale)
                if outcome is not None:
                    await outcome
        finally:
            self.is_pending = False

        log.info("SWITCHER|changed|locale=%s", self.current_locale)
        return True
