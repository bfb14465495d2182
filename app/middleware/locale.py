"""
Request-scoped locale state.
Resolves the active locale once per request and exposes it on request.state.
"""
import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import LOCALE_COOKIE_NAME
from app.i18n import direction, resolve_locale

log = logging.getLogger(__name__)


class LocaleMiddleware(BaseHTTPMiddleware):
    """Sets request.state.locale / request.state.direction and Content-Language"""

    def __init__(self, app, cookie_name: str = LOCALE_COOKIE_NAME):
        super().__init__(app)
        self.cookie_name = cookie_name

    async def dispatch(self, request: Request, call_next) -> Response:
        locale = resolve_locale(
            request.cookies.get(self.cookie_name),
            request.headers.get("accept-language"),
        )
        request.state.locale = locale
        request.state.direction = direction(locale)

        response = await call_next(request)
        response.headers.setdefault("Content-Language", locale)
        return response


def get_request_locale(request: Request) -> str:
    """Locale for handlers; works even when the middleware is not installed."""
    locale = getattr(request.state, "locale", None)
    if locale is None:
        locale = resolve_locale(
            request.cookies.get(LOCALE_COOKIE_NAME),
            request.headers.get("accept-language"),
        )
        log.debug("LOCALE|resolved_without_middleware|locale=%s", locale)
    return locale
