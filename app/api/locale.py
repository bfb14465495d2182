"""
Locale switching and message catalog endpoints.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.config import LOCALE_COOKIE_MAX_AGE, LOCALE_COOKIE_NAME
from app.i18n import direction, is_supported, load_messages
from app.middleware.locale import get_request_locale
from app.models.contact import ErrorResponse, LocaleState, LocaleUpdate

log = logging.getLogger(__name__)

router = APIRouter()

UNSUPPORTED_LOCALE_ERROR = "Unsupported locale"


@router.post(
    "/locale",
    response_model=LocaleState,
    responses={400: {"model": ErrorResponse}},
)
async def set_locale(update: LocaleUpdate, request: Request):
    """Persist the visitor's locale choice in a cookie."""
    requested = update.locale.strip().lower()
    if not is_supported(requested):
        log.info("LOCALE|rejected|requested=%s", update.locale)
        return JSONResponse(
            ErrorResponse(error=UNSUPPORTED_LOCALE_ERROR).model_dump(),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    current = get_request_locale(request)
    state = LocaleState(
        locale=requested,
        direction=direction(requested),
        changed=requested != current,
    )

    response = JSONResponse(state.model_dump())
    response.set_cookie(
        LOCALE_COOKIE_NAME,
        requested,
        max_age=LOCALE_COOKIE_MAX_AGE,
        path="/",
        samesite="lax",
    )
    response.headers["Content-Language"] = requested

    log.info("LOCALE|set|from=%s|to=%s", current, requested)
    return response


@router.get("/messages")
async def get_messages(request: Request) -> Dict[str, Any]:
    """Catalog for the current request locale."""
    locale = get_request_locale(request)
    return {
        "locale": locale,
        "direction": direction(locale),
        "messages": load_messages(locale),
    }
