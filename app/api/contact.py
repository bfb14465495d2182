"""
Contact form endpoint.
Validates a submission and relays it to the site inbox through the mail API.
"""
import logging
import uuid

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app import config
from app.core import mailer
from app.core.email_template import render_contact_email
from app.core.logger import mask_email
from app.core.validation import ContactValidationError, validate_submission
from app.middleware.locale import get_request_locale
from app.models.contact import ContactResponse, ErrorResponse

log = logging.getLogger(__name__)

router = APIRouter()

SEND_FAILED_ERROR = "Failed to send email"
INTERNAL_ERROR = "Internal server error"
SUCCESS_MESSAGE = "Email sent successfully"


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        ErrorResponse(error=message).model_dump(), status_code=status_code
    )


@router.post(
    "/contact",
    response_model=ContactResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_contact(request: Request):
    """
    Receive a contact form submission.
    Validate → render → send ONE e-mail → report.
    """
    submission_id = uuid.uuid4().hex[:12]
    context = {
        "submission_id": submission_id,
        "locale": get_request_locale(request),
    }

    try:
        body = await request.json()

        try:
            submission = validate_submission(body)
        except ContactValidationError as e:
            log.info(
                "CONTACT|rejected|id=%s|field=%s|reason=%s",
                submission_id,
                e.field,
                e.error,
                extra={**context, "action": "rejected"},
            )
            return _error(e.error, status.HTTP_400_BAD_REQUEST)

        log.info(
            "CONTACT|received|id=%s|email=%s|phone=%s|chars=%d",
            submission_id,
            mask_email(submission.email),
            "yes" if submission.phone else "no",
            len(submission.message),
            extra={**context, "action": "received"},
        )

        email = render_contact_email(submission)
        result = await mailer.send_email(
            from_address=config.CONTACT_FROM,
            to=config.CONTACT_TO,
            subject=email.subject,
            html=email.html,
            text=email.text,
            reply_to=submission.email,
        )

        if not result.get("sent"):
            log.error(
                "CONTACT|delivery_failed|id=%s|status=%s|reason=%s",
                submission_id,
                result.get("status_code"),
                result.get("error_reason"),
                extra={
                    **context,
                    "action": "delivery_failed",
                    "status_code": result.get("status_code"),
                },
            )
            return _error(SEND_FAILED_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)

        log.info(
            "CONTACT|sent|id=%s|provider_id=%s",
            submission_id,
            result.get("provider_id"),
            extra={**context, "action": "sent"},
        )
        return ContactResponse(message=SUCCESS_MESSAGE)

    except Exception:
        log.exception(
            "CONTACT|error|id=%s", submission_id, extra={**context, "action": "error"}
        )
        return _error(INTERNAL_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)
