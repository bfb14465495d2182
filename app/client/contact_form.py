"""
Client-side contact form controller.

Tracks the form fields and the submission status the page renders from:

    idle --submit--> loading --2xx--> success --(reset_after)--> idle
                             \--else--> error

Talks to /api/contact through any httpx.AsyncClient.
"""
import asyncio
import logging
from enum import Enum
from typing import Callable, Dict, Optional

import httpx

from app.core.validation import is_valid_email

log = logging.getLogger(__name__)

FIELDS = ("name", "email", "phone", "message")
REQUIRED_FIELDS = ("name", "email", "message")


class FormStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


def _empty_form() -> Dict[str, str]:
    return {field: "" for field in FIELDS}


class ContactFormController:
    """State machine behind the contact form."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        translate: Callable[[str], str],
        endpoint: str = "/api/contact",
        reset_after: float = 5.0,
    ):
        self.client = client
        self.t = translate
        self.endpoint = endpoint
        self.reset_after = reset_after

        self.form_data: Dict[str, str] = _empty_form()
        self.status = FormStatus.IDLE
        self.error_message = ""
        self.field_errors: Dict[str, str] = {}
        self._reset_handle: Optional[asyncio.TimerHandle] = None

    @property
    def is_disabled(self) -> bool:
        return self.status == FormStatus.LOADING

    @property
    def submit_label(self) -> str:
        return self.t("sending") if self.is_disabled else self.t("submit")

    def handle_change(self, name: str, value: str) -> None:
        if name not in FIELDS:
            raise KeyError(f"Unknown form field: {name}")
        self.form_data[name] = value
        self.field_errors.pop(name, None)

    def validate(self) -> Dict[str, str]:
        """Browser-side constraints: required fields and email shape."""
        errors = {}
        for field in REQUIRED_FIELDS:
            if not self.form_data[field].strip():
                errors[field] = self.t("required")

        email = self.form_data["email"].strip()
        if "email" not in errors and not is_valid_email(email):
            errors["email"] = self.t("invalidEmail")

        self.field_errors = errors
        return errors

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _reset_to_idle(self) -> None:
        self._reset_handle = None
        if self.status == FormStatus.SUCCESS:
            self.status = FormStatus.IDLE

    async def submit(self) -> bool:
        """
        Submit the form.

        Returns:
            True if the server accepted the submission, False otherwise
            (including ignored and client-rejected submissions)
        """
        if self.is_disabled:
            return False

        if self.validate():
            return False

        self._cancel_reset()
        self.status = FormStatus.LOADING
        self.error_message = ""

        try:
            response = await self.client.post(self.endpoint, json=dict(self.form_data))
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            log.warning("FORM|submit_failed|error=%s", e)
            self.status = FormStatus.ERROR
            self.error_message = self.t("errorGeneric")
            return False

        if response.is_success:
            self.status = FormStatus.SUCCESS
            self.form_data = _empty_form()
            loop = asyncio.get_running_loop()
            self._reset_handle = loop.call_later(self.reset_after, self._reset_to_idle)
            return True

        self.status = FormStatus.ERROR
        error = data.get("error") if isinstance(data, dict) else None
        self.error_message = error or self.t("errorGeneric")
        return False
