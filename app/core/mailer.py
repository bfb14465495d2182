"""
Robust ASYNCHRONOUS e-mail delivery using the Resend HTTP API.
Sends notification e-mails using httpx with retries, timeouts and detailed logging.
"""
import asyncio
import logging
import os
from typing import Any, Dict, List, Optional, Union

import httpx
from httpx import Timeout

from .logger import mask_email, mask_token

log = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.resend.com"

# Provider answers worth another attempt, besides any 5xx
RETRYABLE_STATUS = frozenset({408, 425, 429})


def _is_retryable(status_code: int) -> bool:
    return status_code in RETRYABLE_STATUS or status_code >= 500


async def _build_client(timeout_seconds: float) -> httpx.AsyncClient:
    """Build httpx client; retries are handled by send_email"""
    timeout = Timeout(timeout_seconds, connect=timeout_seconds, read=timeout_seconds)
    return httpx.AsyncClient(timeout=timeout, follow_redirects=True)


def _provider_id(response: httpx.Response) -> Optional[str]:
    if response.status_code == 204:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("id")
    return None


async def send_email(
    from_address: str,
    to: Union[str, List[str]],
    subject: str,
    html: str,
    text: Optional[str] = None,
    reply_to: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Send one e-mail via the Resend API asynchronously with retries.

    Args:
        from_address: Sender, e.g. "Site <onboarding@resend.dev>"
        to: Recipient address or list of addresses
        subject: Subject line
        html: HTML body
        text: Optional plain-text alternative
        reply_to: Optional Reply-To address

    Returns:
        Dict with keys:
        - sent: True when the provider accepted the message
        - status_code: last HTTP status code (0 when no response)
        - provider_id: provider message id, when returned
        - error_reason: Optional error description
    """
    # Load configuration from environment
    api_key = os.getenv("RESEND_API_KEY", "")
    base_url = os.getenv("RESEND_API_URL", DEFAULT_API_URL).rstrip("/")
    timeout_seconds = float(os.getenv("RESEND_TIMEOUT_SECONDS", "8"))
    max_retries = int(os.getenv("RESEND_MAX_RETRIES", "2"))
    backoff = float(os.getenv("RESEND_RETRY_BACKOFF", "0.5"))

    result: Dict[str, Any] = {
        "sent": False,
        "status_code": 0,
        "provider_id": None,
        "error_reason": None,
    }

    recipients = [to] if isinstance(to, str) else list(to)

    # Input validation
    if not recipients:
        log.warning("DELIVERY|error|no_recipients")
        result["error_reason"] = "no_recipients"
        return result

    if not subject or not html:
        log.warning("DELIVERY|error|empty_content")
        result["error_reason"] = "empty_content"
        return result

    if not api_key:
        log.error("DELIVERY|error|missing_api_key - RESEND_API_KEY is not set")
        result["error_reason"] = "missing_api_key"
        return result

    url = f"{base_url}/emails"
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    payload: Dict[str, Any] = {
        "from": from_address,
        "to": recipients,
        "subject": subject,
        "html": html,
    }
    if text:
        payload["text"] = text
    if reply_to:
        payload["reply_to"] = reply_to

    log.info(
        "DELIVERY|attempt|url=%s|key=%s|to=%d|reply_to=%s|timeout=%gs|retries=%d",
        url,
        mask_token(api_key),
        len(recipients),
        mask_email(reply_to) if reply_to else "-",
        timeout_seconds,
        max_retries,
    )

    for attempt in range(max_retries + 1):
        last_attempt = attempt == max_retries
        try:
            async with await _build_client(timeout_seconds) as client:
                response = await client.post(url, json=payload, headers=headers)

            result["status_code"] = response.status_code

            if 200 <= response.status_code < 300:
                result["provider_id"] = _provider_id(response)
                result["sent"] = True
                log.info(
                    "DELIVERY|success|status=%d|id=%s|attempt=%d/%d",
                    response.status_code,
                    result["provider_id"],
                    attempt + 1,
                    max_retries + 1,
                )
                return result

            error_body = response.text[:1000]
            log.error(
                "DELIVERY|http_error|status=%d|attempt=%d/%d|body=%s",
                response.status_code,
                attempt + 1,
                max_retries + 1,
                error_body,
            )
            result["error_reason"] = f"http_{response.status_code}"

            if not _is_retryable(response.status_code) or last_attempt:
                return result

        except httpx.TimeoutException as e:
            log.warning(
                "DELIVERY|timeout|attempt=%d/%d|timeout=%gs|error=%s",
                attempt + 1,
                max_retries + 1,
                timeout_seconds,
                str(e),
            )
            result["error_reason"] = "timeout"
            if last_attempt:
                return result

        except httpx.TransportError as e:
            log.warning(
                "DELIVERY|connection_error|attempt=%d/%d|error=%s",
                attempt + 1,
                max_retries + 1,
                str(e),
            )
            result["error_reason"] = "connection_failed"
            if last_attempt:
                return result

        except httpx.HTTPError as e:
            # Redirect loops and undecodable bodies are not retried
            log.error(
                "DELIVERY|request_failed|attempt=%d/%d|error=%s",
                attempt + 1,
                max_retries + 1,
                str(e),
            )
            result["error_reason"] = "request_failed"
            return result

        # Wait before retry
        await asyncio.sleep(backoff * (2 ** attempt))

    return result
