"""Transactional email delivery for vendors via SendGrid."""

from __future__ import annotations

import json
import logging
from html import escape
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from app.config import get_settings

logger = logging.getLogger(__name__)


def _describe_error_body(body: Any) -> str | None:
    """Return the ``errors[].message`` entries of a SendGrid error payload."""

    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            body = json.loads(body)
        except json.JSONDecodeError:
            return body
    if isinstance(body, dict):
        messages = [
            str(item["message"])
            for item in body.get("errors") or []
            if isinstance(item, dict) and item.get("message")
        ]
        if messages:
            return "; ".join(messages)
        return json.dumps(body)
    return None


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Send an email using the configured SendGrid credentials.

    Returns ``False`` (after logging) when email is not configured or SendGrid
    rejects the message; callers never have to handle an exception.
    """

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        response = SendGridAPIClient(settings.sendgrid_api_key).send(message)
    except Exception as exc:  # python-http-client raises per-status subclasses
        details = _describe_error_body(getattr(exc, "body", None))
        logger.error(
            "SendGrid API request failed with status %s: %s",
            getattr(exc, "status_code", "unknown"),
            details or exc,
        )
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        logger.error(
            "SendGrid API responded with status %s: %s",
            status_code,
            _describe_error_body(getattr(response, "body", None)),
        )
        return False
    return True


def send_payment_status_email(*, name: str, email: str, status: str) -> bool:
    """Tell a vendor their payment receipt was approved or rejected."""

    settings = get_settings()
    greeting = f"<h2>Payment Status Update</h2><p>Dear {escape(name)},</p>"
    if status == "Approved":
        subject = "Payment Approved - Festival App"
        login_url = f"{settings.frontend_url.rstrip('/')}/vendor-login"
        body = (
            "<p>We are pleased to inform you that your payment has been approved.</p>"
            f'<p>You can now <a href="{escape(login_url)}">log in to the vendor portal</a>.</p>'
        )
    elif status == "Rejected":
        subject = "Payment Rejected - Festival App"
        body = (
            "<p>We regret to inform you that your payment has been rejected.</p>"
            "<p>Please review your payment details and submit a new receipt if necessary.</p>"
        )
    else:
        return False

    footer = "<p>If you have any questions, please contact our support team.</p>"
    return send_email(subject, greeting + body + footer, email)


__all__ = ["send_email", "send_payment_status_email"]
