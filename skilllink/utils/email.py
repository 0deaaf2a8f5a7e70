from __future__ import annotations

import html
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional
from urllib.parse import quote

from skilllink.config import settings

logger = logging.getLogger(__name__)


def is_email_enabled() -> bool:
    """Return True when outgoing email is configured and enabled."""
    if not settings.EMAIL_NOTIFICATIONS_ENABLED:
        return False
    if not settings.SMTP_SERVER:
        return False
    if not settings.EMAIL_FROM:
        return False
    return True


def send_email(
    *,
    to_email: str,
    subject: str,
    body_text: str,
    body_html: Optional[str] = None,
) -> bool:
    """
    Send an email using SMTP settings.

    Returns True on success. Failures are logged and False is returned.
    """
    if not is_email_enabled():
        return False

    smtp_server = settings.SMTP_SERVER
    from_email = settings.EMAIL_FROM

    msg = MIMEMultipart("alternative")
    msg["From"] = from_email
    msg["To"] = to_email
    msg["Subject"] = subject
    msg.attach(MIMEText(body_text, "plain", "utf-8"))
    if body_html:
        msg.attach(MIMEText(body_html, "html", "utf-8"))

    username = settings.SMTP_USERNAME or from_email
    password = settings.EMAIL_PASSWORD or ""

    try:
        if settings.SMTP_USE_SSL:
            server = smtplib.SMTP_SSL(
                smtp_server,
                settings.SMTP_PORT,
                timeout=settings.SMTP_TIMEOUT_SECONDS,
            )
        else:
            server = smtplib.SMTP(
                smtp_server,
                settings.SMTP_PORT,
                timeout=settings.SMTP_TIMEOUT_SECONDS,
            )

        with server:
            if settings.SMTP_USE_TLS and not settings.SMTP_USE_SSL:
                server.starttls()
            if password:
                server.login(username, password)
            server.sendmail(from_email, [to_email], msg.as_string())
        return True
    except (smtplib.SMTPException, OSError) as exc:
        logger.warning("Email send failed for '%s': %s", to_email, exc)
        return False


def build_verification_url(token: str) -> str:
    base = settings.API_BASE_URL.rstrip("/")
    return f"{base}/api/auth/verify-email?token={quote(token)}"


def send_verification_email(*, to_email: str, full_name: str, token: str) -> bool:
    verify_url = build_verification_url(token)
    if not is_email_enabled():
        logger.info("Email delivery disabled; verification link for %s: %s", to_email, verify_url)
        return False

    hours = settings.EMAIL_VERIFICATION_HOURS
    body_text = (
        f"Hi {full_name},\n\n"
        "Thanks for registering at SkillLink. Verify your email here:\n"
        f"{verify_url}\n\n"
        f"This link will expire in {hours} hours."
    )
    body_html = (
        "<h2>Verify your email</h2>"
        f"<p>Hi {html.escape(full_name)},</p>"
        "<p>Thanks for registering at SkillLink. Please verify your email by clicking the link below:</p>"
        f'<p><a href="{verify_url}">Verify my email</a></p>'
        f"<p>This link will expire in {hours} hours.</p>"
    )
    return send_email(
        to_email=to_email,
        subject="Verify your SkillLink email",
        body_text=body_text,
        body_html=body_html,
    )
