"""
Mail transports and the notification gateway.

Primary delivery goes through an HTTP email API (Resend-compatible). When the
provider rejects the sender address or domain, delivery falls back to SMTP if
it is configured.
"""

import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from html import escape
from typing import Optional
from urllib.parse import urlencode

import httpx

from src.app.services.mail_gateway import (
    IMailGateway,
    IMailTransport,
    MailDeliveryError,
    MailMessage,
    SenderRejectedError,
)

logger = logging.getLogger(__name__)

SENDER_COMPLAINT_MARKERS = ("domain", "from", "sender")


class ResendHttpTransport(IMailTransport):
    """Sends through a Resend-compatible ``POST /emails`` endpoint"""

    def __init__(
        self,
        api_key: str,
        from_email: str,
        api_url: str = "https://api.resend.com",
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.from_email = from_email
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def send(self, message: MailMessage) -> None:
        payload = {
            "from": self.from_email,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
            "text": message.text,
        }
        if message.reply_to:
            payload["reply_to"] = message.reply_to

        try:
            async with httpx.AsyncClient(
                base_url=self.api_url, timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    "/emails",
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
        except httpx.HTTPError as exc:
            raise MailDeliveryError(f"Email provider unreachable: {exc}") from exc

        if response.is_success:
            return

        detail = _error_detail(response)
        if _is_sender_rejection(response.status_code, detail):
            raise SenderRejectedError(f"Email provider rejected sender: {detail}")
        raise MailDeliveryError(
            f"Email provider returned {response.status_code}: {detail}"
        )


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or body)
    return str(body)


def _is_sender_rejection(status_code: int, detail: str) -> bool:
    if status_code == 403:
        return True
    if status_code == 422:
        lowered = detail.lower()
        return any(marker in lowered for marker in SENDER_COMPLAINT_MARKERS)
    return False


class SmtpTransport(IMailTransport):
    """Plain SMTP with STARTTLS, run off the event loop"""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_email: str,
        timeout: float = 5.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email or username
        self.timeout = timeout

    async def send(self, message: MailMessage) -> None:
        await asyncio.to_thread(self._send_sync, message)

    def _send_sync(self, message: MailMessage) -> None:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = message.subject
        msg["From"] = self.from_email
        msg["To"] = message.to
        if message.reply_to:
            msg["Reply-To"] = message.reply_to

        msg.attach(MIMEText(message.text, "plain"))
        msg.attach(MIMEText(message.html, "html"))

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                server.ehlo()
                server.starttls()
                server.ehlo()
                if self.username:
                    server.login(self.username, self.password)
                server.sendmail(self.from_email, [message.to], msg.as_string())
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(f"SMTP delivery failed: {exc}") from exc


class MailGateway(IMailGateway):
    """
    Notification gateway.

    Tries the primary transport, then the fallback on a sender rejection.
    The whole attempt is bounded by ``timeout``; a timeout is a delivery failure.
    """

    def __init__(
        self,
        primary: Optional[IMailTransport],
        fallback: Optional[IMailTransport] = None,
        app_url: str = "http://localhost:3000",
        app_name: str = "RobotiX",
        contact_inbox: str = "",
        reset_expire_minutes: int = 60,
        timeout: float = 5.0,
    ):
        self.primary = primary
        self.fallback = fallback
        self.app_url = app_url.rstrip("/")
        self.app_name = app_name
        self.contact_inbox = contact_inbox
        self.reset_expire_minutes = reset_expire_minutes
        self.timeout = timeout

    def reset_url(self, email: str, raw_token: str) -> str:
        return f"{self.app_url}/forgot/reset?{urlencode({'token': raw_token, 'email': email})}"

    async def send_reset_link(self, email: str, raw_token: str) -> None:
        url = self.reset_url(email, raw_token)
        html = (
            f"<p>You requested a password reset for your {escape(self.app_name)} account.</p>"
            f'<p><a href="{escape(url)}">Click here to reset your password</a></p>'
            f"<p>This link expires in {self.reset_expire_minutes} minutes.</p>"
            "<p>If you didn't request this, ignore this email.</p>"
        )
        text = f"Open this link to reset your password: {url}"
        await self.deliver(
            MailMessage(
                to=email,
                subject=f"Reset your {self.app_name} password",
                html=html,
                text=text,
            )
        )

    async def send_contact_message(self, name: str, email: str, message: str) -> None:
        if not self.contact_inbox:
            raise MailDeliveryError("Contact inbox is not configured")
        sender = name or email
        html = (
            f"<p><strong>From:</strong> {escape(sender)} &lt;{escape(email)}&gt;</p>"
            f"<p>{escape(message)}</p>"
        )
        text = f"From: {sender} <{email}>\n\n{message}"
        await self.deliver(
            MailMessage(
                to=self.contact_inbox,
                subject=f"New contact message from {sender}",
                html=html,
                text=text,
                reply_to=email,
            )
        )

    async def deliver(self, message: MailMessage) -> None:
        if self.primary is None and self.fallback is None:
            raise MailDeliveryError("No mail transport configured")
        try:
            await asyncio.wait_for(self._attempt(message), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            raise MailDeliveryError(
                f"Mail delivery timed out after {self.timeout}s"
            ) from exc

    async def _attempt(self, message: MailMessage) -> None:
        if self.primary is None:
            await self.fallback.send(message)
            return

        try:
            await self.primary.send(message)
            return
        except SenderRejectedError as exc:
            if self.fallback is None:
                raise
            logger.warning(f"Primary mail transport rejected sender, falling back to SMTP: {exc}")

        await self.fallback.send(message)


def build_mail_gateway(config) -> MailGateway:
    """Wire transports from ApplicationConfig"""
    primary = None
    fallback = None

    if config.RESEND_API_KEY:
        primary = ResendHttpTransport(
            api_key=config.RESEND_API_KEY,
            from_email=config.FROM_EMAIL,
            api_url=config.RESEND_API_URL,
            timeout=config.MAIL_SEND_TIMEOUT_SECONDS,
        )
    if config.SMTP_HOST:
        fallback = SmtpTransport(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            from_email=config.FROM_EMAIL,
            timeout=config.MAIL_SEND_TIMEOUT_SECONDS,
        )

    if primary is None and fallback is None:
        logger.warning("No mail transport configured - reset and contact emails will fail")
    elif not config.FROM_EMAIL:
        logger.warning("FROM_EMAIL is not set - the email provider may reject messages")

    return MailGateway(
        primary=primary,
        fallback=fallback,
        app_url=config.APP_URL,
        app_name=config.APP_NAME,
        contact_inbox=config.CONTACT_INBOX,
        reset_expire_minutes=config.RESET_TOKEN_EXPIRE_MINUTES,
        timeout=config.MAIL_SEND_TIMEOUT_SECONDS,
    )
