"""
Submit Contact Message Use Case

Forwards the public contact form to the club inbox, rate limited per
client IP and per sender email.
"""

import logging
from typing import Optional

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.mail_gateway import IMailGateway, MailDeliveryError
from src.app.services.rate_limiter import IRateLimiter

logger = logging.getLogger(__name__)


class ContactResponse(BaseModel):
    ok: bool = True


class SubmitContactMessageUseCase:
    def __init__(
        self,
        mail_gateway: IMailGateway,
        ip_limiter: IRateLimiter,
        email_limiter: IRateLimiter,
    ):
        self.mail_gateway = mail_gateway
        self.ip_limiter = ip_limiter
        self.email_limiter = email_limiter

    async def execute(
        self,
        name: Optional[str],
        email: Optional[str],
        message: Optional[str],
        client_ip: Optional[str],
    ) -> Result[ContactResponse]:
        if not email or not message:
            return Return.err(Error("VALIDATION_ERROR", "Email and message are required"))

        email = email.strip()
        if self.ip_limiter.hit(client_ip or "unknown") or self.email_limiter.hit(email.lower()):
            logger.warning(f"Contact form rate limit hit for {client_ip or 'unknown'} / {email}")
            return Return.err(
                Error("RATE_LIMITED", "Too many requests. Please try again later.")
            )

        try:
            await self.mail_gateway.send_contact_message((name or "").strip(), email, message)
        except MailDeliveryError as exc:
            logger.error(f"Contact message from {email} failed: {exc}")
            return Return.err(Error("MAIL_DELIVERY_FAILED", "Failed to send message"))

        return Return.ok(ContactResponse())
