"""
Deferred reset-link delivery.

Sending the reset email after the response is written keeps the response
time of /forgot independent of whether the email matched an account.
"""

import logging

from fastapi import BackgroundTasks

from src.app.services.mail_gateway import IMailGateway

logger = logging.getLogger(__name__)


class BackgroundMailGateway(IMailGateway):
    def __init__(self, gateway: IMailGateway, background_tasks: BackgroundTasks):
        self.gateway = gateway
        self.background_tasks = background_tasks

    async def send_reset_link(self, email: str, raw_token: str) -> None:
        self.background_tasks.add_task(self._send_reset_link, email, raw_token)

    async def send_contact_message(self, name: str, email: str, message: str) -> None:
        await self.gateway.send_contact_message(name, email, message)

    async def _send_reset_link(self, email: str, raw_token: str) -> None:
        try:
            await self.gateway.send_reset_link(email, raw_token)
        except Exception:
            # Response already sent; log only
            logger.exception(f"Background reset email to {email} failed")
