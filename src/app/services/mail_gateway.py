"""
Mail delivery interfaces.

The application layer depends only on IMailGateway; transports live in the adapter layer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class MailDeliveryError(Exception):
    """Mail could not be delivered (transient or unconfigured)"""


class SenderRejectedError(MailDeliveryError):
    """Provider refused the sender address or domain"""


@dataclass
class MailMessage:
    to: str
    subject: str
    html: str
    text: str
    reply_to: Optional[str] = None


class IMailTransport(ABC):
    """A single way of getting a message out"""

    @abstractmethod
    async def send(self, message: MailMessage) -> None:
        pass


class IMailGateway(ABC):
    """Notification gateway used by the use cases"""

    @abstractmethod
    async def send_reset_link(self, email: str, raw_token: str) -> None:
        """Email a password reset link carrying the raw token"""
        pass

    @abstractmethod
    async def send_contact_message(self, name: str, email: str, message: str) -> None:
        """Forward a contact form submission to the club inbox"""
        pass
