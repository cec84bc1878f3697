from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.mail_gateway import IMailGateway
from src.app.use_cases.contact import ContactResponse, SubmitContactMessageUseCase
from src.depends import get_contact_rate_limiters, get_mail_gateway

router = APIRouter(tags=["Contact"])


class ContactRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


def client_ip(request: Request, trust_proxy_headers: bool = False) -> Optional[str]:
    """Peer address, or the first forwarded hop when a trusted proxy sits in front"""
    if trust_proxy_headers:
        forwarded = request.headers.get("x-forwarded-for") or request.headers.get("x-real-ip")
        if forwarded:
            return forwarded.split(",")[0].strip() or None
    return request.client.host if request.client else None


@router.post("/contact", status_code=status.HTTP_200_OK, response_model=ContactResponse)
async def submit_contact_message(
    body: ContactRequest,
    request: Request,
    mail_gateway: IMailGateway = Depends(get_mail_gateway),
    limiters=Depends(get_contact_rate_limiters),
):
    """
    Public contact form.

    Raises:
        - 400 Bad Request: Email or message missing
        - 429 Too Many Requests: Rate limit per IP or email exceeded
        - 500 Internal Server Error: Mail delivery failed
    """
    ip_limiter, email_limiter = limiters
    use_case = SubmitContactMessageUseCase(mail_gateway, ip_limiter, email_limiter)
    ip = client_ip(request, ApplicationConfig.TRUST_PROXY_HEADERS)
    result = await use_case.execute(body.name, body.email, body.message, ip)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
