from typing import Any, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.background_mail import BackgroundMailGateway
from src.app.services.mail_gateway import IMailGateway
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    PasswordResetRedeemResponse,
    PasswordResetRequestResponse,
    RedeemPasswordResetUseCase,
    RequestPasswordResetUseCase,
    ResendPasswordResetUseCase,
)
from src.depends import get_mail_gateway, get_unit_of_work

router = APIRouter(tags=["Password Reset"])


class PasswordResetEmailRequest(BaseModel):
    """
    Forgot-password request payload

    Email is free text: it is only trimmed and matched case-insensitively.
    """

    email: Any = Field(None, description="Account email address")


@router.post(
    "/forgot",
    status_code=status.HTTP_200_OK,
    response_model=PasswordResetRequestResponse,
    response_model_exclude_none=True,
)
async def request_password_reset(
    request: PasswordResetEmailRequest,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mail_gateway: IMailGateway = Depends(get_mail_gateway),
):
    """
    Request Password Reset

    Issues a reset token and emails the link after the response is sent.

    Security:
        - No email enumeration (same response for known and unknown emails)
        - Cooldown between emails to the same account, reported as cooldown=true
        - Only the SHA-256 hash of the token is stored

    Returns:
        - 200 OK: {"ok": true} or {"ok": true, "cooldown": true}
        - 400 Bad Request: Email missing
    """
    use_case = RequestPasswordResetUseCase(
        uow, BackgroundMailGateway(mail_gateway, background_tasks)
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/forgot/resend",
    status_code=status.HTTP_200_OK,
    response_model=PasswordResetRequestResponse,
    response_model_exclude_none=True,
)
async def resend_password_reset(
    request: PasswordResetEmailRequest,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mail_gateway: IMailGateway = Depends(get_mail_gateway),
):
    """
    Resend Password Reset

    Same cooldown and enumeration policy as /forgot.
    """
    use_case = ResendPasswordResetUseCase(
        uow, BackgroundMailGateway(mail_gateway, background_tasks)
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class RedeemPasswordResetRequest(BaseModel):
    """
    Reset password payload

    Presence and length are checked by the use case so every rejection is a 400.
    """

    token: Optional[str] = Field(None, description="Raw reset token from the email link")
    email: Optional[str] = Field(None, description="Account email address")
    password: Optional[str] = Field(None, description="New password")


@router.post("/reset", status_code=status.HTTP_200_OK, response_model=PasswordResetRedeemResponse)
async def redeem_password_reset(
    request: RedeemPasswordResetRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Redeem Password Reset

    Raises:
        - 400 Bad Request: Missing fields, short password, invalid token or email,
          token already used, token expired
        - 500 Internal Server Error: Server error
    """
    use_case = RedeemPasswordResetUseCase(uow)
    result = await use_case.execute(request.token, request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
