from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.api.utils.jwt import clear_session_cookie, set_session_cookie
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    LoginUseCase,
    RegisterCommand,
    RegisterUseCase,
    UserInfo,
)
from src.app.use_cases.users import GetProfileUseCase
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import Position, UserRole

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Password length is checked by the use case so it surfaces as INVALID_PASSWORD.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")
    role: UserRole = Field(..., description="assigner or assignee")
    position: Position = Field(Position.member, description="Club position")


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register a new member and start a session.

    Raises:
        - 400 Bad Request: Missing or malformed fields, password too short
        - 409 Conflict: Email already registered
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        name=request.name,
        email=request.email,
        password=request.password,
        role=request.role,
        position=request.position,
    )

    use_case = RegisterUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    set_session_cookie(response, result.value.access_token)
    return result.value


class LoginRequest(BaseModel):
    """
    Login HTTP request payload
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Authenticate and start a session.

    The JWT is set as an HttpOnly cookie and also returned in the body.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    set_session_cookie(response, result.value.access_token)
    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(response: Response):
    """Clear the session cookie"""
    clear_session_cookie(response)
    return {"ok": True}


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def me(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current user's public profile.

    Raises:
        - 401 Unauthorized: No or invalid session
        - 404 Not Found: User no longer exists
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(int(current_user["user_id"]))

    if result.is_err():
        raise_for_error(result.error)

    return result.value
