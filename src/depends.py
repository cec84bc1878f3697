from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.mail_gateway import build_mail_gateway
from src.adapter.services.rate_limiter import FixedWindowRateLimiter
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.app.services.mail_gateway import IMailGateway
from src.app.services.rate_limiter import IRateLimiter

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

contact_ip_limiter = FixedWindowRateLimiter(
    ApplicationConfig.CONTACT_RATE_LIMIT_MAX,
    ApplicationConfig.CONTACT_RATE_LIMIT_WINDOW_SECONDS,
    storage_uri=ApplicationConfig.RATE_LIMIT_STORAGE_URI,
    namespace="contact-ip",
)
contact_email_limiter = FixedWindowRateLimiter(
    ApplicationConfig.CONTACT_RATE_LIMIT_MAX,
    ApplicationConfig.CONTACT_RATE_LIMIT_WINDOW_SECONDS,
    storage_uri=ApplicationConfig.RATE_LIMIT_STORAGE_URI,
    namespace="contact-email",
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache(maxsize=1)
def get_mail_gateway() -> IMailGateway:
    return build_mail_gateway(ApplicationConfig)


def get_contact_rate_limiters() -> tuple[IRateLimiter, IRateLimiter]:
    return contact_ip_limiter, contact_email_limiter


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency resolving the session from the Bearer header or the session cookie.

    Returns:
        Decoded JWT payload containing user_id, role, position

    Raises:
        ClientError: 401 if no token is present or it is invalid or expired
    """
    token = credentials.credentials if credentials else request.cookies.get(
        ApplicationConfig.SESSION_COOKIE_NAME
    )
    if not token:
        raise ClientError(
            Error("UNAUTHORIZED", "Authentication required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(token)
    if payload is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return payload
