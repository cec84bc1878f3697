from datetime import UTC, datetime, timedelta
from typing import Optional

from fastapi import Response
from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(user_id: int, role: str, position: str) -> str:
    """
    Generate session JWT

    Args:
        user_id: User id
        role: Task role (assigner, assignee)
        position: Club position

    Returns:
        JWT token string (HS256, JWT_EXPIRE_MINUTES expiry)
    """
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "user_id": user_id,
        "role": role,
        "position": position,
        "exp": now + timedelta(minutes=ApplicationConfig.JWT_EXPIRE_MINUTES),
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value=token,
        max_age=ApplicationConfig.JWT_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        httponly=True,
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
