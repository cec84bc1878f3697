"""
Authentication Use Cases

Registration, login and the password reset flow.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .resend_password_reset_use_case import ResendPasswordResetUseCase
from .redeem_password_reset_use_case import RedeemPasswordResetUseCase
from .dtos import (
    AuthResponse,
    PasswordResetRedeemResponse,
    PasswordResetRequestResponse,
    RegisterCommand,
    UserInfo,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ResendPasswordResetUseCase",
    "RedeemPasswordResetUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "AuthResponse",
    "PasswordResetRequestResponse",
    "PasswordResetRedeemResponse",
    # DTOs - Nested Models
    "UserInfo",
]
