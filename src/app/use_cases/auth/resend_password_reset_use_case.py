from .request_password_reset_use_case import RequestPasswordResetUseCase


class ResendPasswordResetUseCase(RequestPasswordResetUseCase):
    """
    "Didn't get it" entry point.

    Same cooldown and enumeration policy as a fresh request; only the
    operation label in the logs differs.
    """

    operation = "password_reset_resend"
