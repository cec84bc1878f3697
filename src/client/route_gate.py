"""
Navigation gating on top of the session state.

Redirects are a rendering decision only; they never run before the
session provider has settled.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional

from .session import SessionProvider

PUBLIC_ROUTES = frozenset({"/", "/login", "/register", "/forgot", "/forgot/reset"})
AUTH_ROUTES = frozenset({"/login", "/register"})
LOGIN_ROUTE = "/login"
HOME_ROUTE = "/dashboard"


@dataclass(frozen=True)
class GateDecision:
    action: str  # loading | allow | redirect
    target: Optional[str] = None

    @classmethod
    def loading(cls) -> "GateDecision":
        return cls("loading")

    @classmethod
    def allow(cls) -> "GateDecision":
        return cls("allow")

    @classmethod
    def redirect(cls, target: str) -> "GateDecision":
        return cls("redirect", target)


class RouteGate:
    def __init__(
        self,
        session: SessionProvider,
        public_routes: FrozenSet[str] = PUBLIC_ROUTES,
        auth_routes: FrozenSet[str] = AUTH_ROUTES,
    ):
        self.session = session
        self.public_routes = public_routes
        self.auth_routes = auth_routes

    def resolve(self, path: str) -> GateDecision:
        if not self.session.is_settled:
            return GateDecision.loading()

        path = _normalize(path)
        if self.session.is_authenticated:
            if path in self.auth_routes:
                return GateDecision.redirect(HOME_ROUTE)
            return GateDecision.allow()

        if path in self.public_routes:
            return GateDecision.allow()
        return GateDecision.redirect(LOGIN_ROUTE)


def _normalize(path: str) -> str:
    path = path.split("?", 1)[0].split("#", 1)[0]
    if len(path) > 1:
        path = path.rstrip("/")
    return path or "/"
