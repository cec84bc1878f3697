"""
Session Provider

Client-held authentication state derived from server responses. The snapshot
only drives rendering and navigation; the server re-checks the session
cookie on every privileged request.
"""

import json
import logging
import re
from enum import Enum
from typing import Optional

import httpx

from .storage import SessionStorage, dump_snapshot

logger = logging.getLogger(__name__)

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


class SessionState(str, Enum):
    uninitialized = "uninitialized"
    initializing = "initializing"
    authenticated = "authenticated"
    anonymous = "anonymous"


class SessionError(Exception):
    """Login or registration failed; message is safe to show to the user"""


class SessionProvider:
    """
    State machine: uninitialized -> initializing -> authenticated | anonymous.

    Args:
        client: httpx.AsyncClient pointed at the API base URL
        storage: where the session snapshot is persisted between runs
    """

    def __init__(self, client: httpx.AsyncClient, storage: SessionStorage):
        self.client = client
        self.storage = storage
        self.state = SessionState.uninitialized
        self.user: Optional[dict] = None

    @property
    def is_settled(self) -> bool:
        return self.state in (SessionState.authenticated, SessionState.anonymous)

    @property
    def is_authenticated(self) -> bool:
        return self.state == SessionState.authenticated

    def initialize(self) -> SessionState:
        """Rehydrate the snapshot from storage"""
        self.state = SessionState.initializing
        self.user = None

        raw = self.storage.load()
        if raw:
            try:
                snapshot = json.loads(raw)
            except ValueError:
                logger.error("Failed to parse stored session, discarding it")
                self.storage.clear()
            else:
                if isinstance(snapshot, dict) and snapshot.get("id") is not None:
                    self.user = snapshot
                else:
                    logger.error("Stored session has no user id, discarding it")
                    self.storage.clear()

        self.state = SessionState.authenticated if self.user else SessionState.anonymous
        return self.state

    async def login(self, email: str, password: str) -> dict:
        """
        Authenticate against /auth/login.

        Raises:
            SessionError: invalid input shape, or the server's error message
        """
        email = (email or "").strip()
        if not EMAIL_REGEX.match(email):
            raise SessionError("Please enter a valid email address")
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise SessionError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

        return await self._authenticate(
            "/auth/login", {"email": email, "password": password}, "Login failed"
        )

    async def register(
        self, name: str, email: str, password: str, role: str, position: str = "member"
    ) -> dict:
        email = (email or "").strip()
        if not (name or "").strip():
            raise SessionError("Name is required")
        if not EMAIL_REGEX.match(email):
            raise SessionError("Please enter a valid email address")
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise SessionError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

        payload = {
            "name": name,
            "email": email,
            "password": password,
            "role": role,
            "position": position,
        }
        return await self._authenticate("/auth/register", payload, "Registration failed")

    async def logout(self) -> None:
        self.storage.clear()
        self.user = None
        self.state = SessionState.anonymous
        try:
            await self.client.post("/auth/logout")
        except httpx.HTTPError as exc:
            # Local state is already cleared; the cookie expires on its own
            logger.warning(f"Logout request failed: {exc}")

    async def _authenticate(self, path: str, payload: dict, fallback: str) -> dict:
        try:
            response = await self.client.post(path, json=payload)
        except httpx.HTTPError as exc:
            logger.error(f"{path} request failed: {exc}")
            self._become_anonymous()
            raise SessionError(fallback) from exc

        if response.is_error:
            self._become_anonymous()
            raise SessionError(_server_message(response, fallback))

        try:
            user = response.json()["user"]
        except (ValueError, KeyError, TypeError) as exc:
            logger.error(f"{path} returned an unreadable body: {exc}")
            self._become_anonymous()
            raise SessionError(fallback) from exc
        if not isinstance(user, dict):
            self._become_anonymous()
            raise SessionError(fallback)

        self.user = user
        self.storage.save(dump_snapshot(user))
        self.state = SessionState.authenticated
        return user

    def _become_anonymous(self) -> None:
        if self.state != SessionState.authenticated:
            self.state = SessionState.anonymous


def _server_message(response: httpx.Response, fallback: str) -> str:
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        if not text or "<!doctype" in text.lower():
            return fallback
        return text

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    if isinstance(error, str) and error:
        return error
    return fallback
