"""
Unit tests for SessionProvider

The API is simulated with httpx.MockTransport.
"""
import json

import httpx
import pytest

from src.client.session import SessionError, SessionProvider, SessionState
from src.client.storage import JsonFileSessionStorage, MemorySessionStorage

USER = {"id": 3, "name": "Alan Turing", "email": "alan@robotix.club", "role": "assignee"}


def make_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://api.test"
    )


def ok_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/auth/logout":
        return httpx.Response(200, json={"ok": True})
    return httpx.Response(200, json={"user": USER, "access_token": "jwt"})


def failing_handler(status_code: int, **kwargs):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, **kwargs)

    return handler


# ============================================================================
# initialize
# ============================================================================


def test_initialize_without_snapshot_is_anonymous():
    provider = SessionProvider(make_client(ok_handler), MemorySessionStorage())
    assert provider.state == SessionState.uninitialized
    assert not provider.is_settled

    state = provider.initialize()

    assert state == SessionState.anonymous
    assert provider.is_settled
    assert provider.user is None


def test_initialize_rehydrates_snapshot():
    storage = MemorySessionStorage(json.dumps(USER))
    provider = SessionProvider(make_client(ok_handler), storage)

    state = provider.initialize()

    assert state == SessionState.authenticated
    assert provider.user == USER


@pytest.mark.parametrize("raw", ["{not json", json.dumps({"name": "No id"}), "[1, 2]"])
def test_initialize_discards_bad_snapshot(raw):
    storage = MemorySessionStorage(raw)
    provider = SessionProvider(make_client(ok_handler), storage)

    state = provider.initialize()

    assert state == SessionState.anonymous
    assert storage.load() is None


# ============================================================================
# login / register / logout
# ============================================================================


@pytest.mark.asyncio
async def test_login_success_persists_user():
    storage = MemorySessionStorage()
    provider = SessionProvider(make_client(ok_handler), storage)
    provider.initialize()

    user = await provider.login(" alan@robotix.club ", "enigma123")

    assert user == USER
    assert provider.state == SessionState.authenticated
    assert json.loads(storage.load()) == USER


@pytest.mark.asyncio
async def test_login_validates_before_calling_server():
    calls = []

    def handler(request):
        calls.append(request)
        return ok_handler(request)

    provider = SessionProvider(make_client(handler), MemorySessionStorage())
    provider.initialize()

    with pytest.raises(SessionError, match="valid email"):
        await provider.login("not-an-email", "enigma123")
    with pytest.raises(SessionError, match="at least 6"):
        await provider.login("alan@robotix.club", "abc")

    assert calls == []
    assert provider.state == SessionState.anonymous


@pytest.mark.asyncio
async def test_login_surfaces_server_error_message():
    handler = failing_handler(
        401, json={"error": {"code": "INVALID_CREDENTIALS", "message": "Invalid email or password"}}
    )
    provider = SessionProvider(make_client(handler), MemorySessionStorage())
    provider.initialize()

    with pytest.raises(SessionError) as exc_info:
        await provider.login("alan@robotix.club", "wrongpass")

    assert str(exc_info.value) == "Invalid email or password"
    assert provider.state == SessionState.anonymous


@pytest.mark.asyncio
async def test_login_plain_string_error():
    handler = failing_handler(400, json={"error": "Account locked"})
    provider = SessionProvider(make_client(handler), MemorySessionStorage())

    with pytest.raises(SessionError, match="Account locked"):
        await provider.login("alan@robotix.club", "enigma123")


@pytest.mark.asyncio
async def test_login_html_error_page_uses_fallback():
    handler = failing_handler(502, text="<!DOCTYPE html><html>Bad gateway</html>")
    provider = SessionProvider(make_client(handler), MemorySessionStorage())

    with pytest.raises(SessionError, match="Login failed"):
        await provider.login("alan@robotix.club", "enigma123")


@pytest.mark.asyncio
async def test_login_network_failure_uses_fallback():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    provider = SessionProvider(make_client(handler), MemorySessionStorage())
    provider.initialize()

    with pytest.raises(SessionError, match="Login failed"):
        await provider.login("alan@robotix.club", "enigma123")

    assert provider.state == SessionState.anonymous


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kwargs",
    [
        {"text": "not json"},
        {"json": {"ok": True}},
        {"json": ["unexpected"]},
        {"json": {"user": None}},
    ],
)
async def test_login_malformed_success_body_uses_fallback(kwargs):
    storage = MemorySessionStorage()
    provider = SessionProvider(
        make_client(lambda request: httpx.Response(200, **kwargs)), storage
    )
    provider.initialize()

    with pytest.raises(SessionError, match="Login failed"):
        await provider.login("alan@robotix.club", "enigma123")

    assert provider.state == SessionState.anonymous
    assert provider.user is None
    assert storage.load() is None


@pytest.mark.asyncio
async def test_failed_login_keeps_existing_session():
    storage = MemorySessionStorage(json.dumps(USER))
    handler = failing_handler(401, json={"error": {"message": "Invalid email or password"}})
    provider = SessionProvider(make_client(handler), storage)
    provider.initialize()

    with pytest.raises(SessionError):
        await provider.login("alan@robotix.club", "wrongpass")

    assert provider.state == SessionState.authenticated
    assert provider.user == USER


@pytest.mark.asyncio
async def test_register_posts_profile_fields():
    payloads = []

    def handler(request):
        payloads.append(json.loads(request.content))
        return httpx.Response(201, json={"user": USER, "access_token": "jwt"})

    provider = SessionProvider(make_client(handler), MemorySessionStorage())

    await provider.register("Alan Turing", "alan@robotix.club", "enigma123", "assignee")

    assert payloads == [
        {
            "name": "Alan Turing",
            "email": "alan@robotix.club",
            "password": "enigma123",
            "role": "assignee",
            "position": "member",
        }
    ]
    assert provider.is_authenticated


@pytest.mark.asyncio
async def test_logout_clears_state_even_if_request_fails():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    storage = MemorySessionStorage(json.dumps(USER))
    provider = SessionProvider(make_client(handler), storage)
    provider.initialize()

    await provider.logout()

    assert provider.state == SessionState.anonymous
    assert provider.user is None
    assert storage.load() is None


@pytest.mark.asyncio
async def test_snapshot_survives_restart_in_file_storage(tmp_path):
    path = str(tmp_path / "session" / "snapshot.json")
    provider = SessionProvider(make_client(ok_handler), JsonFileSessionStorage(path))
    provider.initialize()
    await provider.login("alan@robotix.club", "enigma123")

    restarted = SessionProvider(make_client(ok_handler), JsonFileSessionStorage(path))

    assert restarted.initialize() == SessionState.authenticated
    assert restarted.user == USER

    await restarted.logout()

    assert JsonFileSessionStorage(path).load() is None
