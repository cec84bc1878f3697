"""
Unit tests for RedeemPasswordResetUseCase

Tests all business logic with mocked dependencies, plus a concurrent
redemption against an in-memory unit of work.
"""
import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Optional

import bcrypt
import pytest
from sqlalchemy.exc import OperationalError

from src.app.services.token_service import generate_token, hash_token
from src.app.use_cases.auth import RedeemPasswordResetUseCase
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken, User

RAW_TOKEN = "f" * 64
OLD_HASH = "$2b$04$" + "x" * 53


def make_user() -> User:
    return User(id=7, name="Test User", email="user@example.com", password_hash=OLD_HASH)


def make_token(**overrides) -> PasswordResetToken:
    now = utcnow()
    fields = dict(
        id=11,
        user_id=7,
        token_hash=hash_token(RAW_TOKEN),
        used=False,
        expires_at=now + timedelta(minutes=30),
        last_sent_at=now,
        created_at=now,
    )
    fields.update(overrides)
    return PasswordResetToken(**fields)


@pytest.fixture
def known_user(mock_uow):
    user = make_user()
    mock_uow.users.find_by_email_insensitive.return_value = user
    return user


@pytest.mark.asyncio
async def test_successful_redemption(mock_uow, known_user):
    # Arrange
    mock_uow.password_reset_tokens.get_by_user_and_hash.return_value = make_token()
    use_case = RedeemPasswordResetUseCase(mock_uow)

    # Act
    result = await use_case.execute(RAW_TOKEN, "user@example.com", "newpass1")

    # Assert
    assert result.is_ok()
    assert result.value.ok is True
    mock_uow.password_reset_tokens.get_by_user_and_hash.assert_called_once_with(
        7, hash_token(RAW_TOKEN)
    )
    mock_uow.password_reset_tokens.mark_used.assert_called_once_with(11)
    assert known_user.password_hash != OLD_HASH
    assert bcrypt.checkpw(b"newpass1", known_user.password_hash.encode())
    mock_uow.users.update.assert_called_once_with(known_user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "token,email,password",
    [
        (None, "user@example.com", "newpass1"),
        (RAW_TOKEN, None, "newpass1"),
        (RAW_TOKEN, "user@example.com", None),
        ("", "user@example.com", "newpass1"),
    ],
)
async def test_missing_fields_are_rejected(mock_uow, token, email, password):
    use_case = RedeemPasswordResetUseCase(mock_uow)

    result = await use_case.execute(token, email, password)

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.users.find_by_email_insensitive.assert_not_called()


@pytest.mark.asyncio
async def test_short_password_changes_nothing(mock_uow, known_user):
    mock_uow.password_reset_tokens.get_by_user_and_hash.return_value = make_token()
    use_case = RedeemPasswordResetUseCase(mock_uow, min_password_length=6)

    result = await use_case.execute(RAW_TOKEN, "user@example.com", "abc")

    assert result.is_err()
    assert result.error.code == "INVALID_PASSWORD"
    assert known_user.password_hash == OLD_HASH
    mock_uow.password_reset_tokens.mark_used.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_email_is_invalid_token(mock_uow):
    use_case = RedeemPasswordResetUseCase(mock_uow)

    result = await use_case.execute(RAW_TOKEN, "ghost@example.com", "newpass1")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    assert result.error.message == "Invalid token or email"


@pytest.mark.asyncio
async def test_wrong_token_changes_nothing(mock_uow, known_user):
    use_case = RedeemPasswordResetUseCase(mock_uow)

    result = await use_case.execute(generate_token(), "user@example.com", "newpass1")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    assert known_user.password_hash == OLD_HASH
    mock_uow.password_reset_tokens.mark_used.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_used_token_is_rejected(mock_uow, known_user):
    mock_uow.password_reset_tokens.get_by_user_and_hash.return_value = make_token(used=True)
    use_case = RedeemPasswordResetUseCase(mock_uow)

    result = await use_case.execute(RAW_TOKEN, "user@example.com", "newpass1")

    assert result.is_err()
    assert result.error.code == "TOKEN_ALREADY_USED"
    assert result.error.message == "Token already used"
    assert known_user.password_hash == OLD_HASH


@pytest.mark.asyncio
async def test_expired_token_is_rejected(mock_uow, known_user):
    mock_uow.password_reset_tokens.get_by_user_and_hash.return_value = make_token(
        expires_at=utcnow() - timedelta(seconds=1)
    )
    use_case = RedeemPasswordResetUseCase(mock_uow)

    result = await use_case.execute(RAW_TOKEN, "user@example.com", "newpass1")

    assert result.is_err()
    assert result.error.code == "TOKEN_EXPIRED"
    assert result.error.message == "Token expired"
    mock_uow.password_reset_tokens.mark_used.assert_not_called()


@pytest.mark.asyncio
async def test_used_is_reported_before_expired(mock_uow, known_user):
    mock_uow.password_reset_tokens.get_by_user_and_hash.return_value = make_token(
        used=True, expires_at=utcnow() - timedelta(hours=1)
    )
    use_case = RedeemPasswordResetUseCase(mock_uow)

    result = await use_case.execute(RAW_TOKEN, "user@example.com", "newpass1")

    assert result.error.code == "TOKEN_ALREADY_USED"


@pytest.mark.asyncio
async def test_losing_the_claim_reports_already_used(mock_uow, known_user):
    mock_uow.password_reset_tokens.get_by_user_and_hash.return_value = make_token()
    mock_uow.password_reset_tokens.mark_used.return_value = False
    use_case = RedeemPasswordResetUseCase(mock_uow)

    result = await use_case.execute(RAW_TOKEN, "user@example.com", "newpass1")

    assert result.is_err()
    assert result.error.code == "TOKEN_ALREADY_USED"
    assert known_user.password_hash == OLD_HASH
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_datastore_failure_is_internal_error(mock_uow):
    mock_uow.users.find_by_email_insensitive.side_effect = OperationalError(
        "SELECT", {}, Exception("disk I/O error")
    )
    use_case = RedeemPasswordResetUseCase(mock_uow)

    result = await use_case.execute(RAW_TOKEN, "user@example.com", "newpass1")

    assert result.is_err()
    assert result.error.code == "INTERNAL_ERROR"


# ============================================================================
# Concurrent redemption
# ============================================================================


@dataclass
class StoredToken:
    id: int
    user_id: int
    token_hash: str
    expires_at: datetime
    used: bool = False


class InMemoryStore:
    def __init__(self):
        self.users: Dict[int, User] = {}
        self.tokens: Dict[int, StoredToken] = {}
        self.password_writes = 0


class InMemoryUserRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find_by_email_insensitive(self, email: str) -> Optional[User]:
        await asyncio.sleep(0)
        for user in self.store.users.values():
            if user.email.lower() == email.lower():
                return user
        return None

    async def update(self, user: User) -> User:
        await asyncio.sleep(0)
        self.store.password_writes += 1
        return user


class InMemoryTokenRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_user_and_hash(self, user_id: int, token_hash: str):
        await asyncio.sleep(0)
        for token in self.store.tokens.values():
            if token.user_id == user_id and token.token_hash == token_hash:
                # Each transaction sees its own snapshot of the row
                return StoredToken(**vars(token))
        return None

    async def mark_used(self, token_id: int) -> bool:
        await asyncio.sleep(0)
        token = self.store.tokens[token_id]
        if token.used:
            return False
        token.used = True
        return True


class InMemoryUnitOfWork:
    def __init__(self, store: InMemoryStore):
        self.users = InMemoryUserRepository(store)
        self.password_reset_tokens = InMemoryTokenRepository(store)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def commit(self):
        await asyncio.sleep(0)


@pytest.mark.asyncio
async def test_concurrent_redemptions_succeed_exactly_once():
    # Arrange
    store = InMemoryStore()
    store.users[7] = make_user()
    store.tokens[11] = StoredToken(
        id=11,
        user_id=7,
        token_hash=hash_token(RAW_TOKEN),
        expires_at=utcnow() + timedelta(minutes=30),
    )

    # Act
    results = await asyncio.gather(
        RedeemPasswordResetUseCase(InMemoryUnitOfWork(store)).execute(
            RAW_TOKEN, "user@example.com", "first-pass"
        ),
        RedeemPasswordResetUseCase(InMemoryUnitOfWork(store)).execute(
            RAW_TOKEN, "user@example.com", "second-pass"
        ),
    )

    # Assert
    succeeded = [result for result in results if result.is_ok()]
    failed = [result for result in results if result.is_err()]
    assert len(succeeded) == 1
    assert len(failed) == 1
    assert failed[0].error.code == "TOKEN_ALREADY_USED"
    assert failed[0].error.message == "Token already used"
    assert store.tokens[11].used is True
    assert store.password_writes == 1
