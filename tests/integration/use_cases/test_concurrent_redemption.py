"""
Two redemptions of one reset token racing on separate database sessions
"""
import asyncio
from datetime import timedelta

import pytest
from sqlalchemy.orm import sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.token_service import generate_token, hash_password, hash_token, verify_password
from src.app.use_cases.auth import RedeemPasswordResetUseCase
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken, User


@pytest.mark.asyncio
async def test_only_one_concurrent_redemption_wins(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    raw_token = generate_token()

    async with Session() as session:
        user = User(name="Alan Turing", email="alan@robotix.club", password_hash=hash_password("enigma123"))
        session.add(user)
        await session.flush()
        now = utcnow()
        session.add(
            PasswordResetToken(
                user_id=user.id,
                token_hash=hash_token(raw_token),
                expires_at=now + timedelta(hours=1),
                last_sent_at=now,
            )
        )
        await session.commit()
        user_id = user.id

    async def redeem(new_password: str):
        async with Session() as session:
            use_case = RedeemPasswordResetUseCase(SqlAlchemyUnitOfWork(session))
            return await use_case.execute(raw_token, "alan@robotix.club", new_password)

    results = await asyncio.gather(redeem("bombe-one"), redeem("bombe-two"))

    winners = [r for r in results if r.is_ok()]
    losers = [r for r in results if r.is_err()]
    assert len(winners) == 1
    assert len(losers) == 1
    assert losers[0].error.code == "TOKEN_ALREADY_USED"

    async with Session() as session:
        stored = (await session.exec(select(User).where(User.id == user_id))).one()
        token = (await session.exec(select(PasswordResetToken))).one()

    winning_password = "bombe-one" if results[0].is_ok() else "bombe-two"
    assert verify_password(winning_password, stored.password_hash)
    assert token.used is True
