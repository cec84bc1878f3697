import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import PayloadLoader
from src.depends import get_contact_rate_limiters, get_mail_gateway, get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.mail_gateway import IMailGateway
from src.adapter.services.rate_limiter import FixedWindowRateLimiter


class RecordingMailGateway(IMailGateway):
    """Keeps every message instead of sending it"""

    def __init__(self):
        self.reset_links = []
        self.contact_messages = []

    async def send_reset_link(self, email: str, raw_token: str) -> None:
        self.reset_links.append((email, raw_token))

    async def send_contact_message(self, name: str, email: str, message: str) -> None:
        self.contact_messages.append((name, email, message))


@pytest.fixture
def test_data():
    return PayloadLoader()


@pytest.fixture
def mail_gateway():
    return RecordingMailGateway()


@pytest.fixture
def contact_limiters():
    return (
        FixedWindowRateLimiter(max_requests=5, window_seconds=3600),
        FixedWindowRateLimiter(max_requests=5, window_seconds=3600),
    )


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, mail_gateway, contact_limiters):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_mail_gateway] = lambda: mail_gateway
    app.dependency_overrides[get_contact_rate_limiters] = lambda: contact_limiters

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
