from typing import Dict, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from redis.exceptions import RedisError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from catering.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from catering.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from catering.app.services.mailer import IMailer
from catering.app.services.session_cache import ISessionCache
from catering.depends import get_mailer, get_password_hasher, get_session_cache, get_unit_of_work
from catering.domain.entities import Owner, SessionInfo

OWNER_EMAIL = "test@example.com"
OWNER_PASSWORD = "12345pass"


class InMemorySessionCache(ISessionCache):
    """Redis stand-in with the same key semantics, minus expiry"""

    def __init__(self):
        self.sessions: Dict[str, Dict[str, str]] = {}
        self.sid_by_email: Dict[str, str] = {}
        self.fail: Optional[RedisError] = None

    def _check(self):
        if self.fail is not None:
            raise self.fail

    async def set_session(self, session: SessionInfo, ttl) -> None:
        self._check()
        self.sessions[session.sid] = {
            "owner_id": str(session.owner_id),
            "valid": "1",
            "jti": session.jti,
            "email": session.email,
        }
        self.sid_by_email.setdefault(session.email, session.sid)

    async def get_session(self, sid: str) -> Optional[Dict[str, str]]:
        self._check()
        return self.sessions.get(sid)

    async def delete_session(self, sid: str) -> None:
        self._check()
        fields = self.sessions.pop(sid, None)
        if fields and self.sid_by_email.get(fields["email"]) == sid:
            del self.sid_by_email[fields["email"]]

    async def get_sid_by_email(self, email: str) -> Optional[str]:
        self._check()
        return self.sid_by_email.get(email)


class RecordingMailer(IMailer):
    def __init__(self):
        self.sent: List[dict] = []

    async def send_password_reset_email(self, to: str, link: str, owner_name: str) -> None:
        self.sent.append({"to": to, "link": link, "owner_name": owner_name})


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
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


@pytest.fixture
def password_hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest_asyncio.fixture
async def owner(db_session, password_hasher):
    owner = Owner(
        name="Jane",
        email=OWNER_EMAIL,
        phone_number="+6281234567890",
        password=password_hasher.hash(OWNER_PASSWORD),
    )
    db_session.add(owner)
    await db_session.commit()
    await db_session.refresh(owner)
    return owner


@pytest.fixture
def session_cache():
    return InMemorySessionCache()


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest_asyncio.fixture
async def client(db_session, session_cache, mailer, password_hasher):
    from catering.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_session_cache] = lambda: session_cache
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def login(client, owner):
    """Log the seeded owner in; returns (sid, access_token, refresh_token)"""

    async def _login():
        response = await client.post(
            "/api/v1/auth/login", json={"email": OWNER_EMAIL, "password": OWNER_PASSWORD}
        )
        assert response.status_code == 200
        data = response.json()
        return response.cookies["sid"], data["access_token"], data["refresh_token"]

    return _login
