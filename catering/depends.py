from datetime import timedelta
from typing import Optional

from fastapi import Cookie, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from catering.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from catering.adapter.services.jwt_token_codec import JwtTokenCodec
from catering.adapter.services.redis_session_cache import RedisSessionCache
from catering.adapter.services.session_store import SessionStore
from catering.adapter.services.smtp_mailer import SmtpMailer
from catering.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from catering.api.error import ClientError, ServerError
from catering.app.services.mailer import IMailer
from catering.app.services.password_hasher import IPasswordHasher
from catering.app.services.session_cache import ISessionCache
from catering.app.services.session_store import ISessionStore
from catering.app.services.token_codec import ITokenCodec
from catering.app.services.unit_of_work import UnitOfWork
from catering.app.use_cases.auth import GetSessionUseCase, SessionResponse
from catering.domain.errors import required_param
from catering.domain.result import Fault, NotFound

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

redis_client = Redis.from_url(ApplicationConfig.REDIS_URL, decode_responses=True)

token_codec = JwtTokenCodec(
    ApplicationConfig.SECRET_KEY_ACCESS_TOKEN,
    ApplicationConfig.SECRET_KEY_REFRESH_TOKEN,
)

password_hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)

mailer = SmtpMailer(
    host=ApplicationConfig.MAILER_HOST,
    port=ApplicationConfig.MAILER_PORT,
    sender=ApplicationConfig.MAILER_EMAIL,
    password=ApplicationConfig.MAILER_PASSWORD,
    support_email=ApplicationConfig.MAILER_SUPPORT_EMAIL,
    app_name=ApplicationConfig.APP_NAME,
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_session_cache() -> ISessionCache:
    return RedisSessionCache(redis_client)


def get_token_codec() -> ITokenCodec:
    return token_codec


def get_password_hasher() -> IPasswordHasher:
    return password_hasher


def get_mailer() -> IMailer:
    return mailer


def get_session_store(
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: ISessionCache = Depends(get_session_cache),
) -> ISessionStore:
    return SessionStore(
        uow,
        cache,
        access_token_ttl=timedelta(seconds=ApplicationConfig.ACCESS_TOKEN_TTL_SECONDS),
        refresh_token_ttl=timedelta(seconds=ApplicationConfig.REFRESH_TOKEN_TTL_SECONDS),
    )


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Extract the bearer token from the Authorization header.

    Raises:
        ClientError: 400 if the header is missing
    """
    if credentials is None or not credentials.credentials:
        raise ClientError(
            required_param("missing auth token"), status_code=status.HTTP_400_BAD_REQUEST
        )
    return credentials.credentials


async def get_session_id(
    sid: Optional[str] = Cookie(None, alias=ApplicationConfig.SESSION_COOKIE_NAME),
) -> str:
    """Session id from the session cookie; 400 when absent."""
    if not sid:
        raise ClientError(
            required_param("missing session id"), status_code=status.HTTP_400_BAD_REQUEST
        )
    return sid


async def get_current_session(
    sid: str = Depends(get_session_id),
    session_store: ISessionStore = Depends(get_session_store),
) -> SessionResponse:
    """
    Resolve the session snapshot for the request's sid.

    Raises:
        ClientError: 400 if there is no session for the sid
        ServerError: 500 if a store failed
    """
    lookup = await GetSessionUseCase(session_store).execute(sid)
    if isinstance(lookup, NotFound):
        raise ClientError(
            required_param(f"empty session, sid {sid}"), status_code=status.HTTP_400_BAD_REQUEST
        )
    if isinstance(lookup, Fault):
        raise ServerError(lookup.error)
    return lookup.value
