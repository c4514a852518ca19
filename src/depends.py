from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from config import ApplicationConfig
from src.adapter.database import build_engine, build_session_factory
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.domain.principal import Principal
from src.libs.result import Error

engine = build_engine(ApplicationConfig.DB_URI)

AsyncSessionLocal = build_session_factory(engine)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Principal:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Principal (id, username, role) carried by the token

    Raises:
        ClientError: 401 if token is missing, invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("MISSING_TOKEN", "Access token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    result = verify_jwt(credentials.credentials)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value
