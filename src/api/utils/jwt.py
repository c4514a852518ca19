from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError

from config import ApplicationConfig
from src.domain.entities import Role
from src.domain.principal import Principal
from src.libs.result import Error, Result, Return


def create_access_token(
    principal_id: int,
    username: str,
    role: Role,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create JWT access token

    Args:
        principal_id: Admin or member ID
        username: Login username
        role: admin or member
        expires_delta: Token lifetime (ACCESS_TOKEN_EXPIRE_HOURS by default)

    Returns:
        JWT token string with claims {id, username, role, iat, exp}
    """
    if expires_delta is None:
        expires_delta = timedelta(hours=ApplicationConfig.ACCESS_TOKEN_EXPIRE_HOURS)
    now = datetime.now(UTC)
    payload = {
        "id": principal_id,
        "username": username,
        "role": Role(role).value,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Result[Principal]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Result with the Principal, or Error TOKEN_EXPIRED / INVALID_TOKEN /
        AUTHENTICATION_ERROR
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
        )
    except ExpiredSignatureError:
        return Return.err(Error("TOKEN_EXPIRED", "Token has expired"))
    except JWTError:
        return Return.err(Error("INVALID_TOKEN", "Invalid token"))

    try:
        principal = Principal(
            id=payload["id"], username=payload["username"], role=payload["role"]
        )
    except (KeyError, ValidationError):
        return Return.err(Error("AUTHENTICATION_ERROR", "Authentication error"))

    return Return.ok(principal)
