"""
Password hashing (bcrypt).

bcrypt only uses the first 72 bytes of a secret; longer inputs are
truncated explicitly so hashing and verification agree.
"""

from functools import lru_cache

import bcrypt

from config import ApplicationConfig


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))


def _to_bcrypt_secret(password: str) -> bytes:
    return password.encode("utf-8")[:72]


def hash_password(password: str) -> str:
    """Return a bcrypt hash as a UTF-8 string"""
    salt = bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_to_bcrypt_secret(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time check of password against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(
            _to_bcrypt_secret(password), password_hash.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def burn_verification(password: str) -> None:
    """Spend one verification on the dummy hash (unknown username path)"""
    bcrypt.checkpw(
        _to_bcrypt_secret(password), _dummy_hash(ApplicationConfig.BCRYPT_ROUNDS)
    )
