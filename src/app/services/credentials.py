"""
Generators for member login credentials and membership codes.

All randomness comes from the secrets module. Generation is single-shot:
collisions surface as unique-constraint violations at insert time.
"""

import re
import secrets
import string
import unicodedata

from src.domain.membership import MEMBERSHIP_CODE_DIGITS, MEMBERSHIP_CODE_PREFIX

PASSWORD_ALPHABET = string.ascii_letters + string.digits
MEMBERSHIP_CODE_PATTERN = re.compile(
    rf"^{MEMBERSHIP_CODE_PREFIX}\d{{{MEMBERSHIP_CODE_DIGITS}}}$"
)


def _sanitize_name(name: str) -> str:
    # "Nicolò D'Amico" -> "nicolodamico"
    ascii_name = (
        unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    )
    return re.sub(r"[^a-z]", "", ascii_name.lower())


def generate_username(first_name: str, last_name: str) -> str:
    """Sanitized first+last name followed by a random 3-digit suffix"""
    suffix = f"{secrets.randbelow(1000):03d}"
    return f"{_sanitize_name(first_name)}{_sanitize_name(last_name)}{suffix}"


def generate_password(length: int = 8) -> str:
    """Random alphanumeric password"""
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))


def generate_membership_code() -> str:
    """e.g. CF004821"""
    number = secrets.randbelow(10**MEMBERSHIP_CODE_DIGITS)
    return f"{MEMBERSHIP_CODE_PREFIX}{number:0{MEMBERSHIP_CODE_DIGITS}d}"
