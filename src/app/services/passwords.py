"""
Password hashing and policy, shared by signup, sign-in and password changes.
"""

import bcrypt

from src.libs.result import Error, Result, Return

MIN_PASSWORD_LENGTH = 8
BCRYPT_COST = 12

# Compared against when the email is unknown so sign-in takes the same time
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(BCRYPT_COST))


def validate_password(password: str) -> Result[None]:
    """
    Validate password complexity.

    Returns:
        Result with None if valid, or Error(VALIDATION_ERROR)
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return Return.err(
            Error(
                "VALIDATION_ERROR",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        )
    return Return.ok(None)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(BCRYPT_COST)).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash
        return False


def burn_password_check(password: str) -> None:
    """Spend one bcrypt comparison without a real hash to check against."""
    bcrypt.checkpw(password.encode("utf-8"), _DUMMY_HASH)
