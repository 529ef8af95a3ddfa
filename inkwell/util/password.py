"""Password hashing utilities."""

import bcrypt

from inkwell.config import AuthSettings
from inkwell.util.error import ConfigurationError, PasswordHashError


def hash_password(password: str, settings: AuthSettings) -> str:
    """Hash a plaintext password with bcrypt.

    Args:
        password: Plaintext password
        settings: Authentication settings (salt rounds)

    Returns:
        bcrypt hash as a string

    Raises:
        ConfigurationError: If the configured salt rounds are out of range
    """
    if not 4 <= settings.bcrypt_rounds <= 31:
        raise ConfigurationError(
            f"bcrypt_rounds must be between 4 and 31, got {settings.bcrypt_rounds}"
        )

    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(candidate: str, password_hash: str) -> bool:
    """Compare a candidate password against a stored bcrypt hash.

    Args:
        candidate: Plaintext password to check
        password_hash: Stored bcrypt hash

    Returns:
        True if the password matches

    Raises:
        PasswordHashError: If the stored hash is malformed
    """
    try:
        return bcrypt.checkpw(candidate.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError as e:
        raise PasswordHashError(f"Invalid password hash: {e}")
