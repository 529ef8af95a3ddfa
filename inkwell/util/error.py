"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error."""

    pass


class PasswordHashError(UtilError):
    """Stored password hash cannot be checked."""

    pass
