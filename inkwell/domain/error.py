"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UserAlreadyExistsError(DomainError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User already exists: {username}")


class InvalidCredentialsError(DomainError):
    """Raised when a password does not match the stored hash."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Invalid credentials for user {username}")
