"""Server-side login session."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import UserId, Username


class UserSession(DomainModel):
    """Authentication state stored server-side, keyed by the cookie token.

    Carries a snapshot of the authenticated user so the auth guard does not
    need to load the user on every request.
    """

    token: str = Field(min_length=16, max_length=128)
    user_id: UserId
    username: Username
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Whether the session is past its expiry."""
        return (now or utcnow()) >= self.expires_at
