"""User registration business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from diet_tracker.domain.models import Registration, UserRecord
from diet_tracker.errors import ConflictError

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""

    def get_by_session_token(self, session_token: str) -> UserRecord | None:
        """Return the user bound to a session token, if present."""

    def create_user(self, name: str, email: str, session_token: str) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def register(
        self, name: str, email: str, session_token: str | None = None
    ) -> Registration:
        """Register a user, reusing the caller's session token when supplied."""
        if self.repository.get_by_email(email) is not None:
            logger.info("Registration rejected for duplicate email")
            raise ConflictError()

        token_issued = not session_token
        token = session_token or str(uuid4())
        user = self.repository.create_user(name=name, email=email, session_token=token)
        logger.info(
            "Registered user",
            extra={"user_id": str(user.id), "token_issued": token_issued},
        )
        return Registration(user=user, session_token=token, token_issued=token_issued)
