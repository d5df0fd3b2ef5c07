"""Domain models for users and registrations."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    name: str
    email: str
    session_token: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Registration:
    """Outcome of registering a user."""

    user: UserRecord
    session_token: str
    token_issued: bool
