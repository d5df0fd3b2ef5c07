"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_tracker.adapters.supabase_query import execute, parse_timestamp
from diet_tracker.domain.models import UserRecord
from diet_tracker.errors import StoreUnavailableError
from diet_tracker.services.users import UserRepository

_USER_COLUMNS = "id, name, email, session_token, created_at, updated_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""
        response = execute(
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("email", email)
            .limit(1),
            "users.get_by_email",
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_session_token(self, session_token: str) -> UserRecord | None:
        """Return the user bound to a session token, if present."""
        response = execute(
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("session_token", session_token)
            .limit(1),
            "users.get_by_session_token",
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, name: str, email: str, session_token: str) -> UserRecord:
        """Create a new user row and return it."""
        response = execute(
            self.client.table("users").insert(
                {"name": name, "email": email, "session_token": session_token}
            ),
            "users.create_user",
        )
        if not response.data:
            raise StoreUnavailableError("Failed to create user")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        email=str(row.get("email", "")),
        session_token=str(row.get("session_token", "")),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
