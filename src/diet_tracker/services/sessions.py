"""Session token authentication."""

import logging
from dataclasses import dataclass

from diet_tracker.domain.models import UserRecord
from diet_tracker.errors import UnauthenticatedError
from diet_tracker.services.users import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class SessionAuthenticator:
    """Resolves session tokens to registered users."""

    repository: UserRepository

    def authenticate(self, session_token: str | None) -> UserRecord:
        """Return the user bound to the token or raise UnauthenticatedError.

        Missing tokens are rejected without touching the store. The error
        carries the same message whether the token was absent or unknown.
        """
        if not session_token:
            logger.debug("Rejected request without session token")
            raise UnauthenticatedError()
        user = self.repository.get_by_session_token(session_token)
        if user is None:
            logger.debug("Rejected request with unknown session token")
            raise UnauthenticatedError()
        return user
