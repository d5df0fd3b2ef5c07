"""Session cookie dependencies."""

from fastapi import Request

from diet_tracker.containers import AppContainer
from diet_tracker.domain.models import UserRecord


def require_user(request: Request) -> UserRecord:
    """Resolve the caller from the session cookie or fail with 401."""
    container: AppContainer = request.app.state.container
    session_token = request.cookies.get(container.settings.session_cookie_name)
    return container.session_authenticator.authenticate(session_token)
