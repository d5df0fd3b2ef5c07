"""User registration endpoint."""

from fastapi import APIRouter, Request, Response, status

from diet_tracker.api.schemas import CreateUserBody
from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    body: CreateUserBody, request: Request, response: Response
) -> dict[str, str]:
    """Register a user and bind it to the caller's session cookie."""
    container: AppContainer = request.app.state.container
    settings = container.settings
    registration = container.user_service.register(
        name=body.name,
        email=str(body.email),
        session_token=request.cookies.get(settings.session_cookie_name),
    )
    if registration.token_issued:
        response.set_cookie(
            settings.session_cookie_name,
            registration.session_token,
            max_age=settings.session_max_age_seconds,
            path="/",
            httponly=True,
            samesite="lax",
            secure=settings.session_cookie_secure,
        )
    return {"id": str(registration.user.id)}
