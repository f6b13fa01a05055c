"""Authentication dependencies for FastAPI"""

from fastapi import Depends, HTTPException, Request, status

from foodbridge.auth.session import AuthSession


def get_auth_session(request: Request) -> AuthSession:
    """Return the app-wide admin session created at start-up"""
    return request.app.state.auth_session


def require_admin(session: AuthSession = Depends(get_auth_session)) -> AuthSession:
    """
    Require a logged-in admin.

    Use this for every dashboard route.

    The session is app-wide rather than per client: once the admin has
    logged in, every caller reaches the dashboard until someone logs out.

    Raises:
        HTTPException: 401 if nobody is logged in
    """
    if not session.is_logged_in:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin login required",
        )
    return session
