"""
Session Cookie Helpers

The cookie value is the raw session token; the server only keeps its hash.
"""

from typing import Optional

from fastapi import Request, Response

from config import ApplicationConfig


def set_session_cookie(response: Response, token: str) -> None:
    """Attach the session token as an http-only, SameSite=Lax cookie."""
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value=token,
        path="/",
        httponly=True,
        samesite="lax",
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
    )


def read_session_cookie(request: Request) -> Optional[str]:
    return request.cookies.get(ApplicationConfig.SESSION_COOKIE_NAME)


def clear_session_cookie(response: Response) -> None:
    """Tell the browser to forget the session cookie immediately."""
    response.delete_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="lax",
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
    )
