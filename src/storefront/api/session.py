"""Session plumbing: the browser session's cart key and signed-in identity.

The session itself is a signed cookie managed by Starlette's
``SessionMiddleware``; it only carries two keys, the cart's session id and the
signed-in user's id.
"""

from urllib.parse import quote
from uuid import uuid4

from fastapi import Request
from fastapi.responses import RedirectResponse

SESSION_KEY = "sid"
USER_KEY = "user_id"


def session_id(request: Request) -> str:
    """Return this browser's session id, assigning one on first use."""
    sid = request.session.get(SESSION_KEY)
    if not sid:
        sid = uuid4().hex
        request.session[SESSION_KEY] = sid
    return sid


def current_user_id(request: Request) -> str | None:
    return request.session.get(USER_KEY) or None


def sign_in(request: Request, user_id: str) -> None:
    request.session[USER_KEY] = str(user_id)


def sign_out(request: Request) -> None:
    request.session.pop(USER_KEY, None)


def safe_next(target: str | None) -> str:
    """Only same-site relative paths are accepted as post-login destinations."""
    if not target or not target.startswith("/") or target.startswith("//"):
        return "/"
    return target


def login_redirect(request: Request) -> RedirectResponse:
    destination = request.url.path
    if request.url.query:
        destination = f"{destination}?{request.url.query}"
    return RedirectResponse(f"/auth/login?next={quote(destination, safe='')}", status_code=303)


def require_authenticated(request: Request) -> RedirectResponse | None:
    """Return a redirect to the login page when nobody is signed in, else None."""
    if current_user_id(request) is None:
        return login_redirect(request)
    return None
