"""
Password hashing and session verification
"""
import bcrypt
from fastapi import HTTPException, Request
from app.core.config import settings
from app.utils.datetime_utils import now_unix

# Session keys
SESSION_USER_ID_KEY = "USERID"
SESSION_USERNAME_KEY = "USERNAME"
SESSION_EXPIRES_KEY = "EXPIRES"


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def start_session(request: Request, user_id: int, username: str) -> int:
    """
    Store the signed-in user in the session cookie.
    Returns the unix time at which the session expires.
    """
    expires = now_unix() + settings.SESSION_TTL
    request.session[SESSION_USER_ID_KEY] = user_id
    request.session[SESSION_USERNAME_KEY] = username
    request.session[SESSION_EXPIRES_KEY] = expires
    return expires


def verify_user_session(request: Request) -> int:
    """
    Dependency: require a signed-in, non-expired session.

    Returns the session user's id.
    """
    expires = request.session.get(SESSION_EXPIRES_KEY)
    if expires is None:
        raise HTTPException(status_code=403, detail="failed to get EXPIRES value from session")

    user_id = request.session.get(SESSION_USER_ID_KEY)
    if not isinstance(user_id, int):
        raise HTTPException(status_code=401, detail="failed to get USERID value from session")

    if now_unix() > expires:
        raise HTTPException(status_code=401, detail="session has expired")

    return user_id
