"""
Token Issuer/Verifier - stateless HS256 JWTs carrying the user id.

Every way a token can be wrong (absent, garbage, bad signature, expired,
missing claims) ends in the same AuthenticationException.
"""

from datetime import datetime, timedelta, timezone

import structlog
from flask import current_app
from jose import JWTError, jwt

from todo_api.constants import JWT_ALGORITHM, TOKEN_EXPIRES_HOURS
from todo_api.exceptions import AuthenticationException

logger = structlog.get_logger('tokens')


def _secret():
    return current_app.config["JWT_SECRET"]


def issue(user_id, expires_hours=None):
    """Signed token for ``user_id`` valid for ``expires_hours`` (config default 24)"""
    if expires_hours is None:
        expires_hours = current_app.config.get("TOKEN_EXPIRES_HOURS", TOKEN_EXPIRES_HOURS)
    issued_at = datetime.now(timezone.utc)
    claims = {
        "userId": user_id,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + timedelta(hours=expires_hours)).timestamp()),
    }
    return jwt.encode(claims, _secret(), algorithm=JWT_ALGORITHM)


def verify(token):
    """Return the user id inside a valid token"""
    if not token:
        raise AuthenticationException()

    try:
        claims = jwt.decode(token, _secret(), algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.debug(f"Rejected token: {e}")
        raise AuthenticationException()

    user_id = claims.get("userId")
    if "exp" not in claims or not isinstance(user_id, str) or not user_id:
        logger.debug("Rejected token without required claims")
        raise AuthenticationException()

    return user_id
