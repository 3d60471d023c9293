"""
Authentication Middleware - Bearer token decorator
"""
from functools import wraps

from flask import g, request

from todo_api.services import tokens

BEARER_PREFIX = "Bearer "


def get_bearer_token(req):
    """Token from ``Authorization: Bearer <token>``, or None"""
    auth_header = req.headers.get("Authorization", "")
    if not auth_header.startswith(BEARER_PREFIX):
        return None
    return auth_header[len(BEARER_PREFIX):].strip() or None


def token_required(f):
    """Reject the request with 401 unless it carries a valid token; sets g.user_id"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        g.user_id = tokens.verify(get_bearer_token(request))
        return f(*args, **kwargs)
    return decorated_function


def current_user_id():
    return g.user_id
