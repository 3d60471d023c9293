"""
Rate limiting for the credential endpoints
"""
from flask import current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

limiter = Limiter(key_func=get_remote_address, default_limits=[], storage_uri="memory://")


def login_rate_limit():
    return current_app.config.get("RATELIMIT_LOGIN", "20 per minute")
