"""
Auth Routes - signup and login, both answering with a token and the user
"""

from flask import Blueprint, request

from todo_api.api_responses import created_response, success_response
from todo_api.middleware.rate_limit import limiter, login_rate_limit
from todo_api.services import credential_store, tokens
from todo_api.validation import validate_credentials

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


def _session_payload(user):
    return {
        "token": tokens.issue(user.id),
        "user": user.to_dict(),
    }


@auth_bp.post("/signup")
@limiter.limit(login_rate_limit)
def signup():
    email, password, name = validate_credentials(request.get_json(silent=True))
    user = credential_store.register(email, password, name)
    return created_response(_session_payload(user), "User created successfully")


@auth_bp.post("/login")
@limiter.limit(login_rate_limit)
def login():
    email, password, _ = validate_credentials(request.get_json(silent=True))
    user = credential_store.verify(email, password)
    return success_response(data=_session_payload(user), message="Login successful")
