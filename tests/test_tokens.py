"""
Tests for token issuing and verification
"""
import time

import pytest
from jose import jwt

from todo_api.exceptions import AuthenticationException
from todo_api.services import tokens


class TestIssue:
    """Tests for tokens.issue"""

    def test_issue_then_verify_returns_user_id(self, app_ctx):
        token = tokens.issue('user-123')
        assert tokens.verify(token) == 'user-123'

    def test_token_expires_after_24_hours(self, app_ctx):
        """Claims carry the user id and a 24h lifetime"""
        claims = jwt.get_unverified_claims(tokens.issue('user-123'))
        assert claims['userId'] == 'user-123'
        assert claims['exp'] - claims['iat'] == 24 * 3600

    def test_lifetime_follows_config(self, app):
        app.config['TOKEN_EXPIRES_HOURS'] = 2
        with app.app_context():
            claims = jwt.get_unverified_claims(tokens.issue('user-123'))
        assert claims['exp'] - claims['iat'] == 2 * 3600


class TestVerify:
    """Every bad token collapses to the same AuthenticationException"""

    @pytest.mark.parametrize('token', [None, '', 'not-a-token', 'a.b.c'])
    def test_missing_or_malformed(self, app_ctx, token):
        with pytest.raises(AuthenticationException) as exc_info:
            tokens.verify(token)
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == 'Not authorized'

    def test_expired(self, app_ctx):
        token = tokens.issue('user-123', expires_hours=-1)
        with pytest.raises(AuthenticationException):
            tokens.verify(token)

    def test_wrong_signature(self, app_ctx):
        claims = {'userId': 'user-123', 'iat': int(time.time()), 'exp': int(time.time()) + 3600}
        forged = jwt.encode(claims, 'some-other-secret', algorithm='HS256')
        with pytest.raises(AuthenticationException):
            tokens.verify(forged)

    def test_missing_user_id_claim(self, app_ctx):
        token = jwt.encode({'exp': int(time.time()) + 3600}, 'test-secret-key', algorithm='HS256')
        with pytest.raises(AuthenticationException):
            tokens.verify(token)

    def test_missing_expiry_claim(self, app_ctx):
        token = jwt.encode({'userId': 'user-123'}, 'test-secret-key', algorithm='HS256')
        with pytest.raises(AuthenticationException):
            tokens.verify(token)
