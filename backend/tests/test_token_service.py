"""
DragNotes Backend — Token Service Tests
=========================================

Issue/verify round trip and the rejection paths (expired, forged, no subject).
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from dragnotes.exceptions import AuthenticationError
from dragnotes.services.token_service import TokenService

TEST_SECRET = "test-secret-not-for-production"


class TestIssueAndVerify:
    def test_verify_returns_subject(self, token_service):
        issued = token_service.issue("user-123")

        assert issued.expires_in == 86_400
        assert token_service.verify(issued.token) == "user-123"

    def test_claims_carry_expiry(self, token_service):
        now = datetime.now(timezone.utc).replace(microsecond=0)
        issued = token_service.issue("user-123", now=now)

        claims = jwt.get_unverified_claims(issued.token)
        assert claims["sub"] == "user-123"
        assert claims["exp"] - claims["iat"] == 86_400

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            TokenService(secret="")


class TestRejection:
    def test_expired_token(self, token_service):
        two_days_ago = datetime.now(timezone.utc) - timedelta(days=2)
        issued = token_service.issue("user-123", now=two_days_ago)

        with pytest.raises(AuthenticationError) as exc_info:
            token_service.verify(issued.token)
        assert exc_info.value.reason == "token expired"

    def test_token_signed_with_other_secret(self, token_service):
        forged = TokenService(secret="someone-elses-secret").issue("user-123").token

        with pytest.raises(AuthenticationError) as exc_info:
            token_service.verify(forged)
        assert exc_info.value.reason == "invalid token"

    def test_garbage_token(self, token_service):
        with pytest.raises(AuthenticationError):
            token_service.verify("not.a.jwt")

    def test_tampered_payload(self, token_service):
        header, _, signature = token_service.issue("user-123").token.split(".")
        other_payload = TokenService(secret=TEST_SECRET).issue("user-456").token.split(".")[1]

        with pytest.raises(AuthenticationError):
            token_service.verify(".".join([header, other_payload, signature]))

    def test_token_without_subject(self, token_service):
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        token = jwt.encode({"exp": exp}, TEST_SECRET, algorithm="HS256")

        with pytest.raises(AuthenticationError) as exc_info:
            token_service.verify(token)
        assert exc_info.value.reason == "token has no subject"
