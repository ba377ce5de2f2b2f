"""Unit tests for TokenService."""

from datetime import timedelta

import jwt
import pytest

from discipline_identity import InvalidTokenError, TokenService
from tests.shared.fixtures.factories import FIXED_NOW, fixed_clock, make_user

SECRET = "test-secret-key-with-enough-length-for-hs256"


class TestTokenService:
    """Tests for issuing and verifying tokens."""

    def setup_method(self):
        self.user = make_user("alice")
        self.service = TokenService(
            secret_key=SECRET,
            token_ttl=timedelta(hours=1),
            clock=fixed_clock,
        )

    def test_empty_secret_is_rejected(self):
        with pytest.raises(ValueError):
            TokenService(secret_key="")

    def test_roundtrip_preserves_identity_and_window(self):
        token = self.service.issue_token(self.user)

        claims = self.service.verify_token(token)

        assert claims.user_id == str(self.user.id)
        assert claims.username == "alice"
        assert claims.issued_at == FIXED_NOW
        assert claims.not_before == FIXED_NOW
        assert claims.expires_at == FIXED_NOW + timedelta(hours=1)

    def test_verify_does_not_check_expiry(self):
        # The token was issued long ago; authenticity alone is verified
        token = self.service.issue_token(self.user)

        claims = TokenService(secret_key=SECRET).verify_token(token)

        assert claims.user_id == str(self.user.id)

    def test_claims_window(self):
        claims = self.service.verify_token(self.service.issue_token(self.user))

        assert claims.is_active_at(FIXED_NOW)
        assert claims.is_active_at(FIXED_NOW + timedelta(minutes=59))
        assert not claims.is_active_at(FIXED_NOW + timedelta(hours=1))
        assert not claims.is_active_at(FIXED_NOW - timedelta(seconds=1))

    def test_wrong_secret(self):
        token = TokenService(secret_key="another-secret-key-for-signing-tokens").issue_token(
            self.user,
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_tampered_token(self):
        token = self.service.issue_token(self.user)
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}.{signature[::-1]}"

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(tampered)

    def test_other_algorithm_is_rejected(self):
        payload = {
            "sub": str(self.user.id),
            "username": self.user.name,
            "iat": FIXED_NOW,
            "nbf": FIXED_NOW,
            "exp": FIXED_NOW + timedelta(hours=1),
        }
        token = jwt.encode(payload, SECRET, algorithm="HS512")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_missing_claim_is_rejected(self):
        token = jwt.encode({"sub": str(self.user.id)}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token(self, token):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)
