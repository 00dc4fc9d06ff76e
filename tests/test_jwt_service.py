from datetime import datetime, timedelta, timezone

import jwt
import pytest

from utils import jwt_service
from utils.errors import InvalidToken
from utils.jwt_service import issue_access_token, verify_access_token


def test_issued_token_verifies_to_same_user(app):
    with app.app_context():
        token, expires_in = issue_access_token(42)

        assert verify_access_token(token) == 42
        assert expires_in == 24 * 60 * 60


def test_expired_token_is_rejected(app, monkeypatch):
    issued_at = datetime.now(timezone.utc) - timedelta(hours=25)
    with app.app_context():
        monkeypatch.setattr(jwt_service, "_utcnow", lambda: issued_at)
        token, _ = issue_access_token(7)
        monkeypatch.undo()

        with pytest.raises(InvalidToken):
            verify_access_token(token)


def test_token_still_valid_just_before_expiry(app, monkeypatch):
    issued_at = datetime.now(timezone.utc) - timedelta(hours=23, minutes=50)
    with app.app_context():
        monkeypatch.setattr(jwt_service, "_utcnow", lambda: issued_at)
        token, _ = issue_access_token(7)
        monkeypatch.undo()

        assert verify_access_token(token) == 7


def test_token_signed_with_other_secret_is_rejected(app):
    with app.app_context():
        token, _ = issue_access_token(3)

    app.config["JWT_SECRET_KEY"] = "another-secret-key-with-safe-length-32"
    with app.app_context():
        with pytest.raises(InvalidToken):
            verify_access_token(token)


def test_malformed_payloads_are_rejected(app):
    with app.app_context():
        secret = app.config["JWT_SECRET_KEY"]
        base_claims = {
            "iss": app.config["JWT_ISSUER"],
            "aud": app.config["JWT_AUDIENCE"],
            "exp": int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp()),
        }
        wrong_type = jwt.encode({**base_claims, "sub": "5", "type": "refresh"}, secret, algorithm="HS256")
        bad_subject = jwt.encode({**base_claims, "sub": "abc", "type": "access"}, secret, algorithm="HS256")

        for token in (wrong_type, bad_subject, "not-a-jwt"):
            with pytest.raises(InvalidToken):
                verify_access_token(token)


def test_invalid_token_reports_forbidden(app):
    with app.app_context():
        with pytest.raises(InvalidToken) as excinfo:
            verify_access_token("garbage")

    assert excinfo.value.status == 403
    assert excinfo.value.code == "AUTH_INVALID_TOKEN"
