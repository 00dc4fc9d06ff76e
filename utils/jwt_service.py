import secrets
from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app

from utils.errors import InvalidToken


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _secret() -> str:
    return current_app.config["JWT_SECRET_KEY"]


def issue_access_token(user_id: int) -> tuple[str, int]:
    now = _utcnow()
    ttl_minutes = max(1, int(current_app.config["JWT_ACCESS_TTL_MINUTES"]))
    expires_at = now + timedelta(minutes=ttl_minutes)

    payload = {
        "sub": str(user_id),
        "iss": current_app.config["JWT_ISSUER"],
        "aud": current_app.config["JWT_AUDIENCE"],
        "iat": int(now.timestamp()),
        "exp": int(expires_at.timestamp()),
        "type": "access",
        "jti": secrets.token_hex(8),
    }
    token = jwt.encode(payload, _secret(), algorithm="HS256")
    return token, ttl_minutes * 60


def parse_access_token(token: str) -> dict:
    try:
        payload = jwt.decode(
            token,
            _secret(),
            algorithms=["HS256"],
            audience=current_app.config["JWT_AUDIENCE"],
            issuer=current_app.config["JWT_ISSUER"],
        )
    except jwt.ExpiredSignatureError as exc:
        current_app.logger.debug("Rejected expired access token")
        raise InvalidToken() from exc
    except jwt.InvalidTokenError as exc:
        current_app.logger.debug("Rejected access token: %s", exc)
        raise InvalidToken() from exc

    if payload.get("type") != "access":
        current_app.logger.debug("Rejected token of type %r", payload.get("type"))
        raise InvalidToken()
    return payload


def verify_access_token(token: str) -> int:
    """Return the user id carried by a valid token; expiry, bad signature and
    malformed payloads all raise the same InvalidToken."""
    payload = parse_access_token(token)
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError) as exc:
        raise InvalidToken() from exc

    if user_id <= 0:
        raise InvalidToken()
    return user_id
