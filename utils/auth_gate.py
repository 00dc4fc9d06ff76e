from functools import wraps

from flask import current_app, g, request

from utils.api_response import service_error_response
from utils.errors import InvalidToken, Unauthenticated
from utils.jwt_service import verify_access_token


def _request_token() -> str:
    auth_header = request.headers.get("Authorization")
    if auth_header is not None:
        if not auth_header.startswith("Bearer "):
            raise InvalidToken("Malformed authorization header")

        token = auth_header[len("Bearer ") :].strip()
        if not token:
            raise InvalidToken("Empty authorization token")
        return token

    legacy_header = current_app.config.get("AUTH_LEGACY_TOKEN_HEADER")
    if legacy_header:
        raw_token = request.headers.get(legacy_header)
        if raw_token is not None:
            token = raw_token.strip()
            if not token:
                raise InvalidToken("Empty authorization token")
            return token

    raise Unauthenticated()


def require_auth(view_func):
    @wraps(view_func)
    def wrapper(*args, **kwargs):
        try:
            token = _request_token()
            g.user_id = verify_access_token(token)
        except (Unauthenticated, InvalidToken) as exc:
            return service_error_response(exc)
        return view_func(*args, **kwargs)

    return wrapper
