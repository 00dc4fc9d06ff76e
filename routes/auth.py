"""
Program: «Pictura» – backend for a personal photo gallery.
Module: routes/auth.py – registration, login and token checks.

- Registration stores a salted password hash and returns the public profile.
- Login exchanges email and password for a signed access token.
- /verify-token lets clients check whether a stored token is still usable.
"""

from flask import current_app, g, request

from utils.account_service import authenticate, register_user, serialize_user
from utils.api_response import api_success, internal_error_response, service_error_response
from utils.auth_gate import require_auth
from utils.errors import ServiceError
from utils.jwt_service import issue_access_token


def _request_payload() -> dict:
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def register_routes(app):
    @app.get("/verify-token")
    @require_auth
    def verify_token():
        return api_success(valid=True, userId=g.user_id)

    @app.post("/register")
    def register():
        payload = _request_payload()
        full_name = payload.get("fullName")
        if full_name is None:
            full_name = payload.get("full_name")

        try:
            user = register_user(payload.get("email"), payload.get("password"), full_name)
        except ServiceError as exc:
            return service_error_response(exc)
        except Exception as exc:
            current_app.logger.exception("Registration error")
            return internal_error_response("Registration failed", exc)

        return api_success(user=serialize_user(user))

    @app.post("/login")
    def login():
        payload = _request_payload()

        try:
            user = authenticate(payload.get("email"), payload.get("password"))
            token, expires_in = issue_access_token(user.id)
        except ServiceError as exc:
            return service_error_response(exc)
        except Exception as exc:
            current_app.logger.exception("Login error")
            return internal_error_response("Login failed", exc)

        return api_success(
            token=token,
            tokenType="Bearer",
            expiresIn=expires_in,
            user=serialize_user(user),
        )
