from flask import current_app, jsonify
from flask_babel import gettext as _

from utils.errors import ServiceError


def api_success(status: int = 200, **fields):
    payload = {"success": True}
    payload.update(fields)
    return jsonify(payload), status


def api_error(code: str, message: str, status: int = 400, details=None):
    payload = {
        "success": False,
        "error": {
            "code": code,
            "message": message,
        },
    }
    if details is not None:
        payload["error"]["details"] = details
    return jsonify(payload), status


def _error_details(exc: BaseException | None):
    if exc is None or not current_app.config.get("EXPOSE_ERROR_DETAILS"):
        return None
    return str(exc)


def service_error_response(exc: ServiceError):
    details = _error_details(exc.__cause__) if exc.status >= 500 else None
    return api_error(exc.code, _(exc.message), status=exc.status, details=details)


def internal_error_response(message: str, exc: Exception | None = None):
    return api_error("INTERNAL_ERROR", _(message), status=500, details=_error_details(exc))
