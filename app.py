"""
Program: «Pictura» – backend for a personal photo gallery.
Module: app.py – application factory and entry point.

- Loads Config and applies per-instance overrides (used by tests).
- Initialises the database, translations and the content directory.
- Registers the auth and picture routes and JSON error handlers.
"""

import logging

from flask import Flask, current_app, request
from flask_babel import gettext as _
from werkzeug.exceptions import HTTPException

from config import Config
from extensions import babel, cors, db, image_store
from routes import api, auth
from utils.api_response import api_error, internal_error_response
from utils.i18n import resolve_request_language


def _configure_logging(app: Flask) -> None:
    level = logging.getLevelName(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    if not isinstance(level, int):
        level = logging.INFO
    app.logger.setLevel(level)


def _init_cors(app: Flask) -> None:
    origins = [o.strip() for o in (app.config.get("CORS_ALLOW_ORIGINS") or "").split(",") if o.strip()]
    if origins:
        cors.init_app(app, origins=origins, expose_headers=["Content-Disposition"])


def _select_locale():
    return resolve_request_language(
        request,
        supported_languages=tuple(current_app.config["SUPPORTED_LANGUAGES"]),
        default_language=current_app.config["DEFAULT_LANGUAGE"],
    )


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def not_found(_error):
        return api_error("NOT_FOUND", _("Resource not found"), status=404)

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return api_error("METHOD_NOT_ALLOWED", _("Method not allowed"), status=405)

    @app.errorhandler(413)
    def payload_too_large(_error):
        return api_error("PAYLOAD_TOO_LARGE", _("Uploaded file is too large"), status=413)

    @app.errorhandler(Exception)
    def unhandled(error):
        if isinstance(error, HTTPException):
            return api_error("HTTP_ERROR", error.description or error.name, status=error.code or 500)
        app.logger.exception("Unhandled error")
        db.session.rollback()
        return internal_error_response("Internal server error", error)


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    _configure_logging(app)

    db.init_app(app)
    babel.init_app(app, locale_selector=_select_locale)
    image_store.init_app(app)
    _init_cors(app)

    auth.register_routes(app)
    api.register_routes(app)
    _register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    if app.config.get("AUTO_CREATE_TABLES"):
        import models  # noqa: F401

        with app.app_context():
            db.create_all()

    app.logger.info("Content directory: %s", app.config["UPLOAD_FOLDER"])
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=4000)
