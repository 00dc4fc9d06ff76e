"""
Program: «Pictura» – backend for a personal photo gallery.
Module: config.py – application settings read from the environment.
"""

import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int | None) -> int | None:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    return int(raw)


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "sqlite:///" + os.path.join(BASE_DIR, "pictura.db"),
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_CREATE_TABLES = _env_bool("AUTO_CREATE_TABLES", True)

    # Tokens
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY") or SECRET_KEY
    JWT_ISSUER = os.environ.get("JWT_ISSUER", "pictura")
    JWT_AUDIENCE = os.environ.get("JWT_AUDIENCE", "pictura-clients")
    JWT_ACCESS_TTL_MINUTES = _env_int("JWT_ACCESS_TTL_MINUTES", 24 * 60)
    # Older clients send the raw token in this header; empty disables it
    AUTH_LEGACY_TOKEN_HEADER = os.environ.get("AUTH_LEGACY_TOKEN_HEADER", "X-Access-Token")

    PASSWORD_HASH_METHOD = os.environ.get("PASSWORD_HASH_METHOD", "scrypt")

    # Content directory holding the raw image bytes
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", os.path.join(BASE_DIR, "images"))
    MAX_CONTENT_LENGTH = _env_int("MAX_CONTENT_LENGTH", None)

    # Comma-separated; the gallery front-end is served from a separate pages host. Empty disables CORS
    CORS_ALLOW_ORIGINS = os.environ.get("CORS_ALLOW_ORIGINS", "*")

    EXPOSE_ERROR_DETAILS = _env_bool("EXPOSE_ERROR_DETAILS", True)
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    SUPPORTED_LANGUAGES = ("en",)
    DEFAULT_LANGUAGE = "en"
