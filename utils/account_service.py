from flask import current_app
from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from extensions import db
from models.user import User
from utils.errors import DuplicateEmail, InvalidCredentials, ValidationError

_dummy_hashes: dict[str, str] = {}


def _hash_method() -> str:
    return current_app.config["PASSWORD_HASH_METHOD"]


def _dummy_hash() -> str:
    # Compared against when the email is unknown so both login failures cost the same
    method = _hash_method()
    if method not in _dummy_hashes:
        _dummy_hashes[method] = generate_password_hash("pictura-dummy-password", method=method)
    return _dummy_hashes[method]


def normalize_email(raw_email) -> str:
    if not isinstance(raw_email, str):
        return ""
    return raw_email.strip()


def serialize_user(user: User) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "fullName": user.full_name,
    }


def register_user(email, password, full_name) -> User:
    email = normalize_email(email)
    full_name = full_name.strip() if isinstance(full_name, str) else ""
    if not isinstance(password, str):
        password = ""

    if not email or not password or not full_name:
        raise ValidationError("Missing required fields")

    if User.query.filter_by(email=email).first():
        raise DuplicateEmail()

    user = User(
        email=email,
        password_hash=generate_password_hash(password, method=_hash_method()),
        full_name=full_name,
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise DuplicateEmail() from exc

    current_app.logger.info("Registered user %s", user.id)
    return user


def authenticate(email, password) -> User:
    email = normalize_email(email)
    if not isinstance(password, str):
        password = ""

    if not email or not password:
        raise ValidationError("Email and password are required")

    user = User.query.filter_by(email=email).first()
    if user is None:
        check_password_hash(_dummy_hash(), password)
        raise InvalidCredentials()

    if not check_password_hash(user.password_hash, password):
        raise InvalidCredentials()
    return user
