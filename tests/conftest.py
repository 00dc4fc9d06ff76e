from pathlib import Path
import io
import sys
import os

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-pytest-32-characters-min")

import pytest
from PIL import Image as PILImage
from werkzeug.security import generate_password_hash

from app import create_app
from extensions import db
from models.user import User

DEFAULT_PASSWORD = "Password123!"


@pytest.fixture()
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "images"


@pytest.fixture()
def app(tmp_path: Path, upload_dir: Path):
    db_path = tmp_path / "test.db"
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_path}",
            "AUTO_CREATE_TABLES": True,
            "UPLOAD_FOLDER": str(upload_dir),
            "JWT_SECRET_KEY": "test-jwt-secret-key-with-safe-length-32",
            "JWT_ISSUER": "pictura-test",
            "JWT_AUDIENCE": "pictura-clients-test",
            "EXPOSE_ERROR_DETAILS": True,
        }
    )

    with app.app_context():
        db.drop_all()
        db.create_all()

    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def create_user(app):
    def _create_user(email: str, password: str = DEFAULT_PASSWORD, full_name: str = "Test User"):
        with app.app_context():
            user = User(
                email=email,
                password_hash=generate_password_hash(password, method="scrypt"),
                full_name=full_name,
            )
            db.session.add(user)
            db.session.commit()
            return user.id

    return _create_user


@pytest.fixture()
def login(client):
    def _login(email: str, password: str = DEFAULT_PASSWORD) -> str:
        response = client.post("/login", json={"email": email, "password": password})
        assert response.status_code == 200
        return response.get_json()["token"]

    return _login


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def png_bytes(size: tuple[int, int] = (4, 4), color: str = "red") -> bytes:
    buffer = io.BytesIO()
    PILImage.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()
