"""
Program: «Pictura» – backend for a personal photo gallery.
Module: models/user.py – registered gallery owner.

- Stores the login email, the salted password hash and the display name.
- Owns the uploaded images through the `images` relationship.
"""

from datetime import datetime, timezone

from extensions import db


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(db.Model):
    __tablename__ = "user"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    full_name = db.Column(db.String(120), nullable=False)
    created_at = db.Column(db.DateTime, default=_utcnow, nullable=False)

    images = db.relationship("Image", back_populates="owner", lazy=True)
