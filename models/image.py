"""
Program: «Pictura» – backend for a personal photo gallery.
Module: models/image.py – metadata of an uploaded picture.

The bytes live in the content directory under `storage_key`; `filename` is the
name the client sent and is only shown back to the owner.
"""

from datetime import datetime, timezone

from extensions import db


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Image(db.Model):
    __tablename__ = "image"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("user.id"), nullable=False, index=True)
    filename = db.Column(db.String(255), nullable=False)
    storage_key = db.Column(db.String(64), nullable=False, unique=True)
    file_path = db.Column(db.String(255), nullable=False)
    content_type = db.Column(db.String(100), nullable=True)
    size_bytes = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=_utcnow, nullable=False, index=True)

    owner = db.relationship("User", back_populates="images")
