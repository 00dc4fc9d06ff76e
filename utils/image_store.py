"""
Program: «Pictura» – backend for a personal photo gallery.
Module: utils/image_store.py – content directory holding the uploaded bytes.

- Files are named by a random storage key; the client's filename never
  reaches the filesystem.
- The directory comes from the app's UPLOAD_FOLDER and is created on startup.
"""

import os
import uuid
from dataclasses import dataclass

from flask import current_app
from PIL import Image as PILImage, UnidentifiedImageError
from werkzeug.utils import secure_filename

RELATIVE_ROOT = "images"

FORMAT_TO_EXTENSION = {
    "jpeg": "jpg",
    "png": "png",
    "gif": "gif",
    "webp": "webp",
    "bmp": "bmp",
    "tiff": "tiff",
}


@dataclass
class StoredFile:
    storage_key: str
    relative_path: str
    size_bytes: int
    content_type: str | None


def _stream_size(stream) -> int:
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def _sniff_image(stream) -> tuple[str | None, str | None]:
    stream.seek(0)
    try:
        with PILImage.open(stream) as image:
            image_format = (image.format or "").lower()
    except (UnidentifiedImageError, PILImage.DecompressionBombError, OSError):
        # Only the format matters here; oversized or unreadable images keep the filename extension
        return None, None
    finally:
        stream.seek(0)

    extension = FORMAT_TO_EXTENSION.get(image_format)
    mime = PILImage.MIME.get(image_format.upper())
    return extension, mime


def _filename_extension(filename: str | None) -> str | None:
    safe_name = secure_filename(filename or "")
    _, extension = os.path.splitext(safe_name)
    extension = extension.lstrip(".").lower()
    if not extension or len(extension) > 10:
        return None
    return extension


class ImageStore:
    def init_app(self, app):
        root = os.path.abspath(app.config["UPLOAD_FOLDER"])
        os.makedirs(root, exist_ok=True)
        app.config["UPLOAD_FOLDER"] = root
        app.extensions["image_store"] = self

    @property
    def root(self) -> str:
        return current_app.config["UPLOAD_FOLDER"]

    def payload_size(self, file_storage) -> int:
        return _stream_size(file_storage.stream)

    def save(self, file_storage) -> StoredFile:
        extension, content_type = _sniff_image(file_storage.stream)
        if extension is None:
            extension = _filename_extension(file_storage.filename)
        if content_type is None:
            content_type = file_storage.mimetype or None

        storage_key = uuid.uuid4().hex
        if extension:
            storage_key = f"{storage_key}.{extension}"

        absolute_path = os.path.join(self.root, storage_key)
        file_storage.save(absolute_path)

        return StoredFile(
            storage_key=storage_key,
            relative_path=f"{RELATIVE_ROOT}/{storage_key}",
            size_bytes=os.path.getsize(absolute_path),
            content_type=content_type,
        )

    def resolve(self, relative_path: str) -> str:
        prefix = f"{RELATIVE_ROOT}/"
        name = relative_path[len(prefix) :] if relative_path.startswith(prefix) else relative_path
        absolute_path = os.path.abspath(os.path.join(self.root, name))
        if os.path.commonpath([absolute_path, self.root]) != self.root:
            raise ValueError(f"Path escapes the content directory: {relative_path}")
        return absolute_path

    def exists(self, relative_path: str) -> bool:
        return os.path.isfile(self.resolve(relative_path))

    def remove(self, relative_path: str) -> bool:
        """Delete the file behind `relative_path`.

        Returns False when it was already gone; any other OSError propagates.
        """
        try:
            os.remove(self.resolve(relative_path))
        except FileNotFoundError:
            return False
        return True
