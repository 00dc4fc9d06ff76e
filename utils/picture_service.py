from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from extensions import db, image_store
from models.image import Image
from models.user import User
from utils.errors import Forbidden, NoFile, NotFound, StorageFailure, UserNotFound

# Largest id a signed 64-bit INTEGER column can hold
MAX_IMAGE_ID = 2**63 - 1


def serialize_image(image: Image) -> dict:
    return {
        "id": image.id,
        "userId": image.user_id,
        "filename": image.filename,
        "filePath": image.file_path,
        "contentType": image.content_type,
        "size": image.size_bytes,
        "createdAt": image.created_at.isoformat() if image.created_at else None,
    }


def _owned_image(user_id: int, image_id: int, forbidden_message: str) -> Image:
    image = None
    if 0 < image_id <= MAX_IMAGE_ID:
        image = db.session.get(Image, image_id)
    if image is None:
        raise NotFound("Image not found")

    if image.user_id != user_id:
        current_app.logger.warning("User %s was denied access to image %s", user_id, image_id)
        raise Forbidden(forbidden_message)
    return image


def upload_picture(user_id: int, file_storage) -> Image:
    if file_storage is None or not file_storage.filename:
        raise NoFile()

    if image_store.payload_size(file_storage) == 0:
        raise NoFile("Uploaded file is empty")

    if db.session.get(User, user_id) is None:
        current_app.logger.error("User not found for upload: %s", user_id)
        raise UserNotFound()

    try:
        stored = image_store.save(file_storage)
    except OSError as exc:
        current_app.logger.exception("Failed to write uploaded file")
        raise StorageFailure("Failed to upload image") from exc

    image = Image(
        user_id=user_id,
        filename=file_storage.filename,
        storage_key=stored.storage_key,
        file_path=stored.relative_path,
        content_type=stored.content_type,
        size_bytes=stored.size_bytes,
    )
    db.session.add(image)
    try:
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.exception("Failed to save image record, removing %s", stored.relative_path)
        try:
            image_store.remove(stored.relative_path)
        except OSError:
            current_app.logger.exception("Could not remove orphan file %s", stored.relative_path)
        raise StorageFailure("Failed to upload image") from exc

    current_app.logger.info("Stored image %s for user %s at %s", image.id, user_id, image.file_path)
    return image


def list_pictures(user_id: int) -> list[Image]:
    return (
        Image.query.filter_by(user_id=user_id)
        .order_by(Image.created_at.desc(), Image.id.desc())
        .all()
    )


def get_picture(user_id: int, image_id: int) -> Image:
    return _owned_image(user_id, image_id, "Not authorized to view this image")


def delete_picture(user_id: int, image_id: int) -> None:
    image = _owned_image(user_id, image_id, "Not authorized to delete this image")

    # A file that cannot be removed does not block dropping the record
    try:
        if image_store.remove(image.file_path):
            current_app.logger.info("File deleted: %s", image.file_path)
        else:
            current_app.logger.warning("File not found: %s", image.file_path)
    except (OSError, ValueError):
        current_app.logger.exception("Error deleting file %s", image.file_path)

    db.session.delete(image)
    try:
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.exception("Error deleting image record %s", image_id)
        raise StorageFailure("Failed to delete image") from exc

    current_app.logger.info("Image record deleted: %s", image_id)
