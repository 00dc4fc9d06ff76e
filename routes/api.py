"""
Program: «Pictura» – backend for a personal photo gallery.
Module: routes/api.py – per-user picture upload, listing and removal.
"""

from flask import current_app, g, request, send_file
from flask_babel import gettext as _

from extensions import image_store
from utils.api_response import api_success, internal_error_response, service_error_response
from utils.auth_gate import require_auth
from utils.errors import NotFound, ServiceError
from utils.picture_service import (
    delete_picture,
    get_picture,
    list_pictures,
    serialize_image,
    upload_picture,
)


def register_routes(app):
    @app.post("/api/upload-picture")
    @require_auth
    def upload():
        file = request.files.get("image")
        current_app.logger.info(
            "Upload request received: user=%s has_file=%s filename=%s",
            g.user_id,
            file is not None,
            file.filename if file is not None else None,
        )

        try:
            image = upload_picture(g.user_id, file)
        except ServiceError as exc:
            return service_error_response(exc)
        except Exception as exc:
            current_app.logger.exception("Upload error")
            return internal_error_response("Failed to upload image", exc)

        return api_success(
            message=_("Image uploaded successfully"),
            image=serialize_image(image),
        )

    @app.get("/api/pictures")
    @require_auth
    def pictures():
        try:
            items = list_pictures(g.user_id)
        except Exception as exc:
            current_app.logger.exception("Get pictures error")
            return internal_error_response("Failed to fetch pictures", exc)

        current_app.logger.debug("Found %s pictures for user %s", len(items), g.user_id)
        return api_success(pictures=[serialize_image(item) for item in items])

    @app.get("/api/pictures/<int:image_id>/content")
    @require_auth
    def picture_content(image_id: int):
        try:
            image = get_picture(g.user_id, image_id)
        except ServiceError as exc:
            return service_error_response(exc)

        if not image_store.exists(image.file_path):
            current_app.logger.warning("File missing for image %s: %s", image.id, image.file_path)
            return service_error_response(NotFound("Image file is missing"))

        return send_file(
            image_store.resolve(image.file_path),
            mimetype=image.content_type or "application/octet-stream",
            download_name=image.filename,
        )

    @app.delete("/api/delete-picture/<int:image_id>")
    @require_auth
    def delete(image_id: int):
        current_app.logger.info("Delete request for image %s by user %s", image_id, g.user_id)

        try:
            delete_picture(g.user_id, image_id)
        except ServiceError as exc:
            return service_error_response(exc)
        except Exception as exc:
            current_app.logger.exception("Delete error")
            return internal_error_response("Failed to delete image", exc)

        return api_success(message=_("Image deleted successfully"))
