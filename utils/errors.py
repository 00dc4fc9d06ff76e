class ServiceError(Exception):
    code = "INTERNAL_ERROR"
    status = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, code: str | None = None, status: int | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)
        if code is not None:
            self.code = code
        if status is not None:
            self.status = status


class ValidationError(ServiceError):
    code = "VALIDATION_ERROR"
    status = 400
    default_message = "Missing required fields"


class DuplicateEmail(ServiceError):
    code = "EMAIL_ALREADY_REGISTERED"
    status = 400
    default_message = "Email already registered"


class InvalidCredentials(ServiceError):
    code = "AUTH_INVALID_CREDENTIALS"
    status = 401
    default_message = "Invalid credentials"


class Unauthenticated(ServiceError):
    code = "AUTH_REQUIRED"
    status = 401
    default_message = "No token provided"


class Forbidden(ServiceError):
    code = "FORBIDDEN"
    status = 403
    default_message = "Forbidden"


class InvalidToken(Forbidden):
    code = "AUTH_INVALID_TOKEN"
    default_message = "Invalid token"


class NotFound(ServiceError):
    code = "NOT_FOUND"
    status = 404
    default_message = "Not found"


class NoFile(ServiceError):
    code = "NO_FILE"
    status = 400
    default_message = "No file uploaded"


class UserNotFound(ServiceError):
    code = "USER_NOT_FOUND"
    status = 404
    default_message = "User not found"


class StorageFailure(ServiceError):
    code = "STORAGE_FAILURE"
    status = 500
    default_message = "Storage operation failed"
