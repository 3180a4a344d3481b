"""Domain errors shared by every feature.

Write and read models raise these; ``src.main`` turns them into JSON responses
with the matching status code. Field-level problems travel in
``ValidationError.field_errors`` so forms can show them inline.
"""


class WeddingPlatformError(Exception):
    status_code: int = 400
    default_message: str = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(WeddingPlatformError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(WeddingPlatformError):
    status_code = 403
    default_message = "You do not have permission to perform this action"


class NotFound(WeddingPlatformError):
    status_code = 404
    default_message = "Not found"


class ValidationError(WeddingPlatformError):
    status_code = 422
    default_message = "Invalid data"

    def __init__(
        self,
        message: str | None = None,
        field_errors: dict[str, str] | None = None,
    ) -> None:
        self.field_errors = field_errors or {}
        if message is None and self.field_errors:
            message = next(iter(self.field_errors.values()))
        super().__init__(message)


class Conflict(WeddingPlatformError):
    status_code = 409
    default_message = "Conflict"


class TransientFailure(WeddingPlatformError):
    status_code = 503
    default_message = "An error occurred. Please try again."
