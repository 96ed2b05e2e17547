from typing import Any


class HRMSError(Exception):
    """Base error. `message` is a translation key, `detail` is readable text."""

    status_code = 400
    message = "something_went_wrong"

    def __init__(self, detail: str = None, message: str = None, errors: Any = None):
        self.message = message or self.message
        self.detail = detail or self.message
        self.errors = errors
        super().__init__(self.detail)


class ValidationError(HRMSError):
    status_code = 400
    message = "validation_failed"


class NotFoundError(HRMSError):
    status_code = 404
    message = "not_found"


class ConflictError(HRMSError):
    status_code = 409
    message = "conflict"


class ServiceUnavailableError(HRMSError):
    status_code = 503
    message = "service_unavailable"
