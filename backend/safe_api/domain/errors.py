from __future__ import annotations


class SafeError(Exception):
    """Base class for failures reported by a safe storage backend."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)
        self.detail = detail


class NotFoundError(SafeError):
    status_code = 404
    message = "Safe not found"


class InvalidDataError(SafeError):
    status_code = 400
    message = "Invalid request data"


class InternalError(SafeError):
    status_code = 500
    message = "Internal server error"
