from typing import Any, Mapping, Optional


class NotFoundError(Exception):
    """Raised when a requested record was not found.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context
        code: machine-readable error code
        http_status: HTTP status code the API answers with (404)
    """

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: str = "NOT_FOUND"):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def __str__(self) -> str:
        return self.message


class StoreError(Exception):
    """Raised when a lookup, insert or update against the database fails.

    ``message`` is the short user-facing text; the underlying driver error is
    kept on ``cause`` and only ever logged. The API answers with http_status 503.
    """

    http_status = 503

    def __init__(self, message: str = "Database operation failed", operation: Optional[str] = None, cause: Optional[BaseException] = None, code: str = "STORE_ERROR"):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.cause = cause
        self.code = code

    def __str__(self) -> str:
        return self.message
