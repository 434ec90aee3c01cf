class WorkshopException(Exception):
    """Base exception for all Workshop metadata lookup errors."""


class NetworkError(WorkshopException):
    """Raised when a low-level network error occurs (DNS, Connection Refused, timeout)."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class APIError(WorkshopException):
    """Raised when the API answers with a non-success status or an empty body."""

    def __init__(self, mod_id: int, status_code: int | None = None, message: str = "Unknown error"):
        msg = f"Workshop API Error for mod {mod_id}"
        if status_code:
            msg += f" (HTTP {status_code})"
        msg += f": {message}"
        super().__init__(msg)
        self.mod_id = mod_id
        self.status_code = status_code


class MalformedResponse(WorkshopException):
    """Raised when the response body is not the JSON document we expect."""

    def __init__(self, details: str):
        super().__init__(f"Malformed Workshop API response: {details}")


class DetailsNotFound(WorkshopException):
    """Raised when `response.publishedfiledetails` is missing or empty."""

    def __init__(self):
        super().__init__("Workshop API response missing publishedfiledetails")


class MissingField(WorkshopException):
    """Raised when a required field is absent or null in the detail record."""

    def __init__(self, field: str):
        super().__init__(f"Workshop item details missing '{field}'")
        self.field = field
