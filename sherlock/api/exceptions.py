"""
Custom exceptions for Sherlock Domains API operations
"""

from typing import Any, Dict, List, Optional


class APIError(Exception):
    """Base exception for all API errors"""

    def __init__(self, message: str, status_code: int = None, response_data: dict = None):
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        super().__init__(self.message)

    def __str__(self):
        if self.status_code:
            return f"{type(self).__name__} (HTTP {self.status_code}): {self.message}"
        return f"{type(self).__name__}: {self.message}"


class NotAuthenticatedError(APIError):
    """Raised when an authenticated operation is called without an access token"""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class ValidationError(APIError):
    """Raised when request validation fails before anything is sent"""
    pass


class IncompleteContactError(ValidationError):
    """Raised when contact information is missing required fields"""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        self.missing_fields = list(missing_fields or [])
        super().__init__(
            message,
            response_data={"error": message, "missingFields": self.missing_fields}
        )


class RemoteRejectionError(APIError):
    """
    Raised when the API rejects a request, either with a non-2xx status
    or with an ``error`` field in a 2xx body.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Decoded error payload with the HTTP status merged in"""
        return {"status": self.status_code, **self.response_data}


class AuthenticationError(RemoteRejectionError):
    """Raised when the API refuses the access token (401/403)"""
    pass


class PaymentRequiredError(RemoteRejectionError):
    """Raised when the API answers 402 outside the X402 offer handshake"""
    pass


class NotFoundError(RemoteRejectionError):
    """Raised when a domain, record or user resource does not exist"""
    pass


class RateLimitError(RemoteRejectionError):
    """Raised when API rate limit is exceeded"""
    pass


class ServerError(RemoteRejectionError):
    """Raised when the Sherlock server returns 5xx errors"""
    pass


class NetworkError(APIError):
    """Raised when network/connection errors occur"""
    pass


class InvalidResponseError(APIError):
    """Raised when a response body does not have the expected shape"""
    pass
