"""Error types for attributify.

Extraction itself never raises on malformed source text: unmatched syntax
simply yields fewer selectors. These errors cover the configuration layer.
"""

from typing import Optional


class AttributifyError(Exception):
    """Base exception for attributify failures.

    Attributes:
        message: Error description.
        cause: Optional underlying exception being wrapped.
    """

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(AttributifyError):
    """Configuration error (unreadable file, invalid value, etc).

    Attributes:
        message: Description of the error.
        field: Optional field name that failed.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize ConfigurationError.

        Args:
            message: Description of the error.
            field: Optional field that caused the error.
            cause: Optional exception that triggered this error.
        """
        super().__init__(message, cause=cause)
        self.field = field
