"""
Exceptions for TingTing CLI.
"""

from typing import Any, Optional


class TingTingError(Exception):
    """Base exception for all TingTing errors."""
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ApiError(TingTingError):
    """
    Raised when an API request fails.
    
    Covers both HTTP error statuses and connection failures. Callers branch
    on ``message``, ``code`` and ``raw_data`` rather than on subclasses.
    
    Attributes:
        message: Error message from the response body, or the transport error text
        code: HTTP status code, or 0 when no response was received
        raw_data: Decoded error body, or None if absent or not valid JSON
    """
    
    def __init__(self, message: str, code: int = 0, raw_data: Optional[Any] = None):
        super().__init__(message)
        self.code = code
        self.raw_data = raw_data
    
    def __repr__(self) -> str:
        return f"ApiError(message={self.message!r}, code={self.code!r})"


class ConfigurationError(TingTingError):
    """Raised when configuration values are invalid."""
