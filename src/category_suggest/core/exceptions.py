"""Custom exception classes for category search.

Each exception maps to an error code defined in errors.py.
"""

from typing import Any


class CategorySearchError(Exception):
    """Base exception for all category search errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "LOOKUP_001")
        details: Additional context about the error (for logging)
    """

    def __init__(self, error_code: str, details: dict[str, Any] | None = None):
        self.error_code = error_code
        self.details = details or {}
        super().__init__(error_code)


class TransportError(CategorySearchError):
    """Raised when the remote category lookup fails.

    Common causes:
    - Connection refused / DNS failure / timeout (LOOKUP_001)
    - Non-2xx response status (LOOKUP_001)
    - Malformed response payload (LOOKUP_002)

    The search orchestrator absorbs this error into an empty result.
    """

    def __init__(self, error_code: str = "LOOKUP_001", details: dict[str, Any] | None = None):
        super().__init__(error_code, details=details)
