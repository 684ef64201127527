"""
Exception handling for the Doctor Listing service.

Infrastructure-level exceptions; domain rule violations live in
``doctorlisting.domain.errors``. Both are mapped to HTTP responses by the
handlers registered in ``doctorlisting.app``.
"""

from typing import Any, Dict, Optional


class DoctorListingException(Exception):
    """Base exception class for the Doctor Listing service."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class DatabaseError(DoctorListingException):
    """Raised when there's a database operation error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "DATABASE_ERROR", details)
