"""
API schemas package.
"""

from .common import ErrorResponse, MessageResponse
from .doctor import (
    AddDoctorRequest,
    DoctorListResponse,
    DoctorSchema,
)

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "AddDoctorRequest",
    "DoctorListResponse",
    "DoctorSchema",
]
