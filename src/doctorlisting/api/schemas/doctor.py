"""
Doctor request/response schemas.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic_core import PydanticCustomError

from ...domain.entities.doctor import Doctor


class AddDoctorRequest(BaseModel):
    """Body of POST /add-doctor. Unknown keys are rejected.

    ``rating`` accepts numbers and numeric strings, never booleans.
    ``available`` accepts booleans and the strings ``"true"``/``"false"``
    (any case); ``1``, ``0``, ``"yes"`` and the like are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Doctor display name")
    specialty: str = Field(..., min_length=1, description="Medical specialty")
    rating: float = Field(..., ge=0, le=5, description="Rating between 0 and 5")
    available: StrictBool = Field(..., description="Whether the doctor is accepting patients")
    location: str = Field(..., min_length=1, description="Practice location")

    @field_validator("rating", mode="before")
    @classmethod
    def reject_boolean_rating(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise PydanticCustomError("float_type", "Input should be a valid number")
        return value

    @field_validator("available", mode="before")
    @classmethod
    def parse_boolean_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered == "true":
                return True
            if lowered == "false":
                return False
        return value


class DoctorSchema(BaseModel):
    """Doctor as returned by the listing endpoint."""

    id: Optional[str] = Field(None, description="Store-assigned doctor ID")
    name: str
    specialty: str
    rating: float
    available: bool
    location: str
    created_at: datetime

    @classmethod
    def from_entity(cls, doctor: Doctor) -> "DoctorSchema":
        return cls(
            id=doctor.doctor_id,
            name=doctor.name,
            specialty=doctor.specialty,
            rating=doctor.rating,
            available=doctor.available,
            location=doctor.location,
            created_at=doctor.created_at,
        )


class DoctorListResponse(BaseModel):
    """Page of doctors plus the filtered total."""

    doctors: List[DoctorSchema] = Field(default_factory=list)
    total: int = Field(0, description="Number of doctors matching the filters, ignoring pagination")
