"""Doctor DTOs passed between the API and the use cases."""

from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.entities.doctor import Doctor


@dataclass
class AddDoctorRequest:
    """Request DTO for adding a doctor."""

    name: str
    specialty: str
    rating: float
    available: bool
    location: str


@dataclass
class AddDoctorResponse:
    """Response DTO for adding a doctor."""

    doctor_id: str
    message: str = "Doctor added successfully!"


@dataclass
class ListDoctorsRequest:
    """Request DTO for listing doctors.

    Empty or missing ``specialty``/``location`` leave that field unconstrained.
    """

    specialty: Optional[str] = None
    location: Optional[str] = None
    page: int = 1
    limit: int = 10


@dataclass
class ListDoctorsResponse:
    """Response DTO for listing doctors."""

    doctors: List[Doctor] = field(default_factory=list)
    total: int = 0
