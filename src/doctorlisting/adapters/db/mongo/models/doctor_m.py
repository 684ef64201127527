"""MongoDB Beanie model for Doctor documents."""

from datetime import datetime

from beanie import Document
from pydantic import Field


class DoctorMongo(Document):
    """MongoDB model for Doctor entity."""

    name: str = Field(..., description="Doctor display name")
    specialty: str = Field(..., description="Medical specialty")
    rating: float = Field(..., ge=0, le=5, description="Rating between 0 and 5")
    available: bool = Field(..., description="Whether the doctor is accepting patients")
    location: str = Field(..., description="Practice location")
    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "doctors"
        indexes = [
            "name",
            "specialty",
            "location",
        ]
