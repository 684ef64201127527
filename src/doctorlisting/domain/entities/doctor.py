"""Doctor domain entity representing a listed doctor profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..errors import InvalidDoctorDataError

MIN_RATING = 0.0
MAX_RATING = 5.0


@dataclass
class Doctor:
    """Doctor domain entity.

    Records are created once and never mutated, so every invariant is
    checked at construction time. ``doctor_id`` is assigned by the store
    and stays ``None`` until the record has been persisted.
    """

    name: str
    specialty: str
    rating: float
    available: bool
    location: str
    doctor_id: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        self._validate_doctor_data()

    def _validate_doctor_data(self) -> None:
        """Check the required fields and the rating range."""
        for name in ("name", "specialty", "location"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidDoctorDataError(name, f'"{name}" must be a string', value)
            if not value.strip():
                raise InvalidDoctorDataError(
                    name, f'"{name}" is not allowed to be empty', value
                )

        # bool is an int subclass; it is not a rating
        if isinstance(self.rating, bool) or not isinstance(self.rating, (int, float)):
            raise InvalidDoctorDataError("rating", '"rating" must be a number', self.rating)
        if self.rating < MIN_RATING:
            raise InvalidDoctorDataError(
                "rating", f'"rating" must be greater than or equal to {MIN_RATING:g}', self.rating
            )
        if self.rating > MAX_RATING:
            raise InvalidDoctorDataError(
                "rating", f'"rating" must be less than or equal to {MAX_RATING:g}', self.rating
            )

        if not isinstance(self.available, bool):
            raise InvalidDoctorDataError(
                "available", '"available" must be a boolean', self.available
            )
