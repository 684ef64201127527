"""Add Doctor use case."""

import logging

from ...domain.entities.doctor import Doctor
from ..dto.doctor_dto import AddDoctorRequest, AddDoctorResponse
from ..ports.repositories.doctor_repo import DoctorRepository

logger = logging.getLogger("doctorlisting")


class AddDoctorUseCase:
    """Use case for persisting a new doctor profile.

    There is no duplicate detection: identical submissions create
    separate records.
    """

    def __init__(self, doctor_repository: DoctorRepository):
        self._doctor_repository = doctor_repository

    async def execute(self, request: AddDoctorRequest) -> AddDoctorResponse:
        """Execute the add doctor use case."""
        # Entity construction enforces the record invariants
        doctor = Doctor(
            name=request.name,
            specialty=request.specialty,
            rating=request.rating,
            available=request.available,
            location=request.location,
        )

        saved = await self._doctor_repository.save(doctor)
        logger.info(f"Doctor added: id={saved.doctor_id} specialty={saved.specialty}")

        return AddDoctorResponse(doctor_id=saved.doctor_id)
