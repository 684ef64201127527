"""List Doctors use case."""

from typing import Dict

from ..dto.doctor_dto import ListDoctorsRequest, ListDoctorsResponse
from ..ports.repositories.doctor_repo import DoctorRepository


class ListDoctorsUseCase:
    """Use case for listing doctors with exact-match filters and pagination."""

    def __init__(self, doctor_repository: DoctorRepository):
        self._doctor_repository = doctor_repository

    @staticmethod
    def build_filters(request: ListDoctorsRequest) -> Dict[str, str]:
        """Build the equality filter; absent or empty values are unconstrained."""
        filters: Dict[str, str] = {}
        if request.specialty:
            filters["specialty"] = request.specialty
        if request.location:
            filters["location"] = request.location
        return filters

    async def execute(self, request: ListDoctorsRequest) -> ListDoctorsResponse:
        """Execute the list doctors use case."""
        if request.page < 1:
            raise ValueError("page must be at least 1")
        if request.limit < 1:
            raise ValueError("limit must be at least 1")

        filters = self.build_filters(request)
        offset = (request.page - 1) * request.limit

        doctors = await self._doctor_repository.find(filters, offset=offset, limit=request.limit)
        total = await self._doctor_repository.count(filters)

        return ListDoctorsResponse(doctors=doctors, total=total)
