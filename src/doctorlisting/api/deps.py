"""FastAPI dependency providers."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ..adapters.db.mongo.repositories.doctor_repository import MongoDoctorRepository
from ..application.ports.repositories.doctor_repo import DoctorRepository
from ..application.use_cases.add_doctor import AddDoctorUseCase
from ..application.use_cases.list_doctors import ListDoctorsUseCase


@lru_cache()
def get_doctor_repository() -> DoctorRepository:
    """Get doctor repository instance."""
    return MongoDoctorRepository()


def get_add_doctor_use_case(
    doctor_repository: Annotated[DoctorRepository, Depends(get_doctor_repository)],
) -> AddDoctorUseCase:
    return AddDoctorUseCase(doctor_repository)


def get_list_doctors_use_case(
    doctor_repository: Annotated[DoctorRepository, Depends(get_doctor_repository)],
) -> ListDoctorsUseCase:
    return ListDoctorsUseCase(doctor_repository)


# Dependency annotations for FastAPI
AddDoctorUseCaseDep = Annotated[AddDoctorUseCase, Depends(get_add_doctor_use_case)]
ListDoctorsUseCaseDep = Annotated[ListDoctorsUseCase, Depends(get_list_doctors_use_case)]
