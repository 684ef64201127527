"""
Shared fixtures: an in-memory DoctorRepository wired into the FastAPI app.
"""

import itertools
from dataclasses import replace
from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from doctorlisting.api.deps import get_doctor_repository
from doctorlisting.app import app as fastapi_app
from doctorlisting.application.ports.repositories.doctor_repo import DoctorRepository
from doctorlisting.core.exceptions import DatabaseError
from doctorlisting.domain.entities.doctor import Doctor


class InMemoryDoctorRepository(DoctorRepository):
    """Dict-backed DoctorRepository mirroring the Mongo query semantics."""

    def __init__(self) -> None:
        self._doctors: List[Doctor] = []
        self._ids = itertools.count(1)

    async def save(self, doctor: Doctor) -> Doctor:
        saved = replace(doctor, doctor_id=f"{next(self._ids):024x}")
        self._doctors.append(saved)
        return saved

    def _matching(self, filters: Dict[str, str]) -> List[Doctor]:
        return [
            d for d in self._doctors
            if all(getattr(d, key) == value for key, value in filters.items())
        ]

    async def find(self, filters: Dict[str, str], offset: int = 0, limit: int = 10) -> List[Doctor]:
        ordered = sorted(self._matching(filters), key=lambda d: d.name)
        return ordered[offset:offset + limit]

    async def count(self, filters: Dict[str, str]) -> int:
        return len(self._matching(filters))

    @property
    def doctors(self) -> List[Doctor]:
        return list(self._doctors)


class FailingDoctorRepository(DoctorRepository):
    """Repository whose every call fails the way the Mongo adapter does."""

    async def save(self, doctor: Doctor) -> Doctor:
        raise DatabaseError("Failed to save doctor", {"operation": "insert"})

    async def find(self, filters, offset=0, limit=10):
        raise DatabaseError("Failed to list doctors", {"operation": "find"})

    async def count(self, filters):
        raise DatabaseError("Failed to count doctors", {"operation": "count"})


class CrashingDoctorRepository(DoctorRepository):
    """Repository raising errors outside the service hierarchy."""

    async def save(self, doctor: Doctor) -> Doctor:
        raise RuntimeError("connection reset")

    async def find(self, filters, offset=0, limit=10):
        raise RuntimeError("connection reset")

    async def count(self, filters):
        raise RuntimeError("connection reset")


@pytest.fixture
def repository():
    return InMemoryDoctorRepository()


@pytest.fixture
def app(repository):
    """FastAPI app with the Mongo repository swapped for the in-memory one."""
    fastapi_app.dependency_overrides[get_doctor_repository] = lambda: repository
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Create a test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def failing_client():
    fastapi_app.dependency_overrides[get_doctor_repository] = lambda: FailingDoctorRepository()
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def crashing_client():
    # Unhandled errors are re-raised by ServerErrorMiddleware after the 500 is sent
    fastapi_app.dependency_overrides[get_doctor_repository] = lambda: CrashingDoctorRepository()
    yield TestClient(fastapi_app, raise_server_exceptions=False)
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def doctor_payload():
    return {
        "name": "Dr. Asha Rao",
        "specialty": "Cardiology",
        "rating": 4.5,
        "available": True,
        "location": "Bangalore",
    }
