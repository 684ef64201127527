"""
MongoDB implementation of DoctorRepository.
"""

from typing import Dict, List

from pymongo.errors import PyMongoError

from doctorlisting.application.ports.repositories.doctor_repo import DoctorRepository
from doctorlisting.core.exceptions import DatabaseError
from doctorlisting.core.structured_logger import get_logger
from doctorlisting.domain.entities.doctor import Doctor

from ..models.doctor_m import DoctorMongo

logger = get_logger("repository")


class MongoDoctorRepository(DoctorRepository):
    """MongoDB implementation of DoctorRepository."""

    async def save(self, doctor: Doctor) -> Doctor:
        """Save a new doctor to MongoDB."""
        doctor_mongo = self._domain_to_mongo(doctor)
        try:
            await doctor_mongo.insert()
        except PyMongoError as e:
            logger.error(f"Failed to insert doctor: {e}")
            raise DatabaseError("Failed to save doctor", {"operation": "insert"}) from e

        return self._mongo_to_domain(doctor_mongo)

    async def find(
        self, filters: Dict[str, str], offset: int = 0, limit: int = 10
    ) -> List[Doctor]:
        """Find doctors matching the filters, sorted by name ascending."""
        try:
            doctors_mongo = (
                await DoctorMongo.find(filters)
                .sort("+name")
                .skip(offset)
                .limit(limit)
                .to_list()
            )
        except PyMongoError as e:
            logger.error(f"Failed to query doctors with filters={filters}: {e}")
            raise DatabaseError("Failed to query doctors", {"filters": filters}) from e

        return [self._mongo_to_domain(doc) for doc in doctors_mongo]

    async def count(self, filters: Dict[str, str]) -> int:
        """Count doctors matching the filters."""
        try:
            return await DoctorMongo.find(filters).count()
        except PyMongoError as e:
            logger.error(f"Failed to count doctors with filters={filters}: {e}")
            raise DatabaseError("Failed to count doctors", {"filters": filters}) from e

    def _domain_to_mongo(self, doctor: Doctor) -> DoctorMongo:
        """Convert domain entity to MongoDB model."""
        return DoctorMongo(
            name=doctor.name,
            specialty=doctor.specialty,
            rating=doctor.rating,
            available=doctor.available,
            location=doctor.location,
            created_at=doctor.created_at,
        )

    def _mongo_to_domain(self, doctor_mongo: DoctorMongo) -> Doctor:
        """Convert MongoDB model to domain entity."""
        return Doctor(
            doctor_id=str(doctor_mongo.id) if doctor_mongo.id else None,
            name=doctor_mongo.name,
            specialty=doctor_mongo.specialty,
            rating=doctor_mongo.rating,
            available=doctor_mongo.available,
            location=doctor_mongo.location,
            created_at=doctor_mongo.created_at,
        )
