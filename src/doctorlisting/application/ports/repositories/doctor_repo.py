"""
Doctor repository interface for data access abstraction.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from ....domain.entities.doctor import Doctor


class DoctorRepository(ABC):
    """Abstract repository for doctor data access.

    ``filters`` maps field names to values that must match exactly; an
    empty mapping matches every record.
    """

    @abstractmethod
    async def save(self, doctor: Doctor) -> Doctor:
        """Persist a new doctor and return it with its store-assigned ID."""
        pass

    @abstractmethod
    async def find(
        self, filters: Dict[str, str], offset: int = 0, limit: int = 10
    ) -> List[Doctor]:
        """Find doctors matching the filters, sorted by name ascending."""
        pass

    @abstractmethod
    async def count(self, filters: Dict[str, str]) -> int:
        """Count doctors matching the filters, ignoring pagination."""
        pass
