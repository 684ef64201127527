"""
MongoDoctorRepository tests against a stubbed Beanie query chain.
"""

from datetime import datetime
from types import SimpleNamespace

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from doctorlisting.adapters.db.mongo.models.doctor_m import DoctorMongo
from doctorlisting.adapters.db.mongo.repositories.doctor_repository import MongoDoctorRepository
from doctorlisting.core.exceptions import DatabaseError
from doctorlisting.domain.entities.doctor import Doctor


class FakeFindMany:
    """Records the chained calls Beanie's FindMany receives."""

    def __init__(self, filters, documents, error=None):
        self.filters = filters
        self.documents = documents
        self.error = error
        self.calls = []

    def sort(self, *args):
        self.calls.append(("sort",) + args)
        return self

    def skip(self, n):
        self.calls.append(("skip", n))
        return self

    def limit(self, n):
        self.calls.append(("limit", n))
        return self

    async def to_list(self):
        if self.error:
            raise self.error
        return list(self.documents)

    async def count(self):
        if self.error:
            raise self.error
        return len(self.documents)


def _document(name, specialty="Cardiology", location="Mumbai", oid=None):
    return SimpleNamespace(
        id=oid or ObjectId(),
        name=name,
        specialty=specialty,
        rating=4.0,
        available=True,
        location=location,
        created_at=datetime(2024, 5, 1, 9, 30),
    )


@pytest.fixture
def queries(monkeypatch):
    """Replace DoctorMongo.find; returns the list of issued queries."""
    issued = []
    state = {"documents": [], "error": None}

    def fake_find(filters):
        query = FakeFindMany(filters, state["documents"], state["error"])
        issued.append(query)
        return query

    monkeypatch.setattr(DoctorMongo, "find", staticmethod(fake_find))
    return issued, state


@pytest.mark.asyncio
async def test_find_sorts_by_name_and_applies_window(queries):
    issued, state = queries
    state["documents"] = [_document("Dr. Arjun Das"), _document("Dr. Bina Shah")]

    doctors = await MongoDoctorRepository().find({"specialty": "Cardiology"}, offset=20, limit=10)

    assert len(issued) == 1
    assert issued[0].filters == {"specialty": "Cardiology"}
    assert issued[0].calls == [("sort", "+name"), ("skip", 20), ("limit", 10)]
    assert [d.name for d in doctors] == ["Dr. Arjun Das", "Dr. Bina Shah"]


@pytest.mark.asyncio
async def test_find_maps_documents_to_entities(queries):
    issued, state = queries
    oid = ObjectId("65f1c0ffee0000000000abcd")
    state["documents"] = [_document("Dr. Zoya Khan", location="Chennai", oid=oid)]

    [doctor] = await MongoDoctorRepository().find({})

    assert isinstance(doctor, Doctor)
    assert doctor.doctor_id == "65f1c0ffee0000000000abcd"
    assert doctor.location == "Chennai"
    assert doctor.rating == 4.0
    assert doctor.available is True
    assert doctor.created_at == datetime(2024, 5, 1, 9, 30)


@pytest.mark.asyncio
async def test_count_uses_filters_without_window(queries):
    issued, state = queries
    state["documents"] = [_document("a"), _document("b"), _document("c")]

    total = await MongoDoctorRepository().count({"location": "Mumbai"})

    assert total == 3
    assert issued[0].filters == {"location": "Mumbai"}
    assert issued[0].calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["find", "count"])
async def test_driver_errors_become_database_errors(queries, operation):
    _, state = queries
    state["error"] = ServerSelectionTimeoutError("no servers")

    repository = MongoDoctorRepository()
    with pytest.raises(DatabaseError) as exc_info:
        await getattr(repository, operation)({"specialty": "Cardiology"})

    assert exc_info.value.error_code == "DATABASE_ERROR"
    assert exc_info.value.details == {"filters": {"specialty": "Cardiology"}}
    assert isinstance(exc_info.value.__cause__, PyMongoError)


class FakeDocument(SimpleNamespace):
    async def insert(self):
        if self.insert_error:
            raise self.insert_error
        self.id = ObjectId("65f1c0ffee0000000000beef")
        return self


def _stub_mapping(monkeypatch, repository, insert_error=None):
    def to_mongo(doctor):
        return FakeDocument(
            id=None,
            insert_error=insert_error,
            name=doctor.name,
            specialty=doctor.specialty,
            rating=doctor.rating,
            available=doctor.available,
            location=doctor.location,
            created_at=doctor.created_at,
        )

    monkeypatch.setattr(repository, "_domain_to_mongo", to_mongo)


@pytest.mark.asyncio
async def test_save_returns_entity_with_assigned_id(monkeypatch):
    repository = MongoDoctorRepository()
    _stub_mapping(monkeypatch, repository)
    doctor = Doctor(name="Dr. Asha Rao", specialty="Cardiology", rating=4.5,
                    available=True, location="Bangalore")

    saved = await repository.save(doctor)

    assert saved.doctor_id == "65f1c0ffee0000000000beef"
    assert saved.name == "Dr. Asha Rao"
    assert saved.created_at == doctor.created_at


@pytest.mark.asyncio
async def test_save_wraps_driver_error(monkeypatch):
    repository = MongoDoctorRepository()
    _stub_mapping(monkeypatch, repository, insert_error=PyMongoError("write failed"))
    doctor = Doctor(name="Dr. Asha Rao", specialty="Cardiology", rating=4.5,
                    available=True, location="Bangalore")

    with pytest.raises(DatabaseError) as exc_info:
        await repository.save(doctor)

    assert exc_info.value.details == {"operation": "insert"}
