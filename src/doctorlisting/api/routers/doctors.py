"""Doctor listing API endpoints."""

from typing import Optional

from fastapi import APIRouter, Query, status

from ...application.dto.doctor_dto import AddDoctorRequest, ListDoctorsRequest
from ...core.config import get_settings
from ..deps import AddDoctorUseCaseDep, ListDoctorsUseCaseDep
from ..schemas import (
    AddDoctorRequest as AddDoctorRequestSchema,
    DoctorListResponse,
    DoctorSchema,
    ErrorResponse,
    MessageResponse,
)

router = APIRouter(tags=["Doctors"])

# Keeps the Mongo skip ((page - 1) * limit) well inside int64
MAX_PAGE = 1_000_000


@router.post(
    "/add-doctor",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a doctor profile",
    responses={
        201: {"description": "Doctor added"},
        400: {"model": ErrorResponse, "description": "Invalid doctor record"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def add_doctor(
    payload: AddDoctorRequestSchema,
    use_case: AddDoctorUseCaseDep,
):
    """
    Validate and persist a doctor record.

    All five fields are required and `rating` must lie in [0, 5].
    Identical submissions are stored as separate records.
    """
    result = await use_case.execute(
        AddDoctorRequest(
            name=payload.name,
            specialty=payload.specialty,
            rating=payload.rating,
            available=payload.available,
            location=payload.location,
        )
    )
    return MessageResponse(message=result.message)


@router.get(
    "/list-doctor-with-filter",
    response_model=DoctorListResponse,
    status_code=status.HTTP_200_OK,
    summary="List doctors with optional filters",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid pagination parameters"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def list_doctors(
    use_case: ListDoctorsUseCaseDep,
    specialty: Optional[str] = None,
    location: Optional[str] = None,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: Optional[int] = Query(None, ge=1),
):
    """
    List doctors sorted by name.

    Query Parameters:
    - specialty: exact-match filter (optional)
    - location: exact-match filter (optional)
    - page: 1-based page number (default: 1, at most 1000000)
    - limit: page size (default: 10, capped by PAGINATION_MAX_LIMIT)
    """
    settings = get_settings()
    if limit is None:
        limit = settings.pagination.default_limit
    limit = min(limit, settings.pagination.max_limit)

    result = await use_case.execute(
        ListDoctorsRequest(specialty=specialty, location=location, page=page, limit=limit)
    )

    return DoctorListResponse(
        doctors=[DoctorSchema.from_entity(d) for d in result.doctors],
        total=result.total,
    )
