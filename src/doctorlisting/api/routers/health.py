"""
Health check endpoints.
"""

from fastapi import APIRouter

from ..schemas.common import MessageResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=MessageResponse)
async def health_check():
    """
    Health check endpoint.

    Always reports the service as running; no dependencies are inspected.
    """
    return MessageResponse(message="Server is running")
