from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from ..schemas.common import ErrorResponse


def fail(request: Request, message: str, status_code: int = 400) -> JSONResponse:
    req_id: Optional[str] = getattr(request.state, "request_id", None)
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, request_id=req_id).model_dump(exclude_none=True),
    )
