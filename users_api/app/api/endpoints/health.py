"""
Liveness check.

The response is fixed and never touches the database, so it answers
as long as the process is serving requests.
"""

from fastapi import APIRouter
from pydantic import BaseModel


router = APIRouter()


class HealthResponse(BaseModel):
    status: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the process is alive."""
    return HealthResponse(status="ok")
