"""
User endpoints.

Only listing is exposed.  There is no authentication, pagination or
filtering: every request returns the full table.
"""

import logging
from typing import List

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from users_api.app.schemas.user import UserRead
from users_api.app.services.user_service import UserService


logger = logging.getLogger(__name__)

router = APIRouter()

DATABASE_ERROR_BODY = {"error": "Database error"}


# Sync route: FastAPI runs the blocking query in its thread pool.
@router.get(
    "",
    response_model=List[UserRead],
    responses={500: {"description": "The database could not be queried"}},
)
def list_users():
    """Return all user records as a JSON array of ``{"id", "name"}``.

    On any database failure the error is logged and the caller receives
    ``500 {"error": "Database error"}`` with no further detail.
    """
    try:
        return UserService.list_users()
    except SQLAlchemyError:
        logger.exception("Failed to list users")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=DATABASE_ERROR_BODY,
        )
