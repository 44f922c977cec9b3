"""
Data access for users.

The ``UserService`` reads user records from the ``users`` table through
the shared connection pool.  The service only ever reads; records are
created, changed and deleted by other systems.
"""

import logging
from typing import List

from sqlalchemy import text

from ..core.db import get_connection
from ..schemas.user import UserRead


logger = logging.getLogger(__name__)

# No ORDER BY: rows come back in whatever order the database chooses.
LIST_USERS_SQL = text("SELECT id, name FROM users")


class UserService:
    """Read‑only operations on user records."""

    @classmethod
    def list_users(cls) -> List[UserRead]:
        """Return every user record in database order.

        A connection is checked out of the pool for the single query and
        returned when the block exits, including when the query fails.
        Database errors (``sqlalchemy.exc.SQLAlchemyError``) propagate to
        the caller unchanged.
        """
        with get_connection() as conn:
            rows = conn.execute(LIST_USERS_SQL).mappings().all()
        logger.debug("Fetched %d user records", len(rows))
        return [UserRead(id=row["id"], name=row["name"]) for row in rows]
