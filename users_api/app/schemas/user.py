"""
Pydantic models for user data.

A user record as exposed by the API has exactly two fields: the
identifier assigned by the database and the display name.  Records
are created and changed outside this service, so there is no create
or update schema.

The types follow what the ``users`` table can hold rather than what a
well‑behaved row usually looks like: the identifier is whatever unique
key the table uses (a serial integer or a text key) and a ``TEXT``
name column may contain NULL.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: Union[int, str] = Field(..., examples=[1])
    name: Optional[str] = Field(None, examples=["Alice"])

    model_config = {
        "from_attributes": True,
    }
