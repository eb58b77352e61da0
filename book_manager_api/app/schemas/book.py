"""
Pydantic schema for book records.

A book is identified by a client‑supplied integer ``id``; the
remaining fields are free‑form.  Missing strings are ``None``;
missing or ``null`` integers are ``0`` (a browser form sends ``null``
for a year it could not turn into a number).  Numeric strings such as
``"1"`` are coerced to integers.  Integers are limited to the signed
32‑bit range of the ``book_table`` columns.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class Book(BaseModel):
    """A complete book record, used for request and response bodies.

    On ``PUT /bookapi/update/{id}`` the ``id`` carried in the body is
    ignored; the path parameter identifies the record.
    """

    id: int = Field(0, ge=INT32_MIN, le=INT32_MAX, example=1)
    title: Optional[str] = Field(None, example="Dune")
    author: Optional[str] = Field(None, example="Frank Herbert")
    publisher: Optional[str] = Field(None, example="Chilton Books")
    year: int = Field(0, ge=INT32_MIN, le=INT32_MAX, example=1965)
    genre: Optional[str] = Field(None, example="Science fiction")

    model_config = {
        "from_attributes": True,
    }

    @field_validator("id", "year", mode="before")
    @classmethod
    def null_to_zero(cls, v):
        if v is None:
            return 0
        return v
